"""Error types for video library operations.

Every failure a command can report is a subclass of VideoPlayerError. The
message of each error is the user-facing reason; callers add their own
context (for example "Cannot play video") with format_error.
"""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def format_error(error: Exception, context: Optional[str] = None) -> str:
    """Build the user-facing line for an error.

    Args:
        error: The error to describe
        context: Optional context about which operation failed

    Returns:
        "context: error" when context is given, otherwise the error message
    """
    if context:
        return f"{context}: {str(error)}"
    return str(error)


def log_error(error: Exception, context: Optional[str] = None) -> str:
    """Log an error at debug level and return its user-facing line.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred

    Returns:
        The formatted error line
    """
    message = format_error(error, context)
    logger.debug("%s (%s)", message, type(error).__name__)
    return message


class VideoPlayerError(Exception):
    """Base class for video library errors."""

    message = "Operation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class CatalogError(VideoPlayerError):
    """Error raised when the video catalog cannot be loaded."""

    message = "Video catalog could not be loaded"


class VideoNotFoundError(VideoPlayerError):
    """Error raised when a video id is not in the catalog."""

    message = "Video does not exist"


class VideoFlaggedError(VideoPlayerError):
    """Error raised when an operation targets a flagged video."""

    def __init__(self, reason: str):
        """Initialize error.

        Args:
            reason: The reason the video was flagged
        """
        self.reason = reason
        super().__init__(f"Video is currently flagged (reason: {reason})")


class NothingPlayingError(VideoPlayerError):
    """Error raised when no video is active."""

    message = "No video is currently playing"


class AlreadyPausedError(VideoPlayerError):
    """Error raised when pausing a video that is already paused."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Video already paused: {title}")


class NotPausedError(VideoPlayerError):
    """Error raised when continuing a video that is not paused."""

    message = "Video is not paused"


class NoVideosAvailableError(VideoPlayerError):
    """Error raised when there is no playable video to pick at random."""

    message = "No videos available"


class InvalidPlaylistNameError(VideoPlayerError):
    """Error raised when a playlist name contains whitespace."""

    message = "Playlist name cannot contain whitespace"


class PlaylistExistsError(VideoPlayerError):
    """Error raised when a playlist name is already taken (ignoring case)."""

    message = "A playlist with the same name already exists"


class PlaylistNotFoundError(VideoPlayerError):
    """Error raised when a playlist is not found."""

    message = "Playlist does not exist"


class VideoAlreadyInPlaylistError(VideoPlayerError):
    """Error raised when a video is added twice to a playlist."""

    message = "Video already added"


class VideoNotInPlaylistError(VideoPlayerError):
    """Error raised when removing a video a playlist does not contain."""

    message = "Video is not in playlist"


class AlreadyFlaggedError(VideoPlayerError):
    """Error raised when flagging a video twice."""

    message = "Video is already flagged"


class NotFlaggedError(VideoPlayerError):
    """Error raised when removing a flag that does not exist."""

    message = "Video is not flagged"


class UnknownCommandError(VideoPlayerError):
    """Error raised for a command word nobody handles."""

    message = "Please enter a valid command, type HELP for a list of available commands."


class InvalidArgumentsError(VideoPlayerError):
    """Error raised when a command gets the wrong number of arguments."""

    def __init__(self, usage: str):
        """Initialize error.

        Args:
            usage: Usage string of the command
        """
        self.usage = usage
        super().__init__(f"Invalid arguments, usage: {usage}")
