"""Value types shared by the video library components."""

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import VideoPlayerError


class Video:
    """A video from the catalog. Immutable once loaded."""

    __slots__ = ("_video_id", "_title", "_tags")

    def __init__(self, video_id: str, title: str, tags: Iterable[str] = ()) -> None:
        """Initialize video.

        Args:
            video_id: Unique, case-sensitive video ID
            title: Video title
            tags: Ordered tags, each starting with the tag marker
        """
        self._video_id = video_id
        self._title = title
        self._tags: Tuple[str, ...] = tuple(tags)

    @property
    def video_id(self) -> str:
        return self._video_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    def render(self) -> str:
        """Render the video as "title (id) [tag tag]"."""
        return f"{self._title} ({self._video_id}) [{' '.join(self._tags)}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Video):
            return NotImplemented
        return (self._video_id, self._title, self._tags) == (
            other._video_id,
            other._title,
            other._tags,
        )

    def __hash__(self) -> int:
        return hash(self._video_id)

    def __repr__(self) -> str:
        return f"Video(video_id={self._video_id!r}, title={self._title!r})"


class Playlist:
    """A named, ordered list of unique video IDs."""

    def __init__(self, name: str) -> None:
        """Initialize playlist.

        Args:
            name: Playlist name, stored with its original case
        """
        self.name = name
        self.video_ids: List[str] = []

    def __contains__(self, video_id: str) -> bool:
        return video_id in self.video_ids

    def __len__(self) -> int:
        return len(self.video_ids)


class CommandResult:
    """Outcome of a single command.

    A result either succeeds (error is None) or carries exactly one error
    describing why nothing, or only part of the command, happened.
    """

    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        error: Optional[VideoPlayerError] = None,
        matches: Optional[Sequence[Video]] = None,
    ) -> None:
        """Initialize result.

        Args:
            lines: Human readable output lines, in order
            error: The failure, if the command failed
            matches: Videos offered for a follow-up selection (search only)
        """
        self.lines: List[str] = list(lines or [])
        self.error = error
        self.matches: List[Video] = list(matches or [])

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: VideoPlayerError, line: str) -> "CommandResult":
        """Build a failed result with a single output line."""
        return cls(lines=[line], error=error)

    def extend(self, other: "CommandResult") -> "CommandResult":
        """Append another result's lines, keeping its error and matches."""
        self.lines.extend(other.lines)
        if other.error is not None:
            self.error = other.error
        if other.matches:
            self.matches = list(other.matches)
        return self

    def __repr__(self) -> str:
        return f"CommandResult(ok={self.ok}, lines={self.lines!r})"
