"""Registry of flagged videos."""

from typing import Dict, Optional

from .catalog import VideoCatalog
from .config import DEFAULT_FLAG_REASON
from .errors import AlreadyFlaggedError, NotFlaggedError, VideoNotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)


class FlagRegistry:
    """Maps flagged video IDs to the reason they were flagged."""

    def __init__(self, catalog: VideoCatalog) -> None:
        """Initialize registry.

        Args:
            catalog: Catalog used to check that flagged videos exist
        """
        self.catalog = catalog
        self._reasons: Dict[str, str] = {}

    def flag(self, video_id: str, reason: Optional[str] = None) -> str:
        """Flag a video.

        Args:
            video_id: ID of the video to flag
            reason: Why the video is flagged; blank means the default reason

        Returns:
            The recorded reason

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            AlreadyFlaggedError: If the video is already flagged
        """
        if video_id not in self.catalog:
            raise VideoNotFoundError()
        if video_id in self._reasons:
            raise AlreadyFlaggedError()

        reason = reason.strip() if reason and reason.strip() else DEFAULT_FLAG_REASON
        self._reasons[video_id] = reason
        logger.debug("Flagged %s (reason: %s)", video_id, reason)
        return reason

    def unflag(self, video_id: str) -> None:
        """Remove the flag from a video.

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            NotFlaggedError: If the video is not flagged
        """
        if video_id not in self.catalog:
            raise VideoNotFoundError()
        if video_id not in self._reasons:
            raise NotFlaggedError()
        del self._reasons[video_id]
        logger.debug("Removed flag from %s", video_id)

    def reason_for(self, video_id: str) -> Optional[str]:
        return self._reasons.get(video_id)

    def is_flagged(self, video_id: str) -> bool:
        return video_id in self._reasons

    def __len__(self) -> int:
        return len(self._reasons)
