"""Playback state machine: idle, playing or paused."""

import random
from typing import Optional, Tuple

from .catalog import VideoCatalog
from .errors import (
    AlreadyPausedError,
    NoVideosAvailableError,
    NothingPlayingError,
    NotPausedError,
    VideoFlaggedError,
    VideoNotFoundError,
)
from .flags import FlagRegistry
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)


class PlaybackSession:
    """Tracks the active video and whether it is paused.

    paused is only ever True while a video is active, and a flagged video
    never stays active past the next query.
    """

    def __init__(
        self,
        catalog: VideoCatalog,
        flags: FlagRegistry,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize session.

        Args:
            catalog: Catalog to look videos up in
            flags: Registry consulted before playing
            rng: Random source for play_random
        """
        self.catalog = catalog
        self.flags = flags
        self.rng = rng or random.Random()
        self._current: Optional[Video] = None
        self._paused = False

    @property
    def paused(self) -> bool:
        return self._paused

    def is_active(self, video_id: str) -> bool:
        """Whether the given video is the active one, playing or paused."""
        return self._current is not None and self._current.video_id == video_id

    def _invalidate_if_flagged(self) -> None:
        if self._current is not None and self._paused and self.flags.is_flagged(self._current.video_id):
            logger.debug("Dropping paused flagged video %s", self._current.video_id)
            self._reset()

    def _reset(self) -> None:
        self._current = None
        self._paused = False

    def play(self, video_id: str) -> Tuple[Video, Optional[Video]]:
        """Start playing a video, stopping the active one first.

        Args:
            video_id: ID of the video to play

        Returns:
            Tuple of (video now playing, video that was stopped or None)

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            VideoFlaggedError: If the video is flagged
        """
        video = self.catalog.get_video(video_id)
        if video is None:
            raise VideoNotFoundError()
        reason = self.flags.reason_for(video_id)
        if reason is not None:
            raise VideoFlaggedError(reason)

        stopped = self._current
        self._current = video
        self._paused = False
        logger.debug("Playing %s", video_id)
        return video, stopped

    def play_random(self) -> Tuple[Video, Optional[Video]]:
        """Play a video chosen uniformly among the non-flagged ones.

        Raises:
            NoVideosAvailableError: If every video is flagged or the catalog is empty
        """
        candidates = [
            video for video in self.catalog.get_videos() if not self.flags.is_flagged(video.video_id)
        ]
        if not candidates:
            raise NoVideosAvailableError()
        return self.play(self.rng.choice(candidates).video_id)

    def stop(self) -> Video:
        """Stop the active video.

        Returns:
            The stopped video

        Raises:
            NothingPlayingError: If no video is active
        """
        if self._current is None:
            raise NothingPlayingError()
        stopped = self._current
        self._reset()
        logger.debug("Stopped %s", stopped.video_id)
        return stopped

    def pause(self) -> Video:
        """Pause the active video.

        Raises:
            NothingPlayingError: If no video is active
            AlreadyPausedError: If the active video is already paused
        """
        if self._current is None:
            raise NothingPlayingError()
        if self._paused:
            raise AlreadyPausedError(self._current.title)
        self._paused = True
        logger.debug("Paused %s", self._current.video_id)
        return self._current

    def resume(self) -> Video:
        """Continue the paused video.

        Raises:
            NothingPlayingError: If no video is active, or the paused video got flagged
            NotPausedError: If the active video is not paused
        """
        self._invalidate_if_flagged()
        if self._current is None:
            raise NothingPlayingError()
        if not self._paused:
            raise NotPausedError()
        self._paused = False
        logger.debug("Continued %s", self._current.video_id)
        return self._current

    def current(self) -> Optional[Tuple[Video, bool]]:
        """Get the active video and its paused flag, or None when idle."""
        self._invalidate_if_flagged()
        if self._current is None:
            return None
        return self._current, self._paused
