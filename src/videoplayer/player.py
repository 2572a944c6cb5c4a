"""Command controller for the video library."""

import random
from typing import List, Optional, Sequence

from .catalog import VideoCatalog
from .errors import (
    AlreadyPausedError,
    NothingPlayingError,
    PlaylistNotFoundError,
    VideoFlaggedError,
    VideoNotFoundError,
    VideoPlayerError,
    log_error,
)
from .flags import FlagRegistry
from .logging_config import get_logger
from .models import CommandResult, Video
from .playback import PlaybackSession
from .playlists import PlaylistStore
from .search import search_by_tag, search_by_title, select_result

logger = get_logger(__name__)

SEARCH_PROMPT = [
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
]


def _failure(error: VideoPlayerError, context: Optional[str] = None) -> CommandResult:
    return CommandResult.failure(error, log_error(error, context))


class VideoPlayer:
    """Runs video library commands against one set of state.

    Each instance owns its playback session, playlists and flags, so
    independent players never share state. Every method returns a
    CommandResult; expected failures are never raised.
    """

    def __init__(self, catalog: VideoCatalog, rng: Optional[random.Random] = None) -> None:
        """Initialize player.

        Args:
            catalog: Read-only video catalog
            rng: Random source for play_random_video
        """
        self.catalog = catalog
        self.flags = FlagRegistry(catalog)
        self.playlists = PlaylistStore()
        self.session = PlaybackSession(catalog, self.flags, rng=rng)

    def _render_with_flag(self, video: Video) -> str:
        reason = self.flags.reason_for(video.video_id)
        if reason is None:
            return video.render()
        return f"{video.render()} - FLAGGED (reason: {reason})"

    def _require_video(self, video_id: str) -> Video:
        video = self.catalog.get_video(video_id)
        if video is None:
            raise VideoNotFoundError()
        return video

    # Library

    def number_of_videos(self) -> CommandResult:
        return CommandResult([f"{len(self.catalog)} videos in the library"])

    def show_all_videos(self) -> CommandResult:
        """List every video sorted by title, flagged ones included."""
        videos = sorted(self.catalog.get_videos(), key=lambda v: v.title)
        lines = ["Here's a list of all available videos:"]
        lines.extend(self._render_with_flag(video) for video in videos)
        return CommandResult(lines)

    # Playback

    def play_video(self, video_id: str) -> CommandResult:
        """Play a video, stopping the current one first."""
        try:
            video, stopped = self.session.play(video_id)
        except VideoPlayerError as e:
            return _failure(e, "Cannot play video")
        return CommandResult(self._play_lines(video, stopped))

    @staticmethod
    def _play_lines(video: Video, stopped: Optional[Video]) -> List[str]:
        lines = []
        if stopped is not None:
            lines.append(f"Stopping video: {stopped.title}")
        lines.append(f"Playing video: {video.title}")
        return lines

    def stop_video(self) -> CommandResult:
        try:
            stopped = self.session.stop()
        except VideoPlayerError as e:
            return _failure(e, "Cannot stop video")
        return CommandResult([f"Stopping video: {stopped.title}"])

    def play_random_video(self) -> CommandResult:
        try:
            video, stopped = self.session.play_random()
        except VideoPlayerError as e:
            return _failure(e)
        return CommandResult(self._play_lines(video, stopped))

    def pause_video(self) -> CommandResult:
        try:
            video = self.session.pause()
        except VideoPlayerError as e:
            context = None if isinstance(e, AlreadyPausedError) else "Cannot pause video"
            return _failure(e, context)
        return CommandResult([f"Pausing video: {video.title}"])

    def continue_video(self) -> CommandResult:
        try:
            video = self.session.resume()
        except VideoPlayerError as e:
            return _failure(e, "Cannot continue video")
        return CommandResult([f"Continuing video: {video.title}"])

    def show_playing(self) -> CommandResult:
        current = self.session.current()
        if current is None:
            return _failure(NothingPlayingError())
        video, paused = current
        suffix = " - PAUSED" if paused else ""
        return CommandResult([f"Currently playing: {video.render()}{suffix}"])

    # Playlists

    def create_playlist(self, playlist_name: str) -> CommandResult:
        try:
            self.playlists.create(playlist_name)
        except VideoPlayerError as e:
            return _failure(e, "Cannot create playlist")
        return CommandResult([f"Successfully created new playlist: {playlist_name}"])

    def add_to_playlist(self, playlist_name: str, video_id: str) -> CommandResult:
        """Add a video to a playlist.

        Checks run in a fixed order: playlist exists, video exists, video
        not flagged, video not already in the playlist.
        """
        try:
            self.playlists.get(playlist_name)
            video = self._require_video(video_id)
            reason = self.flags.reason_for(video_id)
            if reason is not None:
                raise VideoFlaggedError(reason)
            self.playlists.add_video(playlist_name, video_id)
        except VideoPlayerError as e:
            return _failure(e, f"Cannot add video to {playlist_name}")
        return CommandResult([f"Added video to {playlist_name}: {video.title}"])

    def show_all_playlists(self) -> CommandResult:
        names = self.playlists.names()
        if not names:
            return CommandResult(["No playlists exist yet"])
        return CommandResult(["Showing all playlists:"] + names)

    def show_playlist(self, playlist_name: str) -> CommandResult:
        try:
            video_ids = self.playlists.show(playlist_name)
        except VideoPlayerError as e:
            return _failure(e, f"Cannot show playlist {playlist_name}")

        lines = [f"Showing playlist: {playlist_name}"]
        if not video_ids:
            lines.append("No videos here yet")
            return CommandResult(lines)
        for video_id in video_ids:
            video = self.catalog.get_video(video_id)
            # Playlists only ever hold catalog IDs; keep the raw ID otherwise
            lines.append(self._render_with_flag(video) if video else video_id)
        return CommandResult(lines)

    def remove_from_playlist(self, playlist_name: str, video_id: str) -> CommandResult:
        """Remove a video from a playlist.

        Checks run in a fixed order: playlist exists, video exists, video in
        the playlist.
        """
        try:
            self.playlists.get(playlist_name)
            video = self._require_video(video_id)
            self.playlists.remove_video(playlist_name, video_id)
        except VideoPlayerError as e:
            return _failure(e, f"Cannot remove video from {playlist_name}")
        return CommandResult([f"Removed video from {playlist_name}: {video.title}"])

    def clear_playlist(self, playlist_name: str) -> CommandResult:
        try:
            self.playlists.clear(playlist_name)
        except PlaylistNotFoundError as e:
            return _failure(e, f"Cannot clear playlist {playlist_name}")
        return CommandResult([f"Successfully removed all videos from {playlist_name}"])

    def delete_playlist(self, playlist_name: str) -> CommandResult:
        try:
            self.playlists.delete(playlist_name)
        except PlaylistNotFoundError as e:
            return _failure(e, f"Cannot delete playlist {playlist_name}")
        return CommandResult([f"Deleted playlist: {playlist_name}"])

    # Search

    def _search_result(self, query: str, matches: List[Video]) -> CommandResult:
        if not matches:
            return CommandResult([f"No search results for {query}"])
        lines = [f"Here are the results for {query}:"]
        lines.extend(f"{number}) {video.render()}" for number, video in enumerate(matches, 1))
        lines.extend(SEARCH_PROMPT)
        return CommandResult(lines, matches=matches)

    def search_videos(self, search_term: str) -> CommandResult:
        """Search titles; the result's matches feed play_search_result."""
        return self._search_result(search_term, search_by_title(self.catalog, self.flags, search_term))

    def search_videos_with_tag(self, video_tag: str) -> CommandResult:
        """Search tags; the result's matches feed play_search_result."""
        return self._search_result(video_tag, search_by_tag(self.catalog, self.flags, video_tag))

    def play_search_result(self, matches: Sequence[Video], answer: Optional[str]) -> CommandResult:
        """Play the search result the user picked by number.

        Anything other than a number within the results is a "no" and
        yields an empty, successful result.
        """
        video = select_result(matches, answer)
        if video is None:
            logger.debug("Search selection %r declined", answer)
            return CommandResult()
        return self.play_video(video.video_id)

    # Flags

    def flag_video(self, video_id: str, flag_reason: Optional[str] = None) -> CommandResult:
        """Flag a video; the active video is stopped in the same command."""
        try:
            reason = self.flags.flag(video_id, flag_reason)
        except VideoPlayerError as e:
            return _failure(e, "Cannot flag video")

        result = CommandResult()
        if self.session.is_active(video_id):
            result.extend(self.stop_video())
        video = self.catalog.get_video(video_id)
        result.lines.append(f"Successfully flagged video: {video.title} (reason: {reason})")
        return result

    def allow_video(self, video_id: str) -> CommandResult:
        try:
            self.flags.unflag(video_id)
        except VideoPlayerError as e:
            return _failure(e, "Cannot remove flag from video")
        video = self.catalog.get_video(video_id)
        return CommandResult([f"Successfully removed flag from video: {video.title}"])
