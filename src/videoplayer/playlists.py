"""Playlist storage with case-insensitive names."""

from typing import Dict, List, Optional

from .errors import (
    InvalidPlaylistNameError,
    PlaylistExistsError,
    PlaylistNotFoundError,
    VideoAlreadyInPlaylistError,
    VideoNotInPlaylistError,
)
from .logging_config import get_logger
from .models import Playlist

logger = get_logger(__name__)


class PlaylistStore:
    """Owns every playlist.

    Playlists are keyed by their lower-cased name while each Playlist keeps
    the name exactly as it was created.
    """

    def __init__(self) -> None:
        self._playlists: Dict[str, Playlist] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def create(self, name: str) -> Playlist:
        """Create an empty playlist.

        Args:
            name: Playlist name, must not contain whitespace

        Returns:
            The new playlist

        Raises:
            InvalidPlaylistNameError: If the name contains whitespace
            PlaylistExistsError: If a playlist with the same name exists, ignoring case
        """
        if not name or any(char.isspace() for char in name):
            raise InvalidPlaylistNameError()
        key = self._key(name)
        if key in self._playlists:
            raise PlaylistExistsError()

        playlist = Playlist(name)
        self._playlists[key] = playlist
        logger.debug("Created playlist %s", name)
        return playlist

    def resolve(self, name: str) -> Optional[str]:
        """Get the stored name of a playlist, or None if there is none."""
        playlist = self._playlists.get(self._key(name))
        return playlist.name if playlist else None

    def get(self, name: str) -> Playlist:
        """Get a playlist by name, ignoring case.

        Raises:
            PlaylistNotFoundError: If no such playlist exists
        """
        playlist = self._playlists.get(self._key(name))
        if playlist is None:
            raise PlaylistNotFoundError()
        return playlist

    def add_video(self, name: str, video_id: str) -> None:
        """Append a video to a playlist.

        Raises:
            PlaylistNotFoundError: If no such playlist exists
            VideoAlreadyInPlaylistError: If the video is already in the playlist
        """
        playlist = self.get(name)
        if video_id in playlist:
            raise VideoAlreadyInPlaylistError()
        playlist.video_ids.append(video_id)
        logger.debug("Added %s to playlist %s", video_id, playlist.name)

    def remove_video(self, name: str, video_id: str) -> None:
        """Remove a video from a playlist.

        Raises:
            PlaylistNotFoundError: If no such playlist exists
            VideoNotInPlaylistError: If the playlist does not contain the video
        """
        playlist = self.get(name)
        if video_id not in playlist:
            raise VideoNotInPlaylistError()
        playlist.video_ids.remove(video_id)
        logger.debug("Removed %s from playlist %s", video_id, playlist.name)

    def clear(self, name: str) -> None:
        """Remove every video from a playlist."""
        playlist = self.get(name)
        playlist.video_ids.clear()
        logger.debug("Cleared playlist %s", playlist.name)

    def delete(self, name: str) -> None:
        """Delete a playlist."""
        playlist = self.get(name)
        del self._playlists[self._key(playlist.name)]
        logger.debug("Deleted playlist %s", playlist.name)

    def show(self, name: str) -> List[str]:
        """Get the video IDs of a playlist, in insertion order."""
        return list(self.get(name).video_ids)

    def names(self) -> List[str]:
        """Get the stored names of all playlists, sorted ignoring case."""
        return sorted((p.name for p in self._playlists.values()), key=lambda n: (n.lower(), n))

    def __len__(self) -> int:
        return len(self._playlists)
