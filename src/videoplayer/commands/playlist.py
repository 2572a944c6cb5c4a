"""Playlist commands."""

from ..models import CommandResult
from .base import PlayerCommand


class CreatePlaylistCommand(PlayerCommand):
    """Create a playlist.

    The whole rest of the line is the name, so a name containing spaces
    reaches the store and is rejected there.
    """

    name = "CREATE_PLAYLIST"
    usage = "CREATE_PLAYLIST <playlist_name>"
    help = "Create a new (empty) playlist with the provided name."
    min_args = 1
    max_args = None

    def _run(self) -> CommandResult:
        return self.player.create_playlist(self.text)


class AddToPlaylistCommand(PlayerCommand):
    name = "ADD_TO_PLAYLIST"
    usage = "ADD_TO_PLAYLIST <playlist_name> <video_id>"
    help = "Add the specified video to a playlist."
    min_args = max_args = 2

    def _run(self) -> CommandResult:
        return self.player.add_to_playlist(self.args[0], self.args[1])


class RemoveFromPlaylistCommand(PlayerCommand):
    name = "REMOVE_FROM_PLAYLIST"
    usage = "REMOVE_FROM_PLAYLIST <playlist_name> <video_id>"
    help = "Remove the specified video from a playlist."
    min_args = max_args = 2

    def _run(self) -> CommandResult:
        return self.player.remove_from_playlist(self.args[0], self.args[1])


class ClearPlaylistCommand(PlayerCommand):
    name = "CLEAR_PLAYLIST"
    usage = "CLEAR_PLAYLIST <playlist_name>"
    help = "Remove all videos from a playlist."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.clear_playlist(self.args[0])


class DeletePlaylistCommand(PlayerCommand):
    name = "DELETE_PLAYLIST"
    usage = "DELETE_PLAYLIST <playlist_name>"
    help = "Delete a playlist."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.delete_playlist(self.args[0])


class ShowPlaylistCommand(PlayerCommand):
    name = "SHOW_PLAYLIST"
    usage = "SHOW_PLAYLIST <playlist_name>"
    help = "List all videos in a playlist."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.show_playlist(self.args[0])


class ShowAllPlaylistsCommand(PlayerCommand):
    name = "SHOW_ALL_PLAYLISTS"
    usage = "SHOW_ALL_PLAYLISTS"
    help = "Display all the available playlists."

    def _run(self) -> CommandResult:
        return self.player.show_all_playlists()
