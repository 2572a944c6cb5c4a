"""Library, search and flagging commands."""

from ..models import CommandResult
from .base import PlayerCommand


class NumberOfVideosCommand(PlayerCommand):
    name = "NUMBER_OF_VIDEOS"
    usage = "NUMBER_OF_VIDEOS"
    help = "Show how many videos are in the library."

    def _run(self) -> CommandResult:
        return self.player.number_of_videos()


class ShowAllVideosCommand(PlayerCommand):
    name = "SHOW_ALL_VIDEOS"
    usage = "SHOW_ALL_VIDEOS"
    help = "List all videos."

    def _run(self) -> CommandResult:
        return self.player.show_all_videos()


class SearchVideosCommand(PlayerCommand):
    """Search video titles.

    The search term is the rest of the line, spaces included.
    """

    name = "SEARCH_VIDEOS"
    usage = "SEARCH_VIDEOS <search_term>"
    help = "Display all the videos whose titles contain the search_term."
    min_args = 1
    max_args = None

    def _run(self) -> CommandResult:
        return self.player.search_videos(self.text)


class SearchVideosWithTagCommand(PlayerCommand):
    name = "SEARCH_VIDEOS_WITH_TAG"
    usage = "SEARCH_VIDEOS_WITH_TAG <tag_name>"
    help = "Display all videos whose tags contains the provided tag."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.search_videos_with_tag(self.args[0])


class FlagVideoCommand(PlayerCommand):
    name = "FLAG_VIDEO"
    usage = "FLAG_VIDEO <video_id> [flag_reason]"
    help = "Mark a video as flagged, with an optional reason."
    min_args = 1
    max_args = None

    def _run(self) -> CommandResult:
        parts = self.text.split(None, 1)
        reason = parts[1] if len(parts) > 1 else None
        return self.player.flag_video(self.args[0], reason)


class AllowVideoCommand(PlayerCommand):
    name = "ALLOW_VIDEO"
    usage = "ALLOW_VIDEO <video_id>"
    help = "Remove a flag from a video."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.allow_video(self.args[0])
