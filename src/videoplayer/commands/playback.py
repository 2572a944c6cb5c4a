"""Playback commands."""

from ..models import CommandResult
from .base import PlayerCommand


class PlayCommand(PlayerCommand):
    name = "PLAY"
    usage = "PLAY <video_id>"
    help = "Play the specified video."
    min_args = max_args = 1

    def _run(self) -> CommandResult:
        return self.player.play_video(self.args[0])


class StopCommand(PlayerCommand):
    name = "STOP"
    usage = "STOP"
    help = "Stop the current video."

    def _run(self) -> CommandResult:
        return self.player.stop_video()


class PlayRandomCommand(PlayerCommand):
    name = "PLAY_RANDOM"
    usage = "PLAY_RANDOM"
    help = "Play a random video."

    def _run(self) -> CommandResult:
        return self.player.play_random_video()


class PauseCommand(PlayerCommand):
    name = "PAUSE"
    usage = "PAUSE"
    help = "Pause the current video."

    def _run(self) -> CommandResult:
        return self.player.pause_video()


class ContinueCommand(PlayerCommand):
    name = "CONTINUE"
    usage = "CONTINUE"
    help = "Resume the current paused video."

    def _run(self) -> CommandResult:
        return self.player.continue_video()


class ShowPlayingCommand(PlayerCommand):
    name = "SHOW_PLAYING"
    usage = "SHOW_PLAYING"
    help = "Show the video that is currently playing."

    def _run(self) -> CommandResult:
        return self.player.show_playing()
