"""Turns text lines into commands and runs them."""

from typing import Dict, List, Tuple, Type

from ..errors import UnknownCommandError, VideoPlayerError, log_error
from ..logging_config import get_logger
from ..models import CommandResult
from ..player import VideoPlayer
from .base import PlayerCommand
from .library import (
    AllowVideoCommand,
    FlagVideoCommand,
    NumberOfVideosCommand,
    SearchVideosCommand,
    SearchVideosWithTagCommand,
    ShowAllVideosCommand,
)
from .playback import (
    ContinueCommand,
    PauseCommand,
    PlayCommand,
    PlayRandomCommand,
    ShowPlayingCommand,
    StopCommand,
)
from .playlist import (
    AddToPlaylistCommand,
    ClearPlaylistCommand,
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    RemoveFromPlaylistCommand,
    ShowAllPlaylistsCommand,
    ShowPlaylistCommand,
)

logger = get_logger(__name__)


class HelpCommand(PlayerCommand):
    name = "HELP"
    usage = "HELP"
    help = "Displays help."

    def _run(self) -> CommandResult:
        lines = ["Available commands:"]
        for command_class in COMMANDS.values():
            lines.append(f"    {command_class.usage} - {command_class.help}")
        lines.append("    EXIT - Terminates the program execution.")
        return CommandResult(lines)


COMMANDS: Dict[str, Type[PlayerCommand]] = {
    command_class.name: command_class
    for command_class in (
        NumberOfVideosCommand,
        ShowAllVideosCommand,
        PlayCommand,
        PlayRandomCommand,
        StopCommand,
        PauseCommand,
        ContinueCommand,
        ShowPlayingCommand,
        CreatePlaylistCommand,
        AddToPlaylistCommand,
        RemoveFromPlaylistCommand,
        ClearPlaylistCommand,
        DeletePlaylistCommand,
        ShowPlaylistCommand,
        ShowAllPlaylistsCommand,
        SearchVideosCommand,
        SearchVideosWithTagCommand,
        FlagVideoCommand,
        AllowVideoCommand,
        HelpCommand,
    )
}


def split_command(line: str) -> Tuple[str, str]:
    """Split a line into an upper-cased command word and the untouched rest.

    Args:
        line: Raw command line

    Returns:
        Tuple of (command word, rest of the line without outer whitespace)
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    rest = parts[1].strip() if len(parts) > 1 else ""
    return parts[0].upper(), rest


def parse_command(line: str) -> Tuple[str, List[str]]:
    """Split a line into an upper-cased command word and its arguments.

    Args:
        line: Raw command line

    Returns:
        Tuple of (command word, arguments); the word is empty for a blank line
    """
    name, rest = split_command(line)
    return name, rest.split()


def create_command(player: VideoPlayer, line: str) -> PlayerCommand:
    """Build the command for a line.

    Raises:
        UnknownCommandError: If no command has that name
    """
    name, rest = split_command(line)
    command_class = COMMANDS.get(name)
    if command_class is None:
        raise UnknownCommandError()
    return command_class(player, rest.split(), text=rest)


def dispatch(player: VideoPlayer, line: str) -> CommandResult:
    """Run one text command.

    Unknown commands and bad arguments produce a single hint line and leave
    the player untouched.

    Args:
        player: Player to run the command against
        line: Raw command line

    Returns:
        CommandResult of the command
    """
    if not line.strip():
        return CommandResult()
    try:
        return create_command(player, line).run()
    except VideoPlayerError as e:
        return CommandResult.failure(e, log_error(e))
