"""Tests for text commands and dispatch."""

from unittest.mock import MagicMock

import pytest

from src.videoplayer.commands import COMMANDS, PlayerCommand, create_command, dispatch, parse_command
from src.videoplayer.commands.dispatch import split_command
from src.videoplayer.commands.library import FlagVideoCommand, SearchVideosCommand
from src.videoplayer.commands.playback import PlayCommand
from src.videoplayer.errors import (
    InvalidArgumentsError,
    InvalidPlaylistNameError,
    UnknownCommandError,
)
from src.videoplayer.models import CommandResult


def test_player_command_init(player):
    """Test PlayerCommand initialization."""
    cmd = PlayerCommand(player, ["a"])
    assert cmd.player is player
    assert cmd.args == ["a"]
    assert not cmd._validated


def test_player_command_validate_no_player():
    """Test validation without a player."""
    cmd = PlayerCommand(None)
    with pytest.raises(ValueError, match="Video player is required"):
        cmd.validate()


def test_player_command_run_validates(player):
    """Test run validates before running."""
    cmd = PlayerCommand(player)
    result = cmd.run()
    assert result.ok
    assert cmd._validated


def test_player_command_run_uses_run_impl(player):
    """Test run returns the _run result."""
    cmd = PlayerCommand(player)
    expected = CommandResult(["done"])
    cmd._run = MagicMock(return_value=expected)
    assert cmd.run() is expected


def test_arity_checked(player):
    """Test wrong argument counts raise with the usage string."""
    with pytest.raises(InvalidArgumentsError, match="PLAY <video_id>"):
        PlayCommand(player, []).run()
    with pytest.raises(InvalidArgumentsError):
        PlayCommand(player, ["v1", "v2"]).run()
    assert player.session.current() is None


def test_parse_command():
    """Test splitting a line into command word and arguments."""
    assert parse_command("  play   v1 \n") == ("PLAY", ["v1"])
    assert parse_command("") == ("", [])
    assert parse_command("Flag_Video v1 too  scary") == ("FLAG_VIDEO", ["v1", "too", "scary"])


def test_create_command(player):
    """Test building commands by name."""
    assert isinstance(create_command(player, "play v1"), PlayCommand)
    with pytest.raises(UnknownCommandError):
        create_command(player, "DANCE")


def test_every_command_registered():
    """Test the registry covers every command word."""
    assert set(COMMANDS) == {
        "NUMBER_OF_VIDEOS",
        "SHOW_ALL_VIDEOS",
        "PLAY",
        "PLAY_RANDOM",
        "STOP",
        "PAUSE",
        "CONTINUE",
        "SHOW_PLAYING",
        "CREATE_PLAYLIST",
        "ADD_TO_PLAYLIST",
        "REMOVE_FROM_PLAYLIST",
        "CLEAR_PLAYLIST",
        "DELETE_PLAYLIST",
        "SHOW_PLAYLIST",
        "SHOW_ALL_PLAYLISTS",
        "SEARCH_VIDEOS",
        "SEARCH_VIDEOS_WITH_TAG",
        "FLAG_VIDEO",
        "ALLOW_VIDEO",
        "HELP",
    }


def test_dispatch_runs_commands(player):
    """Test a sequence of text commands."""
    assert dispatch(player, "PLAY v1").lines == ["Playing video: Amazing Cat Video"]
    assert dispatch(player, "pause").lines == ["Pausing video: Amazing Cat Video"]
    assert dispatch(player, "SHOW_PLAYING").lines == [
        "Currently playing: Amazing Cat Video (v1) [#cat #funny] - PAUSED"
    ]
    assert dispatch(player, "CREATE_PLAYLIST fun_list").ok
    assert dispatch(player, "ADD_TO_PLAYLIST FUN_list v2").lines == [
        "Added video to FUN_list: Another Cat Video"
    ]
    assert dispatch(player, "NUMBER_OF_VIDEOS").lines == ["5 videos in the library"]


def test_dispatch_unknown_command(player):
    """Test unknown commands are a no-op with a hint."""
    result = dispatch(player, "DANCE now")
    assert isinstance(result.error, UnknownCommandError)
    assert result.lines == [
        "Please enter a valid command, type HELP for a list of available commands."
    ]


def test_dispatch_bad_arguments(player):
    """Test bad arguments are a no-op with the usage."""
    result = dispatch(player, "ADD_TO_PLAYLIST fun_list")
    assert isinstance(result.error, InvalidArgumentsError)
    assert result.lines == [
        "Invalid arguments, usage: ADD_TO_PLAYLIST <playlist_name> <video_id>"
    ]


def test_dispatch_blank_line(player):
    """Test blank lines do nothing."""
    result = dispatch(player, "   ")
    assert result.ok
    assert result.lines == []


def test_flag_command_joins_reason(player):
    """Test the flag reason may span several words."""
    result = FlagVideoCommand(player, ["v1", "too", "scary"]).run()
    assert result.lines == ["Successfully flagged video: Amazing Cat Video (reason: too scary)"]
    result = FlagVideoCommand(player, ["v2"]).run()
    assert result.lines == [
        "Successfully flagged video: Another Cat Video (reason: Not supplied)"
    ]


def test_search_command_keeps_matches(player):
    """Test search results carry matches for the follow-up."""
    result = SearchVideosCommand(player, ["cat", "video"]).run()
    assert result.lines[0] == "Here are the results for cat video:"
    assert [v.video_id for v in result.matches] == ["v1", "v2"]


def test_help_lists_commands(player):
    """Test HELP lists every command and EXIT."""
    lines = dispatch(player, "HELP").lines
    assert lines[0] == "Available commands:"
    assert len(lines) == len(COMMANDS) + 2
    assert any(line.strip().startswith("PLAY <video_id>") for line in lines)
    assert lines[-1].strip().startswith("EXIT")


def test_dispatch_create_playlist_with_spaces(player):
    """Test a name with spaces reaches the whitespace check."""
    result = dispatch(player, "CREATE_PLAYLIST my list")
    assert isinstance(result.error, InvalidPlaylistNameError)
    assert result.lines == ["Cannot create playlist: Playlist name cannot contain whitespace"]
    assert player.show_all_playlists().lines == ["No playlists exist yet"]


def test_dispatch_create_playlist_trims_line(player):
    """Test surrounding whitespace is not part of the name."""
    assert dispatch(player, "CREATE_PLAYLIST   fun_list  \n").lines == [
        "Successfully created new playlist: fun_list"
    ]


def test_split_command_keeps_rest():
    """Test the rest of the line is kept as typed."""
    assert split_command("search_videos  cat  video \n") == ("SEARCH_VIDEOS", "cat  video")
    assert split_command("STOP") == ("STOP", "")
    assert split_command("  ") == ("", "")


def test_dispatch_search_keeps_inner_spaces(player):
    """Test repeated spaces in a search term are not collapsed."""
    result = dispatch(player, "SEARCH_VIDEOS cat  video")
    assert result.lines == ["No search results for cat  video"]
    assert dispatch(player, "SEARCH_VIDEOS cat video").lines[0] == (
        "Here are the results for cat video:"
    )


def test_dispatch_flag_keeps_reason_spacing(player):
    """Test the flag reason is kept as typed."""
    assert dispatch(player, "FLAG_VIDEO v1 too  scary").lines == [
        "Successfully flagged video: Amazing Cat Video (reason: too  scary)"
    ]
