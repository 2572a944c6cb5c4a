"""Tests for the value types."""

import pytest

from src.videoplayer.errors import NothingPlayingError, VideoNotFoundError
from src.videoplayer.models import CommandResult, Playlist, Video


def test_video_render():
    """Test rendering a video with tags."""
    video = Video("v1", "Amazing Cat Video", ["#cat", "#funny"])
    assert video.render() == "Amazing Cat Video (v1) [#cat #funny]"


def test_video_render_without_tags():
    """Test rendering a video with no tags."""
    assert Video("v5", "Video about nothing").render() == "Video about nothing (v5) []"


def test_video_is_immutable():
    """Test that video fields cannot be reassigned."""
    video = Video("v1", "Title", ["#a"])
    with pytest.raises(AttributeError):
        video.title = "Other"
    assert video.tags == ("#a",)


def test_video_equality_and_hash():
    """Test that videos compare by value."""
    assert Video("v1", "Title", ["#a"]) == Video("v1", "Title", ("#a",))
    assert Video("v1", "Title") != Video("v2", "Title")
    assert len({Video("v1", "Title"), Video("v1", "Title")}) == 1


def test_playlist_membership():
    """Test Playlist containment and length."""
    playlist = Playlist("My_List")
    playlist.video_ids.append("v1")
    assert "v1" in playlist
    assert "v2" not in playlist
    assert len(playlist) == 1
    assert playlist.name == "My_List"


def test_command_result_defaults():
    """Test an empty result is a success."""
    result = CommandResult()
    assert result.ok
    assert result.lines == []
    assert result.matches == []


def test_command_result_failure():
    """Test building a failed result."""
    error = VideoNotFoundError()
    result = CommandResult.failure(error, "Cannot play video: Video does not exist")
    assert not result.ok
    assert result.error is error
    assert result.lines == ["Cannot play video: Video does not exist"]


def test_command_result_extend():
    """Test extending a result keeps the other result's error."""
    result = CommandResult(["first"])
    error = NothingPlayingError()
    result.extend(CommandResult.failure(error, "second"))
    assert result.lines == ["first", "second"]
    assert result.error is error
