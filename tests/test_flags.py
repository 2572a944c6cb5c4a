"""Tests for the flag registry."""

import pytest

from src.videoplayer.errors import AlreadyFlaggedError, NotFlaggedError, VideoNotFoundError
from src.videoplayer.flags import FlagRegistry


@pytest.fixture
def flags(catalog):
    """Create an empty registry over the sample catalog."""
    return FlagRegistry(catalog)


def test_flag_with_reason(flags):
    """Test flagging records the reason."""
    assert flags.flag("v1", "spoilers") == "spoilers"
    assert flags.is_flagged("v1")
    assert flags.reason_for("v1") == "spoilers"


def test_flag_default_reason(flags):
    """Test missing or blank reasons use the default."""
    assert flags.flag("v1") == "Not supplied"
    assert flags.flag("v2", "   ") == "Not supplied"


def test_flag_unknown_video(flags):
    """Test flagging a video not in the catalog."""
    with pytest.raises(VideoNotFoundError):
        flags.flag("missing")
    assert len(flags) == 0


def test_flag_twice(flags):
    """Test a video can only be flagged once."""
    flags.flag("v1", "first")
    with pytest.raises(AlreadyFlaggedError):
        flags.flag("v1", "second")
    assert flags.reason_for("v1") == "first"


def test_unflag(flags):
    """Test removing a flag."""
    flags.flag("v1")
    flags.unflag("v1")
    assert not flags.is_flagged("v1")
    assert flags.reason_for("v1") is None


def test_unflag_errors(flags):
    """Test unflag precedence: existence first, then flag state."""
    with pytest.raises(VideoNotFoundError):
        flags.unflag("missing")
    with pytest.raises(NotFlaggedError):
        flags.unflag("v1")
