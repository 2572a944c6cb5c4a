"""Common test fixtures and utilities."""

import random

import pytest

from src.videoplayer.catalog import VideoCatalog
from src.videoplayer.models import Video
from src.videoplayer.player import VideoPlayer


def make_catalog() -> VideoCatalog:
    """Build the catalog shared by most tests."""
    return VideoCatalog(
        [
            Video("v1", "Amazing Cat Video", ["#cat", "#funny"]),
            Video("v2", "Another Cat Video", ["#cat"]),
            Video("v3", "Funny Dogs", ["#dog", "#animal"]),
            Video("v4", "Life at Google", ["#google", "#career"]),
            Video("v5", "Video about nothing", []),
        ]
    )


@pytest.fixture
def catalog() -> VideoCatalog:
    """Create a small in-memory catalog.

    Returns:
        VideoCatalog: Catalog with five videos, v1 to v5
    """
    return make_catalog()


@pytest.fixture
def player(catalog) -> VideoPlayer:
    """Create a player over the sample catalog with a seeded random source."""
    return VideoPlayer(catalog, rng=random.Random(0))


@pytest.fixture
def catalog_factory():
    """Return a callable building fresh copies of the sample catalog."""
    return make_catalog
