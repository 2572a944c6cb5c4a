"""Title and tag search over the playable videos."""

import re
from typing import List, Optional, Sequence

from .catalog import VideoCatalog
from .config import TAG_MARKER
from .flags import FlagRegistry
from .models import Video

SELECTION_PATTERN = re.compile(r"[+-]?[0-9]+")


def _playable(catalog: VideoCatalog, flags: FlagRegistry) -> List[Video]:
    return [video for video in catalog.get_videos() if not flags.is_flagged(video.video_id)]


def _sorted(videos: List[Video]) -> List[Video]:
    # Ordering is by the full rendered line, not by title
    return sorted(videos, key=lambda video: video.render())


def search_by_title(catalog: VideoCatalog, flags: FlagRegistry, term: str) -> List[Video]:
    """Find non-flagged videos whose title contains the term, ignoring case.

    Args:
        catalog: Catalog to search
        flags: Registry of flagged videos to leave out
        term: Search term

    Returns:
        Matching videos sorted by their rendered line
    """
    needle = term.lower()
    return _sorted([v for v in _playable(catalog, flags) if needle in v.title.lower()])


def search_by_tag(catalog: VideoCatalog, flags: FlagRegistry, tag: str) -> List[Video]:
    """Find non-flagged videos carrying the tag, ignoring case.

    Args:
        catalog: Catalog to search
        flags: Registry of flagged videos to leave out
        tag: Tag including its marker, e.g. "#cat"

    Returns:
        Matching videos sorted by their rendered line; empty when the tag
        does not start with the marker
    """
    if not tag.startswith(TAG_MARKER):
        return []
    needle = tag.lower()
    return _sorted(
        [v for v in _playable(catalog, flags) if needle in (t.lower() for t in v.tags)]
    )


def select_result(matches: Sequence[Video], answer: Optional[str]) -> Optional[Video]:
    """Pick a search result by its 1-based number.

    Args:
        matches: Results in the order they were shown
        answer: What the user typed

    Returns:
        The chosen video, or None for anything that is not a valid number
    """
    if answer is None:
        return None
    answer = answer.strip()
    if not SELECTION_PATTERN.fullmatch(answer):
        return None
    number = int(answer)
    if not 1 <= number <= len(matches):
        return None
    return matches[number - 1]
