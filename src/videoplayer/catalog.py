"""Read-only catalog of the videos in the library."""

import os
from typing import Dict, Iterable, List, Optional

from .config import CATALOG_FILE, TAG_MARKER
from .errors import CatalogError
from .logging_config import get_logger
from .models import Video

logger = get_logger(__name__)

FIELD_SEPARATOR = "|"
TAG_SEPARATOR = ","


def parse_catalog_line(line: str) -> Optional[Video]:
    """Parse one "Title | video_id | #tag1,#tag2" catalog line.

    Args:
        line: Raw line from the catalog file

    Returns:
        Parsed video, or None if the line is blank or malformed
    """
    if not line.strip():
        return None

    fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
    if len(fields) < 2 or not fields[0] or not fields[1]:
        logger.warning("Skipping malformed catalog line: %r", line.rstrip("\n"))
        return None

    title, video_id = fields[0], fields[1]
    tags = []
    if len(fields) > 2:
        for tag in fields[2].split(TAG_SEPARATOR):
            tag = tag.strip()
            if not tag:
                continue
            if not tag.startswith(TAG_MARKER):
                logger.warning("Skipping tag %r of video %s: missing %s", tag, video_id, TAG_MARKER)
                continue
            tags.append(tag)
    return Video(video_id, title, tags)


class VideoCatalog:
    """Maps video IDs to videos. Never mutated after construction."""

    def __init__(self, videos: Iterable[Video] = ()) -> None:
        """Initialize catalog.

        Args:
            videos: Videos to index; the first video wins for a duplicate ID
        """
        self._videos: Dict[str, Video] = {}
        for video in videos:
            if video.video_id in self._videos:
                logger.warning("Duplicate video ID %s ignored", video.video_id)
                continue
            self._videos[video.video_id] = video

    @classmethod
    def from_file(cls, path: str = CATALOG_FILE) -> "VideoCatalog":
        """Load a catalog from a text file.

        Args:
            path: Path to the catalog file

        Returns:
            Loaded catalog

        Raises:
            CatalogError: If the file cannot be read
        """
        if not os.path.exists(path):
            raise CatalogError(f"Video catalog not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                videos = [video for video in map(parse_catalog_line, f) if video]
        except OSError as e:
            raise CatalogError(f"Failed to read video catalog {path}: {str(e)}") from e

        catalog = cls(videos)
        logger.debug("Loaded %d videos from %s", len(catalog), path)
        return catalog

    def get_video(self, video_id: str) -> Optional[Video]:
        """Look up a video by its exact ID."""
        return self._videos.get(video_id)

    def get_videos(self) -> List[Video]:
        """Get all videos, in load order."""
        return list(self._videos.values())

    def __contains__(self, video_id: str) -> bool:
        return video_id in self._videos

    def __len__(self) -> int:
        return len(self._videos)
