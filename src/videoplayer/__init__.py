"""In-memory video library with playback, playlists, search and flagging."""

__version__ = "0.1.0"

# Import all public components
from .catalog import VideoCatalog
from .cli import main
from .commands import PlayerCommand, dispatch
from .errors import VideoPlayerError
from .flags import FlagRegistry
from .logging_config import configure_logging, get_logger
from .models import CommandResult, Playlist, Video
from .playback import PlaybackSession
from .player import VideoPlayer
from .playlists import PlaylistStore

# Import config variables
from .config import (  # noqa: F401
    CATALOG_FILE,
    DATA_DIR,
    DEFAULT_FLAG_REASON,
    TAG_MARKER,
)

# Configure logging
configure_logging()

# Get logger for this module
logger = get_logger(__name__)
