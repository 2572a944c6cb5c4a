"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

# Force reload of environment variables
load_dotenv(override=True)

# Directory Settings
DATA_DIR = os.getenv("DATA_DIR", "data")
CATALOG_FILE = os.getenv("VIDEO_CATALOG_FILE", os.path.join(DATA_DIR, "videos.txt"))

# Library Settings
TAG_MARKER = "#"
DEFAULT_FLAG_REASON = "Not supplied"
