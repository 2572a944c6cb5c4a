"""Logging configuration for the videoplayer package."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "videoplayer"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

# Log records go to stderr so they never mix with command output on stdout
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging for the package.

    Args:
        level: Level for both the package logger and its console handler
    """
    if console_handler not in logger.handlers:
        logger.addHandler(console_handler)
    logger.setLevel(level)
    console_handler.setLevel(level)
    # Prevent propagation to root logger
    logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to WARNING level.
    """
    logger.setLevel(logging.WARNING)
    console_handler.setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__. If None, returns the
            package logger.

    Returns:
        Logger instance
    """
    if not name:
        return logger
    short_name = name.rsplit(".", 1)[-1] if LOGGER_NAME in name else name
    return logging.getLogger(f"{LOGGER_NAME}.{short_name}")
