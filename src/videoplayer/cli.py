"""Command-line interface for the video library."""

import argparse
import random
import sys
from typing import List, Optional, TextIO

from . import commands
from .catalog import VideoCatalog
from .config import CATALOG_FILE
from .errors import CatalogError
from .logging_config import configure_logging, enable_debug, get_logger
from .models import CommandResult
from .player import VideoPlayer

logger = get_logger(__name__)

PROMPT = "VideoPlayer> "
EXIT_COMMAND = "EXIT"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Interactive video library player")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--catalog", default=CATALOG_FILE, help=f"Video catalog file (default: {CATALOG_FILE})"
    )
    parser.add_argument("--seed", type=int, help="Seed for PLAY_RANDOM")
    return parser


def _write(result: CommandResult, output: TextIO) -> None:
    for line in result.lines:
        print(line, file=output)


def run_shell(player: VideoPlayer, input_stream: TextIO, output: TextIO) -> None:
    """Read commands until EXIT or end of input.

    After a search with results the next line is taken as the number of the
    video to play.

    Args:
        player: Player to run commands against
        input_stream: Where command lines come from
        output: Where result lines go
    """
    print("Hello and welcome to YouTube, what would you like to do?", file=output)
    print("Enter HELP for list of available commands or EXIT to terminate.", file=output)

    while True:
        output.write(PROMPT)
        output.flush()
        line = input_stream.readline()
        if not line:
            break
        if line.strip().upper() == EXIT_COMMAND:
            break

        result = commands.dispatch(player, line)
        _write(result, output)

        if result.matches:
            answer = input_stream.readline()
            if not answer:
                break
            _write(player.play_search_result(result.matches, answer), output)

    print("YouTube has now terminated its execution. Thank you and goodbye!", file=output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging()
    if args.debug:
        enable_debug()

    try:
        catalog = VideoCatalog.from_file(args.catalog)
    except CatalogError as e:
        logger.error("Failed to load catalog: %s", str(e))
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    player = VideoPlayer(catalog, rng=rng)
    run_shell(player, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
