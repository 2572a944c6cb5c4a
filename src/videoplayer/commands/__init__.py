"""Command module initialization."""

from .base import PlayerCommand
from .dispatch import COMMANDS, HelpCommand, create_command, dispatch, parse_command, split_command

__all__ = [
    "PlayerCommand",
    "HelpCommand",
    "COMMANDS",
    "create_command",
    "dispatch",
    "parse_command",
    "split_command",
]
