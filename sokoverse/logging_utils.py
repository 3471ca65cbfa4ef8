"""Logging utilities for Sokoverse.

Provides color-coded console output to distinguish moves, blocked moves,
solved levels and general information.
"""

import os
from enum import Enum

from .config import LOG_LEVELS, Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Moves and pushes
    RED = "\033[91m"       # Blocked moves and errors
    GREEN = "\033[92m"     # Solved levels
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if SOKOVERSE_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("SOKOVERSE_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def is_enabled(level: str) -> bool:
    """Return True if messages at ``level`` pass the configured LOG_LEVEL."""
    configured = Config.LOG_LEVEL.upper()
    threshold = LOG_LEVELS.index(configured) if configured in LOG_LEVELS else 1
    return LOG_LEVELS.index(level) >= threshold


def log_move(message: str) -> None:
    """Log a pusher move or push (blue, DEBUG)."""
    if is_enabled("DEBUG"):
        print(colored(f"{MARKER_MOVE} {message}", Color.BLUE))


def log_blocked(message: str) -> None:
    """Log a blocked move (red, INFO)."""
    if is_enabled("INFO"):
        print(colored(f"{MARKER_BLOCKED} {message}", Color.RED))


def log_error(message: str) -> None:
    """Log an error (red, ERROR)."""
    if is_enabled("ERROR"):
        print(colored(f"{MARKER_ERROR} {message}", Color.RED, bold=True))


def log_success(message: str) -> None:
    """Log a success such as a solved level (green, INFO)."""
    if is_enabled("INFO"):
        print(colored(f"{MARKER_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan, INFO)."""
    if is_enabled("INFO"):
        print(colored(f"{MARKER_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
MARKER_MOVE = "[•]"
MARKER_BLOCKED = "[x]"
MARKER_ERROR = "[!]"
MARKER_SUCCESS = "[✓]"
MARKER_INFO = "[i]"
