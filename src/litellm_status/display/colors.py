"""Terminal color handling.

The status line is printed into a pipe that Claude Code renders, so colors
stay on even when stdout is not a TTY. NO_COLOR or LITELLM_STATUS_NO_COLOR
(any non-empty value) turns them off.
"""

import os


class Colors:
    """ANSI color codes for the status line."""

    RESET = "\x1b[0m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    GRAY = "\x1b[90m"


def supports_color() -> bool:
    """Check whether colors are wanted.

    Returns:
        False if NO_COLOR or LITELLM_STATUS_NO_COLOR is set, True otherwise.
    """
    return not (os.environ.get("NO_COLOR") or os.environ.get("LITELLM_STATUS_NO_COLOR"))


def disable_colors() -> None:
    """Blank every color code."""
    for attr in dir(Colors):
        if not attr.startswith("_"):
            setattr(Colors, attr, "")


def init_colors() -> None:
    """Initialize colors based on environment settings."""
    if not supports_color():
        disable_colors()


# Auto-initialize on import
init_colors()

__all__ = ["Colors", "supports_color", "disable_colors", "init_colors"]
