"""Display formatting.

Modules:
    colors: ANSI color codes and NO_COLOR handling
    status: Budget status line and error line formatting
"""

from litellm_status.display.colors import Colors, disable_colors, init_colors, supports_color
from litellm_status.display.status import (
    describe_error,
    format_error,
    format_failure,
    format_status_line,
    get_usage_color,
)

__all__ = [
    # Colors
    "Colors",
    "supports_color",
    "disable_colors",
    "init_colors",
    # Status line
    "get_usage_color",
    "format_status_line",
    "format_error",
    "describe_error",
    "format_failure",
]
