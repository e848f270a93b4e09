"""Utility functions.

Modules:
    time: Reset timestamp parsing and formatting
"""

from litellm_status.utils.time import format_time_until_reset, parse_iso_time

__all__ = [
    "parse_iso_time",
    "format_time_until_reset",
]
