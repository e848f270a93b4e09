"""Status line formatting for the LiteLLM budget.

Output looks like:
    LiteLLM: $25.00/$100.00 (25%) | reset: 3d4h
"""

from __future__ import annotations

import math
from datetime import datetime

from litellm_status.display.colors import Colors
from litellm_status.errors import CooldownError, ErrorKind, classify_error
from litellm_status.models import KeyInfo
from litellm_status.utils.time import format_time_until_reset

LABEL = "LiteLLM"

# Usage thresholds (percent of budget)
WARNING_THRESHOLD = 75
CRITICAL_THRESHOLD = 90

ERROR_MESSAGES = {
    ErrorKind.NO_CREDENTIALS: "No API key",
    ErrorKind.AUTH: "Auth error",
    ErrorKind.CONNECTION: "Connection error",
    ErrorKind.OTHER: "Error",
}


def get_usage_color(percent: float) -> str:
    """Get the color code for a budget utilization percentage."""
    if percent >= CRITICAL_THRESHOLD:
        return Colors.RED
    elif percent >= WARNING_THRESHOLD:
        return Colors.YELLOW
    return Colors.GREEN


def format_status_line(info: KeyInfo, now: datetime | None = None) -> str:
    """Format a budget record as a colored status line.

    A missing spend counts as zero. A missing, zero or negative max_budget is
    shown as spend only, without a percentage.

    Args:
        info: Budget record.
        now: Reference time for the reset countdown.

    Returns:
        Single-line string with ANSI color codes.
    """
    spend = info.spend if info.spend is not None else 0.0

    if info.max_budget is not None and info.max_budget > 0:
        budget = info.max_budget
        percent = (spend / budget) * 100
        color = get_usage_color(percent)
        budget_str = f"${spend:.2f}/${budget:.2f}"
        percent_str = f" ({percent:.0f}%)"
    else:
        color = Colors.GREEN
        budget_str = f"${spend:.2f}"
        percent_str = ""

    reset_str = ""
    if info.budget_reset_at:
        reset_time = format_time_until_reset(info.budget_reset_at, now=now)
        reset_str = f" {Colors.GRAY}| reset: {reset_time}{Colors.RESET}"

    return f"{color}{LABEL}: {budget_str}{percent_str}{Colors.RESET}{reset_str}"


def format_error(message: str) -> str:
    """Format an error message in red."""
    return f"{Colors.RED}{LABEL}: {message}{Colors.RESET}"


def describe_error(error: BaseException) -> str:
    """Short user-facing text for a failure, chosen by its kind."""
    kind = classify_error(error)
    if kind == ErrorKind.COOLDOWN:
        remaining = error.remaining if isinstance(error, CooldownError) else 0.0
        minutes = max(1, math.ceil(remaining / 60))
        return f"Cooldown (retrying in {minutes}m)"
    return ERROR_MESSAGES[kind]


def format_failure(error: BaseException) -> str:
    """Format any failure as a red status line."""
    return format_error(describe_error(error))


__all__ = [
    "LABEL",
    "WARNING_THRESHOLD",
    "CRITICAL_THRESHOLD",
    "get_usage_color",
    "format_status_line",
    "format_error",
    "describe_error",
    "format_failure",
]
