"""Time formatting and parsing utilities.

Provides parsing for the reset timestamps LiteLLM reports and a compact
"time until reset" formatter for the status line.
"""

from __future__ import annotations

from datetime import datetime, timezone

# Accepted layouts once a trailing Z has been normalised to +00:00
ISO_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
)


def parse_iso_time(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string to an aware UTC datetime.

    Handles a trailing Z, numeric offsets, fractional seconds and a space
    instead of the T separator. Naive timestamps are taken as UTC.

    Args:
        value: Timestamp string (e.g., "2024-01-15T10:30:00Z").

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If the string matches none of the accepted layouts.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    for fmt in ISO_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise ValueError(f"unable to parse time: {value!r}")


def format_time_until_reset(reset_at: str, now: datetime | None = None) -> str:
    """Format the time remaining until the budget resets.

    Args:
        reset_at: Reset timestamp as reported by the proxy.
        now: Reference time (defaults to the current UTC time).

    Returns:
        "3d4h", "5h", "12m", "resetting" once less than a minute is left,
        or "unknown" when reset_at is empty or unparseable.
    """
    if not reset_at:
        return "unknown"
    try:
        reset_dt = parse_iso_time(reset_at)
    except ValueError:
        return "unknown"

    now = now or datetime.now(timezone.utc)
    total_seconds = int((reset_dt - now).total_seconds())
    if total_seconds <= 0:
        return "resetting"

    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{days}d{hours}h"
    if hours > 0:
        return f"{hours}h"
    if minutes > 0:
        return f"{minutes}m"
    return "resetting"


__all__ = ["ISO_FORMATS", "parse_iso_time", "format_time_until_reset"]
