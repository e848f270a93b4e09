"""Retry driver with plain exponential backoff."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from loguru import logger

from litellm_status.errors import LiteLLMStatusError

# Default retry configuration
DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY = 1.0  # seconds
DEFAULT_TIMEOUT = 10.0  # seconds, per attempt

T = TypeVar("T")


def calculate_backoff_delay(attempt: int, base_delay: float = DEFAULT_BASE_DELAY) -> float:
    """Calculate the delay before a retry.

    Pure exponential backoff without jitter or cap: 1s, 2s, 4s, ... for the
    default base delay.

    Args:
        attempt: Retry number, 1 for the first retry.
        base_delay: Delay before the first retry in seconds.

    Returns:
        Delay in seconds.
    """
    if attempt < 1:
        raise ValueError("attempt must be >= 1; the first call is never delayed")
    return base_delay * (2 ** (attempt - 1))


def retry_request(
    request_func: Callable[[], T],
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    on_retry: Callable[[int, Exception, float], None] | None = None,
) -> T:
    """Execute a request, retrying every failure up to max_retries times.

    The driver does not look at the kind of failure: an AuthError is retried
    exactly like a timeout. Only the last error survives; earlier ones are
    dropped.

    Args:
        request_func: Single-attempt function to execute.
        max_retries: Retries after the first attempt (total attempts = max_retries + 1).
        base_delay: Delay before the first retry in seconds.
        sleep: Function used to wait between attempts.
        on_retry: Optional callback called before each retry with
                  (attempt_number, error, delay).

    Returns:
        Result of the first successful call.

    Raises:
        LiteLLMStatusError: The error from the final attempt.
    """
    if max_retries < 0:
        raise ValueError("max_retries must be >= 0")

    last_error: LiteLLMStatusError | None = None

    for attempt in range(max_retries + 1):
        if attempt > 0:
            delay = calculate_backoff_delay(attempt, base_delay)
            if on_retry:
                on_retry(attempt, last_error, delay)
            logger.debug(f"Retry {attempt}/{max_retries} in {delay:.1f}s after: {last_error}")
            sleep(delay)

        try:
            return request_func()
        except LiteLLMStatusError as e:
            last_error = e

    logger.debug(f"Giving up after {max_retries + 1} attempts")
    raise last_error


__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_BASE_DELAY",
    "DEFAULT_TIMEOUT",
    "calculate_backoff_delay",
    "retry_request",
]
