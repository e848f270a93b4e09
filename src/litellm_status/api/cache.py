"""In-memory key/info cache with TTL and failure cooldown.

KeyInfoCache owns one cached record, the clock reading it was fetched at, and
an independent cooldown deadline. Every get_key_info() call runs the whole
decision under one lock:

1. cooldown active -> CooldownError, no network
2. cached record younger than the TTL -> return it, no network
3. otherwise fetch with retries; success replaces the record and clears the
   cooldown, failure starts a new cooldown and leaves the old record alone.

Holding the lock across the network calls keeps at most one request in
flight per cache.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from loguru import logger

from litellm_status.api.retry import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES, retry_request
from litellm_status.errors import CooldownError, LiteLLMStatusError
from litellm_status.models import KeyInfo

# Default timing in seconds
CACHE_TTL = 30.0
COOLDOWN_PERIOD = 5 * 60.0


class CacheState(str, Enum):
    """Derived view of the cache, for diagnostics only."""

    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"
    COOLDOWN = "cooldown"


@dataclass(frozen=True)
class CacheEntry:
    """A fetched record and the clock reading it was obtained at."""

    info: KeyInfo
    fetched_at: float


class KeyInfoCache:
    """
    Cache/cooldown state machine in front of a single-attempt fetcher.

    Usage:
        cache = KeyInfoCache(make_fetcher("https://proxy.example.com"))
        info = cache.get_key_info(token)
    """

    def __init__(
        self,
        fetch: Callable[[str], KeyInfo],
        ttl: float = CACHE_TTL,
        cooldown: float = COOLDOWN_PERIOD,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._fetch = fetch
        self._ttl = ttl
        self._cooldown = cooldown
        self._max_retries = max_retries
        self._base_delay = base_delay
        self._clock = clock
        self._sleep = sleep

        self._entry: CacheEntry | None = None
        self._cooldown_until: float | None = None
        self._lock = threading.Lock()

    def get_key_info(self, token: str) -> KeyInfo:
        """Return the budget record, from cache or from the proxy.

        Args:
            token: Non-empty bearer token.

        Returns:
            The cached or freshly fetched KeyInfo.

        Raises:
            CooldownError: If a recent fetch failed and the cooldown is running.
            LiteLLMStatusError: The last error from the retry driver when every
                attempt failed (AuthError, HTTPError, TransportError, DecodeError).
        """
        if not token:
            raise ValueError("token must be a non-empty string")

        with self._lock:
            now = self._clock()

            if self._cooldown_until is not None and now < self._cooldown_until:
                remaining = self._cooldown_until - now
                logger.debug(f"Cooldown active, {remaining:.1f}s remaining")
                raise CooldownError(remaining)

            if self._entry is not None and now - self._entry.fetched_at < self._ttl:
                logger.debug("Cache hit")
                return self._entry.info

            logger.debug("Cache miss" if self._entry is None else "Cache expired")

            try:
                info = retry_request(
                    lambda: self._fetch(token),
                    max_retries=self._max_retries,
                    base_delay=self._base_delay,
                    sleep=self._sleep,
                )
            except LiteLLMStatusError as e:
                self._cooldown_until = now + self._cooldown
                logger.warning(f"Fetch failed, cooling down for {self._cooldown:.0f}s: {e}")
                raise

            if self._cooldown_until is not None:
                logger.debug("Fetch succeeded, cooldown cleared")
            self._entry = CacheEntry(info=info, fetched_at=now)
            self._cooldown_until = None
            return info

    def reset(self) -> None:
        """Clear the cached record and the cooldown deadline."""
        with self._lock:
            self._entry = None
            self._cooldown_until = None

    @property
    def cached_info(self) -> KeyInfo | None:
        """The retained record, whether or not it is still fresh."""
        with self._lock:
            return self._entry.info if self._entry else None

    @property
    def cooldown_until(self) -> float | None:
        """Clock reading at which the cooldown ends, or None."""
        with self._lock:
            return self._cooldown_until

    def cooldown_remaining(self) -> float:
        """Seconds until the cooldown ends, 0.0 when not cooling down."""
        with self._lock:
            if self._cooldown_until is None:
                return 0.0
            return max(0.0, self._cooldown_until - self._clock())

    @property
    def state(self) -> CacheState:
        """Current derived state; an active cooldown wins over the cache."""
        with self._lock:
            now = self._clock()
            if self._cooldown_until is not None and now < self._cooldown_until:
                return CacheState.COOLDOWN
            if self._entry is None:
                return CacheState.EMPTY
            if now - self._entry.fetched_at < self._ttl:
                return CacheState.FRESH
            return CacheState.STALE


__all__ = [
    "CACHE_TTL",
    "COOLDOWN_PERIOD",
    "CacheState",
    "CacheEntry",
    "KeyInfoCache",
]
