"""API client, retry and caching.

Modules:
    client: Single-attempt fetcher for the LiteLLM /key/info endpoint
    retry: Exponential backoff retry driver
    cache: TTL cache and failure cooldown in front of the fetcher
"""

from litellm_status.api.cache import (
    CACHE_TTL,
    COOLDOWN_PERIOD,
    CacheEntry,
    CacheState,
    KeyInfoCache,
)
from litellm_status.api.client import (
    KEY_INFO_PATH,
    build_request,
    fetch_key_info,
    make_fetcher,
)
from litellm_status.api.retry import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    calculate_backoff_delay,
    retry_request,
)

__all__ = [
    # Cache
    "CACHE_TTL",
    "COOLDOWN_PERIOD",
    "CacheEntry",
    "CacheState",
    "KeyInfoCache",
    # Client
    "KEY_INFO_PATH",
    "build_request",
    "fetch_key_info",
    "make_fetcher",
    # Retry
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "calculate_backoff_delay",
    "retry_request",
]
