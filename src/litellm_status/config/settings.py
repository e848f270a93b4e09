"""Environment-based configuration for litellm-status.

The proxy URL and key come from the same variables Claude Code uses to talk
to a LiteLLM proxy, with the LiteLLM CLI names as fallbacks. Timing knobs can
be overridden with LITELLM_STATUS_* variables.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar

from loguru import logger

from litellm_status.api.cache import CACHE_TTL, COOLDOWN_PERIOD
from litellm_status.api.retry import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT
from litellm_status.errors import CredentialsMissingError

BASE_URL_ENV_VARS = ("ANTHROPIC_BASE_URL", "LITELLM_PROXY_URL")
TOKEN_ENV_VARS = ("ANTHROPIC_AUTH_TOKEN", "LITELLM_PROXY_API_KEY")

ENV_CACHE_TTL = "LITELLM_STATUS_CACHE_TTL"
ENV_TIMEOUT = "LITELLM_STATUS_TIMEOUT"
ENV_MAX_RETRIES = "LITELLM_STATUS_MAX_RETRIES"
ENV_INITIAL_BACKOFF = "LITELLM_STATUS_INITIAL_BACKOFF"
ENV_COOLDOWN = "LITELLM_STATUS_COOLDOWN"
ENV_DEBUG = "LITELLM_STATUS_DEBUG"

TRUTHY_VALUES = {"1", "true", "yes", "on"}

N = TypeVar("N", int, float)


def get_env_with_fallback(*keys: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the first non-empty environment variable value.

    Args:
        keys: Variable names, in priority order.
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        The first non-empty value, or "" if none is set.
    """
    env = os.environ if environ is None else environ
    for key in keys:
        value = env.get(key)
        if value:
            return value
    return ""


def get_base_url(environ: Mapping[str, str] | None = None) -> str:
    """Return the proxy base URL without a trailing slash."""
    return get_env_with_fallback(*BASE_URL_ENV_VARS, environ=environ).rstrip("/")


def get_token(environ: Mapping[str, str] | None = None) -> str:
    """Return the proxy API key."""
    return get_env_with_fallback(*TOKEN_ENV_VARS, environ=environ)


def _read_number(
    env: Mapping[str, str],
    key: str,
    default: N,
    parse: Callable[[str], N],
    allow_zero: bool = True,
) -> N:
    raw = env.get(key)
    if not raw:
        return default
    try:
        value = parse(raw)
    except ValueError:
        logger.debug(f"Ignoring invalid {key}={raw!r}")
        return default
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        logger.debug(f"Ignoring out-of-range {key}={raw!r}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration."""

    base_url: str = ""
    token: str = ""
    cache_ttl: float = CACHE_TTL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    initial_backoff: float = DEFAULT_BASE_DELAY
    cooldown: float = COOLDOWN_PERIOD
    debug: bool = False

    @property
    def has_credentials(self) -> bool:
        return bool(self.token and self.base_url)

    def require_credentials(self) -> None:
        """Raise CredentialsMissingError unless both token and URL are set."""
        if not self.token:
            raise CredentialsMissingError("No API key configured")
        if not self.base_url:
            raise CredentialsMissingError("No proxy URL configured")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Invalid, negative or infinite numeric overrides fall back to their
    defaults. A zero timeout is rejected as well.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        Settings instance.
    """
    env = os.environ if environ is None else environ
    return Settings(
        base_url=get_base_url(env),
        token=get_token(env),
        cache_ttl=_read_number(env, ENV_CACHE_TTL, CACHE_TTL, float),
        timeout=_read_number(env, ENV_TIMEOUT, DEFAULT_TIMEOUT, float, allow_zero=False),
        max_retries=_read_number(env, ENV_MAX_RETRIES, DEFAULT_MAX_RETRIES, int),
        initial_backoff=_read_number(env, ENV_INITIAL_BACKOFF, DEFAULT_BASE_DELAY, float),
        cooldown=_read_number(env, ENV_COOLDOWN, COOLDOWN_PERIOD, float),
        debug=env.get(ENV_DEBUG, "").strip().lower() in TRUTHY_VALUES,
    )


__all__ = [
    "BASE_URL_ENV_VARS",
    "TOKEN_ENV_VARS",
    "Settings",
    "get_env_with_fallback",
    "get_base_url",
    "get_token",
    "load_settings",
]
