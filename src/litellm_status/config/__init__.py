"""Configuration management.

Modules:
    settings: Environment-variable settings and credential resolution
"""

from litellm_status.config.settings import (
    BASE_URL_ENV_VARS,
    TOKEN_ENV_VARS,
    Settings,
    get_base_url,
    get_env_with_fallback,
    get_token,
    load_settings,
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
