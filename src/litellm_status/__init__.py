"""LiteLLM Status - Claude Code status line for LiteLLM proxy key budgets.

This package fetches the budget record for a LiteLLM proxy key, caches it,
backs off and cools down when the proxy misbehaves, and renders a compact
colored status line.
"""

from litellm_status._version import __version__
from litellm_status.api.cache import KeyInfoCache
from litellm_status.models import KeyInfo

__all__ = [
    "__version__",
    "KeyInfo",
    "KeyInfoCache",
]
