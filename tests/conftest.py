"""
Pytest fixtures for litellm-status tests.

Test imports use the src/litellm_status/ package via --import-mode=importlib
(see pyproject.toml).
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from litellm_status.display.colors import Colors
from litellm_status.models import KeyInfo

ENV_VARS = (
    "ANTHROPIC_BASE_URL",
    "LITELLM_PROXY_URL",
    "ANTHROPIC_AUTH_TOKEN",
    "LITELLM_PROXY_API_KEY",
    "LITELLM_STATUS_CACHE_TTL",
    "LITELLM_STATUS_TIMEOUT",
    "LITELLM_STATUS_MAX_RETRIES",
    "LITELLM_STATUS_INITIAL_BACKOFF",
    "LITELLM_STATUS_COOLDOWN",
    "LITELLM_STATUS_DEBUG",
    "LITELLM_STATUS_NO_COLOR",
    "NO_COLOR",
)

ANSI_COLORS = {
    "RESET": "\x1b[0m",
    "GREEN": "\x1b[32m",
    "YELLOW": "\x1b[33m",
    "RED": "\x1b[31m",
    "GRAY": "\x1b[90m",
}


# ═══════════════════════════════════════════════════════════════════════════════
# Isolation
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove every variable the project reads from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_colors():
    """Reset color codes; --no-color and NO_COLOR blank them globally."""
    for name, code in ANSI_COLORS.items():
        setattr(Colors, name, code)
    yield
    for name, code in ANSI_COLORS.items():
        setattr(Colors, name, code)


# ═══════════════════════════════════════════════════════════════════════════════
# Time Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SleepRecorder:
    """Stand-in for time.sleep that records delays instead of waiting."""

    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def clock():
    """Fake monotonic clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def sleeps():
    """Recorded backoff sleeps."""
    return SleepRecorder()


# ═══════════════════════════════════════════════════════════════════════════════
# API Response Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def key_info_response():
    """Normal /key/info body (25 spent of 100)."""
    return {
        "key": "sk-...abcd",
        "info": {
            "spend": 25.0,
            "max_budget": 100.0,
            "budget_reset_at": "2025-01-15T10:00:00Z",
        },
    }


@pytest.fixture
def key_info():
    """KeyInfo matching key_info_response."""
    return KeyInfo(spend=25.0, max_budget=100.0, budget_reset_at="2025-01-15T10:00:00Z")


def make_response(body, status: int = 200):
    """Build a mock urlopen() context manager returning body."""
    if not isinstance(body, bytes):
        body = json.dumps(body).encode()
    response = MagicMock()
    response.status = status
    response.reason = "OK" if status == 200 else ""
    response.read.return_value = body
    response.__enter__ = MagicMock(return_value=response)
    response.__exit__ = MagicMock(return_value=False)
    return response


@pytest.fixture
def mock_urlopen():
    """Mock urlopen for fetcher tests."""
    with patch("litellm_status.api.client.urlopen") as mock:
        yield mock


@pytest.fixture
def response_factory():
    """Factory for mock urlopen() responses: response_factory(body, status=200)."""
    return make_response
