"""Categorized error handling for the budget fetch pipeline.

Every failure the fetcher, retry driver or cache can produce is a subclass of
LiteLLMStatusError. Each class carries an ErrorKind so the status line can
tell the five user-visible cases apart without matching on message text.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import ClassVar


class ErrorKind(str, Enum):
    """User-visible failure categories."""

    NO_CREDENTIALS = "no_credentials"
    COOLDOWN = "cooldown"
    AUTH = "auth"
    CONNECTION = "connection"
    OTHER = "other"


class ExitCode(IntEnum):
    """Exit codes used when --exit-code is given.

    Standard categories:
    - 0: Success
    - 1-9: Usage/config errors (user can fix)
    - 10-19: Authentication errors
    - 20-29: Network errors
    - 30-39: API errors
    - 50-59: Data errors
    """

    SUCCESS = 0

    # Usage/config errors (1-9)
    USAGE_ERROR = 1
    COOLDOWN = 4

    # Authentication errors (10-19)
    AUTH_INVALID = 11
    AUTH_MISSING = 12

    # Network errors (20-29)
    NETWORK_ERROR = 20

    # API errors (30-39)
    API_ERROR = 30

    # Data errors (50-59)
    DATA_INVALID = 51


class LiteLLMStatusError(Exception):
    """Base exception for litellm-status with structured error info.

    Attributes:
        message: Human-readable error message.
        kind: User-visible failure category.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.OTHER
    code: ClassVar[ExitCode] = ExitCode.USAGE_ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


class CredentialsMissingError(LiteLLMStatusError):
    """No token or no proxy URL configured."""

    kind = ErrorKind.NO_CREDENTIALS
    code = ExitCode.AUTH_MISSING
    suggestion = (
        "Set ANTHROPIC_AUTH_TOKEN (or LITELLM_PROXY_API_KEY) and "
        "ANTHROPIC_BASE_URL (or LITELLM_PROXY_URL)."
    )


class CooldownError(LiteLLMStatusError):
    """A previous fetch failed completely; the proxy is not being called."""

    kind = ErrorKind.COOLDOWN
    code = ExitCode.COOLDOWN
    suggestion = "Wait for the cooldown to expire; the next call retries automatically."

    def __init__(self, remaining: float):
        self.remaining = max(0.0, remaining)
        super().__init__(f"Cooldown active, retrying in {self.remaining:.0f}s")


class AuthError(LiteLLMStatusError):
    """The proxy rejected the key (401 or 403)."""

    kind = ErrorKind.AUTH
    code = ExitCode.AUTH_INVALID
    suggestion = "Check that the API key is valid for this LiteLLM proxy."

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Authentication failed: {status}")


class HTTPError(LiteLLMStatusError):
    """The proxy answered with an unexpected status code."""

    kind = ErrorKind.OTHER
    code = ExitCode.API_ERROR
    suggestion = "Try again later. If the problem persists, check the proxy logs."

    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        message = f"HTTP error: {status}"
        if reason:
            message += f" {reason}"
        super().__init__(message)


class TransportError(LiteLLMStatusError):
    """Connection refused, DNS failure, or timeout."""

    kind = ErrorKind.CONNECTION
    code = ExitCode.NETWORK_ERROR
    suggestion = "Check your network connection and the proxy URL."

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Connection error: {reason}")


class DecodeError(LiteLLMStatusError):
    """The response body is not the expected key/info document."""

    kind = ErrorKind.OTHER
    code = ExitCode.DATA_INVALID
    suggestion = "The proxy returned an unexpected payload; check its version."

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid response: {reason}")


def classify_error(error: BaseException) -> ErrorKind:
    """Map any exception onto the user-visible failure categories.

    Args:
        error: Exception raised while producing the status line.

    Returns:
        The ErrorKind of a package error, ErrorKind.OTHER for anything else.
    """
    if isinstance(error, LiteLLMStatusError):
        return error.kind
    return ErrorKind.OTHER


def get_exit_code(error: BaseException) -> int:
    """Get the exit code for an exception.

    Args:
        error: Exception to get code for.

    Returns:
        Integer exit code.
    """
    if isinstance(error, LiteLLMStatusError):
        return error.code
    return ExitCode.USAGE_ERROR


__all__ = [
    "ErrorKind",
    "ExitCode",
    "LiteLLMStatusError",
    "CredentialsMissingError",
    "CooldownError",
    "AuthError",
    "HTTPError",
    "TransportError",
    "DecodeError",
    "classify_error",
    "get_exit_code",
]
