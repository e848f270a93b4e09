"""Budget record returned by the LiteLLM /key/info endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from litellm_status.errors import DecodeError


def _optional_number(info: dict[str, Any], key: str) -> float | None:
    value = info.get(key)
    if value is None:
        return None
    # bool is an int subclass; a JSON true is not a budget
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"'{key}' must be a number or null, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class KeyInfo:
    """Budget snapshot for one proxy key.

    None means the proxy did not report the value. A max_budget of 0.0 is kept
    as 0.0; the formatter decides that it means "no limit".
    """

    spend: float | None = None
    max_budget: float | None = None
    budget_reset_at: str = ""

    @classmethod
    def from_response(cls, payload: Any) -> KeyInfo:
        """Build a KeyInfo from the decoded /key/info response body.

        Args:
            payload: Decoded JSON document, expected to be {"info": {...}}.

        Returns:
            KeyInfo with spend, max_budget and budget_reset_at taken verbatim.

        Raises:
            DecodeError: If the document does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise DecodeError("response body is not a JSON object")
        info = payload.get("info")
        if not isinstance(info, dict):
            raise DecodeError("response has no 'info' object")

        reset_at = info.get("budget_reset_at")
        if reset_at is None:
            reset_at = ""
        elif not isinstance(reset_at, str):
            raise DecodeError("'budget_reset_at' must be a string or null")

        return cls(
            spend=_optional_number(info, "spend"),
            max_budget=_optional_number(info, "max_budget"),
            budget_reset_at=reset_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the record in the proxy's wire shape."""
        return {
            "spend": self.spend,
            "max_budget": self.max_budget,
            "budget_reset_at": self.budget_reset_at,
        }


__all__ = ["KeyInfo"]
