"""API client for the LiteLLM proxy /key/info endpoint.

fetch_key_info performs exactly one round trip and turns whatever comes back
into either a KeyInfo or one of the package's typed errors. Retrying and
caching live in retry.py and cache.py.
"""

from __future__ import annotations

import json
from http.client import HTTPException
from typing import Callable
from urllib.error import HTTPError as URLLibHTTPError
from urllib.error import URLError
from urllib.request import Request, urlopen

from loguru import logger

from litellm_status._version import __version__
from litellm_status.api.retry import DEFAULT_TIMEOUT
from litellm_status.errors import AuthError, DecodeError, HTTPError, TransportError
from litellm_status.models import KeyInfo

KEY_INFO_PATH = "/key/info"
AUTH_STATUS_CODES = {401, 403}


def build_request(base_url: str, token: str) -> Request:
    """Build the GET request for the key/info endpoint.

    Args:
        base_url: Proxy base URL, with or without trailing slash.
        token: Bearer token for the key being inspected.

    Returns:
        Prepared urllib Request.
    """
    return Request(
        base_url.rstrip("/") + KEY_INFO_PATH,
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": f"litellm-status/{__version__}",
        },
        method="GET",
    )


def fetch_key_info(base_url: str, token: str, timeout: float = DEFAULT_TIMEOUT) -> KeyInfo:
    """Fetch the budget record for a key with a single request.

    Args:
        base_url: Proxy base URL.
        token: Bearer token.
        timeout: Socket timeout for the request in seconds.

    Returns:
        KeyInfo parsed from a 200 response.

    Raises:
        AuthError: On 401 or 403.
        HTTPError: On any other non-200 status.
        TransportError: On connection failure, DNS failure, timeout, or a
            request that cannot be sent (bad URL or header value).
        DecodeError: If the body is not the expected JSON document.
    """
    try:
        req = build_request(base_url, token)
        logger.debug(f"GET {req.full_url}")
        with urlopen(req, timeout=timeout) as response:
            status = response.status
            if status != 200:
                raise HTTPError(status, getattr(response, "reason", "") or "")
            body = response.read()
    except URLLibHTTPError as e:
        e.close()
        if e.code in AUTH_STATUS_CODES:
            raise AuthError(e.code) from None
        raise HTTPError(e.code, str(e.reason or "")) from e
    except URLError as e:
        raise TransportError(str(e.reason)) from e
    except (HTTPException, OSError) as e:
        # socket.timeout, ConnectionResetError and truncated reads land here
        raise TransportError(str(e) or type(e).__name__) from e
    except ValueError as e:
        # malformed URL (no scheme) or a header value http.client refuses
        raise TransportError(str(e)) from e

    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"body is not valid JSON ({e})") from e

    return KeyInfo.from_response(payload)


def make_fetcher(base_url: str, timeout: float = DEFAULT_TIMEOUT) -> Callable[[str], KeyInfo]:
    """Bind a base URL and timeout, leaving a single-argument fetcher.

    The returned function is what KeyInfoCache expects: token in, KeyInfo out.
    """

    def fetch(token: str) -> KeyInfo:
        return fetch_key_info(base_url, token, timeout=timeout)

    return fetch


__all__ = [
    "KEY_INFO_PATH",
    "AUTH_STATUS_CODES",
    "build_request",
    "fetch_key_info",
    "make_fetcher",
]
