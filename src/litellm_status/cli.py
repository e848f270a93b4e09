"""Command-line interface for litellm-status.

This module provides the entry point Claude Code runs as a status line
command: read the session JSON from stdin, fetch the key budget, print one
line.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import platform
import sys

from loguru import logger

from litellm_status._version import __version__
from litellm_status.api.cache import KeyInfoCache
from litellm_status.api.client import make_fetcher
from litellm_status.config.settings import Settings, load_settings
from litellm_status.display.colors import disable_colors
from litellm_status.display.status import format_failure, format_status_line
from litellm_status.errors import ExitCode, LiteLLMStatusError, get_exit_code
from litellm_status.log import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="litellm-status",
        description="Show LiteLLM proxy key budget usage in the Claude Code status line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  litellm-status              Print the colored budget status line
  litellm-status --json       Print the raw budget record as JSON
  litellm-status --debug      Log cache and retry decisions to stderr

Environment:
  ANTHROPIC_BASE_URL / LITELLM_PROXY_URL        LiteLLM proxy base URL
  ANTHROPIC_AUTH_TOKEN / LITELLM_PROXY_API_KEY  Key to inspect
  LITELLM_STATUS_CACHE_TTL, LITELLM_STATUS_TIMEOUT, LITELLM_STATUS_MAX_RETRIES,
  LITELLM_STATUS_INITIAL_BACKOFF, LITELLM_STATUS_COOLDOWN (seconds)
  LITELLM_STATUS_DEBUG=1, NO_COLOR=1

Claude Code settings.json:
  "statusLine": {"type": "command", "command": "litellm-status"}
""",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version information and exit.",
    )
    parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        help="Output the budget record as JSON instead of the status line.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log cache, retry and cooldown decisions to stderr.",
    )
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit non-zero when the budget could not be fetched.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Per-request timeout (default: 10).",
    )

    return parser


def print_version() -> None:
    """Print version and system information."""
    print(
        f"litellm-status {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


def drain_stdin() -> None:
    """Consume the session JSON Claude Code writes to stdin; it is not used."""
    stdin = sys.stdin
    if stdin is None:
        return
    try:
        if not stdin.isatty():
            stdin.read()
    except (OSError, ValueError):
        logger.debug("stdin not readable, skipping")


def build_cache(settings: Settings) -> KeyInfoCache:
    """Create the cache/cooldown state machine for the configured proxy."""
    return KeyInfoCache(
        make_fetcher(settings.base_url, timeout=settings.timeout),
        ttl=settings.cache_ttl,
        cooldown=settings.cooldown,
        max_retries=settings.max_retries,
        base_delay=settings.initial_backoff,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the litellm-status CLI.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:]).

    Returns:
        Process exit code. Always 0 unless --exit-code is given, because
        status line hosts treat a failing command as a broken integration.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        disable_colors()

    if args.version:
        print_version()
        return ExitCode.SUCCESS

    settings = load_settings()
    if args.timeout is not None:
        settings = dataclasses.replace(settings, timeout=args.timeout)
    setup_logging(args.debug or settings.debug)

    drain_stdin()

    try:
        settings.require_credentials()
        cache = build_cache(settings)
        info = cache.get_key_info(settings.token)
    except LiteLLMStatusError as e:
        logger.debug(e.format_full())
        print(format_failure(e))
        return get_exit_code(e) if args.exit_code else ExitCode.SUCCESS
    except Exception as e:
        # The host shows stdout verbatim; never leak a traceback into it
        logger.opt(exception=e).debug("Unexpected error")
        print(format_failure(e))
        return get_exit_code(e) if args.exit_code else ExitCode.SUCCESS

    if args.json:
        print(json.dumps(info.to_dict(), indent=2))
    else:
        print(format_status_line(info))
    return ExitCode.SUCCESS


__all__ = [
    "create_parser",
    "print_version",
    "drain_stdin",
    "build_cache",
    "main",
]
