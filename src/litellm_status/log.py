"""Logging setup.

Stdout carries the status line, so log output only ever goes to stderr and
only when debugging is switched on.
"""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {name}:{line} - {message}"


def setup_logging(debug: bool = False) -> None:
    """Configure loguru sinks.

    Args:
        debug: If True, send DEBUG and above to stderr; otherwise log nothing.
    """
    logger.remove()
    if debug:
        logger.add(sys.stderr, level="DEBUG", format=LOG_FORMAT, colorize=True)


__all__ = ["setup_logging"]
