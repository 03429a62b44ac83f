"""Logging setup for the command-line entry point.

Standard output carries the command results line by line, so log
records always go to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure the ``vending`` logger hierarchy.

    Safe to call more than once; the handler is replaced, not duplicated.
    """
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger = logging.getLogger("vending")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug("Logging configured: stderr, level=%s", logging.getLevelName(logger.level))
