"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "colortree"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Route ``colortree`` log records to stderr at ``level``.

    Repeated calls replace the handler instead of stacking duplicates. Records
    never reach the render sink, which is usually stdout.
    """
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logging", "LOGGER_NAME", "LOG_FORMAT"]
