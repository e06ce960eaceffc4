"""Logging setup for the calculator."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "cylinder_calc"


def setup_logger(name: str = LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """
    Configure and return the application logger.

    Args:
        name: Logger name.
        level: Logging level. Applied again on every call.

    Returns:
        Configured logger, writing to stderr.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)
    log.propagate = False
    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the application logger, or a child of it for a dotted `name`."""
    return logging.getLogger(name)
