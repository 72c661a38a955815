"""Logging formatters."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def default_formatter() -> logging.Formatter:
    """Create default logging formatter.

    Returns:
        Configured logging formatter.
    """
    return logging.Formatter(LOG_FORMAT)


__all__ = ["LOG_FORMAT", "default_formatter"]
