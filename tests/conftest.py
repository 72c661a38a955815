"""Shared pytest fixtures."""
from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture
def isolated_root_logger() -> Iterator[logging.Logger]:
    """Give the test an empty root logger and restore the original afterwards."""

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)
