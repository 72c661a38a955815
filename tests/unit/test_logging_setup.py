"""Tests for root logger configuration."""
from __future__ import annotations

import logging
from pathlib import Path

from egov_markdown.config.constants import LogLevel
from egov_markdown.config.schema import LoggingConfig
from egov_markdown.logging import configure_logging
from egov_markdown.logging.formatters import LOG_FORMAT


def test_configure_logging_adds_file_handler(tmp_path: Path, isolated_root_logger: logging.Logger) -> None:
    log_file = tmp_path / "logs" / "run.log"

    configure_logging(LoggingConfig(level=LogLevel.DEBUG, log_file=log_file))
    logging.getLogger("egov_markdown.test").debug("hello %s", "world")

    assert isolated_root_logger.level == logging.DEBUG
    assert len(isolated_root_logger.handlers) == 2
    assert all(h.formatter is not None and h.formatter._fmt == LOG_FORMAT for h in isolated_root_logger.handlers)
    for handler in isolated_root_logger.handlers:
        handler.flush()
    assert "| DEBUG | egov_markdown.test | hello world" in log_file.read_text(encoding="utf-8")


def test_reconfiguring_closes_previous_handlers(tmp_path: Path, isolated_root_logger: logging.Logger) -> None:
    """Calling configure_logging twice must not leave the first log file open."""

    configure_logging(LoggingConfig(log_file=tmp_path / "first.log"))
    first_file_handler = next(
        h for h in isolated_root_logger.handlers if isinstance(h, logging.FileHandler)
    )

    configure_logging(LoggingConfig(log_file=tmp_path / "second.log"))

    assert first_file_handler not in isolated_root_logger.handlers
    assert first_file_handler.stream is None
    file_handlers = [h for h in isolated_root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert [Path(h.baseFilename).name for h in file_handlers] == ["second.log"]
