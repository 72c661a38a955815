"""Logging setup utilities."""
from __future__ import annotations

import logging

from egov_markdown.config.schema import LoggingConfig
from egov_markdown.logging.formatters import default_formatter


def configure_logging(cfg: LoggingConfig) -> None:
    """Configure root logger.

    Args:
        cfg: Logging configuration. A file handler is added when `log_file` is set.
            Handlers already on the root logger are closed and replaced.
    """
    fmt = default_formatter()
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    handlers: list[logging.Handler] = [stream_handler]

    if cfg.log_file is not None:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(cfg.log_file, encoding="utf-8")
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(cfg.level.value.value)
    for old in root.handlers:
        old.close()
    root.handlers = handlers


__all__ = ["configure_logging"]
