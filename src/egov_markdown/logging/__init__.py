"""Logging helpers for egov-markdown."""

from egov_markdown.logging.setup import configure_logging

__all__ = ["configure_logging"]
