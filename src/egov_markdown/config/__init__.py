"""Configuration utilities for egov-markdown."""

from egov_markdown.config.loader import load_config
from egov_markdown.config.schema import AppConfig

__all__ = ["load_config", "AppConfig"]
