"""Constant enumerations for configuration options."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ConfigOption(NamedTuple):
    """Metadata for a configuration option."""

    value: str
    description: str
    default: bool = False


class LogLevel(Enum):
    """Logging level options."""

    DEBUG = ConfigOption("DEBUG", "Verbose debug logging")
    INFO = ConfigOption("INFO", "Standard info logging", True)
    WARNING = ConfigOption("WARNING", "Warnings only")
    ERROR = ConfigOption("ERROR", "Errors only")


DEFAULT_INPUT_PATH = "civil-code.xml"
DEFAULT_OUTPUT_PATH = "civil-code.md"

__all__ = [
    "ConfigOption",
    "LogLevel",
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_PATH",
]
