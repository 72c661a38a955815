"""Configuration schema definitions using Pydantic."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from egov_markdown.config.constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, LogLevel


def _coerce_config_enum(enum_cls: type, value: object):
    """Coerce string or enum value to the given ConfigOption Enum."""

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:  # type: ignore[attr-defined]
            # member.value is ConfigOption; member.value.value is the string in config
            if getattr(member.value, "value", None) == value.upper() or member.name == value.upper():
                return member
    raise ValueError(f"Invalid value {value!r} for enum {enum_cls.__name__}")


class ConversionConfig(BaseModel):
    """Source and destination of a conversion run."""

    input_path: Path = Field(Path(DEFAULT_INPUT_PATH), description="e-Gov XML file to convert")
    output_path: Path = Field(Path(DEFAULT_OUTPUT_PATH), description="Markdown file to write")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    log_file: Optional[Path] = Field(None, description="Optional log file path")

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_log_level(cls, v: object) -> LogLevel:
        return _coerce_config_enum(LogLevel, v)


class AppConfig(BaseModel):
    """Full application configuration."""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["AppConfig", "ConversionConfig", "LoggingConfig"]
