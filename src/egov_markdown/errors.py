"""Error types raised by the conversion pipeline."""
from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for failures that abort a conversion run."""


class XmlLoadError(ConversionError):
    """Raised when the source XML file cannot be read."""


class XmlParseError(ConversionError):
    """Raised when the source text is not well-formed XML."""


class MarkdownWriteError(ConversionError):
    """Raised when the Markdown output cannot be written."""


__all__ = ["ConversionError", "XmlLoadError", "XmlParseError", "MarkdownWriteError"]
