"""Convert e-Gov law XML into Markdown."""

from egov_markdown.convert import convert_file
from egov_markdown.errors import ConversionError, MarkdownWriteError, XmlLoadError, XmlParseError

__all__ = [
    "convert_file",
    "ConversionError",
    "MarkdownWriteError",
    "XmlLoadError",
    "XmlParseError",
]
