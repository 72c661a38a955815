"""Conversion pipeline: load XML, render Markdown, save."""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from egov_markdown.data.egov_parser import parse_egov_xml
from egov_markdown.data.markdown_exporter import render_markdown
from egov_markdown.errors import MarkdownWriteError, XmlLoadError

logger = logging.getLogger(__name__)


def load_xml(xml_path: Path) -> str:
    """Read an XML document as UTF-8 text, dropping a leading BOM.

    Args:
        xml_path: Source file path.

    Returns:
        File contents.

    Raises:
        XmlLoadError: When the file is missing, unreadable or not UTF-8.
    """
    try:
        return xml_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise XmlLoadError(f"Failed to read {xml_path}: {exc}") from exc


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def save_markdown(content: str, output_path: Path) -> None:
    """Write Markdown text verbatim as UTF-8.

    The text goes to a temporary file next to the destination, which then
    replaces the destination in one step. An existing destination keeps its
    permission bits; a new one gets the usual umask-derived mode.

    Args:
        content: Markdown text.
        output_path: Destination file path.

    Raises:
        MarkdownWriteError: When the destination cannot be written.
    """
    tmp_name: str | None = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fp:
            fp.write(content)
        if output_path.exists():
            shutil.copymode(output_path, tmp_name)
        else:
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, output_path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise MarkdownWriteError(f"Failed to write {output_path}: {exc}") from exc


def convert_xml_text(xml_text: str) -> str:
    """Convert e-Gov XML text to Markdown.

    Args:
        xml_text: Raw XML document text.

    Returns:
        Markdown text.
    """
    return render_markdown(parse_egov_xml(xml_text))


def convert_file(xml_path: Path, output_path: Path) -> str:
    """Convert one e-Gov XML file into one Markdown file.

    Args:
        xml_path: Source XML path.
        output_path: Destination Markdown path.

    Returns:
        The Markdown text that was written.

    Raises:
        ConversionError: When loading, parsing or writing fails. Nothing is
            written in that case.
    """
    logger.info("Loading XML from %s", xml_path)
    xml_text = load_xml(xml_path)

    logger.info("Converting to Markdown")
    markdown = convert_xml_text(xml_text)

    logger.info("Saving Markdown to %s", output_path)
    save_markdown(markdown, output_path)

    logger.info("Conversion completed (%d chars)", len(markdown))
    return markdown


__all__ = ["load_xml", "save_markdown", "convert_xml_text", "convert_file"]
