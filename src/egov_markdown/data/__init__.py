"""Parsers and exporters for e-Gov law XML."""

from egov_markdown.data.egov_parser import build_law_tree, parse_egov_xml, parse_law_xml
from egov_markdown.data.law_tree import LawNode, children_of
from egov_markdown.data.markdown_exporter import render_article, render_markdown

__all__ = [
    "build_law_tree",
    "parse_egov_xml",
    "parse_law_xml",
    "LawNode",
    "children_of",
    "render_article",
    "render_markdown",
]
