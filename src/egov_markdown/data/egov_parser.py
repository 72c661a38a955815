"""Parser for e-Gov XML into structured law trees."""
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterator

from egov_markdown.data.law_tree import LawNode, NodeType
from egov_markdown.errors import XmlParseError

PARSER_ERROR_TAG = "parsererror"

# ECMAScript WhiteSpace and LineTerminator code points.
WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")


def normalize_title(text: str) -> str:
    """Trim surrounding whitespace, keeping inner whitespace."""
    return text.strip(WHITESPACE)


def normalize_sentence(text: str) -> str:
    """Remove every whitespace character, including line breaks."""
    return _WHITESPACE_RUN.sub("", text)


def _local_name(tag: str) -> str:
    """Return the local tag name without namespaces.

    Args:
        tag: Element tag which may contain an XML namespace.

    Returns:
        Local tag name.
    """
    return tag.split("}", 1)[-1]


def _iter_direct(element: ET.Element, *tags: str) -> Iterator[ET.Element]:
    """Yield direct children of ``element`` whose local name is in ``tags``."""
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) in tags:
            yield child


def _first_direct(element: ET.Element, tag: str) -> ET.Element | None:
    return next(_iter_direct(element, tag), None)


def _title(element: ET.Element, title_tag: str) -> str | None:
    """Return the trimmed title text, keeping inner whitespace.

    Args:
        element: Element owning the title.
        title_tag: Tag name like 'ChapterTitle'.

    Returns:
        Trimmed text, or None when the title element is absent.
    """
    title_el = _first_direct(element, title_tag)
    if title_el is None:
        return None
    return normalize_title("".join(title_el.itertext()))


def _sentence(element: ET.Element, sentence_tag: str) -> str | None:
    """Return sentence text with every whitespace character removed.

    Args:
        element: Element owning the sentence container.
        sentence_tag: Tag name like 'ParagraphSentence' or 'ItemSentence'.

    Returns:
        Normalized text, or None when the sentence element is absent.
    """
    sentence_el = _first_direct(element, sentence_tag)
    if sentence_el is None:
        return None
    return normalize_sentence("".join(sentence_el.itertext()))


def _node(node_type: NodeType, title: str | None, text: str | None, children: list[LawNode]) -> LawNode:
    return {"type": node_type, "title": title, "text": text, "children": children}


def _parse_item(item_el: ET.Element) -> LawNode:
    return _node("item", None, _sentence(item_el, "ItemSentence"), [])


def _parse_paragraph(para_el: ET.Element) -> LawNode:
    """Parse a <Paragraph> element and its direct <Item> children."""
    items = [_parse_item(item_el) for item_el in _iter_direct(para_el, "Item")]
    return _node("paragraph", None, _sentence(para_el, "ParagraphSentence"), items)


def _parse_article(article_el: ET.Element) -> LawNode:
    """Parse an <Article> element into a LawNode.

    Args:
        article_el: XML element for the article.

    Returns:
        Parsed article node including paragraph children.
    """
    paragraphs = [_parse_paragraph(para_el) for para_el in _iter_direct(article_el, "Paragraph")]
    return _node("article", _title(article_el, "ArticleTitle"), None, paragraphs)


def _parse_division(division_el: ET.Element) -> LawNode:
    articles = [_parse_article(el) for el in _iter_direct(division_el, "Article")]
    return _node("division", _title(division_el, "DivisionTitle"), None, articles)


def _parse_subsection(subsection_el: ET.Element) -> LawNode:
    """Parse a <Subsection> element into a LawNode.

    Args:
        subsection_el: XML element for the subsection.

    Returns:
        Parsed subsection node with division and article children in document order.
    """
    children: list[LawNode] = []
    for child_el in _iter_direct(subsection_el, "Division", "Article"):
        if _local_name(child_el.tag) == "Division":
            children.append(_parse_division(child_el))
        else:
            children.append(_parse_article(child_el))
    return _node("subsection", _title(subsection_el, "SubsectionTitle"), None, children)


def _parse_section(section_el: ET.Element) -> LawNode:
    """Parse a <Section> element into a LawNode.

    Args:
        section_el: XML element for the section.

    Returns:
        Parsed section node with its children in document order.
    """
    children: list[LawNode] = []
    for child_el in _iter_direct(section_el, "Subsection", "Division", "Article"):
        tag = _local_name(child_el.tag)
        if tag == "Subsection":
            children.append(_parse_subsection(child_el))
        elif tag == "Division":
            children.append(_parse_division(child_el))
        else:
            children.append(_parse_article(child_el))
    return _node("section", _title(section_el, "SectionTitle"), None, children)


def _parse_chapter(chapter_el: ET.Element) -> LawNode:
    """Parse a <Chapter> element into a LawNode.

    Sections and direct articles are kept in document order; the exporter
    decides how to sequence them.

    Args:
        chapter_el: XML element for the chapter.

    Returns:
        Parsed chapter node.
    """
    children: list[LawNode] = []
    for child_el in _iter_direct(chapter_el, "Section", "Article"):
        if _local_name(child_el.tag) == "Section":
            children.append(_parse_section(child_el))
        else:
            children.append(_parse_article(child_el))
    return _node("chapter", _title(chapter_el, "ChapterTitle"), None, children)


def _parse_part(part_el: ET.Element) -> LawNode:
    chapters = [_parse_chapter(el) for el in _iter_direct(part_el, "Chapter")]
    return _node("part", _title(part_el, "PartTitle"), None, chapters)


def _parse_body(body_el: ET.Element) -> list[LawNode]:
    """Parse the direct parts, chapters and articles of a law body.

    Args:
        body_el: <LawBody> or <MainProvision> element.

    Returns:
        Top-level nodes in document order.
    """
    children: list[LawNode] = []
    for el in _iter_direct(body_el, "Part", "Chapter", "Article"):
        tag = _local_name(el.tag)
        if tag == "Part":
            children.append(_parse_part(el))
        elif tag == "Chapter":
            children.append(_parse_chapter(el))
        else:
            children.append(_parse_article(el))
    return children


def parse_law_xml(xml_text: str) -> ET.Element:
    """Parse raw XML text, failing on malformed input.

    Args:
        xml_text: Raw XML document text.

    Returns:
        Root element of the document.

    Raises:
        XmlParseError: When the parser rejects the text or the document
            carries a ``parsererror`` node.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise XmlParseError(f"XML parse error: {exc}") from exc

    for el in root.iter():
        if isinstance(el.tag, str) and _local_name(el.tag) == PARSER_ERROR_TAG:
            detail = "".join(el.itertext()).strip()
            raise XmlParseError(f"XML parse error: {detail}")
    return root


def build_law_tree(root: ET.Element) -> LawNode:
    """Build a structured law tree from a parsed <Law> element.

    Args:
        root: Root element returned by `parse_law_xml`.

    Returns:
        `LawNode` tree preserving the document hierarchy.
    """
    law_body = _first_direct(root, "LawBody")

    title = _title(root, "LawTitle")
    if title is None and law_body is not None:
        title = _title(law_body, "LawTitle")

    children: list[LawNode] = []
    if law_body is not None:
        main = _first_direct(law_body, "MainProvision")
        children = _parse_body(main if main is not None else law_body)

    return _node("law", title, None, children)


def parse_egov_xml(xml_text: str) -> LawNode:
    """Parse e-Gov XML text into a structured law tree.

    Args:
        xml_text: Raw XML document text.

    Returns:
        Parsed `LawNode` tree.
    """
    return build_law_tree(parse_law_xml(xml_text))


__all__ = [
    "parse_law_xml",
    "build_law_tree",
    "parse_egov_xml",
    "normalize_title",
    "normalize_sentence",
    "PARSER_ERROR_TAG",
    "WHITESPACE",
]
