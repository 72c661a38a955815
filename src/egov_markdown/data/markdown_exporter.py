"""Export law trees to Markdown."""
from __future__ import annotations

from egov_markdown.data.law_tree import LawNode, children_of

ARTICLE_HEADING_LEVEL = 4
ITEM_INDENT = "   "


def _heading(title: str | None, level: int) -> str:
    """Return a heading line followed by a blank line, or nothing for empty titles."""
    if not title:
        return ""
    return f"{'#' * level} {title}\n\n"


def _items(paragraph: LawNode, indent: str) -> str:
    """Render the items of a paragraph as an ordered list.

    Numbers follow the item position, so an empty item still consumes its number.

    Args:
        paragraph: Paragraph node owning the items.
        indent: Prefix placed before each list marker.

    Returns:
        One line per non-empty item.
    """
    return "".join(
        f"{indent}{idx}. {item['text']}\n"
        for idx, item in enumerate(children_of(paragraph, "item"), start=1)
        if item["text"]
    )


def render_article(article: LawNode) -> str:
    """Render one article.

    A single paragraph is written as plain text with its items as a flat list.
    Several paragraphs become a numbered list with items nested beneath them.
    Items are only written when their paragraph has sentence text.

    Args:
        article: Article node.

    Returns:
        Markdown fragment for the article.
    """
    out = _heading(article["title"], ARTICLE_HEADING_LEVEL)
    paragraphs = children_of(article, "paragraph")

    if len(paragraphs) > 1:
        for idx, paragraph in enumerate(paragraphs, start=1):
            if paragraph["text"]:
                out += f"{idx}. {paragraph['text']}\n"
                out += _items(paragraph, ITEM_INDENT)
        out += "\n"
    elif len(paragraphs) == 1:
        paragraph = paragraphs[0]
        if paragraph["text"]:
            out += f"{paragraph['text']}\n\n"
            if children_of(paragraph, "item"):
                out += _items(paragraph, "") + "\n"

    return out


def _render_grouped_articles(node: LawNode, level: int) -> str:
    """Render articles of a section-like node, heading nested groups one level deeper."""
    out = ""
    for child in node["children"]:
        if child["type"] == "article":
            out += render_article(child)
        else:
            out += _heading(child["title"], level + 1)
            out += _render_grouped_articles(child, level + 1)
    return out


def render_chapter(chapter: LawNode) -> str:
    """Render a chapter.

    Articles grouped in sections come before articles placed directly in the
    chapter, whatever their order in the source.

    Args:
        chapter: Chapter node.

    Returns:
        Markdown fragment for the chapter.
    """
    out = _heading(chapter["title"], 3)
    for section in children_of(chapter, "section"):
        out += _heading(section["title"], 4)
        out += _render_grouped_articles(section, 4)
    for article in children_of(chapter, "article"):
        out += render_article(article)
    return out


def render_part(part: LawNode) -> str:
    out = _heading(part["title"], 2)
    for chapter in children_of(part, "chapter"):
        out += render_chapter(chapter)
    return out


def render_markdown(law: LawNode) -> str:
    """Render a full law tree to Markdown.

    Parts come first, then chapters outside any part, then articles placed
    directly in the law body.

    Args:
        law: Root law node.

    Returns:
        Markdown document text.
    """
    out = _heading(law["title"], 1)
    for part in children_of(law, "part"):
        out += render_part(part)
    for chapter in children_of(law, "chapter"):
        out += render_chapter(chapter)
    for article in children_of(law, "article"):
        out += render_article(article)
    return out


__all__ = ["render_markdown", "render_part", "render_chapter", "render_article"]
