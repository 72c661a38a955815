"""Law tree structures and helpers."""
from __future__ import annotations

from typing import Literal, TypedDict

NodeType = Literal[
    "law",
    "part",
    "chapter",
    "section",
    "subsection",
    "division",
    "article",
    "paragraph",
    "item",
]


class LawNode(TypedDict):
    """Structured representation of a law node.

    ``title`` and ``text`` are None when the slot element is absent and an
    empty string when it is present without content.
    """

    type: NodeType
    title: str | None
    text: str | None
    children: list["LawNode"]


def children_of(node: LawNode, *types: NodeType) -> list[LawNode]:
    """Return the direct children of ``node`` having one of ``types``.

    Args:
        node: Parent node.
        types: Node types to keep.

    Returns:
        Matching children in document order.
    """
    return [child for child in node["children"] if child["type"] in types]


__all__ = ["LawNode", "NodeType", "children_of"]
