#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/ast/builder.py
"""Builder helpers for constructing document trees.

These helpers keep tree construction short in code that assembles documents
by hand (tests, examples, adapters around external parsers).

Examples
--------
>>> doc = document(
...     paragraph(text("See "), bold(text("this")), text(".\\n")),
... )

"""

from __future__ import annotations

from typing import Any, Sequence

from org2bb.ast.nodes import Node, NodeKind
from org2bb.constants import FootnoteType, ListType


def node(kind: NodeKind | str, *children: Node, **properties: Any) -> Node:
    """Create a node of any kind with the given children and properties."""
    return Node(kind=NodeKind(kind), properties=dict(properties), children=list(children))


def text(value: str, post_blank: int = 0) -> Node:
    """Create a plain-text node."""
    properties: dict[str, Any] = {"value": value}
    if post_blank:
        properties["post_blank"] = post_blank
    return Node(NodeKind.PLAIN_TEXT, properties)


def document(*children: Node) -> Node:
    """Create the root ``org-data`` node."""
    return node(NodeKind.ORG_DATA, *children)


def section(*children: Node) -> Node:
    return node(NodeKind.SECTION, *children)


def paragraph(*children: Node) -> Node:
    return node(NodeKind.PARAGRAPH, *children)


def bold(*children: Node) -> Node:
    return node(NodeKind.BOLD, *children)


def italic(*children: Node) -> Node:
    return node(NodeKind.ITALIC, *children)


def underline(*children: Node) -> Node:
    return node(NodeKind.UNDERLINE, *children)


def strike_through(*children: Node) -> Node:
    return node(NodeKind.STRIKE_THROUGH, *children)


def code(value: str) -> Node:
    return node(NodeKind.CODE, value=value)


def verbatim(value: str) -> Node:
    return node(NodeKind.VERBATIM, value=value)


def headline(
    title: str | Sequence[Node],
    *children: Node,
    level: int = 1,
    footnote_section: bool = False,
) -> Node:
    """Create a headline node.

    Parameters
    ----------
    title : str or sequence of Node
        Headline title, either literal text or a list of inline nodes
    *children : Node
        Section and sub-headlines below the headline
    level : int, default = 1
        Absolute headline level (number of stars)
    footnote_section : bool, default = False
        Mark the headline as the document's footnote section

    """
    properties: dict[str, Any] = {"title": title if isinstance(title, str) else list(title), "level": level}
    if footnote_section:
        properties["footnote_section_p"] = True
    return Node(NodeKind.HEADLINE, properties, list(children))


def plain_list(list_type: ListType | str, *items: Node) -> Node:
    return node(NodeKind.PLAIN_LIST, *items, type=list_type)


def item(*children: Node, tag: str | Sequence[Node] | None = None) -> Node:
    """Create a list item; ``tag`` is the term of a descriptive item."""
    properties: dict[str, Any] = {}
    if tag is not None:
        properties["tag"] = tag if isinstance(tag, str) else list(tag)
    return Node(NodeKind.ITEM, properties, list(children))


def link(raw_link: str, *description: Node) -> Node:
    """Create a link node from its raw target, splitting off the scheme.

    ``"https://example.com"`` yields type ``https`` and path ``//example.com``.
    Targets without a scheme are typed ``fuzzy``, as the Org parser does.
    """
    link_type, sep, path = raw_link.partition(":")
    if not sep:
        link_type, path = "fuzzy", raw_link
    return node(NodeKind.LINK, *description, type=link_type, path=path, raw_link=raw_link)


def footnote_reference(label: str, footnote_type: FootnoteType | str = "standard", *inline: Node) -> Node:
    return node(NodeKind.FOOTNOTE_REFERENCE, *inline, label=label, type=footnote_type)


def footnote_definition(label: str, *children: Node) -> Node:
    return node(NodeKind.FOOTNOTE_DEFINITION, *children, label=label)


def table(*rows: Node) -> Node:
    return node(NodeKind.TABLE, *rows)


def table_row(*cells: Node, rule: bool = False) -> Node:
    """Create a table row; rule rows (horizontal separators) carry no cells."""
    return node(NodeKind.TABLE_ROW, *cells, type="rule" if rule else "standard")


def table_cell(*children: Node) -> Node:
    return node(NodeKind.TABLE_CELL, *children)


def src_block(value: str, language: str | None = None) -> Node:
    return node(NodeKind.SRC_BLOCK, value=value, language=language)


def example_block(value: str) -> Node:
    return node(NodeKind.EXAMPLE_BLOCK, value=value)


def fixed_width(value: str) -> Node:
    return node(NodeKind.FIXED_WIDTH, value=value)


def quote_block(*children: Node) -> Node:
    return node(NodeKind.QUOTE_BLOCK, *children)


def entity(name: str, utf8: str) -> Node:
    return node(NodeKind.ENTITY, name=name, utf8=utf8)


def line_break() -> Node:
    return node(NodeKind.LINE_BREAK)


def horizontal_rule() -> Node:
    return node(NodeKind.HORIZONTAL_RULE)
