#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/ast/nodes.py
"""AST node classes for document representation.

This module defines the node model consumed by the BBCode exporter. The tree
is built by an external Org parser; each node carries its variant (``kind``),
a mapping of variant-specific properties and its ordered children.

Node Kinds
----------
The set of kinds is closed and mirrors the Org element model.

Elements are block-level constructs:
    - org-data, section, headline, paragraph, plain-list, item
    - table, table-row, quote-block, src-block, example-block, ...

Objects are inline constructs:
    - plain-text, bold, italic, underline, strike-through
    - code, verbatim, link, footnote-reference, entity, ...

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class NodeKind(str, Enum):
    """Closed set of document node variants."""

    ORG_DATA = "org-data"
    BOLD = "bold"
    CENTER_BLOCK = "center-block"
    CLOCK = "clock"
    CODE = "code"
    DRAWER = "drawer"
    DYNAMIC_BLOCK = "dynamic-block"
    ENTITY = "entity"
    EXAMPLE_BLOCK = "example-block"
    EXPORT_BLOCK = "export-block"
    EXPORT_SNIPPET = "export-snippet"
    FIXED_WIDTH = "fixed-width"
    FOOTNOTE_DEFINITION = "footnote-definition"
    FOOTNOTE_REFERENCE = "footnote-reference"
    HEADLINE = "headline"
    HORIZONTAL_RULE = "horizontal-rule"
    INLINE_SRC_BLOCK = "inline-src-block"
    INLINETASK = "inlinetask"
    ITALIC = "italic"
    ITEM = "item"
    KEYWORD = "keyword"
    LATEX_ENVIRONMENT = "latex-environment"
    LATEX_FRAGMENT = "latex-fragment"
    LINE_BREAK = "line-break"
    LINK = "link"
    NODE_PROPERTY = "node-property"
    PARAGRAPH = "paragraph"
    PLAIN_LIST = "plain-list"
    PLAIN_TEXT = "plain-text"
    PLANNING = "planning"
    PROPERTY_DRAWER = "property-drawer"
    QUOTE_BLOCK = "quote-block"
    RADIO_TARGET = "radio-target"
    SECTION = "section"
    SPECIAL_BLOCK = "special-block"
    SRC_BLOCK = "src-block"
    STATISTICS_COOKIE = "statistics-cookie"
    STRIKE_THROUGH = "strike-through"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    TABLE = "table"
    TABLE_CELL = "table-cell"
    TABLE_ROW = "table-row"
    TARGET = "target"
    TIMESTAMP = "timestamp"
    UNDERLINE = "underline"
    VERBATIM = "verbatim"
    VERSE_BLOCK = "verse-block"

    @property
    def visit_method_name(self) -> str:
        """Name of the visitor method handling this kind (e.g. ``visit_plain_list``)."""
        return "visit_" + self.value.replace("-", "_")

    @property
    def is_object(self) -> bool:
        """Whether this kind is an inline object rather than a block element."""
        return self in OBJECT_KINDS


OBJECT_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.BOLD,
        NodeKind.CODE,
        NodeKind.ENTITY,
        NodeKind.EXPORT_SNIPPET,
        NodeKind.FOOTNOTE_REFERENCE,
        NodeKind.INLINE_SRC_BLOCK,
        NodeKind.ITALIC,
        NodeKind.LATEX_FRAGMENT,
        NodeKind.LINE_BREAK,
        NodeKind.LINK,
        NodeKind.PLAIN_TEXT,
        NodeKind.RADIO_TARGET,
        NodeKind.STATISTICS_COOKIE,
        NodeKind.STRIKE_THROUGH,
        NodeKind.SUBSCRIPT,
        NodeKind.SUPERSCRIPT,
        NodeKind.TABLE_CELL,
        NodeKind.TARGET,
        NodeKind.TIMESTAMP,
        NodeKind.UNDERLINE,
        NodeKind.VERBATIM,
    }
)


@dataclass
class Node:
    """A single node of the document tree.

    Nodes are built once by the parser and never mutated by the exporter.

    Parameters
    ----------
    kind : NodeKind
        Variant of this node
    properties : dict, default = empty dict
        Variant-specific attributes (``value``, ``type``, ``path``,
        ``raw_link``, ``tag``, ``label``, ``level``, ``title``, ...)
    children : list of Node, default = empty list
        Ordered child nodes; empty for leaves

    Examples
    --------
        >>> bold = Node(NodeKind.BOLD, children=[Node(NodeKind.PLAIN_TEXT, {"value": "hi"})])
        >>> bold.kind.value
        'bold'

    """

    kind: NodeKind
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, NodeKind):
            self.kind = NodeKind(self.kind)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with one ``visit_*`` method per node kind

        Returns
        -------
        Any
            Result of the visitor method matching this node's kind

        """
        return getattr(visitor, self.kind.visit_method_name)(self)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a property value, or ``default`` when it is absent."""
        return self.properties.get(name, default)

    @property
    def post_blank(self) -> int:
        """Number of blank lines (elements) or spaces (objects) following the node."""
        return int(self.properties.get("post_blank", 0) or 0)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in document order.

    Secondary strings stored in properties (headline ``title``, item ``tag``)
    are included so that references inside them are seen too.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        nested: list[Node] = []
        for key in ("title", "tag"):
            value = node.properties.get(key)
            if isinstance(value, list):
                nested.extend(child for child in value if isinstance(child, Node))
        nested.extend(node.children)
        stack.extend(reversed(nested))
