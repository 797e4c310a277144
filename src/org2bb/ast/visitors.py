#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for processing document trees.
``NodeVisitor`` declares one abstract ``visit_*`` method per ``NodeKind``, so
a visitor that forgets a node kind cannot be instantiated. Kinds a visitor
does not support must still be handled explicitly, typically by raising.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from org2bb.ast.nodes import Node, NodeKind


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node kind. Dispatch
    goes through :meth:`Node.accept`, which calls the method named after the
    node's kind.

    Examples
    --------
    A visitor must cover every kind before it can be created:

        >>> class Incomplete(NodeVisitor):
        ...     def visit_bold(self, node):
        ...         return "bold"
        >>> Incomplete()
        Traceback (most recent call last):
        TypeError: Can't instantiate abstract class Incomplete ...

    """

    def visit(self, node: Node) -> Any:
        """Dispatch ``node`` to the matching ``visit_*`` method."""
        return node.accept(self)

    @abstractmethod
    def visit_org_data(self, node: Node) -> Any:
        """Visit an org-data node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Node) -> Any:
        """Visit a bold node."""
        pass

    @abstractmethod
    def visit_center_block(self, node: Node) -> Any:
        """Visit a center-block node."""
        pass

    @abstractmethod
    def visit_clock(self, node: Node) -> Any:
        """Visit a clock node."""
        pass

    @abstractmethod
    def visit_code(self, node: Node) -> Any:
        """Visit a code node."""
        pass

    @abstractmethod
    def visit_drawer(self, node: Node) -> Any:
        """Visit a drawer node."""
        pass

    @abstractmethod
    def visit_dynamic_block(self, node: Node) -> Any:
        """Visit a dynamic-block node."""
        pass

    @abstractmethod
    def visit_entity(self, node: Node) -> Any:
        """Visit an entity node."""
        pass

    @abstractmethod
    def visit_example_block(self, node: Node) -> Any:
        """Visit an example-block node."""
        pass

    @abstractmethod
    def visit_export_block(self, node: Node) -> Any:
        """Visit an export-block node."""
        pass

    @abstractmethod
    def visit_export_snippet(self, node: Node) -> Any:
        """Visit an export-snippet node."""
        pass

    @abstractmethod
    def visit_fixed_width(self, node: Node) -> Any:
        """Visit a fixed-width node."""
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: Node) -> Any:
        """Visit a footnote-definition node."""
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: Node) -> Any:
        """Visit a footnote-reference node."""
        pass

    @abstractmethod
    def visit_headline(self, node: Node) -> Any:
        """Visit a headline node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: Node) -> Any:
        """Visit a horizontal-rule node."""
        pass

    @abstractmethod
    def visit_inline_src_block(self, node: Node) -> Any:
        """Visit an inline-src-block node."""
        pass

    @abstractmethod
    def visit_inlinetask(self, node: Node) -> Any:
        """Visit an inlinetask node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Node) -> Any:
        """Visit an italic node."""
        pass

    @abstractmethod
    def visit_item(self, node: Node) -> Any:
        """Visit an item node."""
        pass

    @abstractmethod
    def visit_keyword(self, node: Node) -> Any:
        """Visit a keyword node."""
        pass

    @abstractmethod
    def visit_latex_environment(self, node: Node) -> Any:
        """Visit a latex-environment node."""
        pass

    @abstractmethod
    def visit_latex_fragment(self, node: Node) -> Any:
        """Visit a latex-fragment node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: Node) -> Any:
        """Visit a line-break node."""
        pass

    @abstractmethod
    def visit_link(self, node: Node) -> Any:
        """Visit a link node."""
        pass

    @abstractmethod
    def visit_node_property(self, node: Node) -> Any:
        """Visit a node-property node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Node) -> Any:
        """Visit a paragraph node."""
        pass

    @abstractmethod
    def visit_plain_list(self, node: Node) -> Any:
        """Visit a plain-list node."""
        pass

    @abstractmethod
    def visit_plain_text(self, node: Node) -> Any:
        """Visit a plain-text node."""
        pass

    @abstractmethod
    def visit_planning(self, node: Node) -> Any:
        """Visit a planning node."""
        pass

    @abstractmethod
    def visit_property_drawer(self, node: Node) -> Any:
        """Visit a property-drawer node."""
        pass

    @abstractmethod
    def visit_quote_block(self, node: Node) -> Any:
        """Visit a quote-block node."""
        pass

    @abstractmethod
    def visit_radio_target(self, node: Node) -> Any:
        """Visit a radio-target node."""
        pass

    @abstractmethod
    def visit_section(self, node: Node) -> Any:
        """Visit a section node."""
        pass

    @abstractmethod
    def visit_special_block(self, node: Node) -> Any:
        """Visit a special-block node."""
        pass

    @abstractmethod
    def visit_src_block(self, node: Node) -> Any:
        """Visit a src-block node."""
        pass

    @abstractmethod
    def visit_statistics_cookie(self, node: Node) -> Any:
        """Visit a statistics-cookie node."""
        pass

    @abstractmethod
    def visit_strike_through(self, node: Node) -> Any:
        """Visit a strike-through node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Node) -> Any:
        """Visit a subscript node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Node) -> Any:
        """Visit a superscript node."""
        pass

    @abstractmethod
    def visit_table(self, node: Node) -> Any:
        """Visit a table node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: Node) -> Any:
        """Visit a table-cell node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: Node) -> Any:
        """Visit a table-row node."""
        pass

    @abstractmethod
    def visit_target(self, node: Node) -> Any:
        """Visit a target node."""
        pass

    @abstractmethod
    def visit_timestamp(self, node: Node) -> Any:
        """Visit a timestamp node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Node) -> Any:
        """Visit an underline node."""
        pass

    @abstractmethod
    def visit_verbatim(self, node: Node) -> Any:
        """Visit a verbatim node."""
        pass

    @abstractmethod
    def visit_verse_block(self, node: Node) -> Any:
        """Visit a verse-block node."""
        pass


def _missing_visit_methods() -> list[str]:
    return [kind.value for kind in NodeKind if not hasattr(NodeVisitor, kind.visit_method_name)]


if _missing_visit_methods():  # pragma: no cover - guards edits to NodeKind
    raise TypeError(f"NodeVisitor does not declare visit methods for: {', '.join(_missing_visit_methods())}")
