#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/renderers/bbcode.py
"""BBCode rendering from AST.

This module provides the BBCodeRenderer class which transcodes an Org
document tree into BBCode forum markup. The tree is folded bottom-up: the
children of a node are transcoded first, left to right, and the node's
visit method combines their output with the node's own properties.

Only a fixed tag vocabulary is produced: ``b``, ``u``, ``i``, ``s``,
``font=monospace``, ``code``, ``list``/``list=1``, ``*``, ``url=``, ``quote``,
``table``, ``tr``, ``td``, ``hr`` and ``br``. Node kinds that cannot be
expressed with it raise :class:`UnsupportedConstructError`, which aborts the
whole pass.

"""

from __future__ import annotations

import logging
import textwrap
from typing import Any, get_args

from org2bb.ast.nodes import Node, NodeKind
from org2bb.ast.visitors import NodeVisitor
from org2bb.constants import (
    LIST_BULLET,
    MONOSPACE_FONT,
    ORDERED_LIST_START,
    TAG_BOLD,
    TAG_CODE,
    TAG_FONT,
    TAG_HORIZONTAL_RULE,
    TAG_ITALIC,
    TAG_LINE_BREAK,
    TAG_LIST,
    TAG_QUOTE,
    TAG_STRIKE,
    TAG_TABLE,
    TAG_TABLE_CELL,
    TAG_TABLE_ROW,
    TAG_UNDERLINE,
    ListType,
)
from org2bb.exceptions import RenderingError, UnsupportedConstructError
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.renderers.base import BaseRenderer
from org2bb.renderers.context import ExportContext
from org2bb.utils.footnotes import format_footnote_reference, render_footnote_section
from org2bb.utils.headlines import format_headline
from org2bb.utils.links import resolve_link
from org2bb.utils.tags import as_block, wrap, wrap_with_value

logger = logging.getLogger(__name__)

LIST_TYPES: tuple[str, ...] = get_args(ListType)


class BBCodeRenderer(NodeVisitor, BaseRenderer):
    """Render Org document trees to BBCode markup text.

    Parameters
    ----------
    options : BBCodeRendererOptions or None, default = None
        BBCode rendering options

    Examples
    --------
    Basic usage:

        >>> from org2bb.ast import builder as b
        >>> from org2bb.renderers.bbcode import BBCodeRenderer
        >>> doc = b.document(b.headline("Intro", level=1))
        >>> BBCodeRenderer().render_to_string(doc)
        '[b][u]# Intro[/u][/b]\\n\\n'

    """

    def __init__(self, options: BBCodeRendererOptions | None = None):
        """Initialize the BBCode renderer with options."""
        BaseRenderer._validate_options_type(options, BBCodeRendererOptions, "bbcode")
        options = options or BBCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: BBCodeRendererOptions = options
        self._context: ExportContext | None = None

    # ------------------------------------------------------------------
    # Template assembly
    # ------------------------------------------------------------------

    def render_to_string(self, doc: Node) -> str:
        """Transcode a document tree to a BBCode string.

        The result is the transcoded tree followed by the footnote section.
        No wrapping tag is added around the document.

        Parameters
        ----------
        doc : Node
            Root of the tree, usually an ``org-data`` node

        Returns
        -------
        str
            BBCode markup text

        Raises
        ------
        UnsupportedConstructError
            If the tree contains anything the BBCode dialect cannot express

        """
        if self._context is not None:
            raise RenderingError("A transcoding pass is already running on this renderer", rendering_stage="setup")

        self._context = ExportContext.for_document(doc, self.options)
        logger.debug("Transcoding %s tree to BBCode", doc.kind.value)
        try:
            body = self.transcode(doc)
            footnotes = render_footnote_section(
                self._context.footnotes, self.transcode, self.options.footnote_section_title
            )
            logger.debug("Rendered %d footnote(s)", len(self._context.footnotes))
        finally:
            self._context = None
        return body + footnotes

    @property
    def context(self) -> ExportContext:
        """Context of the running pass."""
        if self._context is None:
            raise RenderingError("No transcoding pass is running; use render_to_string()", rendering_stage="setup")
        return self._context

    # ------------------------------------------------------------------
    # Fold helpers
    # ------------------------------------------------------------------

    def transcode(self, node: Node) -> str:
        """Transcode one node, including the blank space that follows it."""
        return self._with_post_blank(node, node.accept(self))

    def _with_post_blank(self, node: Node, output: str) -> str:
        blank = node.post_blank
        if not blank:
            return output
        return output + (" " if node.kind.is_object else "\n") * blank

    def _contents(self, node: Node) -> str:
        return "".join(self.transcode(child) for child in node.children)

    def _secondary(self, value: Any) -> str:
        """Transcode a secondary string property (headline title, item tag)."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return "".join(self.transcode(child) for child in value)

    @staticmethod
    def _unsupported(node: Node) -> str:
        raise UnsupportedConstructError(node.kind.value)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def visit_org_data(self, node: Node) -> str:
        """Render the document root as the concatenation of its children."""
        return self._contents(node)

    def visit_section(self, node: Node) -> str:
        """Render a section as the concatenation of its children."""
        return self._contents(node)

    def visit_paragraph(self, node: Node) -> str:
        """Render a paragraph as its transcoded contents."""
        return self._contents(node)

    def visit_plain_text(self, node: Node) -> str:
        """Render plain text unchanged; BBCode text needs no escaping."""
        return str(node.get("value", ""))

    # ------------------------------------------------------------------
    # Text markup
    # ------------------------------------------------------------------

    def visit_bold(self, node: Node) -> str:
        """Render a Bold node as ``[b]...[/b]``."""
        return wrap(TAG_BOLD, self._contents(node))

    def visit_italic(self, node: Node) -> str:
        """Render an Italic node as ``[i]...[/i]``."""
        return wrap(TAG_ITALIC, self._contents(node))

    def visit_underline(self, node: Node) -> str:
        """Render an Underline node as ``[u]...[/u]``."""
        return wrap(TAG_UNDERLINE, self._contents(node))

    def visit_strike_through(self, node: Node) -> str:
        """Render a StrikeThrough node as ``[s]...[/s]``."""
        return wrap(TAG_STRIKE, self._contents(node))

    def visit_code(self, node: Node) -> str:
        """Render inline code as ``[font=monospace]...[/font]``."""
        return wrap_with_value(TAG_FONT, node.get("value", ""), MONOSPACE_FONT)

    def visit_verbatim(self, node: Node) -> str:
        """Render verbatim text as ``[font=monospace]...[/font]``."""
        return wrap_with_value(TAG_FONT, node.get("value", ""), MONOSPACE_FONT)

    def visit_entity(self, node: Node) -> str:
        """Render an entity (``\\alpha``, ``\\nbsp``, ...) as its UTF-8 character."""
        return node.get("utf8", "")

    def visit_line_break(self, node: Node) -> str:
        """Render a hard line break as ``[br]<placeholder>[/br]`` and a newline."""
        return wrap(TAG_LINE_BREAK, self.options.line_break_placeholder) + "\n"

    def visit_horizontal_rule(self, node: Node) -> str:
        """Render a horizontal rule as ``[hr][/hr]``."""
        return wrap(TAG_HORIZONTAL_RULE, "")

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _format_code_block(self, code: str, attributes: dict[str, str] | None = None) -> str:
        if code and not code.endswith("\n"):
            code += "\n"
        return as_block(wrap(TAG_CODE, "\n" + code, attributes))

    def visit_example_block(self, node: Node) -> str:
        """Render an example block as a code block."""
        return self._format_code_block(node.get("value", ""))

    def visit_fixed_width(self, node: Node) -> str:
        """Render a fixed-width area (lines starting with ``:``) as a code block."""
        return self._format_code_block(textwrap.dedent(node.get("value", "")))

    def visit_src_block(self, node: Node) -> str:
        """Render a source block as a code block.

        The language is only emitted when ``code_language_attribute`` is set,
        as ``[code lang="python"]``.
        """
        language = node.get("language")
        attributes = {"lang": language} if language and self.options.code_language_attribute else None
        return self._format_code_block(node.get("value", ""), attributes)

    def visit_quote_block(self, node: Node) -> str:
        """Render a quote block as ``[quote]`` around its trimmed contents."""
        return wrap(TAG_QUOTE, as_block(self._contents(node).strip()))

    def visit_headline(self, node: Node) -> str:
        """Render a headline followed by its section and sub-headlines.

        Levels are taken relative to the document's top level, so a document
        whose headlines start at ``***`` still renders them as level 1. The
        footnote section headline is dropped; footnotes get their own section.
        """
        if node.get("footnote_section_p"):
            return ""
        level = node.get("level", 1)
        if isinstance(level, int) and not isinstance(level, bool):
            level = self.context.relative_level(level)
        title = self._secondary(node.get("title"))
        return format_headline(title, level) + self._contents(node)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def visit_plain_list(self, node: Node) -> str:
        """Render a plain list.

        Ordered lists open with ``[list=1]``, unordered and descriptive lists
        with ``[list]``. The list hands its type down to each item.
        """
        list_type = node.get("type")
        if list_type not in LIST_TYPES:
            raise UnsupportedConstructError(
                str(list_type),
                construct_type="list",
                message=f"PLAIN-LIST type `{list_type}' is not supported by the BBCode exporter",
            )

        items = "".join(
            self._with_post_blank(child, self._format_item(child, list_type))
            if child.kind is NodeKind.ITEM
            else self.transcode(child)
            for child in node.children
        )
        inner = as_block(items.strip())
        if list_type == "ordered":
            return wrap_with_value(TAG_LIST, inner, ORDERED_LIST_START)
        return wrap(TAG_LIST, inner)

    def visit_item(self, node: Node) -> str:
        """Render an item outside a list as an unordered list item."""
        return self._format_item(node, "unordered")

    def _format_item(self, node: Node, list_type: str) -> str:
        term = ""
        if list_type == "descriptive":
            term = wrap(TAG_ITALIC, self._secondary(node.get("tag"))) + ": "
        return LIST_BULLET + term + self._contents(node).strip() + "\n"

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Node) -> str:
        """Render a table as ``[table]...[/table]``."""
        return wrap(TAG_TABLE, self._contents(node))

    def visit_table_row(self, node: Node) -> str:
        """Render a table row; rule rows (no cells) render as nothing."""
        contents = self._contents(node)
        if not contents:
            return ""
        return wrap(TAG_TABLE_ROW, contents)

    def visit_table_cell(self, node: Node) -> str:
        """Render a table cell as ``[td]...[/td]``."""
        return wrap(TAG_TABLE_CELL, self._contents(node))

    # ------------------------------------------------------------------
    # Links and footnotes
    # ------------------------------------------------------------------

    def visit_link(self, node: Node) -> str:
        """Render a Link node as ``[url=target]description[/url]``.

        The URL doubles as the text when the link has no description.

        Parameters
        ----------
        node : Node
            Link with ``type``, ``path`` and ``raw_link`` properties

        Raises
        ------
        UnsupportedConstructError
            If the target is neither an http(s) URL nor an ``about:`` anchor

        """
        link_type = str(node.get("type", ""))
        path = str(node.get("path", ""))
        raw_link = str(node.get("raw_link") or f"{link_type}:{path}")
        return resolve_link(link_type, path, raw_link, self._contents(node) or None)

    def visit_footnote_reference(self, node: Node) -> str:
        """Render a footnote reference as ``^N ``.

        Inline footnotes (definition written at the reference) are rejected.

        Parameters
        ----------
        node : Node
            Footnote reference with a ``label`` property

        """
        if node.get("type") == "inline" or node.children:
            raise UnsupportedConstructError(
                "inline",
                construct_type="footnote",
                message="Inline footnotes are not supported by the BBCode exporter",
            )
        number = self.context.footnotes.number_for(str(node.get("label")))
        return format_footnote_reference(number)

    def visit_footnote_definition(self, node: Node) -> str:
        """Render nothing; definitions are listed in the footnote section."""
        return ""

    # ------------------------------------------------------------------
    # Unsupported constructs
    # ------------------------------------------------------------------

    def visit_center_block(self, node: Node) -> str:
        """Reject a center-block node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_clock(self, node: Node) -> str:
        """Reject a clock node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_drawer(self, node: Node) -> str:
        """Reject a drawer node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_dynamic_block(self, node: Node) -> str:
        """Reject a dynamic-block node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_export_block(self, node: Node) -> str:
        """Reject a export-block node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_export_snippet(self, node: Node) -> str:
        """Reject a export-snippet node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_inline_src_block(self, node: Node) -> str:
        """Reject a inline-src-block node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_inlinetask(self, node: Node) -> str:
        """Reject a inlinetask node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_keyword(self, node: Node) -> str:
        """Reject a keyword node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_latex_environment(self, node: Node) -> str:
        """Reject a latex-environment node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_latex_fragment(self, node: Node) -> str:
        """Reject a latex-fragment node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_node_property(self, node: Node) -> str:
        """Reject a node-property node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_planning(self, node: Node) -> str:
        """Reject a planning node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_property_drawer(self, node: Node) -> str:
        """Reject a property-drawer node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_radio_target(self, node: Node) -> str:
        """Reject a radio-target node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_special_block(self, node: Node) -> str:
        """Reject a special-block node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_statistics_cookie(self, node: Node) -> str:
        """Reject a statistics-cookie node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_subscript(self, node: Node) -> str:
        """Reject a subscript node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_superscript(self, node: Node) -> str:
        """Reject a superscript node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_target(self, node: Node) -> str:
        """Reject a target node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_timestamp(self, node: Node) -> str:
        """Reject a timestamp node; BBCode cannot express it."""
        return self._unsupported(node)

    def visit_verse_block(self, node: Node) -> str:
        """Reject a verse-block node; BBCode cannot express it."""
        return self._unsupported(node)
