#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/renderers/context.py
"""Per-pass export state."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2bb.ast.nodes import Node, NodeKind, iter_nodes
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.utils.footnotes import FootnoteTable


@dataclass
class ExportContext:
    """State owned by a single transcoding pass.

    Created when a pass starts and dropped when it ends. The footnote table
    is the only part that changes while the tree is folded.

    Parameters
    ----------
    options : BBCodeRendererOptions
        Rendering options of the pass
    footnotes : FootnoteTable
        Footnote definitions of the document and their assigned numbers
    min_headline_level : int, default = 1
        Smallest headline level in the document; headline levels are
        rendered relative to it

    """

    options: BBCodeRendererOptions
    footnotes: FootnoteTable = field(default_factory=FootnoteTable)
    min_headline_level: int = 1

    @classmethod
    def for_document(cls, root: Node, options: BBCodeRendererOptions) -> ExportContext:
        """Create the context of a pass over ``root``."""
        levels = [
            node.get("level")
            for node in iter_nodes(root)
            if node.kind is NodeKind.HEADLINE and isinstance(node.get("level"), int)
        ]
        return cls(
            options=options,
            footnotes=FootnoteTable.from_tree(root),
            min_headline_level=min(levels) if levels else 1,
        )

    def relative_level(self, level: int) -> int:
        """Return ``level`` relative to the document's top headline level (1-based)."""
        return level - self.min_headline_level + 1
