#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/utils/footnotes.py
"""Footnote numbering and the footnote section of BBCode output.

BBCode has no footnotes. References are rendered as ``^N`` markers numbered
in order of first reference, and the definitions are listed after the body
under a level 0 headline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Tuple

from org2bb.ast.nodes import Node, NodeKind, iter_nodes
from org2bb.exceptions import UnsupportedConstructError
from org2bb.utils.headlines import format_headline


@dataclass
class FootnoteTable:
    """Definitions of a document and the numbers assigned to them.

    Numbers are handed out in order of first reference and never change
    afterwards, so repeated references to one definition share a number.
    """

    definitions: Dict[str, Node] = field(default_factory=dict)
    _numbers: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_tree(cls, root: Node) -> FootnoteTable:
        """Collect every labelled footnote definition found under ``root``."""
        table = cls()
        for node in iter_nodes(root):
            if node.kind is NodeKind.FOOTNOTE_DEFINITION and node.get("label") is not None:
                table.definitions.setdefault(str(node.get("label")), node)
        return table

    def number_for(self, label: str) -> int:
        """Return the number of ``label``, assigning the next one on first use.

        Raises
        ------
        UnsupportedConstructError
            If the document has no definition for ``label``

        """
        if label not in self._numbers:
            if label not in self.definitions:
                raise UnsupportedConstructError(
                    label,
                    construct_type="footnote",
                    message=f"Footnote `{label}' is referenced but never defined",
                )
            self._numbers[label] = len(self._numbers) + 1
        return self._numbers[label]

    def __len__(self) -> int:
        return len(self._numbers)

    def __iter__(self) -> Iterator[Tuple[int, Node]]:
        """Yield ``(number, definition)`` pairs in number order.

        Definitions numbered while iterating (references inside other
        definitions) are yielded as well.
        """
        index = 0
        while index < len(self._numbers):
            label = list(self._numbers)[index]
            index += 1
            yield self._numbers[label], self.definitions[label]


def format_footnote_reference(number: int) -> str:
    """Render the marker of a footnote reference, e.g. ``^1 ``."""
    return f"^{number} "


def render_footnote_section(table: FootnoteTable, transcode: Callable[[Node], str], title: str) -> str:
    """Render the footnote section placed after the document body.

    Parameters
    ----------
    table : FootnoteTable
        Footnotes numbered while transcoding the body
    transcode : callable
        Function transcoding a node to BBCode; used for definition contents
    title : str
        Title of the section headline

    Returns
    -------
    str
        Headline followed by one ``^N: text`` line per footnote, or an empty
        string when nothing was referenced

    """
    if not table:
        return ""

    lines: List[str] = []
    for number, definition in table:
        text = "".join(transcode(child) for child in definition.children).strip()
        lines.append(f"^{number}: {text}")
    return format_headline(title, 0) + "\n".join(lines)
