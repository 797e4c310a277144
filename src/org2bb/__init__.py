"""org2bb - transcode Org document trees into BBCode forum markup.

org2bb takes the element tree produced by an Org parser and renders it with
the bracket-tag vocabulary understood by bulletin-board software: bold,
italic, underline and strike-through text, monospace and code blocks,
lists, tables, quotes, links and numbered footnotes.

The transcoding is deterministic and all-or-nothing: a construct BBCode
cannot express (a LaTeX fragment, a timestamp, an inline footnote, an
unsupported link type, ...) raises ``UnsupportedConstructError`` and no
output is produced.

Requirements
------------
- Python 3.10+

Examples
--------
Transcode a JSON tree exported by the parser:

    >>> from org2bb import to_bbcode
    >>> bbcode = to_bbcode("document.json")

Build a tree by hand:

    >>> from org2bb.ast import builder as b
    >>> doc = b.document(
    ...     b.headline("Intro", b.section(b.paragraph(b.text("Hello "), b.bold(b.text("world"))))),
    ... )
    >>> print(to_bbcode(doc))
    [b][u]# Intro[/u][/b]
    <BLANKLINE>
    Hello [b]world[/b]

"""

from org2bb.api import TranscodeResult, load_document, to_bbcode, try_to_bbcode
from org2bb.ast.nodes import Node, NodeKind
from org2bb.exceptions import (
    InvalidOptionsError,
    Org2BBError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedConstructError,
    ValidationError,
)
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.renderers.bbcode import BBCodeRenderer

__version__ = "0.1.0"

__all__ = [
    "BBCodeRenderer",
    "BBCodeRendererOptions",
    "InvalidOptionsError",
    "Node",
    "NodeKind",
    "Org2BBError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "TranscodeResult",
    "UnsupportedConstructError",
    "ValidationError",
    "load_document",
    "to_bbcode",
    "try_to_bbcode",
]
