#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/org2bb/renderers/__init__.py
"""AST renderers for converting document trees to forum markup.

Examples
--------
    >>> from org2bb.ast import builder as b
    >>> from org2bb.renderers import BBCodeRenderer
    >>> BBCodeRenderer().render_to_string(b.document(b.paragraph(b.italic(b.text("hi")))))
    '[i]hi[/i]'

"""

from org2bb.renderers.base import BaseRenderer
from org2bb.renderers.bbcode import BBCodeRenderer
from org2bb.renderers.context import ExportContext

__all__ = ["BaseRenderer", "BBCodeRenderer", "ExportContext"]
