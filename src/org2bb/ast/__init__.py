#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/ast/__init__.py
"""Document tree model consumed by the BBCode exporter.

The module consists of several components:

- nodes: the ``Node`` dataclass and the closed ``NodeKind`` enumeration
- visitors: visitor base class with one method per node kind
- serialization: JSON loading and dumping of document trees
- builder: short helpers for constructing trees by hand

Examples
--------
    >>> from org2bb.ast import builder as b
    >>> from org2bb.renderers.bbcode import BBCodeRenderer
    >>> doc = b.document(b.paragraph(b.bold(b.text("hello"))))
    >>> BBCodeRenderer().render_to_string(doc)
    '[b]hello[/b]'

"""

from org2bb.ast.nodes import OBJECT_KINDS, Node, NodeKind, iter_nodes
from org2bb.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from org2bb.ast.visitors import NodeVisitor

__all__ = [
    "Node",
    "NodeKind",
    "NodeVisitor",
    "OBJECT_KINDS",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "iter_nodes",
    "json_to_ast",
]
