#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/ast/serialization.py
"""JSON serialization and deserialization for document trees.

External Org parsers hand their element trees to org2bb as JSON. Each node
is an object with a ``kind``, an optional ``properties`` object and an
optional ``children`` array:

    {"kind": "bold", "children": [{"kind": "plain-text", "properties": {"value": "hi"}}]}

Secondary strings (headline ``title``, item ``tag``) may be given either as
plain strings or as arrays of node objects.

Examples
--------
    >>> doc = json_to_ast('{"kind": "org-data", "children": []}')
    >>> doc.kind.value
    'org-data'
    >>> ast_to_json(doc)
    '{"schema_version": 1, "kind": "org-data"}'

"""

from __future__ import annotations

import json
import logging
from typing import Any

from org2bb.ast.nodes import Node, NodeKind
from org2bb.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Properties holding secondary strings (lists of nodes)
_NODE_LIST_PROPERTIES = ("title", "tag")


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its subtree to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Dictionary with ``kind`` and, when non-empty, ``properties`` and ``children``

    """
    result: dict[str, Any] = {"kind": node.kind.value}
    if node.properties:
        properties: dict[str, Any] = {}
        for key, value in node.properties.items():
            if key in _NODE_LIST_PROPERTIES and isinstance(value, list):
                properties[key] = [ast_to_dict(child) for child in value]
            else:
                properties[key] = value
        result["properties"] = properties
    if node.children:
        result["children"] = [ast_to_dict(child) for child in node.children]
    return result


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary produced by :func:`ast_to_dict` back to a node.

    Parameters
    ----------
    data : dict
        Serialized node

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ParsingError
        If the dictionary is not a node or names an unknown kind

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="structure")
    if "kind" not in data:
        raise ParsingError("Node object must contain a 'kind' field", parsing_stage="structure")

    try:
        kind = NodeKind(data["kind"])
    except ValueError as e:
        raise ParsingError(f"Unknown node kind: {data['kind']!r}", parsing_stage="structure", original_error=e) from e

    raw_properties = data.get("properties") or {}
    if not isinstance(raw_properties, dict):
        raise ParsingError(f"Properties of {kind.value} must be an object", parsing_stage="structure")

    properties: dict[str, Any] = {}
    for key, value in raw_properties.items():
        if key in _NODE_LIST_PROPERTIES and isinstance(value, list):
            properties[key] = [dict_to_ast(child) for child in value]
        else:
            properties[key] = value

    raw_children = data.get("children") or []
    if not isinstance(raw_children, list):
        raise ParsingError(f"Children of {kind.value} must be an array", parsing_stage="structure")

    return Node(kind=kind, properties=properties, children=[dict_to_ast(child) for child in raw_children])


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string.

    Parameters
    ----------
    node : Node
        Root of the tree to serialize
    indent : int or None, default = None
        JSON indentation; compact output when None

    Returns
    -------
    str
        JSON string including the ``schema_version`` field

    """
    data = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(data, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True) -> Node:
    """Deserialize a JSON string to a node tree.

    If no ``schema_version`` is present, version 1 is assumed.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, reject schema versions other than the supported one

    Returns
    -------
    Node
        Reconstructed root node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version or
        contains unknown node kinds

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON document tree: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("JSON document tree must be an object", parsing_stage="json")

    schema_version = data.pop("schema_version", None)
    if schema_version is None:
        logger.debug("No schema_version in document tree, assuming %d", SCHEMA_VERSION)
    elif validate_schema and schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version {schema_version!r} (supported: {SCHEMA_VERSION})",
            parsing_stage="schema",
        )

    return dict_to_ast(data)
