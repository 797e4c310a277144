#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/api.py
"""Public entry points of org2bb.

``to_bbcode`` loads a document tree from any supported source, transcodes it
and optionally writes the result. ``try_to_bbcode`` does the same but returns
a :class:`TranscodeResult` instead of raising on unsupported constructs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Union

from org2bb.ast.nodes import Node
from org2bb.ast.serialization import dict_to_ast, json_to_ast
from org2bb.exceptions import ParsingError, UnsupportedConstructError
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.renderers.bbcode import BBCodeRenderer
from org2bb.utils.io_utils import write_content

logger = logging.getLogger(__name__)

DocumentSource = Union[Node, Mapping[str, Any], str, Path]


@dataclass(frozen=True)
class TranscodeResult:
    """Outcome of a transcoding pass.

    Exactly one of ``output`` and ``error`` is set.
    """

    output: Optional[str] = None
    error: Optional[UnsupportedConstructError] = None

    @property
    def ok(self) -> bool:
        """Whether the pass succeeded and ``output`` holds the result."""
        return self.error is None


def load_document(source: DocumentSource) -> Node:
    """Load a document tree from a node, a mapping, a JSON string or a JSON file.

    Parameters
    ----------
    source : Node, mapping, str or Path
        - ``Node``: returned unchanged
        - mapping: a serialized tree as produced by ``ast_to_dict``
        - ``str`` starting with ``{``: a JSON document
        - other ``str`` or ``Path``: path to a JSON file

    Returns
    -------
    Node
        Root of the document tree

    Raises
    ------
    ParsingError
        If the source cannot be read or is not a valid tree

    """
    if isinstance(source, Node):
        return source
    if isinstance(source, Mapping):
        return dict_to_ast(dict(source))
    if isinstance(source, str) and source.lstrip().startswith("{"):
        return json_to_ast(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ParsingError(f"Could not read document tree {path}: {e}", parsing_stage="input", original_error=e) from e
        logger.debug("Loaded document tree from %s", path)
        return json_to_ast(content)
    raise ParsingError(f"Unsupported document source type: {type(source).__name__}", parsing_stage="input")


def _resolve_options(renderer_options: Optional[BBCodeRendererOptions], **kwargs: Any) -> BBCodeRendererOptions:
    options = renderer_options or BBCodeRendererOptions()
    if not kwargs:
        return options
    option_names = {field.name for field in fields(BBCodeRendererOptions)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")
    return options.create_updated(**valid_kwargs)


def to_bbcode(
    source: DocumentSource,
    *,
    renderer_options: Optional[BBCodeRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Transcode a document tree into BBCode.

    Parameters
    ----------
    source : Node, mapping, str or Path
        Document tree; see :func:`load_document`
    renderer_options : BBCodeRendererOptions, optional
        Pre-configured rendering options
    output : str, Path, IO[bytes], IO[str], optional
        Destination the result is also written to
    kwargs : Any
        Individual rendering options overriding ``renderer_options``
        (e.g. ``footnote_section_title="Notes"``)

    Returns
    -------
    str
        BBCode markup text

    Raises
    ------
    UnsupportedConstructError
        If the tree contains anything BBCode cannot express; nothing is written
    ParsingError
        If the source is not a valid document tree

    Examples
    --------
        >>> to_bbcode({"kind": "bold", "children": [{"kind": "plain-text", "properties": {"value": "hello"}}]})
        '[b]hello[/b]'

    """
    options = _resolve_options(renderer_options, **kwargs)
    document = load_document(source)
    result = BBCodeRenderer(options).render_to_string(document)
    if output is not None:
        write_content(result, output)
    return result


def try_to_bbcode(
    source: DocumentSource,
    *,
    renderer_options: Optional[BBCodeRendererOptions] = None,
    **kwargs: Any,
) -> TranscodeResult:
    """Transcode a document tree, reporting unsupported constructs as a result value.

    Parameters
    ----------
    source : Node, mapping, str or Path
        Document tree; see :func:`load_document`
    renderer_options : BBCodeRendererOptions, optional
        Pre-configured rendering options
    kwargs : Any
        Individual rendering options

    Returns
    -------
    TranscodeResult
        The output string, or the error that aborted the pass

    """
    try:
        return TranscodeResult(output=to_bbcode(source, renderer_options=renderer_options, **kwargs))
    except UnsupportedConstructError as e:
        logger.debug("Transcoding aborted: %s", e.message)
        return TranscodeResult(error=e)
