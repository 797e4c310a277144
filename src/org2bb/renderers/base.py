#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from,
providing a consistent interface for turning a document tree into text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from org2bb.ast.nodes import Node
from org2bb.exceptions import InvalidOptionsError
from org2bb.options.base import BaseRendererOptions
from org2bb.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the document tree to a string.

        Parameters
        ----------
        doc : Node
            Root node of the document

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        doc : Node
            Root node of the document
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If rendering fails; nothing is written in that case

        """
        content = self.render_to_string(doc)
        self.write_text_output(content, output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("[b]Hello[/b]", buffer)
            >>> print(buffer.getvalue())
            [b]Hello[/b]

        """
        write_content(text, output)
