#  Copyright (c) 2025 Tom Villani, Ph.D.

# org2bb/options/bbcode.py
"""Configuration options for BBCode rendering.

This module defines the options class controlling how document trees are
transcoded into BBCode forum markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from org2bb.constants import (
    DEFAULT_CODE_LANGUAGE_ATTRIBUTE,
    DEFAULT_FOOTNOTE_SECTION_TITLE,
    DEFAULT_LINE_BREAK_PLACEHOLDER,
)
from org2bb.exceptions import ValidationError
from org2bb.options.base import BaseRendererOptions


@dataclass(frozen=True)
class BBCodeRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-BBCode rendering.

    Parameters
    ----------
    footnote_section_title : str, default "Footnotes"
        Title of the headline introducing the footnote section.
    code_language_attribute : bool, default False
        Whether source blocks carry their language as a ``lang`` attribute
        (``[code lang="python"]``). Many boards ignore unknown attributes,
        others reject them, so this is off by default.
    line_break_placeholder : str, default "_"
        Text placed inside ``[br][/br]`` for hard line breaks. Several boards
        drop empty tag pairs, hence the placeholder.

    Examples
    --------
    Basic usage:
        >>> from org2bb.renderers.bbcode import BBCodeRenderer
        >>> options = BBCodeRendererOptions(footnote_section_title="Notes")
        >>> renderer = BBCodeRenderer(options)

    """

    footnote_section_title: str = field(
        default=DEFAULT_FOOTNOTE_SECTION_TITLE,
        metadata={
            "help": "Title of the footnote section headline",
            "cli_name": "footnote-section-title",
        },
    )
    code_language_attribute: bool = field(
        default=DEFAULT_CODE_LANGUAGE_ATTRIBUTE,
        metadata={
            "help": 'Emit the source block language as [code lang="..."]',
            "cli_name": "code-language-attribute",
        },
    )
    line_break_placeholder: str = field(
        default=DEFAULT_LINE_BREAK_PLACEHOLDER,
        metadata={
            "help": "Text placed inside [br][/br] tags",
            "cli_name": "line-break-placeholder",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If a field has the wrong type

        """
        super().__post_init__()
        for name in ("footnote_section_title", "line_break_placeholder"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValidationError(
                    f"{name} must be a string, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )
        if not isinstance(self.code_language_attribute, bool):
            raise ValidationError(
                f"code_language_attribute must be a boolean, got {type(self.code_language_attribute).__name__}",
                parameter_name="code_language_attribute",
                parameter_value=self.code_language_attribute,
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> BBCodeRendererOptions:
        """Build options from a configuration mapping, ignoring unrelated keys.

        Keys may use either the field name or its dashed CLI spelling.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)
