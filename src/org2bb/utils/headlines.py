#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/utils/headlines.py
"""Headline formatting for the BBCode exporter.

BBCode has no heading tags, so headlines are rendered as bold, underlined
lines whose prefix marks the level.
"""

from __future__ import annotations

from org2bb.constants import HEADLINE_PREFIXES, TAG_BOLD, TAG_UNDERLINE
from org2bb.exceptions import UnsupportedConstructError
from org2bb.utils.tags import wrap


def headline_prefix(level: int) -> str:
    """Return the title prefix for a headline level.

    Raises
    ------
    UnsupportedConstructError
        If ``level`` is not one of the supported levels 0-5

    """
    # bool is an int subclass but never a valid level
    if isinstance(level, bool) or not isinstance(level, int) or level not in HEADLINE_PREFIXES:
        raise UnsupportedConstructError(
            str(level),
            construct_type="headline",
            message=f"Headline level `{level}' is not supported by the BBCode exporter",
        )
    return HEADLINE_PREFIXES[level]


def format_headline(title: str, level: int) -> str:
    """Render a headline line followed by one blank line.

    Parameters
    ----------
    title : str
        Already transcoded title
    level : int
        Headline level, 0 to 5

    Returns
    -------
    str
        ``[b][u]<prefix><title>[/u][/b]`` and two newlines

    Examples
    --------
    >>> format_headline("Intro", 1)
    '[b][u]# Intro[/u][/b]\\n\\n'

    """
    return wrap(TAG_BOLD, wrap(TAG_UNDERLINE, headline_prefix(level) + title)) + "\n\n"
