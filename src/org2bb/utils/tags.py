#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/utils/tags.py
"""BBCode tag wrapping primitives.

BBCode needs no escaping of plain text, so these helpers only add the
bracket-tag structure around their contents and never alter the contents.
"""

from __future__ import annotations

from typing import Mapping


def wrap(tag: str, contents: str, attributes: Mapping[str, str] | None = None) -> str:
    """Wrap ``contents`` in an opening and closing tag.

    Parameters
    ----------
    tag : str
        Tag name, e.g. ``"b"``
    contents : str
        Text placed between the tags, unmodified
    attributes : mapping of str to str, optional
        Rendered as space-separated ``key="value"`` pairs in iteration order

    Returns
    -------
    str
        ``[tag key="value"]contents[/tag]``

    Examples
    --------
    >>> wrap("b", "hello")
    '[b]hello[/b]'
    >>> wrap("code", "x = 1", {"lang": "python"})
    '[code lang="python"]x = 1[/code]'

    """
    opening = tag
    if attributes:
        opening += "".join(f' {key}="{value}"' for key, value in attributes.items())
    return f"[{opening}]{contents}[/{tag}]"


def wrap_with_value(tag: str, contents: str, value: str) -> str:
    """Wrap ``contents`` in a tag carrying a single value.

    >>> wrap_with_value("url", "home", "https://example.com")
    '[url=https://example.com]home[/url]'
    """
    return f"[{tag}={value}]{contents}[/{tag}]"


def as_block(text: str) -> str:
    """Surround ``text`` with a single leading and trailing newline."""
    return f"\n{text}\n"
