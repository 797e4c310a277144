#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2bb/utils/links.py
"""Link resolution for the BBCode exporter.

Only web links and same-document anchors can be expressed as ``[url=...]``
tags. Anchors use the ``about:`` prefix, e.g. ``about:#installation``.
"""

from __future__ import annotations

import logging
from urllib.parse import quote, unquote

from org2bb.constants import (
    ANCHOR_LINK_PREFIX,
    BROKEN_ANCHOR_PREFIX,
    HTTP_LINK_TYPES,
    TAG_URL,
    URL_SAFE_CHARACTERS,
)
from org2bb.exceptions import UnsupportedConstructError
from org2bb.utils.tags import wrap_with_value

logger = logging.getLogger(__name__)


def normalize_anchor_url(raw_link: str) -> str:
    """Return the canonical percent-encoded form of an ``about:`` anchor link.

    The raw link is unescaped and re-encoded so that already-escaped and
    unescaped spellings of the same target agree. The Org parser turns
    anchor-only targets such as ``about:#top`` into ``about:/#top``; that
    stray slash is removed.

    Parameters
    ----------
    raw_link : str
        Raw link target starting with ``about:``

    Returns
    -------
    str
        Normalized URL

    Examples
    --------
    >>> normalize_anchor_url("about:/#top")
    'about:#top'
    >>> normalize_anchor_url("about:#M%C3%BCller section")
    'about:#M%C3%BCller%20section'

    """
    url = quote(unquote(raw_link), safe=URL_SAFE_CHARACTERS)
    if url.startswith(BROKEN_ANCHOR_PREFIX):
        url = ANCHOR_LINK_PREFIX + url[len(BROKEN_ANCHOR_PREFIX) - 1 :]
    return url


def resolve_link_url(link_type: str, path: str, raw_link: str) -> str:
    """Resolve a link's target URL.

    Parameters
    ----------
    link_type : str
        Link scheme as reported by the parser (``http``, ``https``, ...)
    path : str
        Link path without the scheme
    raw_link : str
        Link target as written in the source

    Returns
    -------
    str
        URL to use as the ``url`` tag value

    Raises
    ------
    UnsupportedConstructError
        If the link scheme cannot be expressed in BBCode

    """
    if raw_link.startswith(ANCHOR_LINK_PREFIX):
        return normalize_anchor_url(raw_link)
    if link_type in HTTP_LINK_TYPES:
        return f"{link_type}:{path}"
    raise UnsupportedConstructError(
        link_type,
        construct_type="link",
        message=f"LINK type `{link_type}' ({raw_link}) is not supported by the BBCode exporter",
    )


def format_link(url: str, text: str | None = None) -> str:
    """Render a ``[url=...]`` tag, using the URL itself when there is no text."""
    return wrap_with_value(TAG_URL, text or url, url)


def resolve_link(link_type: str, path: str, raw_link: str, text: str | None = None) -> str:
    """Resolve a link and render it as a BBCode ``url`` tag.

    Parameters
    ----------
    link_type : str
        Link scheme
    path : str
        Link path without the scheme
    raw_link : str
        Raw link target
    text : str or None, optional
        Already transcoded link description

    Returns
    -------
    str
        ``[url=target]text[/url]``

    Examples
    --------
    >>> resolve_link("https", "//example.com", "https://example.com")
    '[url=https://example.com]https://example.com[/url]'

    """
    url = resolve_link_url(link_type, path, raw_link)
    logger.debug("Resolved %s link %r to %r", link_type, raw_link, url)
    return format_link(url, text)
