#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the org2bb library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. BBCode Vocabulary - The fixed tag set of the forum dialect
3. Rendering Defaults - Default option values
4. CLI - Exit codes and configuration file names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListType = Literal["ordered", "unordered", "descriptive"]
FootnoteType = Literal["standard", "inline"]
ConstructType = Literal["node", "link", "list", "headline", "footnote"]

# =============================================================================
# BBCode Vocabulary
# =============================================================================

TAG_BOLD = "b"
TAG_UNDERLINE = "u"
TAG_ITALIC = "i"
TAG_STRIKE = "s"
TAG_FONT = "font"
TAG_CODE = "code"
TAG_LIST = "list"
TAG_LIST_ITEM = "*"
TAG_URL = "url"
TAG_QUOTE = "quote"
TAG_TABLE = "table"
TAG_TABLE_ROW = "tr"
TAG_TABLE_CELL = "td"
TAG_HORIZONTAL_RULE = "hr"
TAG_LINE_BREAK = "br"

MONOSPACE_FONT = "monospace"
ORDERED_LIST_START = "1"
LIST_BULLET = f"[{TAG_LIST_ITEM}]"

# Headline level -> title prefix. Levels outside this table are rejected.
HEADLINE_PREFIXES: dict[int, str] = {
    0: "",
    1: "# ",
    2: "== ",
    3: "+++ ",
    4: ":::: ",
    5: "----- ",
}

HTTP_LINK_TYPES = ("http", "https")
ANCHOR_LINK_PREFIX = "about:"
# Upstream parser output for anchor-only targets such as "about:#top"
BROKEN_ANCHOR_PREFIX = "about:/#"
# Characters left untouched when re-encoding anchor links
URL_SAFE_CHARACTERS = "!#$&'()*+,/:;=?@[]~"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_FOOTNOTE_SECTION_TITLE = "Footnotes"
DEFAULT_CODE_LANGUAGE_ATTRIBUTE = False
DEFAULT_LINE_BREAK_PLACEHOLDER = "_"

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_RENDERING_ERROR = 1
EXIT_VALIDATION_ERROR = 2

CONFIG_FILENAMES = [".org2bb.toml", ".org2bb.yaml", ".org2bb.yml", ".org2bb.json", "pyproject.toml"]
