#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the tagdown library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Behavior - defaults for HtmlOptions
3. Tag Vocabulary - tag names the renderers recognize
4. Markdown Syntax - fixed markers emitted by the renderers
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# Distribution name for each optional BeautifulSoup backend
HTML_PARSER_PACKAGES: dict[str, str] = {
    "html5lib": "html5lib",
    "lxml": "lxml",
}

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_MAX_DEPTH: int | None = 200
DEFAULT_LIST_INDENT_WIDTH = 2
DEFAULT_FOLD_NESTED_LIST_TEXT = False
DEFAULT_VERBATIM_CODE_BLOCKS = False
DEFAULT_DETECT_CODE_LANGUAGE = True

# =============================================================================
# Tag Vocabulary
# =============================================================================

PARAGRAPH_TAG = "p"
BOLD_TAGS = frozenset({"b", "strong"})
ITALIC_TAGS = frozenset({"i", "em"})
LINK_TAG = "a"
IMAGE_TAG = "img"
ORDERED_LIST_TAG = "ol"
UNORDERED_LIST_TAG = "ul"
LIST_TAGS = frozenset({ORDERED_LIST_TAG, UNORDERED_LIST_TAG})
LIST_ITEM_TAG = "li"
PREFORMATTED_TAG = "pre"
INLINE_CODE_TAG = "code"
TABLE_TAG = "table"
TABLE_SECTION_TAGS = frozenset({"thead", "tbody", "tfoot"})
TABLE_ROW_TAG = "tr"
TABLE_CELL_TAGS = frozenset({"td", "th"})
HEADING_PREFIX = "h"

# Content of these elements is never rendered as text
RAW_TEXT_TAGS = frozenset({"script", "style"})

# =============================================================================
# Markdown Syntax
# =============================================================================

# Only these characters are trimmed from the end of text nodes
TRAILING_WHITESPACE = " \n\r\t"

BOLD_MARKER = "**"
ITALIC_MARKER = "*"
INLINE_CODE_MARKER = "`"
HEADING_MARKER = "#"
BULLET_MARKER = "- "
TABLE_ROW_START = "| "
TABLE_CELL_END = " | "
TABLE_SEPARATOR_CHAR = "-"

CODE_FENCE = "```"
MIN_CODE_FENCE_LENGTH = 3
MAX_CODE_FENCE_LENGTH = 10
