#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML-to-Markdown conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

from tagdown.constants import (
    DEFAULT_DETECT_CODE_LANGUAGE,
    DEFAULT_FOLD_NESTED_LIST_TEXT,
    DEFAULT_HTML_PARSER,
    DEFAULT_LIST_INDENT_WIDTH,
    DEFAULT_MAX_DEPTH,
    DEFAULT_VERBATIM_CODE_BLOCKS,
    HTML_PARSERS,
    HtmlParser,
)
from tagdown.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-Markdown conversion.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup backend used to build the document tree. ``lxml`` and
        ``html5lib`` wrap fragments in ``<html><body>`` and insert ``<tbody>``;
        the renderers treat those wrappers transparently.
    max_depth : int or None, default 200
        Maximum element nesting followed during conversion. Deeper input raises
        DepthExceededError. None disables the explicit limit.
    list_indent_width : int, default 2
        Spaces of indentation per nested list level.
    fold_nested_list_text : bool, default False
        When True, the text of a nested list is also folded into its parent
        item's line, in addition to being rendered as its own indented lines.
    verbatim_code_blocks : bool, default False
        Render ``pre`` content as raw text (no inline markup, lines
        right-stripped) behind a fence longer than any backtick run inside.
        By default ``pre`` content goes through the inline extractor.
    detect_code_language : bool, default True
        Add a language identifier (from ``language-xxx`` style classes or
        ``data-lang``) to verbatim code blocks.

    Examples
    --------
        >>> options = HtmlOptions(html_parser="lxml", list_indent_width=4)
        >>> deeper = options.create_updated(max_depth=500)

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (standards-compliant, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSERS),
            "importance": "advanced",
        },
    )
    max_depth: int | None = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={
            "help": "Maximum element nesting depth before conversion fails (None disables the limit)",
            "type": int,
            "importance": "security",
        },
    )
    list_indent_width: int = field(
        default=DEFAULT_LIST_INDENT_WIDTH,
        metadata={"help": "Spaces per nested list level", "type": int, "importance": "core"},
    )
    fold_nested_list_text: bool = field(
        default=DEFAULT_FOLD_NESTED_LIST_TEXT,
        metadata={
            "help": "Also fold nested list text into the parent list item's line",
            "importance": "advanced",
        },
    )
    verbatim_code_blocks: bool = field(
        default=DEFAULT_VERBATIM_CODE_BLOCKS,
        metadata={
            "help": "Render pre blocks as raw text behind a fence longer than any backtick run inside",
            "importance": "advanced",
        },
    )
    detect_code_language: bool = field(
        default=DEFAULT_DETECT_CODE_LANGUAGE,
        metadata={
            "help": "Detect code block language from class/data-lang attributes (verbatim code blocks only)",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {', '.join(HTML_PARSERS)}, got {self.html_parser!r}")

        if self.max_depth is not None and self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive or None, got {self.max_depth}")

        if self.list_indent_width < 0:
            raise ValueError(f"list_indent_width must be non-negative, got {self.list_indent_width}")
