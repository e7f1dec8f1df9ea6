#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Public conversion entry point."""

from __future__ import annotations

from tagdown.converter import HtmlToMarkdownConverter
from tagdown.options import HtmlOptions


def convert(html: str | bytes, options: HtmlOptions | None = None) -> str:
    """Convert HTML to Markdown.

    Parameters
    ----------
    html : str or bytes
        HTML markup. Bytes are decoded using BeautifulSoup's encoding
        detection.
    options : HtmlOptions or None, default None
        Conversion options. If None, uses default settings.

    Returns
    -------
    str
        Markdown text with ``\\n`` line endings

    Raises
    ------
    ParsingError
        If the input cannot be turned into a document tree
    DependencyError
        If the selected parser backend is not installed
    DepthExceededError
        If the document is nested deeper than ``options.max_depth``

    Examples
    --------
    Convert an HTML string:

        >>> convert('<a href="http://x">text</a>')
        '[text](http://x)'

    Use a different parser backend:

        >>> from tagdown.options import HtmlOptions
        >>> markdown = convert("<ul><li>one</li></ul>", options=HtmlOptions(html_parser="lxml"))

    """
    return HtmlToMarkdownConverter(options).convert(html)
