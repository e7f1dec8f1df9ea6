"""tagdown - convert HTML documents to Markdown.

tagdown parses HTML with BeautifulSoup and renders the resulting tree as
Markdown: headings, paragraphs, emphasis, links, images, nested lists, code
blocks and spans, and padded pipe tables. Unrecognized elements are rendered
through their content, so wrappers like ``<div>`` simply disappear.

Examples
--------
    >>> from tagdown import convert
    >>> convert("<h1>Title</h1><p>Hello <strong>world</strong></p>")
    '# Title\\n\\nHello**world**\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from tagdown.api import convert
from tagdown.converter import HtmlToMarkdownConverter
from tagdown.exceptions import DependencyError, DepthExceededError, ParsingError, TagdownError
from tagdown.options import HtmlOptions

__all__ = [
    "__version__",
    "convert",
    "HtmlToMarkdownConverter",
    "HtmlOptions",
    "TagdownError",
    "ParsingError",
    "DependencyError",
    "DepthExceededError",
]
