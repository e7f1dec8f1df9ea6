#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/converter.py
"""HTML to Markdown traversal engine.

This module walks a BeautifulSoup document tree depth-first, left to right,
and appends Markdown to a buffer owned by the current conversion. Elements
with a dedicated rule (headings, paragraphs, emphasis, links, images, lists,
code blocks and spans, tables) render their whole subtree; every other
element contributes nothing itself and is traversed transparently, so
wrappers such as ``<html>``, ``<body>`` or ``<div>`` disappear while their
content is kept.

Examples
--------
    >>> converter = HtmlToMarkdownConverter()
    >>> converter.convert("<h2>Title</h2><p>Some <em>text</em></p>")
    '## Title\\n\\nSome*text*\\n\\n'

"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup
from bs4.element import PageElement
from bs4.exceptions import FeatureNotFound

from tagdown.buffer import MarkdownBuffer
from tagdown.code_blocks import render_preformatted
from tagdown.constants import HEADING_MARKER, HTML_PARSER_PACKAGES
from tagdown.context import RenderContext
from tagdown.exceptions import DependencyError, DepthExceededError, ParsingError
from tagdown.inline import extract_text, render_inline
from tagdown.lists import render_list
from tagdown.options import HtmlOptions
from tagdown.tables import render_table
from tagdown.tags import TagCategory, TagKind, classify_tag
from tagdown.tree import NodeKind, iter_children, node_kind, tag_name, text_content
from tagdown.utils.text import strip_trailing_whitespace

logger = logging.getLogger(__name__)


class HtmlToMarkdownConverter:
    """Convert HTML documents to Markdown.

    The converter holds only its options; every call to :meth:`convert` or
    :meth:`convert_tree` uses a fresh output buffer, so one instance can be
    reused freely.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options

    """

    def __init__(self, options: HtmlOptions | None = None):
        self.options = options or HtmlOptions()

    def convert(self, html: str | bytes) -> str:
        """Parse ``html`` and render it as Markdown.

        Raises
        ------
        ParsingError
            If the input is not str/bytes, is empty, or cannot be parsed
        DependencyError
            If the selected parser backend is not installed
        DepthExceededError
            If the document is nested deeper than ``options.max_depth``

        """
        soup = self.parse(html)
        return self.convert_tree(soup)

    def parse(self, html: str | bytes) -> BeautifulSoup:
        """Build the document tree with the configured BeautifulSoup backend."""
        if not isinstance(html, (str, bytes)):
            raise ParsingError(
                f"Unsupported input type for HTML conversion: {type(html).__name__}",
                parsing_stage="input_validation",
            )
        if not html:
            raise ParsingError("Could not read HTML content: input is empty", parsing_stage="input_validation")

        parser = self.options.html_parser
        logger.debug("Parsing %d characters of HTML with %s", len(html), parser)

        try:
            return BeautifulSoup(html, parser)
        except FeatureNotFound as e:
            package = HTML_PARSER_PACKAGES.get(parser)
            raise DependencyError(
                parser,
                missing_packages=[(package, "")] if package else [],
                original_error=e,
            ) from e
        except Exception as e:
            raise ParsingError(
                f"Could not read HTML content: {e}", parsing_stage="html_parsing", original_error=e
            ) from e

    def convert_tree(self, root: PageElement) -> str:
        """Render an already parsed tree rooted at ``root``.

        ``root`` may be a ``BeautifulSoup`` document or any node inside it;
        the node itself is rendered, not only its children.
        """
        out = MarkdownBuffer()
        context = RenderContext(self.options)

        try:
            self.traverse([root], out, context)
        except RecursionError as e:
            raise DepthExceededError(None, original_error=e) from e

        return out.getvalue()

    def traverse(self, nodes: Iterable[PageElement], out: MarkdownBuffer, context: RenderContext) -> None:
        """Render a sequence of sibling nodes into ``out``.

        Parameters
        ----------
        nodes : Iterable[PageElement]
            Sibling nodes in document order
        out : MarkdownBuffer
            Output buffer of the current conversion
        context : RenderContext
            Render context of the nodes' parent

        """
        for node in nodes:
            kind = node_kind(node)

            if kind is NodeKind.ELEMENT:
                name = tag_name(node)
                if not name:
                    continue
                self.render_element(node, classify_tag(name), out, context.descend())
            elif kind is NodeKind.TEXT:
                out.append(strip_trailing_whitespace(text_content(node)))
            else:
                self.traverse(iter_children(node), out, context)

    def render_element(self, node: PageElement, tag: TagKind, out: MarkdownBuffer, context: RenderContext) -> None:
        """Render one element according to its tag kind.

        Recognized kinds consume the whole subtree; ``UNRECOGNIZED`` elements
        hand their children back to :meth:`traverse`.
        """
        category = tag.category

        if not tag.is_recognized:
            self.traverse(iter_children(node), out, context)
        elif category is TagCategory.HEADING:
            out.append(self.render_heading(node, tag.level, context))
        elif category is TagCategory.PARAGRAPH:
            out.append(f"{extract_text(node, context)}\n\n")
        elif tag.is_inline:
            out.append(render_inline(node, tag, context))
        elif category is TagCategory.LIST:
            render_list(node, tag.ordered, out, context)
            out.append("\n")
        elif category is TagCategory.PREFORMATTED:
            out.append(render_preformatted(node, context))
        elif category is TagCategory.TABLE:
            render_table(node, out, context)
            out.append("\n")

    def render_heading(self, node: PageElement, level: int, context: RenderContext) -> str:
        """Render ``level`` hash marks, a space, the heading text and a blank line."""
        return f"{HEADING_MARKER * level} {extract_text(node, context)}\n\n"
