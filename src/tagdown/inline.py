#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/inline.py
"""Inline content extraction.

``extract_text`` is the single "rendered text of this element" operation used
by headings, paragraphs, list items, table cells and link text. It inlines
bold, italic, link, image and code-span markup, passes through the content of
every other element, and trims trailing whitespace from each text node.
Markdown special characters are not escaped.
"""

from __future__ import annotations

from bs4.element import PageElement

from tagdown.buffer import MarkdownBuffer
from tagdown.constants import BOLD_MARKER, INLINE_CODE_MARKER, ITALIC_MARKER, LIST_TAGS
from tagdown.context import RenderContext
from tagdown.tags import TagCategory, TagKind, classify_tag
from tagdown.tree import NodeKind, get_attribute, iter_children, node_kind, tag_name, text_content
from tagdown.utils.text import strip_trailing_whitespace


def extract_text(node: PageElement, context: RenderContext, skip_nested_lists: bool = False) -> str:
    """Render the inline content of ``node``'s children.

    Parameters
    ----------
    node : PageElement
        Element whose children are rendered
    context : RenderContext
        Render context at ``node``'s depth
    skip_nested_lists : bool, default False
        Skip direct ``ul``/``ol`` children (used for list items, whose nested
        lists are rendered as separate lines)

    Returns
    -------
    str
        Inline Markdown for the subtree

    """
    out = MarkdownBuffer()

    for child in iter_children(node):
        kind = node_kind(child)
        if kind is NodeKind.TEXT:
            out.append(strip_trailing_whitespace(text_content(child)))
        elif kind is NodeKind.ELEMENT:
            name = tag_name(child)
            if not name:
                continue
            if skip_nested_lists and name in LIST_TAGS:
                continue
            out.append(render_inline(child, classify_tag(name), context.descend()))

    return out.getvalue()


def render_inline(node: PageElement, kind: TagKind, context: RenderContext) -> str:
    """Render a single element with its inline rule.

    Elements without an inline rule contribute their extracted content only.
    """
    if kind.category is TagCategory.BOLD:
        return f"{BOLD_MARKER}{extract_text(node, context)}{BOLD_MARKER}"
    if kind.category is TagCategory.ITALIC:
        return f"{ITALIC_MARKER}{extract_text(node, context)}{ITALIC_MARKER}"
    if kind.category is TagCategory.LINK:
        return render_link(node, context)
    if kind.category is TagCategory.IMAGE:
        return render_image(node)
    if kind.category is TagCategory.INLINE_CODE:
        return f"{INLINE_CODE_MARKER}{extract_text(node, context)}{INLINE_CODE_MARKER}"
    return extract_text(node, context)


def render_link(node: PageElement, context: RenderContext) -> str:
    """Render ``[text](href)``; a missing href gives ``[text]()``."""
    href = get_attribute(node, "href")
    return f"[{extract_text(node, context)}]({href})"


def render_image(node: PageElement) -> str:
    """Render ``![alt](src)``; children of the image are ignored."""
    src = get_attribute(node, "src")
    alt = get_attribute(node, "alt")
    return f"![{alt}]({src})"
