#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/lists.py
"""Ordered and unordered list rendering, including nested lists."""

from __future__ import annotations

from bs4.element import PageElement

from tagdown.buffer import MarkdownBuffer
from tagdown.constants import BULLET_MARKER, LIST_ITEM_TAG, LIST_TAGS, ORDERED_LIST_TAG
from tagdown.context import RenderContext
from tagdown.inline import extract_text
from tagdown.tree import iter_element_children, tag_name


def list_marker(ordered: bool, index: int) -> str:
    """Return ``"<index>. "`` for ordered lists and ``"- "`` otherwise."""
    return f"{index}. " if ordered else BULLET_MARKER


def render_list(
    list_node: PageElement,
    ordered: bool,
    out: MarkdownBuffer,
    context: RenderContext,
    depth: int = 0,
) -> None:
    """Append one line per ``li`` of ``list_node`` to ``out``.

    Each item line is indented by ``list_indent_width * depth`` spaces. Lists
    that are direct children of an item are rendered right after that item's
    line, one level deeper, with their own numbering starting at 1. The
    trailing blank line after a top-level list is the caller's concern.

    Parameters
    ----------
    list_node : PageElement
        The ``ul`` or ``ol`` element
    ordered : bool
        Number the items instead of using bullets
    out : MarkdownBuffer
        Output buffer of the current conversion
    context : RenderContext
        Render context at ``list_node``'s depth
    depth : int, default 0
        List nesting level, 0 for a top-level list

    """
    options = context.options
    indent = " " * (options.list_indent_width * depth)
    skip_nested_lists = not options.fold_nested_list_text

    index = 1
    for item in iter_element_children(list_node, LIST_ITEM_TAG):
        item_context = context.descend()

        marker = list_marker(ordered, index)
        index += 1

        text = extract_text(item, item_context, skip_nested_lists=skip_nested_lists)
        out.append(f"{indent}{marker}{text}\n")

        for nested in iter_element_children(item, LIST_TAGS):
            render_list(nested, tag_name(nested) == ORDERED_LIST_TAG, out, item_context.descend(), depth + 1)
