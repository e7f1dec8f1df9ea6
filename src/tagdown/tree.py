#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/tree.py
"""Document tree access over BeautifulSoup objects.

The renderers only rely on a small contract: every node has a kind
(element, text or other), elements have a tag name and attributes, and all
nodes have ordered children. This module maps BeautifulSoup's object model
onto that contract so the rest of the package never inspects bs4 types
directly.

Comments, doctypes, CDATA sections, processing instructions, script and
style content, and the ``BeautifulSoup`` document object itself are all
classified as ``NodeKind.OTHER`` and are traversed transparently.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString, Script, Stylesheet, TemplateString

from tagdown.constants import RAW_TEXT_TAGS


class NodeKind(Enum):
    """Kind of a document tree node."""

    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


_NON_TEXT_STRINGS = (PreformattedString, Script, Stylesheet, TemplateString)


def node_kind(node: PageElement) -> NodeKind:
    """Classify a BeautifulSoup object as element, text or other.

    Script, stylesheet and template strings are not document text. Backends
    that do not tag them with a dedicated string class are covered by the
    parent check.
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.OTHER
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS):
        parent = node.parent
        if parent is not None and parent.name in RAW_TEXT_TAGS:
            return NodeKind.OTHER
        return NodeKind.TEXT
    return NodeKind.OTHER


def tag_name(node: PageElement) -> str:
    """Return the tag name of an element, or an empty string for anything else."""
    if node_kind(node) is not NodeKind.ELEMENT:
        return ""
    return node.name or ""


def get_attribute(node: PageElement, name: str) -> str:
    """Look up an attribute by exact name.

    Missing attributes (and non-element nodes) yield an empty string.
    Multi-valued attributes such as ``class`` are joined with single spaces.
    """
    if node_kind(node) is not NodeKind.ELEMENT:
        return ""
    value: Any = node.attrs.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(part) for part in value)
    return str(value)


def text_content(node: PageElement) -> str:
    """Return the raw string content of a text node."""
    return str(node)


def iter_children(node: PageElement) -> Iterator[PageElement]:
    """Iterate the children of a node in document order."""
    contents = getattr(node, "contents", None)
    if not contents:
        return iter(())
    return iter(list(contents))


def iter_element_children(node: PageElement, names: frozenset[str] | str | None = None) -> Iterator[PageElement]:
    """Iterate element children, optionally restricted to the given tag name(s)."""
    if isinstance(names, str):
        names = frozenset({names})
    for child in iter_children(node):
        if node_kind(child) is not NodeKind.ELEMENT:
            continue
        if names is None or tag_name(child) in names:
            yield child
