#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/code_blocks.py
"""Fenced code block rendering for ``pre`` elements.

By default a code block holds the same inline content a paragraph would,
wrapped in a three-backtick fence. In verbatim mode no inline markup is
generated inside the fence and internal whitespace is preserved; each line
is right-stripped, leading/trailing blank lines are dropped, and the fence
grows past any backtick run in the code.
"""

from __future__ import annotations

import logging
import re

from bs4.element import PageElement

from tagdown.buffer import MarkdownBuffer
from tagdown.constants import CODE_FENCE, INLINE_CODE_TAG
from tagdown.context import RenderContext
from tagdown.inline import extract_text
from tagdown.tree import NodeKind, get_attribute, iter_children, iter_element_children, node_kind, text_content
from tagdown.utils.text import code_fence_for

logger = logging.getLogger(__name__)

_LANGUAGE_CLASS = re.compile(r"^(?:language|lang)-([\w+#.-]+)$")
_BRUSH_CLASS = re.compile(r"brush:\s*([\w+#.-]+)")
_PLAIN_LANGUAGE = re.compile(r"^[A-Za-z][\w+#.-]*$")
_IGNORED_CLASS_PREFIXES = ("hljs", "highlight")


def _language_from_classes(classes: str) -> str:
    for cls in classes.split():
        if match := _LANGUAGE_CLASS.match(cls):
            return match.group(1)
    if match := _BRUSH_CLASS.search(classes):
        return match.group(1)
    return ""


def _language_from_data_attribute(node: PageElement) -> str:
    data_lang = get_attribute(node, "data-lang").strip()
    return data_lang if _PLAIN_LANGUAGE.match(data_lang) else ""


def detect_code_language(node: PageElement) -> str:
    """Detect the language of a ``pre`` block from its attributes.

    Checks, in order: ``language-xxx``/``lang-xxx``/``brush: xxx`` classes
    and ``data-lang`` on the ``pre`` itself, then the same on its first
    ``code`` child, and finally a bare class name on the ``pre`` (e.g.
    ``<pre class="python">``) that is not a highlighter class.
    """
    classes = get_attribute(node, "class")

    if language := _language_from_classes(classes):
        return language
    if language := _language_from_data_attribute(node):
        return language

    code_child = next(iter_element_children(node, INLINE_CODE_TAG), None)
    if code_child is not None:
        if language := _language_from_classes(get_attribute(code_child, "class")):
            return language
        if language := _language_from_data_attribute(code_child):
            return language

    for cls in classes.split():
        if cls.startswith(_IGNORED_CLASS_PREFIXES):
            continue
        if _PLAIN_LANGUAGE.match(cls):
            return cls

    return ""


def collect_code_text(node: PageElement, context: RenderContext) -> str:
    """Concatenate every descendant text node of ``node`` verbatim."""
    out = MarkdownBuffer()
    for child in iter_children(node):
        kind = node_kind(child)
        if kind is NodeKind.TEXT:
            out.append(text_content(child))
        elif kind is NodeKind.ELEMENT:
            out.append(collect_code_text(child, context.descend()))
    return out.getvalue()


def normalize_code(code: str) -> str:
    """Normalize line endings, right-strip lines and drop surrounding blank lines."""
    lines = code.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join(line.rstrip() for line in lines).strip("\n")


def render_preformatted(node: PageElement, context: RenderContext) -> str:
    """Render a ``pre`` element as a fenced code block followed by a blank line.

    By default the block holds the element's inline content, so a ``code``
    child keeps its backticks. With ``verbatim_code_blocks`` the raw text is
    used instead; see :func:`render_verbatim`.
    """
    if context.options.verbatim_code_blocks:
        return render_verbatim(node, context)
    return f"{CODE_FENCE}\n{extract_text(node, context)}\n{CODE_FENCE}\n\n"


def render_verbatim(node: PageElement, context: RenderContext) -> str:
    """Render the raw text of a ``pre`` element behind an adaptive fence."""
    code = normalize_code(collect_code_text(node, context))
    fence = code_fence_for(code)

    language = ""
    if context.options.detect_code_language:
        language = detect_code_language(node)
        if language:
            logger.debug("Detected code block language: %s", language)

    return f"{fence}{language}\n{code}\n{fence}\n\n"
