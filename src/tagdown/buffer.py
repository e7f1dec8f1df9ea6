#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/buffer.py
"""Append-only Markdown output buffer."""

from __future__ import annotations


class MarkdownBuffer:
    """Ordered, append-only text buffer owned by a single conversion.

    Fragments are collected in a list and joined once at the end.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> None:
        """Append a fragment; empty fragments are ignored."""
        if text:
            self._parts.append(text)

    def getvalue(self) -> str:
        """Return everything appended so far."""
        return "".join(self._parts)
