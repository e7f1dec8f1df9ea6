#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/utils/text.py
"""Text processing utilities for the renderers.

Functions
---------
strip_trailing_whitespace : Trim spaces, tabs, CR and LF from the end of text
pad_right : Right-pad text to a minimum width without truncating
code_fence_for : Pick a backtick fence that cannot collide with the content

Examples
--------
    >>> strip_trailing_whitespace("  indented\\n\\t")
    '  indented'
    >>> pad_right("ab", 4)
    'ab  '
    >>> pad_right("abcdef", 4)
    'abcdef'
    >>> code_fence_for("uses ``` inside")
    '````'

"""

from __future__ import annotations

import re

from tagdown.constants import MAX_CODE_FENCE_LENGTH, MIN_CODE_FENCE_LENGTH, TRAILING_WHITESPACE

_BACKTICK_RUN = re.compile(r"`+")


def strip_trailing_whitespace(text: str) -> str:
    """Remove trailing spaces, tabs, newlines and carriage returns only.

    Leading whitespace and other trailing characters (form feeds,
    non-breaking spaces) are kept.
    """
    return text.rstrip(TRAILING_WHITESPACE)


def pad_right(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width``; longer text is returned unchanged."""
    if len(text) >= width:
        return text
    return text + " " * (width - len(text))


def code_fence_for(code: str) -> str:
    """Return a backtick fence one longer than the longest backtick run in ``code``.

    The fence is at least ``MIN_CODE_FENCE_LENGTH`` and at most
    ``MAX_CODE_FENCE_LENGTH`` characters long.
    """
    longest = max((len(run) for run in _BACKTICK_RUN.findall(code)), default=0)
    fence_length = max(MIN_CODE_FENCE_LENGTH, longest + 1)
    fence_length = min(fence_length, MAX_CODE_FENCE_LENGTH)
    return "`" * fence_length
