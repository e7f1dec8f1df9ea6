#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/tags.py
"""Tag classification for block and inline dispatch.

Raw tag names are classified once into a closed set of categories. The
traversal engine and the inline extractor both branch on ``TagKind.category``
rather than comparing tag-name strings, and ``UNRECOGNIZED`` is the explicit
"render the children instead" variant.

Tag names are compared case-sensitively against the lowercase vocabulary in
:mod:`tagdown.constants`.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from tagdown.constants import (
    BOLD_TAGS,
    HEADING_PREFIX,
    IMAGE_TAG,
    INLINE_CODE_TAG,
    ITALIC_TAGS,
    LINK_TAG,
    ORDERED_LIST_TAG,
    PARAGRAPH_TAG,
    PREFORMATTED_TAG,
    TABLE_TAG,
    UNORDERED_LIST_TAG,
)


class TagCategory(Enum):
    """Rendering category of an element."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BOLD = "bold"
    ITALIC = "italic"
    LINK = "link"
    IMAGE = "image"
    LIST = "list"
    PREFORMATTED = "preformatted"
    INLINE_CODE = "inline_code"
    TABLE = "table"
    UNRECOGNIZED = "unrecognized"


INLINE_CATEGORIES = frozenset(
    {
        TagCategory.BOLD,
        TagCategory.ITALIC,
        TagCategory.LINK,
        TagCategory.IMAGE,
        TagCategory.INLINE_CODE,
    }
)


@dataclass(frozen=True)
class TagKind:
    """Classified tag.

    Parameters
    ----------
    category : TagCategory
        Rendering category
    level : int, default 0
        Heading level, only meaningful for ``HEADING``
    ordered : bool, default False
        Whether a ``LIST`` is numbered

    """

    category: TagCategory
    level: int = 0
    ordered: bool = False

    @property
    def is_recognized(self) -> bool:
        """Whether the tag has a dedicated rendering rule."""
        return self.category is not TagCategory.UNRECOGNIZED

    @property
    def is_inline(self) -> bool:
        """Whether the tag has an inline rendering rule."""
        return self.category in INLINE_CATEGORIES


UNRECOGNIZED = TagKind(TagCategory.UNRECOGNIZED)

_SIMPLE_TAGS: dict[str, TagKind] = {
    PARAGRAPH_TAG: TagKind(TagCategory.PARAGRAPH),
    LINK_TAG: TagKind(TagCategory.LINK),
    IMAGE_TAG: TagKind(TagCategory.IMAGE),
    ORDERED_LIST_TAG: TagKind(TagCategory.LIST, ordered=True),
    UNORDERED_LIST_TAG: TagKind(TagCategory.LIST, ordered=False),
    PREFORMATTED_TAG: TagKind(TagCategory.PREFORMATTED),
    INLINE_CODE_TAG: TagKind(TagCategory.INLINE_CODE),
    TABLE_TAG: TagKind(TagCategory.TABLE),
}
_SIMPLE_TAGS.update({name: TagKind(TagCategory.BOLD) for name in BOLD_TAGS})
_SIMPLE_TAGS.update({name: TagKind(TagCategory.ITALIC) for name in ITALIC_TAGS})


def heading_level(name: str) -> int | None:
    """Return the heading level for ``h`` followed by exactly one ASCII digit."""
    if len(name) == 2 and name[0] == HEADING_PREFIX and name[1] in string.digits:
        return int(name[1])
    return None


def classify_tag(name: str) -> TagKind:
    """Classify a raw tag name.

    Parameters
    ----------
    name : str
        Tag name as provided by the parser

    Returns
    -------
    TagKind
        The matching kind, or ``UNRECOGNIZED``

    Examples
    --------
        >>> classify_tag("h3")
        TagKind(category=<TagCategory.HEADING: 'heading'>, level=3, ordered=False)
        >>> classify_tag("div").is_recognized
        False

    """
    level = heading_level(name)
    if level is not None:
        return TagKind(TagCategory.HEADING, level=level)
    return _SIMPLE_TAGS.get(name, UNRECOGNIZED)
