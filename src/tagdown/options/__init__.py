"""Configuration options for tagdown conversions."""

from tagdown.options.base import CloneFrozenMixin
from tagdown.options.html import HtmlOptions

__all__ = [
    "CloneFrozenMixin",
    "HtmlOptions",
]
