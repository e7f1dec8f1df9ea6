#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-conversion render state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from tagdown.exceptions import DepthExceededError
from tagdown.options import HtmlOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Immutable state threaded through the renderers.

    Parameters
    ----------
    options : HtmlOptions
        Conversion options
    depth : int, default 0
        Number of elements entered above the node being rendered

    """

    options: HtmlOptions = field(default_factory=HtmlOptions)
    depth: int = 0

    def descend(self) -> RenderContext:
        """Return the context for the children of the current element.

        Raises
        ------
        DepthExceededError
            If entering the children would exceed ``options.max_depth``.

        """
        depth = self.depth + 1
        max_depth = self.options.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug("Nesting depth %d exceeds max_depth=%d", depth, max_depth)
            raise DepthExceededError(max_depth)
        return replace(self, depth=depth)
