"""
Free-space update — commit a free-space placement and rework the index.

The box goes into the top-left corner of its region. Every region it now
overlaps is trimmed, and the part of the chosen region to the right of the
box becomes a new region unless an existing one already covers it.
"""

from __future__ import annotations

import logging
from typing import Sequence

from boxpack.algorithms.search import Fit
from boxpack.core.free_space import FreeSpaceIndex, is_redundant, trim_regions
from boxpack.core.models import Bin, Box, FreeRegion
from boxpack.core.pending import PendingQueue

logger = logging.getLogger(__name__)


def position_in_region(box: Box, region: FreeRegion) -> bool:
    """
    Rotate ``box`` if needed and move it flush to the region's top-left.

    Returns:
        True if the box was laid on its side.
    """
    rotated = box.height > region.height
    if rotated:
        box.rotate()
    box.x = region.x
    box.y = region.top - box.height
    return rotated


def update_regions(
    regions: Sequence[FreeRegion],
    chosen: FreeRegion,
    box: Box,
    bin_width: int,
) -> list[FreeRegion]:
    """
    Compute the free regions left once ``box`` sits in ``chosen``.

    Args:
        regions:   Current regions, in index order (``chosen`` included).
        chosen:    Region the box was taken from, as it was before trimming.
        box:       The box, already positioned.
        bin_width: Current bin width.

    Returns:
        The new regions, in index order.
    """
    updated = FreeSpaceIndex(trim_regions(regions, box))

    if box.right < bin_width:
        candidate = FreeRegion(x=box.right, y=chosen.y, height=chosen.height)
        if not is_redundant(updated, candidate):
            updated.insert(candidate)

    return list(updated)


def place_in_free_space(
    fit: Fit,
    queue: PendingQueue,
    free_index: FreeSpaceIndex,
    bin_: Bin,
) -> bool:
    """
    Commit ``fit``: place the box, dequeue it and rebuild the free index.

    Returns:
        True if the box was rotated to fit.
    """
    region, box = fit
    queue.remove(box)
    rotated = position_in_region(box, region)

    logger.debug("F %r", box)
    logger.debug("\tfrom Free %r", region)

    free_index.rebuild(update_regions(list(free_index), region, box, bin_.width))
    return rotated
