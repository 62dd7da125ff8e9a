"""Greedy placer — appends boxes at the bin's right edge.

This is the only step that grows the bin. The first box is special: it
sets the bin height for the rest of the run.
"""

from __future__ import annotations

import logging

from boxpack.core.free_space import FreeSpaceIndex
from boxpack.core.models import Bin, Box, FreeRegion
from boxpack.core.pending import PendingQueue

logger = logging.getLogger(__name__)


def place_first(queue: PendingQueue, bin_: Bin) -> Box:
    """
    Take the tallest box off the queue and make it the bin.

    Returns:
        The placed box, at (0, 0).
    """
    box = queue.pop()
    box.x = box.y = 0
    bin_.extend(box)
    logger.debug("1 %r", box)
    return box


def place_greedy(box: Box, bin_: Bin, free_index: FreeSpaceIndex) -> FreeRegion | None:
    """
    Place ``box`` flush against the bin's right edge, on the floor.

    The strip above the box (up to the bin height) becomes a free region.

    Returns:
        The free region opened above the box, or None if the box is as tall
        as the bin.
    """
    box.x = bin_.width
    box.y = 0
    bin_.extend(box)
    logger.debug("G %r", box)

    free_height = bin_.height - box.height
    if free_height <= 0:
        return None

    region = FreeRegion(x=box.x, y=box.top, height=free_height)
    free_index.insert(region)
    return region
