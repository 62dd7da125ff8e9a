"""Free-space search — best fit of pending boxes into free regions."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from boxpack.core.models import Bin, Box, FreeRegion


class Fit(NamedTuple):
    region: FreeRegion
    box: Box


def fits(box: Box, region: FreeRegion, bin_width: int) -> bool:
    """
    Can ``box`` go into ``region`` in either orientation?

    The longer side must fit along the larger of (free width, region height)
    and the shorter side along the smaller one.
    """
    free_width = region.free_width(bin_width)
    if box.height > max(free_width, region.height):
        return False
    if box.width > min(free_width, region.height):
        return False
    return True


def find_best_fit(
    queue: Iterable[Box],
    regions: Iterable[FreeRegion],
    bin_: Bin,
) -> Fit | None:
    """
    Find the largest pending box that fits in some free region.

    Regions are scanned in index order and, for each region, boxes in queue
    order. Only a strictly larger area replaces the current best, so ties go
    to the first pair encountered.

    Returns:
        The winning (region, box) pair, or None if nothing fits anywhere.
    """
    boxes = list(queue)
    best: Fit | None = None
    max_area = -1

    for region in regions:
        for box in boxes:
            if box.area <= max_area:
                continue
            if not fits(box, region, bin_.width):
                continue
            max_area = box.area
            best = Fit(region, box)

    return best
