"""Pack controller — drives greedy placement and free-space reuse.

How it works:

    1. The tallest box is placed first and fixes the bin height.
    2. The next tallest box is appended at the bin's right edge.
    3. The biggest pending box that fits a free region is placed there,
       repeatedly, until nothing fits.
    4. Back to 2 until every box is placed.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from boxpack.algorithms.greedy import place_first, place_greedy
from boxpack.algorithms.search import find_best_fit
from boxpack.algorithms.update import place_in_free_space
from boxpack.core.free_space import FreeSpaceIndex
from boxpack.core.models import Bin, Box, FreeRegion, PackResult, Phase, Placement
from boxpack.core.pending import PendingQueue

logger = logging.getLogger(__name__)

PlacementObserver = Callable[[Placement], None]


class FreeSpacePacker:
    """
    Two-phase packer: greedy bin growth plus free-space reuse.

    Boxes are expected to be tall (height >= width); the packer rotates
    boxes itself when a free region needs it but does not normalize input.
    The Box objects passed to ``pack()`` receive their final position and
    dimensions.
    """

    def __init__(self, observer: PlacementObserver | None = None) -> None:
        self.observer = observer
        self.bin = Bin()
        self.queue = PendingQueue()
        self.free_index = FreeSpaceIndex()
        self.placements: list[Placement] = []

    def pack(self, boxes: Iterable[Box]) -> PackResult:
        """
        Pack ``boxes`` into the smallest bin this heuristic finds.

        Args:
            boxes: Boxes to pack, in input order.

        Returns:
            PackResult with the final bin, the boxes (input order) and the
            placements (placement order). Empty input gives a 0x0 bin.
        """
        boxes = list(boxes)
        self.bin = Bin()
        self.queue = PendingQueue(boxes)
        self.free_index = FreeSpaceIndex()
        self.placements = []

        if not self.queue:
            return PackResult(bin=self.bin, boxes=boxes)

        first = place_first(self.queue, self.bin)
        self._record(first, Phase.FIRST)

        while self.queue:
            box = self.queue.pop()
            place_greedy(box, self.bin, self.free_index)
            self._record(box, Phase.GREEDY)
            self._fill_free_space()

        logger.info(
            "Packed %d boxes into %dx%d (area %d)",
            len(boxes), self.bin.width, self.bin.height, self.bin.area,
        )
        return PackResult(bin=self.bin, boxes=boxes, placements=list(self.placements))

    def _fill_free_space(self) -> None:
        """Place the biggest fitting box until no free region takes any."""
        while True:
            fit = find_best_fit(self.queue, self.free_index, self.bin)
            if fit is None:
                return
            rotated = place_in_free_space(fit, self.queue, self.free_index, self.bin)
            self._record(fit.box, Phase.FREE, rotated=rotated, region=fit.region)

    def _record(
        self,
        box: Box,
        phase: Phase,
        rotated: bool = False,
        region: FreeRegion | None = None,
    ) -> None:
        placement = Placement(
            box_id=box.id,
            x=box.x,
            y=box.y,
            width=box.width,
            height=box.height,
            phase=phase,
            step=len(self.placements),
            rotated=rotated,
            region=region,
        )
        self.placements.append(placement)
        if self.observer is not None:
            self.observer(placement)


def pack(
    boxes: Iterable[Box],
    observer: PlacementObserver | None = None,
) -> PackResult:
    """Pack ``boxes`` with a fresh FreeSpacePacker."""
    return FreeSpacePacker(observer=observer).pack(boxes)
