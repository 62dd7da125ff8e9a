"""
Free-space index — the leftover strips between placed boxes.

Every FreeRegion reaches from its x to the bin's right edge, so the index
only needs (x, y, height) per region. Regions are kept sorted by (x, y) with
at most one region per position.

The placement-driven rewrites are pure functions:

    trim_regions(regions, box) — cut every region the new box overlaps
    is_redundant(regions, c)   — c is fully covered by an existing region

so the index is rebuilt from a snapshot instead of being edited while it
is being walked.
"""

from __future__ import annotations

import bisect
from typing import Iterable, Iterator, Sequence

from boxpack.core.models import Box, FreeRegion


class FreeSpaceIndex:
    """Sorted set of free regions keyed by position (x asc, y asc)."""

    def __init__(self, regions: Iterable[FreeRegion] = ()) -> None:
        self._keys: list[tuple[int, int]] = []
        self._regions: list[FreeRegion] = []
        for region in regions:
            self.insert(region)

    def insert(self, region: FreeRegion) -> bool:
        """
        Add ``region`` unless its position is already taken.

        Returns:
            True if inserted, False if a region already sits at (x, y).
        """
        i = bisect.bisect_left(self._keys, region.key)
        if i < len(self._keys) and self._keys[i] == region.key:
            return False
        self._keys.insert(i, region.key)
        self._regions.insert(i, region)
        return True

    def remove(self, region: FreeRegion) -> None:
        i = bisect.bisect_left(self._keys, region.key)
        if i == len(self._keys) or self._regions[i] != region:
            raise KeyError(f"{region!r} is not in the index")
        del self._keys[i]
        del self._regions[i]

    def replace(self, old: FreeRegion, new: FreeRegion | None) -> bool:
        """
        Erase ``old`` then reinsert ``new`` (dropped when None, empty, or
        its position is taken).
        """
        self.remove(old)
        if new is None or new.height <= 0:
            return False
        return self.insert(new)

    def rebuild(self, regions: Iterable[FreeRegion]) -> None:
        """Replace the whole content with ``regions``."""
        self._keys.clear()
        self._regions.clear()
        for region in regions:
            self.insert(region)

    def get(self, x: int, y: int) -> FreeRegion | None:
        i = bisect.bisect_left(self._keys, (x, y))
        if i < len(self._keys) and self._keys[i] == (x, y):
            return self._regions[i]
        return None

    def before(self, x: int) -> list[FreeRegion]:
        """Regions starting strictly left of ``x``, in index order."""
        i = bisect.bisect_left(self._keys, (x,))
        return self._regions[:i]

    def __iter__(self) -> Iterator[FreeRegion]:
        return iter(list(self._regions))

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, region: object) -> bool:
        if not isinstance(region, FreeRegion):
            return False
        return self.get(region.x, region.y) == region

    def __repr__(self) -> str:
        return f"FreeSpaceIndex({self._regions!r})"


# ─────────────────────────────────────────────────────────────────────────────
# Pure rewrites
# ─────────────────────────────────────────────────────────────────────────────

def trim_region(region: FreeRegion, box: Box) -> FreeRegion | None:
    """
    Cut ``region`` so it no longer overlaps ``box`` vertically.

    The caller guarantees the two overlap horizontally (region.x < box.right).

    Returns:
        The region unchanged, its trimmed replacement, or None when nothing
        of it is left.
    """
    height_diff = region.top - box.y
    y_diff = box.top - region.y

    # Box covers the bottom of the region: move the bottom up.
    if y_diff > 0 and box.top < region.top:
        trimmed = region.with_y(box.top)
    # Box covers the top of the region: lower the top.
    elif height_diff > 0 and box.y >= region.y:
        trimmed = region.with_height(region.height - height_diff)
    # Box spans the whole region.
    elif y_diff > 0 and height_diff > 0:
        return None
    else:
        return region

    return trimmed if trimmed.height > 0 else None


def trim_regions(regions: Sequence[FreeRegion], box: Box) -> list[FreeRegion]:
    """
    Return the regions left after placing ``box``.

    ``regions`` must be in index order. Regions at or beyond ``box.right``
    are kept as they are. Each trimmed region is erased then reinserted, so
    a replacement landing on a position that is already taken is dropped.
    """
    index = FreeSpaceIndex(regions)
    for region in regions:
        if region.x >= box.right:
            break
        replacement = trim_region(region, box)
        if replacement is region:
            continue
        index.replace(region, replacement)
    return list(index)


def is_redundant(regions: Iterable[FreeRegion], candidate: FreeRegion) -> bool:
    """True if some region in ``regions`` fully covers ``candidate``."""
    return any(region.dominates(candidate) for region in regions)
