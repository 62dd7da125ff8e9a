"""
Layout validator — checks a finished packing against its invariants.

The packer never produces an invalid layout by construction; this module
exists so callers (the CLI, tests) can prove it.

Checks:
  1. Bounds   — every box lies inside [0, bin.width) x [0, bin.height)
  2. Overlap  — no two boxes share a cell
  3. Ceiling  — the bin is exactly as tall as the first placed box
"""

from __future__ import annotations

import numpy as np

from boxpack.core.models import Box, Bin, PackResult


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

class PlacementError(Exception):
    """Base class for layout validation errors."""


class OutOfBoundsError(PlacementError):
    """Box extends outside the bin."""


class OverlapError(PlacementError):
    """Two boxes share area."""


class HeightCeilingError(PlacementError):
    """Bin height differs from the height of the first placed box."""


# ─────────────────────────────────────────────────────────────────────────────
# Checks
# ─────────────────────────────────────────────────────────────────────────────

def check_bounds(box: Box, bin_: Bin) -> None:
    if box.x < 0 or box.y < 0:
        raise OutOfBoundsError(f"Negative coordinate: {box!r}")
    if box.right > bin_.width:
        raise OutOfBoundsError(f"X overflow: {box.x}+{box.width} > {bin_.width}")
    if box.top > bin_.height:
        raise OutOfBoundsError(f"Y overflow: {box.y}+{box.height} > {bin_.height}")


def occupancy_grid(boxes: list[Box], bin_: Bin) -> np.ndarray:
    """
    Count how many boxes cover each cell of the bin.

    Returns:
        int array of shape (bin width, bin height).
    """
    grid = np.zeros((bin_.width, bin_.height), dtype=np.int32)
    for box in boxes:
        grid[box.x:box.right, box.y:box.top] += 1
    return grid


def find_overlaps(boxes: list[Box]) -> list[tuple[Box, Box]]:
    """All pairs of boxes whose rectangles intersect."""
    pairs = []
    for i, a in enumerate(boxes):
        for b in boxes[i + 1:]:
            if a.overlaps(b):
                pairs.append((a, b))
    return pairs


def validate_packing(result: PackResult) -> bool:
    """
    Validate a finished packing.

    Returns:
        True if all checks pass.

    Raises:
        OutOfBoundsError:   a box leaves the bin.
        OverlapError:       two boxes share area.
        HeightCeilingError: the bin height is not the first box's height.
    """
    bin_ = result.bin
    for box in result.boxes:
        check_bounds(box, bin_)

    grid = occupancy_grid(result.boxes, bin_)
    if int(grid.max(initial=0)) > 1:
        a, b = find_overlaps(result.boxes)[0]
        raise OverlapError(f"{a!r} overlaps {b!r}")

    if result.placements:
        first_height = result.placements[0].height
        if bin_.height != first_height:
            raise HeightCeilingError(
                f"Bin height {bin_.height} != first box height {first_height}"
            )

    return True
