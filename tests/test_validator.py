"""Tests for the layout validator."""

import pytest

from boxpack.core.models import Bin, Box, PackResult, Phase, Placement
from boxpack.core.validator import (
    HeightCeilingError,
    OutOfBoundsError,
    OverlapError,
    PlacementError,
    occupancy_grid,
    validate_packing,
)


def first_placement(box):
    return Placement(box_id=box.id, x=box.x, y=box.y, width=box.width,
                     height=box.height, phase=Phase.FIRST, step=0)


class TestValidatePacking:
    def test_valid_layout(self):
        a = Box(4, 4)
        b = Box(2, 4, x=4)
        result = PackResult(bin=Bin(6, 4), boxes=[a, b], placements=[first_placement(a)])
        assert validate_packing(result)

    def test_overlap(self):
        a = Box(4, 4)
        b = Box(2, 2, x=3, y=1)
        with pytest.raises(OverlapError):
            validate_packing(PackResult(bin=Bin(6, 4), boxes=[a, b]))

    @pytest.mark.parametrize("box", [
        Box(4, 4, x=3),
        Box(2, 2, y=3),
        Box(2, 2, x=-1),
    ])
    def test_out_of_bounds(self, box):
        with pytest.raises(OutOfBoundsError):
            validate_packing(PackResult(bin=Bin(6, 4), boxes=[box]))

    def test_height_ceiling(self):
        a = Box(2, 3)
        result = PackResult(bin=Bin(2, 4), boxes=[a], placements=[first_placement(a)])
        with pytest.raises(HeightCeilingError):
            validate_packing(result)

    def test_errors_share_a_base(self):
        assert issubclass(OverlapError, PlacementError)
        assert issubclass(OutOfBoundsError, PlacementError)
        assert issubclass(HeightCeilingError, PlacementError)


class TestOccupancyGrid:
    def test_counts_covered_cells(self):
        grid = occupancy_grid([Box(2, 3), Box(1, 1, x=2)], Bin(3, 3))
        assert grid.shape == (3, 3)
        assert int(grid.sum()) == 7
        assert int(grid.max()) == 1

    def test_empty_bin(self):
        assert occupancy_grid([], Bin()).size == 0
