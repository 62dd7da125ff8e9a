"""Packing steps: greedy placer, free-space search/update, pack controller."""

from .greedy import place_first, place_greedy
from .packer import FreeSpacePacker, pack
from .search import Fit, find_best_fit, fits
from .update import place_in_free_space, position_in_region, update_regions

__all__ = [
    "Fit",
    "FreeSpacePacker",
    "find_best_fit",
    "fits",
    "pack",
    "place_first",
    "place_greedy",
    "place_in_free_space",
    "position_in_region",
    "update_regions",
]
