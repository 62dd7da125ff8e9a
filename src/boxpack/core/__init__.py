"""Geometric primitives and the ordered structures the packer works on."""

from .free_space import FreeSpaceIndex, is_redundant, trim_region, trim_regions
from .models import Bin, Box, FreeRegion, PackResult, Phase, Placement
from .pending import PendingQueue

__all__ = [
    "Bin",
    "Box",
    "FreeRegion",
    "FreeSpaceIndex",
    "PackResult",
    "PendingQueue",
    "Phase",
    "Placement",
    "is_redundant",
    "trim_region",
    "trim_regions",
]
