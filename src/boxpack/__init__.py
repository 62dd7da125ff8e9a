"""boxpack — pack rectangles into the narrowest fixed-height bin.

Typical usage:
    from boxpack import Box, pack
    result = pack([Box(16, 16), Box(8, 8), Box(4, 8)])
    result.bin.width, result.bin.height
"""

from .algorithms.packer import FreeSpacePacker, pack
from .core.models import Bin, Box, FreeRegion, PackResult, Phase, Placement
from .core.validator import PlacementError, validate_packing

__version__ = "0.1.0"

__all__ = [
    "Bin",
    "Box",
    "FreeRegion",
    "FreeSpacePacker",
    "PackResult",
    "Phase",
    "Placement",
    "PlacementError",
    "pack",
    "validate_packing",
]
