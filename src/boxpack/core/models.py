"""Core data models for the free-space box packer.

Classes:
    Box         — a box to pack; mutated once when it is placed
    FreeRegion  — leftover strip of bin space reaching the bin's right edge
    Bin         — the growing bin (height fixed by the first box)
    Placement   — frozen record of one committed placement
    PackResult  — final bin plus every box and placement
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


# ─────────────────────────────────────────────────────────────────────────────
# Box
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(eq=False)
class Box:
    """
    A rectangular box, pending or placed.

    Boxes compare by identity: two boxes with the same size are still
    different boxes, and the packer reports results per input object.

    Attributes:
        width:  Horizontal extent (grows the bin).
        height: Vertical extent (bounded by the bin height).
        x, y:   Bottom-left corner, meaningful once placed.
        id:     Input index, used for tie-breaks and reporting.
    """
    width: int
    height: int
    x: int = 0
    y: int = 0
    id: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Box dimensions must be >= 1, got {self.width}x{self.height}"
            )

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def top(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def is_tall(self) -> bool:
        return self.height >= self.width

    def rotate(self) -> None:
        """Lay the box on its side (swap width and height)."""
        self.width, self.height = self.height, self.width

    def overlaps(self, other: "Box") -> bool:
        """True if the two rectangles share a positive area."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.top
            and other.y < self.top
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "width": self.width, "height": self.height,
                "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: dict) -> "Box":
        return cls(width=d["width"], height=d["height"], x=d.get("x", 0),
                   y=d.get("y", 0), id=d.get("id", 0))

    def __repr__(self) -> str:
        return f"Box({self.width}, {self.height}) -> {self.x}, {self.y}"


# ─────────────────────────────────────────────────────────────────────────────
# FreeRegion
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FreeRegion:
    """
    Unused space starting at (x, y) and reaching the bin's right edge.

    The width is never stored: it is ``bin.width - x`` and stretches as the
    bin grows. Frozen because (x, y) is its key in the free-space index;
    changes go through ``with_y`` / ``with_height`` and a reinsert.
    """
    x: int
    y: int
    height: int

    @property
    def top(self) -> int:
        return self.y + self.height

    @property
    def key(self) -> tuple[int, int]:
        return (self.x, self.y)

    def free_width(self, bin_width: int) -> int:
        return bin_width - self.x

    def with_height(self, height: int) -> "FreeRegion":
        return replace(self, height=height)

    def with_y(self, y: int) -> "FreeRegion":
        """Move the bottom edge to ``y`` keeping the top edge in place."""
        return replace(self, y=y, height=self.height - (y - self.y))

    def dominates(self, other: "FreeRegion") -> bool:
        """True if this region covers ``other`` entirely."""
        return self.x <= other.x and self.y <= other.y and self.top >= other.top

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "height": self.height}


# ─────────────────────────────────────────────────────────────────────────────
# Bin
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Bin:
    """The bin being filled. Both sides only ever grow."""
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    def extend(self, box: Box) -> None:
        """Grow the bin so that ``box`` fits inside it."""
        self.width = max(self.width, box.right)
        self.height = max(self.height, box.top)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


# ─────────────────────────────────────────────────────────────────────────────
# Placement records & result
# ─────────────────────────────────────────────────────────────────────────────

class Phase(str, Enum):
    """Which step of the packer committed a placement."""
    FIRST = "first"
    GREEDY = "greedy"
    FREE = "free"

    @property
    def tag(self) -> str:
        return {"first": "1", "greedy": "G", "free": "F"}[self.value]


@dataclass(frozen=True)
class Placement:
    """
    A committed placement, in the order the packer made it.

    Attributes:
        box_id:        ID of the placed box.
        x, y:          Final bottom-left corner.
        width, height: Final dimensions (after any rotation).
        phase:         Step that placed it.
        step:          Sequential placement number, starting at 0.
        rotated:       Whether the packer laid the box on its side.
        region:        Free region the box was taken from (free phase only).
    """
    box_id: int
    x: int
    y: int
    width: int
    height: int
    phase: Phase
    step: int
    rotated: bool = False
    region: FreeRegion | None = None

    @property
    def area(self) -> int:
        return self.width * self.height

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "box_id": self.box_id,
            "phase": self.phase.value,
            "dims": [self.width, self.height],
            "position": [self.x, self.y],
            "rotated": self.rotated,
            "region": self.region.to_dict() if self.region else None,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Placement":
        region = d.get("region")
        return cls(
            box_id=d["box_id"], x=d["position"][0], y=d["position"][1],
            width=d["dims"][0], height=d["dims"][1], phase=Phase(d["phase"]),
            step=d["step"], rotated=d.get("rotated", False),
            region=FreeRegion(**region) if region else None,
        )


@dataclass
class PackResult:
    """Outcome of one packing run."""
    bin: Bin
    boxes: list[Box] = field(default_factory=list)
    placements: list[Placement] = field(default_factory=list)

    @property
    def box_area(self) -> int:
        return sum(b.area for b in self.boxes)

    @property
    def waste(self) -> int:
        return self.bin.area - self.box_area

    @property
    def utilization(self) -> float:
        """Fraction of the bin covered by boxes (0.0 for an empty bin)."""
        if self.bin.area == 0:
            return 0.0
        return self.box_area / self.bin.area

    def to_dict(self) -> dict:
        return {
            "bin": self.bin.to_dict(),
            "boxes": [b.to_dict() for b in self.boxes],
            "placements": [p.to_dict() for p in self.placements],
        }
