"""Box lists for the packer: text input, normalization, scenarios.

Input format:
    n
    w1 h1
    w2 h2
    ...

Whitespace between tokens is free-form; only the first ``n`` pairs are read.
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, TextIO

from boxpack.core.models import Box


class BoxFormatError(ValueError):
    """The box list could not be parsed."""


def parse_boxes(text: str) -> list[Box]:
    """
    Parse a box list.

    Raises:
        BoxFormatError: if the count or a dimension is missing, not an
            integer, or not positive.
    """
    tokens = text.split()
    if not tokens:
        raise BoxFormatError("Empty input: expected a box count")

    try:
        count = int(tokens[0])
    except ValueError as e:
        raise BoxFormatError(f"Invalid box count: {tokens[0]!r}") from e
    if count < 0:
        raise BoxFormatError(f"Negative box count: {count}")

    values = tokens[1:1 + 2 * count]
    if len(values) < 2 * count:
        raise BoxFormatError(
            f"Expected {count} boxes, got {len(values) // 2} complete pairs"
        )

    boxes = []
    for i in range(count):
        w_tok, h_tok = values[2 * i], values[2 * i + 1]
        try:
            width, height = int(w_tok), int(h_tok)
        except ValueError as e:
            raise BoxFormatError(f"Box {i}: invalid size {w_tok!r} {h_tok!r}") from e
        try:
            boxes.append(Box(width=width, height=height, id=i))
        except ValueError as e:
            raise BoxFormatError(f"Box {i}: {e}") from e
    return boxes


def read_boxes(stream: TextIO) -> list[Box]:
    """Read a box list from an open text stream (e.g. stdin)."""
    return parse_boxes(stream.read())


def make_tall(boxes: Iterable[Box]) -> list[Box]:
    """
    Rotate every box so that height >= width.

    The packer expects tall boxes. Boxes are rotated in place.
    """
    boxes = list(boxes)
    for box in boxes:
        if box.height < box.width:
            box.rotate()
    return boxes


def boxes_from_sizes(sizes: Iterable[tuple[int, int]]) -> list[Box]:
    """Build boxes from (width, height) pairs, numbering them in order."""
    return [Box(width=w, height=h, id=i) for i, (w, h) in enumerate(sizes)]


# ─────────────────────────────────────────────────────────────────────────────
# Generators
# ─────────────────────────────────────────────────────────────────────────────

def generate_uniform(
    n: int,
    min_dim: int = 3,
    max_dim: int = 49,
    seed: int | None = None,
    start_id: int = 0,
) -> list[Box]:
    """
    Generate ``n`` boxes with each side drawn from U{min_dim..max_dim}.

    Args:
        n:        Number of boxes.
        min_dim:  Smallest side.
        max_dim:  Largest side (inclusive).
        seed:     Seed for a private RNG; the global one is left alone.
        start_id: ID of the first box.
    """
    rng = random.Random(seed)
    return [
        Box(width=rng.randint(min_dim, max_dim),
            height=rng.randint(min_dim, max_dim),
            id=start_id + i)
        for i in range(n)
    ]


def generate_similar(seed: int = 0) -> list[Box]:
    """100 boxes of similar size (sides 3..49)."""
    return generate_uniform(100, 3, 49, seed=seed)


def generate_big_and_small(seed: int = 1) -> list[Box]:
    """20 big boxes (sides 3..99) followed by 80 small ones (sides 3..19)."""
    rng = random.Random(seed)
    big = generate_uniform(20, 3, 99, seed=rng.randrange(2**31))
    small = generate_uniform(80, 3, 19, seed=rng.randrange(2**31), start_id=20)
    return big + small


# ─────────────────────────────────────────────────────────────────────────────
# Built-in scenarios
# ─────────────────────────────────────────────────────────────────────────────

FIXED_SCENARIOS: dict[str, list[tuple[int, int]]] = {
    "perfect_fit": [(16, 16), (8, 8), (4, 8), (4, 4), (4, 4)],
    "tall_second": [(16, 16), (4, 12), (8, 8), (4, 8), (4, 4)],
    "rotate_into_gap": [(4, 10), (4, 6), (4, 6), (4, 6)],
}


def build_scenarios(seed: int = 0) -> dict[str, list[Box]]:
    """
    All built-in scenarios, freshly built so they can be packed.

    Args:
        seed: Base seed for the random scenarios.
    """
    scenarios: dict[str, Callable[[], list[Box]]] = {
        name: (lambda sizes=sizes: boxes_from_sizes(sizes))
        for name, sizes in FIXED_SCENARIOS.items()
    }
    scenarios["similar_sizes"] = lambda: generate_similar(seed)
    scenarios["big_and_small"] = lambda: generate_big_and_small(seed + 1)
    return {name: build() for name, build in scenarios.items()}
