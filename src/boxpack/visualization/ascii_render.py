"""
ASCII layout renderer.

Each output line is one x column of the bin and each character one y
cell, so the picture is the bin turned on its side. Box sides drawn along
y use '+' at the ends and '-' between; sides drawn along x use '|'.

Drawing onto a cell that is already taken writes '*' and records the box
as a conflict, which makes overlapping boxes visible.

Usage:
    text, conflicts = render_layout(result.boxes, result.bin)
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from boxpack.core.models import Bin, Box

EMPTY = " "
CONFLICT = "*"


class Rendering(NamedTuple):
    text: str
    conflicts: list[Box]


def _draw(canvas: np.ndarray, x: int, y: int, char: str) -> bool:
    """Put ``char`` at (x, y); returns False if the cell was already drawn."""
    taken = canvas[x, y] != EMPTY
    canvas[x, y] = CONFLICT if taken else char
    return not taken


def draw_box(canvas: np.ndarray, box: Box) -> bool:
    """Draw the outline of ``box``; returns False if it hit anything."""
    ok = True

    for i in range(box.height):
        char = "+" if i == 0 or i == box.height - 1 else "-"
        ok &= _draw(canvas, box.x, box.y + i, char)
        if box.width == 1:
            continue
        ok &= _draw(canvas, box.right - 1, box.y + i, char)

    for i in range(1, box.width - 1):
        ok &= _draw(canvas, box.x + i, box.y, "|")
        if box.height == 1:
            continue
        ok &= _draw(canvas, box.x + i, box.top - 1, "|")

    return ok


def render_layout(boxes: list[Box], bin_: Bin) -> Rendering:
    """
    Render placed boxes inside ``bin_``.

    Returns:
        The picture (one line per x, no trailing newline) and the boxes
        that collided with something already drawn.
    """
    canvas = np.full((bin_.width, bin_.height), EMPTY, dtype="<U1")
    conflicts = [box for box in boxes if not draw_box(canvas, box)]
    text = "\n".join("".join(row) for row in canvas)
    return Rendering(text, conflicts)
