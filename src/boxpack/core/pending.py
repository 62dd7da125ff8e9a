"""Pending box queue — boxes waiting to be placed, tallest first."""

from __future__ import annotations

import bisect
from typing import Iterable, Iterator

from boxpack.core.models import Box


class PendingQueue:
    """
    Boxes not yet placed, ordered by height (desc), then area (desc),
    then the order they were pushed.

    The same order decides which box the greedy step takes next and which
    box wins equal-area ties during free-space search. A box must not be
    resized while it is queued; rotate it only after ``remove()``.
    """

    def __init__(self, boxes: Iterable[Box] = ()) -> None:
        self._keys: list[tuple[int, int, int]] = []
        self._boxes: list[Box] = []
        self._key_of: dict[int, tuple[int, int, int]] = {}
        self._counter = 0
        for box in boxes:
            self.push(box)

    def push(self, box: Box) -> None:
        key = (-box.height, -box.area, self._counter)
        self._counter += 1
        i = bisect.bisect_right(self._keys, key)
        self._keys.insert(i, key)
        self._boxes.insert(i, box)
        self._key_of[id(box)] = key

    def head(self) -> Box:
        if not self._boxes:
            raise IndexError("head of an empty PendingQueue")
        return self._boxes[0]

    def pop(self) -> Box:
        """Remove and return the tallest (then largest) box."""
        box = self.head()
        self.remove(box)
        return box

    def remove(self, box: Box) -> None:
        key = self._key_of.pop(id(box), None)
        if key is None:
            raise KeyError(f"{box!r} is not queued")
        i = bisect.bisect_left(self._keys, key)
        del self._keys[i]
        del self._boxes[i]

    def __contains__(self, box: object) -> bool:
        return id(box) in self._key_of

    def __iter__(self) -> Iterator[Box]:
        return iter(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def __bool__(self) -> bool:
        return bool(self._boxes)
