"""Tests for the ASCII layout renderer."""

from boxpack.algorithms.packer import pack
from boxpack.core.models import Bin, Box
from boxpack.visualization.ascii_render import CONFLICT, render_layout


class TestRenderLayout:
    def test_single_box_outline(self):
        text, conflicts = render_layout([Box(3, 3)], Bin(3, 3))
        assert text == "+-+\n| |\n+-+"
        assert conflicts == []

    def test_one_line_per_x_column(self):
        text, _ = render_layout([Box(2, 5)], Bin(2, 5))
        assert text.splitlines() == ["+---+", "+---+"]

    def test_thin_boxes(self):
        text, conflicts = render_layout([Box(1, 3), Box(2, 1, x=1)], Bin(3, 3))
        assert text.splitlines() == ["+-+", "+  ", "+  "]
        assert conflicts == []

    def test_overlap_marked(self):
        a, b = Box(3, 3), Box(3, 3, x=1, y=1)
        text, conflicts = render_layout([a, b], Bin(4, 4))
        assert CONFLICT in text
        assert conflicts == [b]

    def test_packed_layout_has_no_conflicts(self, perfect_fit_boxes):
        result = pack(perfect_fit_boxes)
        text, conflicts = render_layout(result.boxes, result.bin)
        assert conflicts == []
        assert len(text.splitlines()) == 24
        assert all(len(line) == 16 for line in text.splitlines())
