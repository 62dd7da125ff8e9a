"""Tests for box list parsing, normalization and the built-in scenarios."""

import io

import pytest

from boxpack.core.models import Box
from boxpack.runner.dataset import (
    FIXED_SCENARIOS,
    BoxFormatError,
    build_scenarios,
    generate_big_and_small,
    generate_uniform,
    make_tall,
    parse_boxes,
    read_boxes,
)


class TestParseBoxes:
    def test_count_then_pairs(self):
        boxes = parse_boxes("3\n16 16\n8 8\n4 8\n")
        assert [(b.width, b.height) for b in boxes] == [(16, 16), (8, 8), (4, 8)]
        assert [b.id for b in boxes] == [0, 1, 2]

    def test_free_form_whitespace_and_extra_tokens(self):
        boxes = parse_boxes("2 1 2\t3\n4 99 99")
        assert [(b.width, b.height) for b in boxes] == [(1, 2), (3, 4)]

    def test_zero_boxes(self):
        assert parse_boxes("0\n") == []

    def test_read_from_stream(self):
        assert len(read_boxes(io.StringIO("1\n5 6\n"))) == 1

    @pytest.mark.parametrize("text", [
        "",
        "two\n1 1\n",
        "-1\n",
        "2\n1 1\n",
        "1\n1 x\n",
        "1\n0 4\n",
    ])
    def test_malformed_input(self, text):
        with pytest.raises(BoxFormatError):
            parse_boxes(text)

    def test_format_error_is_value_error(self):
        assert issubclass(BoxFormatError, ValueError)


class TestMakeTall:
    def test_rotates_wide_boxes_in_place(self):
        wide, tall = Box(6, 4), Box(3, 5)
        assert make_tall([wide, tall]) == [wide, tall]
        assert (wide.width, wide.height) == (4, 6)
        assert (tall.width, tall.height) == (3, 5)


class TestGenerators:
    def test_uniform_is_seeded(self):
        a = generate_uniform(20, seed=5)
        b = generate_uniform(20, seed=5)
        assert [(x.width, x.height) for x in a] == [(x.width, x.height) for x in b]

    def test_uniform_range(self):
        boxes = generate_uniform(200, 3, 9, seed=1)
        assert all(3 <= b.width <= 9 and 3 <= b.height <= 9 for b in boxes)

    def test_big_and_small(self):
        boxes = generate_big_and_small(seed=1)
        assert len(boxes) == 100
        assert [b.id for b in boxes] == list(range(100))
        assert all(b.width <= 19 and b.height <= 19 for b in boxes[20:])


class TestScenarios:
    def test_all_scenarios_built(self):
        scenarios = build_scenarios()
        assert list(scenarios) == list(FIXED_SCENARIOS) + ["similar_sizes", "big_and_small"]
        assert len(scenarios["similar_sizes"]) == 100
        assert len(scenarios["big_and_small"]) == 100

    def test_fixed_scenarios_match_sizes(self):
        scenarios = build_scenarios()
        for name, sizes in FIXED_SCENARIOS.items():
            assert [(b.width, b.height) for b in scenarios[name]] == sizes

    def test_fresh_boxes_each_call(self):
        assert build_scenarios()["perfect_fit"][0] is not build_scenarios()["perfect_fit"][0]
