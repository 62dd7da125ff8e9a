"""Shared fixtures for the boxpack tests."""

import os
import sys

import pytest

# Ensure the src layout is importable without an install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from boxpack.runner.dataset import boxes_from_sizes  # noqa: E402


@pytest.fixture
def perfect_fit_boxes():
    """Five boxes that pack into 24x16 without any waste."""
    return boxes_from_sizes([(16, 16), (8, 8), (4, 8), (4, 4), (4, 4)])


@pytest.fixture
def tall_second_boxes():
    return boxes_from_sizes([(16, 16), (4, 12), (8, 8), (4, 8), (4, 4)])


@pytest.fixture
def rotate_boxes():
    """The last box only fits the leftover gap when laid on its side."""
    return boxes_from_sizes([(4, 10), (4, 6), (4, 6), (4, 6)])


