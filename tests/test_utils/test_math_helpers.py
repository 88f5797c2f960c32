"""Tests for sizing helpers."""

from qrtrace.utils.math_helpers import ImageSize, calculate_image_size, round_size


def test_round_size():
    assert round_size(8.7) == 8
    assert round_size(8.7, enabled=False) == 8.7


def test_square_logo():
    assert calculate_image_size(100, 100, 44, 7, 4) == ImageSize(20, 20, 5, 5)


def test_wide_logo():
    assert calculate_image_size(200, 100, 44, 7, 4) == ImageSize(28, 14, 7, 5)


def test_hidden_counts_are_odd():
    for width, height in ((100, 100), (300, 100), (100, 250), (640, 480)):
        size = calculate_image_size(width, height, 120, 15, 4)
        assert size.hide_x % 2 == 1
        assert size.hide_y % 2 == 1
        assert size.hide_x <= 15 and size.hide_y <= 15


def test_degenerate_inputs():
    assert calculate_image_size(0, 100, 44, 7, 4) == ImageSize()
    assert calculate_image_size(100, 100, 0, 7, 4) == ImageSize()
    assert calculate_image_size(100, -5, 44, 7, 4) == ImageSize()
