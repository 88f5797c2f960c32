"""Tests for path fragment builders."""

import pytest

from qrtrace.outline.validation import even_odd_region
from qrtrace.svg import primitives as p


@pytest.mark.parametrize(
    "value,expected",
    [(4.0, "4"), (2.5, "2.5"), (-0.0, "0"), (1 / 3, "0.3333"), (118.79393923934, "118.7939"), (-10, "-10")],
)
def test_fmt(value, expected):
    assert p.fmt(value) == expected


def test_join_drops_empty_fragments():
    assert p.join("h 4", "", "v 4") == "h 4 v 4"


def test_moves_and_lines():
    assert p.move_to(1, 2) == "M 1 2"
    assert p.move_by(0.5, 0) == "m 0.5 0"
    assert p.down(4) == "v 4"
    assert p.up(4) == "v -4"
    assert p.right(4) == "h 4"
    assert p.left(4) == "h -4"


def test_quarter_arcs():
    assert p.left_down_arc(5) == "a 5 5 0 0 0 -5 5"
    assert p.down_right_arc(5) == "a 5 5 0 0 0 5 5"
    assert p.right_up_arc(5) == "a 5 5 0 0 0 5 -5"
    assert p.up_left_arc(5) == "a 5 5 0 0 0 -5 -5"


def test_half_arcs():
    assert p.bottom_u_arc(10) == "a 5 5 0 0 0 10 0"
    assert p.top_u_arc(10) == "a 5 5 0 0 0 -10 0"
    assert p.left_u_arc(10) == "a 5 5 0 0 0 0 10"
    assert p.right_u_arc(10) == "a 5 5 0 0 0 0 -10"


def test_square_ring_area():
    d = p.square_ring_path(0, 0, 28, 4)
    assert even_odd_region(d).area == pytest.approx(28 * 28 - 20 * 20)


def test_rounded_ring_has_two_sub_paths():
    d = p.rounded_ring_path(0, 0, 28)
    assert d.startswith("M 0 10 v 8")
    assert d.count("M") == 2
    assert 0 < even_odd_region(d).area < 28 * 28 - 20 * 20
