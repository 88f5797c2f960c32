"""Tests for path geometry helpers."""

import numpy as np
from svgpathtools import parse_path

from qrtrace.utils.geometry import path_rings, sample_ring, signed_area, split_subpaths, winding_direction


def test_signed_area_sign_follows_screen_orientation():
    # right then down: clockwise on screen
    clockwise = np.array([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)], dtype=float)
    assert signed_area(clockwise) == 100
    assert winding_direction(clockwise) == 1
    assert winding_direction(clockwise[::-1]) == -1


def test_degenerate_ring():
    line = np.array([(0, 0), (5, 0), (0, 0)], dtype=float)
    assert winding_direction(line) == 0


def test_split_subpaths():
    path = parse_path("M 0 0 h 10 v 10 h -10 v -10 M 20 20 h 5 v 5 h -5 v -5")
    parts = split_subpaths(path)
    assert len(parts) == 2
    assert len(parts[1]) == 4


def test_sample_ring_closes():
    ring = sample_ring(parse_path("M 0 0 h 10 v 10 h -10 v -10"))
    assert ring.shape == (5, 2)
    assert tuple(ring[0]) == tuple(ring[-1])


def test_arcs_are_sampled():
    ring = sample_ring(parse_path("M 5 0 a 5 5 0 0 0 0 10 a 5 5 0 0 0 0 -10"), samples_per_curve=8)
    assert len(ring) == 17


def test_path_rings_skip_degenerate_sub_paths():
    assert len(path_rings("M 0 0 h 10 M 20 20 h 10 v 10 h -10 v -10")) == 1
