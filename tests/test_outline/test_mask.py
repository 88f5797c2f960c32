"""Tests for the dot mask builder."""

import numpy as np

from qrtrace.outline.grid import ModuleMatrix
from qrtrace.outline.mask import FINDER_DOT, FINDER_RING, build_dot_mask, finder_anchors, finder_cells, logo_cells


def test_finder_templates_do_not_overlap():
    assert not (FINDER_RING & FINDER_DOT).any()
    assert FINDER_RING.sum() == 24
    assert FINDER_DOT.sum() == 9


def test_finder_anchors():
    assert finder_anchors(21) == [(0, 0), (0, 14), (14, 0)]


def test_finder_cells_reserve_three_patterns():
    reserved = finder_cells(21)
    assert reserved.sum() == 3 * 33
    assert reserved[0, 0] and reserved[3, 3]
    assert not reserved[1, 1]
    assert not reserved[7, 7]
    assert not reserved[20, 20]


def test_all_dark_symbol_keeps_everything_but_finders():
    symbol = ModuleMatrix(np.ones((21, 21), dtype=bool))
    mask = build_dot_mask(symbol)
    assert mask.sum() == 441 - 99


def test_finders_kept_on_request():
    symbol = ModuleMatrix(np.ones((21, 21), dtype=bool))
    assert build_dot_mask(symbol, exclude_finders=False).all()


def test_light_modules_stay_light():
    modules = np.zeros((21, 21), dtype=bool)
    modules[10, 10] = True
    mask = build_dot_mask(ModuleMatrix(modules))
    assert mask.sum() == 1


def test_logo_cells_centred():
    block = logo_cells(21, 3, 3)
    assert block.sum() == 9
    assert block[9:12, 9:12].all()


def test_logo_cells_rectangular():
    block = logo_cells(21, 5, 3)
    rows, cols = np.nonzero(block)
    assert set(rows) == {9, 10, 11}
    assert set(cols) == {8, 9, 10, 11, 12}


def test_logo_area_removed_from_mask():
    symbol = ModuleMatrix(np.ones((21, 21), dtype=bool))
    mask = build_dot_mask(symbol, hide_x=3, hide_y=3)
    assert mask.sum() == 441 - 99 - 9
    assert not mask[10, 10]


def test_zero_hide_keeps_centre():
    symbol = ModuleMatrix(np.ones((21, 21), dtype=bool))
    assert build_dot_mask(symbol, hide_x=3, hide_y=0)[10, 10]


def test_precomputed_modules_are_used():
    symbol = ModuleMatrix(np.zeros((21, 21), dtype=bool))
    modules = np.ones((21, 21), dtype=bool)
    assert build_dot_mask(symbol, modules=modules).sum() == 441 - 99
