"""Tests for grid vocabulary and mask validation."""

import numpy as np
import pytest

from qrtrace.outline.errors import InvalidMaskError
from qrtrace.outline.grid import Direction, ModuleMatrix, as_mask, as_square_mask, read_modules


class BrokenSymbol:
    def module_count(self) -> int:
        return 2

    def is_dark(self, row: int, col: int):
        if row == 1 and col == 1:
            return None
        return True


def test_direction_opposites():
    assert Direction.TOP.opposite is Direction.BOTTOM
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert all(d.opposite.opposite is d for d in Direction)


def test_direction_deltas():
    assert Direction.RIGHT.delta == (0, 1)
    assert Direction.TOP.delta == (-1, 0)


def test_as_mask_from_nested_lists():
    mask = as_mask([[1, 0], [0, 1]])
    assert mask.dtype == np.bool_
    assert mask.shape == (2, 2)
    assert mask[0, 0] and not mask[0, 1]


@pytest.mark.parametrize("bad", [[], [[True, False], [True]], np.zeros((0, 3)), np.zeros(4)])
def test_as_mask_rejects_malformed(bad):
    with pytest.raises(InvalidMaskError):
        as_mask(bad)


def test_as_square_mask_rejects_rectangles():
    with pytest.raises(InvalidMaskError, match="square"):
        as_square_mask([[True, False, True]])


def test_module_matrix():
    symbol = ModuleMatrix([[True, False], [False, True]])
    assert symbol.module_count() == 2
    assert symbol.is_dark(1, 1)
    assert not symbol.is_dark(0, 1)
    with pytest.raises(IndexError):
        symbol.is_dark(2, 0)


def test_module_matrix_copies_modules():
    symbol = ModuleMatrix(np.ones((2, 2), dtype=bool))
    modules = symbol.modules
    modules[0, 0] = False
    assert symbol.is_dark(0, 0)


def test_read_modules_rejects_undefined_cells():
    with pytest.raises(InvalidMaskError, match="undefined"):
        read_modules(BrokenSymbol())


def test_invalid_mask_error_is_value_error():
    assert issubclass(InvalidMaskError, ValueError)
