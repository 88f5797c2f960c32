"""Grid vocabulary shared by the outline engine: positions, directions, masks."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import NamedTuple, Protocol

import numpy as np
from numpy.typing import NDArray

from qrtrace.outline.errors import InvalidMaskError


class Position(NamedTuple):
    row: int
    col: int


class Direction(str, enum.Enum):
    """Side of a cell. During a walk: the side the tracer arrived from."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of the neighbour on this side."""
        return _DELTA[self]


_OPPOSITE = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}

_DELTA = {
    Direction.TOP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.BOTTOM: (1, 0),
    Direction.LEFT: (0, -1),
}


class SymbolMatrix(Protocol):
    """What the engine needs from a symbol encoder."""

    def module_count(self) -> int: ...

    def is_dark(self, row: int, col: int) -> bool: ...


Mask = NDArray[np.bool_]


def as_mask(grid: Sequence[Sequence[bool]] | NDArray | Iterable) -> Mask:
    """Validate a 2D boolean grid and return it as a numpy bool array.

    Raises InvalidMaskError for empty, ragged or non-2D input.
    """
    if isinstance(grid, np.ndarray):
        arr = grid
    else:
        rows = [list(row) for row in grid]
        if not rows:
            raise InvalidMaskError("mask has no rows")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidMaskError(f"mask row {i} has {len(row)} cells, expected {width}")
        arr = np.array(rows, dtype=bool)

    if arr.ndim != 2 or arr.size == 0:
        raise InvalidMaskError(f"mask must be a non-empty 2D grid, got shape {arr.shape}")
    return arr.astype(bool, copy=False)


def as_square_mask(grid: Sequence[Sequence[bool]] | NDArray) -> Mask:
    arr = as_mask(grid)
    rows, cols = arr.shape
    if rows != cols:
        raise InvalidMaskError(f"mask must be square, got {rows}x{cols}")
    return arr


def read_modules(symbol: SymbolMatrix) -> Mask:
    """Read every module of a symbol into a square bool array.

    The symbol must answer is_dark() with a bool for every in-range cell.
    """
    count = symbol.module_count()
    if not isinstance(count, (int, np.integer)) or count < 1:
        raise InvalidMaskError(f"module count must be a positive integer, got {count!r}")

    modules = np.zeros((count, count), dtype=bool)
    for row in range(count):
        for col in range(count):
            try:
                value = symbol.is_dark(row, col)
            except (IndexError, KeyError, TypeError, ValueError) as e:
                raise InvalidMaskError(f"is_dark({row}, {col}) failed: {e}") from e
            if value is None:
                raise InvalidMaskError(f"is_dark({row}, {col}) is undefined")
            modules[row, col] = bool(value)
    return modules


class ModuleMatrix:
    """SymbolMatrix over an in-memory square grid."""

    def __init__(self, modules: Sequence[Sequence[bool]] | NDArray) -> None:
        self._modules = as_square_mask(modules)

    def module_count(self) -> int:
        return int(self._modules.shape[0])

    def is_dark(self, row: int, col: int) -> bool:
        if not (0 <= row < self._modules.shape[0] and 0 <= col < self._modules.shape[1]):
            raise IndexError(f"module ({row}, {col}) out of range")
        return bool(self._modules[row, col])

    @property
    def modules(self) -> Mask:
        return self._modules.copy()
