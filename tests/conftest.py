"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from qrtrace.engine.pipeline import Pipeline, create_pipeline
from qrtrace.outline.grid import ModuleMatrix
from qrtrace.symbol.encoder import encode


def grid(*rows: str) -> np.ndarray:
    """Mask from strings: '#' = dark, '.' = light."""
    return np.array([[ch == "#" for ch in row] for row in rows], dtype=bool)


# Small literal masks

SINGLE = grid("#")

FULL_3X3 = grid(
    "###",
    "###",
    "###",
)

RING_5X5 = grid(
    "#####",
    "#####",
    "##.##",
    "#####",
    "#####",
)

DIAGONAL_2X2 = grid(
    "#.",
    ".#",
)

L_TROMINO = grid(
    "#.",
    "##",
)

U_SHAPE = grid(
    "#.#",
    "###",
)

RING_WITH_ISLAND = grid(
    "#######",
    "#.....#",
    "#.....#",
    "#..#..#",
    "#.....#",
    "#.....#",
    "#######",
)

TWO_HOLES = grid(
    "#######",
    "#.#####",
    "#####.#",
    "#######",
)

DIAGONAL_HOLES = grid(
    "####",
    "#.##",
    "##.#",
    "####",
)

CHECKER = grid(
    "#.#.#",
    ".#.#.",
    "#.#.#",
    ".#.#.",
    "#.#.#",
)

SPIRAL = grid(
    "#######",
    "......#",
    "#####.#",
    "#...#.#",
    "#.###.#",
    "#.....#",
    "#######",
)

QR_DATA = "qrtrace"

TRACED_STYLES = ["square", "rounded", "extra-rounded", "classy", "classy-rounded"]


@pytest.fixture(scope="session")
def pipeline() -> Pipeline:
    return create_pipeline()


@pytest.fixture(scope="session")
def qr_symbol() -> ModuleMatrix:
    return encode(QR_DATA, error_correction_level="Q")
