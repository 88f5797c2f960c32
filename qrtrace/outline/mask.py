"""Mask builder — which modules of a symbol are drawn as ordinary modules.

A module is drawn iff it is dark, not part of a finder pattern (drawn
separately as ornaments) and not under the logo's hidden area.
"""

from __future__ import annotations

import numpy as np

from qrtrace.outline.grid import Mask, Position, SymbolMatrix, read_modules

FINDER_SIZE = 7

FINDER_RING: Mask = np.array(
    [
        [1, 1, 1, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1, 1],
    ],
    dtype=bool,
)

FINDER_DOT: Mask = np.array(
    [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 1, 1, 1, 0, 0],
        [0, 0, 1, 1, 1, 0, 0],
        [0, 0, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ],
    dtype=bool,
)


def finder_anchors(count: int, finder_size: int = FINDER_SIZE) -> list[Position]:
    """Top-left cells of the three finder patterns: top-left, top-right, bottom-left."""
    far = count - finder_size
    return [Position(0, 0), Position(0, far), Position(far, 0)]


def _stamp(target: Mask, template: Mask, anchor: Position) -> None:
    rows, cols = target.shape
    for tr, tc in zip(*np.nonzero(template)):
        r, c = anchor.row + int(tr), anchor.col + int(tc)
        if 0 <= r < rows and 0 <= c < cols:
            target[r, c] = True


def finder_cells(count: int) -> Mask:
    """Cells covered by the ring or centre template at any finder anchor."""
    reserved = np.zeros((count, count), dtype=bool)
    template = FINDER_RING | FINDER_DOT
    for anchor in finder_anchors(count, template.shape[0]):
        _stamp(reserved, template, anchor)
    return reserved


def logo_cells(count: int, hide_x: int, hide_y: int) -> Mask:
    """Centred hide_y x hide_x block of cells under the logo."""
    rows = np.arange(count)
    in_rows = (rows >= (count - hide_y) / 2) & (rows < (count + hide_y) / 2)
    in_cols = (rows >= (count - hide_x) / 2) & (rows < (count + hide_x) / 2)
    return np.outer(in_rows, in_cols)


def build_dot_mask(
    symbol: SymbolMatrix,
    hide_x: int = 0,
    hide_y: int = 0,
    exclude_finders: bool = True,
    modules: Mask | None = None,
) -> Mask:
    """Boolean mask of modules to outline.

    Args:
        symbol: source of module darkness.
        hide_x, hide_y: logo area in modules; 0 disables the exclusion.
        exclude_finders: drop the three finder patterns.
        modules: already-read modules of `symbol`, to avoid a second read.
    """
    dark = read_modules(symbol) if modules is None else modules
    count = dark.shape[0]

    keep = np.ones_like(dark)
    if exclude_finders:
        keep &= ~finder_cells(count)
    if hide_x > 0 and hide_y > 0:
        keep &= ~logo_cells(count, hide_x, hide_y)
    return dark & keep
