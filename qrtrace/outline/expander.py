"""Shape expander — grows a square mask into a circular canvas.

The symbol stays untouched in the middle of a larger grid, separated from
the filler by a quiet gutter. Cells inside the inscribed circle are filled
with a wrap-around projection of the raw symbol so the ring looks like more
code without carrying data.
"""

from __future__ import annotations

import math

import numpy as np

from qrtrace.outline.grid import Mask, as_square_mask
from qrtrace.outline.mask import FINDER_SIZE


def circle_padding(
    viewbox_side: float,
    margin: float,
    dot_size: float,
    count: int,
    round_size: bool = True,
) -> int:
    """Modules to add on each side so the grid fills the circular canvas."""
    extra = ((viewbox_side - margin * 2) / dot_size - count) / 2
    padding = math.floor(extra) if round_size else round(extra)
    return max(int(padding), 0)


def _filler_rows(count: int) -> list[int]:
    """Source rows for the filler: everything between the finder bands."""
    rows = list(range(FINDER_SIZE + 1, count - FINDER_SIZE - 1))
    return rows or list(range(count))


def expand_to_circle(
    mask,
    padding: int,
    source=None,
    gutter: int = 1,
) -> Mask:
    """Embed `mask` in a (N + 2p) square grid filled out to its inscribed circle.

    Args:
        mask: square mask to embed, copied unchanged.
        padding: modules added on each side.
        source: raw symbol modules to sample the filler from (defaults to mask).
        gutter: width of the always-false border around the embedded mask.
    """
    grid = as_square_mask(mask)
    if padding <= 0:
        return grid.copy()

    filler = grid if source is None else as_square_mask(source)
    count = grid.shape[0]
    size = count + 2 * padding

    out = np.zeros((size, size), dtype=bool)
    out[padding:padding + count, padding:padding + count] = grid

    centre = size // 2
    rows = _filler_rows(filler.shape[0])
    quiet_low, quiet_high = padding - gutter, padding + count + gutter

    for r in range(size):
        for c in range(size):
            if quiet_low <= r < quiet_high and quiet_low <= c < quiet_high:
                continue
            if math.hypot(r - centre, c - centre) > centre:
                continue
            source_row = rows[(r - padding) % len(rows)]
            source_col = (c - padding) % filler.shape[1]
            out[r, c] = filler[source_row, source_col]
    return out
