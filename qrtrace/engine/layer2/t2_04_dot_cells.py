"""T2.04 — Dot Cells.

The dots style skips tracing: every foreground cell is drawn on its own.
"""

from __future__ import annotations

import numpy as np

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.grid import Position


@transform(
    id="T2.04",
    layer=Layer.TRACING,
    dependencies=["T0.03"],
    description="Collect foreground cells for per-module dots",
    tags={"dots"},
)
def dot_cells(ctx: RenderContext) -> None:
    ctx.dots = [Position(int(r), int(c)) for r, c in np.argwhere(ctx.mask)]
