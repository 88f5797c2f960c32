"""T0.03 — Mask Placement.

Centre the (possibly expanded) mask in the view box.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.utils.math_helpers import round_size


@transform(
    id="T0.03",
    layer=Layer.MASKING,
    dependencies=["T0.01", "T0.02"],
    description="Compute the canvas origin of cell (0, 0)",
    tags={"always"},
)
def mask_placement(ctx: RenderContext) -> None:
    if ctx.origin is not None:
        return
    config = ctx.config
    side = ctx.mask.shape[0] * config.dot_size
    ctx.origin = (
        round_size((ctx.canvas_width - side) / 2, config.round_size),
        round_size((ctx.canvas_height - side) / 2, config.round_size),
    )
