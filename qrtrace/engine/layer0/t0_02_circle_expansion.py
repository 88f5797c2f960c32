"""T0.02 — Circle Expansion.

Grow the mask to fill a circular canvas. Gated: runs only for circle shapes.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.expander import circle_padding, expand_to_circle


@transform(
    id="T0.02",
    layer=Layer.MASKING,
    dependencies=["T0.01"],
    description="Pad the mask out to the canvas's inscribed circle",
    tags={"circle"},
)
def circle_expansion(ctx: RenderContext) -> None:
    config = ctx.config
    ctx.padding = circle_padding(
        min(ctx.canvas_width, ctx.canvas_height),
        ctx.margin,
        config.dot_size,
        ctx.mask.shape[0],
        round_size=config.round_size,
    )
    ctx.mask = expand_to_circle(ctx.mask, ctx.padding, source=ctx.modules, gutter=config.circle_gutter)
