"""T2.03 — Path Rendering.

Render every component's contours with the selected edge style into one
compound path each, in raster order of the components' first cells.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.drawers import get_drawer
from qrtrace.outline.holes import compose_path


@transform(
    id="T2.03",
    layer=Layer.TRACING,
    dependencies=["T2.01", "T2.02"],
    description="Render contours to path data",
    tags={"traced"},
)
def path_rendering(ctx: RenderContext) -> None:
    drawer = get_drawer(ctx.style, ctx.config.dot_size)
    origin = ctx.mask_origin()
    ctx.paths = [
        compose_path(
            component_id,
            ctx.contours[component_id],
            drawer,
            origin,
            cell_count=ctx.foreground.cell_count(component_id),
        )
        for component_id in ctx.foreground.ids
    ]
