"""T2.01 — Outer Contours.

Walk the outer boundary of every foreground component from its first cell.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.tracer import trace_contour


@transform(
    id="T2.01",
    layer=Layer.TRACING,
    dependencies=["T1.01"],
    description="Trace the outer contour of each foreground component",
    tags={"traced"},
)
def outer_contours(ctx: RenderContext) -> None:
    labels = ctx.foreground
    bound = ctx.config.walk_bound_factor
    ctx.contours = {
        component_id: [trace_contour(labels, component_id, start, bound_factor=bound)]
        for component_id, start in labels.starts.items()
    }
