"""T2.02 — Hole Contours.

Assign each enclosed background component to the foreground component around
it and trace the hole's boundary on that component.
"""

from __future__ import annotations

import logging

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.holes import assign_holes, trace_holes

logger = logging.getLogger(__name__)


@transform(
    id="T2.02",
    layer=Layer.TRACING,
    dependencies=["T1.02", "T2.01"],
    description="Trace hole contours and attach them to their owners",
    tags={"traced"},
)
def hole_contours(ctx: RenderContext) -> None:
    ctx.hole_owners = assign_holes(ctx.foreground, ctx.background)
    for owner, hole_ids in ctx.hole_owners.items():
        ctx.contours[owner].extend(
            trace_holes(ctx.foreground, ctx.background, owner, hole_ids, ctx.config.walk_bound_factor)
        )
    logger.debug(
        "%d holes across %d components",
        sum(len(ids) for ids in ctx.hole_owners.values()),
        len(ctx.hole_owners),
    )
