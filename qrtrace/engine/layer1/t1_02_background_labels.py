"""T1.02 — Background Labels.

8-connected components of the empty cells, with everything reaching the grid
border merged into OUTSIDE. The rest are holes.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.labeling import label_background


@transform(
    id="T1.02",
    layer=Layer.LABELING,
    dependencies=["T0.03"],
    description="Label 8-connected background components",
    tags={"traced"},
)
def background_labels(ctx: RenderContext) -> None:
    ctx.background = label_background(ctx.mask)
