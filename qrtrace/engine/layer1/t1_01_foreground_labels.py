"""T1.01 — Foreground Labels.

4-connected components of the mask. Each becomes one path.
"""

from __future__ import annotations

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.labeling import label_foreground


@transform(
    id="T1.01",
    layer=Layer.LABELING,
    dependencies=["T0.03"],
    description="Label 4-connected foreground components",
    tags={"traced"},
)
def foreground_labels(ctx: RenderContext) -> None:
    ctx.foreground = label_foreground(ctx.mask)
