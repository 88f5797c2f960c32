"""T0.01 — Dot Mask.

Read the symbol once and keep the dark modules that are drawn as ordinary
modules: finder patterns and the logo area are left out. A context created
with a mask and no symbol outlines that mask as given.
"""

from __future__ import annotations

import logging

import numpy as np

from qrtrace.engine.context import RenderContext
from qrtrace.engine.registry import Layer, transform
from qrtrace.outline.drawers import parse_style
from qrtrace.outline.errors import InvalidMaskError
from qrtrace.outline.grid import as_mask, read_modules
from qrtrace.outline.mask import build_dot_mask

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.MASKING,
    description="Build the boolean mask of modules to draw",
    tags={"always"},
)
def dot_mask(ctx: RenderContext) -> None:
    ctx.style = parse_style(ctx.style)

    if ctx.symbol is None:
        if ctx.mask is None:
            raise InvalidMaskError("render context has neither a symbol nor a mask")
        ctx.mask = as_mask(ctx.mask).copy()
        ctx.modules = ctx.mask.copy()
        return

    ctx.modules = read_modules(ctx.symbol)
    ctx.mask = build_dot_mask(
        ctx.symbol,
        hide_x=ctx.hide_x,
        hide_y=ctx.hide_y,
        exclude_finders=ctx.exclude_finders,
        modules=ctx.modules,
    )
    logger.debug(
        "Dot mask: %d of %d dark modules kept",
        int(np.count_nonzero(ctx.mask)),
        int(np.count_nonzero(ctx.modules)),
    )
