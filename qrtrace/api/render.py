"""POST /api/render — encode data and build the styled SVG."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from qrtrace.dependencies import get_pipeline
from qrtrace.engine.pipeline import Pipeline
from qrtrace.models.requests import RenderRequest
from qrtrace.models.responses import ComponentPathModel, RenderResponse
from qrtrace.outline.errors import InvalidMaskError, UnknownStyleError
from qrtrace.svg.builder import QRSvgBuilder
from qrtrace.symbol.encoder import EncodingError

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, pipeline: Pipeline = Depends(get_pipeline)) -> RenderResponse:
    start = time.perf_counter()

    try:
        result = QRSvgBuilder(req, pipeline=pipeline).build()
    except InvalidMaskError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except UnknownStyleError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except EncodingError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    ctx = result.context

    return RenderResponse(
        svg=result.svg,
        module_count=ctx.module_count,
        width=result.width,
        height=result.height,
        components=[
            ComponentPathModel(
                component_id=p.component_id,
                d=p.d,
                fill_rule=p.fill_rule,
                hole_count=p.hole_count,
                cell_count=p.cell_count,
            )
            for p in ctx.paths
        ],
        processing_time_ms=round(elapsed, 1),
        transforms_completed=len(ctx.completed_transforms),
    )
