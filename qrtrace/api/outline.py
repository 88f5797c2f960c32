"""POST /api/outline — outline an explicit module grid."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from qrtrace.dependencies import get_pipeline
from qrtrace.engine.config import PipelineConfig
from qrtrace.engine.context import RenderContext
from qrtrace.engine.pipeline import Pipeline
from qrtrace.models.requests import OutlineRequest
from qrtrace.models.responses import ComponentPathModel, CoverageModel, OutlineResponse
from qrtrace.outline.errors import InvalidMaskError, UnknownStyleError
from qrtrace.outline.validation import coverage_report

router = APIRouter()


@router.post("/outline", response_model=OutlineResponse)
async def outline(req: OutlineRequest, pipeline: Pipeline = Depends(get_pipeline)) -> OutlineResponse:
    start = time.perf_counter()

    ctx = RenderContext(
        mask=req.mask,
        style=req.style,
        exclude_finders=False,
        origin=(0.0, 0.0),
        config=PipelineConfig(dot_size=req.dot_size),
    )
    try:
        pipeline.run(ctx)
    except InvalidMaskError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except UnknownStyleError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    coverage = None
    if req.validate_coverage and ctx.traced:
        report = coverage_report(ctx.mask, [p.d for p in ctx.paths], req.dot_size)
        coverage = CoverageModel(
            ok=report.ok,
            cells_checked=report.cells_checked,
            covered=report.covered,
            missing=[tuple(c) for c in report.missing],
            spurious=[tuple(c) for c in report.spurious],
            overlapping=[tuple(c) for c in report.overlapping],
        )

    elapsed = (time.perf_counter() - start) * 1000
    return OutlineResponse(
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
        coverage=coverage,
        processing_time_ms=round(elapsed, 1),
        transforms_completed=len(ctx.completed_transforms),
    )
