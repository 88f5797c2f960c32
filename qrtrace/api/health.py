"""Health check + meta endpoints."""

from __future__ import annotations

from typing import get_args

from fastapi import APIRouter

from qrtrace import __version__
from qrtrace.engine.registry import get_registry
from qrtrace.models.options import CornerDotType, CornerSquareType, DotType, ErrorCorrectionLevel, ShapeType
from qrtrace.models.responses import HealthResponse, StylesResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )


@router.get("/styles", response_model=StylesResponse)
async def styles() -> StylesResponse:
    return StylesResponse(
        dot_types=list(get_args(DotType)),
        corner_square_types=list(get_args(CornerSquareType)),
        corner_dot_types=list(get_args(CornerDotType)),
        shapes=list(get_args(ShapeType)),
        error_correction_levels=list(get_args(ErrorCorrectionLevel)),
    )
