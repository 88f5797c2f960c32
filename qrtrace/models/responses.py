"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class StylesResponse(BaseModel):
    dot_types: list[str] = Field(default_factory=list)
    corner_square_types: list[str] = Field(default_factory=list)
    corner_dot_types: list[str] = Field(default_factory=list)
    shapes: list[str] = Field(default_factory=list)
    error_correction_levels: list[str] = Field(default_factory=list)


class ComponentPathModel(BaseModel):
    component_id: int
    d: str
    fill_rule: str = "nonzero"
    hole_count: int = 0
    cell_count: int = 0


class CoverageModel(BaseModel):
    ok: bool
    cells_checked: int = 0
    covered: int = 0
    missing: list[tuple[int, int]] = Field(default_factory=list)
    spurious: list[tuple[int, int]] = Field(default_factory=list)
    overlapping: list[tuple[int, int]] = Field(default_factory=list)


class RenderResponse(BaseModel):
    svg: str
    module_count: int = 0
    width: float = 0.0
    height: float = 0.0
    components: list[ComponentPathModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    transforms_completed: int = 0


class OutlineResponse(BaseModel):
    components: list[ComponentPathModel] = Field(default_factory=list)
    coverage: CoverageModel | None = None
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
