"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from qrtrace.models.options import DotType, RenderOptions


class RenderRequest(RenderOptions):
    """Full render options; see RenderOptions."""


class OutlineRequest(BaseModel):
    mask: list[list[bool]] = Field(..., description="Module grid, rows of booleans (True = dark)")
    style: DotType = Field(default="square", description="Edge style")
    dot_size: float = Field(default=4.0, gt=0, description="Canvas units per module")
    validate_coverage: bool = Field(
        default=False,
        alias="validate",
        description="Check the produced paths against the mask",
    )

    model_config = {"populate_by_name": True}
