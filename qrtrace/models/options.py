"""Render option tree — what a caller can ask of the SVG builder."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DotType = Literal["square", "dots", "rounded", "extra-rounded", "classy", "classy-rounded"]
CornerSquareType = Literal[
    "dot", "square", "extra-rounded", "dots", "rounded", "classy", "classy-rounded"
]
CornerDotType = Literal[
    "dot", "square", "dots", "rounded", "extra-rounded", "classy", "classy-rounded"
]
ShapeType = Literal["square", "circle"]
ErrorCorrectionLevel = Literal["L", "M", "Q", "H"]
EncodingMode = Literal["Numeric", "Alphanumeric", "Byte", "Kanji"]


class QROptions(BaseModel):
    type_number: int = Field(default=0, ge=0, le=40, description="Symbol version, 0 = smallest that fits")
    mode: EncodingMode | None = Field(default=None, description="Data segment mode, None = automatic")
    error_correction_level: ErrorCorrectionLevel = Field(default="Q")

class ImageOptions(BaseModel):
    hide_background_dots: bool = Field(default=True, description="Clear modules under the logo")
    image_size: float = Field(default=0.4, gt=0, le=1, description="Share of the recoverable area the logo may cover")
    margin: float = Field(default=0, ge=0, description="Inset of the logo inside its footprint")
    image_width: float = Field(default=0, ge=0, description="Intrinsic logo width in pixels")
    image_height: float = Field(default=0, ge=0, description="Intrinsic logo height in pixels")

class DotsOptions(BaseModel):
    type: DotType = "square"
    color: str = "#000"
    round_size: bool = Field(default=True, description="Floor canvas offsets to whole units")

class CornersSquareOptions(BaseModel):
    type: CornerSquareType | None = None
    color: str | None = None

class CornersDotOptions(BaseModel):
    type: CornerDotType | None = None
    color: str | None = None

class BackgroundOptions(BaseModel):
    color: str | None = "#fff"
    round: float = Field(default=0, ge=0, le=1, description="Corner radius as a share of half the plate")

class RenderOptions(BaseModel):
    data: str = Field(..., min_length=1, description="Payload to encode")
    width: float = Field(default=300, gt=0)
    height: float = Field(default=300, gt=0)
    margin: float = Field(default=0, ge=0)
    shape: ShapeType = "square"
    image: str | None = Field(default=None, description="Logo href (URL or data URI)")
    qr_options: QROptions = Field(default_factory=QROptions)
    image_options: ImageOptions = Field(default_factory=ImageOptions)
    dots_options: DotsOptions = Field(default_factory=DotsOptions)
    corners_square_options: CornersSquareOptions = Field(default_factory=CornersSquareOptions)
    corners_dot_options: CornersDotOptions = Field(default_factory=CornersDotOptions)
    background_options: BackgroundOptions = Field(default_factory=BackgroundOptions)
