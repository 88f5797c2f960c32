"""RenderContext — the single mutable state object flowing through all render stages.

Inputs are set by the caller; every other field is filled in by a stage.
A context is used for exactly one render and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from qrtrace.engine.config import PipelineConfig
from qrtrace.outline.drawers import DotStyle
from qrtrace.outline.grid import Mask, Position, SymbolMatrix
from qrtrace.outline.holes import ComponentPath
from qrtrace.outline.labeling import LabelMap
from qrtrace.outline.tracer import Contour


@dataclass
class RenderContext:
    # --- Inputs ---
    symbol: SymbolMatrix | None = None
    style: DotStyle | str = DotStyle.SQUARE
    shape: str = "square"
    # View box the mask is centred in; ignored when origin is given
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    margin: float = 0.0
    # Logo area in modules, 0 when there is no logo to clear
    hide_x: int = 0
    hide_y: int = 0
    exclude_finders: bool = True
    # Canvas position of cell (0, 0); computed from the canvas when None
    origin: tuple[float, float] | None = None
    config: PipelineConfig | None = None

    # --- Layer 0: masking (mask may be given instead of a symbol) ---
    modules: Mask | None = None
    mask: Mask | None = None
    padding: int = 0

    # --- Layer 1: labeling ---
    foreground: LabelMap | None = None
    background: LabelMap | None = None

    # --- Layer 2: tracing ---
    contours: dict[int, list[Contour]] = field(default_factory=dict)
    hole_owners: dict[int, list[int]] = field(default_factory=dict)
    paths: list[ComponentPath] = field(default_factory=list)
    dots: list[Position] = field(default_factory=list)

    # Pipeline metadata
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def module_count(self) -> int:
        if self.symbol is not None:
            return self.symbol.module_count()
        return self.mask.shape[0] if self.mask is not None else 0

    @property
    def dot_size(self) -> float:
        return (self.config or PipelineConfig()).dot_size

    @property
    def traced(self) -> bool:
        return self.style != DotStyle.DOTS

    def mask_origin(self) -> tuple[float, float]:
        return self.origin if self.origin is not None else (0.0, 0.0)
