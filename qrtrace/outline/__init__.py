"""Module outlining: QR module grids to compact vector outlines."""

from qrtrace.outline.drawers import DotStyle, EdgeDrawer, get_drawer
from qrtrace.outline.errors import ContourWalkError, InvalidMaskError, OutlineError, UnknownStyleError
from qrtrace.outline.grid import Direction, ModuleMatrix, Position, SymbolMatrix
from qrtrace.outline.holes import ComponentPath
from qrtrace.outline.labeling import OUTSIDE, LabelMap, label_background, label_foreground
from qrtrace.outline.tracer import Contour, render_contour, trace_contour

__all__ = [
    "DotStyle",
    "EdgeDrawer",
    "get_drawer",
    "OutlineError",
    "InvalidMaskError",
    "UnknownStyleError",
    "ContourWalkError",
    "Direction",
    "ModuleMatrix",
    "Position",
    "SymbolMatrix",
    "ComponentPath",
    "OUTSIDE",
    "LabelMap",
    "label_background",
    "label_foreground",
    "Contour",
    "render_contour",
    "trace_contour",
]
