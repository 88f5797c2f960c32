"""Hole compositor — attaches enclosed background regions to their owners.

A background component other than OUTSIDE is a hole. Its owner is the
foreground component immediately left of the hole's first raster cell; that
cell and the ones above and up-left of the hole are all foreground (otherwise
the 8-connected background labeling would have reached the hole earlier).

The hole contour is traced on the owner's labels starting from the cell
diagonally up-left of the hole, so it winds opposite to the outer contour.
Outer and hole contours are concatenated into one compound path per
component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from qrtrace.outline.drawers import EdgeDrawer
from qrtrace.outline.grid import Position
from qrtrace.outline.labeling import OUTSIDE, LabelMap
from qrtrace.outline.tracer import Contour, render_contour, trace_contour

logger = logging.getLogger(__name__)


@dataclass
class ComponentPath:
    """Final path data for one foreground component."""

    component_id: int
    d: str
    fill_rule: str = "nonzero"
    hole_count: int = 0
    cell_count: int = 0
    contours: list[Contour] = field(default_factory=list, repr=False)


def assign_holes(foreground: LabelMap, background: LabelMap) -> dict[int, list[int]]:
    """Map foreground component id -> background ids of the holes it encloses.

    Hole ids are listed in raster order of their first cell.
    """
    owners: dict[int, list[int]] = {}
    for hole_id, start in background.starts.items():
        if hole_id == OUTSIDE:
            continue
        owner = foreground.at(start.row, start.col - 1)
        if not owner:
            logger.warning("Background component %d at %s has no enclosing module; dropped", hole_id, tuple(start))
            continue
        owners.setdefault(owner, []).append(hole_id)
    return owners


def hole_start(background: LabelMap, hole_id: int) -> Position:
    start = background.starts[hole_id]
    return Position(start.row - 1, start.col - 1)


def trace_holes(
    foreground: LabelMap,
    background: LabelMap,
    component_id: int,
    hole_ids: list[int],
    bound_factor: int = 4,
) -> list[Contour]:
    return [
        trace_contour(
            foreground,
            component_id,
            hole_start(background, hole_id),
            hole=True,
            bound_factor=bound_factor,
        )
        for hole_id in hole_ids
    ]


def compose_path(
    component_id: int,
    contours: list[Contour],
    drawer: EdgeDrawer,
    origin: tuple[float, float],
    cell_count: int = 0,
) -> ComponentPath:
    """Concatenate a component's outer and hole contours into one path.

    Holes are cut out with the evenodd rule; the opposite winding of hole
    contours makes nonzero agree as well.
    """
    hole_count = sum(1 for contour in contours if contour.hole)
    d = " ".join(render_contour(contour, drawer, origin) for contour in contours)
    return ComponentPath(
        component_id=component_id,
        d=d,
        fill_rule="evenodd" if hole_count else "nonzero",
        hole_count=hole_count,
        cell_count=cell_count,
        contours=list(contours),
    )
