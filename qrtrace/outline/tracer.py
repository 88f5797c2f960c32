"""Contour tracer — walks the boundary of one 4-connected component.

The walk keeps the component on its left-hand side by always trying the
sides in the fixed rotation left, bottom, right, top, starting one step past
the side it arrived from. It ends when it is back on the start cell having
arrived from the same side it started with.

Tracing and rendering are separate: trace_contour() returns the sequence of
(arrived_from, heading) transitions and render_contour() turns it into path
data with an EdgeDrawer.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from qrtrace.outline.drawers import EdgeDrawer
from qrtrace.outline.errors import ContourWalkError
from qrtrace.outline.grid import Direction, Position
from qrtrace.outline.labeling import LabelMap
from qrtrace.svg import primitives as p

logger = logging.getLogger(__name__)

ROTATION = (Direction.LEFT, Direction.BOTTOM, Direction.RIGHT, Direction.TOP)


@dataclass
class Contour:
    """One closed walk: either a component's outer boundary or one of its holes."""

    component_id: int
    start: Position
    origin: Direction
    steps: list[tuple[Direction, Direction]] = field(default_factory=list)
    hole: bool = False

    @property
    def is_single(self) -> bool:
        return not self.steps

    def displacement(self) -> tuple[int, int]:
        """Net (row, col) movement over the walk. Zero for a closed contour."""
        dr = sum(heading.delta[0] for _, heading in self.steps)
        dc = sum(heading.delta[1] for _, heading in self.steps)
        return dr, dc

    def cells(self) -> list[Position]:
        """Cells visited, in walk order, starting with the start cell."""
        row, col = self.start
        visited = [Position(row, col)]
        for _, heading in self.steps[:-1]:
            row, col = row + heading.delta[0], col + heading.delta[1]
            visited.append(Position(row, col))
        return visited


def next_heading(arrived_from: Direction, neighbours: Mapping[Direction, bool]) -> Direction | None:
    """First side, in rotation after arrived_from, whose neighbour is in the component."""
    start = ROTATION.index(arrived_from) + 1
    for i in range(len(ROTATION)):
        candidate = ROTATION[(start + i) % len(ROTATION)]
        if neighbours[candidate]:
            return candidate
    return None


def _initial_origin(labels: LabelMap, component_id: int, start: Position, hole: bool) -> Direction:
    row, col = start
    if not hole and labels.at(row, col + 1) == component_id:
        return Direction.RIGHT
    if labels.at(row + 1, col) == component_id:
        return Direction.BOTTOM
    return Direction.TOP


def trace_contour(
    labels: LabelMap,
    component_id: int,
    start: Position,
    hole: bool = False,
    bound_factor: int = 4,
) -> Contour:
    """Walk the contour of `component_id` beginning at `start`.

    For an outer contour `start` is the component's first cell in raster
    order. For a hole it is the cell diagonally up-left of the hole's first
    cell, and the walk is forced to begin from that cell's bottom side.

    Raises ContourWalkError if the walk does not close within
    bound_factor * cells + 4 steps.
    """
    if labels.at(*start) != component_id:
        raise ContourWalkError(f"start cell {tuple(start)} is not part of component {component_id}")

    rows, cols = labels.shape
    limit = bound_factor * rows * cols + 4

    origin = _initial_origin(labels, component_id, start, hole)
    contour = Contour(component_id=component_id, start=Position(*start), origin=origin, hole=hole)

    row, col = start
    arrived_from = origin
    while True:
        neighbours = {
            side: labels.at(row + side.delta[0], col + side.delta[1]) == component_id
            for side in Direction
        }
        heading = next_heading(arrived_from, neighbours)
        if heading is None:
            # isolated cell
            break

        contour.steps.append((arrived_from, heading))
        row, col = row + heading.delta[0], col + heading.delta[1]
        arrived_from = heading.opposite

        if (row, col) == start and arrived_from is origin:
            break
        if len(contour.steps) > limit:
            raise ContourWalkError(
                f"contour of component {component_id} from {tuple(start)} did not close "
                f"after {limit} steps"
            )

    logger.debug(
        "Traced %s contour of component %d: %d steps",
        "hole" if hole else "outer", component_id, len(contour.steps),
    )
    return contour


def render_contour(contour: Contour, drawer: EdgeDrawer, origin: tuple[float, float] = (0.0, 0.0)) -> str:
    """Path data for one contour, starting with an absolute moveto."""
    size = drawer.size
    x = origin[0] + contour.start.col * size
    y = origin[1] + contour.start.row * size

    parts = [p.move_to(x, y)]
    if contour.origin is Direction.RIGHT:
        parts.append(p.move_by(size, 0))
    elif contour.origin is Direction.BOTTOM:
        parts.append(p.move_by(size, size))

    if contour.is_single:
        parts.append(drawer.single_dot())
    else:
        parts.extend(drawer.transition(arrived, heading) for arrived, heading in contour.steps)
    return p.join(*parts)
