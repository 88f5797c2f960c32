"""Outline validation — checks produced path data against the mask it came from.

Each component path is parsed with svgpathtools, its sub-paths sampled into
shapely polygons and combined with even-odd semantics. Every cell centre is
then tested: foreground centres must lie in exactly one component region,
background centres in none.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from qrtrace.outline.grid import Position, as_mask
from qrtrace.utils.geometry import path_rings

logger = logging.getLogger(__name__)


@dataclass
class CoverageReport:
    cells_checked: int = 0
    covered: int = 0
    missing: list[Position] = field(default_factory=list)
    spurious: list[Position] = field(default_factory=list)
    overlapping: list[Position] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.missing or self.spurious or self.overlapping)


def even_odd_region(d: str) -> BaseGeometry:
    """Filled region of a path under the evenodd rule."""
    region: BaseGeometry = Polygon()
    for ring in path_rings(d):
        polygon = Polygon(ring)
        if not polygon.is_valid:
            polygon = make_valid(polygon)
        region = region.symmetric_difference(polygon)
    return region


def filled_area(d: str) -> float:
    return float(even_odd_region(d).area)


def coverage_report(
    mask,
    paths: Iterable[str],
    dot_size: float,
    origin: tuple[float, float] = (0.0, 0.0),
) -> CoverageReport:
    """Check that `paths` cover exactly the foreground cells of `mask`.

    Args:
        mask: the grid the paths were traced from.
        paths: one path data string per component.
        dot_size: module size used when tracing.
        origin: canvas offset of cell (0, 0).
    """
    grid = as_mask(mask)
    regions = [even_odd_region(d) for d in paths]
    report = CoverageReport()

    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            centre = Point(origin[0] + (c + 0.5) * dot_size, origin[1] + (r + 0.5) * dot_size)
            hits = sum(1 for region in regions if region.contains(centre))
            report.cells_checked += 1
            if grid[r, c]:
                if hits == 0:
                    report.missing.append(Position(r, c))
                elif hits > 1:
                    report.overlapping.append(Position(r, c))
                else:
                    report.covered += 1
            elif hits:
                report.spurious.append(Position(r, c))

    if not report.ok:
        logger.warning(
            "Coverage check failed: %d missing, %d spurious, %d overlapping",
            len(report.missing), len(report.spurious), len(report.overlapping),
        )
    return report
