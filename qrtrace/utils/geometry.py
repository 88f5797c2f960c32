"""Leaf-node geometry helpers over svgpathtools paths. No engine imports."""

from __future__ import annotations

import numpy as np
import svgpathtools
from numpy.typing import NDArray
from svgpathtools import Line, parse_path


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed ring.

    In SVG coordinates (y down) a negative area means the ring runs
    counter-clockwise on screen.
    """
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 or -1 by sign of the signed area, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def split_subpaths(path: svgpathtools.Path) -> list[svgpathtools.Path]:
    """Split a compound path at moveto discontinuities."""
    subpaths = []
    current = []
    for seg in path:
        if current and abs(seg.start - current[-1].end) > 1e-6:
            subpaths.append(svgpathtools.Path(*current))
            current = []
        current.append(seg)
    if current:
        subpaths.append(svgpathtools.Path(*current))
    return subpaths


def sample_ring(path: svgpathtools.Path, samples_per_curve: int = 16) -> NDArray[np.float64]:
    """Vertices of a sub-path as a closed (n+1, 2) ring.

    Line segments contribute their start point; curves are sampled evenly.
    """
    points: list[complex] = []
    for seg in path:
        if isinstance(seg, Line):
            points.append(seg.start)
        else:
            points.extend(seg.point(t) for t in np.linspace(0.0, 1.0, samples_per_curve, endpoint=False))
    if not points:
        return np.zeros((0, 2))
    points.append(points[0])
    return np.array([(z.real, z.imag) for z in points], dtype=np.float64)


def path_rings(d: str, samples_per_curve: int = 16) -> list[NDArray[np.float64]]:
    """Sampled closed rings of every sub-path of a path data string."""
    rings = []
    for sub in split_subpaths(parse_path(d)):
        ring = sample_ring(sub, samples_per_curve)
        if len(ring) >= 4:
            rings.append(ring)
    return rings
