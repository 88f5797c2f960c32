"""Pipeline configuration — engine tuning shared by every stage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Geometry constants for one render."""

    # Canvas units per module
    dot_size: float = 4.0

    # Floor canvas offsets and circle padding to whole units
    round_size: bool = True

    # Always-empty modules between the symbol and the circular filler
    circle_gutter: int = 1

    # Contour walk limit = factor x rows x cols
    walk_bound_factor: int = 4

    # Finder pattern geometry
    finder_size: int = 7
    finder_dot_size: int = 3
