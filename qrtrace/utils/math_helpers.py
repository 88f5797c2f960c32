"""Sizing helpers — canvas rounding and logo area. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

ERROR_CORRECTION_PERCENTS = {"L": 0.07, "M": 0.15, "Q": 0.25, "H": 0.30}


def round_size(value: float, enabled: bool = True) -> float:
    """Floor canvas offsets when rounding is enabled."""
    return float(math.floor(value)) if enabled else value


@dataclass(frozen=True)
class ImageSize:
    """Logo footprint: pixel size and the odd module counts it hides."""

    width: float = 0.0
    height: float = 0.0
    hide_x: int = 0
    hide_y: int = 0


def calculate_image_size(
    original_width: float,
    original_height: float,
    max_hidden_dots: int,
    max_hidden_axis_dots: int,
    dot_size: float,
) -> ImageSize:
    """Largest logo footprint, in whole odd module counts, keeping aspect ratio.

    Hidden counts are odd so the logo stays centred on the module grid. The
    footprint hides at most max_hidden_dots modules and at most
    max_hidden_axis_dots along either axis.
    """
    if (
        original_width <= 0
        or original_height <= 0
        or max_hidden_dots <= 0
        or dot_size <= 0
    ):
        return ImageSize()

    k = original_height / original_width

    hide_x = math.floor(math.sqrt(max_hidden_dots / k))
    if hide_x <= 0:
        hide_x = 1
    if max_hidden_axis_dots and max_hidden_axis_dots < hide_x:
        hide_x = max_hidden_axis_dots
    if hide_x % 2 == 0:
        hide_x -= 1

    width = hide_x * dot_size
    hide_y = 1 + 2 * math.ceil((hide_x * k - 1) / 2)
    height = round(width * k)

    if hide_y * hide_x > max_hidden_dots or (max_hidden_axis_dots and max_hidden_axis_dots < hide_y):
        if max_hidden_axis_dots and max_hidden_axis_dots < hide_y:
            hide_y = max_hidden_axis_dots
            if hide_y % 2 == 0:
                hide_y -= 1
        else:
            hide_y -= 2
        height = hide_y * dot_size
        hide_x = 1 + 2 * math.ceil((hide_y / k - 1) / 2)
        width = round(height / k)

    return ImageSize(width=float(width), height=float(height), hide_x=int(hide_x), hide_y=int(hide_y))
