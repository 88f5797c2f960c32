"""Edge-style drawers — one path glyph per contour transition.

A contour walk arrives at a cell from one side and leaves towards another.
Each of the 16 (arrived_from, heading) pairs maps to a glyph: a function of
the module size returning relative path commands. Straight runs and concave
turns look the same in every style; styles differ only in how they render
convex turns, U-turns and isolated cells.

Each style is an immutable table checked for completeness at import.
"""

from __future__ import annotations

import enum
import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from qrtrace.outline.errors import UnknownStyleError
from qrtrace.outline.grid import Direction
from qrtrace.svg import primitives as p

Glyph = Callable[[float], str]
Transition = tuple[Direction, Direction]

T, R, B, L = Direction.TOP, Direction.RIGHT, Direction.BOTTOM, Direction.LEFT

ALL_TRANSITIONS: frozenset[Transition] = frozenset(itertools.product(Direction, Direction))


class DotStyle(str, enum.Enum):
    SQUARE = "square"
    DOTS = "dots"
    ROUNDED = "rounded"
    EXTRA_ROUNDED = "extra-rounded"
    CLASSY = "classy"
    CLASSY_ROUNDED = "classy-rounded"

    @property
    def traced(self) -> bool:
        """False for styles drawn per module instead of per component."""
        return self is not DotStyle.DOTS


# --- Shared glyphs ---


def _nothing(s: float) -> str:
    return ""


def _sharp_left_down(s: float) -> str:
    return p.join(p.left(s), p.down(s))


def _sharp_right_up(s: float) -> str:
    return p.join(p.right(s), p.up(s))


def _sharp_up_left(s: float) -> str:
    return p.join(p.up(s), p.left(s))


def _sharp_down_right(s: float) -> str:
    return p.join(p.down(s), p.right(s))


# --- Square ---


def _square_bottom_u(s: float) -> str:
    return p.join(p.down(s), p.right(s), p.up(s))


def _square_left_u(s: float) -> str:
    return p.join(p.left(s), p.down(s), p.right(s))


def _square_right_u(s: float) -> str:
    return p.join(p.right(s), p.up(s), p.left(s))


def _square_top_u(s: float) -> str:
    return p.join(p.up(s), p.left(s), p.down(s))


def _square_dot(s: float) -> str:
    return p.join(p.down(s), p.right(s), p.up(s), p.left(s))


# --- Rounded: half-module corner radius ---


def _round_left_down(s: float) -> str:
    return p.join(p.left(s / 2), p.left_down_arc(s / 2), p.down(s / 2))


def _round_right_up(s: float) -> str:
    return p.join(p.right(s / 2), p.right_up_arc(s / 2), p.up(s / 2))


def _round_up_left(s: float) -> str:
    return p.join(p.up(s / 2), p.up_left_arc(s / 2), p.left(s / 2))


def _round_down_right(s: float) -> str:
    return p.join(p.down(s / 2), p.down_right_arc(s / 2), p.right(s / 2))


def _round_bottom_u(s: float) -> str:
    return p.join(p.down(s / 2), p.bottom_u_arc(s), p.up(s / 2))


def _round_left_u(s: float) -> str:
    return p.join(p.left(s / 2), p.left_u_arc(s), p.right(s / 2))


def _round_right_u(s: float) -> str:
    return p.join(p.right(s / 2), p.right_u_arc(s), p.left(s / 2))


def _round_top_u(s: float) -> str:
    return p.join(p.up(s / 2), p.top_u_arc(s), p.down(s / 2))


def _circle_dot(s: float) -> str:
    return p.join(p.move_by(s / 2, 0), p.left_u_arc(s), p.right_u_arc(s))


# --- Extra rounded: full-module corner radius ---


def _arc_left_down(s: float) -> str:
    return p.left_down_arc(s)


def _arc_right_up(s: float) -> str:
    return p.right_up_arc(s)


def _arc_up_left(s: float) -> str:
    return p.up_left_arc(s)


def _arc_down_right(s: float) -> str:
    return p.down_right_arc(s)


# --- Classy: only top-left and bottom-right corners are rounded ---


def _classy_bottom_u(s: float) -> str:
    return p.join(p.down(s), _round_right_up(s))


def _classy_left_u(s: float) -> str:
    return p.join(_round_left_down(s), p.right(s))


def _classy_right_u(s: float) -> str:
    return p.join(_round_right_up(s), p.left(s))


def _classy_top_u(s: float) -> str:
    return p.join(p.up(s), _round_left_down(s))


def _classy_dot(s: float) -> str:
    return p.join(
        p.move_by(s / 2, 0),
        p.left_down_arc(s / 2),
        p.down(s / 2),
        p.right(s / 2),
        p.right_up_arc(s / 2),
        p.up(s / 2),
    )


def _classy_rounded_bottom_u(s: float) -> str:
    return p.join(p.down(s), p.right_up_arc(s))


def _classy_rounded_left_u(s: float) -> str:
    return p.join(p.left_down_arc(s), p.right(s))


def _classy_rounded_right_u(s: float) -> str:
    return p.join(p.right_up_arc(s), p.left(s))


def _classy_rounded_top_u(s: float) -> str:
    return p.join(p.up(s), p.left_down_arc(s))


def _table(
    *,
    left_down: Glyph,
    right_up: Glyph,
    up_left: Glyph,
    down_right: Glyph,
    bottom_u: Glyph,
    left_u: Glyph,
    right_u: Glyph,
    top_u: Glyph,
) -> Mapping[Transition, Glyph]:
    """Assemble the 16-entry transition table for one style.

    Keys are (arrived_from, heading). The pen sits at the corner implied by
    arrived_from: top -> top-left, right -> top-right, bottom -> bottom-right,
    left -> bottom-left.
    """
    return MappingProxyType({
        # straight runs
        (L, R): p.right,
        (R, L): p.left,
        (T, B): p.down,
        (B, T): p.up,
        # concave turns: the pen is already at the next cell's corner
        (L, B): _nothing,
        (R, T): _nothing,
        (T, L): _nothing,
        (B, R): _nothing,
        # convex turns
        (R, B): left_down,
        (L, T): right_up,
        (B, L): up_left,
        (T, R): down_right,
        # dead ends
        (T, T): bottom_u,
        (R, R): left_u,
        (L, L): right_u,
        (B, B): top_u,
    })


@dataclass(frozen=True)
class EdgeStyle:
    """Complete glyph table for one style."""

    style: DotStyle
    glyphs: Mapping[Transition, Glyph]
    single_dot: Glyph

    def __post_init__(self) -> None:
        missing = ALL_TRANSITIONS - set(self.glyphs)
        if missing:
            names = sorted(f"{a.value}->{h.value}" for a, h in missing)
            raise ValueError(f"{self.style.value} style has no glyph for {', '.join(names)}")


@dataclass(frozen=True)
class EdgeDrawer:
    """An EdgeStyle bound to a module size."""

    edge_style: EdgeStyle
    size: float

    @property
    def style(self) -> DotStyle:
        return self.edge_style.style

    def transition(self, arrived_from: Direction, heading: Direction) -> str:
        return self.edge_style.glyphs[(arrived_from, heading)](self.size)

    def single_dot(self) -> str:
        return self.edge_style.single_dot(self.size)


STYLES: Mapping[DotStyle, EdgeStyle] = MappingProxyType({
    DotStyle.SQUARE: EdgeStyle(
        DotStyle.SQUARE,
        _table(
            left_down=_sharp_left_down,
            right_up=_sharp_right_up,
            up_left=_sharp_up_left,
            down_right=_sharp_down_right,
            bottom_u=_square_bottom_u,
            left_u=_square_left_u,
            right_u=_square_right_u,
            top_u=_square_top_u,
        ),
        _square_dot,
    ),
    DotStyle.ROUNDED: EdgeStyle(
        DotStyle.ROUNDED,
        _table(
            left_down=_round_left_down,
            right_up=_round_right_up,
            up_left=_round_up_left,
            down_right=_round_down_right,
            bottom_u=_round_bottom_u,
            left_u=_round_left_u,
            right_u=_round_right_u,
            top_u=_round_top_u,
        ),
        _circle_dot,
    ),
    DotStyle.EXTRA_ROUNDED: EdgeStyle(
        DotStyle.EXTRA_ROUNDED,
        _table(
            left_down=_arc_left_down,
            right_up=_arc_right_up,
            up_left=_arc_up_left,
            down_right=_arc_down_right,
            bottom_u=_round_bottom_u,
            left_u=_round_left_u,
            right_u=_round_right_u,
            top_u=_round_top_u,
        ),
        _circle_dot,
    ),
    DotStyle.CLASSY: EdgeStyle(
        DotStyle.CLASSY,
        _table(
            left_down=_round_left_down,
            right_up=_round_right_up,
            up_left=_sharp_up_left,
            down_right=_sharp_down_right,
            bottom_u=_classy_bottom_u,
            left_u=_classy_left_u,
            right_u=_classy_right_u,
            top_u=_classy_top_u,
        ),
        _classy_dot,
    ),
    DotStyle.CLASSY_ROUNDED: EdgeStyle(
        DotStyle.CLASSY_ROUNDED,
        _table(
            left_down=_arc_left_down,
            right_up=_arc_right_up,
            up_left=_sharp_up_left,
            down_right=_sharp_down_right,
            bottom_u=_classy_rounded_bottom_u,
            left_u=_classy_rounded_left_u,
            right_u=_classy_rounded_right_u,
            top_u=_classy_rounded_top_u,
        ),
        _classy_dot,
    ),
})


def parse_style(style: str | DotStyle) -> DotStyle:
    try:
        return DotStyle(style)
    except ValueError as e:
        known = ", ".join(s.value for s in DotStyle)
        raise UnknownStyleError(f"unknown style {style!r}; expected one of {known}") from e


def get_drawer(style: str | DotStyle, size: float) -> EdgeDrawer:
    """Return the drawer for a traced style at the given module size."""
    parsed = parse_style(style)
    if parsed not in STYLES:
        raise UnknownStyleError(f"{parsed.value} is drawn per module and has no edge drawer")
    if size <= 0:
        raise ValueError(f"module size must be positive, got {size}")
    return EdgeDrawer(STYLES[parsed], float(size))
