"""Path fragment builders — relative SVG path commands sized in module units.

Each builder returns one command ("h 4", "a 2 2 0 0 0 -2 2"). Fragments are
combined with join(); empty fragments are dropped.
"""

from __future__ import annotations


def fmt(value: float) -> str:
    """Compact number: 4.0 -> '4', 2.5 -> '2.5', -0.0 -> '0'."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def join(*fragments: str) -> str:
    return " ".join(f for f in fragments if f)


def move_to(x: float, y: float) -> str:
    return f"M {fmt(x)} {fmt(y)}"


def move_by(dx: float, dy: float) -> str:
    return f"m {fmt(dx)} {fmt(dy)}"


def down(size: float) -> str:
    return f"v {fmt(size)}"


def right(size: float) -> str:
    return f"h {fmt(size)}"


def up(size: float) -> str:
    return f"v {fmt(-size)}"


def left(size: float) -> str:
    return f"h {fmt(-size)}"


def _arc(radius: float, dx: float, dy: float, large: int = 0, sweep: int = 0) -> str:
    r = fmt(radius)
    return f"a {r} {r} 0 {large} {sweep} {fmt(dx)} {fmt(dy)}"


# Quarter arcs: the arc centre sits on the inside of the turn, so the corner
# between the two legs is cut off.


def left_down_arc(size: float) -> str:
    return _arc(size, -size, size)


def up_left_arc(size: float) -> str:
    return _arc(size, -size, -size)


def down_right_arc(size: float) -> str:
    return _arc(size, size, size)


def right_up_arc(size: float) -> str:
    return _arc(size, size, -size)


# Half arcs of diameter `size`, closing a dead end.


def bottom_u_arc(size: float) -> str:
    return _arc(size / 2, size, 0)


def right_u_arc(size: float) -> str:
    return _arc(size / 2, 0, -size)


def top_u_arc(size: float) -> str:
    return _arc(size / 2, -size, 0)


def left_u_arc(size: float) -> str:
    return _arc(size / 2, 0, size)


# --- Finder ornaments (absolute, one closed shape each) ---


def donut_path(x: float, y: float, size: float, thickness: float) -> str:
    """Ring of outer diameter `size` with a hole; render with evenodd."""
    outer = size / 2
    inner = outer - thickness
    return join(
        move_to(x + outer, y),
        _arc(outer, 0.1, 0, large=1, sweep=0),
        "z",
        move_by(0, thickness),
        _arc(inner, -0.1, 0, large=1, sweep=1),
        "Z",
    )


def square_ring_path(x: float, y: float, size: float, thickness: float) -> str:
    """Square outline of width `thickness`; render with evenodd."""
    inner = size - 2 * thickness
    return join(
        move_to(x, y),
        down(size),
        right(size),
        up(size),
        "z",
        move_to(x + thickness, y + thickness),
        right(inner),
        down(inner),
        left(inner),
        "z",
    )


def rounded_ring_path(x: float, y: float, size: float) -> str:
    """Square outline with fully rounded corners, seven units across."""
    unit = size / 7
    outer = 2.5 * unit
    inner = 1.5 * unit
    return join(
        move_to(x, y + outer),
        down(2 * unit),
        _arc(outer, outer, outer),
        right(2 * unit),
        _arc(outer, outer, -outer),
        up(2 * unit),
        _arc(outer, -outer, -outer),
        left(2 * unit),
        _arc(outer, -outer, outer),
        move_to(x + outer, y + unit),
        right(2 * unit),
        _arc(inner, inner, inner, sweep=1),
        down(2 * unit),
        _arc(inner, -inner, inner, sweep=1),
        left(2 * unit),
        _arc(inner, -inner, -inner, sweep=1),
        up(2 * unit),
        _arc(inner, inner, -inner, sweep=1),
    )
