"""Write SVG markup from element dicts."""

from __future__ import annotations

from html import escape
from typing import Any

from qrtrace.svg.primitives import fmt


def _attr_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return fmt(value)
    return escape(str(value), quote=True)


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    description: str = "",
    root_attrs: dict[str, Any] | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is a dict with a "tag" key and attribute keys; None-valued
    attributes are left out.
    """
    root = {
        "xmlns": "http://www.w3.org/2000/svg",
        "xmlns:xlink": "http://www.w3.org/1999/xlink",
        "viewBox": f"0 0 {fmt(canvas_w)} {fmt(canvas_h)}",
        **(root_attrs or {}),
    }
    root_str = " ".join(f'{k}="{_attr_value(v)}"' for k, v in root.items() if v is not None)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<svg {root_str}>",
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag" and v is not None}
        attr_str = " ".join(f'{k}="{_attr_value(v)}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
