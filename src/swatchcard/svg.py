# svg.py – SVG markup for a LayoutPlan (input for an external rasteriser)

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape

from .plan import Circle, DrawInstruction, GradientDef, LayoutPlan, Line, Rect, Text

_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(s: str) -> str:
    return escape(s, _ENTITIES)


def _num(v: float) -> str:
    f = float(v)
    return str(int(f)) if f.is_integer() else repr(f)


def _attrs(pairs: Iterable[tuple[str, object]]) -> str:
    out = []
    for name, value in pairs:
        if value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = _num(value)
        out.append(f'{name}="{escape_xml(str(value))}"')
    return " ".join(out)


def _rect(e: Rect) -> str:
    return "<rect " + _attrs([
        ("x", e.x), ("y", e.y), ("width", e.width), ("height", e.height), ("fill", e.fill),
        ("rx", e.rx or None), ("stroke", e.stroke), ("stroke-width", e.stroke_width or None),
        ("opacity", e.opacity),
    ]) + "/>"


def _circle(e: Circle) -> str:
    return "<circle " + _attrs([
        ("cx", e.cx), ("cy", e.cy), ("r", e.r), ("fill", e.fill), ("stroke", e.stroke),
        ("stroke-width", e.stroke_width or None), ("opacity", e.opacity),
    ]) + "/>"


def _line(e: Line) -> str:
    return "<line " + _attrs([
        ("x1", e.x1), ("y1", e.y1), ("x2", e.x2), ("y2", e.y2), ("stroke", e.stroke),
        ("stroke-width", e.stroke_width), ("opacity", e.opacity), ("stroke-dasharray", e.dash_array),
    ]) + "/>"


def _text(e: Text) -> str:
    attrs = _attrs([
        ("x", e.x), ("y", e.y), ("fill", e.fill), ("font-size", e.font_size or None),
        ("font-family", e.font_family), ("font-weight", e.font_weight or None),
        ("text-anchor", e.anchor), ("dominant-baseline", e.baseline), ("opacity", e.opacity),
    ])
    return f"<text {attrs}>{escape_xml(e.content)}</text>"


def _gradient(e: GradientDef) -> str:
    stops = "".join(
        f'<stop offset="{_num(s.offset)}%" stop-color="{escape_xml(s.color)}"/>' for s in e.stops
    )
    head = _attrs([("id", e.id), ("x1", e.x1), ("y1", e.y1), ("x2", e.x2), ("y2", e.y2)])
    return f"<defs><linearGradient {head}>{stops}</linearGradient></defs>"


def element_to_svg(e: DrawInstruction) -> str:
    if isinstance(e, Rect):
        return _rect(e)
    if isinstance(e, Circle):
        return _circle(e)
    if isinstance(e, Line):
        return _line(e)
    if isinstance(e, Text):
        return _text(e)
    if isinstance(e, GradientDef):
        return _gradient(e)
    raise TypeError(f"unsupported drawing instruction: {type(e).__name__}")


def to_svg(plan: LayoutPlan) -> str:
    w, h = _num(plan.width), _num(plan.height)
    body = "\n".join(element_to_svg(e) for e in plan.elements)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">\n'
        f"{body}\n</svg>"
    )


__all__ = ["element_to_svg", "escape_xml", "to_svg"]
