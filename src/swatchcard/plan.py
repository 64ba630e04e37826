# plan.py – renderer-agnostic drawing instructions for a fixed-size canvas

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, ClassVar, Literal, Union

Anchor = Literal["start", "middle", "end"]
Baseline = Literal["auto", "middle", "hanging"]


def _check_finite(shape: Any) -> None:
    for f in fields(shape):
        v = getattr(shape, f.name)
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError(f"{type(shape).__name__}.{f.name} is not finite: {v}")


@dataclass(frozen=True)
class Rect:
    kind: ClassVar[str] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: str
    rx: float | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"
    cx: float
    cy: float
    r: float
    fill: str
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclass(frozen=True)
class Line:
    kind: ClassVar[str] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1
    opacity: float | None = None
    dash_array: str | None = None

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclass(frozen=True)
class Text:
    kind: ClassVar[str] = "text"
    x: float
    y: float
    content: str
    fill: str | None = None
    font_size: float | None = None
    font_family: str | None = None
    font_weight: int | str | None = None
    anchor: Anchor | None = None
    baseline: Baseline | None = None
    opacity: float | None = None

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclass(frozen=True)
class GradientStop:
    offset: float  # percent, 0..100
    color: str


@dataclass(frozen=True)
class GradientDef:
    """Linear gradient; shapes reference it with fill=gradient_ref(id)."""

    kind: ClassVar[str] = "gradient"
    id: str
    stops: tuple[GradientStop, ...]
    x1: str = "0%"
    y1: str = "0%"
    x2: str = "100%"
    y2: str = "0%"


DrawInstruction = Union[Rect, Circle, Line, Text, GradientDef]


def gradient_ref(gradient_id: str) -> str:
    return f"url(#{gradient_id})"


@dataclass(frozen=True)
class LayoutPlan:
    """Canvas size plus elements in painter's order (later draws on top)."""

    width: int
    height: int
    background: str
    elements: tuple[DrawInstruction, ...]

    def of_kind(self, kind: str) -> list[DrawInstruction]:
        return [e for e in self.elements if e.kind == kind]

    def texts(self) -> list[str]:
        return [e.content for e in self.elements if isinstance(e, Text)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "background": self.background,
            "elements": [{"kind": e.kind, **asdict(e)} for e in self.elements],
        }


@dataclass
class PlanBuilder:
    """Append-only collector of drawing instructions; build() freezes it."""

    width: int
    height: int
    background: str
    _elements: list[DrawInstruction] = field(default_factory=list)

    def add(self, element: DrawInstruction) -> DrawInstruction:
        self._elements.append(element)
        return element

    def extend(self, elements: "PlanBuilder | list[DrawInstruction]") -> None:
        items = elements._elements if isinstance(elements, PlanBuilder) else elements
        self._elements.extend(items)

    def rect(self, x: float, y: float, width: float, height: float, fill: str, **style: Any) -> Rect:
        return self.add(Rect(x, y, width, height, fill, **style))  # type: ignore[return-value]

    def circle(self, cx: float, cy: float, r: float, fill: str, **style: Any) -> Circle:
        return self.add(Circle(cx, cy, r, fill, **style))  # type: ignore[return-value]

    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: str, **style: Any) -> Line:
        return self.add(Line(x1, y1, x2, y2, stroke, **style))  # type: ignore[return-value]

    def text(self, x: float, y: float, content: str, **style: Any) -> Text:
        return self.add(Text(x, y, content, **style))  # type: ignore[return-value]

    def gradient(self, gradient_id: str, stops: list[tuple[float, str]], **axis: str) -> str:
        self.add(GradientDef(gradient_id, tuple(GradientStop(o, c) for o, c in stops), **axis))
        return gradient_ref(gradient_id)

    def build(self) -> LayoutPlan:
        return LayoutPlan(self.width, self.height, self.background, tuple(self._elements))


__all__ = [
    "Circle",
    "DrawInstruction",
    "GradientDef",
    "GradientStop",
    "LayoutPlan",
    "Line",
    "PlanBuilder",
    "Rect",
    "Text",
    "gradient_ref",
]
