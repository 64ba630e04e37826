# gradient.py – step swatches over a gradient bar, start/end labels and a summary line

from __future__ import annotations

from typing import Sequence

from ..blend import MAX_DRAWN_STEPS, GradientStep
from ..palette import PaletteEntry
from ..plan import LayoutPlan
from .frame import CANVAS, FONTS, THEME, card, content, headline, truncate

TOOL_NAME = "Gradient Builder"

SWATCH = 110
GAP = 18
BAR_HEIGHT = 8
# label above + swatch + bar area + labels below
LABEL_ABOVE, BAR_AREA, LABELS_BELOW = 20, 28, 50


def _subtitle(step_count: int) -> str:
    return f"{step_count} Steps"


def gradient_card(
    start: PaletteEntry,
    end: PaletteEntry,
    steps: Sequence[GradientStep],
    *,
    algorithm: str = "oklab",
) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    top, height = c.content_top, c.content_height

    drawn = min(len(steps), MAX_DRAWN_STEPS)
    total_w = drawn * SWATCH + (drawn - 1) * GAP
    x0 = (c.width - total_w) / 2
    visual_h = LABEL_ABOVE + SWATCH + BAR_AREA + LABELS_BELOW
    y = top + (height - visual_h) / 2 + LABEL_ABOVE

    b.text(x0 + SWATCH / 2, y - 20, "START", fill=THEME.text_muted, font_size=12,
           font_family=FONTS.header, font_weight=600, anchor="middle")
    b.text(x0 + total_w - SWATCH / 2, y - 20, "END", fill=THEME.text_muted, font_size=12,
           font_family=FONTS.header, font_weight=600, anchor="middle")

    # the bar shows every computed step, even the ones not drawn as swatches
    bar_y = y + SWATCH + 20
    last = max(len(steps) - 1, 1)
    bar_fill = b.gradient("gradientBar", [(i / last * 100, s.hex) for i, s in enumerate(steps)])
    b.rect(x0, bar_y, total_w, BAR_HEIGHT, bar_fill, rx=4)

    label_y = bar_y + BAR_HEIGHT + 30
    for i, step in enumerate(steps[:drawn]):
        x = x0 + i * (SWATCH + GAP)
        cx = x + SWATCH / 2
        endpoint = i == 0 or i == len(steps) - 1
        b.rect(x, y, SWATCH, SWATCH, step.hex, rx=8,
               stroke="#ffffff" if endpoint else THEME.border,
               stroke_width=3 if endpoint else 1)
        b.line(cx, y + SWATCH, cx, bar_y, THEME.border, stroke_width=1)
        name = truncate(step.match.entry.name, 10, keep=9) if step.match else f"Step {i + 1}"
        b.text(cx, label_y, name, fill=THEME.text, font_size=12, font_family=FONTS.primary,
               font_weight=600 if endpoint else 400, anchor="middle")
        b.text(cx, label_y + 20, step.hex.upper(), fill=THEME.text_muted, font_size=11,
               font_family=FONTS.mono, anchor="middle")

    b.text(c.center_x, top + height - 60, f"{start.name} → {end.name}", fill=THEME.text,
           font_size=20, font_family=FONTS.header, font_weight=500, anchor="middle")

    return card(b, tool_name=TOOL_NAME, subtitle=_subtitle(len(steps)), algorithm=algorithm)


def gradient_fallback(step_count: int, *, algorithm: str = "oklab") -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Create Color Gradients", "Build smooth transitions between FFXIV dyes")

    bar_w, bar_h = 600, 40
    fill = b.gradient("exampleGradient", [(0, "#ef4444"), (50, "#eab308"), (100, "#22c55e")])
    b.rect((c.width - bar_w) / 2, mid + 80, bar_w, bar_h, fill, rx=8)

    return card(b, tool_name=TOOL_NAME, subtitle=_subtitle(step_count), algorithm=algorithm)


__all__ = ["gradient_card", "gradient_fallback"]
