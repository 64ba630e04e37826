# accessibility.py – original colors next to their simulated appearance

from __future__ import annotations

from typing import Sequence

from ..palette import PaletteEntry
from ..plan import LayoutPlan
from ..vision import VISION_DESCRIPTIONS, VISION_NAMES, simulate_many
from .frame import CANVAS, FONTS, THEME, card, content, headline, truncate

TOOL_NAME = "Accessibility"
MAX_ENTRIES = 4

SWATCH_SIZES = {1: 140, 2: 120, 3: 100, 4: 85}

LABEL_H = 25
LABEL_GAP = 20
SWATCH_LABEL_H = 30
INFO_GAP = 25
INFO_BOX_H = 80
INFO_BOX_W = 500

FALLBACK_EXAMPLES = ("#ef4444", "#22c55e", "#3b82f6", "#eab308")


def _gap(n: int) -> int:
    return 20 if n <= 2 else 15


def accessibility_card(entries: Sequence[PaletteEntry], deficiency: str) -> LayoutPlan:
    shown = list(entries[:MAX_ENTRIES])
    if not shown:
        return accessibility_fallback(deficiency)

    c = CANVAS
    b = content(c)
    pad = c.padding
    n = len(shown)
    size, gap = SWATCH_SIZES[n], _gap(n)

    col_w = (c.width - pad * 3) / 2
    left_x, right_x = pad, pad * 2 + col_w

    total_h = LABEL_H + LABEL_GAP + size + SWATCH_LABEL_H + INFO_GAP + INFO_BOX_H
    y0 = c.content_top + (c.content_height - total_h) / 2 + 40

    for col_x, label in ((left_x, "ORIGINAL COLORS"), (right_x, "SIMULATED VIEW")):
        b.text(col_x + col_w / 2, y0 + LABEL_H / 2, label, fill=THEME.text_muted, font_size=14,
               font_family=FONTS.header, font_weight=600, anchor="middle")

    row_w = n * size + (n - 1) * gap
    lx0 = left_x + (col_w - row_w) / 2
    rx0 = right_x + (col_w - row_w) / 2
    y = y0 + LABEL_H + LABEL_GAP

    for i, e in enumerate(shown):
        x = lx0 + i * (size + gap)
        b.rect(x, y, size, size, e.hex, rx=8, stroke=THEME.border, stroke_width=2)
        b.text(x + size / 2, y + size + 18, truncate(e.name, 10), fill=THEME.text,
               font_size=13 if n <= 2 else 11, font_family=FONTS.primary, font_weight=500,
               anchor="middle")

    b.text(c.center_x, y + size / 2, "→", fill=THEME.accent, font_size=48,
           font_family=FONTS.primary, font_weight=700, anchor="middle", baseline="middle")

    for i, sim in enumerate(simulate_many([e.hex for e in shown], deficiency)):
        x = rx0 + i * (size + gap)
        b.rect(x, y, size, size, sim, rx=8, stroke=THEME.border, stroke_width=2)
        b.text(x + size / 2, y + size + 18, sim.upper(), fill=THEME.text_muted,
               font_size=11 if n <= 2 else 9, font_family=FONTS.mono, anchor="middle")

    box_y = y + size + SWATCH_LABEL_H + INFO_GAP
    b.rect((c.width - INFO_BOX_W) / 2, box_y, INFO_BOX_W, INFO_BOX_H, THEME.background_card,
           rx=12, stroke=THEME.border, stroke_width=1)
    b.text(c.center_x, box_y + 30, VISION_NAMES[deficiency], fill=THEME.text, font_size=22,
           font_family=FONTS.header, font_weight=600, anchor="middle")
    b.text(c.center_x, box_y + 58, VISION_DESCRIPTIONS[deficiency], fill=THEME.text_muted,
           font_size=14, font_family=FONTS.primary, anchor="middle")

    return card(b, tool_name=TOOL_NAME, subtitle=VISION_NAMES[deficiency])


def accessibility_fallback(deficiency: str) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Color Vision Accessibility",
                   "See how your dye choices appear to colorblind players", lift=40)

    size, gap = 50, 15
    n = len(FALLBACK_EXAMPLES)
    x0 = (c.width - (n * size + (n - 1) * gap)) / 2
    original_y = mid + 70
    simulated_y = original_y + size + 20
    rows = (
        (original_y, "Original:", list(FALLBACK_EXAMPLES)),
        (simulated_y, f"{VISION_NAMES[deficiency]}:", simulate_many(FALLBACK_EXAMPLES, deficiency)),
    )
    for y, label, colors in rows:
        b.text(x0 - 100, y + size / 2, label, fill=THEME.text_muted, font_size=14,
               font_family=FONTS.primary, anchor="end", baseline="middle")
        for i, color in enumerate(colors):
            b.rect(x0 + i * (size + gap), y, size, size, color, rx=6)

    return card(b, tool_name=TOOL_NAME, subtitle=VISION_NAMES[deficiency])


__all__ = ["SWATCH_SIZES", "accessibility_card", "accessibility_fallback"]
