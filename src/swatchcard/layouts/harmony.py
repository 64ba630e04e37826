# harmony.py – input entry card on the left, up to four harmony matches on the right

from __future__ import annotations

from typing import Sequence

from ..harmony import harmony_name
from ..matching import MatchResult
from ..palette import PaletteEntry
from ..plan import LayoutPlan
from .frame import BLEND_TIERS, CANVAS, FONTS, THEME, card, content, delta_color, delta_label, headline, truncate

TOOL_NAME = "Harmony Explorer"

# match count -> (swatch size, gap)
MATCH_SIZES = {1: (140, 25), 2: (140, 25), 3: (120, 18), 4: (110, 18)}

INPUT_CARD_WIDTH = 350
INPUT_SWATCH = 160
FALLBACK_DOTS = ("#ef4444", "#f97316", "#eab308", "#22c55e", "#3b82f6", "#a855f7")


def harmony_card(
    base: PaletteEntry,
    matches: Sequence[MatchResult],
    scheme: str,
    *,
    algorithm: str = "oklab",
) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    top, height, pad = c.content_top, c.content_height, c.padding

    # input card, vertically centered
    card_x, card_w = pad, INPUT_CARD_WIDTH
    card_h = height - 60
    card_y = top + (height - card_h) / 2
    mid_x = card_x + card_w / 2
    b.rect(card_x, card_y, card_w, card_h, THEME.background_card, rx=16, stroke=THEME.border, stroke_width=1)
    b.text(mid_x, card_y + 30, "INPUT", fill=THEME.text_muted, font_size=14,
           font_family=FONTS.header, font_weight=600, anchor="middle")

    sx = card_x + (card_w - INPUT_SWATCH) / 2
    sy = card_y + 60
    below = sy + INPUT_SWATCH
    b.rect(sx, sy, INPUT_SWATCH, INPUT_SWATCH, base.hex, rx=12, stroke="#ffffff", stroke_width=3)
    b.text(mid_x, below + 40, base.name, fill=THEME.text, font_size=24,
           font_family=FONTS.header, font_weight=600, anchor="middle")
    b.text(mid_x, below + 70, base.hex.upper(), fill=THEME.text_muted, font_size=16,
           font_family=FONTS.mono, anchor="middle")
    r, g, bl = base.rgb
    b.text(mid_x, below + 95, f"RGB({r}, {g}, {bl})", fill=THEME.text_muted, font_size=12,
           font_family=FONTS.mono, anchor="middle")
    b.text(mid_x, below + 120, f"Category: {base.category}", fill=THEME.text, font_size=13,
           font_family=FONTS.primary, font_weight=500, anchor="middle")

    # matches
    right_x = card_x + card_w + 40
    right_w = c.width - right_x - pad
    right_mid = right_x + right_w / 2
    b.text(right_mid, top + 40, "HARMONY MATCHES", fill=THEME.text_muted, font_size=14,
           font_family=FONTS.header, font_weight=600, anchor="middle")

    shown = list(matches[:4])
    if shown:
        size, gap = MATCH_SIZES[len(shown)]
        total = len(shown) * size + (len(shown) - 1) * gap
        x0 = right_x + (right_w - total) / 2
        y = top + (height - size - 70) / 2
        for i, m in enumerate(shown):
            x = x0 + i * (size + gap)
            b.rect(x, y, size, size, m.entry.hex, rx=10, stroke=THEME.border, stroke_width=2)
            b.text(x + size / 2, y + size + 25, truncate(m.entry.name, 14), fill=THEME.text,
                   font_size=14, font_family=FONTS.primary, font_weight=500, anchor="middle")
            b.text(x + size / 2, y + size + 48, delta_label(m.distance),
                   fill=delta_color(m.distance, BLEND_TIERS), font_size=13,
                   font_family=FONTS.mono, anchor="middle")
    else:
        b.text(right_mid, top + height / 2, "No matches found", fill=THEME.text_muted,
               font_size=18, font_family=FONTS.primary, anchor="middle")

    return card(b, tool_name=TOOL_NAME, subtitle=harmony_name(scheme), algorithm=algorithm)


def harmony_fallback(scheme: str, *, algorithm: str = "oklab") -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Explore Color Harmonies", "Find matching dyes for your FFXIV glamour")

    spacing = 80
    x0 = (c.width - (len(FALLBACK_DOTS) - 1) * spacing) / 2
    for i, color in enumerate(FALLBACK_DOTS):
        b.circle(x0 + i * spacing, mid + 100, 25, color)

    return card(b, tool_name=TOOL_NAME, subtitle=harmony_name(scheme), algorithm=algorithm)


__all__ = ["MATCH_SIZES", "harmony_card", "harmony_fallback"]
