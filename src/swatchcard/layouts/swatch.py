# swatch.py – arbitrary input color on the left, ranked palette matches on the right

from __future__ import annotations

from typing import Sequence

from ..character_colors import CharacterColorContext
from ..colorspace import contrast_text_color, hex_to_rgb
from ..matching import MatchResult
from ..plan import LayoutPlan, PlanBuilder
from .frame import CANVAS, FONTS, MATCH_TIERS, THEME, card, content, delta_color, delta_label, headline, truncate

TOOL_NAME = "Swatch Matcher"

INPUT_CARD_WIDTH = 320
INPUT_SWATCH = 180
MATCH_SWATCH = 110
MATCH_GAP = 18
PER_ROW = 4
ROW_PITCH = MATCH_SWATCH + 65

FALLBACK_EXAMPLES = (
    ("#8B4513", "Brown"),
    ("#4169E1", "Blue"),
    ("#228B22", "Green"),
    ("#DC143C", "Red"),
    ("#FFD700", "Gold"),
)


def _context_font_size(name: str) -> int:
    if len(name) > 25:
        return 11
    if len(name) > 18:
        return 12
    return 14


def _character_context(b: PlanBuilder, x: float, y: float, ctx: CharacterColorContext) -> None:
    b.text(x, y, "FROM", fill=THEME.text_muted, font_size=10, font_family=FONTS.header,
           font_weight=600, anchor="middle")
    name = ctx.full_name or ctx.category_name
    b.text(x, y + 20, name, fill=THEME.text, font_size=_context_font_size(name),
           font_family=FONTS.primary, font_weight=500, anchor="middle")
    b.text(x, y + 40, f"Row {ctx.row}, Col {ctx.col}", fill=THEME.text_muted, font_size=12,
           font_family=FONTS.mono, anchor="middle")


def swatch_card(
    target_hex: str,
    matches: Sequence[MatchResult],
    *,
    character: CharacterColorContext | None = None,
    algorithm: str = "oklab",
) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    top, height, pad = c.content_top, c.content_height, c.padding
    hex_up = target_hex.upper()

    card_x, card_w = pad, INPUT_CARD_WIDTH
    card_h = height - 100
    card_y = top + (height - card_h) / 2
    mid_x = card_x + card_w / 2
    b.rect(card_x, card_y, card_w, card_h, THEME.background_card, rx=16, stroke=THEME.border, stroke_width=1)
    b.text(mid_x, card_y + 30, "INPUT COLOR", fill=THEME.text_muted, font_size=14,
           font_family=FONTS.header, font_weight=600, anchor="middle")

    sx = card_x + (card_w - INPUT_SWATCH) / 2
    sy = card_y + 60
    b.rect(sx, sy, INPUT_SWATCH, INPUT_SWATCH, hex_up, rx=12, stroke="#ffffff", stroke_width=3)
    b.text(sx + INPUT_SWATCH / 2, sy + INPUT_SWATCH / 2, hex_up, fill=contrast_text_color(hex_up),
           font_size=24, font_family=FONTS.mono, font_weight=600, anchor="middle", baseline="middle")
    r, g, bl = hex_to_rgb(hex_up)
    below = sy + INPUT_SWATCH
    b.text(mid_x, below + 30, f"RGB({r}, {g}, {bl})", fill=THEME.text_muted, font_size=13,
           font_family=FONTS.mono, anchor="middle")
    if character is not None:
        _character_context(b, mid_x, below + 55, character)

    right_x = card_x + card_w + 40
    right_w = c.width - right_x - pad
    right_mid = right_x + right_w / 2
    b.text(right_mid, top + 60, f"TOP {len(matches)} MATCHES", fill=THEME.text_muted, font_size=14,
           font_family=FONTS.header, font_weight=600, anchor="middle")

    per_row = min(len(matches), PER_ROW)
    total_w = per_row * MATCH_SWATCH + (per_row - 1) * MATCH_GAP
    x0 = right_x + (right_w - total_w) / 2
    # swatch + two label lines below
    y0 = top + (height - (MATCH_SWATCH + 40)) / 2

    for i, m in enumerate(matches):
        row, col = divmod(i, PER_ROW)
        x = x0 + col * (MATCH_SWATCH + MATCH_GAP)
        y = y0 + row * ROW_PITCH
        best = i == 0
        b.rect(x, y, MATCH_SWATCH, MATCH_SWATCH, m.entry.hex, rx=8,
               stroke=THEME.success if best else THEME.border, stroke_width=3 if best else 1)
        if best:
            b.rect(x + MATCH_SWATCH - 25, y - 5, 30, 20, THEME.success, rx=4)
            b.text(x + MATCH_SWATCH - 10, y + 7, "#1", fill="#000", font_size=11,
                   font_family=FONTS.header, font_weight=700, anchor="middle")
        cx = x + MATCH_SWATCH / 2
        b.text(cx, y + MATCH_SWATCH + 18, truncate(m.entry.name, 10), fill=THEME.text,
               font_size=12, font_family=FONTS.primary, font_weight=600 if best else 400,
               anchor="middle")
        b.text(cx, y + MATCH_SWATCH + 38, delta_label(m.distance),
               fill=delta_color(m.distance, MATCH_TIERS), font_size=11,
               font_family=FONTS.mono, anchor="middle")

    if not matches:
        b.text(right_mid, top + height / 2, "No matches found", fill=THEME.text_muted,
               font_size=18, font_family=FONTS.primary, anchor="middle")

    return card(b, tool_name=TOOL_NAME, subtitle=hex_up, algorithm=algorithm)


def swatch_fallback(*, algorithm: str = "oklab") -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Match Any Color", "Find FFXIV dyes that match your custom colors")

    size, gap = 60, 20
    n = len(FALLBACK_EXAMPLES)
    x0 = (c.width - (n * size + (n - 1) * gap)) / 2
    y = mid + 90
    for i, (hex_color, name) in enumerate(FALLBACK_EXAMPLES):
        x = x0 + i * (size + gap)
        b.rect(x, y, size, size, hex_color, rx=8)
        b.text(x + size / 2, y + size + 18, name, fill=THEME.text_muted, font_size=11,
               font_family=FONTS.primary, anchor="middle")

    return card(b, tool_name=TOOL_NAME, algorithm=algorithm)


__all__ = ["swatch_card", "swatch_fallback"]
