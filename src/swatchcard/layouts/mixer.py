# mixer.py – "A + B = result" and "A + B + C ▼ result" equations with the nearest match

from __future__ import annotations

from ..matching import MatchResult
from ..palette import PaletteEntry
from ..plan import LayoutPlan, PlanBuilder
from .frame import BLEND_TIERS, CANVAS, FONTS, THEME, card, content, delta_color, delta_label, headline, truncate

TOOL_NAME = "Dye Mixer"


def _ratio_text(ratio: int) -> str:
    return f"{ratio}/{100 - ratio} Blend"


def _operator(b: PlanBuilder, x: float, y: float, glyph: str, size: int) -> None:
    b.text(x, y, glyph, fill=THEME.text_muted, font_size=size, font_family=FONTS.header,
           font_weight=300, anchor="middle")


def _match_lines(b: PlanBuilder, x: float, y: float, match: MatchResult | None,
                 *, name: str, size: int) -> None:
    if match is None:
        return
    b.text(x, y, f"≈ {name}", fill=THEME.text_muted, font_size=size,
           font_family=FONTS.primary, anchor="middle")
    b.text(x, y + 18, delta_label(match.distance), fill=delta_color(match.distance, BLEND_TIERS),
           font_size=size, font_family=FONTS.mono, anchor="middle")


def mix2_card(
    a: PaletteEntry,
    b_entry: PaletteEntry,
    ratio: int,
    mixed_hex: str,
    match: MatchResult | None,
    *,
    algorithm: str = "oklab",
) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    size, op_gap = 120, 35

    total_w = size * 3 + op_gap * 4
    x_a = c.center_x - total_w / 2
    x_plus = x_a + size + op_gap
    x_b = x_plus + op_gap
    x_eq = x_b + size + op_gap
    x_res = x_eq + op_gap

    # label above (15) + swatch + info below (60)
    visual_h = 15 + size + 60
    y = c.content_top + (c.content_height - visual_h) / 2 + 15
    below = y + size

    for i, (x, entry, share) in enumerate(((x_a, a, ratio), (x_b, b_entry, 100 - ratio))):
        cx = x + size / 2
        b.rect(x, y, size, size, entry.hex, rx=10, stroke="#ffffff", stroke_width=2)
        b.text(cx, y - 15, f"{share}%", fill=THEME.accent, font_size=16,
               font_family=FONTS.header, font_weight=700, anchor="middle")
        b.text(cx, below + 22, truncate(entry.name, 12), fill=THEME.text, font_size=13,
               font_family=FONTS.primary, font_weight=500, anchor="middle")
        b.text(cx, below + 40, entry.hex.upper(), fill=THEME.text_muted, font_size=11,
               font_family=FONTS.mono, anchor="middle")
        if i == 0:
            _operator(b, x_plus, y + size / 2 + 8, "+", 36)

    _operator(b, x_eq, y + size / 2 + 8, "=", 36)

    rx = x_res + size / 2
    b.rect(x_res, y, size, size, mixed_hex, rx=10, stroke=THEME.accent, stroke_width=3)
    b.text(rx, y - 15, "RESULT", fill=THEME.text_muted, font_size=12,
           font_family=FONTS.header, font_weight=600, anchor="middle")
    b.text(rx, below + 22, mixed_hex.upper(), fill=THEME.text, font_size=13,
           font_family=FONTS.mono, font_weight=500, anchor="middle")
    _match_lines(b, rx, below + 42, match, name=match.entry.name if match else "", size=11)

    return card(b, tool_name=TOOL_NAME, subtitle=_ratio_text(ratio), algorithm=algorithm)


def mix3_card(
    a: PaletteEntry,
    b_entry: PaletteEntry,
    c_entry: PaletteEntry,
    mixed_hex: str,
    match: MatchResult | None,
    *,
    algorithm: str = "oklab",
) -> LayoutPlan:
    c = CANVAS
    b = content(c)
    in_size, res_size, op_gap = 90, 110, 30
    in_label_h, arrow_gap_h, res_label_h = 25, 55, 65

    visual_h = in_size + in_label_h + arrow_gap_h + res_size + res_label_h
    y_in = c.content_top + (c.content_height - visual_h) / 2 + 3

    row_w = in_size * 3 + op_gap * 4
    x = c.center_x - row_w / 2
    for i, entry in enumerate((a, b_entry, c_entry)):
        b.rect(x, y_in, in_size, in_size, entry.hex, rx=8, stroke="#ffffff", stroke_width=2)
        b.text(x + in_size / 2, y_in + in_size + 18, truncate(entry.name, 10), fill=THEME.text,
               font_size=12, font_family=FONTS.primary, font_weight=500, anchor="middle")
        if i < 2:
            plus_x = x + in_size + op_gap
            _operator(b, plus_x, y_in + in_size / 2 + 6, "+", 28)
            x = plus_x + op_gap

    b.text(c.center_x, y_in + in_size + in_label_h + arrow_gap_h / 2, "▼", fill=THEME.accent,
           font_size=20, font_family=FONTS.primary, anchor="middle")

    y_res = y_in + in_size + in_label_h + arrow_gap_h
    b.rect(c.center_x - res_size / 2, y_res, res_size, res_size, mixed_hex, rx=10,
           stroke=THEME.accent, stroke_width=3)
    below = y_res + res_size
    b.text(c.center_x, below + 20, mixed_hex.upper(), fill=THEME.text, font_size=14,
           font_family=FONTS.mono, font_weight=500, anchor="middle")
    _match_lines(b, c.center_x, below + 42, match,
                 name=truncate(match.entry.name, 18) if match else "", size=12)

    return card(b, tool_name=TOOL_NAME, subtitle="3-Dye Blend", algorithm=algorithm)


def mixer_fallback(ratio: int, *, three_way: bool = False, algorithm: str = "oklab") -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Mix Dye Colors", "Blend two FFXIV dyes and find the closest match")

    y = mid + 100
    cx = c.center_x
    b.rect(cx - 200, y, 60, 60, "#ef4444", rx=8)
    b.text(cx - 120, y + 35, "+", fill=THEME.text_muted, font_size=30,
           font_family=FONTS.header, anchor="middle")
    b.rect(cx - 80, y, 60, 60, "#3b82f6", rx=8)
    b.text(cx + 10, y + 35, "=", fill=THEME.text_muted, font_size=30,
           font_family=FONTS.header, anchor="middle")
    b.rect(cx + 50, y, 60, 60, "#9747ba", rx=8)

    subtitle = "3-Dye Blend" if three_way else _ratio_text(ratio)
    return card(b, tool_name=TOOL_NAME, subtitle=subtitle, algorithm=algorithm)


__all__ = ["mix2_card", "mix3_card", "mixer_fallback"]
