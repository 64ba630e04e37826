# comparison.py – up to four palette entries side by side

from __future__ import annotations

from typing import Sequence

from ..colorspace import contrast_text_color
from ..palette import PaletteEntry
from ..plan import LayoutPlan
from .frame import CANVAS, FONTS, THEME, card, content, headline, truncate

TOOL_NAME = "Comparison"
MAX_ENTRIES = 4

# entry count -> (swatch size, gap)
SIZES = {1: (220, 50), 2: (180, 50), 3: (150, 35), 4: (130, 25)}
# entry count -> name font size
NAME_FONT = {1: 20, 2: 20, 3: 17, 4: 15}
# swatches at least this big carry their hex inside
INLINE_HEX_MIN = 150

FALLBACK_EXAMPLES = (
    ("#F2F2F2", "White"),
    ("#8A2A37", "Red"),
    ("#252A42", "Blue"),
    ("#C8B374", "Yellow"),
)


def comparison_card(entries: Sequence[PaletteEntry]) -> LayoutPlan:
    shown = list(entries[:MAX_ENTRIES])
    if not shown:
        return comparison_fallback()

    c = CANVAS
    b = content(c)
    n = len(shown)
    size, gap = SIZES[n]
    total_w = n * size + (n - 1) * gap
    x0 = (c.width - total_w) / 2
    # swatch + label block below
    y = c.content_top + (c.content_height - (size + 90)) / 2
    inline_hex = size >= INLINE_HEX_MIN

    for i, e in enumerate(shown):
        x = x0 + i * (size + gap)
        cx = x + size / 2
        b.rect(x, y, size, size, e.hex, rx=12, stroke="#ffffff", stroke_width=3)
        if inline_hex:
            b.text(cx, y + size / 2, e.hex.upper(), fill=contrast_text_color(e.hex),
                   font_size=18 if size >= 180 else 14, font_family=FONTS.mono,
                   font_weight=500, anchor="middle", baseline="middle")
        b.text(cx, y + size + 28, truncate(e.name, 14), fill=THEME.text, font_size=NAME_FONT[n],
               font_family=FONTS.header, font_weight=600, anchor="middle")
        if not inline_hex:
            b.text(cx, y + size + 50, e.hex.upper(), fill=THEME.text_muted, font_size=12,
                   font_family=FONTS.mono, anchor="middle")
        b.text(cx, y + size + (52 if inline_hex else 70), e.category, fill=THEME.text_muted,
               font_size=14 if n <= 2 else 12, font_family=FONTS.primary, anchor="middle")

    noun = "Dye" if n == 1 else "Dyes"
    return card(b, tool_name=TOOL_NAME, subtitle=f"{n} {noun} Compared")


def comparison_fallback() -> LayoutPlan:
    c = CANVAS
    b = content(c)
    mid = headline(b, "Compare Dyes Side-by-Side", "Select up to 4 dyes to compare colors and details")

    size, gap = 80, 30
    n = len(FALLBACK_EXAMPLES)
    x0 = (c.width - (n * size + (n - 1) * gap)) / 2
    y = mid + 90
    for i, (hex_color, name) in enumerate(FALLBACK_EXAMPLES):
        x = x0 + i * (size + gap)
        b.rect(x, y, size, size, hex_color, rx=8)
        b.text(x + size / 2, y + size + 20, name, fill=THEME.text_muted, font_size=12,
               font_family=FONTS.primary, anchor="middle")

    return card(b, tool_name=TOOL_NAME)


__all__ = ["SIZES", "comparison_card", "comparison_fallback"]
