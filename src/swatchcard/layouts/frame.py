# frame.py – canvas geometry, theme and the header/footer card shared by every tool

from __future__ import annotations

from dataclasses import dataclass

from ..plan import LayoutPlan, PlanBuilder


@dataclass(frozen=True)
class Canvas:
    width: int = 1200
    height: int = 630
    header_height: int = 60
    footer_height: int = 50
    padding: int = 40
    # breathing room between the bands and the content region
    content_inset: int = 20

    @property
    def content_top(self) -> int:
        return self.header_height + self.content_inset

    @property
    def content_bottom(self) -> int:
        return self.height - self.footer_height - self.content_inset

    @property
    def content_height(self) -> int:
        return self.content_bottom - self.content_top

    @property
    def content_width(self) -> int:
        return self.width - 2 * self.padding

    @property
    def center_x(self) -> float:
        return self.width / 2


@dataclass(frozen=True)
class Theme:
    background: str = "#1a1a2e"
    background_light: str = "#2d2d3d"
    background_card: str = "rgba(45, 45, 61, 0.8)"
    text: str = "#ffffff"
    text_muted: str = "#909090"
    text_dim: str = "#666666"
    accent: str = "#6366f1"
    border: str = "#404050"
    success: str = "#22c55e"
    warning: str = "#f59e0b"
    error: str = "#ef4444"


@dataclass(frozen=True)
class Fonts:
    header: str = "Space Grotesk"
    primary: str = "Onest"
    mono: str = "Habibi"


@dataclass(frozen=True)
class Frame:
    brand: str = "✦ XIV DYE TOOLS"
    footer: str = "🎨 xivdyetools.app"


CANVAS = Canvas()
THEME = Theme()
FONTS = Fonts()
FRAME = Frame()

# (success below, warning below) – palette-distance scale for direct matches
MATCH_TIERS = (3.0, 6.0)
# coarser scale for harmony and mix results
BLEND_TIERS = (5.0, 10.0)


def delta_color(distance: float, tiers: tuple[float, float]) -> str:
    good, fair = tiers
    if distance < good:
        return THEME.success
    if distance < fair:
        return THEME.warning
    return THEME.error


def delta_label(distance: float) -> str:
    return f"Δ{distance:.1f}"


def truncate(name: str, limit: int, keep: int | None = None) -> str:
    """Names longer than `limit` keep their first `keep` chars (limit-2 by default) plus '..'."""
    if len(name) <= limit:
        return name
    return name[: limit - 2 if keep is None else keep] + ".."


def content(canvas: Canvas = CANVAS) -> PlanBuilder:
    """Builder for a tool's content region; hand it to card() when done."""
    return PlanBuilder(canvas.width, canvas.height, THEME.background)


def headline(b: PlanBuilder, title: str, tagline: str, *, lift: float = 20, canvas: Canvas = CANVAS) -> float:
    """Centered title + tagline used by fallback cards. Returns the vertical middle."""
    mid = canvas.content_top + canvas.content_height / 2
    b.text(canvas.center_x, mid - lift, title, fill=THEME.text, font_size=32,
           font_family=FONTS.header, font_weight=600, anchor="middle")
    b.text(canvas.center_x, mid - lift + 50, tagline, fill=THEME.text_muted, font_size=18,
           font_family=FONTS.primary, anchor="middle")
    return mid


def card(
    body: PlanBuilder,
    *,
    tool_name: str,
    subtitle: str | None = None,
    algorithm: str | None = None,
    footer_text: str | None = None,
    canvas: Canvas = CANVAS,
    frame: Frame = FRAME,
) -> LayoutPlan:
    """Wrap tool content with background, header band and footer band."""
    w, h = canvas.width, canvas.height
    b = PlanBuilder(w, h, THEME.background)

    header_fill = b.gradient("headerGradient", [(0, "#1a1a2e"), (100, "#16213e")])
    bg_fill = b.gradient(
        "bgGradient",
        [(0, "#1a1a2e"), (50, "#16213e"), (100, "#1a1a2e")],
        x1="0%", y1="0%", x2="100%", y2="100%",
    )
    b.rect(0, 0, w, h, bg_fill)

    hh = canvas.header_height
    b.rect(0, 0, w, hh, header_fill, opacity=0.9)
    b.rect(0, hh - 1, w, 1, THEME.border)
    b.text(canvas.padding, 38, frame.brand, fill=THEME.text, font_size=18,
           font_family=FONTS.header, font_weight=600, baseline="middle")
    b.text(w / 2, 38, tool_name.upper(), fill=THEME.text, font_size=22,
           font_family=FONTS.header, font_weight=700, anchor="middle", baseline="middle")
    if subtitle:
        b.text(w - canvas.padding, 38, subtitle.upper(), fill=THEME.accent, font_size=16,
               font_family=FONTS.header, font_weight=500, anchor="end", baseline="middle")

    b.extend(body)

    fy = h - canvas.footer_height
    b.rect(0, fy, w, canvas.footer_height, THEME.background, opacity=0.9)
    b.rect(0, fy, w, 1, THEME.border)
    b.text(canvas.padding, fy + 30, footer_text or frame.footer, fill=THEME.text_muted,
           font_size=16, font_family=FONTS.primary, baseline="middle")
    if algorithm:
        b.text(w - canvas.padding, fy + 30, f"Algorithm: {algorithm.upper()}",
               fill=THEME.text_muted, font_size=14, font_family=FONTS.primary,
               anchor="end", baseline="middle")
    return b.build()


__all__ = [
    "BLEND_TIERS",
    "CANVAS",
    "Canvas",
    "FONTS",
    "FRAME",
    "Fonts",
    "Frame",
    "MATCH_TIERS",
    "THEME",
    "Theme",
    "card",
    "content",
    "delta_color",
    "delta_label",
    "headline",
    "truncate",
]
