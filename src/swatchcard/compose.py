# compose.py – per-tool parameter contracts and the compose_layout() entry point
#
# Lookups that fail (unknown ids, malformed hex) never raise from here: each
# tool answers them with its designed fallback card. Out-of-range numbers are
# clamped rather than rejected.

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Literal, Mapping, Sequence, Union

from .blend import clamp_steps, gradient_steps, mix2, mix3
from .character_colors import CharacterColorIndex, Gender
from .colorspace import METRICS, InvalidHexError, Metric, normalize_hex
from .harmony import generate_harmony
from .layouts.accessibility import accessibility_card, accessibility_fallback
from .layouts.comparison import comparison_card, comparison_fallback
from .layouts.gradient import gradient_card, gradient_fallback
from .layouts.harmony import harmony_card, harmony_fallback
from .layouts.mixer import mix2_card, mix3_card, mixer_fallback
from .layouts.swatch import swatch_card, swatch_fallback
from .matching import closest, find_closest
from .palette import PaletteIndex
from .plan import LayoutPlan
from .vision import VISION_MATRICES

log = logging.getLogger(__name__)

ToolKind = Literal["harmony", "gradient", "mixer", "swatch", "comparison", "accessibility"]

MAX_SWATCH_MATCHES = 4
MAX_COMPARED = 4
DEFAULT_DEFICIENCY = "protanopia"


def _metric(value: str) -> Metric:
    m = (value or "oklab").strip().lower()
    return m if m in METRICS else "oklab"  # type: ignore[return-value]


@dataclass(frozen=True)
class HarmonyParams:
    base_entry_id: int
    scheme: str = "complementary"
    algorithm: str = "oklab"

    def normalized(self) -> "HarmonyParams":
        return replace(self, scheme=(self.scheme or "complementary").lower(),
                       algorithm=_metric(self.algorithm))


@dataclass(frozen=True)
class GradientParams:
    start_entry_id: int
    end_entry_id: int
    step_count: int = 5
    algorithm: str = "oklab"

    def normalized(self) -> "GradientParams":
        return replace(self, step_count=clamp_steps(self.step_count), algorithm=_metric(self.algorithm))


@dataclass(frozen=True)
class MixerParams:
    """Two-way blend at `ratio_percent` of A, or an equal three-way blend when C is set."""

    entry_a_id: int
    entry_b_id: int
    ratio_percent: int = 50
    entry_c_id: int | None = None
    algorithm: str = "oklab"

    def normalized(self) -> "MixerParams":
        ratio = max(0, min(100, int(self.ratio_percent)))
        return replace(self, ratio_percent=ratio, algorithm=_metric(self.algorithm))


@dataclass(frozen=True)
class SwatchParams:
    target_hex: str
    limit: int = 5
    sheet: str | None = None
    race: str | None = None
    gender: Gender | None = None
    algorithm: str = "oklab"

    def normalized(self) -> "SwatchParams":
        limit = max(1, min(int(self.limit), MAX_SWATCH_MATCHES))
        return replace(self, limit=limit, algorithm=_metric(self.algorithm))


@dataclass(frozen=True)
class ComparisonParams:
    entry_ids: Sequence[int] = ()

    def normalized(self) -> "ComparisonParams":
        return replace(self, entry_ids=tuple(self.entry_ids))


@dataclass(frozen=True)
class AccessibilityParams:
    entry_ids: Sequence[int] = ()
    deficiency: str = DEFAULT_DEFICIENCY

    def normalized(self) -> "AccessibilityParams":
        d = (self.deficiency or DEFAULT_DEFICIENCY).lower()
        return replace(self, entry_ids=tuple(self.entry_ids),
                       deficiency=d if d in VISION_MATRICES else DEFAULT_DEFICIENCY)


ToolParams = Union[
    HarmonyParams, GradientParams, MixerParams, SwatchParams, ComparisonParams, AccessibilityParams
]


def compose_harmony(palette: PaletteIndex, params: HarmonyParams) -> LayoutPlan:
    p = params.normalized()
    base = palette.get_by_external_id(p.base_entry_id)
    if base is None:
        log.debug("Harmony base %s not found; using fallback card", p.base_entry_id)
        return harmony_fallback(p.scheme, algorithm=p.algorithm)
    matches = generate_harmony(palette, base, p.scheme, metric=p.algorithm)  # type: ignore[arg-type]
    return harmony_card(base, matches, p.scheme, algorithm=p.algorithm)


def compose_gradient(palette: PaletteIndex, params: GradientParams) -> LayoutPlan:
    p = params.normalized()
    start = palette.get_by_external_id(p.start_entry_id)
    end = palette.get_by_external_id(p.end_entry_id)
    if start is None or end is None:
        log.debug("Gradient endpoints %s/%s not found; using fallback card",
                  p.start_entry_id, p.end_entry_id)
        return gradient_fallback(p.step_count, algorithm=p.algorithm)
    steps = gradient_steps(palette, start.hex, end.hex, p.step_count, metric=p.algorithm)  # type: ignore[arg-type]
    return gradient_card(start, end, steps, algorithm=p.algorithm)


def compose_mixer(palette: PaletteIndex, params: MixerParams) -> LayoutPlan:
    p = params.normalized()
    a = palette.get_by_external_id(p.entry_a_id)
    b = palette.get_by_external_id(p.entry_b_id)
    c = palette.get_by_external_id(p.entry_c_id) if p.entry_c_id else None
    if a is None or b is None:
        log.debug("Mixer inputs %s/%s not found; using fallback card", p.entry_a_id, p.entry_b_id)
        return mixer_fallback(p.ratio_percent, three_way=c is not None, algorithm=p.algorithm)

    if c is not None:
        mixed = mix3(a.hex, b.hex, c.hex)
        match = closest(palette, mixed, metric=p.algorithm)  # type: ignore[arg-type]
        return mix3_card(a, b, c, mixed, match, algorithm=p.algorithm)

    if p.entry_c_id:
        log.debug("Third mixer input %s not found; mixing two", p.entry_c_id)
    mixed = mix2(a.hex, b.hex, p.ratio_percent)
    match = closest(palette, mixed, metric=p.algorithm)  # type: ignore[arg-type]
    return mix2_card(a, b, p.ratio_percent, mixed, match, algorithm=p.algorithm)


def compose_swatch(
    palette: PaletteIndex,
    params: SwatchParams,
    characters: CharacterColorIndex | None = None,
) -> LayoutPlan:
    p = params.normalized()
    try:
        target = normalize_hex(p.target_hex)
    except InvalidHexError:
        log.debug("Swatch color %r is not a hex color; using fallback card", p.target_hex)
        return swatch_fallback(algorithm=p.algorithm)

    matches = find_closest(palette, target, limit=p.limit, metric=p.algorithm)  # type: ignore[arg-type]
    context = characters.lookup(target, p.sheet, p.race, p.gender) if characters else None
    return swatch_card(target, matches, character=context, algorithm=p.algorithm)


def compose_comparison(palette: PaletteIndex, params: ComparisonParams) -> LayoutPlan:
    p = params.normalized()
    entries = palette.resolve_many(p.entry_ids)[:MAX_COMPARED]
    if not entries:
        log.debug("No comparison entries resolved from %s; using fallback card", p.entry_ids)
        return comparison_fallback()
    return comparison_card(entries)


def compose_accessibility(palette: PaletteIndex, params: AccessibilityParams) -> LayoutPlan:
    p = params.normalized()
    entries = palette.resolve_many(p.entry_ids)[:MAX_COMPARED]
    if not entries:
        log.debug("No accessibility entries resolved from %s; using fallback card", p.entry_ids)
        return accessibility_fallback(p.deficiency)
    return accessibility_card(entries, p.deficiency)


_COMPOSERS: Mapping[str, tuple[type, Callable[..., LayoutPlan]]] = {
    "harmony": (HarmonyParams, compose_harmony),
    "gradient": (GradientParams, compose_gradient),
    "mixer": (MixerParams, compose_mixer),
    "swatch": (SwatchParams, compose_swatch),
    "comparison": (ComparisonParams, compose_comparison),
    "accessibility": (AccessibilityParams, compose_accessibility),
}


def compose_layout(
    tool: ToolKind,
    params: ToolParams,
    palette: PaletteIndex,
    *,
    characters: CharacterColorIndex | None = None,
) -> LayoutPlan:
    """Build the card for `tool`; unresolvable input yields that tool's fallback card."""
    try:
        expected, compose = _COMPOSERS[tool]
    except KeyError:
        raise ValueError(f"unknown tool '{tool}'") from None
    if not isinstance(params, expected):
        raise TypeError(f"{tool} expects {expected.__name__}, got {type(params).__name__}")
    if tool == "swatch":
        return compose(palette, params, characters)
    return compose(palette, params)


__all__ = [
    "AccessibilityParams",
    "ComparisonParams",
    "GradientParams",
    "HarmonyParams",
    "MixerParams",
    "SwatchParams",
    "ToolKind",
    "ToolParams",
    "compose_accessibility",
    "compose_comparison",
    "compose_gradient",
    "compose_harmony",
    "compose_layout",
    "compose_mixer",
    "compose_swatch",
]


if __name__ == "__main__":
    from .svg import to_svg

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    demo = compose_layout("harmony", HarmonyParams(5771, "triadic"), PaletteIndex.bundled())
    print(to_svg(demo))
