# harmony.py – hue-rotated palette matches for a base entry

from __future__ import annotations

import math
from typing import Literal, Mapping

from .colorspace import Metric, hue_angle, hue_difference, perceptual_distance
from .matching import MatchResult, find_closest
from .palette import PaletteEntry, PaletteIndex

HarmonyScheme = Literal[
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "tetradic",
    "square",
    "monochromatic",
    "compound",
    "shades",
]

# degrees added to the base hue, in result order
HUE_OFFSETS: Mapping[str, tuple[float, ...]] = {
    "complementary": (180.0,),
    "analogous": (-30.0, 30.0),
    "triadic": (120.0, -120.0),
    "split-complementary": (150.0, -150.0),
    "tetradic": (60.0, 180.0, 240.0),
    "square": (90.0, 180.0, 270.0),
    "compound": (30.0, 150.0, -150.0, -30.0),
}

# these ignore hue rotation and look for the nearest colors instead
LIGHTNESS_SCHEMES = frozenset({"monochromatic", "shades"})

HARMONY_NAMES: Mapping[str, str] = {
    "complementary": "Complementary",
    "analogous": "Analogous",
    "triadic": "Triadic",
    "split-complementary": "Split-Complementary",
    "tetradic": "Tetradic",
    "square": "Square",
    "monochromatic": "Monochromatic",
    "compound": "Compound",
    "shades": "Shades",
}

MAX_MATCHES = 4


def harmony_name(scheme: str) -> str:
    return HARMONY_NAMES.get(scheme, scheme)


def target_hues(base_hue: float, scheme: str) -> list[float]:
    """Target hues in [0, 360); unknown schemes behave as complementary."""
    offsets = HUE_OFFSETS.get(scheme, HUE_OFFSETS["complementary"])
    return [(base_hue + off) % 360.0 for off in offsets]


def generate_harmony(
    palette: PaletteIndex,
    base: PaletteEntry,
    scheme: str,
    *,
    metric: Metric = "oklab",
) -> list[MatchResult]:
    """
    Palette entries forming `scheme` with `base`, at most four.

    For each target hue the entry with the smallest circular hue difference
    wins (first one in palette order on ties). The base entry and entries
    already chosen are skipped. The reported distance is the perceptual
    distance to the base, not the hue difference.
    """
    if scheme in LIGHTNESS_SCHEMES:
        return find_closest(
            palette, base.hex, limit=MAX_MATCHES, exclude_ids={base.id}, metric=metric
        )

    candidates = [(e, hue_angle(e.hex)) for e in palette.entries if e.id != base.id]
    chosen: list[MatchResult] = []
    taken: set[int] = set()

    for target in target_hues(hue_angle(base.hex), scheme):
        best: PaletteEntry | None = None
        best_diff = math.inf
        for entry, hue in candidates:
            if entry.id in taken:
                continue
            diff = hue_difference(target, hue)
            if diff < best_diff:
                best, best_diff = entry, diff
        if best is not None:
            taken.add(best.id)
            chosen.append(MatchResult(best, perceptual_distance(base.hex, best.hex, metric)))

    return chosen[:MAX_MATCHES]


__all__ = [
    "HARMONY_NAMES",
    "HUE_OFFSETS",
    "HarmonyScheme",
    "generate_harmony",
    "harmony_name",
    "target_hues",
]
