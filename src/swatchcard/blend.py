# blend.py – channel-linear RGB mixing and gradients resolved against the palette

from __future__ import annotations

from dataclasses import dataclass

from .colorspace import Hex, Metric, hex_to_rgb, normalize_hex, rgb_to_hex
from .matching import MatchResult, closest
from .palette import PaletteIndex

MIN_STEPS = 2
MAX_STEPS = 512
# legibility cap used by the gradient card; never changes the computed steps
MAX_DRAWN_STEPS = 7


def _out(r: float, g: float, b: float) -> Hex:
    return rgb_to_hex(r, g, b).upper()


def clamp_ratio(ratio_percent: float) -> float:
    return max(0.0, min(100.0, float(ratio_percent)))


def clamp_steps(n: int) -> int:
    return max(MIN_STEPS, min(int(n), MAX_STEPS))


def mix2(hex_a: str, hex_b: str, ratio_percent: float) -> Hex:
    """`ratio_percent` of A blended with the rest of B, per channel."""
    t = clamp_ratio(ratio_percent) / 100.0
    a, b = hex_to_rgb(hex_a), hex_to_rgb(hex_b)
    return _out(*(ca * t + cb * (1.0 - t) for ca, cb in zip(a, b)))


def mix3(hex_a: str, hex_b: str, hex_c: str) -> Hex:
    a, b, c = hex_to_rgb(hex_a), hex_to_rgb(hex_b), hex_to_rgb(hex_c)
    return _out(*((ca + cb + cc) / 3.0 for ca, cb, cc in zip(a, b, c)))


def interpolate(start: str, end: str, t: float) -> Hex:
    if t <= 0.0:
        return normalize_hex(start)
    if t >= 1.0:
        return normalize_hex(end)
    a, b = hex_to_rgb(start), hex_to_rgb(end)
    return _out(*(ca + (cb - ca) * t for ca, cb in zip(a, b)))


@dataclass(frozen=True)
class GradientStep:
    hex: Hex
    match: MatchResult | None = None


def gradient_hexes(start: str, end: str, step_count: int) -> list[Hex]:
    n = clamp_steps(step_count)
    return [interpolate(start, end, i / (n - 1)) for i in range(n)]


def gradient_steps(
    palette: PaletteIndex,
    start: str,
    end: str,
    step_count: int,
    *,
    metric: Metric = "oklab",
) -> list[GradientStep]:
    """
    `step_count` evenly spaced colors from `start` to `end` inclusive.

    Each step carries its own nearest palette match (None when the palette
    is empty). The count is clamped to [MIN_STEPS, MAX_STEPS].
    """
    return [
        GradientStep(h, closest(palette, h, metric=metric))
        for h in gradient_hexes(start, end, step_count)
    ]


__all__ = [
    "GradientStep",
    "MAX_DRAWN_STEPS",
    "clamp_ratio",
    "clamp_steps",
    "gradient_hexes",
    "gradient_steps",
    "interpolate",
    "mix2",
    "mix3",
]
