# colorspace.py – hex/RGB primitives, Lab/Oklab conversion and perceptual distance

from __future__ import annotations

import math
import string
from functools import lru_cache
from typing import Literal

from coloraide import Color

Hex = str
RGB = tuple[int, int, int]
Lab = tuple[float, float, float]
Metric = Literal["oklab", "ciede2000", "euclidean"]

METRICS: tuple[Metric, ...] = ("oklab", "ciede2000", "euclidean")

# Oklab distances are reported on a 0..100-ish scale so they read like ΔE.
OKLAB_SCALE = 100.0

# Overlay text flips to dark above this luminance (kept exact for visual parity).
CONTRAST_THRESHOLD = 0.179


class InvalidHexError(ValueError):
    """Raised when a string is not a 6-digit hex color."""


def normalize_hex(value: str) -> Hex:
    """Normalize to '#RRGGBB'; accept exactly 6 hex digits with optional '#'."""
    raw = (value or "").strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise InvalidHexError(f"invalid hex color: {value!r}")
    return "#" + raw.upper()


def is_valid_hex(value: str) -> bool:
    try:
        normalize_hex(value)
    except InvalidHexError:
        return False
    return True


def round_half_up(x: float) -> int:
    # Python's round() is half-to-even; channel math always rounds .5 up.
    return int(math.floor(x + 0.5))


def hex_to_rgb(value: str) -> RGB:
    h = normalize_hex(value)
    return int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)


def rgb_to_hex(r: float, g: float, b: float) -> Hex:
    """Clamp to [0, 255], round half-up and encode as lowercase '#rrggbb'."""
    u8 = [max(0, min(255, round_half_up(c))) for c in (r, g, b)]
    return f"#{u8[0]:02x}{u8[1]:02x}{u8[2]:02x}"


@lru_cache(maxsize=8192)
def _convert(h: Hex, space: str) -> Lab:
    L, a, b = Color(h).convert(space).coords()[:3]
    return float(L), float(a), float(b)


def hex_to_lab(value: str) -> Lab:
    """CIE Lab (D65). Used for hue angles."""
    return _convert(normalize_hex(value), "lab-d65")


def hex_to_oklab(value: str) -> Lab:
    """Oklab. Used for the default perceptual distance."""
    return _convert(normalize_hex(value), "oklab")


def hue_angle(value: str) -> float:
    """Hue angle in degrees, [0, 360), taken from atan2(b, a) in CIE Lab."""
    _, a, b = hex_to_lab(value)
    return math.degrees(math.atan2(b, a)) % 360.0


def hue_difference(h1: float, h2: float) -> float:
    d = abs((h1 % 360.0) - (h2 % 360.0))
    return 360.0 - d if d > 180.0 else d


def perceptual_distance(a: str, b: str, metric: Metric = "oklab") -> float:
    """
    Distance between two colors; symmetric and zero only for equal colors.
      oklab      – Euclidean distance in Oklab, scaled by OKLAB_SCALE
      ciede2000  – CIEDE2000 ΔE (coloraide)
      euclidean  – plain Euclidean distance in 8-bit RGB
    """
    ha, hb = normalize_hex(a), normalize_hex(b)
    if ha == hb:
        return 0.0
    if metric == "oklab":
        return math.dist(hex_to_oklab(ha), hex_to_oklab(hb)) * OKLAB_SCALE
    if metric == "ciede2000":
        # CIEDE2000 is not strictly symmetric; order the pair so that it is.
        lo, hi = sorted((ha, hb))
        return float(Color(lo).delta_e(Color(hi), method="2000"))
    if metric == "euclidean":
        return math.dist(hex_to_rgb(ha), hex_to_rgb(hb))
    raise ValueError(f"unknown metric '{metric}'")


def relative_luminance(value: str) -> float:
    def lin(c: int) -> float:
        s = c / 255.0
        return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(value)
    return 0.2126 * lin(r) + 0.7152 * lin(g) + 0.0722 * lin(b)


def contrast_text_color(background: str) -> Hex:
    return "#000000" if relative_luminance(background) > CONTRAST_THRESHOLD else "#ffffff"


__all__ = [
    "CONTRAST_THRESHOLD",
    "InvalidHexError",
    "METRICS",
    "Metric",
    "contrast_text_color",
    "hex_to_lab",
    "hex_to_oklab",
    "hex_to_rgb",
    "hue_angle",
    "hue_difference",
    "is_valid_hex",
    "normalize_hex",
    "perceptual_distance",
    "relative_luminance",
    "rgb_to_hex",
    "round_half_up",
]
