# vision.py – color vision deficiency simulation
#   - fixed 3×3 matrices on gamma-encoded 8-bit RGB (Brettel/Viénot/Mollon-style
#     approximation, values kept verbatim for visual consistency)
#   - output clipped to [0, 255] and rounded half-up

from __future__ import annotations

from typing import Iterable, Literal, Mapping

import numpy as np

from .colorspace import Hex, hex_to_rgb, normalize_hex

DeficiencyType = Literal[
    "normal", "protanopia", "deuteranopia", "tritanopia", "achromatopsia"
]

VISION_MATRICES: Mapping[str, np.ndarray] = {
    "normal": np.eye(3),
    "protanopia": np.array(
        [
            [0.567, 0.433, 0.0],
            [0.558, 0.442, 0.0],
            [0.0, 0.242, 0.758],
        ]
    ),
    "deuteranopia": np.array(
        [
            [0.625, 0.375, 0.0],
            [0.7, 0.3, 0.0],
            [0.0, 0.3, 0.7],
        ]
    ),
    "tritanopia": np.array(
        [
            [0.95, 0.05, 0.0],
            [0.0, 0.433, 0.567],
            [0.0, 0.475, 0.525],
        ]
    ),
    # luma weights replicated on every output channel
    "achromatopsia": np.array([[0.299, 0.587, 0.114]] * 3),
}

VISION_NAMES: Mapping[str, str] = {
    "normal": "Normal Vision",
    "protanopia": "Protanopia",
    "deuteranopia": "Deuteranopia",
    "tritanopia": "Tritanopia",
    "achromatopsia": "Achromatopsia",
}

VISION_DESCRIPTIONS: Mapping[str, str] = {
    "normal": "Full color vision",
    "protanopia": "Red-blind (no red cones)",
    "deuteranopia": "Green-blind (no green cones)",
    "tritanopia": "Blue-blind (no blue cones)",
    "achromatopsia": "Complete color blindness",
}


def _matrix(deficiency: str) -> np.ndarray:
    try:
        return VISION_MATRICES[deficiency]
    except KeyError:
        raise ValueError(f"unknown deficiency '{deficiency}'") from None


def _to_hex(u8: np.ndarray) -> Hex:
    return f"#{int(u8[0]):02X}{int(u8[1]):02X}{int(u8[2]):02X}"


def simulate_many(hexes: Iterable[str], deficiency: str) -> list[Hex]:
    """Simulate a batch of colors; 'normal' returns them normalized, untouched."""
    norm = [normalize_hex(h) for h in hexes]
    m = _matrix(deficiency)
    if deficiency == "normal" or not norm:
        return norm
    rgb = np.array([hex_to_rgb(h) for h in norm], dtype=np.float64)  # N×3
    out = np.clip(rgb @ m.T, 0.0, 255.0)
    u8 = np.floor(out + 0.5).astype(np.int64)
    return [_to_hex(row) for row in u8]


def simulate(hex_color: str, deficiency: str) -> Hex:
    return simulate_many([hex_color], deficiency)[0]


__all__ = [
    "DeficiencyType",
    "VISION_DESCRIPTIONS",
    "VISION_MATRICES",
    "VISION_NAMES",
    "simulate",
    "simulate_many",
]
