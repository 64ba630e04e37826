# matching.py – nearest palette entries under a perceptual metric

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .colorspace import OKLAB_SCALE, Metric, hex_to_oklab, normalize_hex, perceptual_distance
from .palette import PaletteEntry, PaletteIndex


@dataclass(frozen=True)
class MatchResult:
    entry: PaletteEntry
    distance: float


def _distances(palette: PaletteIndex, target: str, metric: Metric) -> np.ndarray:
    if metric == "oklab":
        t = np.asarray(hex_to_oklab(target), dtype=np.float64)
        d = np.linalg.norm(palette.oklab - t[None, :], axis=1) * OKLAB_SCALE
        # exact hits are exactly zero, matching perceptual_distance()
        same = np.array([e.hex == target for e in palette.entries], dtype=bool)
        d[same] = 0.0
        return d
    return np.array(
        [perceptual_distance(target, e.hex, metric) for e in palette.entries],
        dtype=np.float64,
    )


def find_closest(
    palette: PaletteIndex,
    target_hex: str,
    *,
    limit: int = 5,
    exclude_ids: Iterable[int] = (),
    metric: Metric = "oklab",
) -> list[MatchResult]:
    """
    The `limit` palette entries closest to `target_hex`, nearest first.

    Ties keep palette order. Entries whose `id` is in `exclude_ids` are
    skipped; an empty result is a valid "no match" answer.
    """
    target = normalize_hex(target_hex)
    limit = max(1, int(limit))
    excluded = set(exclude_ids)
    if not palette.entries:
        return []

    dist = _distances(palette, target, metric)
    keep = np.array([e.id not in excluded for e in palette.entries], dtype=bool)
    candidates = np.flatnonzero(keep)
    if candidates.size == 0:
        return []

    order = candidates[np.argsort(dist[candidates], kind="stable")][:limit]
    return [MatchResult(palette.entries[i], float(dist[i])) for i in order]


def closest(
    palette: PaletteIndex,
    target_hex: str,
    *,
    exclude_ids: Iterable[int] = (),
    metric: Metric = "oklab",
) -> MatchResult | None:
    found = find_closest(palette, target_hex, limit=1, exclude_ids=exclude_ids, metric=metric)
    return found[0] if found else None


__all__ = ["MatchResult", "closest", "find_closest"]
