# palette.py – read-only palette snapshot with id lookups

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

import numpy as np

from .colorspace import Hex, hex_to_oklab, normalize_hex

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteEntry:
    id: int
    external_id: int
    name: str
    category: str
    hex: Hex

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", normalize_hex(self.hex))

    @property
    def rgb(self) -> tuple[int, int, int]:
        h = self.hex
        return int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)


def _first(rec: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in rec:
            return rec[k]
    raise KeyError(f"record is missing one of {keys}: {dict(rec)!r}")


def entry_from_record(rec: Mapping[str, Any]) -> PaletteEntry:
    """Accepts {id, externalId, name, category, hexColor} and common aliases."""
    return PaletteEntry(
        id=int(_first(rec, "id")),
        external_id=int(_first(rec, "externalId", "external_id", "itemID")),
        name=str(_first(rec, "name")),
        category=str(_first(rec, "category")),
        hex=str(_first(rec, "hexColor", "hex")),
    )


@dataclass(frozen=True)
class PaletteIndex:
    """
    Immutable palette snapshot.

    Built once and passed explicitly to every operation that needs it.
    `id` and `external_id` must each be unique. Lookups by id return None
    for unknown ids, since stale or mistyped ids are ordinary input.
    """

    entries: tuple[PaletteEntry, ...]
    _by_id: dict[int, PaletteEntry] = field(init=False, repr=False, compare=False)
    _by_external: dict[int, PaletteEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        by_id: dict[int, PaletteEntry] = {}
        by_ext: dict[int, PaletteEntry] = {}
        for e in entries:
            if e.id in by_id:
                raise ValueError(f"duplicate palette id {e.id}")
            if e.external_id in by_ext:
                raise ValueError(f"duplicate palette external id {e.external_id}")
            by_id[e.id] = e
            by_ext[e.external_id] = e
        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(self, "_by_external", by_ext)

    # ---- constructors ----

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "PaletteIndex":
        index = cls(tuple(entry_from_record(r) for r in records))
        log.debug("Loaded palette with %d entries", len(index))
        return index

    @classmethod
    def from_json(cls, path: str | Path) -> "PaletteIndex":
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return cls.from_records(raw)

    @classmethod
    def bundled(cls) -> "PaletteIndex":
        from .palette_data import SAMPLE_DYES

        return cls.from_records(SAMPLE_DYES)

    # ---- lookups ----

    def all(self) -> tuple[PaletteEntry, ...]:
        return self.entries

    def get_by_id(self, entry_id: int) -> PaletteEntry | None:
        return self._by_id.get(entry_id)

    def get_by_external_id(self, external_id: int) -> PaletteEntry | None:
        return self._by_external.get(external_id)

    def resolve_many(self, external_ids: Iterable[int]) -> list[PaletteEntry]:
        """Resolve ids in order, silently dropping the unknown ones."""
        out: list[PaletteEntry] = []
        for ext in external_ids:
            e = self.get_by_external_id(ext)
            if e is not None:
                out.append(e)
        return out

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    @cached_property
    def oklab(self) -> np.ndarray:
        """(N, 3) Oklab coordinates in palette order."""
        if not self.entries:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([hex_to_oklab(e.hex) for e in self.entries], dtype=np.float64)


__all__ = ["PaletteEntry", "PaletteIndex", "entry_from_record"]
