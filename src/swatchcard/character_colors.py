# character_colors.py – where a color sits on the character-creator color sheets
#
# The sheets come from an external, asynchronous source. Lookups are exact hex
# matches; the position on the 8-column sheet grid is derived from the index.

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Protocol, Sequence

from .colorspace import Hex, normalize_hex

log = logging.getLogger(__name__)

Gender = Literal["Male", "Female"]

GRID_COLUMNS = 8

SHARED_CATEGORY_NAMES: Mapping[str, str] = {
    "eyeColors": "Eye Colors",
    "highlightColors": "Highlights",
    "lipColorsDark": "Lip Colors (Dark)",
    "lipColorsLight": "Lip Colors (Light)",
    "tattooColors": "Tattoo/Limbal",
    "facePaintColorsDark": "Face Paint (Dark)",
    "facePaintColorsLight": "Face Paint (Light)",
}
SHARED_CATEGORIES: tuple[str, ...] = tuple(SHARED_CATEGORY_NAMES)

RACE_SHEET_NAMES: Mapping[str, str] = {
    "hairColors": "Hair Colors",
    "skinColors": "Skin Colors",
}

SUBRACES: tuple[str, ...] = (
    "Midlander", "Highlander",
    "Wildwood", "Duskwight",
    "Plainsfolk", "Dunesfolk",
    "SeekerOfTheSun", "KeeperOfTheMoon",
    "SeaWolf", "Hellsguard",
    "Raen", "Xaela",
    "Rava", "Veena",
    "Helion", "TheLost",
)  # fmt: skip
GENDERS: tuple[Gender, ...] = ("Male", "Female")

_SUBRACE_DISPLAY = {
    "SeekerOfTheSun": "Seeker of the Sun",
    "KeeperOfTheMoon": "Keeper of the Moon",
    "SeaWolf": "Sea Wolf",
    "TheLost": "The Lost",
}


@dataclass(frozen=True)
class CharacterColor:
    hex: Hex
    index: int


@dataclass(frozen=True)
class CharacterColorContext:
    category_name: str
    full_name: str
    index: int
    row: int
    col: int
    is_race_specific: bool = False
    subrace: str | None = None
    gender: Gender | None = None


class CharacterColorSource(Protocol):
    async def shared_colors(self, category: str) -> Sequence[CharacterColor]: ...

    async def hair_colors(self, subrace: str, gender: Gender) -> Sequence[CharacterColor]: ...

    async def skin_colors(self, subrace: str, gender: Gender) -> Sequence[CharacterColor]: ...


class StaticCharacterColorSource:
    """In-memory source over plain {key: [hex, ...]} mappings (list position = index)."""

    def __init__(
        self,
        shared: Mapping[str, Sequence[str]] | None = None,
        hair: Mapping[tuple[str, str], Sequence[str]] | None = None,
        skin: Mapping[tuple[str, str], Sequence[str]] | None = None,
    ) -> None:
        self._shared = dict(shared or {})
        self._hair = dict(hair or {})
        self._skin = dict(skin or {})

    @staticmethod
    def _sheet(hexes: Sequence[str]) -> list[CharacterColor]:
        return [CharacterColor(normalize_hex(h), i) for i, h in enumerate(hexes)]

    async def shared_colors(self, category: str) -> Sequence[CharacterColor]:
        return self._sheet(self._shared.get(category, ()))

    async def hair_colors(self, subrace: str, gender: Gender) -> Sequence[CharacterColor]:
        return self._sheet(self._hair.get((subrace, gender), ()))

    async def skin_colors(self, subrace: str, gender: Gender) -> Sequence[CharacterColor]:
        return self._sheet(self._skin.get((subrace, gender), ()))


def grid_position(index: int) -> tuple[int, int]:
    """(row, col), both 1-based, on the 8-column sheet grid."""
    return index // GRID_COLUMNS + 1, index % GRID_COLUMNS + 1


def format_subrace(subrace: str) -> str:
    return _SUBRACE_DISPLAY.get(subrace, subrace)


def _find(colors: Sequence[CharacterColor], h: Hex) -> CharacterColor | None:
    for c in colors:
        if c.hex.upper() == h:
            return c
    return None


def _shared_context(category: str, found: CharacterColor) -> CharacterColorContext:
    name = SHARED_CATEGORY_NAMES.get(category, category)
    row, col = grid_position(found.index)
    return CharacterColorContext(name, name, found.index, row, col)


def _race_context(
    sheet: str, subrace: str | None, gender: Gender | None, found: CharacterColor
) -> CharacterColorContext:
    name = RACE_SHEET_NAMES[sheet]
    full = f"{gender} {format_subrace(subrace)} {name}" if subrace and gender else name
    row, col = grid_position(found.index)
    return CharacterColorContext(name, full, found.index, row, col, True, subrace, gender)


class CharacterColorIndex:
    """
    Reverse index over every sheet of a CharacterColorSource.

    Build it once with `await CharacterColorIndex.build(source)`; afterwards all
    lookups are synchronous. When a hex appears on several sheets, shared
    categories win over race-specific ones, and for each subrace/gender hair
    wins over skin.
    """

    def __init__(
        self,
        by_hex: Mapping[Hex, CharacterColorContext],
        sheets: Mapping[tuple[str, str | None, str | None], Sequence[CharacterColor]],
    ) -> None:
        self._by_hex = dict(by_hex)
        self._sheets = dict(sheets)

    @classmethod
    async def build(cls, source: CharacterColorSource) -> "CharacterColorIndex":
        keys: list[tuple[str, str | None, str | None]] = [(c, None, None) for c in SHARED_CATEGORIES]
        calls = [source.shared_colors(c) for c in SHARED_CATEGORIES]
        for subrace in SUBRACES:
            for gender in GENDERS:
                keys.append(("hairColors", subrace, gender))
                calls.append(source.hair_colors(subrace, gender))
                keys.append(("skinColors", subrace, gender))
                calls.append(source.skin_colors(subrace, gender))

        results = await asyncio.gather(*calls)
        sheets = dict(zip(keys, results))

        by_hex: dict[Hex, CharacterColorContext] = {}
        for (sheet, subrace, gender), colors in sheets.items():
            for c in colors:
                h = c.hex.upper()
                if h in by_hex:
                    continue
                if subrace is None:
                    by_hex[h] = _shared_context(sheet, c)
                else:
                    # hex-only lookups do not know which race sheet was meant
                    by_hex[h] = _race_context(sheet, None, None, c)
        log.info("Indexed %d character colors from %d sheets", len(by_hex), len(sheets))
        return cls(by_hex, sheets)

    def find_by_hex(self, hex_color: str) -> CharacterColorContext | None:
        return self._by_hex.get(normalize_hex(hex_color))

    def from_sheet(
        self,
        hex_color: str,
        sheet: str,
        subrace: str | None = None,
        gender: Gender | None = None,
    ) -> CharacterColorContext | None:
        h = normalize_hex(hex_color)
        if sheet in RACE_SHEET_NAMES:
            if not subrace or not gender:
                return self.find_by_hex(h)
            found = _find(self._sheets.get((sheet, subrace, gender), ()), h)
            return _race_context(sheet, subrace, gender, found) if found else None
        found = _find(self._sheets.get((sheet, None, None), ()), h)
        return _shared_context(sheet, found) if found else None

    def lookup(
        self,
        hex_color: str,
        sheet: str | None = None,
        subrace: str | None = None,
        gender: Gender | None = None,
    ) -> CharacterColorContext | None:
        if sheet:
            return self.from_sheet(hex_color, sheet, subrace, gender)
        return self.find_by_hex(hex_color)


async def lookup_character_color(
    source: CharacterColorSource,
    hex_color: str,
    sheet: str | None = None,
    race: str | None = None,
    gender: Gender | None = None,
) -> CharacterColorContext | None:
    """One-off lookup straight against the source, without keeping an index."""
    if sheet in RACE_SHEET_NAMES and race and gender:
        h = normalize_hex(hex_color)
        fetch = source.hair_colors if sheet == "hairColors" else source.skin_colors
        found = _find(await fetch(race, gender), h)
        return _race_context(sheet, race, gender, found) if found else None
    if sheet and sheet not in RACE_SHEET_NAMES:
        h = normalize_hex(hex_color)
        found = _find(await source.shared_colors(sheet), h)
        return _shared_context(sheet, found) if found else None
    index = await CharacterColorIndex.build(source)
    return index.find_by_hex(hex_color)


__all__ = [
    "CharacterColor",
    "CharacterColorContext",
    "CharacterColorIndex",
    "CharacterColorSource",
    "GENDERS",
    "SHARED_CATEGORIES",
    "SUBRACES",
    "StaticCharacterColorSource",
    "format_subrace",
    "grid_position",
    "lookup_character_color",
]
