import asyncio

from swatchcard.character_colors import (
    SHARED_CATEGORIES,
    SUBRACES,
    CharacterColorIndex,
    StaticCharacterColorSource,
    format_subrace,
    grid_position,
    lookup_character_color,
)


def _source():
    return StaticCharacterColorSource(
        shared={
            "eyeColors": ["#111111", "#222222", "#333333"],
            "lipColorsDark": ["#440000"] * 9 + ["#AA0000"],
        },
        hair={
            ("Wildwood", "Female"): ["#222222", "#555555", "#666666"],
            ("SeekerOfTheSun", "Male"): ["#777777"] * 17 + ["#888888"],
        },
        skin={
            ("Wildwood", "Female"): ["#555555", "#999999"],
        },
    )


def _index():
    return asyncio.run(CharacterColorIndex.build(_source()))


def test_grid_position():
    assert grid_position(0) == (1, 1)
    assert grid_position(7) == (1, 8)
    assert grid_position(8) == (2, 1)
    assert grid_position(17) == (3, 2)


def test_format_subrace():
    assert format_subrace("SeekerOfTheSun") == "Seeker of the Sun"
    assert format_subrace("KeeperOfTheMoon") == "Keeper of the Moon"
    assert format_subrace("TheLost") == "The Lost"
    assert format_subrace("Raen") == "Raen"


def test_shared_lookup():
    ctx = _index().find_by_hex("#aa0000")
    assert ctx.category_name == "Lip Colors (Dark)"
    assert ctx.full_name == "Lip Colors (Dark)"
    assert (ctx.index, ctx.row, ctx.col) == (9, 2, 2)
    assert not ctx.is_race_specific


def test_shared_sheets_take_priority():
    ctx = _index().find_by_hex("222222")
    assert ctx.category_name == "Eye Colors"
    assert ctx.index == 1


def test_hair_before_skin():
    ctx = _index().find_by_hex("#555555")
    assert ctx.category_name == "Hair Colors"
    assert ctx.is_race_specific
    assert ctx.subrace is None and ctx.gender is None


def test_missing_color():
    assert _index().find_by_hex("#FEFEFE") is None


def test_from_race_sheet():
    index = _index()
    ctx = index.from_sheet("#888888", "hairColors", "SeekerOfTheSun", "Male")
    assert ctx.full_name == "Male Seeker of the Sun Hair Colors"
    assert (ctx.row, ctx.col) == (3, 2)
    assert ctx.subrace == "SeekerOfTheSun"
    assert ctx.gender == "Male"

    skin = index.from_sheet("#555555", "skinColors", "Wildwood", "Female")
    assert skin.full_name == "Female Wildwood Skin Colors"
    assert skin.index == 0

    assert index.from_sheet("#888888", "hairColors", "Wildwood", "Female") is None


def test_race_sheet_without_race_falls_back_to_hex():
    index = _index()
    assert index.from_sheet("#888888", "hairColors") == index.find_by_hex("#888888")
    assert index.lookup("#888888", "hairColors", "Raen") == index.find_by_hex("#888888")


def test_from_shared_sheet():
    index = _index()
    assert index.from_sheet("#333333", "eyeColors").category_name == "Eye Colors"
    assert index.from_sheet("#333333", "tattooColors") is None
    assert index.lookup("#333333", "eyeColors") == index.from_sheet("#333333", "eyeColors")


def test_build_queries_every_sheet():
    calls = []

    class Recording(StaticCharacterColorSource):
        async def shared_colors(self, category):
            calls.append(("shared", category))
            return await super().shared_colors(category)

        async def hair_colors(self, subrace, gender):
            calls.append(("hair", subrace, gender))
            return await super().hair_colors(subrace, gender)

        async def skin_colors(self, subrace, gender):
            calls.append(("skin", subrace, gender))
            return await super().skin_colors(subrace, gender)

    asyncio.run(CharacterColorIndex.build(Recording()))
    assert len(calls) == len(SHARED_CATEGORIES) + len(SUBRACES) * 2 * 2


def test_one_off_lookup():
    source = _source()
    ctx = asyncio.run(lookup_character_color(source, "#666666", "hairColors", "Wildwood", "Female"))
    assert ctx.full_name == "Female Wildwood Hair Colors"
    assert ctx.index == 2

    shared = asyncio.run(lookup_character_color(source, "#111111", "eyeColors"))
    assert shared.category_name == "Eye Colors"

    anywhere = asyncio.run(lookup_character_color(source, "#999999"))
    assert anywhere.category_name == "Skin Colors"
