from swatchcard.colorspace import hue_angle, hue_difference, perceptual_distance
from swatchcard.harmony import HUE_OFFSETS, generate_harmony, target_hues
from swatchcard.matching import find_closest
from swatchcard.palette import PaletteEntry, PaletteIndex


def _entries(*pairs):
    return tuple(
        PaletteEntry(i, 1000 + i, name, "Test", h) for i, (name, h) in enumerate(pairs, start=1)
    )


MUD = ("Mud Green", "#585230")
CANDIDATES = (
    ("Red", "#FF0000"),
    ("Blue", "#0000FF"),
    ("Green", "#00FF00"),
    ("Purple", "#800080"),
    ("Cyan", "#00FFFF"),
)


def test_complementary_single_match():
    palette = PaletteIndex(_entries(MUD, *CANDIDATES))
    base = palette.get_by_id(1)
    matches = generate_harmony(palette, base, "complementary")
    assert len(matches) == 1

    target = (hue_angle(base.hex) + 180.0) % 360.0
    best = min(palette.entries[1:], key=lambda e: hue_difference(target, hue_angle(e.hex)))
    assert matches[0].entry == best
    assert matches[0].entry.name == "Blue"
    assert matches[0].distance == perceptual_distance(base.hex, best.hex)


def test_target_hues():
    assert target_hues(10.0, "complementary") == [190.0]
    assert target_hues(10.0, "triadic") == [130.0, 250.0]
    assert target_hues(10.0, "analogous") == [340.0, 40.0]
    assert target_hues(10.0, "no-such-scheme") == target_hues(10.0, "complementary")


def test_results_are_distinct_and_bounded():
    palette = PaletteIndex.bundled()
    base = palette.get_by_external_id(5738)
    for scheme in HUE_OFFSETS:
        matches = generate_harmony(palette, base, scheme)
        ids = [m.entry.id for m in matches]
        assert len(ids) == len(set(ids))
        assert base.id not in ids
        assert len(matches) == min(len(HUE_OFFSETS[scheme]), 4)


def test_monochromatic_is_nearest_without_base():
    palette = PaletteIndex.bundled()
    base = palette.get_by_external_id(5771)
    matches = generate_harmony(palette, base, "monochromatic")
    assert len(matches) == 4
    assert base.id not in {m.entry.id for m in matches}
    assert matches == find_closest(palette, base.hex, limit=4, exclude_ids={base.id})
    assert generate_harmony(palette, base, "shades") == matches


def test_ties_go_to_first_in_palette_order():
    palette = PaletteIndex(_entries(("Red", "#FF0000"), ("Cyan A", "#00FFFF"), ("Cyan B", "#00FFFF")))
    matches = generate_harmony(palette, palette.get_by_id(1), "complementary")
    assert [m.entry.name for m in matches] == ["Cyan A"]


def test_lone_base_has_no_matches():
    palette = PaletteIndex(_entries(MUD))
    assert generate_harmony(palette, palette.get_by_id(1), "tetradic") == []
