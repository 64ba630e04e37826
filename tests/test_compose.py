import asyncio

import pytest

from swatchcard.character_colors import CharacterColorIndex, StaticCharacterColorSource
from swatchcard.compose import (
    AccessibilityParams,
    ComparisonParams,
    GradientParams,
    HarmonyParams,
    MixerParams,
    SwatchParams,
    compose_layout,
)
from swatchcard.palette import PaletteEntry, PaletteIndex
from swatchcard.plan import Circle, Rect, Text
from swatchcard.vision import simulate

BUNDLED = PaletteIndex.bundled()

MIXING = PaletteIndex((
    PaletteEntry(1, 1001, "White", "Neutral", "#FFFFFF"),
    PaletteEntry(2, 1002, "Black", "Neutral", "#000000"),
    PaletteEntry(3, 1003, "Middle Grey", "Neutral", "#808080"),
    PaletteEntry(4, 1004, "Red", "Reds", "#FF0000"),
))


def _squares(plan, size):
    return [e for e in plan.elements if isinstance(e, Rect) and e.width == size and e.height == size]


def _assert_on_canvas(plan):
    w, h = plan.width, plan.height
    for e in plan.elements:
        if isinstance(e, Rect):
            assert 0 <= e.x and e.x + e.width <= w, e
            assert 0 <= e.y and e.y + e.height <= h, e
        elif isinstance(e, Circle):
            assert 0 <= e.cx - e.r and e.cx + e.r <= w, e
            assert 0 <= e.cy - e.r and e.cy + e.r <= h, e
        elif isinstance(e, Text):
            assert 0 <= e.x <= w and 0 <= e.y <= h, e


def test_harmony_card():
    plan = compose_layout("harmony", HarmonyParams(5771, "triadic"), BUNDLED)
    texts = plan.texts()
    assert "HARMONY EXPLORER" in texts
    assert "TRIADIC" in texts
    assert "Mud Green" in texts
    assert "HARMONY MATCHES" in texts
    assert "Algorithm: OKLAB" in texts
    assert len(_squares(plan, 140)) == 2


def test_harmony_fallback():
    plan = compose_layout("harmony", HarmonyParams(1, "square"), BUNDLED)
    assert "Explore Color Harmonies" in plan.texts()
    assert "SQUARE" in plan.texts()
    assert len(plan.of_kind("circle")) == 6


def test_gradient_card_caps_drawn_steps():
    plan = compose_layout("gradient", GradientParams(5734, 5729, 10), BUNDLED)
    texts = plan.texts()
    assert "10 STEPS" in texts
    assert "START" in texts and "END" in texts
    assert "Soot Black → Snow White" in texts
    assert len(_squares(plan, 110)) == 7
    (bar,) = [g for g in plan.of_kind("gradient") if g.id == "gradientBar"]
    assert len(bar.stops) == 10
    assert bar.stops[0].offset == 0 and bar.stops[-1].offset == 100
    assert bar.stops[0].color == "#2B2923"
    assert bar.stops[-1].color == "#E4DFD0"


def test_gradient_step_count_clamped():
    plan = compose_layout("gradient", GradientParams(5734, 5729, 1), BUNDLED)
    assert "2 STEPS" in plan.texts()


def test_gradient_fallback():
    plan = compose_layout("gradient", GradientParams(5734, 424242), BUNDLED)
    assert "Create Color Gradients" in plan.texts()
    assert any(g.id == "exampleGradient" for g in plan.of_kind("gradient"))


def test_two_way_mix():
    plan = compose_layout("mixer", MixerParams(1001, 1002), MIXING)
    texts = plan.texts()
    assert "50/50 BLEND" in texts
    assert "RESULT" in texts
    assert "#808080" in texts
    assert "≈ Middle Grey" in texts
    assert "Δ0.0" in texts
    assert texts.count("+") == 1


def test_mix_ratio_clamped():
    plan = compose_layout("mixer", MixerParams(1001, 1002, ratio_percent=150), MIXING)
    assert "100/0 BLEND" in plan.texts()
    assert "#FFFFFF" in plan.texts()


def test_three_way_mix():
    plan = compose_layout("mixer", MixerParams(1001, 1002, entry_c_id=1004), MIXING)
    texts = plan.texts()
    assert "3-DYE BLEND" in texts
    assert "#AA5555" in texts
    assert texts.count("+") == 2


def test_missing_third_input_mixes_two():
    plan = compose_layout("mixer", MixerParams(1001, 1002, entry_c_id=999), MIXING)
    assert "50/50 BLEND" in plan.texts()


def test_mixer_fallback():
    plan = compose_layout("mixer", MixerParams(1001, 999), MIXING)
    assert "Mix Dye Colors" in plan.texts()


def test_swatch_card():
    plan = compose_layout("swatch", SwatchParams("ff0000", limit=10), MIXING)
    texts = plan.texts()
    assert "SWATCH MATCHER" in texts
    assert "#FF0000" in texts
    assert "TOP 4 MATCHES" in texts
    assert "#1" in texts
    assert "RGB(255, 0, 0)" in texts
    assert "FROM" not in texts


def test_swatch_with_character_context():
    source = StaticCharacterColorSource(
        shared={"eyeColors": ["#111111", "#FF0000"]},
        hair={("SeekerOfTheSun", "Male"): ["#888888"]},
    )
    characters = asyncio.run(CharacterColorIndex.build(source))

    plan = compose_layout("swatch", SwatchParams("#FF0000", limit=2), MIXING, characters=characters)
    texts = plan.texts()
    assert "FROM" in texts
    assert "Eye Colors" in texts
    assert "Row 1, Col 2" in texts

    params = SwatchParams("#888888", sheet="hairColors", race="SeekerOfTheSun", gender="Male")
    plan = compose_layout("swatch", params, MIXING, characters=characters)
    assert "Male Seeker of the Sun Hair Colors" in plan.texts()


def test_swatch_invalid_hex_falls_back():
    plan = compose_layout("swatch", SwatchParams("not-a-color"), MIXING)
    assert "Match Any Color" in plan.texts()


def test_comparison_fallback_examples():
    plan = compose_layout("comparison", ComparisonParams(()), BUNDLED)
    assert "Compare Dyes Side-by-Side" in plan.texts()
    swatches = _squares(plan, 80)
    assert [r.fill for r in swatches] == ["#F2F2F2", "#8A2A37", "#252A42", "#C8B374"]

    unknown = compose_layout("comparison", ComparisonParams([1, 2, 3]), BUNDLED)
    assert "Compare Dyes Side-by-Side" in unknown.texts()


def test_comparison_layout():
    plan = compose_layout("comparison", ComparisonParams([5729, 5734, 5771]), BUNDLED)
    assert "3 DYES COMPARED" in plan.texts()
    swatches = _squares(plan, 150)
    assert [r.x for r in swatches] == [340, 525, 710]
    assert [r.fill for r in swatches] == ["#E4DFD0", "#2B2923", "#585230"]


def test_comparison_count():
    one = compose_layout("comparison", ComparisonParams([5729]), BUNDLED)
    assert "1 DYE COMPARED" in one.texts()
    many = compose_layout("comparison", ComparisonParams(list(range(5729, 5735))), BUNDLED)
    assert "4 DYES COMPARED" in many.texts()
    assert len(_squares(many, 130)) == 4


def test_accessibility_card():
    plan = compose_layout("accessibility", AccessibilityParams([5738, 5771], "deuteranopia"), BUNDLED)
    texts = plan.texts()
    assert "DEUTERANOPIA" in texts
    assert "ORIGINAL COLORS" in texts and "SIMULATED VIEW" in texts
    assert simulate("#781A1A", "deuteranopia") in texts
    assert simulate("#585230", "deuteranopia") in texts


def test_accessibility_defaults():
    plan = compose_layout("accessibility", AccessibilityParams([5738], "bogus"), BUNDLED)
    assert "PROTANOPIA" in plan.texts()
    fallback = compose_layout("accessibility", AccessibilityParams(()), BUNDLED)
    assert "Color Vision Accessibility" in fallback.texts()


def test_algorithm_label():
    plan = compose_layout("swatch", SwatchParams("#808080", algorithm="ciede2000"), MIXING)
    assert "Algorithm: CIEDE2000" in plan.texts()
    plan = compose_layout("swatch", SwatchParams("#808080", algorithm="nonsense"), MIXING)
    assert "Algorithm: OKLAB" in plan.texts()


def test_bad_tool_and_params():
    with pytest.raises(ValueError):
        compose_layout("palette", ComparisonParams(), BUNDLED)
    with pytest.raises(TypeError):
        compose_layout("harmony", ComparisonParams(), BUNDLED)


@pytest.mark.parametrize(
    "tool, params",
    [
        ("harmony", HarmonyParams(5738, "compound")),
        ("harmony", HarmonyParams(5738, "monochromatic")),
        ("harmony", HarmonyParams(0)),
        ("gradient", GradientParams(5729, 5738, 3)),
        ("gradient", GradientParams(5729, 5738, 40)),
        ("gradient", GradientParams(0, 0)),
        ("mixer", MixerParams(5729, 5738, 30)),
        ("mixer", MixerParams(5729, 5738, entry_c_id=5771)),
        ("mixer", MixerParams(0, 0)),
        ("swatch", SwatchParams("#3b82f6", limit=4)),
        ("swatch", SwatchParams("#3b82f6", limit=1)),
        ("swatch", SwatchParams("oops")),
        ("comparison", ComparisonParams([5729, 5730, 5731, 5732])),
        ("comparison", ComparisonParams([5729, 5730])),
        ("comparison", ComparisonParams()),
        ("accessibility", AccessibilityParams([5729, 5730, 5731, 5732], "tritanopia")),
        ("accessibility", AccessibilityParams([5729], "achromatopsia")),
        ("accessibility", AccessibilityParams()),
    ],
)
def test_plans_stay_on_canvas(tool, params):
    plan = compose_layout(tool, params, BUNDLED)
    assert (plan.width, plan.height) == (1200, 630)
    _assert_on_canvas(plan)
