import math

import pytest

from swatchcard.colorspace import (
    InvalidHexError,
    contrast_text_color,
    hex_to_rgb,
    hue_angle,
    hue_difference,
    normalize_hex,
    perceptual_distance,
    relative_luminance,
    rgb_to_hex,
    round_half_up,
)

SAMPLES = ["#000000", "#ffffff", "585230", "#E4DFD0", "#1a1f27", "ff3300", "#7F7F7F"]


def test_normalize_hex():
    assert normalize_hex("ff3300") == "#FF3300"
    assert normalize_hex("  #abcdef ") == "#ABCDEF"


@pytest.mark.parametrize("bad", ["", "#fff", "#12345", "#1234567", "#gg0000", "##123456"])
def test_malformed_hex_raises(bad):
    with pytest.raises(InvalidHexError):
        hex_to_rgb(bad)


def test_invalid_hex_is_value_error():
    assert issubclass(InvalidHexError, ValueError)


def test_round_trip():
    for h in SAMPLES:
        assert rgb_to_hex(*hex_to_rgb(h)).upper() == normalize_hex(h)


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(-5, 300, 127.5) == "#00ff80"
    assert rgb_to_hex(0, 10, 255) == "#000aff"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2


@pytest.mark.parametrize("metric", ["oklab", "ciede2000", "euclidean"])
def test_distance_symmetry_and_identity(metric):
    for a in SAMPLES:
        assert perceptual_distance(a, a, metric) == 0.0
        for b in SAMPLES:
            d_ab = perceptual_distance(a, b, metric)
            d_ba = perceptual_distance(b, a, metric)
            assert d_ab >= 0.0
            assert math.isclose(d_ab, d_ba, abs_tol=1e-9)
            if normalize_hex(a) != normalize_hex(b):
                assert d_ab > 0.0


def test_distance_ignores_case_and_prefix():
    assert perceptual_distance("#abcdef", "ABCDEF") == 0.0


def test_unknown_metric():
    with pytest.raises(ValueError):
        perceptual_distance("#000000", "#ffffff", "hsv")  # type: ignore[arg-type]


def test_oklab_scale_black_white():
    # Oklab L runs 0..1 between black and white; distances are reported x100
    assert perceptual_distance("#000000", "#ffffff") == pytest.approx(100.0, abs=0.5)


def test_hue_helpers():
    assert hue_difference(350.0, 10.0) == pytest.approx(20.0)
    assert hue_difference(10.0, 190.0) == pytest.approx(180.0)
    assert hue_difference(-30.0, 330.0) == pytest.approx(0.0)
    assert 0.0 <= hue_angle("#3b82f6") < 360.0
    # olive green sits a little past 90 degrees in CIE Lab
    assert 80.0 < hue_angle("#585230") < 120.0


def test_luminance_and_contrast_text():
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#ffffff") == pytest.approx(1.0)
    assert contrast_text_color("#ffffff") == "#000000"
    assert contrast_text_color("#000000") == "#ffffff"
    assert contrast_text_color("#585230") == "#ffffff"
    assert contrast_text_color("#E4DFD0") == "#000000"
