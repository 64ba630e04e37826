import numpy as np
import pytest

from swatchcard.colorspace import normalize_hex
from swatchcard.vision import VISION_MATRICES, simulate, simulate_many


def test_normal_is_identity():
    for h in ("#000000", "#ffffff", "#585230", "ab12cd"):
        assert simulate(h, "normal") == normalize_hex(h)


def test_achromatopsia_red():
    assert simulate("#FF0000", "achromatopsia") == "#4C4C4C"


def test_achromatopsia_is_gray():
    for h in ("#3b82f6", "#22c55e", "#E4DFD0"):
        out = simulate(h, "achromatopsia")
        assert out[1:3] == out[3:5] == out[5:7]


def test_protanopia_red():
    assert simulate("#FF0000", "protanopia") == "#918E00"


def test_white_and_black_survive_every_matrix():
    for deficiency in VISION_MATRICES:
        assert simulate("#000000", deficiency) == "#000000"
        assert simulate("#FFFFFF", deficiency) == "#FFFFFF"


def test_rows_sum_to_one():
    for m in VISION_MATRICES.values():
        assert np.allclose(m.sum(axis=1), 1.0)


def test_batch_matches_single():
    hexes = ["#ef4444", "#22c55e", "#3b82f6", "#eab308"]
    for deficiency in ("protanopia", "deuteranopia", "tritanopia"):
        assert simulate_many(hexes, deficiency) == [simulate(h, deficiency) for h in hexes]


def test_empty_batch():
    assert simulate_many([], "tritanopia") == []


def test_unknown_deficiency():
    with pytest.raises(ValueError):
        simulate("#FF0000", "monochromacy")
