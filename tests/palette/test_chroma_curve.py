import math

import pytest

from chromascale.errors import PaletteConfigError
from chromascale.palette import (
    CHROMA_BANDS,
    DEFAULT_HUE_CHROMA_FLOOR,
    adjust_chroma,
    hue_chroma_floor,
    select_band,
)


def gauss(lightness, strength=0.35):
    return math.exp(-(((lightness - 0.52) / strength) ** 2))


@pytest.mark.parametrize('lightness, lower', [
    (0.99, 0.94),
    (0.94, 0.90),
    (0.92, 0.90),
    (0.90, 0.80),
    (0.84, 0.80),
    (0.80, 0.68),
    (0.68, 0.44),
    (0.44, 0.44),
    (0.4399, 0.28),
    (0.28, 0.28),
    (0.22, 0.20),
    (0.20, 0.20),
    (0.16, float('-inf')),
])
def test_band_boundaries(lightness, lower):
    assert select_band(lightness).lower == lower


def test_bands_are_ordered_top_down():
    lowers = [band.lower for band in CHROMA_BANDS]
    assert lowers == sorted(lowers, reverse=True)


@pytest.mark.parametrize('hue, floor', [
    (250.0, 0.045),
    (240.0, 0.045),
    (259.99, 0.045),
    (260.0, 0.035),
    (289.9, 0.035),
    (290.0, DEFAULT_HUE_CHROMA_FLOOR),
    (200.0, 0.038),
    (239.9, 0.038),
    (140.0, 0.032),
    (199.9, 0.032),
    (139.9, 0.025),
    (30.0, 0.025),
    (0.0, 0.025),
])
def test_hue_chroma_floor(hue, floor):
    assert hue_chroma_floor(hue) == floor


def test_peak_band_multiplier():
    assert adjust_chroma(0.52, 0.2) == pytest.approx(0.2 * (0.96 + 0.04))


def test_vibrant_and_muted_schedules_differ():
    assert adjust_chroma(0.92, 0.2) == pytest.approx(0.2 * (0.40 + 0.15 * gauss(0.92)))
    assert adjust_chroma(0.92, 0.1) == pytest.approx(0.1 * (0.50 + 0.15 * gauss(0.92)))
    assert adjust_chroma(0.84, 0.2) == pytest.approx(0.2 * (0.65 + 0.15 * gauss(0.84)))
    assert adjust_chroma(0.84, 0.1) == pytest.approx(0.1 * (0.75 + 0.15 * gauss(0.84)))


def test_dark_bands():
    assert adjust_chroma(0.36, 0.2) == pytest.approx(0.2 * (0.82 + 0.10 * gauss(0.36)))
    assert adjust_chroma(0.22, 0.2) == pytest.approx(0.2 * (0.65 + 0.12 * gauss(0.22)))
    assert adjust_chroma(0.16, 0.2) == pytest.approx(0.2 * (0.50 + 0.12 * gauss(0.16)))


def test_lightest_band_hue_floor_only_for_vibrant_seeds():
    # vibrant blue: 0.16 * (0.22 + 0.1 * g) is ~0.04, below the 0.045 blue floor
    assert adjust_chroma(0.99, 0.16, seed_hue=250.0) == pytest.approx(0.045)
    # without a hue there is no floor
    assert adjust_chroma(0.99, 0.16) == pytest.approx(0.16 * (0.22 + 0.10 * gauss(0.99)))
    # muted seeds never get the hue floor
    assert adjust_chroma(0.99, 0.1, seed_hue=250.0) == pytest.approx(0.1 * (0.20 + 0.10 * gauss(0.99)))


def test_hue_floor_does_not_lower_chroma():
    high = adjust_chroma(0.99, 0.4, seed_hue=30.0)
    assert high == pytest.approx(0.4 * (0.22 + 0.10 * gauss(0.99)))
    assert high > 0.025


@pytest.mark.parametrize('lightness, floor', [
    (0.99, 0.008),
    (0.92, 0.015),
    (0.84, 0.025),
    (0.76, 0.035),
    (0.52, 0.040),
    (0.36, 0.035),
    (0.22, 0.030),
    (0.16, 0.025),
])
def test_near_achromatic_floor(lightness, floor):
    assert adjust_chroma(lightness, 0.0) == pytest.approx(floor)
    assert adjust_chroma(lightness, 0.019) >= floor


def test_seed_blend():
    # at the seed's own lightness the seed chroma wins completely
    assert adjust_chroma(0.6, 0.2, seed_lightness=0.6, seed_chroma=0.123) == pytest.approx(0.123)
    # one sigma away the weight is 1/e
    base = adjust_chroma(0.68, 0.2)
    blended = adjust_chroma(0.68, 0.2, seed_lightness=0.60, seed_chroma=0.1)
    w = math.exp(-1.0)
    assert blended == pytest.approx(base * (1 - w) + 0.1 * w)
    # far away the blend is negligible
    assert adjust_chroma(0.16, 0.2, seed_lightness=0.9, seed_chroma=0.0) == pytest.approx(adjust_chroma(0.16, 0.2))


def test_blend_needs_both_seed_values():
    assert adjust_chroma(0.6, 0.2, seed_lightness=0.6) == adjust_chroma(0.6, 0.2)
    assert adjust_chroma(0.6, 0.2, seed_chroma=0.05) == adjust_chroma(0.6, 0.2)


def test_curve_strength_changes_result():
    assert adjust_chroma(0.92, 0.2, 0.2) < adjust_chroma(0.92, 0.2, 0.6)


@pytest.mark.parametrize('strength', [0, 0.0, -0.35, float('nan'), float('inf'), True, '0.35', None])
def test_invalid_curve_strength(strength):
    with pytest.raises(PaletteConfigError):
        adjust_chroma(0.5, 0.2, strength)
