import numpy as np
import pytest

from chromascale.conversions import (
    convert,
    hex_to_oklch,
    np_convert,
    np_oklch_to_rgb,
    oklch_to_rgb,
    rgb_to_oklch,
)
from chromascale.types import HSLColor, OklabColor, OKLCHColor, RGBColor, XYZColor


def test_convert_eight_bit_spaces():
    assert convert('#3b82f6', 'hex', 'rgb') == RGBColor(59, 130, 246)
    assert convert('#3b82f6', 'hex', 'hsl') == HSLColor(217, 91, 60)
    assert convert((59, 130, 246), 'rgb', 'hex') == '#3b82f6'
    assert convert((0, 100, 50), 'hsl', 'hex') == '#ff0000'


def test_convert_to_float_spaces():
    assert convert('#3b82f6', 'hex', 'oklch') == hex_to_oklch('#3b82f6')
    lab = convert((255, 0, 0), 'rgb', 'oklab')
    assert isinstance(lab, OklabColor)
    assert lab.l == pytest.approx(0.627987, abs=1e-5)
    xyz = convert('#ffffff', 'hex', 'xyz')
    assert isinstance(xyz, XYZColor)
    assert xyz.y == pytest.approx(1.0, abs=1e-6)


def test_convert_from_float_spaces():
    oklch = rgb_to_oklch((59, 130, 246))
    assert convert(oklch, 'oklch', 'rgb') == oklch_to_rgb(oklch)
    assert convert(oklch, 'oklch', 'hex') == '#3b82f6'
    lab = convert(oklch, 'oklch', 'oklab')
    assert convert(lab, 'oklab', 'oklch') == pytest.approx(tuple(oklch))


def test_convert_identity_normalizes():
    assert convert('#3B82F6', 'hex', 'hex') == '#3b82f6'
    assert convert([1, 2, 3], 'rgb', 'rgb') == RGBColor(1, 2, 3)
    assert isinstance(convert((0.5, 0.1, 20), 'OKLCH', 'oklch'), OKLCHColor)


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        convert((1, 2, 3), 'rgb', 'cmyk')


def test_np_convert_matches_scalar():
    rgb = np.array([[59, 130, 246], [255, 0, 0], [12, 200, 90]])
    oklch = np_convert(rgb, 'rgb', 'oklch')
    for row, color in zip(oklch, rgb):
        assert np.allclose(row, rgb_to_oklch(tuple(color)))
    assert np.array_equal(np_convert(oklch, 'oklch', 'rgb'), rgb)


def test_np_convert_rejects_text_spaces():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 3)), 'hex', 'rgb')


def test_np_oklch_to_rgb_clamps():
    rgb = np_oklch_to_rgb(np.array([[0.5, 0.4, 264.0], [1.0, 0.0, 0.0]]))
    assert rgb.min() >= 0 and rgb.max() <= 255
    assert rgb[1].tolist() == [255, 255, 255]
