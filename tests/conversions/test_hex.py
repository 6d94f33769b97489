import pytest

from chromascale.conversions import hex_to_rgb, rgb_to_hex
from chromascale.errors import ColorParseError
from chromascale.types import RGBColor


def test_hex_to_rgb():
    assert hex_to_rgb('#3b82f6') == RGBColor(59, 130, 246)
    assert hex_to_rgb('#FFFFFF') == (255, 255, 255)
    assert hex_to_rgb('000000') == (0, 0, 0)


def test_hex_to_rgb_returns_named_fields():
    rgb = hex_to_rgb('#3b82f6')
    assert (rgb.r, rgb.g, rgb.b) == (59, 130, 246)


@pytest.mark.parametrize('bad', ['#fff', '#ffffffff', 'gggggg', '##3b82f6', ''])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(ColorParseError):
        hex_to_rgb(bad)


def test_rgb_to_hex_lowercase():
    assert rgb_to_hex((59, 130, 246)) == '#3b82f6'
    assert rgb_to_hex(RGBColor(255, 255, 255)) == '#ffffff'


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex((-12, 300, 127.5)) == '#00ff80'
    assert rgb_to_hex((0.49, 254.5, 10.2)) == '#00ff0a'


def test_round_trip_normalizes_case():
    assert rgb_to_hex(hex_to_rgb('#3B82F6')) == '#3b82f6'
