import pytest

from chromascale.errors import ColorParseError
from chromascale.palette import (
    DEFAULT_SEED_COLORS,
    Palette,
    generate_palette,
    generate_palettes,
    palettes_to_hex_map,
)


def test_default_seeds():
    palettes = generate_palettes()
    assert [p.seed for p in palettes] == list(DEFAULT_SEED_COLORS)
    assert all(len(p.shades) == 12 for p in palettes)
    assert all(p.name is None for p in palettes)


def test_generate_palettes_matches_single():
    [palette] = generate_palettes(['#3b82f6'])
    assert palette.shades == generate_palette('#3b82f6')


def test_generate_palettes_aborts_on_bad_seed():
    with pytest.raises(ColorParseError):
        generate_palettes(['#3b82f6', 'nope'])


def test_with_name():
    palette = generate_palettes(['#3b82f6'])[0]
    named = palette.with_name('brand')
    assert named.name == 'brand'
    assert palette.name is None
    assert named.with_name('').name is None


def test_hex_map():
    palettes = generate_palettes(['#3b82f6', '#FF499E'])
    palettes[1] = palettes[1].with_name('accent')
    flat = palettes_to_hex_map(palettes)
    assert list(flat) == ['color-1', 'accent']
    assert list(flat['color-1']) == [str(n) for n in range(100, 1300, 100)]
    assert flat['color-1']['600'] == '#3B82F6'
    assert flat['accent'] == {str(s.shade): s.hex for s in palettes[1].shades}


def test_hex_map_numbers_unnamed_by_position():
    first, second, third = generate_palettes(['#49B6FF', '#7DCE82', '#8B5CF6'])
    flat = palettes_to_hex_map([first.with_name('sky'), second, third])
    assert list(flat) == ['sky', 'color-2', 'color-3']


def test_empty():
    assert generate_palettes([]) == []
    assert palettes_to_hex_map([]) == {}


def test_palette_is_a_record():
    palette = Palette(seed='#000000', shades=[])
    assert palette._fields == ('seed', 'shades', 'name')
