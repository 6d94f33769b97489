"""
Chromascale Color Space Conversions
===================================

Conversions between HEX, 8-bit RGB, HSL, CIE XYZ (D65), Oklab and OKLCH, with
scalar functions for single colors and vectorized numpy functions for
batches, plus sRGB gamut testing.

Conversion Functions
--------------------

Text:
    parse_color_input(text)
        HEX, rgb() or hsl() text to a ParsedColor
    hex_to_rgb(hex) / rgb_to_hex(rgb)
    format_oklch / format_hsl / format_rgb
        Display strings

RGB ↔ HSL:
    hsl_to_rgb(hsl) / rgb_to_hsl(rgb)

RGB ↔ XYZ:
    rgb_to_xyz(rgb) / xyz_to_rgb(xyz)
        sRGB companding plus the D65 primaries matrix. xyz_to_rgb clamps.
    xyz_to_unclamped_rgb(xyz)
        Rounded but not clamped, for gamut checks
    np_rgb_to_xyz / np_xyz_to_rgb / np_xyz_to_unclamped_rgb

XYZ ↔ Oklab ↔ OKLCH:
    xyz_to_oklab / oklab_to_xyz
    oklab_to_oklch / oklch_to_oklab
    np_xyz_to_oklab / np_oklab_to_xyz / np_oklab_to_oklch / np_oklch_to_oklab

Composed:
    hex_to_oklch / oklch_to_hex / rgb_to_oklch / oklch_to_rgb
    oklch_to_unclamped_rgb, np_rgb_to_oklch, np_oklch_to_rgb

Gamut:
    is_in_rgb_gamut(rgb), np_is_in_rgb_gamut(rgb)
    find_max_displayable_chroma(lightness, hue, base_chroma)
    np_find_max_displayable_chroma(lightness, hue, base_chroma)

High-Level API
--------------
    convert(value, from_space, to_space)
        Any-to-any conversion among "hex", "rgb", "hsl", "xyz", "oklab", "oklch"
    np_convert(colors, from_space, to_space)
        Vectorized, numeric spaces only

Examples
--------
>>> from chromascale.conversions import hex_to_oklch, oklch_to_hex
>>> l, c, h = hex_to_oklch("#3b82f6")
>>> round(l, 3), round(c, 3), round(h, 1)
(0.623, 0.188, 259.8)
>>> oklch_to_hex((l, c, h))
'#3b82f6'
"""

from .parse import parse_color_input
from .hex import hex_to_rgb, rgb_to_hex
from .hsl import hsl_to_rgb, rgb_to_hsl
from .xyz import (
    gamma_correction,
    gamma_expansion,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_unclamped_rgb,
    xyz_to_linear_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_unclamped_rgb,
)
from .oklab import (
    normalize_hue,
    xyz_to_oklab,
    oklab_to_xyz,
    oklab_to_oklch,
    oklch_to_oklab,
    np_xyz_to_oklab,
    np_oklab_to_xyz,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)
from .wrapper import (
    hex_to_oklch,
    oklch_to_hex,
    rgb_to_oklch,
    oklch_to_rgb,
    oklch_to_unclamped_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
    np_oklch_to_unclamped_rgb,
    convert,
    np_convert,
)
from .gamut import (
    is_in_rgb_gamut,
    np_is_in_rgb_gamut,
    find_max_displayable_chroma,
    np_find_max_displayable_chroma,
)
from .formatting import format_oklch, format_hsl, format_rgb

__all__ = [
    # Text
    'parse_color_input',
    'hex_to_rgb',
    'rgb_to_hex',
    'format_oklch',
    'format_hsl',
    'format_rgb',

    # RGB ↔ HSL
    'hsl_to_rgb',
    'rgb_to_hsl',

    # RGB ↔ XYZ
    'gamma_correction',
    'gamma_expansion',
    'rgb_to_xyz',
    'xyz_to_rgb',
    'xyz_to_unclamped_rgb',
    'xyz_to_linear_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',
    'np_xyz_to_unclamped_rgb',

    # XYZ ↔ Oklab ↔ OKLCH
    'normalize_hue',
    'xyz_to_oklab',
    'oklab_to_xyz',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_xyz_to_oklab',
    'np_oklab_to_xyz',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # Composed
    'hex_to_oklch',
    'oklch_to_hex',
    'rgb_to_oklch',
    'oklch_to_rgb',
    'oklch_to_unclamped_rgb',
    'np_rgb_to_oklch',
    'np_oklch_to_rgb',
    'np_oklch_to_unclamped_rgb',

    # Gamut
    'is_in_rgb_gamut',
    'np_is_in_rgb_gamut',
    'find_max_displayable_chroma',
    'np_find_max_displayable_chroma',

    # High-level API
    'convert',
    'np_convert',
]
