"""
Chromascale - Perceptual Color Palette Engine
=============================================

A small, pure library that turns a single seed color into a 12-step tonal
scale for design systems, working in the perceptually uniform OKLCH space.

Key Features
------------
- Parsing of HEX, rgb() and hsl() color text
- Conversions between HEX, RGB, HSL, CIE XYZ, Oklab and OKLCH
- Scalar functions and vectorized numpy counterparts
- sRGB gamut testing and maximum-chroma search
- Seed-anchored shade scales whose chroma follows a tuned lightness curve
- Immutable values throughout; every call is a pure function

Quick Start
-----------
>>> from chromascale import generate_palette, PaletteConfig
>>>
>>> shades = generate_palette("#3b82f6")
>>> [(s.shade, s.hex) for s in shades][:2]
[(100, '#EAFDFF'), (200, '#C5E6FF')]
>>>
>>> softer = generate_palette("rgb(59, 130, 246)", PaletteConfig(chroma_curve_strength=0.25))
>>>
>>> from chromascale import hex_to_oklch, convert
>>> hex_to_oklch("#3b82f6")
OKLCHColor(l=0.623..., c=0.188..., h=259.8...)
>>> convert("#3b82f6", "hex", "hsl")
HSLColor(h=217, s=91, l=60)

Modules
-------
- types: Immutable value records (RGBColor, HSLColor, OKLCHColor, ColorShade, ...)
- conversions: Color space conversion, parsing and gamut functions
- palette: Chroma curve, palette configuration and scale generation
- errors: ColorParseError and PaletteConfigError
"""

from .errors import ChromaScaleError, ColorParseError, PaletteConfigError

from .types import (
    RGBColor, HSLColor, XYZColor, OklabColor, OKLCHColor,
    ParsedColor, ColorShade, ColorFormat, ColorSpace,
)

from .conversions import (
    parse_color_input,
    hex_to_rgb, rgb_to_hex,
    hsl_to_rgb, rgb_to_hsl,
    rgb_to_xyz, xyz_to_rgb,
    xyz_to_oklab, oklab_to_xyz,
    oklab_to_oklch, oklch_to_oklab,
    hex_to_oklch, oklch_to_hex,
    rgb_to_oklch, oklch_to_rgb,
    is_in_rgb_gamut, find_max_displayable_chroma,
    format_oklch, format_hsl, format_rgb,
    convert, np_convert,
)

from .palette import (
    PaletteConfig,
    generate_palette,
    adjust_chroma,
    find_closest_target_index,
    Palette, generate_palettes, palettes_to_hex_map,
    LIGHTNESS_TARGETS, SHADE_NUMBERS, DEFAULT_SEED_COLORS,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ChromaScaleError", "ColorParseError", "PaletteConfigError",

    # Types
    "RGBColor", "HSLColor", "XYZColor", "OklabColor", "OKLCHColor",
    "ParsedColor", "ColorShade", "ColorFormat", "ColorSpace",

    # Conversions
    "parse_color_input",
    "hex_to_rgb", "rgb_to_hex",
    "hsl_to_rgb", "rgb_to_hsl",
    "rgb_to_xyz", "xyz_to_rgb",
    "xyz_to_oklab", "oklab_to_xyz",
    "oklab_to_oklch", "oklch_to_oklab",
    "hex_to_oklch", "oklch_to_hex",
    "rgb_to_oklch", "oklch_to_rgb",
    "is_in_rgb_gamut", "find_max_displayable_chroma",
    "format_oklch", "format_hsl", "format_rgb",
    "convert", "np_convert",

    # Palette
    "PaletteConfig",
    "generate_palette",
    "adjust_chroma",
    "find_closest_target_index",
    "Palette", "generate_palettes", "palettes_to_hex_map",
    "LIGHTNESS_TARGETS", "SHADE_NUMBERS", "DEFAULT_SEED_COLORS",

    # Version
    "__version__",
]
