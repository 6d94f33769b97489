"""
Chromascale Palette Generation
==============================

Turns one seed color into a 12-step perceptual shade scale in OKLCH.

>>> from chromascale.palette import generate_palette
>>> shades = generate_palette("#3b82f6")
>>> [s.shade for s in shades][:3]
[100, 200, 300]
>>> shades[5].hex
'#3B82F6'
"""

from .constants import (
    LIGHTNESS_TARGETS,
    SHADE_NUMBERS,
    HUE_CHROMA_FLOORS,
    DEFAULT_HUE_CHROMA_FLOOR,
    DEFAULT_SEED_COLORS,
)
from .config import PaletteConfig, DEFAULT_CONFIG, validate_curve_strength
from .chroma_curve import ChromaBand, CHROMA_BANDS, adjust_chroma, hue_chroma_floor, select_band
from .generator import generate_palette, find_closest_target_index
from .collection import Palette, generate_palettes, palettes_to_hex_map

__all__ = [
    "LIGHTNESS_TARGETS",
    "SHADE_NUMBERS",
    "HUE_CHROMA_FLOORS",
    "DEFAULT_HUE_CHROMA_FLOOR",
    "DEFAULT_SEED_COLORS",
    "PaletteConfig",
    "DEFAULT_CONFIG",
    "validate_curve_strength",
    "ChromaBand",
    "CHROMA_BANDS",
    "adjust_chroma",
    "hue_chroma_floor",
    "select_band",
    "generate_palette",
    "find_closest_target_index",
    "Palette",
    "generate_palettes",
    "palettes_to_hex_map",
]
