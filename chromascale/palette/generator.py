from __future__ import annotations
from typing import List, Optional, Sequence

from ..conversions.gamut import find_max_displayable_chroma, is_in_rgb_gamut
from ..conversions.hex import rgb_to_hex
from ..conversions.hsl import rgb_to_hsl
from ..conversions.parse import parse_color_input
from ..conversions.wrapper import hex_to_oklch, oklch_to_rgb, oklch_to_unclamped_rgb
from ..types.color_types import ColorShade, OKLCHColor, RGBColor
from .chroma_curve import adjust_chroma
from .config import DEFAULT_CONFIG, PaletteConfig
from .constants import LIGHTNESS_TARGETS, SHADE_NUMBERS


def find_closest_target_index(targets: Sequence[float], value: float) -> int:
    """Index of the target nearest to ``value``; the lowest index wins a tie."""
    closest_index = 0
    min_diff = abs(targets[0] - value)
    for i in range(1, len(targets)):
        diff = abs(targets[i] - value)
        if diff < min_diff:
            min_diff = diff
            closest_index = i
    return closest_index


def _shade_from_rgb(shade: int, oklch: OKLCHColor, rgb: RGBColor, hex_str: str) -> ColorShade:
    return ColorShade(shade=shade, oklch=oklch, hex=hex_str.upper(), hsl=rgb_to_hsl(rgb), rgb=rgb)


def _computed_shade(
    shade: int,
    lightness: float,
    seed: OKLCHColor,
    config: PaletteConfig,
) -> ColorShade:
    chroma = adjust_chroma(
        lightness,
        seed.c,
        config.chroma_curve_strength,
        seed_lightness=seed.l,
        seed_chroma=seed.c,
        seed_hue=seed.h,
    )
    oklch = OKLCHColor(lightness, chroma, seed.h)

    if config.clamp_to_gamut and not is_in_rgb_gamut(oklch_to_unclamped_rgb(oklch)):
        oklch = OKLCHColor(lightness, find_max_displayable_chroma(lightness, seed.h, chroma), seed.h)

    rgb = oklch_to_rgb(oklch)
    return _shade_from_rgb(shade, oklch, rgb, rgb_to_hex(rgb))


def generate_palette(seed_input: str, config: Optional[PaletteConfig] = None) -> List[ColorShade]:
    """
    Build the 12-shade scale for a seed color.

    Every shade shares the seed's OKLCH hue; lightness follows
    ``LIGHTNESS_TARGETS`` and chroma follows :func:`adjust_chroma`. With
    ``preserve_seed`` the target nearest the seed's lightness is replaced by
    the seed itself, byte for byte.

    Args:
        seed_input: Seed color as HEX, ``rgb(...)`` or ``hsl(...)`` text.
        config: Tunables; ``None`` uses the defaults.

    Returns:
        Shades tagged 100..1200 in ascending order (lightest first).

    Raises:
        ColorParseError: if ``seed_input`` is not a recognised color.
    """
    config = config if config is not None else DEFAULT_CONFIG

    parsed = parse_color_input(seed_input)
    seed_hex = rgb_to_hex(parsed.rgb).upper()
    seed_oklch = hex_to_oklch(seed_hex)

    targets = list(LIGHTNESS_TARGETS)
    seed_index = -1
    if config.preserve_seed:
        seed_index = find_closest_target_index(targets, seed_oklch.l)
        targets[seed_index] = seed_oklch.l

    palette: List[ColorShade] = []
    for index, (shade, lightness) in enumerate(zip(SHADE_NUMBERS, targets)):
        if index == seed_index:
            palette.append(_shade_from_rgb(shade, seed_oklch, parsed.rgb, seed_hex))
        else:
            palette.append(_computed_shade(shade, lightness, seed_oklch, config))
    return palette
