from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

from .format_type import ColorFormat


class RGBColor(NamedTuple):
    """8-bit sRGB channels in ``[0, 255]``."""
    r: int
    g: int
    b: int


class HSLColor(NamedTuple):
    """Hue in degrees ``[0, 360)``, saturation and lightness in percent."""
    h: float
    s: float
    l: float


class XYZColor(NamedTuple):
    """CIE XYZ tristimulus values under D65 (Y of white is 1.0)."""
    x: float
    y: float
    z: float


class OklabColor(NamedTuple):
    l: float
    a: float
    b: float


class OKLCHColor(NamedTuple):
    """Oklab in polar form: lightness ``[0, 1]``, chroma ``>= 0``, hue in degrees."""
    l: float
    c: float
    h: float


class ParsedColor(NamedTuple):
    rgb: RGBColor
    format: ColorFormat


ColorSpace = Literal["hex", "rgb", "hsl", "xyz", "oklab", "oklch"]
COLOR_SPACES: Tuple[str, ...] = ("hex", "rgb", "hsl", "xyz", "oklab", "oklch")


class ColorShade(NamedTuple):
    """
    One rung of a generated scale.

    ``oklch``, ``hex``, ``hsl`` and ``rgb`` describe the same color. ``hex``
    is uppercase ``#RRGGBB`` for every shade, computed ones included, while
    :func:`rgb_to_hex` and :func:`oklch_to_hex` return lowercase.
    """
    shade: int
    oklch: OKLCHColor
    hex: str
    hsl: HSLColor
    rgb: RGBColor
