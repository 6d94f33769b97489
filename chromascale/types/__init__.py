from .color_types import (
    RGBColor,
    HSLColor,
    XYZColor,
    OklabColor,
    OKLCHColor,
    ParsedColor,
    ColorShade,
    ColorSpace,
    COLOR_SPACES,
)
from .format_type import ColorFormat, RGB_MAX, PERCENT_MAX, HUE_360

__all__ = [
    "RGBColor",
    "HSLColor",
    "XYZColor",
    "OklabColor",
    "OKLCHColor",
    "ParsedColor",
    "ColorShade",
    "ColorSpace",
    "COLOR_SPACES",
    "ColorFormat",
    "RGB_MAX",
    "PERCENT_MAX",
    "HUE_360",
]
