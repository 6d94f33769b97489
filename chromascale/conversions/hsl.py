from typing import Sequence

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from ..types.color_types import HSLColor, RGBColor
from ..types.format_type import HUE_360, PERCENT_MAX, RGB_MAX
from ..utils.num_utils import round_half_up


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: Sequence[float]) -> RGBColor:
    """
    Convert HSL to 8-bit RGB.

    Args:
        hsl: (hue in degrees, saturation %, lightness %). Hue wraps into
            [0, 360); saturation and lightness are clamped to [0, 100].

    Returns:
        RGBColor with channels rounded half-up.
    """
    h, s, l = hsl
    h = cyclic_wrap_float(h, 0, HUE_360) / HUE_360
    s = clamp(s, 0, PERCENT_MAX) / PERCENT_MAX
    l = clamp(l, 0, PERCENT_MAX) / PERCENT_MAX

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGBColor(
        round_half_up(r * RGB_MAX),
        round_half_up(g * RGB_MAX),
        round_half_up(b * RGB_MAX),
    )


def rgb_to_hsl(rgb: Sequence[float]) -> HSLColor:
    """
    Convert 8-bit RGB to HSL with integer degrees and percentages.

    Grays (r == g == b) report hue 0 and saturation 0. When two channels tie
    for the maximum, red wins over green and green over blue.
    """
    r, g, b = (channel / RGB_MAX for channel in rgb)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return HSLColor(0, 0, round_half_up(lightness * PERCENT_MAX))

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif max_c == g:
        hue = ((b - r) / delta + 2) / 6
    else:
        hue = ((r - g) / delta + 4) / 6

    return HSLColor(
        round_half_up(hue * HUE_360) % HUE_360,
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(lightness * PERCENT_MAX),
    )
