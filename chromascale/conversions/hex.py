import re
from typing import Sequence

from boundednumbers import clamp

from ..errors import ColorParseError
from ..types.color_types import RGBColor
from ..types.format_type import RGB_MAX
from ..utils.num_utils import round_half_up

_HEX_BODY = re.compile(r"[0-9A-Fa-f]{6}")


def hex_to_rgb(hex_str: str) -> RGBColor:
    """
    Parse ``#rrggbb`` (leading ``#`` optional, any case) into 8-bit channels.

    Raises:
        ColorParseError: if the string is not exactly six hex digits.
    """
    cleaned = hex_str[1:] if hex_str.startswith("#") else hex_str
    if not _HEX_BODY.fullmatch(cleaned):
        raise ColorParseError(hex_str, "expected six hexadecimal digits")
    return RGBColor(
        int(cleaned[0:2], 16),
        int(cleaned[2:4], 16),
        int(cleaned[4:6], 16),
    )


def _channel_to_hex(value: float) -> str:
    return f"{clamp(round_half_up(value), 0, RGB_MAX):02x}"


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Format three channels as lowercase ``#rrggbb``, rounding and clamping each."""
    r, g, b = rgb
    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"
