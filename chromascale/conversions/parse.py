import re

from ..errors import ColorParseError
from ..types.color_types import ParsedColor, RGBColor
from ..types.format_type import ColorFormat, PERCENT_MAX, RGB_MAX
from .hex import hex_to_rgb
from .hsl import hsl_to_rgb

# [0-9] rather than \d so that non-ASCII digits are rejected
HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{6})")
RGB_PATTERN = re.compile(r"rgb\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*\)")
HSL_PATTERN = re.compile(r"hsl\(\s*([0-9]+)\s*,\s*([0-9]+)%\s*,\s*([0-9]+)%\s*\)")


def parse_color_input(text: str) -> ParsedColor:
    """
    Interpret free-form color text.

    Grammars are tried in order HEX, ``rgb(r, g, b)``, ``hsl(h, s%, l%)``; the
    first that matches the whole trimmed input wins.

    Raises:
        TypeError: if ``text`` is not a string.
        ColorParseError: if nothing matches, or a component is out of range.
    """
    if not isinstance(text, str):
        raise TypeError(f"color input must be a string, got {type(text).__name__}")
    trimmed = text.strip()

    match = HEX_PATTERN.fullmatch(trimmed)
    if match:
        return ParsedColor(hex_to_rgb(match.group(1)), ColorFormat.HEX)

    match = RGB_PATTERN.fullmatch(trimmed)
    if match:
        r, g, b = (int(v) for v in match.groups())
        if max(r, g, b) > RGB_MAX:
            raise ColorParseError(text, f"rgb channels must be 0-{RGB_MAX}")
        return ParsedColor(RGBColor(r, g, b), ColorFormat.RGB)

    match = HSL_PATTERN.fullmatch(trimmed)
    if match:
        h, s, l = (int(v) for v in match.groups())
        if s > PERCENT_MAX or l > PERCENT_MAX:
            raise ColorParseError(text, f"saturation and lightness must be 0-{PERCENT_MAX}%")
        return ParsedColor(hsl_to_rgb((h, s, l)), ColorFormat.HSL)

    raise ColorParseError(text)
