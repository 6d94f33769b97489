# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


RGB_MAX = 255
PERCENT_MAX = 100
HUE_360 = 360
