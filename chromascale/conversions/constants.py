"""
Fixed constants of the sRGB, CIE XYZ and Oklab models.

All matrices are read-only float64 arrays. The Oklab matrices are the
published values from Björn Ottosson's reference and must not be altered;
the round trip through Oklab depends on them matching to every digit.
"""

from ..utils.num_utils import frozen_matrix

# sRGB transfer function breakpoints
GAMMA_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308
LINEAR_SLOPE = 12.92
GAMMA_EXPONENT = 2.4
GAMMA_OFFSET = 0.055

# D65 sRGB -> XYZ
RGB_TO_XYZ_MATRIX = frozen_matrix([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB_MATRIX = frozen_matrix([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

# Oklab M1 (XYZ -> LMS)
XYZ_TO_LMS_MATRIX = frozen_matrix([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
])

# Oklab M2 (LMS' -> Lab)
LMS_TO_OKLAB_MATRIX = frozen_matrix([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

LMS_TO_XYZ_MATRIX = frozen_matrix([
    [1.2270138511, -0.5577999807, 0.2812561490],
    [-0.0405801784, 1.1122568696, -0.0716766787],
    [-0.0763812845, -0.4214819784, 1.5861632204],
])

OKLAB_TO_LMS_MATRIX = frozen_matrix([
    [1.0000000000, 0.3963377774, 0.2158037573],
    [1.0000000000, -0.1055613458, -0.0638541728],
    [1.0000000000, -0.0894841775, -1.2914855480],
])

# Gamut search
GAMUT_SEARCH_ITERATIONS = 20
GAMUT_SAFETY_MARGIN = 0.98
