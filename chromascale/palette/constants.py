from typing import Tuple

# One target lightness per shade, lightest first. Never pure white or black.
LIGHTNESS_TARGETS: Tuple[float, ...] = (
    0.99,  # 100
    0.92,  # 200
    0.84,  # 300
    0.76,  # 400
    0.68,  # 500
    0.60,  # 600
    0.52,  # 700
    0.44,  # 800
    0.36,  # 900
    0.28,  # 1000
    0.22,  # 1100
    0.16,  # 1200
)

SHADE_NUMBERS: Tuple[int, ...] = (100, 200, 300, 400, 500, 600, 700, 800, 900, 1000, 1100, 1200)

# Chroma curve
CHROMA_PEAK_LIGHTNESS = 0.52
SEED_BLEND_SIGMA = 0.08
MUTED_CHROMA_THRESHOLD = 0.15
ACHROMATIC_CHROMA_THRESHOLD = 0.02

# (hue start inclusive, hue end exclusive, minimum chroma) for the lightest shade
HUE_CHROMA_FLOORS: Tuple[Tuple[float, float, float], ...] = (
    (240.0, 260.0, 0.045),  # blues
    (200.0, 240.0, 0.038),  # blue-greens
    (260.0, 290.0, 0.035),  # blue-purples
    (140.0, 200.0, 0.032),  # greens / cyans
)
DEFAULT_HUE_CHROMA_FLOOR = 0.025

# Config
DEFAULT_CHROMA_CURVE_STRENGTH = 0.35
RECOMMENDED_CURVE_STRENGTH_RANGE: Tuple[float, float] = (0.2, 0.6)

DEFAULT_SEED_COLORS: Tuple[str, ...] = ("#49B6FF", "#FF499E", "#7DCE82", "#F59E0B", "#8B5CF6")
