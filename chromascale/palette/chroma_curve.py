"""
Chroma as a function of target lightness.

The curve is a table of lightness bands evaluated top-down. Each band scales
the seed's chroma by ``base + spread * g`` where ``g`` is a Gaussian peaked at
mid lightness; the three lightest bands use a gentler schedule for vibrant
seeds and a stronger one for muted seeds. Afterwards the result is pulled
towards the seed's own chroma for shades close to the seed in lightness.
"""

from __future__ import annotations
from typing import NamedTuple, Optional

from ..utils.num_utils import gaussian
from .config import validate_curve_strength
from .constants import (
    ACHROMATIC_CHROMA_THRESHOLD,
    CHROMA_PEAK_LIGHTNESS,
    DEFAULT_CHROMA_CURVE_STRENGTH,
    DEFAULT_HUE_CHROMA_FLOOR,
    HUE_CHROMA_FLOORS,
    MUTED_CHROMA_THRESHOLD,
    SEED_BLEND_SIGMA,
)


class ChromaBand(NamedTuple):
    """
    One lightness band of the chroma curve.

    A band matches lightness ``l`` when ``l > lower`` (or ``l >= lower`` if
    ``inclusive``). ``muted_base``/``muted_spread`` replace ``base``/``spread``
    for seeds below the muted threshold when set.
    """
    lower: float
    inclusive: bool
    base: float
    spread: float
    muted_base: Optional[float] = None
    muted_spread: Optional[float] = None
    achromatic_floor: float = 0.0
    hue_floor: bool = False

    def contains(self, lightness: float) -> bool:
        return lightness >= self.lower if self.inclusive else lightness > self.lower

    def multiplier(self, gauss: float, muted: bool) -> float:
        if muted and self.muted_base is not None:
            return self.muted_base + self.muted_spread * gauss
        return self.base + self.spread * gauss


CHROMA_BANDS: tuple[ChromaBand, ...] = (
    ChromaBand(0.94, False, 0.22, 0.10, 0.20, 0.10, achromatic_floor=0.008, hue_floor=True),  # 100
    ChromaBand(0.90, False, 0.40, 0.15, 0.50, 0.15, achromatic_floor=0.015),  # 200
    ChromaBand(0.80, False, 0.65, 0.15, 0.75, 0.15, achromatic_floor=0.025),  # 300
    ChromaBand(0.68, False, 0.92, 0.06, achromatic_floor=0.035),  # 400-500
    ChromaBand(0.44, True, 0.96, 0.04, achromatic_floor=0.040),  # 600-800, peak
    ChromaBand(0.28, True, 0.82, 0.10, achromatic_floor=0.035),  # 900
    ChromaBand(0.20, True, 0.65, 0.12, achromatic_floor=0.030),  # 1000-1100
    ChromaBand(float("-inf"), True, 0.50, 0.12, achromatic_floor=0.025),  # 1200
)


def select_band(lightness: float) -> ChromaBand:
    for band in CHROMA_BANDS:
        if band.contains(lightness):
            return band
    # only reachable for NaN
    return CHROMA_BANDS[-1]


def hue_chroma_floor(hue: float) -> float:
    """Minimum chroma for the lightest shade of a vibrant seed with this hue.

    Cool hues drift visibly towards cyan as chroma approaches zero near white,
    so they keep more chroma there.
    """
    for start, end, floor in HUE_CHROMA_FLOORS:
        if start <= hue < end:
            return floor
    return DEFAULT_HUE_CHROMA_FLOOR


def adjust_chroma(
    lightness: float,
    base_chroma: float,
    curve_strength: float = DEFAULT_CHROMA_CURVE_STRENGTH,
    seed_lightness: Optional[float] = None,
    seed_chroma: Optional[float] = None,
    seed_hue: Optional[float] = None,
) -> float:
    """
    Chroma for a shade at ``lightness`` derived from a seed's ``base_chroma``.

    Args:
        lightness: Target OKLCH lightness of the shade.
        base_chroma: Chroma of the seed color.
        curve_strength: Width of the mid-lightness Gaussian. Must be > 0.
        seed_lightness, seed_chroma: When both are given, the result is
            blended towards ``seed_chroma`` with weight
            ``exp(-((lightness - seed_lightness) / 0.08) ** 2)``.
        seed_hue: Enables the hue-dependent floor in the lightest band.

    Raises:
        PaletteConfigError: if ``curve_strength`` is not a positive finite number.
    """
    validate_curve_strength(curve_strength)
    gauss = gaussian(lightness, CHROMA_PEAK_LIGHTNESS, curve_strength)
    muted = base_chroma < MUTED_CHROMA_THRESHOLD
    near_achromatic = base_chroma < ACHROMATIC_CHROMA_THRESHOLD

    band = select_band(lightness)
    chroma = base_chroma * band.multiplier(gauss, muted)

    if near_achromatic:
        chroma = max(chroma, band.achromatic_floor)
    if band.hue_floor and not muted and seed_hue is not None:
        chroma = max(chroma, hue_chroma_floor(seed_hue))

    if seed_lightness is not None and seed_chroma is not None:
        weight = gaussian(lightness, seed_lightness, SEED_BLEND_SIGMA)
        chroma = chroma * (1.0 - weight) + seed_chroma * weight

    return chroma
