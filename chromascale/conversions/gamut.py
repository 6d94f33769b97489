"""
sRGB gamut membership and maximum-chroma search in OKLCH.

The search bisects chroma a fixed number of times instead of stopping at a
tolerance, so the result for given inputs is always the same.
"""

import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence

from ..types.color_types import OKLCHColor
from ..types.format_type import RGB_MAX
from .constants import GAMUT_SAFETY_MARGIN, GAMUT_SEARCH_ITERATIONS
from .wrapper import np_oklch_to_unclamped_rgb, oklch_to_unclamped_rgb


def is_in_rgb_gamut(rgb: Sequence[float]) -> bool:
    """True iff every channel lies in [0, 255].

    Only meaningful for unclamped values, e.g. from :func:`oklch_to_unclamped_rgb`.
    """
    return all(0 <= channel <= RGB_MAX for channel in rgb)


def np_is_in_rgb_gamut(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb)
    return np.all((rgb >= 0) & (rgb <= RGB_MAX), axis=-1)


def find_max_displayable_chroma(lightness: float, hue: float, base_chroma: float) -> float:
    """
    Largest chroma in [0, base_chroma] that still renders inside sRGB.

    Runs exactly ``GAMUT_SEARCH_ITERATIONS`` bisection steps and returns the
    last in-gamut chroma scaled by ``GAMUT_SAFETY_MARGIN``. If no probe was in
    gamut the result is 0.
    """
    low, high = 0.0, base_chroma
    max_chroma = 0.0

    for _ in range(GAMUT_SEARCH_ITERATIONS):
        test_chroma = (low + high) / 2
        rgb = oklch_to_unclamped_rgb(OKLCHColor(lightness, test_chroma, hue))
        if is_in_rgb_gamut(rgb):
            low = max_chroma = test_chroma
        else:
            high = test_chroma

    return max_chroma * GAMUT_SAFETY_MARGIN


def np_find_max_displayable_chroma(lightness: NDArray, hue: NDArray, base_chroma: NDArray) -> NDArray:
    """Vectorized :func:`find_max_displayable_chroma`; inputs broadcast together."""
    lightness, hue, base_chroma = np.broadcast_arrays(
        np.asarray(lightness, dtype=float),
        np.asarray(hue, dtype=float),
        np.asarray(base_chroma, dtype=float),
    )
    low = np.zeros(lightness.shape)
    high = base_chroma.copy()
    max_chroma = np.zeros(lightness.shape)

    for _ in range(GAMUT_SEARCH_ITERATIONS):
        test_chroma = (low + high) / 2
        rgb = np_oklch_to_unclamped_rgb(np.stack([lightness, test_chroma, hue], axis=-1))
        inside = np_is_in_rgb_gamut(rgb)
        low = np.where(inside, test_chroma, low)
        max_chroma = np.where(inside, test_chroma, max_chroma)
        high = np.where(inside, high, test_chroma)

    return max_chroma * GAMUT_SAFETY_MARGIN
