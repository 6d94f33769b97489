import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence, Tuple

from boundednumbers import clamp

from ..types.color_types import RGBColor, XYZColor
from ..types.format_type import RGB_MAX
from ..utils.num_utils import round_half_up, np_round_half_up
from .constants import (
    GAMMA_EXPONENT,
    GAMMA_OFFSET,
    GAMMA_THRESHOLD,
    LINEAR_SLOPE,
    LINEAR_THRESHOLD,
    RGB_TO_XYZ_MATRIX,
    XYZ_TO_RGB_MATRIX,
)

## Transfer functions

def gamma_correction(value: float) -> float:
    """sRGB-encoded channel in [0, 1] -> linear light."""
    if value <= GAMMA_THRESHOLD:
        return value / LINEAR_SLOPE
    return ((value + GAMMA_OFFSET) / (1 + GAMMA_OFFSET)) ** GAMMA_EXPONENT


def gamma_expansion(value: float) -> float:
    """Linear light -> sRGB-encoded channel. Negative input stays on the linear segment."""
    if value <= LINEAR_THRESHOLD:
        return value * LINEAR_SLOPE
    return (1 + GAMMA_OFFSET) * value ** (1 / GAMMA_EXPONENT) - GAMMA_OFFSET


def np_gamma_correction(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    curved = ((np.maximum(values, GAMMA_THRESHOLD) + GAMMA_OFFSET) / (1 + GAMMA_OFFSET)) ** GAMMA_EXPONENT
    return np.where(values <= GAMMA_THRESHOLD, values / LINEAR_SLOPE, curved)


def np_gamma_expansion(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    curved = (1 + GAMMA_OFFSET) * np.maximum(values, LINEAR_THRESHOLD) ** (1 / GAMMA_EXPONENT) - GAMMA_OFFSET
    return np.where(values <= LINEAR_THRESHOLD, values * LINEAR_SLOPE, curved)

## RGB -> XYZ

def rgb_to_xyz(rgb: Sequence[float]) -> XYZColor:
    """Convert 8-bit sRGB channels to D65 XYZ."""
    linear = np.array([gamma_correction(channel / RGB_MAX) for channel in rgb])
    x, y, z = RGB_TO_XYZ_MATRIX @ linear
    return XYZColor(float(x), float(y), float(z))


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: 8-bit sRGB to XYZ.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        array of shape (..., 3): (x, y, z)
    """
    linear = np_gamma_correction(np.asarray(rgb, dtype=float) / RGB_MAX)
    return linear @ RGB_TO_XYZ_MATRIX.T

## XYZ -> RGB

def xyz_to_linear_rgb(xyz: Sequence[float]) -> Tuple[float, float, float]:
    """XYZ to linear-light sRGB; components may fall outside [0, 1]."""
    r, g, b = XYZ_TO_RGB_MATRIX @ np.asarray(xyz, dtype=float)
    return float(r), float(g), float(b)


def xyz_to_unclamped_rgb(xyz: Sequence[float]) -> RGBColor:
    """
    XYZ to 8-bit sRGB, rounded but not clamped.

    Out-of-gamut colors come back with channels below 0 or above 255, which
    is what gamut tests need to see.
    """
    r, g, b = (round_half_up(gamma_expansion(c) * RGB_MAX) for c in xyz_to_linear_rgb(xyz))
    return RGBColor(r, g, b)


def xyz_to_rgb(xyz: Sequence[float]) -> RGBColor:
    """XYZ to 8-bit sRGB, clamped into [0, 255]."""
    r, g, b = (clamp(c, 0, RGB_MAX) for c in xyz_to_unclamped_rgb(xyz))
    return RGBColor(r, g, b)


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return np.asarray(xyz, dtype=float) @ XYZ_TO_RGB_MATRIX.T


def np_xyz_to_unclamped_rgb(xyz: NDArray) -> NDArray:
    """Vectorized :func:`xyz_to_unclamped_rgb`; returns integral floats of shape (..., 3)."""
    return np_round_half_up(np_gamma_expansion(np_xyz_to_linear_rgb(xyz)) * RGB_MAX)


def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """Vectorized :func:`xyz_to_rgb`; returns an int array of shape (..., 3)."""
    return np.clip(np_xyz_to_unclamped_rgb(xyz), 0, RGB_MAX).astype(int)
