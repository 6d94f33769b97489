import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence

from ..types.color_types import OklabColor, OKLCHColor, XYZColor
from ..types.format_type import HUE_360
from .constants import (
    LMS_TO_OKLAB_MATRIX,
    LMS_TO_XYZ_MATRIX,
    OKLAB_TO_LMS_MATRIX,
    XYZ_TO_LMS_MATRIX,
)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # tiny negative angles wrap to exactly 360.0 in floating point
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    return np.where(h >= HUE_360, 0.0, h)

## XYZ <-> Oklab

def xyz_to_oklab(xyz: Sequence[float]) -> OklabColor:
    lms = XYZ_TO_LMS_MATRIX @ np.asarray(xyz, dtype=float)
    l, a, b = LMS_TO_OKLAB_MATRIX @ np.cbrt(lms)
    return OklabColor(float(l), float(a), float(b))


def oklab_to_xyz(lab: Sequence[float]) -> XYZColor:
    lms_prime = OKLAB_TO_LMS_MATRIX @ np.asarray(lab, dtype=float)
    x, y, z = LMS_TO_XYZ_MATRIX @ (lms_prime ** 3)
    return XYZColor(float(x), float(y), float(z))


def np_xyz_to_oklab(xyz: NDArray) -> NDArray:
    """
    Vectorized: XYZ to Oklab.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    lms = np.asarray(xyz, dtype=float) @ XYZ_TO_LMS_MATRIX.T
    return np.cbrt(lms) @ LMS_TO_OKLAB_MATRIX.T


def np_oklab_to_xyz(lab: NDArray) -> NDArray:
    lms_prime = np.asarray(lab, dtype=float) @ OKLAB_TO_LMS_MATRIX.T
    return (lms_prime ** 3) @ LMS_TO_XYZ_MATRIX.T

## Oklab <-> OKLCH

def oklab_to_oklch(lab: Sequence[float]) -> OKLCHColor:
    """Cartesian (a, b) to polar (chroma, hue in degrees)."""
    l, a, b = lab
    c = math.hypot(a, b)
    h = normalize_hue(math.degrees(math.atan2(b, a)))
    return OKLCHColor(l, c, h)


def oklch_to_oklab(oklch: Sequence[float]) -> OklabColor:
    l, c, h = oklch
    h_rad = math.radians(h)
    return OklabColor(l, c * math.cos(h_rad), c * math.sin(h_rad))


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np_normalize_hue(np.degrees(np.arctan2(b, a)))
    return np.stack([l, c, h], axis=-1)


def np_oklch_to_oklab(oklch: NDArray) -> NDArray:
    oklch = np.asarray(oklch, dtype=float)
    l, c, h = oklch[..., 0], oklch[..., 1], np.radians(oklch[..., 2])
    return np.stack([l, c * np.cos(h), c * np.sin(h)], axis=-1)
