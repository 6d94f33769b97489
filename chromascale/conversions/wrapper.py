import numpy as np
from numpy import ndarray as NDArray
from typing import Any, Callable, Dict, Sequence

from ..types.color_types import (
    COLOR_SPACES,
    ColorSpace,
    HSLColor,
    OklabColor,
    OKLCHColor,
    RGBColor,
    XYZColor,
)
from .hex import hex_to_rgb, rgb_to_hex
from .hsl import hsl_to_rgb, rgb_to_hsl
from .oklab import (
    np_oklab_to_oklch,
    np_oklab_to_xyz,
    np_oklch_to_oklab,
    np_xyz_to_oklab,
    oklab_to_oklch,
    oklab_to_xyz,
    oklch_to_oklab,
    xyz_to_oklab,
)
from .xyz import (
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_unclamped_rgb,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_unclamped_rgb,
)

## Composed pipelines

def rgb_to_oklch(rgb: Sequence[float]) -> OKLCHColor:
    return oklab_to_oklch(xyz_to_oklab(rgb_to_xyz(rgb)))


def oklch_to_rgb(oklch: Sequence[float]) -> RGBColor:
    return xyz_to_rgb(oklab_to_xyz(oklch_to_oklab(oklch)))


def oklch_to_unclamped_rgb(oklch: Sequence[float]) -> RGBColor:
    """OKLCH to 8-bit sRGB without clamping, for gamut membership tests."""
    return xyz_to_unclamped_rgb(oklab_to_xyz(oklch_to_oklab(oklch)))


def hex_to_oklch(hex_str: str) -> OKLCHColor:
    """hex -> rgb -> xyz -> oklab -> oklch"""
    return rgb_to_oklch(hex_to_rgb(hex_str))


def oklch_to_hex(oklch: Sequence[float]) -> str:
    """oklch -> oklab -> xyz -> rgb -> hex (lowercase)"""
    return rgb_to_hex(oklch_to_rgb(oklch))


def np_rgb_to_oklch(rgb: NDArray) -> NDArray:
    return np_oklab_to_oklch(np_xyz_to_oklab(np_rgb_to_xyz(rgb)))


def np_oklch_to_rgb(oklch: NDArray) -> NDArray:
    """
    Vectorized: OKLCH to clamped 8-bit sRGB.

    Args:
        oklch: array of shape (..., 3): (L, C, H in degrees)

    Returns:
        int array of shape (..., 3)
    """
    return np_xyz_to_rgb(np_oklab_to_xyz(np_oklch_to_oklab(oklch)))


def np_oklch_to_unclamped_rgb(oklch: NDArray) -> NDArray:
    return np_xyz_to_unclamped_rgb(np_oklab_to_xyz(np_oklch_to_oklab(oklch)))

## Generic converter

# Spaces quantised to 8 bits convert among themselves through RGB so that
# e.g. hex -> hsl never picks up XYZ round-trip error.
EIGHT_BIT_SPACES = frozenset({"hex", "rgb", "hsl"})

TO_RGB: Dict[str, Callable[[Any], RGBColor]] = {
    "hex": hex_to_rgb,
    "rgb": lambda v: RGBColor(*v),
    "hsl": hsl_to_rgb,
}

FROM_RGB: Dict[str, Callable[[RGBColor], Any]] = {
    "hex": rgb_to_hex,
    "rgb": lambda v: v,
    "hsl": rgb_to_hsl,
}

TO_XYZ: Dict[str, Callable[[Any], XYZColor]] = {
    "hex": lambda v: rgb_to_xyz(hex_to_rgb(v)),
    "rgb": rgb_to_xyz,
    "hsl": lambda v: rgb_to_xyz(hsl_to_rgb(v)),
    "xyz": lambda v: XYZColor(*v),
    "oklab": oklab_to_xyz,
    "oklch": lambda v: oklab_to_xyz(oklch_to_oklab(v)),
}

FROM_XYZ: Dict[str, Callable[[XYZColor], Any]] = {
    "hex": lambda v: rgb_to_hex(xyz_to_rgb(v)),
    "rgb": xyz_to_rgb,
    "hsl": lambda v: rgb_to_hsl(xyz_to_rgb(v)),
    "xyz": lambda v: v,
    "oklab": xyz_to_oklab,
    "oklch": lambda v: oklab_to_oklch(xyz_to_oklab(v)),
}

_IDENTITY: Dict[str, Callable[[Any], Any]] = {
    "hex": lambda v: rgb_to_hex(hex_to_rgb(v)),
    "rgb": lambda v: RGBColor(*v),
    "hsl": lambda v: HSLColor(*v),
    "xyz": lambda v: XYZColor(*v),
    "oklab": lambda v: OklabColor(*v),
    "oklch": lambda v: OKLCHColor(*v),
}


def _check_space(space: str) -> str:
    key = space.lower()
    if key not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return key


def convert(value: Any, from_space: ColorSpace, to_space: ColorSpace) -> Any:
    """
    Convert a single color between any two supported spaces.

    Hex values are strings; every other space takes and returns a 3-tuple
    (returned as the matching named tuple). Conversions that land in an
    8-bit space (hex, rgb, hsl) are quantised and clamped to the sRGB gamut.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)

    if fs == ts:
        return _IDENTITY[fs](value)
    if fs in EIGHT_BIT_SPACES and ts in EIGHT_BIT_SPACES:
        return FROM_RGB[ts](TO_RGB[fs](value))
    return FROM_XYZ[ts](TO_XYZ[fs](value))


NP_TO_XYZ: Dict[str, Callable[[NDArray], NDArray]] = {
    "rgb": np_rgb_to_xyz,
    "xyz": lambda v: np.asarray(v, dtype=float),
    "oklab": np_oklab_to_xyz,
    "oklch": lambda v: np_oklab_to_xyz(np_oklch_to_oklab(v)),
}

NP_FROM_XYZ: Dict[str, Callable[[NDArray], NDArray]] = {
    "rgb": np_xyz_to_rgb,
    "xyz": lambda v: v,
    "oklab": np_xyz_to_oklab,
    "oklch": lambda v: np_oklab_to_oklch(np_xyz_to_oklab(v)),
}


def np_convert(colors: NDArray, from_space: ColorSpace, to_space: ColorSpace) -> NDArray:
    """
    Vectorized :func:`convert` for the numeric spaces (rgb, xyz, oklab, oklch).

    Args:
        colors: array of shape (..., 3)
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    if fs not in NP_TO_XYZ or ts not in NP_FROM_XYZ:
        raise ValueError(f"np_convert does not support {fs} -> {ts}; use convert()")
    if fs == ts:
        return np.array(colors, dtype=float)
    return NP_FROM_XYZ[ts](NP_TO_XYZ[fs](colors))
