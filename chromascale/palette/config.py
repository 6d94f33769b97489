from __future__ import annotations
import math
import numbers
import warnings
from typing import Any, Mapping

from ..errors import PaletteConfigError
from .constants import DEFAULT_CHROMA_CURVE_STRENGTH, RECOMMENDED_CURVE_STRENGTH_RANGE

# camelCase names used by JSON / front-end callers
_KEY_ALIASES = {
    "chromaCurveStrength": "chroma_curve_strength",
    "preserveSeed": "preserve_seed",
    "clampToGamut": "clamp_to_gamut",
}


def validate_curve_strength(value: Any) -> float:
    """Return ``value`` as a float, or raise if it cannot be a Gaussian width."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise PaletteConfigError(
            f"chroma_curve_strength must be a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise PaletteConfigError(f"chroma_curve_strength must be positive and finite, got {value}")
    return value


def _validate_flag(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise PaletteConfigError(f"{name} must be a bool, got {type(value).__name__}")
    return value


class PaletteConfig:
    """
    Immutable tunables for :func:`generate_palette`.

    Attributes:
        chroma_curve_strength: Spread of the mid-lightness chroma Gaussian.
            Smaller values make chroma fall off faster towards white and black.
        preserve_seed: Put the seed color verbatim into the closest shade.
        clamp_to_gamut: Reduce the chroma of out-of-sRGB shades to the gamut
            edge instead of letting channel clamping distort their hue.
    """
    __slots__ = ("chroma_curve_strength", "preserve_seed", "clamp_to_gamut", "_is_frozen")

    def __init__(
        self,
        chroma_curve_strength: float = DEFAULT_CHROMA_CURVE_STRENGTH,
        preserve_seed: bool = True,
        clamp_to_gamut: bool = False,
    ) -> None:
        strength = validate_curve_strength(chroma_curve_strength)
        low, high = RECOMMENDED_CURVE_STRENGTH_RANGE
        if not low <= strength <= high:
            warnings.warn(
                f"chroma_curve_strength={strength} is outside the recommended range "
                f"[{low}, {high}]; shades may look flat or oversaturated."
            )
        self.chroma_curve_strength = strength
        self.preserve_seed = _validate_flag("preserve_seed", preserve_seed)
        self.clamp_to_gamut = _validate_flag("clamp_to_gamut", clamp_to_gamut)
        super().__setattr__("_is_frozen", True)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PaletteConfig:
        """Build a config from snake_case or camelCase keys; missing keys keep defaults."""
        kwargs = {}
        for key, value in values.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in cls.__slots__ or name.startswith("_"):
                raise PaletteConfigError(f"Unknown palette option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **changes: Any) -> PaletteConfig:
        return PaletteConfig(**{**self.as_dict(), **changes})

    def as_dict(self) -> dict[str, Any]:
        return {
            "chroma_curve_strength": self.chroma_curve_strength,
            "preserve_seed": self.preserve_seed,
            "clamp_to_gamut": self.clamp_to_gamut,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaletteConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.as_dict().values()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"PaletteConfig({fields})"


DEFAULT_CONFIG = PaletteConfig()
