"""Several palettes at once, and their flat ``{name: {shade: hex}}`` export form."""

from __future__ import annotations
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..types.color_types import ColorShade
from .config import PaletteConfig
from .constants import DEFAULT_SEED_COLORS
from .generator import generate_palette


class Palette(NamedTuple):
    seed: str
    shades: List[ColorShade]
    name: Optional[str] = None

    def with_name(self, name: Optional[str]) -> Palette:
        """Copy with a new name; an empty name clears it."""
        return self._replace(name=name or None)


def generate_palettes(
    seeds: Iterable[str] = DEFAULT_SEED_COLORS,
    config: Optional[PaletteConfig] = None,
) -> List[Palette]:
    """Generate one palette per seed, in order. Any unparsable seed aborts the batch."""
    return [Palette(seed=seed, shades=generate_palette(seed, config)) for seed in seeds]


def palettes_to_hex_map(palettes: Iterable[Palette]) -> Dict[str, Dict[str, str]]:
    """
    Flatten palettes to ``{name: {"100": "#RRGGBB", ...}}``.

    Unnamed palettes are called ``color-1``, ``color-2``, ... by position.
    A later palette with the same name replaces an earlier one.
    """
    flat: Dict[str, Dict[str, str]] = {}
    for index, palette in enumerate(palettes):
        name = palette.name or f"color-{index + 1}"
        flat[name] = {str(shade.shade): shade.hex for shade in palette.shades}
    return flat
