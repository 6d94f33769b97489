from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence


def _fixed(value: float, places: int) -> str:
    """Fixed-point text of ``value`` with exact ties rounded half-up."""
    step = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def format_oklch(oklch: Sequence[float]) -> str:
    l, c, h = oklch
    return f"oklch({_fixed(l, 2)} {_fixed(c, 2)} {_fixed(h, 0)})"


def format_hsl(hsl: Sequence[float]) -> str:
    h, s, l = hsl
    return f"hsl({h}, {s}%, {l}%)"


def format_rgb(rgb: Sequence[int]) -> str:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"
