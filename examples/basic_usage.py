"""Basic Chromascale usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromascale import (
    PaletteConfig,
    convert,
    find_max_displayable_chroma,
    format_oklch,
    generate_palette,
    generate_palettes,
    hex_to_oklch,
    palettes_to_hex_map,
    parse_color_input,
)


def demonstrate_conversions() -> None:
    # Parse free-form text and move between color spaces.
    parsed = parse_color_input("rgb(59, 130, 246)")
    print("Parsed:", parsed.rgb, "from", parsed.format.value)

    oklch = hex_to_oklch("#3b82f6")
    print("HEX -> OKLCH:", format_oklch(oklch))
    print("HEX -> HSL:", convert("#3b82f6", "hex", "hsl"))

    # How much chroma fits in sRGB at this lightness and hue?
    print("Max chroma at L=0.45:", round(find_max_displayable_chroma(0.45, oklch.h, 0.4), 4))


def demonstrate_palettes() -> None:
    for shade in generate_palette("#3b82f6"):
        print(f"{shade.shade:>5}  {shade.hex}  {format_oklch(shade.oklch)}")

    # Keep every shade inside sRGB instead of clipping channels.
    clamped = generate_palette("#3b82f6", PaletteConfig(clamp_to_gamut=True))
    print("Clamped 1200:", clamped[-1].hex)

    print(palettes_to_hex_map(generate_palettes()))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_palettes()
