# Reference values computed with the published sRGB D65 and Oklab matrices.

# (r, g, b) -> (x, y, z)
samples_rgb_xyz = {
    (255, 255, 255): (0.950470, 1.000000, 1.088830),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (0.412456, 0.212673, 0.019334),
    (0, 255, 0): (0.357576, 0.715152, 0.119192),
    (0, 0, 255): (0.180438, 0.072175, 0.950304),
    (59, 130, 246): (0.264148, 0.235458, 0.903236),
}

# (r, g, b) -> (L, C, H); hue is meaningless for grays and is left out there
samples_rgb_oklch = {
    (255, 255, 255): (1.000000, 0.000087, None),
    (0, 0, 0): (0.0, 0.0, None),
    (128, 128, 128): (0.599871, 0.000052, None),
    (255, 0, 0): (0.627987, 0.257640, 29.227151),
    (0, 255, 0): (0.866433, 0.294801, 142.511171),
    (0, 0, 255): (0.451978, 0.313294, 264.058548),
    (59, 130, 246): (0.623064, 0.188086, 259.820794),
    (73, 182, 255): (0.745247, 0.144267, 241.924008),
}

# (r, g, b) -> (h, s%, l%)
samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (59, 130, 246): (217, 91, 60),
    (128, 64, 64): (0, 33, 38),
}

# generate_palette("#3b82f6") with the default configuration
BLUE_SEED = "#3b82f6"
BLUE_PALETTE_HEX = {
    100: "#EAFDFF",
    200: "#C5E6FF",
    300: "#96CBFF",
    400: "#69AFFF",
    500: "#4D94FF",
    600: "#3B82F6",
    700: "#1961D2",
    800: "#0048B7",
    900: "#003293",
    1000: "#001878",
    1100: "#000D56",
    1200: "#000437",
}
