"""Exceptions raised by chromascale."""

ACCEPTED_FORMATS = "HEX (#RRGGBB), RGB (rgb(r, g, b)), or HSL (hsl(h, s%, l%))"


class ChromaScaleError(Exception):
    """Base class for every error chromascale raises on purpose."""


class ColorParseError(ChromaScaleError, ValueError):
    """Input text is not one of the accepted color grammars."""

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        message = f"Invalid color format {text!r}. Use {ACCEPTED_FORMATS}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PaletteConfigError(ChromaScaleError, ValueError):
    """A palette configuration value is unusable."""
