from .examples import EXAMPLE_COLORS, example_swatches
from .models import ColorValue, Conversion, ConversionEntry, FormatTag, Hex, Oklch, ParseResult, Rgb
from .orchestrator import convert, describe, preview_color
from .parser import parse
from .transforms import oklch_to_srgb, srgb_to_oklch

__all__ = [
    "EXAMPLE_COLORS",
    "example_swatches",
    "ColorValue",
    "Conversion",
    "ConversionEntry",
    "FormatTag",
    "Hex",
    "Oklch",
    "ParseResult",
    "Rgb",
    "convert",
    "describe",
    "preview_color",
    "parse",
    "oklch_to_srgb",
    "srgb_to_oklch",
]
