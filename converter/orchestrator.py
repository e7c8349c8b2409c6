"""
Turn a parsed color into every other supported textual representation.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .models import Conversion, ConversionEntry, FormatTag, ParseResult
from .numeric import clamp, round_half_up
from .parser import parse
from .transforms import oklch_to_srgb, srgb_to_oklch

# Number of leading values each format needs before it can be converted
ARITY = {
    FormatTag.OKLCH: 3,
    FormatTag.RGB: 3,
    FormatTag.RGBA: 3,
    FormatTag.HEX: 3,
}

# Formatting helpers ---------------------------------------------

def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"

def format_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"

def format_oklch(l: float, c: float, h: float) -> str:
    return f"oklch({l:.4f} {c:.4f} {h:.2f})"

def clamp_rgb(values: Sequence[float]) -> Tuple[float, float, float]:
    """First three values clamped to [0, 255]."""
    return clamp(values[0], 0, 255), clamp(values[1], 0, 255), clamp(values[2], 0, 255)

def convertible(format: FormatTag, values: Sequence[float]) -> bool:
    """True when format has a conversion and values can feed it."""
    needed = ARITY.get(format)
    if needed is None or not values or len(values) < needed:
        return False
    return all(isinstance(v, (int, float)) and math.isfinite(v) for v in values)

# Conversion -----------------------------------------------------

def convert(format: FormatTag, values: Sequence[float]) -> List[ConversionEntry]:
    """
    Render the color described by (format, values) in the other formats.

    Output order is fixed: oklch input gives [rgb, hex], rgb/rgba input
    gives [oklch, hex], hex input gives [oklch, rgb]. An empty list means
    there is nothing to convert (unknown format, missing or non-finite
    values); no exception is raised for bad input.
    """
    try:
        format = FormatTag(format)
    except ValueError:
        return []
    if not convertible(format, values):
        return []

    if format is FormatTag.OKLCH:
        rgb = oklch_to_srgb(values[0], values[1], values[2])
        return [
            ConversionEntry(format=FormatTag.RGB, value=format_rgb(*rgb)),
            ConversionEntry(format=FormatTag.HEX, value=format_hex(*rgb)),
        ]
    elif format in (FormatTag.RGB, FormatTag.RGBA):
        r, g, b = clamp_rgb(values)
        rounded = (round_half_up(r), round_half_up(g), round_half_up(b))
        return [
            ConversionEntry(format=FormatTag.OKLCH, value=format_oklch(*srgb_to_oklch(r, g, b))),
            ConversionEntry(format=FormatTag.HEX, value=format_hex(*rounded)),
        ]
    elif format is FormatTag.HEX:
        r, g, b = (int(v) for v in values[:3])
        return [
            ConversionEntry(format=FormatTag.OKLCH, value=format_oklch(*srgb_to_oklch(r, g, b))),
            ConversionEntry(format=FormatTag.RGB, value=format_rgb(r, g, b)),
        ]
    return []

def preview_color(result: ParseResult) -> Optional[str]:
    """A CSS color a swatch can display for the parsed input, if any."""
    if not convertible(result.format, result.values):
        return None
    values = result.values
    if result.format is FormatTag.OKLCH:
        return format_rgb(*oklch_to_srgb(values[0], values[1], values[2]))
    elif result.format in (FormatTag.RGB, FormatTag.RGBA):
        r, g, b = clamp_rgb(values)
        return format_rgb(round_half_up(r), round_half_up(g), round_half_up(b))
    elif result.format is FormatTag.HEX:
        r, g, b = (int(v) for v in values[:3])
        return format_hex(r, g, b)
    return None

def describe(text: str) -> Conversion:
    """Parse text and collect its conversions and preview color."""
    result = parse(text)
    return Conversion(
        input=text,
        format=result.format,
        conversions=convert(result.format, result.values),
        preview=preview_color(result),
    )
