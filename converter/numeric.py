"""
Scalar helpers shared by the color transforms: clamping, 8-bit rounding and
the sRGB transfer curve in both directions.
"""

import math

def clamp(value: float, lo: float = 0, hi: float = 1) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(value, hi))

def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties going up (127.5 -> 128, 128.5 -> 129)."""
    return int(math.floor(x + 0.5))

def linear_to_srgb(c: float) -> float:
    """Linear-light channel to gamma-encoded sRGB, both in [0, 1]."""
    c = clamp(c, 0, 1)
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055

def srgb_to_linear(c: float) -> float:
    """Gamma-encoded sRGB channel in [0, 1] to linear light."""
    c = clamp(c, 0, 1)
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4
