"""
OKLCH <-> sRGB conversion through OKLab, LMS and linear sRGB.

Reference: https://bottosson.github.io/posts/oklab/
"""

import math
from typing import Optional, Tuple

from .matrices import (
    LINEAR_SRGB_TO_LMS,
    LMS_TO_LINEAR_SRGB,
    LMS_TO_OKLAB,
    OKLAB_TO_LMS,
    apply,
)
from .numeric import clamp, linear_to_srgb, round_half_up, srgb_to_linear

def cbrt(x: float) -> float:
    """Real cube root, defined for negative x."""
    return math.copysign(abs(x) ** (1 / 3), x)

def to_byte(c: float) -> int:
    """Gamma-encoded [0, 1] channel to an 8-bit integer."""
    return int(clamp(round_half_up(c * 255), 0, 255))

# OKLCH -> sRGB --------------------------------------------------

def oklch_to_oklab(l: float, c: float, h: Optional[float]) -> Tuple[float, float, float]:
    """OKLCH -> OKLab. Missing or NaN hue counts as 0 degrees."""
    if h is None or math.isnan(h):
        h = 0
    h_rad = math.radians(h)
    return l, c * math.cos(h_rad), c * math.sin(h_rad)

def oklab_to_linear_srgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """OKLab -> linear sRGB via LMS."""
    l_, m_, s_ = apply(OKLAB_TO_LMS, l, a, b)
    return apply(LMS_TO_LINEAR_SRGB, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_)

def oklch_to_srgb(l: float, c: float, h: Optional[float]) -> Tuple[int, int, int]:
    """
    Convert OKLCH to 8-bit sRGB.

    Colors outside the sRGB gamut are clamped channel by channel, so the
    result is always a valid (r, g, b) triplet in [0, 255].
    """
    R, G, B = oklab_to_linear_srgb(*oklch_to_oklab(l, c, h))
    return to_byte(linear_to_srgb(R)), to_byte(linear_to_srgb(G)), to_byte(linear_to_srgb(B))

# sRGB -> OKLCH --------------------------------------------------

def linear_srgb_to_oklab(R: float, G: float, B: float) -> Tuple[float, float, float]:
    """Linear sRGB -> OKLab via LMS."""
    l, m, s = apply(LINEAR_SRGB_TO_LMS, R, G, B)
    return apply(LMS_TO_OKLAB, cbrt(l), cbrt(m), cbrt(s))

def oklab_to_oklch(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """OKLab -> OKLCH with hue in degrees, wrapped into [0, 360)."""
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    # tiny negative angles land on 360.0 after the addition
    if h >= 360:
        h = 0.0
    return l, c, h

def srgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert sRGB channels in [0, 255] to OKLCH.

    Channels are expected to be clamped by the caller. Lightness is clamped
    to [0, 1]; chroma and hue are returned as computed.
    """
    R = srgb_to_linear(r / 255)
    G = srgb_to_linear(g / 255)
    B = srgb_to_linear(b / 255)
    l, c, h = oklab_to_oklch(*linear_srgb_to_oklab(R, G, B))
    return clamp(l, 0, 1), c, h
