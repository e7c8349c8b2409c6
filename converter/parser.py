"""
Detect the textual syntax of a color and extract its numeric components.

Recognized inputs (case-insensitive, surrounding whitespace ignored):
    oklch(L C H)  oklch(L C H / A)
    rgb(R, G, B)  rgba(R, G, B, A)
    #rgb  #rrggbb
Anything else parses as FormatTag.UNKNOWN with no values.
"""

import logging
import math
import re
from typing import List, Optional

from .models import UNKNOWN, FormatTag, ParseResult

logger = logging.getLogger(__name__)

HEX_BODY_RE = re.compile(r"^[0-9a-f]{6}$")
WS_RE = re.compile(r"\s+")

def to_number(token: str) -> Optional[float]:
    """Parse a numeric token; None when it is not a finite number."""
    try:
        v = float(token)
    except ValueError:
        return None
    if not math.isfinite(v):
        return None
    return v

def to_numbers(tokens: List[str]) -> Optional[List[float]]:
    """Parse every token, or None if any of them is not a finite number."""
    values = []
    for token in tokens:
        v = to_number(token)
        if v is None:
            return None
        values.append(v)
    return values

# OKLCH ----------------------------------------------------------

def parse_oklch(s: str) -> Optional[ParseResult]:
    """Parse 'oklch(l c h[ / a])'; the alpha part is dropped."""
    if not s.startswith("oklch(") or not s.endswith(")"):
        return None
    body = s[len("oklch("):-1].split("/", 1)[0].strip()
    values = to_numbers(WS_RE.split(body))
    if values is None or len(values) != 3:
        return None
    return ParseResult(format=FormatTag.OKLCH, values=values)

# RGB ------------------------------------------------------------

def parse_rgb(s: str) -> Optional[ParseResult]:
    """Parse comma separated 'rgb(r, g, b)' or 'rgba(r, g, b, a)'."""
    if not s.startswith("rgb"):
        return None
    start = s.find("(")
    if start < 0 or not s.endswith(")"):
        return None
    values = to_numbers([t.strip() for t in s[start + 1:-1].split(",")])
    if values is None:
        return None
    if len(values) == 3:
        return ParseResult(format=FormatTag.RGB, values=values)
    if len(values) == 4:
        return ParseResult(format=FormatTag.RGBA, values=values)
    return None

# HEX ------------------------------------------------------------

def parse_hex(s: str) -> Optional[ParseResult]:
    """Parse '#rgb' or '#rrggbb'."""
    if not s.startswith("#"):
        return None
    h = s[1:]
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    if not HEX_BODY_RE.match(h):
        return None
    values = [int(h[i:i + 2], 16) for i in (0, 2, 4)]
    return ParseResult(format=FormatTag.HEX, values=values)

# Top-level parse ------------------------------------------------

def parse(text: str) -> ParseResult:
    """
    Classify a color string and extract its components.

    Never raises: malformed input of any kind yields FormatTag.UNKNOWN with
    an empty values tuple.
    """
    if not isinstance(text, str):
        return UNKNOWN
    s = text.strip().lower()
    for parser in (parse_oklch, parse_rgb, parse_hex):
        result = parser(s)
        if result is not None:
            return result
    logger.debug("Unrecognized color input: %r", text)
    return UNKNOWN
