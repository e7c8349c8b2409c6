"""
Value types exchanged between the parser, the orchestrator and callers.
"""

from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

class FormatTag(str, Enum):
    OKLCH = "oklch"
    RGB = "rgb"
    RGBA = "rgba"
    HEX = "hex"
    UNKNOWN = "unknown"

class Oklch(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["oklch"] = "oklch"
    l: float
    c: float
    h: float

class Rgb(BaseModel):
    """Channels as typed; may lie outside [0, 255] until clamped."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rgb"] = "rgb"
    r: float
    g: float
    b: float
    a: Optional[float] = None

class Hex(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["hex"] = "hex"
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

ColorValue = Union[Oklch, Rgb, Hex]

class ParseResult(BaseModel):
    """Detected format and the numeric components found in the text."""

    model_config = ConfigDict(frozen=True)

    format: FormatTag
    values: Tuple[float, ...] = ()

    def color(self) -> Optional[ColorValue]:
        """The parsed color as a typed value, or None for unknown input."""
        if self.format is FormatTag.OKLCH:
            l, c, h = self.values
            return Oklch(l=l, c=c, h=h)
        if self.format is FormatTag.RGB:
            r, g, b = self.values
            return Rgb(r=r, g=g, b=b)
        if self.format is FormatTag.RGBA:
            r, g, b, a = self.values
            return Rgb(r=r, g=g, b=b, a=a)
        if self.format is FormatTag.HEX:
            r, g, b = (int(v) for v in self.values)
            return Hex(r=r, g=g, b=b)
        return None

UNKNOWN = ParseResult(format=FormatTag.UNKNOWN)

class ConversionEntry(BaseModel):
    """One formatted representation of the input color."""

    model_config = ConfigDict(frozen=True)

    format: FormatTag
    value: str

class Conversion(BaseModel):
    """Everything derived from a single input string."""

    model_config = ConfigDict(frozen=True)

    input: str
    format: FormatTag
    conversions: Tuple[ConversionEntry, ...] = ()
    preview: Optional[str] = None
