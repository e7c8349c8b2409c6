from typing import List, Optional
from pydantic import BaseModel, Field

from converter.models import FormatTag

class ConversionEntryResponse(BaseModel):
    format: FormatTag = Field(..., description="Format of the converted value")
    value: str = Field(..., description="The color written in that format")

class ConversionResponse(BaseModel):
    input: str = Field(..., description="The color code as received")
    format: FormatTag = Field(..., description="The format detected in the input")
    conversions: List[ConversionEntryResponse] = Field(..., description="The input color in every other format")
    preview: Optional[str] = Field(None, description="A CSS color suitable for a preview swatch")

class ExampleColor(BaseModel):
    label: str
    value: str = Field(..., description="The example color code")
    swatch: str = Field(..., description="A CSS color to paint the example with")

class ErrorResponse(BaseModel):
    detail: str
