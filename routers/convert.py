"""
HTTP endpoints for OKLCH / RGB / HEX conversion.
The conversion work happens in the converter package; these handlers only
validate the request and shape the response.
"""

import logging
from typing import List
from fastapi import HTTPException, APIRouter

from converter import describe, example_swatches
from schemas.requests import ColorConvertRequest
from schemas.responses import ConversionEntryResponse, ConversionResponse, ErrorResponse, ExampleColor

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/convert_color",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}},
    operation_id="convert_color",
    description="Convert an OKLCH, RGB/RGBA or HEX color code to the other formats",
)
async def convert_color(request: ColorConvertRequest):
    """Parse a color code and return it in every other supported format."""
    result = describe(request.code)
    if not result.conversions:
        logger.info("Rejected color code %r", request.code)
        raise HTTPException(status_code=400, detail="Invalid color value or format")

    return ConversionResponse(
        input=result.input,
        format=result.format,
        conversions=[ConversionEntryResponse(format=e.format, value=e.value) for e in result.conversions],
        preview=result.preview,
    )

@router.get(
    "/examples",
    response_model=List[ExampleColor],
    operation_id="list_example_colors",
    description="List sample color codes with their swatch colors",
)
async def list_example_colors():
    """Example colors, one per supported input syntax."""
    return [ExampleColor(**swatch) for swatch in example_swatches()]
