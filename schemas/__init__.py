from .requests import ColorConvertRequest
from .responses import ConversionEntryResponse, ConversionResponse, ExampleColor, ErrorResponse

__all__ = ["ColorConvertRequest", "ConversionEntryResponse", "ConversionResponse", "ExampleColor", "ErrorResponse"]
