from pydantic import BaseModel, Field

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color to convert: oklch(L C H), rgb(R, G, B), rgba(R, G, B, A), #RGB or #RRGGBB")

