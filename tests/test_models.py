import pytest
from pydantic import ValidationError

from converter.models import ConversionEntry, FormatTag, Hex, ParseResult

def test_format_tag_values():
    assert [t.value for t in FormatTag] == ["oklch", "rgb", "rgba", "hex", "unknown"]
    assert FormatTag("rgba") is FormatTag.RGBA

def test_hex_components_are_bytes():
    with pytest.raises(ValidationError):
        Hex(r=256, g=0, b=0)
    with pytest.raises(ValidationError):
        Hex(r=0, g=-1, b=0)

def test_values_are_immutable():
    result = ParseResult(format=FormatTag.RGB, values=[1, 2, 3])
    assert result.values == (1.0, 2.0, 3.0)
    with pytest.raises(ValidationError):
        result.format = FormatTag.HEX

def test_conversion_entry_serializes_tag_as_string():
    entry = ConversionEntry(format=FormatTag.HEX, value="#ff7f50")
    assert entry.model_dump(mode="json") == {"format": "hex", "value": "#ff7f50"}
