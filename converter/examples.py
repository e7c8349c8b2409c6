"""
Sample colors offered to users as a starting point, one per input syntax.
"""

from typing import Dict, List

from .orchestrator import preview_color
from .parser import parse

EXAMPLE_COLORS: List[Dict[str, str]] = [
    {"label": "Deep Blue", "value": "oklch(0.277 0.179 263.84)"},
    {"label": "Vibrant Red", "value": "oklch(0.627 0.277 27.23)"},
    {"label": "Forest Green", "value": "oklch(0.517 0.177 142.71)"},
    {"label": "Royal Purple", "value": "#800080"},
    {"label": "Coral", "value": "rgb(255, 127, 80)"},
]

def example_swatches() -> List[Dict[str, str]]:
    """Example colors with the swatch color to paint for each."""
    swatches = []
    for example in EXAMPLE_COLORS:
        swatch = preview_color(parse(example["value"])) or example["value"]
        swatches.append({**example, "swatch": swatch})
    return swatches
