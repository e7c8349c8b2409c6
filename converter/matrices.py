"""
Fixed 3x3 matrices of the OKLab pipeline, stored as row tuples.

OKLCH -> sRGB uses OKLAB_TO_LMS then LMS_TO_LINEAR_SRGB;
sRGB -> OKLCH uses LINEAR_SRGB_TO_LMS then LMS_TO_OKLAB.
"""

from typing import Tuple

Row = Tuple[float, float, float]
Matrix = Tuple[Row, Row, Row]

# OKLab -> LMS' (cube-root cone responses)
OKLAB_TO_LMS: Matrix = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> linear sRGB
LMS_TO_LINEAR_SRGB: Matrix = (
    (4.0767468522, -3.3077115882, 0.2309647360),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Linear sRGB -> LMS
LINEAR_SRGB_TO_LMS: Matrix = (
    (0.4121656120, 0.5362752080, 0.0514575653),
    (0.2118561070, 0.6807189584, 0.1074065790),
    (0.0883097947, 0.2818474174, 0.6302613616),
)

# LMS' -> OKLab
LMS_TO_OKLAB: Matrix = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

def apply(matrix: Matrix, x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Multiply a column vector (x, y, z) by matrix."""
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z,
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z,
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z,
    )
