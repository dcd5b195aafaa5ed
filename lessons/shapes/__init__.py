from .area import UNKNOWN_FORMULA, area, area_of
from .model import Circle, Rectangle, Shape, parse_shape

__all__ = (
    # Variants
    "Circle",
    "Rectangle",
    "Shape",
    "parse_shape",
    # Area
    "UNKNOWN_FORMULA",
    "area",
    "area_of",
)
