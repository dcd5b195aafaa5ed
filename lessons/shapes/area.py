"""
Area calculator
===============

`area` dispatches on the closed Shape union; `area_of` is the untyped
boundary that accepts raw tag-literal mappings.
"""

from __future__ import annotations

import math
import typing
from collections.abc import Mapping
from typing import assert_never

import structlog
from kungfu import Error, Ok

from .._errors import UnknownShapeError
from .model import Circle, Rectangle, Shape, parse_shape

log = structlog.get_logger(__name__)

UNKNOWN_FORMULA = "I don't know the formula"


def area(shape: Shape) -> float:
    """
    Area of a shape: pi * r * r for a circle, width * height for a rectangle.

    Pure: the same shape always gives the same area.
    """
    match shape:
        case Circle(radius=radius):
            return math.pi * radius * radius
        case Rectangle(width=width, height=height):
            return width * height
        case _ as unreachable:
            assert_never(unreachable)


def area_of(raw: Mapping[str, typing.Any]) -> float | str:
    """
    Area of a raw `{"shape": ..., ...}` mapping.

    A tag that names no known shape yields UNKNOWN_FORMULA instead of
    raising. A known tag with missing or non-numeric fields raises ShapeError.
    A constructed Shape never reaches either branch.
    """
    match parse_shape(raw):
        case Ok(shape):
            return area(shape)
        case Error(UnknownShapeError() as err):
            log.info("unknown_shape", reason=err.reason)
            return UNKNOWN_FORMULA
        case Error(err):
            raise err


__all__ = ("UNKNOWN_FORMULA", "area", "area_of")
