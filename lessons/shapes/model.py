"""
Shape variants
==============

Closed sum type: every Shape is exactly one of Circle | Rectangle, and the
`shape` tag is fixed by the class, so it always matches the populated fields.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from kungfu import Error, Ok, Result

from .._errors import ShapeError, UnknownShapeError


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float
    shape: Literal["circle"] = field(default="circle", init=False)


@dataclass(frozen=True, slots=True)
class Rectangle:
    width: float
    height: float
    shape: Literal["rectangle"] = field(default="rectangle", init=False)


type Shape = Circle | Rectangle


def _number(raw: Mapping[str, typing.Any], name: str) -> Result[float, ShapeError]:
    if name not in raw:
        return Error(ShapeError(f"missing field {name!r}", raw))
    value = raw[name]
    # bool is an int subclass but never a length
    if isinstance(value, bool) or not isinstance(value, int | float):
        return Error(ShapeError(f"field {name!r} is not a number", raw))
    return Ok(value)


def parse_shape(raw: Mapping[str, typing.Any]) -> Result[Shape, ShapeError]:
    """
    Read the tag-literal form into a Shape.

    Example:
        parse_shape({"shape": "circle", "radius": 5})  # Ok(Circle(radius=5))
        parse_shape({"shape": "hexagon"})              # Error(UnknownShapeError(...))
        parse_shape({"shape": "circle"})               # Error(ShapeError(...))
    """
    match raw.get("shape"):
        case "circle":
            return _number(raw, "radius").map(Circle)
        case "rectangle":
            match _number(raw, "width"):
                case Error(e):
                    return Error(e)
                case Ok(width):
                    pass
            match _number(raw, "height"):
                case Error(e):
                    return Error(e)
                case Ok(height):
                    pass
            return Ok(Rectangle(width, height))
        case tag:
            return Error(UnknownShapeError(f"unknown shape {tag!r}", raw))


__all__ = ("Circle", "Rectangle", "Shape", "parse_shape")
