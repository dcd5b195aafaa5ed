"""
Lessons: typed Python snippets for three language topics.

- generics  - key-based property access and typed field lenses
- shapes    - closed Circle | Rectangle union with exhaustive area dispatch
- asyncflow - callback, promise and async/await over one mocked delay

Run every snippet with `python -m lessons`.
"""

# Core types
from ._types import NodeCallback, Report

# Generics
from . import generics
from .generics import ALICE, PERSON_AGE, PERSON_NAME, Lens, Person, get_property, lens, pick

# Shapes
from . import shapes
from .shapes import UNKNOWN_FORMULA, Circle, Rectangle, Shape, area, area_of, parse_shape

# Async control flow
from . import asyncflow
from .asyncflow import DATA_LOADED, MockSource, load_all, load_all_result

# Ambient
from .config import LessonSettings, get_settings
from .demo import run_demos
from .observability import configure_logging
from .transcript import Transcript

# Errors
from ._errors import LoadError, ShapeError, UnknownShapeError

__all__ = (
    # Types
    "NodeCallback",
    "Report",
    # Generics
    "generics",
    "ALICE",
    "Lens",
    "PERSON_AGE",
    "PERSON_NAME",
    "Person",
    "get_property",
    "lens",
    "pick",
    # Shapes
    "shapes",
    "Circle",
    "Rectangle",
    "Shape",
    "UNKNOWN_FORMULA",
    "area",
    "area_of",
    "parse_shape",
    # Async
    "asyncflow",
    "DATA_LOADED",
    "MockSource",
    "load_all",
    "load_all_result",
    # Ambient
    "LessonSettings",
    "Transcript",
    "configure_logging",
    "get_settings",
    "run_demos",
    # Errors
    "LoadError",
    "ShapeError",
    "UnknownShapeError",
)
