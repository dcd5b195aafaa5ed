from __future__ import annotations

import typing
from collections.abc import Mapping


class LoadError(Exception):
    """Mocked asynchronous operation failed."""

    reason: str

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ShapeError(Exception):
    """Raw mapping is not a valid shape."""

    reason: str
    raw: Mapping[str, typing.Any]

    def __init__(self, reason: str, raw: Mapping[str, typing.Any]) -> None:
        self.reason = reason
        self.raw = raw
        super().__init__(f"{reason}: {dict(raw)!r}")


class UnknownShapeError(ShapeError):
    """Raw mapping carries a tag that names no known shape."""


__all__ = ("LoadError", "ShapeError", "UnknownShapeError")
