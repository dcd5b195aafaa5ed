"""
Typed field projections
=======================

Lens[O, V] names one field of record type O whose value has type V.
Reads and copy-on-write updates go through the lens, so the value type
follows the field instead of widening to object.
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping
from dataclasses import dataclass

from .property import Person


@dataclass(frozen=True, slots=True)
class Lens[O, V]:
    """Projection of field `key` from O, typed as V."""

    key: str

    def get(self, record: O, /) -> V:
        """Read the field. Mappings by key, everything else by attribute."""
        if isinstance(record, Mapping):
            return typing.cast(V, record[self.key])
        return typing.cast(V, getattr(record, self.key))

    def __call__(self, record: O, /) -> V:
        return self.get(record)

    def set(self, record: O, value: V, /) -> O:
        """
        Return a copy of record with the field replaced.

        Mappings become a shallow dict copy, dataclasses go through
        dataclasses.replace. The input record is never mutated.
        """
        if isinstance(record, Mapping):
            if self.key not in record:
                raise KeyError(self.key)
            return typing.cast(O, {**record, self.key: value})
        if dataclasses.is_dataclass(record) and not isinstance(record, type):
            return typing.cast(O, dataclasses.replace(record, **{self.key: value}))
        raise TypeError(f"cannot update {type(record).__name__!r} through a lens")


def lens[O, V](key: str) -> Lens[O, V]:
    """
    Build a lens. Bind the type parameters at the assignment:

        PERSON_NAME: Lens[Person, str] = lens("name")
    """
    return Lens(key)


PERSON_NAME: Lens[Person, str] = lens("name")
PERSON_AGE: Lens[Person, int] = lens("age")


__all__ = ("Lens", "PERSON_AGE", "PERSON_NAME", "lens")
