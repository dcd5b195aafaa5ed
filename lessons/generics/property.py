"""
Generic property access
=======================

Key-based reads over records whose value type is tied to the key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypedDict


class Person(TypedDict):
    name: str
    age: int


ALICE: Person = {"name": "Alice", "age": 30}


def get_property[K, V](record: Mapping[K, V], key: K) -> V:
    """
    Read the value stored under key.

    The key type K is bound by the record, so a type checker rejects keys the
    record cannot hold. At runtime there is no extra validation: a missing key
    surfaces as the mapping's own KeyError.

    Example:
        get_property({"name": "Alice"}, "name")  # "Alice"
    """
    return record[key]


def pick[K, V](record: Mapping[K, V], *keys: K) -> dict[K, V]:
    """Project several keys at once, in argument order."""
    return {key: record[key] for key in keys}


__all__ = ("ALICE", "Person", "get_property", "pick")
