"""Tests for generic property access and typed lenses."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from lessons import ALICE, PERSON_AGE, PERSON_NAME, Lens, get_property, lens, pick


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


class TestGetProperty:
    """get_property reads the value under a key."""

    def test_reads_name(self) -> None:
        assert get_property(ALICE, "name") == "Alice"

    def test_reads_age(self) -> None:
        assert get_property(ALICE, "age") == 30

    def test_missing_key_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_property({"name": "Alice"}, "email")

    def test_does_not_mutate_record(self) -> None:
        record = {"name": "Alice", "age": 30}
        get_property(record, "name")
        assert record == {"name": "Alice", "age": 30}


class TestPick:
    def test_keeps_argument_order(self) -> None:
        assert list(pick(ALICE, "age", "name").items()) == [("age", 30), ("name", "Alice")]

    def test_no_keys_gives_empty_dict(self) -> None:
        assert pick(ALICE) == {}


class TestLens:
    """Lens projects one field and updates it copy-on-write."""

    def test_get_from_mapping(self) -> None:
        assert PERSON_NAME.get(ALICE) == "Alice"
        assert PERSON_AGE(ALICE) == 30

    def test_get_from_dataclass(self) -> None:
        x: Lens[Point, int] = lens("x")
        assert x(Point(3, 4)) == 3

    def test_set_returns_copy_for_mapping(self) -> None:
        older = PERSON_AGE.set(ALICE, 31)

        assert older == {"name": "Alice", "age": 31}
        assert ALICE["age"] == 30

    def test_set_returns_copy_for_dataclass(self) -> None:
        y: Lens[Point, int] = lens("y")
        point = Point(3, 4)

        assert y.set(point, 10) == Point(3, 10)
        assert point == Point(3, 4)

    def test_set_unknown_key_raises(self) -> None:
        email: Lens[dict[str, str], str] = lens("email")
        with pytest.raises(KeyError):
            email.set({"name": "Alice"}, "a@example.com")

    def test_missing_attribute_raises(self) -> None:
        z: Lens[Point, int] = lens("z")
        with pytest.raises(AttributeError):
            z.get(Point(1, 2))

    def test_set_on_plain_object_raises_type_error(self) -> None:
        name: Lens[object, str] = lens("name")
        with pytest.raises(TypeError):
            name.set(object(), "x")

    def test_lenses_compare_by_key(self) -> None:
        assert lens("name") == PERSON_NAME
