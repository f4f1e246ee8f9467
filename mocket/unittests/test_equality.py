"""Unit tests for :func:`mocket.equality.structural_equals`."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import re
from types import SimpleNamespace

import pytest

from mocket.equality import structural_equals


class Point:
    """Plain record without a custom ``__eq__``."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class OtherPoint(Point):
    """Same attributes as :class:`Point` but a different type."""


@dc.dataclass
class Pair:
    """Dataclass record with a callable field."""

    left: object
    right: object
    hook: object = None


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ({"a": 1, "b": 2, "c": 3}, {"b": 2, "a": 1}, False),
        ([1, [2, "x"]], [1, [2, "x"]], True),
        ({"foo": None}, {}, False),
        ([], [], True),
        ([1, 2, [3, "IV", "five"]], [1, 2, [3, "IV", "five"]], True),
        ([], "", False),
        ([1], [1, 2], False),
        ([1, "two", ["III"]], [1, 2, ["three"]], False),
        ([1, "two", ["III", [4]]], [1, "two", ["III", ["IV"]]], False),
        ((1, 2), [1, 2], True),
        ("hello", "hello", True),
        ("hello", "goodbye", False),
        (None, None, True),
        (None, 0, False),
        (True, 1, False),
        (0, False, False),
        ([True], [1], False),
        (True, True, True),
        (1, 1.0, True),
    ],
)
def test_structural_equals_cases(
    left: object, right: object, *, expected: bool
) -> None:
    """Sequences and mappings compare deeply and order-insensitively for keys."""
    assert structural_equals(left, right) is expected
    assert structural_equals(right, left) is expected


def test_callable_values_are_ignored() -> None:
    """Helper functions attached to records do not affect equality."""
    assert structural_equals({"a": 1, "helper": lambda: 1}, {"a": 1})
    assert structural_equals(SimpleNamespace(a=1, run=print), SimpleNamespace(a=1))


def test_patterns_compare_by_source_and_flags() -> None:
    """Compiled patterns are equal when source text and flags agree."""
    assert structural_equals(re.compile(r"a+"), re.compile(r"a+"))
    assert not structural_equals(re.compile(r"a+"), re.compile(r"a+", re.IGNORECASE))
    assert not structural_equals(re.compile(r"a+"), re.compile(r"b+"))


def test_datetimes_for_same_instant_are_equal() -> None:
    """Aware datetimes in different zones compare by instant."""
    utc = dt.datetime(2024, 1, 1, 12, tzinfo=dt.UTC)
    plus_one = dt.datetime(2024, 1, 1, 13, tzinfo=dt.timezone(dt.timedelta(hours=1)))
    assert structural_equals(utc, plus_one)


def test_nan_only_equals_itself() -> None:
    """NaN is unequal to another NaN but equal to the very same object."""
    nan = float("nan")
    assert structural_equals(nan, nan)
    assert not structural_equals(nan, float("nan"))


def test_plain_objects_compare_by_attributes() -> None:
    """Instances of the same plain class compare attribute by attribute."""
    assert structural_equals(Point(1, 2), Point(1, 2))
    assert not structural_equals(Point(1, 2), Point(2, 1))
    assert not structural_equals(Point(1, 2), OtherPoint(1, 2))


def test_dataclasses_ignore_callable_fields() -> None:
    """Dataclass fields holding callables are skipped."""
    assert structural_equals(Pair(1, [2], hook=len), Pair(1, [2], hook=print))
    assert not structural_equals(Pair(1, [2]), Pair(1, [3]))


def test_mapping_and_object_are_not_equal() -> None:
    """A mapping never equals an attribute record."""
    assert not structural_equals({"x": 1, "y": 2}, Point(1, 2))


def test_self_referencing_structures_terminate() -> None:
    """Cyclic containers compare without recursing forever."""
    left: list[object] = []
    left.append(left)
    right: list[object] = []
    right.append(right)
    assert structural_equals(left, right)


def _first() -> None:
    """Stand-in function."""


def _second() -> None:
    """Another stand-in function with the same (empty) attributes."""


def test_distinct_functions_are_not_equal() -> None:
    """Functions compare by identity, also inside containers."""
    assert structural_equals(_first, _first)
    assert not structural_equals(_first, _second)
    assert not structural_equals([_first], [_second])
    assert not structural_equals(Point, OtherPoint)


def test_bound_methods_use_method_equality() -> None:
    """Bound methods of the same object and function are equal."""
    point = Point(1, 2)
    other = Point(1, 2)
    assert structural_equals(point.__init__, point.__init__)
    assert not structural_equals(point.__init__, other.__init__)


def test_exceptions_compare_by_type_and_arguments() -> None:
    """Exception instances are not keyed records."""
    assert structural_equals(ValueError("a"), ValueError("a"))
    assert not structural_equals(ValueError("a"), ValueError("b"))
    assert not structural_equals(ValueError("a"), KeyError("a"))
    assert not structural_equals(ValueError("a"), {"args": ("a",)})
