"""Deep structural comparison used when a literal value is the matching rule."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t
from collections.abc import Mapping
from types import SimpleNamespace

_Seen = set[tuple[int, int]]


def structural_equals(left: object, right: object) -> bool:
    """Return ``True`` when *left* and *right* are structurally equal.

    Sequences compare element-wise, mappings and plain records compare by
    their non-callable keys, compiled patterns compare by source and flags,
    and everything else falls back to ``==``. A key holding ``None`` is not
    the same as a missing key. Callables are equal only when ``==`` says so,
    which for plain functions means identity. Exceptions compare by type and
    arguments, and a ``bool`` never equals a number.
    """
    return _equals(left, right, set())


def _equals(left: object, right: object, seen: _Seen) -> bool:
    if left is right:
        return True
    if isinstance(left, re.Pattern) and isinstance(right, re.Pattern):
        return left.pattern == right.pattern and left.flags == right.flags
    if callable(left) or callable(right):
        return _scalar_equals(left, right)
    if isinstance(left, BaseException) or isinstance(right, BaseException):
        return _exceptions_equal(left, right, seen)
    if _is_sequence(left) and _is_sequence(right):
        return _guarded(left, right, seen, _sequences_equal)
    if _is_record(left) and _is_record(right):
        if not _comparable_records(left, right):
            return False
        return _guarded(left, right, seen, _records_equal)
    return _scalar_equals(left, right)


def _guarded(
    left: t.Any,
    right: t.Any,
    seen: _Seen,
    compare: t.Callable[[t.Any, t.Any, _Seen], bool],
) -> bool:
    """Run *compare* unless this pair is already being compared higher up."""
    key = (id(left), id(right))
    if key in seen:
        return True
    seen.add(key)
    try:
        return compare(left, right, seen)
    finally:
        seen.discard(key)


def _exceptions_equal(left: object, right: object, seen: _Seen) -> bool:
    if type(left) is not type(right):
        return False
    return _equals(
        t.cast("BaseException", left).args, t.cast("BaseException", right).args, seen
    )


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _sequences_equal(
    left: t.Sequence[object], right: t.Sequence[object], seen: _Seen
) -> bool:
    if len(left) != len(right):
        return False
    return all(_equals(a, b, seen) for a, b in zip(left, right, strict=True))


def _is_record(value: object) -> bool:
    if isinstance(value, (Mapping, SimpleNamespace)):
        return True
    if dc.is_dataclass(value):
        return True
    return hasattr(value, "__dict__") and type(value).__eq__ is object.__eq__


def _comparable_records(left: object, right: object) -> bool:
    """Mappings compare with any mapping; objects only with their own type."""
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        return isinstance(left, Mapping) and isinstance(right, Mapping)
    return type(left) is type(right)


def _record_fields(value: object) -> dict[t.Any, object]:
    if isinstance(value, Mapping):
        items = dict(value)
    elif dc.is_dataclass(value) and not isinstance(value, type):
        items = {f.name: getattr(value, f.name) for f in dc.fields(value)}
    else:
        items = dict(vars(value))
    return {key: item for key, item in items.items() if not callable(item)}


def _records_equal(left: object, right: object, seen: _Seen) -> bool:
    left_fields = _record_fields(left)
    right_fields = _record_fields(right)
    if left_fields.keys() != right_fields.keys():
        return False
    return all(
        _equals(left_fields[key], right_fields[key], seen) for key in left_fields
    )


def _scalar_equals(left: object, right: object) -> bool:
    if isinstance(left, bool) is not isinstance(right, bool):
        return False
    try:
        return bool(left == right)
    except Exception:  # noqa: BLE001 - ambiguous comparisons do not match
        return False


__all__ = ["structural_equals"]
