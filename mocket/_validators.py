"""Shared validation helpers."""

from __future__ import annotations


def validate_call_count(count: int, *, name: str = "count") -> None:
    """Ensure *count* is usable as an expected number of calls."""
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"{name} must be an integer, got {type(count).__name__}"
        raise TypeError(msg)

    if count < 0:
        msg = f"{name} must be >= 0, got {count}"
        raise ValueError(msg)


def validate_operation_name(operation: str) -> None:
    """Ensure *operation* can be installed as a mocked operation."""
    if not isinstance(operation, str):
        msg = f"operation name must be a string, got {type(operation).__name__}"
        raise TypeError(msg)

    if not operation or operation.startswith("_"):
        msg = f"invalid operation name: {operation!r}"
        raise ValueError(msg)
