"""Readable rendering of argument values for diagnostics."""

from __future__ import annotations

import typing as t
from collections.abc import Mapping

FUNCTION_PLACEHOLDER = "<function>"


def render_value(value: object) -> str:
    """Return a literal-like representation of *value* for reports.

    A container that contains itself renders as ``[...]``, ``(...)`` or
    ``{...}`` where it recurs, as :func:`repr` does.
    """
    return _render(value, set())


def _render(value: object, active: set[int]) -> str:
    from .matchers import Matcher

    if isinstance(value, Matcher):
        return value.describe()
    if value is None or isinstance(value, str):
        return repr(value)
    if isinstance(value, list):
        return _render_container(value, "[", "]", active, _render_items)
    if isinstance(value, tuple):
        return _render_container(value, "(", ")", active, _render_items)
    if isinstance(value, Mapping):
        return _render_container(value, "{", "}", active, _render_pairs)
    if callable(value) and not isinstance(value, type):
        return FUNCTION_PLACEHOLDER
    return repr(value)


def _render_container(
    value: t.Any,
    opening: str,
    closing: str,
    active: set[int],
    render_body: t.Callable[[t.Any, set[int]], str],
) -> str:
    key = id(value)
    if key in active:
        return f"{opening}...{closing}"
    active.add(key)
    try:
        return f"{opening}{render_body(value, active)}{closing}"
    finally:
        active.discard(key)


def _render_items(items: t.Iterable[object], active: set[int]) -> str:
    return ", ".join(_render(item, active) for item in items)


def _render_pairs(mapping: t.Mapping[object, object], active: set[int]) -> str:
    return ", ".join(
        f"{_render_key(key, active)}:{_render(item, active)}"
        for key, item in mapping.items()
    )


def _render_key(key: object, active: set[int]) -> str:
    return key if isinstance(key, str) else _render(key, active)


def render_arguments(
    args: t.Sequence[object], kwargs: t.Mapping[str, object] | None = None
) -> str:
    """Render a call's positional and keyword arguments without parentheses."""
    parts = [render_value(arg) for arg in args]
    parts.extend(
        f"{name}={render_value(value)}" for name, value in (kwargs or {}).items()
    )
    return ", ".join(parts)


def render_call(
    mock_name: str,
    operation: str,
    args: t.Sequence[object],
    kwargs: t.Mapping[str, object] | None = None,
) -> str:
    """Return ``mock.operation(args)`` for use in report lines."""
    return f"{mock_name}.{operation}({render_arguments(args, kwargs)})"


__all__ = ["FUNCTION_PLACEHOLDER", "render_arguments", "render_call", "render_value"]
