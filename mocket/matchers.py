"""Matcher classes used for argument matching."""

from __future__ import annotations

import abc
import dataclasses as dc
import re
import typing as t

from .equality import structural_equals
from .rendering import FUNCTION_PLACEHOLDER, render_value


class Matcher(abc.ABC):
    """Decide whether a single argument value is acceptable."""

    __slots__ = ()

    @abc.abstractmethod
    def matches(self, value: object) -> bool:
        """Return ``True`` if *value* satisfies this matcher."""

    @abc.abstractmethod
    def describe(self) -> str:
        """Return the text used for this matcher in reports."""

    def __str__(self) -> str:
        """Return :meth:`describe`."""
        return self.describe()


@dc.dataclass(frozen=True, slots=True)
class Anything(Matcher):
    """Match any single value."""

    def matches(self, value: object) -> bool:
        """Return ``True`` for any input."""
        return True

    def describe(self) -> str:
        """Return ``ANYTHING``."""
        return "ANYTHING"


@dc.dataclass(frozen=True, slots=True)
class AnyArgs:
    """Marker accepting a whole argument list regardless of length.

    Only meaningful as the sole element passed to ``Expectation.passing``.
    """

    def __repr__(self) -> str:
        """Return ``ANYARGS``."""
        return "ANYARGS"


ANYTHING: t.Final = Anything()
ANYARGS: t.Final = AnyArgs()


@dc.dataclass(frozen=True, slots=True)
class IsA(Matcher):
    """Match values of a type, given as a class or as a type name."""

    typ: type | str

    def matches(self, value: object) -> bool:
        """Return ``True`` when *value* is an instance of ``typ``."""
        if isinstance(self.typ, str):
            return type(value).__name__ == self.typ
        return isinstance(value, self.typ)

    def describe(self) -> str:
        """Return ``(any <type name>)``."""
        name = self.typ if isinstance(self.typ, str) else self.typ.__name__
        return f"(any {name})"


@dc.dataclass(frozen=True, slots=True)
class Predicate(Matcher):
    """Use a custom ``func`` to determine a match."""

    func: t.Callable[[t.Any], object]

    def matches(self, value: object) -> bool:
        """Return ``True`` if ``func(value)`` is truthy."""
        return bool(self.func(value))

    def describe(self) -> str:
        """Return the function placeholder."""
        return FUNCTION_PLACEHOLDER


@dc.dataclass(frozen=True, slots=True)
class Equals(Matcher):
    """Match values structurally equal to ``expected``."""

    expected: t.Any

    def matches(self, value: object) -> bool:
        """Return ``True`` if *value* deeply equals ``expected``."""
        return structural_equals(self.expected, value)

    def describe(self) -> str:
        """Return the rendered literal."""
        return render_value(self.expected)


@dc.dataclass(frozen=True, slots=True)
class Regex(Matcher):
    """Match strings in which ``pattern`` is found."""

    pattern: str
    _compiled: re.Pattern[str] = dc.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def matches(self, value: object) -> bool:
        """Return ``True`` if the regex matches *value*."""
        return isinstance(value, str) and bool(self._compiled.search(value))

    def describe(self) -> str:
        """Return ``(matching <pattern>)``."""
        return f"(matching {self.pattern!r})"


@dc.dataclass(frozen=True, slots=True)
class Contains(Matcher):
    """Match strings containing ``substring``."""

    substring: str

    def matches(self, value: object) -> bool:
        """Return ``True`` if ``substring`` is in *value*."""
        return isinstance(value, str) and self.substring in value

    def describe(self) -> str:
        """Return ``(containing <substring>)``."""
        return f"(containing {self.substring!r})"


@dc.dataclass(frozen=True, slots=True)
class StartsWith(Matcher):
    """Match strings beginning with ``prefix``."""

    prefix: str

    def matches(self, value: object) -> bool:
        """Return ``True`` if *value* starts with ``prefix``."""
        return isinstance(value, str) and value.startswith(self.prefix)

    def describe(self) -> str:
        """Return ``(starting with <prefix>)``."""
        return f"(starting with {self.prefix!r})"


def as_matcher(pattern: object) -> Matcher:
    """Interpret one positional pattern element as a :class:`Matcher`.

    Matchers are used as given, callables (other than classes) become
    :class:`Predicate` and every other value is compared with :class:`Equals`.
    """
    if isinstance(pattern, Matcher):
        return pattern
    if callable(pattern) and not isinstance(pattern, type):
        return Predicate(pattern)
    return Equals(pattern)


__all__ = [
    "ANYARGS",
    "ANYTHING",
    "AnyArgs",
    "Anything",
    "Contains",
    "Equals",
    "IsA",
    "Matcher",
    "Predicate",
    "Regex",
    "StartsWith",
    "as_matcher",
]
