"""Collectors receiving verification outcomes and the textual report."""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectations import Expectation
    from .mock import Call, Mock

OK = "OK"
FAIL = "FAIL"


class Collector(t.Protocol):
    """Receives each verification outcome."""

    def ok(self, expectation: Expectation) -> None:
        """Record a fulfilled expectation."""
        ...

    def fail(self, expectation: Expectation) -> None:
        """Record an unfulfilled expectation."""
        ...

    def unexpected(self, mock: Mock, call: Call) -> None:
        """Record a call that matched no expectation of *mock*."""
        ...


def format_expectation(status: str, expectation: Expectation) -> str:
    """Return ``<status> EXPECTATION mock.op(args) [range/count]``."""
    return f"{status} {expectation}"


def format_unexpected(mock: Mock, call: Call) -> str:
    """Return ``FAIL UNEXPECTED mock.op(args)``."""
    return f"{FAIL} UNEXPECTED {call.describe(mock.name)}"


class ConsoleCollector:
    """Write each outcome as a line to ``stream`` (``sys.stderr`` by default)."""

    def __init__(self, stream: t.TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> t.TextIO:
        """Return the target stream, resolving ``sys.stderr`` lazily."""
        return self._stream if self._stream is not None else sys.stderr

    def _write(self, line: str) -> None:
        self.stream.write(f"{line}\n")

    def ok(self, expectation: Expectation) -> None:
        """Write an ``OK`` line."""
        self._write(format_expectation(OK, expectation))

    def fail(self, expectation: Expectation) -> None:
        """Write a ``FAIL`` line."""
        self._write(format_expectation(FAIL, expectation))

    def unexpected(self, mock: Mock, call: Call) -> None:
        """Write a ``FAIL UNEXPECTED`` line."""
        self._write(format_unexpected(mock, call))


@dc.dataclass(slots=True)
class VerificationReport:
    """Accumulate outcomes across mocks and render them as one report."""

    fulfilled: list[Expectation] = dc.field(default_factory=list)
    failed: list[Expectation] = dc.field(default_factory=list)
    unexpected_calls: list[tuple[Mock, Call]] = dc.field(default_factory=list)
    _expectation_lines: list[str] = dc.field(default_factory=list, repr=False)

    def ok(self, expectation: Expectation) -> None:
        """Record a fulfilled expectation."""
        self.fulfilled.append(expectation)
        self._expectation_lines.append(format_expectation(OK, expectation))

    def fail(self, expectation: Expectation) -> None:
        """Record an unfulfilled expectation."""
        self.failed.append(expectation)
        self._expectation_lines.append(format_expectation(FAIL, expectation))

    def unexpected(self, mock: Mock, call: Call) -> None:
        """Record an unexpected call."""
        self.unexpected_calls.append((mock, call))

    @property
    def passed(self) -> bool:
        """Return ``True`` when nothing failed and no call was unexpected."""
        return not self.failed and not self.unexpected_calls

    def lines(self) -> list[str]:
        """Return expectation lines in verification order, then unexpected calls."""
        return [
            *self._expectation_lines,
            *(format_unexpected(mock, call) for mock, call in self.unexpected_calls),
        ]

    def render(self) -> str:
        """Return the newline-joined report."""
        return "\n".join(self.lines())


__all__ = [
    "FAIL",
    "OK",
    "Collector",
    "ConsoleCollector",
    "VerificationReport",
    "format_expectation",
    "format_unexpected",
]
