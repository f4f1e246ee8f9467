"""Exception types raised by :mod:`mocket`."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .verifiers import VerificationReport


class MocketError(Exception):
    """Base class for errors raised by the library."""


class VerificationError(MocketError, AssertionError):
    """Raised when mock verification does not pass."""


class MockAssertionError(VerificationError):
    """Raised by :meth:`MockContext.assert_mocks` with the rendered report."""

    def __init__(
        self, message: str = "(unknown)", *, report: VerificationReport | None = None
    ) -> None:
        super().__init__(message)
        self.report = report


class StubbedCallError(MocketError):
    """Default error raised by an expectation configured with ``raising()``."""


__all__ = [
    "MockAssertionError",
    "MocketError",
    "StubbedCallError",
    "VerificationError",
]
