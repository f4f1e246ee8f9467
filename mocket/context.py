"""Mock context owning the mocks of one test."""

from __future__ import annotations

import logging
import types  # noqa: TC003
import typing as t

from .errors import MockAssertionError
from .matchers import ANYARGS, ANYTHING, IsA
from .mock import DEFAULT_MOCK_NAME, Mock
from .verifiers import Collector, ConsoleCollector, VerificationReport

logger = logging.getLogger(__name__)


class MockContext:
    """Registry that verifies all of its mocks as one outcome."""

    ANYTHING = ANYTHING
    ANYARGS = ANYARGS

    def __init__(self, *, verify_on_exit: bool = True) -> None:
        """Create an empty context.

        Parameters
        ----------
        verify_on_exit:
            When ``True`` (the default), leaving a ``with`` block without an
            exception calls :meth:`assert_mocks`.
        """
        self._verify_on_exit = verify_on_exit
        self._mocks: list[Mock] = []

    # ------------------------------------------------------------------
    # Context manager protocol
    # ------------------------------------------------------------------
    def __enter__(self) -> MockContext:
        """Return the context itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Assert the mocks unless the block raised."""
        if exc_type is None and self._verify_on_exit:
            self.assert_mocks()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def mocks(self) -> tuple[Mock, ...]:
        """Return registered mocks in registration order."""
        return tuple(self._mocks)

    @staticmethod
    def any(typ: type | str) -> IsA:
        """Return a matcher accepting instances of *typ* or a type named *typ*."""
        return IsA(typ)

    def create_mock(self, name: str | None = None) -> Mock:
        """Create and register a mock called *name* (``"anonymous"`` if omitted)."""
        mock = Mock(name or DEFAULT_MOCK_NAME)
        self.register_mock(mock)
        return mock

    def register_mock(self, mock: Mock) -> None:
        """Track a mock built outside :meth:`create_mock`."""
        self._mocks.append(mock)

    def verify_mocks(self, collector: Collector | bool | None = None) -> bool:
        """Verify every registered mock and return ``True`` if all pass.

        ``collector=True`` writes each outcome line to ``sys.stderr``.
        """
        if collector is True:
            collector = ConsoleCollector()
        elif collector is False:
            collector = None
        results = [mock.verify(collector) for mock in self._mocks]
        ok = all(results)
        logger.debug("Verified %d mock(s): ok=%s", len(results), ok)
        return ok

    def assert_mocks(self) -> None:
        """Raise :class:`MockAssertionError` with a report if verification fails."""
        report = VerificationReport()
        if not self.verify_mocks(report):
            raise MockAssertionError(report.render(), report=report)


def create_context(*, verify_on_exit: bool = True) -> MockContext:
    """Return a fresh, independent :class:`MockContext`."""
    return MockContext(verify_on_exit=verify_on_exit)


__all__ = ["MockContext", "create_context"]
