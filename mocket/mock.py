"""Named mock objects with declared operations."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from ._validators import validate_operation_name
from .expectations import Expectation
from .rendering import render_call

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .verifiers import Collector

logger = logging.getLogger(__name__)

DEFAULT_MOCK_NAME = "anonymous"


@dc.dataclass(frozen=True, slots=True)
class Call:
    """An invocation of a mocked operation that matched no expectation."""

    operation: str
    args: tuple[t.Any, ...] = ()
    kwargs: dict[str, t.Any] = dc.field(default_factory=dict)

    def describe(self, mock_name: str) -> str:
        """Return ``mock.operation(args)`` for reports."""
        return render_call(mock_name, self.operation, self.args, self.kwargs)


def _allowed(*args: t.Any, **kwargs: t.Any) -> None:
    """Accept and ignore a call to an allowed operation."""
    del args, kwargs


class Mock:
    """A named stand-in whose operations are checked against expectations.

    Operations become available as attributes once declared with
    :meth:`expects` or :meth:`allows`::

        mock = Mock("store")
        mock.expects("get").passing("key").returning(42)
        assert mock.get("key") == 42

    Names clashing with the methods of this class can be called through
    :meth:`invoke`.
    """

    def __init__(self, name: str = DEFAULT_MOCK_NAME) -> None:
        self.name = name
        self._expectations: dict[str, list[Expectation]] = {}
        self._dispatch: dict[str, t.Callable[..., t.Any]] = {}
        self._unexpected: list[Call] = []

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"Mock(name={self.name!r})"

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------
    def expects(self, operation: str) -> Expectation:
        """Declare a new expectation for *operation* and return it."""
        validate_operation_name(operation)
        expectation = Expectation(self, operation)
        self._expectations.setdefault(operation, []).append(expectation)
        self._dispatch[operation] = self._make_dispatcher(operation)
        logger.debug("Declared expectation on %s.%s", self.name, operation)
        return expectation

    def allows(self, operation: str) -> None:
        """Install *operation* as a no-op that verification ignores."""
        validate_operation_name(operation)
        self._dispatch[operation] = _allowed
        logger.debug("Allowed %s.%s", self.name, operation)

    def _make_dispatcher(self, operation: str) -> t.Callable[..., t.Any]:
        def dispatch(*args: t.Any, **kwargs: t.Any) -> t.Any:
            return self._dispatch_expected(operation, args, kwargs)

        dispatch.__name__ = operation
        dispatch.__qualname__ = f"{type(self).__name__}.{operation}"
        return dispatch

    def _dispatch_expected(
        self, operation: str, args: tuple[t.Any, ...], kwargs: dict[str, t.Any]
    ) -> t.Any:
        expectation = find_first_matching(
            self._expectations.get(operation, ()), args, kwargs
        )
        if expectation is None:
            call = Call(operation, args, dict(kwargs))
            self._unexpected.append(call)
            logger.debug("Unexpected call %s", call.describe(self.name))
            return None
        return expectation.call(*args, **kwargs)

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------
    def operation(self, operation: str) -> t.Callable[..., t.Any]:
        """Return the callable installed for *operation*."""
        try:
            return self._dispatch[operation]
        except KeyError:
            msg = f"{self.name!r} mock has no declared operation {operation!r}"
            raise AttributeError(msg) from None

    def invoke(self, operation: str, /, *args: t.Any, **kwargs: t.Any) -> t.Any:
        """Call *operation* with the given arguments."""
        return self.operation(operation)(*args, **kwargs)

    def __getattr__(self, name: str) -> t.Callable[..., t.Any]:
        """Resolve declared operations as attributes."""
        dispatch = self.__dict__.get("_dispatch")
        if dispatch is None or name not in dispatch:
            msg = f"{type(self).__name__!r} object has no declared operation {name!r}"
            raise AttributeError(msg)
        return dispatch[name]

    # ------------------------------------------------------------------
    # Inspection and verification
    # ------------------------------------------------------------------
    @property
    def operations(self) -> tuple[str, ...]:
        """Return the installed operation names in declaration order."""
        return tuple(self._dispatch)

    @property
    def expectations(self) -> tuple[Expectation, ...]:
        """Return every declared expectation, grouped by operation."""
        return tuple(exp for group in self._expectations.values() for exp in group)

    @property
    def unexpected_calls(self) -> tuple[Call, ...]:
        """Return calls that matched no expectation, oldest first."""
        return tuple(self._unexpected)

    def verify(self, collector: Collector | None = None) -> bool:
        """Check every expectation and report unexpected calls.

        Returns ``True`` only when all expectations are fulfilled and no
        unexpected call was recorded.
        """
        results = [exp.verify(collector) for exp in self.expectations]
        if collector is not None:
            for call in self._unexpected:
                collector.unexpected(self, call)
        ok = all(results) and not self._unexpected
        logger.debug(
            "Verified mock %r: %d expectation(s), %d unexpected call(s), ok=%s",
            self.name,
            len(results),
            len(self._unexpected),
            ok,
        )
        return ok


def find_first_matching(
    expectations: t.Iterable[Expectation],
    args: t.Sequence[object],
    kwargs: t.Mapping[str, object],
) -> Expectation | None:
    """Return the first expectation whose pattern accepts the call."""
    for expectation in expectations:
        if expectation.matches(args, kwargs):
            return expectation
    return None


__all__ = ["DEFAULT_MOCK_NAME", "Call", "Mock", "find_first_matching"]
