"""Declared call patterns and their verification."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from ._validators import validate_call_count
from .actions import Action, Delegate, Raise, ReturnValues
from .errors import StubbedCallError
from .matchers import ANYARGS, AnyArgs, Matcher, as_matcher
from .rendering import render_call

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .mock import Mock
    from .verifiers import Collector

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, eq=False)
class Expectation:
    """One declared call pattern on one operation of a :class:`Mock`.

    Configuration methods return the expectation so calls can be chained::

        mock.expects("fetch").passing("key").once().returning("value")
    """

    mock: Mock = dc.field(repr=False)
    name: str
    pattern: tuple[Matcher, ...] | AnyArgs = ANYARGS
    keyword_pattern: dict[str, Matcher] = dc.field(default_factory=dict)
    min_calls: int | None = None
    max_calls: int | None = None
    call_count: int = 0
    action: Action = dc.field(default_factory=ReturnValues)

    # ------------------------------------------------------------------
    # Argument pattern
    # ------------------------------------------------------------------
    def passing(self, *patterns: object, **keyword_patterns: object) -> Expectation:
        """Require calls whose arguments satisfy *patterns*.

        Calling with no arguments requires a call with no arguments. Passing
        :data:`~mocket.matchers.ANYARGS` alone accepts any argument list.
        """
        if any(isinstance(pattern, AnyArgs) for pattern in patterns):
            if len(patterns) != 1 or keyword_patterns:
                msg = "ANYARGS must be the only pattern passed to passing()"
                raise ValueError(msg)
            self.pattern = ANYARGS
            self.keyword_pattern = {}
            return self
        self.pattern = tuple(as_matcher(pattern) for pattern in patterns)
        self.keyword_pattern = {
            key: as_matcher(pattern) for key, pattern in keyword_patterns.items()
        }
        return self

    def matches(
        self, args: t.Sequence[object], kwargs: t.Mapping[str, object] | None = None
    ) -> bool:
        """Return ``True`` if a call with *args* and *kwargs* fits the pattern."""
        if isinstance(self.pattern, AnyArgs):
            return True
        kwargs = kwargs or {}
        if len(args) != len(self.pattern):
            return False
        if kwargs.keys() != self.keyword_pattern.keys():
            return False
        for arg, matcher in zip(args, self.pattern, strict=True):
            if not matcher.matches(arg):
                return False
        return all(
            matcher.matches(kwargs[key])
            for key, matcher in self.keyword_pattern.items()
        )

    # ------------------------------------------------------------------
    # Call counts
    # ------------------------------------------------------------------
    def times(self, count: int) -> Expectation:
        """Require exactly ``count`` calls."""
        validate_call_count(count)
        self.min_calls = count
        self.max_calls = count
        return self

    def once(self) -> Expectation:
        """Require exactly one call."""
        return self.times(1)

    def never(self) -> Expectation:
        """Require that the operation is not called with this pattern."""
        return self.times(0)

    def at_least(self, count: int) -> Expectation:
        """Require ``count`` or more calls."""
        validate_call_count(count)
        self.min_calls = count
        return self

    def at_most(self, count: int) -> Expectation:
        """Allow no more than ``count`` calls, including none at all."""
        validate_call_count(count)
        self.max_calls = count
        return self

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def returning(self, *values: object) -> Expectation:
        """Return *values* on successive calls, repeating the last one."""
        self.action = ReturnValues(values)
        return self

    def runs(self, handler: object) -> Expectation:
        """Delegate calls to *handler*.

        *handler* is either a callable receiving the call's arguments or an
        object providing a method with the same name as the operation.
        """
        if not callable(handler) and not callable(getattr(handler, self.name, None)):
            msg = (
                f"handler must be callable or provide a {self.name!r} method, "
                f"got {type(handler).__name__}"
            )
            raise TypeError(msg)
        self.action = Delegate(handler)
        return self

    as_ = runs

    def raising(
        self, error: type[BaseException] | BaseException | None = None
    ) -> Expectation:
        """Raise *error* on every matching call.

        An exception class is instantiated for each call, an instance is raised
        as given and ``None`` raises :class:`~mocket.errors.StubbedCallError`.
        """
        if error is None:
            self.action = Raise(self._stubbed_error)
        elif isinstance(error, type) and issubclass(error, BaseException):
            self.action = Raise(error)
        elif isinstance(error, BaseException):
            instance = error
            self.action = Raise(lambda: instance)
        else:
            msg = f"raising() expects an exception class or instance, got {error!r}"
            raise TypeError(msg)
        return self

    throwing = raising

    def _stubbed_error(self) -> StubbedCallError:
        return StubbedCallError(f"stubbed failure from {self.signature()}")

    # ------------------------------------------------------------------
    # Dispatch and verification
    # ------------------------------------------------------------------
    def call(self, *args: t.Any, **kwargs: t.Any) -> t.Any:
        """Count the call, then perform the configured action."""
        self.call_count += 1
        logger.debug(
            "Dispatching call %d to %s", self.call_count, self.signature()
        )
        return self.action.perform(self.name, args, kwargs)

    @property
    def fulfilled(self) -> bool:
        """Return ``True`` if the call count satisfies the configured range."""
        if self.min_calls is None and self.max_calls is None:
            return self.call_count > 0
        if self.min_calls is not None and self.call_count < self.min_calls:
            return False
        return self.max_calls is None or self.call_count <= self.max_calls

    def verify(self, collector: Collector | None = None) -> bool:
        """Report this expectation to *collector* and return its fulfilment."""
        ok = self.fulfilled
        if collector is not None:
            if ok:
                collector.ok(self)
            else:
                collector.fail(self)
        return ok

    def expected_range(self) -> str:
        """Return the configured range as shown in reports."""
        if self.min_calls is None and self.max_calls is None:
            return "n"
        if self.min_calls == self.max_calls:
            return str(self.min_calls)
        low = "" if self.min_calls is None else str(self.min_calls)
        high = "" if self.max_calls is None else str(self.max_calls)
        return f"{low}-{high}"

    def signature(self) -> str:
        """Return ``mock.operation(pattern)``."""
        if isinstance(self.pattern, AnyArgs):
            return render_call(self.mock.name, self.name, [ANYARGS])
        return render_call(
            self.mock.name, self.name, self.pattern, self.keyword_pattern
        )

    def __str__(self) -> str:
        """Return the report line body for this expectation."""
        return (
            f"EXPECTATION {self.signature()} "
            f"[{self.expected_range()}/{self.call_count}]"
        )


__all__ = ["Expectation"]
