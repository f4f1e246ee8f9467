"""Actions an expectation performs once a call has been matched."""

from __future__ import annotations

import dataclasses as dc
import typing as t


@dc.dataclass(slots=True)
class ReturnValues:
    """Return each value in turn, repeating the last once exhausted."""

    values: tuple[t.Any, ...] = ()
    _position: int = dc.field(default=0, repr=False)

    def perform(
        self, operation: str, args: tuple[t.Any, ...], kwargs: dict[str, t.Any]
    ) -> t.Any:
        """Return the next configured value."""
        del operation, args, kwargs
        if not self.values:
            return None
        value = self.values[min(self._position, len(self.values) - 1)]
        self._position += 1
        return value


@dc.dataclass(slots=True)
class Delegate:
    """Hand the call to a callable or to a same-named method on an object."""

    target: t.Any

    def perform(
        self, operation: str, args: tuple[t.Any, ...], kwargs: dict[str, t.Any]
    ) -> t.Any:
        """Invoke the target with the call's arguments."""
        if callable(self.target):
            return self.target(*args, **kwargs)
        method = getattr(self.target, operation)
        return method(*args, **kwargs)


@dc.dataclass(slots=True)
class Raise:
    """Raise the exception produced by ``factory``."""

    factory: t.Callable[[], BaseException]

    def perform(
        self, operation: str, args: tuple[t.Any, ...], kwargs: dict[str, t.Any]
    ) -> t.NoReturn:
        """Raise a fresh exception from ``factory``."""
        del operation, args, kwargs
        raise self.factory()


Action = ReturnValues | Delegate | Raise

__all__ = ["Action", "Delegate", "Raise", "ReturnValues"]
