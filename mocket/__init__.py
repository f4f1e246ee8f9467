"""Mock objects with declared expectations, argument matchers and verification.

Create a context per test, declare expectations on its mocks, exercise the
code under test and verify::

    ctx = create_context()
    store = ctx.create_mock("store")
    store.expects("get").passing("key").once().returning(42)
    assert store.get("key") == 42
    ctx.assert_mocks()

Installing the package registers a pytest plugin providing the
``mock_context`` fixture, which asserts its mocks when the test tears down.
Without installing, list ``"mocket.pytest_plugin"`` in ``pytest_plugins``.
"""

from __future__ import annotations

from .context import MockContext, create_context
from .equality import structural_equals
from .errors import (
    MockAssertionError,
    MocketError,
    StubbedCallError,
    VerificationError,
)
from .expectations import Expectation
from .matchers import (
    ANYARGS,
    ANYTHING,
    AnyArgs,
    Anything,
    Contains,
    Equals,
    IsA,
    Matcher,
    Predicate,
    Regex,
    StartsWith,
)
from .mock import Call, Mock
from .verifiers import Collector, ConsoleCollector, VerificationReport

__all__ = [
    "ANYARGS",
    "ANYTHING",
    "AnyArgs",
    "Anything",
    "Call",
    "Collector",
    "ConsoleCollector",
    "Contains",
    "Equals",
    "Expectation",
    "IsA",
    "Matcher",
    "Mock",
    "MockAssertionError",
    "MockContext",
    "MocketError",
    "Predicate",
    "Regex",
    "StartsWith",
    "StubbedCallError",
    "VerificationError",
    "VerificationReport",
    "create_context",
    "structural_equals",
]
