"""Step definitions for mocket behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

from mocket import Mock, MockAssertionError, MockContext, VerificationReport


class CustomError(Exception):
    """Error configured through ``raising()`` in scenarios."""


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    mocks: MockContext
    result: object
    results: list[object]
    error: BaseException | None


def _mock(context: BehaveContext, name: str) -> Mock:
    for mock in context.mocks.mocks:
        if mock.name == name:
            return mock
    msg = f"no mock named {name!r} in context"
    raise AssertionError(msg)


@given("a mock context")
def step_create_context(context: BehaveContext) -> None:
    """Create a :class:`MockContext` verified explicitly by the scenario."""
    context.mocks = MockContext(verify_on_exit=False)


@given('a mock named "{name}"')
def step_create_mock(context: BehaveContext, name: str) -> None:
    """Register a mock called *name*."""
    context.mocks.create_mock(name)


@given(
    '"{mock}" expects "{op}" passing "{text}" and {number:d} once '
    'returning "{value}"'
)
def step_expect_once(  # noqa: PLR0913 - one parameter per parsed field
    context: BehaveContext, mock: str, op: str, text: str, number: int, value: str
) -> None:
    """Declare a single expected call with a return value."""
    _mock(context, mock).expects(op).passing(text, number).once().returning(value)


@given('"{mock}" expects "{op}" raising a custom error')
def step_expect_raising(context: BehaveContext, mock: str, op: str) -> None:
    """Declare an expectation raising :class:`CustomError`."""
    _mock(context, mock).expects(op).raising(CustomError)


@given('"{mock}" expects "{op}" returning "{first}" then "{second}"')
def step_expect_sequence(
    context: BehaveContext, mock: str, op: str, first: str, second: str
) -> None:
    """Declare an expectation returning two values in turn."""
    _mock(context, mock).expects(op).returning(first, second)


@given('"{mock}" expects "{op}" exactly {count:d} times')
def step_expect_times(context: BehaveContext, mock: str, op: str, count: int) -> None:
    """Declare an expectation with an exact call count."""
    _mock(context, mock).expects(op).times(count)


@given('"{mock}" allows "{op}"')
def step_allow(context: BehaveContext, mock: str, op: str) -> None:
    """Install an operation that verification ignores."""
    _mock(context, mock).allows(op)


@when('I call "{op}" on "{mock}" with "{text}" and {number:d}')
def step_call_with_arguments(
    context: BehaveContext, op: str, mock: str, text: str, number: int
) -> None:
    """Invoke *op* with a string and a number."""
    context.result = _mock(context, mock).invoke(op, text, number)


@when('I call "{op}" on "{mock}" {count:d} times')
def step_call_repeatedly(
    context: BehaveContext, op: str, mock: str, count: int
) -> None:
    """Invoke *op* without arguments *count* times."""
    target = _mock(context, mock)
    context.results = [target.invoke(op) for _ in range(count)]


@when('I call "{op}" on "{mock}" expecting an error')
def step_call_expecting_error(context: BehaveContext, op: str, mock: str) -> None:
    """Invoke *op* and keep the raised error."""
    context.error = None
    try:
        _mock(context, mock).invoke(op)
    except Exception as err:  # noqa: BLE001 - the scenario inspects the error
        context.error = err


@then('the call should return "{text}"')
def step_check_result(context: BehaveContext, text: str) -> None:
    """Ensure the last call returned *text*."""
    assert context.result == text  # noqa: S101


@then('the results should be "{values}"')
def step_check_results(context: BehaveContext, values: str) -> None:
    """Ensure repeated calls returned the comma-separated *values*."""
    assert context.results == values.split(",")  # noqa: S101


@then("the error should be the custom error")
def step_check_error(context: BehaveContext) -> None:
    """Ensure the configured error type was raised."""
    assert isinstance(context.error, CustomError)  # noqa: S101


@then("the mocks should verify")
def step_mocks_verify(context: BehaveContext) -> None:
    """Assert the context verifies."""
    context.mocks.assert_mocks()


@then("the mocks should not verify")
def step_mocks_do_not_verify(context: BehaveContext) -> None:
    """Assert the context fails verification."""
    try:
        context.mocks.assert_mocks()
    except MockAssertionError:
        return
    msg = "assert_mocks() did not raise"
    raise AssertionError(msg)


@then('the report should contain "{line}"')
def step_report_contains(context: BehaveContext, line: str) -> None:
    """Assert the verification report includes *line*."""
    report = VerificationReport()
    context.mocks.verify_mocks(report)
    assert line in report.lines()  # noqa: S101
