"""pytest-bdd steps creating contexts, mocks and expectations."""

from __future__ import annotations

from pytest_bdd import given, parsers

from mocket import MockContext, create_context
from tests.steps._shared import CustomError, mock_named


@given("a mock context", target_fixture="ctx")
def create_mock_context() -> MockContext:
    """Create a fresh context verified explicitly by the scenario."""
    return create_context(verify_on_exit=False)


@given(parsers.cfparse('a mock named "{name}"'))
def create_named_mock(ctx: MockContext, name: str) -> None:
    """Register a mock called *name*."""
    ctx.create_mock(name)


@given(
    parsers.cfparse(
        '"{mock}" expects "{op}" passing "{text}" and {number:d} once '
        'returning "{value}"'
    )
)
def expect_once_returning(  # noqa: PLR0913 - one parameter per parsed field
    ctx: MockContext, mock: str, op: str, text: str, number: int, value: str
) -> None:
    """Declare a single expected call with a return value."""
    mock_named(ctx, mock).expects(op).passing(text, number).once().returning(value)


@given(parsers.cfparse('"{mock}" expects "{op}" raising a custom error'))
def expect_raising(ctx: MockContext, mock: str, op: str) -> None:
    """Declare an expectation raising :class:`CustomError`."""
    mock_named(ctx, mock).expects(op).raising(CustomError)


@given(parsers.cfparse('"{mock}" expects "{op}" returning "{first}" then "{second}"'))
def expect_returning_sequence(
    ctx: MockContext, mock: str, op: str, first: str, second: str
) -> None:
    """Declare an expectation returning two values in turn."""
    mock_named(ctx, mock).expects(op).returning(first, second)


@given(parsers.cfparse('"{mock}" expects "{op}" exactly {count:d} times'))
def expect_times(ctx: MockContext, mock: str, op: str, count: int) -> None:
    """Declare an expectation with an exact call count."""
    mock_named(ctx, mock).expects(op).times(count)


@given(parsers.cfparse('"{mock}" allows "{op}"'))
def allow_operation(ctx: MockContext, mock: str, op: str) -> None:
    """Install an operation that verification ignores."""
    mock_named(ctx, mock).allows(op)
