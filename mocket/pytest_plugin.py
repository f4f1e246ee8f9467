"""Pytest plugin providing the ``mock_context`` fixture."""

from __future__ import annotations

import logging
import typing as t
from collections.abc import Mapping

import pytest

from .context import MockContext
from .errors import MockAssertionError

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("mocket")
    group.addoption(
        "--mocket-verify",
        action="store_true",
        dest="mocket_verify",
        default=None,
        help=(
            "Assert every mock of the mock_context fixture during teardown. "
            "Overrides the pytest.ini setting."
        ),
    )
    group.addoption(
        "--no-mocket-verify",
        action="store_false",
        dest="mocket_verify",
        default=None,
        help=(
            "Do not assert mocks of the mock_context fixture during teardown. "
            "Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "mocket_verify_on_teardown",
        "Assert every mock of the mock_context fixture during teardown.",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "mocket(verify: bool = True): override automatic mock verification "
            "for a single test."
        ),
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[t.Any]
) -> t.Generator[None, None, None]:
    """Attach each phase report to the item so teardown can inspect it."""
    del call
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def _verify_enabled(request: pytest.FixtureRequest) -> bool:
    """Resolve whether the fixture asserts its mocks on teardown.

    The first source that sets a value wins: the ``mocket`` marker, the
    fixture parameter, the command line, then the ini file.
    """
    for source in (_marker_setting, _param_setting, _option_setting):
        setting = source(request)
        if setting is not None:
            return setting
    return bool(request.config.getini("mocket_verify_on_teardown"))


def _marker_setting(request: pytest.FixtureRequest) -> bool | None:
    """Return ``verify`` from the closest ``mocket`` marker, if given."""
    marker = request.node.get_closest_marker("mocket")
    if marker is None:
        return None
    verify = marker.kwargs.get("verify")
    return None if verify is None else bool(verify)


def _param_setting(request: pytest.FixtureRequest) -> bool | None:
    """Return the setting passed through ``indirect`` parametrization.

    The parameter is either a ``bool`` or a mapping holding ``verify``.
    """
    param = getattr(request, "param", None)
    if param is None or isinstance(param, bool):
        return param
    if isinstance(param, Mapping) and "verify" in param:
        return bool(param["verify"])
    msg = (
        "mock_context expects a bool or a mapping with a 'verify' entry "
        f"as its parameter, got {param!r}"
    )
    raise TypeError(msg)


def _option_setting(request: pytest.FixtureRequest) -> bool | None:
    value = request.config.getoption("mocket_verify")
    return None if value is None else bool(value)


def _call_stage_failed(item: pytest.Item) -> bool:
    """Return ``True`` when the test body has already failed."""
    rep_call = getattr(item, "rep_call", None)
    return bool(rep_call and rep_call.failed)


@pytest.fixture
def mock_context(
    request: pytest.FixtureRequest,
) -> t.Generator[MockContext, None, None]:
    """Provide a :class:`MockContext` whose mocks are asserted at teardown."""
    context = MockContext(verify_on_exit=False)
    verify = _verify_enabled(request)
    yield context
    if not verify or _call_stage_failed(request.node):
        return
    try:
        context.assert_mocks()
    except MockAssertionError as err:
        logger.exception("Mock verification failed for %s", request.node.nodeid)
        pytest.fail(f"{type(err).__name__}:\n{err}", pytrace=False)
