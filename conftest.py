"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest

from mocket import MockContext

pytest_plugins = ("mocket.pytest_plugin", "pytester")


@pytest.fixture
def context() -> MockContext:
    """Return a context that is verified explicitly by each test."""
    return MockContext(verify_on_exit=False)


@pytest.fixture(autouse=True)
def mocket_debug_logging(
    caplog: pytest.LogCaptureFixture,
) -> t.Generator[None, None, None]:
    """Capture library debug records so failing tests show dispatch details."""
    with caplog.at_level(logging.DEBUG, logger="mocket"):
        yield
