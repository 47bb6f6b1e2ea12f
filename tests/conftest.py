"""
tests/conftest.py

Configuration for pytest.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from urlsucker.url_discovery.actions import HostActions
from urlsucker.url_discovery.models import OutboundRequest, RequestContext


class FakeHostActions(HostActions):
    """Records every request handed to the host; optionally fails."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.fail_with = fail_with
        self.repeater_calls: list[tuple[OutboundRequest, str]] = []
        self.organizer_calls: list[OutboundRequest] = []

    def send_to_repeater(self, request: OutboundRequest, label: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.repeater_calls.append((request, label))

    def send_to_organizer(self, request: OutboundRequest) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.organizer_calls.append(request)


@pytest.fixture(scope="session")
def tests_root() -> Path:
    """
    Root directory for tests.
    Returns:
        Path to the tests directory.
    """
    return Path(__file__).parent.resolve()


@pytest.fixture(scope="session")
def data_dir(tests_root: Path) -> Path:
    """
    Directory containing test data files.
    Returns:
        Path to tests/data.
    """
    d = tests_root / "data"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture(scope="session")
def input_data_dir(data_dir: Path) -> Path:
    """
    Directory containing input test data files.
    Returns:
        Path to tests/data/input.
    """
    d = data_dir / "input"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture
def make_context() -> Callable[..., RequestContext]:
    """
    Factory fixture to create a RequestContext with hardcoded defaults.

    Usage:
        ctx = make_context()                       # https://shop.test/app.js
        ctx = make_context(secure=False, port=8080)
    """
    def factory(**kwargs: Any) -> RequestContext:
        defaults: dict[str, Any] = {
            "secure": True,
            "host": "shop.test",
            "path": "/app.js",
        }
        return RequestContext(**{**defaults, **kwargs})
    return factory


@pytest.fixture
def fake_host_actions() -> FakeHostActions:
    """Host actions that record calls instead of talking to a host."""
    return FakeHostActions()


@pytest.fixture
def failing_host_actions() -> FakeHostActions:
    """Host actions whose every call raises."""
    return FakeHostActions(fail_with=RuntimeError("host unavailable"))
