"""
Global pytest fixtures for the analytics_provider test suite.

Responsibilities:
    - Provide a fresh Analytics dispatcher and recording providers for direct testing
    - Provide a FastAPI TestClient built by the app factory around that dispatcher
    - Provide a provider that always fails, for isolation tests

Why an app factory?
    Using `create_app(analytics=...)` gives each test its own dispatcher and
    providers, eliminating cross-test state.

LLM Prompt Example:
    "Show how to structure pytest fixtures so dispatcher tests, provider tests and
    HTTP tests share the same in-memory doubles without leaking state."
"""

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from main import create_app
from analytics_provider.analytics.analytics import Analytics
from analytics_provider.analytics.base import BaseAnalyticsProvider
from analytics_provider.providers.memory import InMemoryProvider


class CallRecorder(BaseAnalyticsProvider):
    """Provider that appends (label, method, payload) to a shared call log."""

    def __init__(self, label: str, calls: List[Tuple]):
        self.label = label
        self.calls = calls

    def log_view(self, view) -> None:
        self.calls.append((self.label, "log_view", view))

    def log_event(self, event) -> None:
        self.calls.append((self.label, "log_event", event))

    def log_purchase(self, purchase) -> None:
        self.calls.append((self.label, "log_purchase", purchase))

    def set_user_property(self, value: Optional[str], key: str) -> None:
        self.calls.append((self.label, "set_user_property", (value, key)))


class ExplodingProvider(BaseAnalyticsProvider):
    """Provider whose every method raises; used to check isolation."""

    def log_view(self, view) -> None:
        raise RuntimeError("view backend down")

    def log_event(self, event) -> None:
        raise RuntimeError("event backend down")

    def log_purchase(self, purchase) -> None:
        raise RuntimeError("purchase backend down")

    def set_user_property(self, value: Optional[str], key: str) -> None:
        raise RuntimeError("property backend down")


@pytest.fixture
def analytics() -> Analytics:
    """Fresh, empty dispatcher."""
    return Analytics()


@pytest.fixture
def provider() -> InMemoryProvider:
    """Fresh in-memory recording provider."""
    return InMemoryProvider()


@pytest.fixture
def call_log() -> List[Tuple]:
    """Shared call log for CallRecorder providers."""
    return []


@pytest.fixture
def client(provider: InMemoryProvider) -> TestClient:
    """
    Provide a TestClient over an app whose dispatcher holds the `provider` fixture.

    LLM Prompt Example:
        "Demonstrate injecting a recording provider into an app factory so HTTP tests
        can assert on what was dispatched."
    """
    app = create_app(analytics=Analytics([provider]))
    return TestClient(app)


@pytest.fixture
def make_recorder(call_log: List[Tuple]):
    """Factory fixture: make_recorder("A") -> CallRecorder writing to `call_log`."""

    def _make(label: str) -> CallRecorder:
        return CallRecorder(label, call_log)

    return _make


@pytest.fixture
def exploding_provider() -> ExplodingProvider:
    """Provider that raises from every method."""
    return ExplodingProvider()
