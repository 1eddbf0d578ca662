"""Shared fixtures for tests."""

import threading

import pytest

from edgeview.registry.toggles import ToggleRegistry


class FakeRenderer:
    """Renderer that echoes the source back as bytes."""

    def __init__(self, fail_on: str | None = None):
        self.fail_on = fail_on
        self.calls: list[str] = []

    def render(self, source: str) -> bytes:
        self.calls.append(source)
        if self.fail_on is not None and self.fail_on in source:
            raise RuntimeError(f"cannot render {self.fail_on}")
        return source.encode("utf-8")


class GatedRenderer:
    """Renderer that blocks each source until its gate is opened."""

    def __init__(self, *sources: str):
        self.gates = {source: threading.Event() for source in sources}
        self.started = {source: threading.Event() for source in sources}

    def release(self, source: str) -> None:
        self.gates[source].set()

    def render(self, source: str) -> bytes:
        self.started[source].set()
        if not self.gates[source].wait(timeout=5):
            raise TimeoutError(f"gate for {source!r} never opened")
        return source.encode("utf-8")


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    """Return a renderer that always succeeds."""
    return FakeRenderer()


@pytest.fixture
def failing_renderer() -> FakeRenderer:
    """Return a renderer that fails on sources mentioning Broken."""
    return FakeRenderer(fail_on="Broken")


@pytest.fixture
def gated_renderer_factory():
    """Return a factory for renderers with per-source gates."""
    return GatedRenderer


@pytest.fixture
def chain_text() -> str:
    """Return a two-line relationship chain."""
    return "A -> B\nB -> C"


@pytest.fixture
def services_text() -> str:
    """Return a realistic service dependency list."""
    return """User -> AuthService
AuthService -> Database
User -> PaymentGateway
PaymentGateway -> FraudDetection
FraudDetection -> Database
AuthService -> LoggingService"""


@pytest.fixture
def chain_registry(chain_text) -> ToggleRegistry:
    """Return a registry seeded from the chain text."""
    registry = ToggleRegistry()
    registry.seed(chain_text)
    return registry
