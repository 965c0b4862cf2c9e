"""
Pytest configuration and fixtures for GenerationGap tests.
"""
import pytest
from fastapi.testclient import TestClient

from generationgap.deps import get_llm
from generationgap.families import FamilyStore
from generationgap.main import create_app
from generationgap.state import SessionStore


class FakeCompletion:
    """Stands in for the completion gateway and records what it was sent."""

    def __init__(self, reply="I hear you.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def __call__(self, messages, **kwargs):
        self.calls.append({"messages": [dict(m) for m in messages], **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def session_store():
    """Provide a SessionStore with a small ceiling."""
    return SessionStore("You are a test therapist.", ceiling=2)


@pytest.fixture
def family_store():
    return FamilyStore()


@pytest.fixture
def fake_llm():
    return FakeCompletion()


@pytest.fixture
def app(fake_llm):
    app = create_app(history_ceiling=4)
    app.dependency_overrides[get_llm] = lambda: fake_llm
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
