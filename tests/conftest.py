"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from mailsmith.main import app
from mailsmith import main as app_main
from mailsmith.routers.drafts import get_llm_service
from mailsmith.services.llm import LLMService

from tests.llm_helpers import FakeGroqClient, CANNED_EMAIL_TEXT

MODEL = "llama-3.3-70b-versatile"


@pytest.fixture(autouse=True)
def no_real_provider(monkeypatch):
    """Keep the app lifespan from building a real Groq client."""
    monkeypatch.setattr(app_main.settings, "groq_api_key", "", raising=False)


@pytest.fixture
def fake_llm():
    """Fake provider answering with a well-formed email."""
    return FakeGroqClient(CANNED_EMAIL_TEXT)


@pytest.fixture
def make_client():
    """Build a TestClient whose drafting service wraps the given fake client."""
    def _make(llm_client) -> TestClient:
        service = LLMService(client=llm_client, model=MODEL)
        app.dependency_overrides[get_llm_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, fake_llm):
    """TestClient backed by the default fake provider."""
    return make_client(fake_llm)
