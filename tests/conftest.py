import pytest

from data_agent.core.config import settings


@pytest.fixture
def sample_provider(monkeypatch):
    """Route every dispatch to the offline sample provider."""
    monkeypatch.setattr(settings, "LLM_PROVIDER", "sample")
    return settings


@pytest.fixture
def gemini_without_key(monkeypatch):
    monkeypatch.setattr(settings, "LLM_PROVIDER", "gemini")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    return settings
