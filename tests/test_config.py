"""
Tests for environment-driven settings.
"""

from pathlib import Path

import pytest

from landingwise.config import DEFAULT_MODELS, Settings

ENV_VARS = [
    "LLM_PROVIDER",
    "LLM_MODEL",
    "LLM_TEMPERATURE",
    "LLM_MAX_TOKENS",
    "LLM_REQUEST_TIMEOUT",
    "OPENROUTER_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENROUTER_BASE_URL",
    "APP_URL",
    "APP_TITLE",
    "LANDINGWISE_DATA_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "openrouter")
    settings = Settings.from_env()

    assert settings.provider == "openrouter"
    assert settings.model == DEFAULT_MODELS["openrouter"]
    assert settings.temperature == 0.7
    assert settings.max_tokens == 4000
    assert settings.api_key is None
    assert settings.app_title == "LandingWise"


def test_provider_specific_key_and_model(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "Anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")

    settings = Settings.from_env()

    assert settings.provider == "anthropic"
    assert settings.api_key == "sk-ant-test"
    assert settings.model == DEFAULT_MODELS["anthropic"]


def test_overrides(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "openai/gpt-4o")
    monkeypatch.setenv("LLM_TEMPERATURE", "0.2")
    monkeypatch.setenv("LLM_MAX_TOKENS", "2048")
    monkeypatch.setenv("LANDINGWISE_DATA_DIR", "/srv/pages")

    settings = Settings.from_env()

    assert settings.model == "openai/gpt-4o"
    assert settings.temperature == 0.2
    assert settings.max_tokens == 2048
    assert settings.data_dir == Path("/srv/pages")


def test_unsupported_provider(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "mystery")

    with pytest.raises(ValueError, match="Unsupported provider"):
        Settings.from_env()
