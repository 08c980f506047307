"""Tests for Config validation and settings construction."""

import pytest

from aichatbot.ai.backends import FallbackPolicy, LLMSettings
from aichatbot.utils import ChatSettings, Config


@pytest.fixture
def config(monkeypatch):
    """Config with a known baseline, restored after the test."""
    monkeypatch.setattr(Config, "LLM_MODEL", "gpt-3.5-turbo")
    monkeypatch.setattr(Config, "LLM_API_KEY", "")
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "")
    monkeypatch.setattr(Config, "ANTHROPIC_API_KEY", "")
    monkeypatch.setattr(Config, "GEMINI_API_KEY", "")
    monkeypatch.setattr(Config, "LLM_MAX_TOKENS", 150)
    monkeypatch.setattr(Config, "LLM_TEMPERATURE", 0.7)
    monkeypatch.setattr(Config, "LLM_REQUEST_TIMEOUT", 30)
    monkeypatch.setattr(Config, "LLM_FALLBACK", "custom")
    return Config


def test_validate_accepts_defaults(config):
    assert config.validate() is True


@pytest.mark.parametrize("attr,value", [
    ("LLM_MAX_TOKENS", 0),
    ("LLM_TEMPERATURE", 2.5),
    ("LLM_REQUEST_TIMEOUT", -1),
    ("LLM_FALLBACK", "anthropic"),
])
def test_validate_rejects_bad_values(config, monkeypatch, attr, value):
    monkeypatch.setattr(Config, attr, value)
    with pytest.raises(ValueError, match=attr):
        config.validate()


def test_validate_checks_overrides_instead_of_env(config, monkeypatch):
    monkeypatch.setattr(Config, "LLM_FALLBACK", "nowhere")

    assert config.validate(fallback="openai") is True
    with pytest.raises(ValueError, match="LLM_TEMPERATURE"):
        config.validate(fallback="custom", temperature=3.0)


def test_llm_settings_defaults(config):
    settings = config.llm_settings()

    assert isinstance(settings, LLMSettings)
    assert settings.model == "gpt-3.5-turbo"
    assert settings.api_key == ""
    assert settings.max_tokens == 150
    assert settings.temperature == 0.7
    assert settings.fallback is FallbackPolicy.CUSTOM


def test_llm_settings_overrides(config):
    settings = config.llm_settings(model="mistral:7b", api_key="", temperature=0.1, fallback="openai")

    assert settings.model == "mistral:7b"
    assert settings.temperature == 0.1
    assert settings.fallback is FallbackPolicy.OPENAI
    # None means "keep the configured value"
    assert config.llm_settings(max_tokens=None).max_tokens == 150


def test_provider_specific_key_used_when_generic_key_empty(config, monkeypatch):
    monkeypatch.setattr(Config, "ANTHROPIC_API_KEY", "sk-ant")
    monkeypatch.setattr(Config, "GEMINI_API_KEY", "g-key")

    assert config.llm_settings(model="claude-3-haiku").api_key == "sk-ant"
    assert config.llm_settings(model="gemini-1.5-flash").api_key == "g-key"
    assert config.llm_settings(model="gpt-4").api_key == ""


def test_generic_key_wins(config, monkeypatch):
    monkeypatch.setattr(Config, "LLM_API_KEY", "generic")
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "specific")

    assert config.llm_settings(model="gpt-4").api_key == "generic"


def test_settings_are_immutable(config):
    settings = config.llm_settings()
    with pytest.raises(Exception):
        settings.model = "other"


def test_chat_settings(config):
    assert isinstance(config.chat_settings(), ChatSettings)
