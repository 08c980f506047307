"""Tests for model-name classification and provider wire profiles."""

import pytest

from aichatbot.ai.backends import LLMSettings
from aichatbot.ai.backends.providers import (
    FallbackPolicy,
    ProviderKind,
    classify,
    get_profile,
)


@pytest.mark.parametrize("model,expected", [
    ("gpt-4", ProviderKind.OPENAI),
    ("GPT-4o-mini", ProviderKind.OPENAI),
    ("o1-preview", ProviderKind.OPENAI),
    ("claude-3-sonnet-20240229", ProviderKind.ANTHROPIC),
    ("Claude-3-haiku", ProviderKind.ANTHROPIC),
    ("gemini-1.5-flash", ProviderKind.GEMINI),
    ("llama3.1:8b", ProviderKind.OLLAMA),
    ("mistral:7b", ProviderKind.OLLAMA),
    ("deepseek-coder", ProviderKind.OLLAMA),
    ("qwen2.5", ProviderKind.OLLAMA),
    ("stable-code", ProviderKind.OLLAMA),
    ("my-local-model", ProviderKind.OLLAMA),
    ("phi3:mini", ProviderKind.OLLAMA),
    ("foo-bar", ProviderKind.CUSTOM),
    ("", ProviderKind.CUSTOM),
])
def test_classify_examples(model, expected):
    assert classify(model) is expected


def test_prefix_rules_take_priority_over_ollama_rules():
    # "gpt-" is checked before the Ollama "gpt-oss" prefix
    assert classify("gpt-oss:20b") is ProviderKind.OPENAI
    assert classify("claude-local:1") is ProviderKind.ANTHROPIC


def test_unmatched_model_fallback_policies():
    assert classify("foo-bar", FallbackPolicy.CUSTOM) is ProviderKind.CUSTOM
    assert classify("foo-bar", FallbackPolicy.OPENAI) is ProviderKind.OPENAI
    # Policy only affects names no rule matches
    assert classify("llama3", FallbackPolicy.OPENAI) is ProviderKind.OLLAMA


@pytest.mark.parametrize("model", ["gpt-4", "mixtral", "x", "LOCAL", "a:b", "🤖", " claude-3"])
def test_classify_is_deterministic_and_total(model):
    first = classify(model)
    assert first is classify(model)
    assert first in set(ProviderKind)


def test_openai_body_shape():
    settings = LLMSettings(model="gpt-4", max_tokens=150, temperature=0.7)
    body = get_profile(ProviderKind.OPENAI).build_body("hi", settings)

    assert body == {
        "model": "gpt-4",
        "messages": [
            {"role": "system", "content": settings.system_prompt},
            {"role": "user", "content": "hi"},
        ],
        "max_tokens": 150,
        "temperature": 0.7,
    }


def test_anthropic_body_shape():
    settings = LLMSettings(model="claude-3-sonnet-20240229", max_tokens=150, temperature=0.7)
    body = get_profile(ProviderKind.ANTHROPIC).build_body("hi", settings)

    assert body == {
        "model": "claude-3-sonnet-20240229",
        "max_tokens": 150,
        "temperature": 0.7,
        "messages": [{"role": "user", "content": "hi"}],
    }


def test_gemini_body_shape():
    settings = LLMSettings(model="gemini-1.5-flash", max_tokens=64, temperature=0.2)
    body = get_profile(ProviderKind.GEMINI).build_body("hi", settings)

    assert body == {
        "contents": [
            {"parts": [{"text": f"{settings.system_prompt} User: hi"}]}
        ],
        "generationConfig": {
            "temperature": 0.2,
            "maxOutputTokens": 64,
            "topP": 0.8,
            "topK": 10,
        },
    }


def test_ollama_body_shape():
    settings = LLMSettings(model="llama3.1:8b", max_tokens=99, temperature=0.1)
    body = get_profile(ProviderKind.OLLAMA).build_body("hi", settings)

    assert body == {
        "model": "llama3.1:8b",
        "messages": [
            {"role": "system", "content": settings.system_prompt},
            {"role": "user", "content": "hi"},
        ],
        "stream": False,
        "options": {"temperature": 0.1, "num_predict": 99},
    }


def test_headers_per_provider():
    assert get_profile(ProviderKind.OPENAI).build_headers("k") == {"Authorization": "Bearer k"}
    assert get_profile(ProviderKind.OPENAI).build_headers("") == {}
    assert get_profile(ProviderKind.ANTHROPIC).build_headers("k") == {
        "x-api-key": "k",
        "anthropic-version": "2023-06-01",
    }
    assert get_profile(ProviderKind.GEMINI).build_headers("k") == {}
    assert get_profile(ProviderKind.GEMINI).build_params("k") == {"key": "k"}
    assert get_profile(ProviderKind.OLLAMA).build_headers("k") == {}


@pytest.mark.parametrize("kind,body,expected", [
    (ProviderKind.OPENAI, {"choices": [{"message": {"content": "a"}}]}, "a"),
    (ProviderKind.OPENAI, {"choices": []}, None),
    (ProviderKind.OPENAI, {}, None),
    (ProviderKind.ANTHROPIC, {"content": [{"type": "text", "text": "b"}]}, "b"),
    (ProviderKind.ANTHROPIC, {"content": []}, None),
    (ProviderKind.GEMINI, {"candidates": [{"content": {"parts": [{"text": "c"}]}}]}, "c"),
    (ProviderKind.GEMINI, {"candidates": [{"finishReason": "SAFETY"}]}, None),
    (ProviderKind.OLLAMA, {"message": {"role": "assistant", "content": "d"}}, "d"),
    (ProviderKind.OLLAMA, {"done": True}, None),
])
def test_reply_extraction(kind, body, expected):
    assert get_profile(kind).extract_reply(body) == expected
