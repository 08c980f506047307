"""
Provider classification and per-provider wire formats.

One ProviderProfile per provider kind: endpoint, auth headers, query string,
request body and where the reply sits in the response JSON.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

JSON = Dict[str, Any]

OPENAI_BASE_URL = "https://api.openai.com/v1/"
ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1/"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
ANTHROPIC_VERSION = "2023-06-01"

OLLAMA_PREFIXES = ("llama", "mistral", "deepseek", "qwen", "stable-code", "gpt-oss")


class ProviderKind(Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    OLLAMA = "ollama"
    CUSTOM = "custom"


class FallbackPolicy(Enum):
    """Where model names that match no known provider are sent."""

    CUSTOM = "custom"   # configured base URL, OpenAI-compatible payload
    OPENAI = "openai"   # straight to api.openai.com


def classify(model: str, fallback: FallbackPolicy = FallbackPolicy.CUSTOM) -> ProviderKind:
    """
    Infer the provider from a model name. Order matters: the first rule wins.

    Args:
        model: Model identifier, e.g. "gpt-4", "claude-3-sonnet-20240229", "llama3.1:8b"
        fallback: Policy for names no rule matches

    Returns:
        ProviderKind (never None)
    """
    name = (model or "").lower()

    if name.startswith(("gpt-", "o1-")):
        return ProviderKind.OPENAI
    if name.startswith("claude-"):
        return ProviderKind.ANTHROPIC
    if name.startswith("gemini-"):
        return ProviderKind.GEMINI
    if name.startswith(OLLAMA_PREFIXES) or "local" in name or ":" in name:
        return ProviderKind.OLLAMA

    if fallback is FallbackPolicy.OPENAI:
        return ProviderKind.OPENAI
    return ProviderKind.CUSTOM


# Request bodies

def _chat_messages(user_text: str, settings) -> List[JSON]:
    return [
        {"role": "system", "content": settings.system_prompt},
        {"role": "user", "content": user_text},
    ]


def _openai_body(user_text: str, settings) -> JSON:
    return {
        "model": settings.model,
        "messages": _chat_messages(user_text, settings),
        "max_tokens": settings.max_tokens,
        "temperature": settings.temperature,
    }


def _anthropic_body(user_text: str, settings) -> JSON:
    return {
        "model": settings.model,
        "max_tokens": settings.max_tokens,
        "temperature": settings.temperature,
        "messages": [{"role": "user", "content": user_text}],
    }


def _gemini_body(user_text: str, settings) -> JSON:
    # Gemini has no system role here; the instruction is prefixed to the text.
    return {
        "contents": [
            {"parts": [{"text": f"{settings.system_prompt} User: {user_text}"}]}
        ],
        "generationConfig": {
            "temperature": settings.temperature,
            "maxOutputTokens": settings.max_tokens,
            "topP": 0.8,
            "topK": 10,
        },
    }


def _ollama_body(user_text: str, settings) -> JSON:
    return {
        "model": settings.model,
        "messages": _chat_messages(user_text, settings),
        "stream": False,
        "options": {
            "temperature": settings.temperature,
            "num_predict": settings.max_tokens,
        },
    }


# Reply extraction. Each returns None when the expected field is missing.

def _first(items: Any) -> Optional[JSON]:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _openai_reply(body: JSON) -> Optional[str]:
    choice = _first(body.get("choices"))
    if choice is None:
        return None
    message = choice.get("message") or {}
    return _text(message.get("content")) if isinstance(message, dict) else None


def _anthropic_reply(body: JSON) -> Optional[str]:
    block = _first(body.get("content"))
    return _text(block.get("text")) if block else None


def _gemini_reply(body: JSON) -> Optional[str]:
    candidate = _first(body.get("candidates"))
    if candidate is None:
        return None
    content = candidate.get("content") or {}
    part = _first(content.get("parts")) if isinstance(content, dict) else None
    return _text(part.get("text")) if part else None


def _ollama_reply(body: JSON) -> Optional[str]:
    message = body.get("message")
    return _text(message.get("content")) if isinstance(message, dict) else None


# Authentication

def _bearer_headers(api_key: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"} if api_key else {}


def _anthropic_headers(api_key: str) -> Dict[str, str]:
    if not api_key:
        return {}
    return {"x-api-key": api_key, "anthropic-version": ANTHROPIC_VERSION}


def _no_headers(api_key: str) -> Dict[str, str]:
    return {}


def _no_params(api_key: str) -> Dict[str, str]:
    return {}


@dataclass(frozen=True)
class ProviderProfile:
    """Everything that differs between providers for one chat request."""

    kind: ProviderKind
    base_url: Callable[[Any], str]                 # settings -> base URL
    endpoint: Callable[[str], str]                 # model -> path relative to base URL
    build_headers: Callable[[str], Dict[str, str]]  # api key -> default headers
    build_params: Callable[[str], Dict[str, str]]   # api key -> query string
    build_body: Callable[[str, Any], JSON]         # (user text, settings) -> JSON body
    extract_reply: Callable[[JSON], Optional[str]]  # response JSON -> reply or None


PROFILES: Dict[ProviderKind, ProviderProfile] = {
    ProviderKind.OPENAI: ProviderProfile(
        kind=ProviderKind.OPENAI,
        base_url=lambda settings: OPENAI_BASE_URL,
        endpoint=lambda model: "chat/completions",
        build_headers=_bearer_headers,
        build_params=_no_params,
        build_body=_openai_body,
        extract_reply=_openai_reply,
    ),
    ProviderKind.ANTHROPIC: ProviderProfile(
        kind=ProviderKind.ANTHROPIC,
        base_url=lambda settings: ANTHROPIC_BASE_URL,
        endpoint=lambda model: "messages",
        build_headers=_anthropic_headers,
        build_params=_no_params,
        build_body=_anthropic_body,
        extract_reply=_anthropic_reply,
    ),
    ProviderKind.GEMINI: ProviderProfile(
        kind=ProviderKind.GEMINI,
        base_url=lambda settings: GEMINI_BASE_URL,
        endpoint=lambda model: f"models/{model}:generateContent",
        build_headers=_no_headers,
        build_params=lambda api_key: {"key": api_key},
        build_body=_gemini_body,
        extract_reply=_gemini_reply,
    ),
    ProviderKind.OLLAMA: ProviderProfile(
        kind=ProviderKind.OLLAMA,
        base_url=lambda settings: settings.ollama_url,
        endpoint=lambda model: "api/chat",
        build_headers=_no_headers,
        build_params=_no_params,
        build_body=_ollama_body,
        extract_reply=_ollama_reply,
    ),
    ProviderKind.CUSTOM: ProviderProfile(
        kind=ProviderKind.CUSTOM,
        base_url=lambda settings: settings.base_url or OPENAI_BASE_URL,
        endpoint=lambda model: "chat/completions",
        build_headers=_bearer_headers,
        build_params=_no_params,
        build_body=_openai_body,
        extract_reply=_openai_reply,
    ),
}


def get_profile(kind: ProviderKind) -> ProviderProfile:
    """Return the wire profile for a provider kind."""
    return PROFILES[kind]
