"""AI module for the chatbot. Plug-and-play: OpenAI, Anthropic, Gemini, Ollama (local) or offline mock."""

from .backends import (
    FallbackPolicy,
    LLMBackend,
    LLMSettings,
    MockBackend,
    ProviderKind,
    Responder,
    classify,
    get_responder,
    is_placeholder_key,
)

__all__ = [
    "FallbackPolicy",
    "LLMBackend",
    "LLMSettings",
    "MockBackend",
    "ProviderKind",
    "Responder",
    "classify",
    "get_responder",
    "is_placeholder_key",
]
