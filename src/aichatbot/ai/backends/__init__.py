"""Modular responders - hosted LLMs, Ollama (local) or the offline mock. Plug-and-play.

The provider is inferred from the model name (see providers.classify). To add a
new provider:
1. Add a ProviderKind and a ProviderProfile in providers.py
2. Extend classify() with the model-name rule
"""

from .base import LLMSettings, Responder
from .llm_backend import LLMBackend
from .mock_backend import MockBackend
from .providers import FallbackPolicy, ProviderKind, classify
from ...utils import setup_logger

logger = setup_logger(__name__)

PLACEHOLDER_KEYS = {
    "your-openai-api-key-here",
    "your-gemini-api-key-here",
    "your-anthropic-api-key-here",
    "your-api-key-here",
    "changeme",
}


def is_placeholder_key(api_key: str) -> bool:
    """True for template values like 'your-openai-api-key-here' or 'sk-...'."""
    key = (api_key or "").strip().lower()
    if not key:
        return False
    return (
        key in PLACEHOLDER_KEYS
        or key.startswith(("your-", "your_"))
        or key.endswith(("-here", "_here"))
        or "..." in key
    )


def get_responder(settings: LLMSettings, force_mock: bool = False) -> Responder:
    """
    Factory: pick the responder once at startup.

    Ollama models need no key. Everything else needs a real (non-placeholder)
    key, otherwise the offline mock is used.

    Returns:
        Responder instance
    """
    if force_mock:
        logger.info("Mock responder forced")
        return MockBackend()

    provider = classify(settings.model, settings.fallback)
    has_key = bool(settings.api_key.strip()) and not is_placeholder_key(settings.api_key)

    if provider is ProviderKind.OLLAMA or has_key:
        logger.info(f"Using {provider.value} backend with model {settings.model}")
        return LLMBackend(settings)

    logger.warning(
        f"No API key configured for {provider.value} model {settings.model}; using mock responder. "
        "Set LLM_API_KEY in .env to talk to a real model."
    )
    return MockBackend()


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
