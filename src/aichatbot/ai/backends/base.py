"""Base class for responders - plug-and-play with hosted LLMs, Ollama or the offline mock."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .providers import FallbackPolicy

DEFAULT_SYSTEM_PROMPT = "You are a helpful AI assistant. Provide concise and helpful responses."


@dataclass(frozen=True)
class LLMSettings:
    """Request parameters, fixed for the lifetime of a backend."""

    model: str
    api_key: str = ""
    max_tokens: int = 150
    temperature: float = 0.7
    base_url: str = "https://api.openai.com/v1/"
    ollama_url: str = "http://localhost:11434/"
    fallback: FallbackPolicy = FallbackPolicy.CUSTOM
    timeout: int = 30
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


class Responder(ABC):
    """Anything that turns one line of user text into one reply."""

    name = "responder"

    @abstractmethod
    def respond(self, user_text: str) -> str:
        """
        Produce a reply for a single user message.

        Args:
            user_text: Raw line typed by the user

        Returns:
            Reply text to print
        """
        pass
