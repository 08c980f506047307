"""LLM backend - OpenAI, Anthropic, Gemini, Ollama or any OpenAI-compatible endpoint over HTTP."""

from typing import Optional

import requests

from .base import LLMSettings, Responder
from .providers import ProviderKind, classify, get_profile
from ...utils import setup_logger

CONNECTION_TROUBLE_REPLY = (
    "I'm sorry, I'm having trouble connecting to my AI service right now. Please try again later."
)
NOT_UNDERSTOOD_REPLY = "I didn't understand that. Could you please rephrase?"
GENERIC_ERROR_REPLY = "I'm sorry, something went wrong. Please try again."


class LLMBackend(Responder):
    """
    Send each message to the provider inferred from the configured model.

    The session's headers and base URL are set once here; to talk to another
    provider, build a new backend.
    """

    def __init__(self, settings: LLMSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.logger = setup_logger(self.__class__.__name__)

        self.provider = classify(settings.model, settings.fallback)
        self.profile = get_profile(self.provider)
        self.base_url = self.profile.base_url(settings)

        self.session = session or requests.Session()
        self.session.headers.update(self.profile.build_headers(settings.api_key))
        self.session.headers.update({'Accept': 'application/json'})

        if self.provider is ProviderKind.GEMINI and not settings.api_key:
            self.logger.warning("No API key configured for Gemini; requests will be rejected")

    @property
    def name(self) -> str:
        return f"{self.provider.value}:{self.settings.model}"

    @property
    def url(self) -> str:
        """Full endpoint URL for the configured model."""
        return self.base_url.rstrip('/') + '/' + self.profile.endpoint(self.settings.model)

    def respond(self, user_text: str) -> str:
        try:
            self.logger.info(f"Sending request to {self.provider.value} with model {self.settings.model}")
            return self._complete(user_text)
        except (requests.ConnectionError, requests.Timeout) as e:
            self.logger.error(f"{self.provider.value} request failed before a response: {e}")
            return CONNECTION_TROUBLE_REPLY
        except Exception as e:
            self.logger.error(f"Error occurred while calling LLM provider: {e}", exc_info=True)
            return GENERIC_ERROR_REPLY

    def _complete(self, user_text: str) -> str:
        """One POST, one parse. Raises on transport or decoding failures."""
        response = self.session.post(
            self.url,
            params=self.profile.build_params(self.settings.api_key) or None,
            json=self.profile.build_body(user_text, self.settings),
            timeout=self.settings.timeout,
        )

        if not response.ok:
            self.logger.error(
                f"{self.provider.value} API request failed with status: {response.status_code}"
            )
            return CONNECTION_TROUBLE_REPLY

        body = response.json()
        text = self.profile.extract_reply(body) if isinstance(body, dict) else None
        if text is None or not text.strip():
            self.logger.debug(f"{self.provider.value} response had no reply text")
            return NOT_UNDERSTOOD_REPLY

        return text.strip()
