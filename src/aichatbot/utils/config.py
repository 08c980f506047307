"""
Configuration loader for AI ChatBot.
Loads environment variables and provides access to configuration settings.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class ChatSettings:
    """Console-facing text shown by the conversation loop."""

    bot_name: str = 'AI Assistant'
    welcome_message: str = "Hello! I'm your AI assistant. How can I help you today?"
    goodbye_message: str = 'Goodbye! Have a great day!'


class Config:
    """Configuration settings loaded from environment variables."""

    # Chat session
    BOT_NAME: str = os.getenv('BOT_NAME', 'AI Assistant')
    WELCOME_MESSAGE: str = os.getenv(
        'WELCOME_MESSAGE', "Hello! I'm your AI assistant. How can I help you today?"
    )
    GOODBYE_MESSAGE: str = os.getenv('GOODBYE_MESSAGE', 'Goodbye! Have a great day!')

    # AI / LLM (provider is inferred from the model name)
    LLM_MODEL: str = os.getenv('LLM_MODEL', 'gpt-3.5-turbo')
    LLM_API_KEY: str = os.getenv('LLM_API_KEY', '')
    LLM_MAX_TOKENS: int = int(os.getenv('LLM_MAX_TOKENS', '150'))
    LLM_TEMPERATURE: float = float(os.getenv('LLM_TEMPERATURE', '0.7'))
    # Only used for models that don't match a known provider (LLM_FALLBACK=custom)
    LLM_BASE_URL: str = os.getenv('LLM_BASE_URL', 'https://api.openai.com/v1/')
    OLLAMA_URL: str = os.getenv('OLLAMA_URL', 'http://localhost:11434/')
    LLM_FALLBACK: str = os.getenv('LLM_FALLBACK', 'custom').lower()
    LLM_REQUEST_TIMEOUT: int = int(os.getenv('LLM_REQUEST_TIMEOUT', '30'))
    LLM_SYSTEM_PROMPT: str = os.getenv(
        'LLM_SYSTEM_PROMPT',
        'You are a helpful AI assistant. Provide concise and helpful responses.'
    )

    # Provider-specific keys, used when LLM_API_KEY is empty
    OPENAI_API_KEY: str = os.getenv('OPENAI_API_KEY', '')
    ANTHROPIC_API_KEY: str = os.getenv('ANTHROPIC_API_KEY', '')
    GEMINI_API_KEY: str = os.getenv('GEMINI_API_KEY', '')

    # Offline responder
    MOCK_DELAY_SECONDS: float = float(os.getenv('MOCK_DELAY_SECONDS', '0.5'))
    THINKING_INTERVAL_SECONDS: float = float(os.getenv('THINKING_INTERVAL_SECONDS', '0.5'))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    # Chat output goes to stdout, so only warnings reach the console by default
    LOG_CONSOLE_LEVEL: str = os.getenv('LOG_CONSOLE_LEVEL', 'WARNING')
    LOG_FILE: str = os.getenv('LOG_FILE', 'logs/chatbot.log')
    LOG_MAX_BYTES: int = int(os.getenv('LOG_MAX_BYTES', '10485760'))
    LOG_BACKUP_COUNT: int = int(os.getenv('LOG_BACKUP_COUNT', '5'))
    LOG_FORMAT: str = os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    LOG_DATE_FORMAT: str = os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S')

    FALLBACK_CHOICES = ('custom', 'openai')

    @classmethod
    def validate(
        cls,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout: Optional[int] = None,
        fallback: Optional[str] = None,
    ) -> bool:
        """
        Validate LLM request settings, with any command-line overrides applied.

        Args:
            max_tokens: Overrides LLM_MAX_TOKENS when given
            temperature: Overrides LLM_TEMPERATURE when given
            timeout: Overrides LLM_REQUEST_TIMEOUT when given
            fallback: Overrides LLM_FALLBACK when given

        Returns:
            True if configuration is valid, raises ValueError otherwise
        """
        max_tokens = cls.LLM_MAX_TOKENS if max_tokens is None else max_tokens
        temperature = cls.LLM_TEMPERATURE if temperature is None else temperature
        timeout = cls.LLM_REQUEST_TIMEOUT if timeout is None else timeout
        fallback = (fallback or cls.LLM_FALLBACK).lower()

        problems = []
        if max_tokens <= 0:
            problems.append(f"LLM_MAX_TOKENS must be positive (got {max_tokens})")
        if not 0.0 <= temperature <= 2.0:
            problems.append(f"LLM_TEMPERATURE must be between 0 and 2 (got {temperature})")
        if timeout <= 0:
            problems.append(f"LLM_REQUEST_TIMEOUT must be positive (got {timeout})")
        if fallback not in cls.FALLBACK_CHOICES:
            problems.append(
                f"LLM_FALLBACK must be one of {', '.join(cls.FALLBACK_CHOICES)} (got {fallback})"
            )

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                f"Please check your .env file."
            )

        return True

    @classmethod
    def provider_api_key(cls, provider: str) -> str:
        """Return the provider-specific key for 'openai', 'anthropic' or 'gemini'."""
        keys = {
            'openai': cls.OPENAI_API_KEY,
            'custom': cls.OPENAI_API_KEY,
            'anthropic': cls.ANTHROPIC_API_KEY,
            'gemini': cls.GEMINI_API_KEY,
        }
        return keys.get(provider, '')

    @classmethod
    def llm_settings(cls, model: Optional[str] = None, api_key: Optional[str] = None, **overrides):
        """
        Build the immutable request settings handed to the LLM backend.

        Args:
            model: Model identifier (defaults to LLM_MODEL)
            api_key: Credential (defaults to LLM_API_KEY, then the provider-specific key)
            **overrides: Any other LLMSettings field

        Returns:
            LLMSettings instance
        """
        from ..ai.backends.base import LLMSettings
        from ..ai.backends.providers import FallbackPolicy, classify

        model = model or cls.LLM_MODEL
        fallback = FallbackPolicy(overrides.pop('fallback', None) or cls.LLM_FALLBACK)

        if api_key is None:
            api_key = cls.LLM_API_KEY or cls.provider_api_key(classify(model, fallback).value)

        values = {
            'max_tokens': cls.LLM_MAX_TOKENS,
            'temperature': cls.LLM_TEMPERATURE,
            'base_url': cls.LLM_BASE_URL,
            'ollama_url': cls.OLLAMA_URL,
            'timeout': cls.LLM_REQUEST_TIMEOUT,
            'system_prompt': cls.LLM_SYSTEM_PROMPT,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        return LLMSettings(model=model, api_key=api_key.strip(), fallback=fallback, **values)

    @classmethod
    def chat_settings(cls) -> ChatSettings:
        """Build the conversation loop's display settings."""
        return ChatSettings(
            bot_name=cls.BOT_NAME,
            welcome_message=cls.WELCOME_MESSAGE,
            goodbye_message=cls.GOODBYE_MESSAGE,
        )
