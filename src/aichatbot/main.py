#!/usr/bin/env python3
"""
Main CLI for AI ChatBot.

Commands:
    chat        - Start an interactive chat session (mock responder without an API key)
    classify    - Show which provider each model name is routed to
"""

import click

from .ai.backends import FallbackPolicy, classify, get_responder
from .chat import ConversationLoop
from .utils.config import Config
from .utils.logger import setup_logger

logger = setup_logger(__name__)


@click.group()
def cli():
    """AI ChatBot - console chat with OpenAI, Anthropic, Gemini or Ollama models"""
    pass


@cli.command()
@click.option('--model', default=None, help='Model name, e.g. gpt-4, claude-3-sonnet-20240229, llama3.1:8b')
@click.option('--api-key', default=None, help='API key (defaults to LLM_API_KEY)')
@click.option('--max-tokens', type=click.IntRange(min=1), default=None, help='Max tokens per reply')
@click.option('--temperature', type=click.FloatRange(0.0, 2.0), default=None, help='Sampling temperature')
@click.option('--base-url', default=None, help='Endpoint for models that match no known provider')
@click.option('--ollama-url', default=None, help='Ollama server URL')
@click.option('--fallback', type=click.Choice(Config.FALLBACK_CHOICES), default=None,
              help='Where unrecognised model names are sent')
@click.option('--timeout', type=click.IntRange(min=1), default=None, help='HTTP timeout in seconds')
@click.option('--mock', is_flag=True, help='Use the offline mock responder')
def chat(model, api_key, max_tokens, temperature, base_url, ollama_url, fallback, timeout, mock):
    """Start an interactive chat session."""
    try:
        Config.validate(max_tokens=max_tokens, temperature=temperature, timeout=timeout, fallback=fallback)
    except ValueError as e:
        raise click.ClickException(str(e))

    settings = Config.llm_settings(
        model=model,
        api_key=api_key,
        max_tokens=max_tokens,
        temperature=temperature,
        base_url=base_url,
        ollama_url=ollama_url,
        fallback=fallback,
        timeout=timeout,
    )
    responder = get_responder(settings, force_mock=mock)
    logger.info(f"Selected responder: {responder.name}")

    ConversationLoop(responder, Config.chat_settings()).run()


@cli.command(name='classify')
@click.argument('models', nargs=-1, required=True)
@click.option('--fallback', type=click.Choice(Config.FALLBACK_CHOICES), default=None,
              help='Where unrecognised model names are sent')
def classify_models(models, fallback):
    """Show which provider each MODEL is routed to."""
    try:
        Config.validate(fallback=fallback)
    except ValueError as e:
        raise click.ClickException(str(e))

    policy = FallbackPolicy(fallback or Config.LLM_FALLBACK)
    for model in models:
        click.echo(f"{model:30s} -> {classify(model, policy).value}")


if __name__ == '__main__':
    cli()
