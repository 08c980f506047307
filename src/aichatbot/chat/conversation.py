"""
Console conversation loop: read a line, ask the responder, print the reply.
"""

import sys
import threading
from enum import Enum
from typing import Callable, Optional

import click

from ..ai.backends.base import Responder
from ..utils import ChatSettings, Config, setup_logger

logger = setup_logger(__name__)

EXIT_COMMANDS = ('exit', 'quit', 'bye', 'goodbye')
EMPTY_INPUT_NOTICE = 'Please enter a message.'
RESPONDER_ERROR_REPLY = "I'm sorry, I encountered an error. Please try again."
RULE_WIDTH = 50


class LoopState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin; None once the stream is closed."""
    try:
        return input()
    except EOFError:
        return None


class ThinkingIndicator:
    """
    Animated "<bot> is thinking..." line while a reply is pending.

    Runs on a daemon thread and stops when the stop event is set. Only
    cosmetic; nothing reads its state.

    Example:
        with ThinkingIndicator('AI Assistant'):
            reply = responder.respond(text)
    """

    def __init__(self, label: str, interval: Optional[float] = None, enabled: bool = True):
        self.label = label
        self.interval = Config.THINKING_INTERVAL_SECONDS if interval is None else interval
        self.enabled = enabled
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _animate(self):
        dots = 0
        while not self._stop.wait(self.interval):
            click.echo('.', nl=False)
            dots += 1
            if dots > 3:
                click.echo('\b\b\b\b    \b\b\b\b', nl=False)
                dots = 0

    def start(self):
        if not self.enabled:
            return
        click.secho(f'{self.label} is thinking', fg='bright_black', nl=False)
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()

    def stop(self):
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        # Clear the thinking line
        click.echo('\r' + ' ' * RULE_WIDTH + '\r', nl=False)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class ConversationLoop:
    """Drive turns until an exit command or end of input."""

    def __init__(
        self,
        responder: Responder,
        settings: Optional[ChatSettings] = None,
        read_line: Optional[Callable[[], Optional[str]]] = None,
        show_thinking: Optional[bool] = None,
    ):
        """
        Args:
            responder: Mock or LLM backend chosen at startup
            settings: Bot name and banner text (defaults to Config.chat_settings())
            read_line: Returns the next input line, or None at end of input
            show_thinking: Animate while waiting (defaults to True on a TTY)
        """
        self.responder = responder
        self.settings = settings or Config.chat_settings()
        self.read_line = read_line or read_stdin_line
        self.show_thinking = sys.stdout.isatty() if show_thinking is None else show_thinking
        self.state = LoopState.RUNNING

    def print_banner(self):
        click.secho(f'🤖 {self.settings.bot_name}', fg='cyan')
        click.secho('=' * RULE_WIDTH, fg='cyan')
        click.secho(self.settings.welcome_message, fg='green')
        click.secho("Type 'exit', 'quit', or 'bye' to end the conversation.", fg='green')
        click.echo()

    def run(self) -> int:
        """
        Run until terminated.

        Returns:
            Number of turns answered by the responder
        """
        logger.info(f"Starting chatbot session with {self.responder.name}")
        self.print_banner()

        turns = 0
        while self.state is LoopState.RUNNING:
            if self.step():
                turns += 1

        logger.info(f"Chatbot session ended after {turns} turns")
        return turns

    def step(self) -> bool:
        """
        Process one line of input.

        Returns:
            True if the responder was invoked
        """
        click.secho('You: ', fg='white', bold=True, nl=False)
        user_input = self.read_line()

        if user_input is None:
            # Input stream closed (e.g. piped input ran out)
            click.echo()
            self.state = LoopState.TERMINATED
            return False

        if not user_input.strip():
            click.secho(EMPTY_INPUT_NOTICE, fg='yellow')
            click.echo()
            return False

        if user_input.strip().lower() in EXIT_COMMANDS:
            click.secho(f'{self.settings.bot_name}: {self.settings.goodbye_message}', fg='green')
            self.state = LoopState.TERMINATED
            return False

        reply = self._ask(user_input)
        click.secho(f'{self.settings.bot_name}: {reply}', fg='cyan')
        click.echo()
        return True

    def _ask(self, user_input: str) -> str:
        indicator = ThinkingIndicator(self.settings.bot_name, enabled=self.show_thinking)
        try:
            with indicator:
                return self.responder.respond(user_input)
        except Exception as e:
            logger.error(f"Error getting AI response: {e}", exc_info=True)
            return RESPONDER_ERROR_REPLY
