"""Offline mock backend - canned replies when no LLM credentials are configured."""

import random
import time
from datetime import datetime
from typing import Optional

from .base import Responder
from ...utils import Config, setup_logger

NO_INPUT_REPLY = "I didn't receive any input. Could you please say something?"
GREETING_REPLY = "Hello! Nice to meet you. How can I assist you today?"
FAREWELL_REPLY = "Goodbye! It was nice chatting with you. Have a wonderful day!"
HELP_REPLY = (
    "I'm here to help! You can ask me questions, have a conversation, or just chat. "
    "What would you like to talk about?"
)
WEATHER_REPLY = (
    "I don't have access to real-time weather data, but I hope it's nice where you are! "
    "Is there something specific about weather you'd like to discuss?"
)

FILLER_PHRASES = [
    "That's an interesting question! Let me think about that...",
    "I understand what you're asking. Here's my perspective...",
    "Great point! I'd like to add that...",
    "That's a complex topic. From what I know...",
    "I appreciate you sharing that with me.",
    "That reminds me of something similar...",
    "I can help you with that. Here's what I suggest...",
    "That's a good observation. Let me expand on that...",
    "I see where you're coming from. My thoughts are...",
    "Interesting! I hadn't considered that angle before.",
]

# (keywords, reply) checked in order, substring match on lower-cased input
KEYWORD_RULES = [
    (("hello", "hi", "hey"), GREETING_REPLY),
    (("bye", "goodbye", "exit"), FAREWELL_REPLY),
    (("help",), HELP_REPLY),
    (("weather",), WEATHER_REPLY),
]
TIME_KEYWORDS = ("time", "date")


class MockBackend(Responder):
    """Keyword rules plus random filler. Never touches the network."""

    name = "mock"

    def __init__(self, delay: Optional[float] = None, rng: Optional[random.Random] = None):
        self.delay = Config.MOCK_DELAY_SECONDS if delay is None else delay
        self.rng = rng or random.Random()
        self.logger = setup_logger(self.__class__.__name__)

    def respond(self, user_text: str) -> str:
        self.logger.info("Using mock AI service (no LLM provider configured)")

        # Emulate network latency
        if self.delay > 0:
            time.sleep(self.delay)

        if not user_text or not user_text.strip():
            return NO_INPUT_REPLY

        text = user_text.lower()

        for keywords, reply in KEYWORD_RULES:
            if any(word in text for word in keywords):
                return reply

        if any(word in text for word in TIME_KEYWORDS):
            now = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            return (
                "I don't have access to the current time, but it's always a good time to chat! "
                f"The current system time on your machine would be: {now}"
            )

        phrase = self.rng.choice(FILLER_PHRASES)
        return f"{phrase} You mentioned: '{user_text}'. What else would you like to know?"
