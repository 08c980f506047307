"""Console chat session."""

from .conversation import ConversationLoop, LoopState, ThinkingIndicator

__all__ = ['ConversationLoop', 'LoopState', 'ThinkingIndicator']
