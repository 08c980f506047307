"""Utils package for AI ChatBot."""

from .config import Config, ChatSettings
from .logger import setup_logger

__all__ = [
    'Config',
    'ChatSettings',
    'setup_logger',
]
