"""AI ChatBot - console chatbot for hosted and local LLM APIs."""

__version__ = "1.0.0"
