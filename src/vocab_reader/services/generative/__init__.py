"""Generative text backend access."""

from vocab_reader.services.generative.gemini_text_client import GeminiTextClient

__all__ = ["GeminiTextClient"]
