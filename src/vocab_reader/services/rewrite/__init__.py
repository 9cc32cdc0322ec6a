"""Rewrite services - abstract interface and Gemini implementation."""

from vocab_reader.services.rewrite.rewrite_service import RewriteResult, RewriteService, unique_target_words
from vocab_reader.services.rewrite.gemini_rewrite_service import GeminiRewriteService

__all__ = [
    "RewriteResult",
    "RewriteService",
    "GeminiRewriteService",
    "unique_target_words",
]
