"""Lexicon services - abstract interface with dataset and Gemini strategies."""

from vocab_reader.services.lexicon.lexicon_service import LexiconService, LookupResult
from vocab_reader.services.lexicon.dataset_lexicon_service import DatasetLexiconService, LoadState
from vocab_reader.services.lexicon.gemini_lexicon_service import GeminiLexiconService, decode_entry

__all__ = [
    "LexiconService",
    "LookupResult",
    "DatasetLexiconService",
    "LoadState",
    "GeminiLexiconService",
    "decode_entry",
]
