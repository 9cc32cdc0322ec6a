"""Services layer - business logic and external integrations."""

from vocab_reader.services.settings_manager import SettingsManager
from vocab_reader.services.vocabulary_service import VocabularyService
from vocab_reader.services.reading_speed import (
    ReadingSpeedAnalyzer,
    SentenceTiming,
    SpeedBand,
    SpeedSummary,
    band_speeds,
)

# Text processing services
from vocab_reader.services.text_processing import (
    Token,
    TokenKind,
    count_words,
    extract_marked_words,
    normalize_word,
    segment_into_sentences,
    strip_markers,
    tokenize,
)

# Generative backend
from vocab_reader.services.generative import GeminiTextClient

# Lexicon services
from vocab_reader.services.lexicon import (
    DatasetLexiconService,
    GeminiLexiconService,
    LexiconService,
    LoadState,
    LookupResult,
)

# Rewrite services
from vocab_reader.services.rewrite import GeminiRewriteService, RewriteResult, RewriteService

__all__ = [
    "SettingsManager",
    "VocabularyService",
    "ReadingSpeedAnalyzer",
    "SentenceTiming",
    "SpeedBand",
    "SpeedSummary",
    "band_speeds",
    "Token",
    "TokenKind",
    "count_words",
    "extract_marked_words",
    "normalize_word",
    "segment_into_sentences",
    "strip_markers",
    "tokenize",
    "GeminiTextClient",
    "DatasetLexiconService",
    "GeminiLexiconService",
    "LexiconService",
    "LoadState",
    "LookupResult",
    "GeminiRewriteService",
    "RewriteResult",
    "RewriteService",
]
