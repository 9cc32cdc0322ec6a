"""Text processing services - segmentation, tokenization, and normalization."""

from vocab_reader.core.words import normalize_word
from vocab_reader.services.text_processing.segmenter import (
    Token,
    TokenKind,
    count_words,
    extract_marked_words,
    segment_into_sentences,
    strip_markers,
    tokenize,
)

__all__ = [
    "Token",
    "TokenKind",
    "count_words",
    "extract_marked_words",
    "normalize_word",
    "segment_into_sentences",
    "strip_markers",
    "tokenize",
]
