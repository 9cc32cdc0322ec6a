"""Domain layer - pure entities and the error taxonomy."""

from .article import Article
from .errors import (
    ConfigurationError,
    ErrorKind,
    MalformedResponse,
    NotFound,
    ReaderError,
    SessionStateError,
    UpstreamError,
)
from .vocabulary_entities import DictionaryEntry, UnfamiliarWord
from .words import normalize_word

__all__ = [
    "Article",
    "ConfigurationError",
    "DictionaryEntry",
    "ErrorKind",
    "MalformedResponse",
    "NotFound",
    "ReaderError",
    "SessionStateError",
    "UnfamiliarWord",
    "UpstreamError",
    "normalize_word",
]
