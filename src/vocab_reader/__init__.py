"""
Vocab Reader - A reading companion for English learners.

This package provides a desktop application for reading articles with:
- Click-to-lookup definitions (bundled dictionary or Gemini)
- An unfamiliar-word list
- Articles rewritten around the words you are learning
- Per-sentence reading speed statistics
"""

__version__ = "0.1.0"

# Make key components available at package level
from vocab_reader.core import Article, DictionaryEntry, UnfamiliarWord
from vocab_reader.io import ArticleRepository, DatabaseManager

__all__ = [
    "Article",
    "ArticleRepository",
    "DatabaseManager",
    "DictionaryEntry",
    "UnfamiliarWord",
]
