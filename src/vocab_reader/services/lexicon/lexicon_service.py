"""Lexicon Service - interface for resolving a clicked word to an entry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from vocab_reader.core import DictionaryEntry, ErrorKind, ReaderError


@dataclass
class LookupResult:
    """Result of a lookup: an entry, a normal miss, or a failure."""

    entry: Optional[DictionaryEntry] = None
    error: Optional[ReaderError] = None

    @property
    def is_success(self) -> bool:
        return self.entry is not None

    @property
    def not_found(self) -> bool:
        """True for a normal negative result (not a failure)."""
        return self.entry is None and (self.error is None or self.error.kind is ErrorKind.NOT_FOUND)

    @property
    def is_error(self) -> bool:
        return not self.is_success and not self.not_found

    @property
    def message(self) -> Optional[str]:
        """Reader-facing message, or None on success."""
        if self.is_success:
            return None
        if self.error is not None:
            return self.error.user_message
        return "No entry found."


class LexiconService(ABC):
    """
    Abstract service resolving a raw token to a dictionary entry.

    Implementations (DatasetLexiconService, GeminiLexiconService) share this
    interface so either can serve the word interaction workflow.
    """

    @abstractmethod
    def lookup(self, word: str) -> LookupResult:
        """
        Look up a word.

        Args:
            word: Raw token text; implementations normalize it first.

        Returns:
            LookupResult with the entry, a not-found result, or an error.
        """
        pass
