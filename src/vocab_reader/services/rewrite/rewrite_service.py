"""Rewrite Service - weave a reader's target words into an article."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional

from vocab_reader.core import ReaderError
from vocab_reader.services.text_processing import extract_marked_words, normalize_word


@dataclass
class RewriteResult:
    """Result of a rewrite request."""

    success: bool
    rewritten_text: Optional[str] = None
    error: Optional[ReaderError] = None
    model: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return not self.success

    @property
    def message(self) -> Optional[str]:
        """Reader-facing error message, None on success."""
        return self.error.user_message if self.error is not None else None

    @property
    def marked_words(self) -> List[str]:
        """Words the rewrite wrapped in ``[...]``, in order of appearance."""
        return extract_marked_words(self.rewritten_text or "")


def unique_target_words(words: Iterable[str]) -> List[str]:
    """De-duplicate target words case-insensitively, keeping first spellings in order."""
    seen = set()
    result: List[str] = []
    for word in words:
        cleaned = word.strip()
        key = normalize_word(cleaned)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(cleaned)
    return result


class RewriteService(ABC):
    """
    Abstract service for rewriting an article around target words.

    Implementations must return immediately with the original text when no
    target words are given, without contacting any backend.
    """

    @abstractmethod
    def rewrite(self, original_text: str, target_words: Iterable[str]) -> RewriteResult:
        """
        Rewrite ``original_text`` so every target word appears once, bracketed.

        Args:
            original_text: Article content.
            target_words: Ordered words to weave in.

        Returns:
            RewriteResult with the rewritten text or an error.
        """
        pass
