"""Vocabulary Service - the reader's unfamiliar-word collection."""

import logging
from typing import List, Optional, Set

from vocab_reader.core import DictionaryEntry, UnfamiliarWord, normalize_word
from vocab_reader.io import DatabaseManager

logger = logging.getLogger(__name__)


class VocabularyService:
    """Application service for unfamiliar words.

    Depends on DatabaseManager for persistence. Store failures are logged and
    reported as False/empty results; they never reach the reading session.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    def list_unfamiliar_words(self) -> List[UnfamiliarWord]:
        """Return the collection, newest first (empty on store failure)."""
        try:
            return self._db.list_unfamiliar_words()
        except RuntimeError as e:
            logger.error("Could not list unfamiliar words: %s", e)
            return []

    def target_words(self) -> List[str]:
        """Words to weave into a rewrite, newest first."""
        return [word.word for word in self.list_unfamiliar_words()]

    def unfamiliar_keys(self) -> Set[str]:
        """Normalized keys of all unfamiliar words, for fast checks during rendering."""
        return {normalize_word(word.word) for word in self.list_unfamiliar_words()}

    def is_unfamiliar(self, word: str) -> bool:
        key = normalize_word(word)
        return bool(key) and key in self.unfamiliar_keys()

    def add_unfamiliar_word(
        self,
        word: str,
        phonetic: Optional[str] = None,
        definition: Optional[str] = None,
        translation: Optional[str] = None,
    ) -> bool:
        """Add a word; adding a word that is already present succeeds without a new record.

        Returns:
            True if the word is in the collection afterwards.
        """
        try:
            stored = self._db.insert_unfamiliar_word(word, phonetic, definition, translation)
        except ValueError as e:
            logger.warning("Rejected unfamiliar word: %s", e)
            return False
        except RuntimeError as e:
            logger.error("Could not add unfamiliar word %r: %s", word, e)
            return False
        return stored is not None

    def add_entry(self, entry: DictionaryEntry) -> bool:
        """Add a looked-up dictionary entry to the collection."""
        return self.add_unfamiliar_word(
            word=entry.word,
            phonetic=entry.phonetic,
            definition=entry.definition,
            translation=entry.translation,
        )

    def remove_unfamiliar_word(self, word_id: int) -> bool:
        try:
            return self._db.delete_unfamiliar_word(word_id)
        except RuntimeError as e:
            logger.error("Could not remove unfamiliar word %s: %s", word_id, e)
            return False
