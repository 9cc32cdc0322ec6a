"""SQLite-backed persistence for articles and unfamiliar words."""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from vocab_reader.core import UnfamiliarWord
from vocab_reader.core.words import normalize_word

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns SQLite connection, schema, and unfamiliar-word persistence helpers."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS articles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                content TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS unfamiliar_words (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                word TEXT NOT NULL UNIQUE,
                phonetic TEXT,
                definition TEXT,
                translation TEXT,
                created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        cur.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_articles_created
            ON articles(created_at);
            """
        )
        self.connection.commit()

    def insert_unfamiliar_word(
        self,
        word: str,
        phonetic: Optional[str] = None,
        definition: Optional[str] = None,
        translation: Optional[str] = None,
    ) -> UnfamiliarWord:
        """Insert a word keyed by its normalized form; an existing word is kept as is.

        Raises:
            ValueError: If the word has no letters.
            RuntimeError: If the database write fails.
        """
        key = normalize_word(word)
        if not key:
            raise ValueError(f"Not a word: {word!r}")
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                INSERT INTO unfamiliar_words (word, phonetic, definition, translation)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(word) DO NOTHING
                """,
                (key, phonetic, definition, translation),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to add unfamiliar word: {e}") from e
        if cur.rowcount == 0:
            logger.debug("Unfamiliar word %r already stored", key)
        return self.get_unfamiliar_word(key)

    def get_unfamiliar_word(self, word: str) -> Optional[UnfamiliarWord]:
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT id, word, phonetic, definition, translation, created_at
            FROM unfamiliar_words
            WHERE word = ?
            """,
            (normalize_word(word),),
        )
        row = cur.fetchone()
        return self._row_to_unfamiliar_word(row) if row else None

    def list_unfamiliar_words(self) -> List[UnfamiliarWord]:
        cur = self.connection.cursor()
        cur.execute(
            """
            SELECT id, word, phonetic, definition, translation, created_at
            FROM unfamiliar_words
            ORDER BY created_at DESC, id DESC
            """
        )
        return [self._row_to_unfamiliar_word(row) for row in cur.fetchall()]

    def delete_unfamiliar_word(self, word_id: int) -> bool:
        """Delete by id; returns False when no row matched.

        Raises:
            RuntimeError: If the database write fails.
        """
        try:
            cur = self.connection.cursor()
            cur.execute("DELETE FROM unfamiliar_words WHERE id = ?", (word_id,))
            self.connection.commit()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to delete unfamiliar word: {e}") from e
        return cur.rowcount > 0

    def close(self) -> None:
        self.connection.close()

    @staticmethod
    def _row_to_unfamiliar_word(row: sqlite3.Row) -> UnfamiliarWord:
        return UnfamiliarWord(
            id=row["id"],
            word=row["word"],
            phonetic=row["phonetic"],
            definition=row["definition"],
            translation=row["translation"],
            created_at=row["created_at"],
        )
