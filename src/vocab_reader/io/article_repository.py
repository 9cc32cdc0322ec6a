"""Data access layer for article persistence."""

import sqlite3
from typing import List, Optional

from vocab_reader.core import Article


class ArticleRepository:
    """Manages persistence of articles in the database.

    Write and query failures raise RuntimeError. A missing article is a
    normal negative result and comes back as None.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        """Initialize repository with database connection.

        Args:
            connection: SQLite connection with schema created.

        Raises:
            RuntimeError: If connection is None.
        """
        if connection is None:
            raise RuntimeError("Database connection required")
        self.connection = connection
        self.connection.row_factory = sqlite3.Row

    def add_article(self, title: str, content: str) -> Article:
        """Store a new article.

        Line endings are normalized so paragraphs are split by a single ``\\n``.

        Raises:
            RuntimeError: If title or content is empty, or the write fails.
        """
        if not title or not title.strip():
            raise RuntimeError("Article title cannot be empty")
        content = content.replace("\r\n", "\n").replace("\r", "\n")
        if not content.strip():
            raise RuntimeError("Article content cannot be empty")

        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                INSERT INTO articles (title, content)
                VALUES (?, ?)
                """,
                (title.strip(), content),
            )
            self.connection.commit()
            article_id = cur.lastrowid
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to add article: {e}") from e

        article = self.get_article_by_id(article_id)
        if article is None:
            raise RuntimeError(f"Article {article_id} missing after insert")
        return article

    def save_rewritten_article(self, title: str, content: str) -> Article:
        """Persist rewritten output as a new article; the source is untouched."""
        return self.add_article(title, content)

    def get_article_by_id(self, article_id: int) -> Optional[Article]:
        """Retrieve an article, or None if it does not exist.

        Raises:
            RuntimeError: If the query fails.
        """
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                SELECT id, title, content, created_at, updated_at
                FROM articles
                WHERE id = ?
                """,
                (article_id,),
            )
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to retrieve article: {e}") from e
        return self._row_to_article(row) if row else None

    def list_articles(self) -> List[Article]:
        """Retrieve all articles, newest first.

        Raises:
            RuntimeError: If the query fails.
        """
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                SELECT id, title, content, created_at, updated_at
                FROM articles
                ORDER BY created_at DESC, id DESC
                """
            )
            return [self._row_to_article(row) for row in cur.fetchall()]
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to retrieve articles: {e}") from e

    def search_articles(self, title_substring: str) -> List[Article]:
        """Case-insensitive title search, newest first.

        A blank query returns every article.

        Raises:
            RuntimeError: If the query fails.
        """
        query = title_substring.strip()
        if not query:
            return self.list_articles()

        pattern = "%" + query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                SELECT id, title, content, created_at, updated_at
                FROM articles
                WHERE title LIKE ? ESCAPE '\\'
                ORDER BY created_at DESC, id DESC
                """,
                (pattern,),
            )
            return [self._row_to_article(row) for row in cur.fetchall()]
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to search articles: {e}") from e

    @staticmethod
    def _row_to_article(row: sqlite3.Row) -> Article:
        """Convert database row to Article entity."""
        return Article(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
