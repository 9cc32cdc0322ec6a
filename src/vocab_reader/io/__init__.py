"""I/O layer - Data access for persistence and the dictionary dataset."""

from .article_repository import ArticleRepository
from .database_manager import DatabaseManager
from .dictionary_dataset import load_dataset, parse_lines

__all__ = ["ArticleRepository", "DatabaseManager", "load_dataset", "parse_lines"]
