"""Library Coordinator - Orchestrates the article list, search, and import."""

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot

from vocab_reader.core import Article
from vocab_reader.io import ArticleRepository

logger = logging.getLogger(__name__)


class LibraryCoordinator(QObject):
    """Manages library screen display and article operations.

    Responsibilities:
    - Display the article list on startup and after returning from a session
    - Filter the list by title
    - Import plain-text files as new articles
    - Ask for an article to be opened for reading
    """

    article_opened = Signal(int)

    def __init__(self, library_screen, article_repository: ArticleRepository, main_window):
        super().__init__()

        if library_screen is None:
            raise ValueError("LibraryScreen must not be None")
        if article_repository is None:
            raise ValueError("ArticleRepository must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.library_screen = library_screen
        self.article_repository = article_repository
        self.main_window = main_window
        self.current_query = ""

        self.library_screen.article_selected.connect(self.handle_article_selected)
        self.library_screen.search_changed.connect(self.handle_search_changed)

    def show_library(self):
        """Display the library screen and reload articles."""
        self._load_and_display_articles()
        self.main_window.display_library_view(self.library_screen)

    @Slot(str)
    def handle_search_changed(self, query: str):
        self.current_query = query
        self._load_and_display_articles()

    @Slot(int)
    def handle_article_selected(self, article_id: int):
        self.article_opened.emit(article_id)

    def import_article(self, title: str, content: str) -> Article:
        """Store a new article and refresh the list.

        Raises:
            RuntimeError: If the article is empty or cannot be stored.
        """
        article = self.article_repository.add_article(title, content)
        logger.info("Imported article %s: %s", article.id, article.title)
        self._load_and_display_articles()
        return article

    @Slot(Path)
    def handle_import_requested(self, file_path: Path):
        """Import a UTF-8 text file; the file name becomes the title."""
        file_path = Path(file_path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.main_window.show_error("Import Failed", f"Could not read {file_path.name}:\n{e}")
            return

        try:
            article = self.import_article(file_path.stem, content)
        except RuntimeError as e:
            self.main_window.show_error("Import Failed", str(e))
            return

        self.main_window.show_info("Article Imported", f"Added '{article.title}' to your library.")

    def _load_and_display_articles(self):
        """Load matching articles from the repository and display them."""
        try:
            articles = self.article_repository.search_articles(self.current_query)
        except RuntimeError as e:
            self.main_window.show_error("Library Load Error", str(e))
            return
        self.library_screen.display_articles(articles)
