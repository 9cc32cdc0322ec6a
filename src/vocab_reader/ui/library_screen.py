"""Library screen - searchable list of articles."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from vocab_reader.core import Article


class LibraryScreen(QWidget):
    """Article list with a title filter.

    Signals:
        article_selected: Emitted with the article id when an item is activated.
        search_changed: Emitted with the filter text as the user types.
    """

    article_selected = Signal(int)
    search_changed = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        title = QLabel("Library")
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(title)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search titles...")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self.search_changed.emit)
        layout.addWidget(self.search_edit)

        self.article_list = QListWidget()
        self.article_list.itemActivated.connect(self._on_item_activated)
        layout.addWidget(self.article_list, 1)

        self.empty_label = QLabel("No articles yet. Use File → Import Article to add one.")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: gray;")
        layout.addWidget(self.empty_label)

    def display_articles(self, articles: List[Article]):
        """Replace the list contents with ``articles``."""
        self.article_list.clear()
        for article in articles:
            item = QListWidgetItem(f"{article.title}    {article.created_at}")
            item.setData(Qt.ItemDataRole.UserRole, article.id)
            self.article_list.addItem(item)
        self.empty_label.setVisible(not articles)

    def _on_item_activated(self, item: QListWidgetItem):
        article_id = item.data(Qt.ItemDataRole.UserRole)
        if article_id is not None:
            self.article_selected.emit(int(article_id))
