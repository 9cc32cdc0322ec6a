"""Vocabulary screen - the reader's unfamiliar words."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from vocab_reader.core import UnfamiliarWord


class VocabularyScreen(QWidget):
    """Table of unfamiliar words, newest first, with a remove action."""

    word_removed = Signal(int)
    back_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        header = QHBoxLayout()
        back_button = QPushButton("← Library")
        back_button.clicked.connect(self.back_clicked.emit)
        header.addWidget(back_button)
        title = QLabel("Unfamiliar Words")
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        header.addWidget(title, 1)
        layout.addLayout(header)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Word", "Phonetic", "Translation", "Added"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self.table, 1)

        footer = QHBoxLayout()
        self.count_label = QLabel("")
        footer.addWidget(self.count_label, 1)
        self.remove_button = QPushButton("Remove")
        self.remove_button.clicked.connect(self._on_remove_clicked)
        footer.addWidget(self.remove_button)
        layout.addLayout(footer)

    def display_words(self, words: List[UnfamiliarWord]):
        self.table.setRowCount(len(words))
        for row, word in enumerate(words):
            word_item = QTableWidgetItem(word.word)
            word_item.setData(Qt.ItemDataRole.UserRole, word.id)
            self.table.setItem(row, 0, word_item)
            self.table.setItem(row, 1, QTableWidgetItem(word.phonetic or ""))
            self.table.setItem(row, 2, QTableWidgetItem(word.translation or ""))
            self.table.setItem(row, 3, QTableWidgetItem(str(word.created_at or "")))
        self.count_label.setText(f"{len(words)} word(s)")
        self.remove_button.setEnabled(bool(words))

    def selected_word_id(self):
        row = self.table.currentRow()
        if row < 0:
            return None
        item = self.table.item(row, 0)
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def _on_remove_clicked(self):
        word_id = self.selected_word_id()
        if word_id is not None:
            self.word_removed.emit(int(word_id))
