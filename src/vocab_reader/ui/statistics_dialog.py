"""Statistics Dialog - end-of-session reading speed summary."""

from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from vocab_reader.services import SpeedBand, SpeedSummary, strip_markers

BAND_LABELS = {
    SpeedBand.SLOW: "Slow",
    SpeedBand.MEDIUM: "Medium",
    SpeedBand.FAST: "Fast",
    SpeedBand.VERY_FAST: "Very fast",
}


class StatisticsDialog(QDialog):
    """Shows average speed, per-sentence speeds, and sentences to review."""

    restart_requested = Signal()
    exit_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Reading Statistics")
        self.setMinimumSize(560, 420)

        layout = QVBoxLayout(self)

        self.average_label = QLabel("")
        self.average_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.average_label)

        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Sentence", "Words/min", "Speed"])
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self.table, 1)

        self.review_label = QLabel("")
        self.review_label.setWordWrap(True)
        layout.addWidget(self.review_label)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.restart_button = QPushButton("Read Again")
        self.restart_button.clicked.connect(self._on_restart)
        buttons.addWidget(self.restart_button)
        self.exit_button = QPushButton("Back to Library")
        self.exit_button.clicked.connect(self._on_exit)
        buttons.addWidget(self.exit_button)
        layout.addLayout(buttons)

    def show_summary(self, summary: SpeedSummary, sentences: Sequence[str]):
        self.average_label.setText(f"Average speed: {summary.average_wpm:.0f} words/min")

        completed = [timing for timing in summary.timings if timing.is_complete]
        self.table.setRowCount(len(completed))
        for row, timing in enumerate(completed):
            index = timing.sentence_index
            text = strip_markers(sentences[index]) if 0 <= index < len(sentences) else ""
            band = summary.band_of(index)
            self.table.setItem(row, 0, QTableWidgetItem(text))
            self.table.setItem(row, 1, QTableWidgetItem(f"{timing.words_per_minute:.0f}"))
            self.table.setItem(row, 2, QTableWidgetItem(BAND_LABELS.get(band, "")))

        slow = summary.unfamiliar_sentences
        if slow:
            self.review_label.setText(f"{len(slow)} sentence(s) flagged for review are highlighted in the text.")
        else:
            self.review_label.setText("No sentences flagged for review.")

    def _on_restart(self):
        self.accept()
        self.restart_requested.emit()

    def _on_exit(self):
        self.accept()
        self.exit_requested.emit()
