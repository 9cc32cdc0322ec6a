"""Word Popup - dictionary entry for a clicked word."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout


class WordPopup(QDialog):
    """Non-modal popup showing a lookup result with an add button.

    Signals:
        add_clicked: The reader wants the shown word in their list.
        closed: The reader dismissed the popup.
    """

    add_clicked = Signal()
    closed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Word")
        self.setModal(False)
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)
        layout.setSpacing(6)

        self.word_label = QLabel("")
        self.word_label.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(self.word_label)

        self.phonetic_label = QLabel("")
        self.phonetic_label.setStyleSheet("color: gray;")
        layout.addWidget(self.phonetic_label)

        self.definition_label = QLabel("")
        self.definition_label.setWordWrap(True)
        self.definition_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.definition_label)

        self.translation_label = QLabel("")
        self.translation_label.setWordWrap(True)
        layout.addWidget(self.translation_label)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.add_button = QPushButton("Add to Unfamiliar")
        self.add_button.clicked.connect(self.add_clicked.emit)
        buttons.addWidget(self.add_button)
        self.close_button = QPushButton("Close")
        self.close_button.clicked.connect(self.reject)
        buttons.addWidget(self.close_button)
        layout.addLayout(buttons)

        # Escape, the close button, and the title bar all end in finished
        self.finished.connect(lambda _result: self.closed.emit())

    def show_payload(self, payload: dict):
        """Render a payload built by the word interaction coordinator."""
        self.word_label.setText(payload.get("word", ""))

        if payload.get("loading"):
            self.phonetic_label.setText("")
            self.definition_label.setText("Looking up...")
            self.translation_label.setText("")
            self.add_button.setEnabled(False)
        elif payload.get("error"):
            self.phonetic_label.setText("")
            self.definition_label.setText(payload["error"])
            self.translation_label.setText("")
            self.add_button.setEnabled(False)
        elif payload.get("notFound"):
            self.phonetic_label.setText("")
            self.definition_label.setText("No entry found.")
            self.translation_label.setText("")
            self.add_button.setEnabled(False)
        else:
            phonetic = payload.get("phonetic", "")
            pos = payload.get("partOfSpeech", "")
            self.phonetic_label.setText("  ".join(part for part in (f"/{phonetic}/" if phonetic else "", pos) if part))
            self.definition_label.setText("\n".join(payload.get("definitions", [])))
            self.translation_label.setText(payload.get("translation", ""))
            already = bool(payload.get("isUnfamiliar"))
            self.add_button.setEnabled(not already)
            self.add_button.setText("In Your List" if already else "Add to Unfamiliar")

        if not self.isVisible():
            self.show()

    def mark_added(self):
        self.add_button.setEnabled(False)
        self.add_button.setText("In Your List")
