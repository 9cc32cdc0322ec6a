"""Reading View - sentence-by-sentence article display with clickable words."""

import html
from typing import Collection, Iterable, Sequence

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from vocab_reader.services import Token, TokenKind, normalize_word, tokenize

WORD_SCHEME = "word:"

WORD_STYLE = "color: inherit; text-decoration: none;"
UNFAMILIAR_STYLE = "color: #b35900; text-decoration: none; border-bottom: 1px dotted #b35900;"
MARKED_STYLE = "color: #1a4fa0; font-weight: bold; text-decoration: none; background-color: #e3ecfa;"
SLOW_SENTENCE_STYLE = "background-color: #fff1c2;"

DEFAULT_FONT_SIZE = 16
MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 24
FONT_SIZE_STEP = 2


def render_token_html(token: Token, unfamiliar_keys: Collection[str] = ()) -> str:
    if token.kind is TokenKind.TEXT:
        return html.escape(token.text)

    key = token.lookup_text
    if not key:
        return html.escape(token.display_text)
    if token.kind is TokenKind.MARKED:
        style = MARKED_STYLE
    elif key in unfamiliar_keys:
        style = UNFAMILIAR_STYLE
    else:
        style = WORD_STYLE
    return f'<a href="{WORD_SCHEME}{key}" style="{style}">{html.escape(token.display_text)}</a>'


def render_sentences_html(
    sentences: Sequence[str],
    visible_count: int,
    slow_indices: Iterable[int] = (),
    unfamiliar_keys: Collection[str] = (),
    font_size: int = DEFAULT_FONT_SIZE,
) -> str:
    """Render the first ``visible_count`` sentences as HTML.

    Slow sentences get a highlighted background; bracket-marked words are
    shown without their brackets.
    """
    slow = set(slow_indices)
    parts = []
    for index, sentence in enumerate(sentences[:visible_count]):
        body = "".join(render_token_html(token, unfamiliar_keys) for token in tokenize(sentence))
        style = f' style="{SLOW_SENTENCE_STYLE}"' if index in slow else ""
        parts.append(f'<span class="sentence" data-index="{index}"{style}>{body}</span>')
    return f'<p style="font-size: {font_size}px; line-height: 180%;">' + " ".join(parts) + "</p>"


def clamp_font_size(size: int) -> int:
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))


def word_from_url(url: QUrl) -> str:
    text = url.toString()
    if not text.startswith(WORD_SCHEME):
        return ""
    return normalize_word(text[len(WORD_SCHEME):])


class ReadingView(QWidget):
    """Shows the visible sentences and session controls."""

    word_clicked = Signal(str)
    finish_clicked = Signal()
    save_clicked = Signal()
    back_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self.sentences: list = []
        self.visible_count = 0
        self.slow_indices: set = set()
        self.unfamiliar_keys: set = set()
        self.font_size = DEFAULT_FONT_SIZE

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 12, 20, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        self.back_button = QPushButton("← Library")
        self.back_button.clicked.connect(self.back_clicked.emit)
        header.addWidget(self.back_button)
        self.title_label = QLabel("")
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        header.addWidget(self.title_label, 1)
        self.smaller_button = QPushButton("A-")
        self.smaller_button.clicked.connect(lambda: self.adjust_font_size(-FONT_SIZE_STEP))
        header.addWidget(self.smaller_button)
        self.font_size_label = QLabel(f"{self.font_size}px")
        header.addWidget(self.font_size_label)
        self.larger_button = QPushButton("A+")
        self.larger_button.clicked.connect(lambda: self.adjust_font_size(FONT_SIZE_STEP))
        header.addWidget(self.larger_button)
        layout.addLayout(header)

        self.dates_label = QLabel("")
        self.dates_label.setStyleSheet("color: gray; font-size: 12px;")
        layout.addWidget(self.dates_label)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.text_browser = QTextBrowser()
        self.text_browser.setOpenLinks(False)
        self.text_browser.setOpenExternalLinks(False)
        self.text_browser.anchorClicked.connect(self._on_anchor_clicked)
        # Keys go to the main window so Space and Enter advance the session
        self.text_browser.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self.text_browser, 1)

        footer = QHBoxLayout()
        self.progress_label = QLabel("")
        footer.addWidget(self.progress_label, 1)
        self.save_button = QPushButton("Save Rewritten Article")
        self.save_button.clicked.connect(self.save_clicked.emit)
        self.save_button.setEnabled(False)
        footer.addWidget(self.save_button)
        self.finish_button = QPushButton("Finish")
        self.finish_button.clicked.connect(self.finish_clicked.emit)
        self.finish_button.setEnabled(False)
        footer.addWidget(self.finish_button)
        layout.addLayout(footer)

        for button in (
            self.back_button,
            self.smaller_button,
            self.larger_button,
            self.save_button,
            self.finish_button,
        ):
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def set_title(self, title: str):
        self.title_label.setText(title)

    def set_dates(self, created_at: str, updated_at: str):
        if not created_at:
            self.dates_label.setText("")
            return
        text = f"Added {created_at}"
        if updated_at and updated_at != created_at:
            text += f"  \u00b7  Updated {updated_at}"
        self.dates_label.setText(text)

    def adjust_font_size(self, delta: int):
        self.font_size = clamp_font_size(self.font_size + delta)
        self.font_size_label.setText(f"{self.font_size}px")
        self.smaller_button.setEnabled(self.font_size > MIN_FONT_SIZE)
        self.larger_button.setEnabled(self.font_size < MAX_FONT_SIZE)
        self._render()

    def set_status(self, message: str):
        self.status_label.setText(message)

    def set_rewritten(self, rewritten: bool):
        self.save_button.setEnabled(rewritten)

    def set_unfamiliar_keys(self, keys: Iterable[str]):
        self.unfamiliar_keys = set(keys)
        self._render()

    def show_loading(self, message: str):
        self.sentences = []
        self.visible_count = 0
        self.slow_indices = set()
        self.set_status(message)
        self.finish_button.setEnabled(False)
        self.save_button.setEnabled(False)
        self._render()

    def set_sentences(self, sentences):
        self.sentences = list(sentences)
        self.slow_indices = set()
        self._render()

    def set_visible_count(self, count: int):
        self.visible_count = count
        self.finish_button.setEnabled(count >= len(self.sentences))
        self._render()

    def highlight_slow_sentences(self, indices: Iterable[int]):
        self.slow_indices = set(indices)
        self._render()

    def _render(self):
        self.text_browser.setHtml(
            render_sentences_html(
                self.sentences,
                self.visible_count,
                self.slow_indices,
                self.unfamiliar_keys,
                self.font_size,
            )
        )
        if self.sentences:
            self.progress_label.setText(f"Sentence {self.visible_count} of {len(self.sentences)}")
        else:
            self.progress_label.setText("")

    def _on_anchor_clicked(self, url: QUrl):
        word = word_from_url(url)
        if word:
            self.word_clicked.emit(word)
