#!/usr/bin/env python3
"""
Tests for ReadingView - sentence rendering and word clicks.
"""

from unittest.mock import MagicMock

from PySide6.QtCore import QUrl
from PySide6.QtWidgets import QApplication

from vocab_reader.ui import ReadingView
from vocab_reader.ui.reading_view import (
    DEFAULT_FONT_SIZE,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    SLOW_SENTENCE_STYLE,
    render_sentences_html,
    word_from_url,
)


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


SENTENCES = ["Cats [run] fast.", "Dogs bark <loud>."]


def test_only_visible_sentences_are_rendered():
    html = render_sentences_html(SENTENCES, 1)
    assert "Cats" in html
    assert "Dogs" not in html


def test_marked_word_rendered_without_brackets():
    html = render_sentences_html(SENTENCES, 1)
    assert "[run]" not in html
    assert 'href="word:run"' in html
    assert 'href="word:cats"' in html


def test_text_is_escaped():
    html = render_sentences_html(SENTENCES, 2)
    assert "&lt;" in html
    assert "<loud>" not in html


def test_slow_and_unfamiliar_highlighting():
    html = render_sentences_html(SENTENCES, 2, slow_indices=[1], unfamiliar_keys={"dogs"})
    assert html.count(SLOW_SENTENCE_STYLE) == 1
    assert "dotted" in html


def test_word_from_url():
    assert word_from_url(QUrl("word:dogs")) == "dogs"
    assert word_from_url(QUrl("https://example.com")) == ""


def test_anchor_click_emits_word():
    ensure_qt_app()
    view = ReadingView()
    clicked = MagicMock()
    view.word_clicked.connect(clicked)

    view._on_anchor_clicked(QUrl("word:run"))

    clicked.assert_called_once_with("run")


def test_finish_enabled_when_all_sentences_visible():
    ensure_qt_app()
    view = ReadingView()
    view.set_sentences(SENTENCES)

    view.set_visible_count(1)
    assert not view.finish_button.isEnabled()
    assert view.progress_label.text() == "Sentence 1 of 2"

    view.set_visible_count(2)
    assert view.finish_button.isEnabled()


def test_show_loading_resets_view():
    ensure_qt_app()
    view = ReadingView()
    view.set_sentences(SENTENCES)
    view.set_visible_count(2)

    view.show_loading("Rewriting...")

    assert view.status_label.text() == "Rewriting..."
    assert not view.finish_button.isEnabled()
    assert view.sentences == []


def test_font_size_buttons_stay_within_bounds():
    ensure_qt_app()
    view = ReadingView()
    view.set_sentences(SENTENCES)
    view.set_visible_count(1)

    for _ in range(10):
        view.larger_button.click()
    assert view.font_size == MAX_FONT_SIZE
    assert not view.larger_button.isEnabled()
    assert view.font_size_label.text() == f"{MAX_FONT_SIZE}px"

    for _ in range(10):
        view.smaller_button.click()
    assert view.font_size == MIN_FONT_SIZE
    assert not view.smaller_button.isEnabled()
    assert view.larger_button.isEnabled()


def test_font_size_applied_to_html():
    html = render_sentences_html(SENTENCES, 1, font_size=20)
    assert "font-size: 20px" in html
    assert f"font-size: {DEFAULT_FONT_SIZE}px" in render_sentences_html(SENTENCES, 1)


def test_dates_line():
    ensure_qt_app()
    view = ReadingView()

    view.set_dates("2024-01-01 09:00:00", "2024-01-01 09:00:00")
    assert view.dates_label.text() == "Added 2024-01-01 09:00:00"

    view.set_dates("2024-01-01 09:00:00", "2024-02-03 10:00:00")
    assert "Updated 2024-02-03 10:00:00" in view.dates_label.text()

    view.set_dates("", "")
    assert view.dates_label.text() == ""
