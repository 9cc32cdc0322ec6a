#!/usr/bin/env python3
"""
Tests for LibraryScreen - validates list display and interactions.
"""

from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from vocab_reader.core import Article
from vocab_reader.ui import LibraryScreen


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_library_screen_empty_state():
    """Empty library should show empty state message."""
    ensure_qt_app()

    screen = LibraryScreen()
    screen.display_articles([])

    assert not screen.empty_label.isHidden()
    assert screen.article_list.count() == 0


def test_library_screen_displays_articles():
    ensure_qt_app()

    articles = [
        Article(2, "Second", "b.", "2024-01-02 00:00:00", "2024-01-02 00:00:00"),
        Article(1, "First", "a.", "2024-01-01 00:00:00", "2024-01-01 00:00:00"),
    ]
    screen = LibraryScreen()
    screen.display_articles(articles)

    assert screen.empty_label.isHidden()
    assert screen.article_list.count() == 2
    assert screen.article_list.item(0).text().startswith("Second")


def test_activating_item_emits_article_id():
    ensure_qt_app()

    screen = LibraryScreen()
    screen.display_articles([Article(7, "Seven", "x.", "", "")])
    selected = MagicMock()
    screen.article_selected.connect(selected)

    screen._on_item_activated(screen.article_list.item(0))

    selected.assert_called_once_with(7)


def test_typing_emits_search():
    ensure_qt_app()

    screen = LibraryScreen()
    searched = MagicMock()
    screen.search_changed.connect(searched)

    screen.search_edit.setText("ocean")

    searched.assert_called_with("ocean")
