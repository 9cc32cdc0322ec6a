"""Unit tests for LibraryCoordinator."""

from unittest.mock import MagicMock

import pytest

from vocab_reader.coordinators import LibraryCoordinator
from vocab_reader.core import Article


@pytest.fixture
def mock_library_screen():
    screen = MagicMock()
    screen.article_selected = MagicMock()
    screen.search_changed = MagicMock()
    screen.display_articles = MagicMock()
    return screen


@pytest.fixture
def mock_repository():
    repo = MagicMock()
    repo.search_articles.return_value = []
    return repo


@pytest.fixture
def mock_main_window():
    window = MagicMock()
    window.show_error = MagicMock()
    window.show_info = MagicMock()
    window.display_library_view = MagicMock()
    return window


@pytest.fixture
def coordinator(mock_library_screen, mock_repository, mock_main_window):
    return LibraryCoordinator(
        library_screen=mock_library_screen,
        article_repository=mock_repository,
        main_window=mock_main_window,
    )


def article(article_id, title):
    return Article(article_id, title, "Text.", "2024-01-01 00:00:00", "2024-01-01 00:00:00")


def test_requires_dependencies(mock_repository, mock_main_window):
    with pytest.raises(ValueError, match="LibraryScreen"):
        LibraryCoordinator(None, mock_repository, mock_main_window)


def test_wires_screen_signals(coordinator, mock_library_screen):
    mock_library_screen.article_selected.connect.assert_called_once_with(coordinator.handle_article_selected)
    mock_library_screen.search_changed.connect.assert_called_once_with(coordinator.handle_search_changed)


def test_show_library_lists_articles(coordinator, mock_repository, mock_library_screen, mock_main_window):
    articles = [article(2, "B"), article(1, "A")]
    mock_repository.search_articles.return_value = articles

    coordinator.show_library()

    mock_repository.search_articles.assert_called_once_with("")
    mock_library_screen.display_articles.assert_called_once_with(articles)
    mock_main_window.display_library_view.assert_called_once_with(mock_library_screen)


def test_search_filters_by_title(coordinator, mock_repository):
    coordinator.handle_search_changed("ocean")
    mock_repository.search_articles.assert_called_with("ocean")

    # The query sticks when the list is reloaded later
    coordinator.show_library()
    mock_repository.search_articles.assert_called_with("ocean")


def test_repository_error_is_shown(coordinator, mock_repository, mock_main_window, mock_library_screen):
    mock_repository.search_articles.side_effect = RuntimeError("db gone")

    coordinator.show_library()

    mock_main_window.show_error.assert_called_once_with("Library Load Error", "db gone")
    mock_library_screen.display_articles.assert_not_called()


def test_selecting_article_emits_open(coordinator):
    opened = MagicMock()
    coordinator.article_opened.connect(opened)

    coordinator.handle_article_selected(5)

    opened.assert_called_once_with(5)


def test_import_text_file(coordinator, mock_repository, mock_main_window, tmp_path):
    file_path = tmp_path / "Ocean Story.txt"
    file_path.write_text("Waves crash.\nGulls cry.", encoding="utf-8")
    mock_repository.add_article.return_value = article(3, "Ocean Story")

    coordinator.handle_import_requested(file_path)

    mock_repository.add_article.assert_called_once_with("Ocean Story", "Waves crash.\nGulls cry.")
    mock_main_window.show_info.assert_called_once()


def test_import_missing_file_shows_error(coordinator, mock_repository, mock_main_window, tmp_path):
    coordinator.handle_import_requested(tmp_path / "missing.txt")

    mock_repository.add_article.assert_not_called()
    mock_main_window.show_error.assert_called_once()


def test_import_rejected_by_store_shows_error(coordinator, mock_repository, mock_main_window, tmp_path):
    file_path = tmp_path / "empty.txt"
    file_path.write_text("   ", encoding="utf-8")
    mock_repository.add_article.side_effect = RuntimeError("Article content cannot be empty")

    coordinator.handle_import_requested(file_path)

    mock_main_window.show_error.assert_called_once_with("Import Failed", "Article content cannot be empty")
