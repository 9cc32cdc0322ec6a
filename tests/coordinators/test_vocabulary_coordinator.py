from unittest.mock import MagicMock

import pytest

from vocab_reader.coordinators import VocabularyCoordinator
from vocab_reader.core import UnfamiliarWord


@pytest.fixture
def screen():
    return MagicMock()


@pytest.fixture
def service():
    mock = MagicMock()
    mock.list_unfamiliar_words.return_value = [UnfamiliarWord(1, "run", None, None, None, "2024-01-01")]
    mock.remove_unfamiliar_word.return_value = True
    return mock


@pytest.fixture
def main_window():
    return MagicMock()


@pytest.fixture
def coordinator(screen, service, main_window):
    return VocabularyCoordinator(screen, service, main_window)


def test_show_vocabulary(coordinator, screen, service, main_window):
    coordinator.show_vocabulary()

    screen.display_words.assert_called_once_with(service.list_unfamiliar_words.return_value)
    main_window.display_vocabulary_view.assert_called_once_with(screen)


def test_remove_refreshes_list(coordinator, screen, service):
    coordinator.handle_word_removed(1)

    service.remove_unfamiliar_word.assert_called_once_with(1)
    screen.display_words.assert_called_once()


def test_remove_failure_shows_error(coordinator, screen, service, main_window):
    service.remove_unfamiliar_word.return_value = False

    coordinator.handle_word_removed(1)

    main_window.show_error.assert_called_once()
    screen.display_words.assert_not_called()
