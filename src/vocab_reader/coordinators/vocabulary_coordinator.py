"""Vocabulary Coordinator - Shows and edits the unfamiliar-word list."""

from PySide6.QtCore import QObject, Slot

from vocab_reader.services import VocabularyService


class VocabularyCoordinator(QObject):
    """Connects the vocabulary screen to the unfamiliar-word collection."""

    def __init__(self, vocabulary_screen, vocabulary_service: VocabularyService, main_window):
        super().__init__()

        self.vocabulary_screen = vocabulary_screen
        self.vocabulary_service = vocabulary_service
        self.main_window = main_window

        self.vocabulary_screen.word_removed.connect(self.handle_word_removed)

    def show_vocabulary(self):
        self.refresh()
        self.main_window.display_vocabulary_view(self.vocabulary_screen)

    @Slot()
    def refresh(self):
        self.vocabulary_screen.display_words(self.vocabulary_service.list_unfamiliar_words())

    @Slot(int)
    def handle_word_removed(self, word_id: int):
        if not self.vocabulary_service.remove_unfamiliar_word(word_id):
            self.main_window.show_error("Remove Failed", "Could not remove the word.")
            return
        self.refresh()
