"""Main entry point for the vocab reader application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from vocab_reader.coordinators import (
    LibraryCoordinator,
    SessionController,
    SessionState,
    VocabularyCoordinator,
    WordInteractionCoordinator,
)
from vocab_reader.io import ArticleRepository, DatabaseManager
from vocab_reader.services import (
    DatasetLexiconService,
    GeminiLexiconService,
    GeminiRewriteService,
    GeminiTextClient,
    SettingsManager,
    VocabularyService,
)
from vocab_reader.services.api_workers import DatasetPreloadWorker
from vocab_reader.services.settings_manager import LEXICON_GEMINI
from vocab_reader.ui import (
    LibraryScreen,
    MainWindow,
    ReadingView,
    StatisticsDialog,
    VocabularyScreen,
    WordPopup,
)

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    SessionState.LOADING.value: "Loading article...",
    SessionState.REWRITING.value: "Rewriting the article around your unfamiliar words...",
    SessionState.READING.value: "Press Space, Enter, or → to reveal the next sentence.",
    SessionState.FINISHED.value: "Finished. Slow sentences are highlighted.",
}


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_lexicon_service(settings: SettingsManager, client: GeminiTextClient):
    """Pick the lookup strategy configured in LEXICON_STRATEGY."""
    if settings.get_lexicon_strategy() == LEXICON_GEMINI:
        return GeminiLexiconService(client)
    return DatasetLexiconService(settings.get_dictionary_path())


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Vocab Reader")
    app.setOrganizationName("VocabReader")

    # 3. Initialize Infrastructure
    db = DatabaseManager(settings.get_database_path())
    db.ensure_schema()
    article_repository = ArticleRepository(db.connection)

    client = GeminiTextClient(
        api_key_provider=settings.get_gemini_api_key,
        model_name=settings.get_gemini_model(),
        timeout_seconds=settings.get_request_timeout(),
    )
    lexicon_service = build_lexicon_service(settings, client)
    rewrite_service = GeminiRewriteService(client)
    vocabulary_service = VocabularyService(db)
    logger.info("Lexicon strategy: %s", type(lexicon_service).__name__)

    # 4. Construct UI
    main_window = MainWindow()
    library_screen = LibraryScreen()
    reading_view = ReadingView()
    vocabulary_screen = VocabularyScreen()
    word_popup = WordPopup(main_window)
    statistics_dialog = StatisticsDialog(main_window)

    # 5. Instantiate Coordinators (Dependency Injection)
    library = LibraryCoordinator(library_screen, article_repository, main_window)
    vocabulary = VocabularyCoordinator(vocabulary_screen, vocabulary_service, main_window)
    session = SessionController(main_window, article_repository, vocabulary_service, rewrite_service)
    words = WordInteractionCoordinator(lexicon_service, vocabulary_service, main_window)

    # 6. Signal Wiring
    main_window.import_requested.connect(library.handle_import_requested)
    main_window.library_requested.connect(session.exit_session)
    # Leaving the reading screen drops the session before the list is shown
    main_window.vocabulary_requested.connect(session.discard_session)
    main_window.vocabulary_requested.connect(words.close_popup)
    main_window.vocabulary_requested.connect(vocabulary.show_vocabulary)
    main_window.advance_requested.connect(session.advance)
    vocabulary_screen.back_clicked.connect(library.show_library)

    def open_article(article_id: int):
        reading_view.set_title("")
        reading_view.set_dates("", "")
        reading_view.set_unfamiliar_keys(vocabulary_service.unfamiliar_keys())
        main_window.display_reading_view(reading_view)
        session.load_article(article_id)
        if session.session is not None and session.session.article is not None:
            article = session.session.article
            reading_view.set_title(article.title)
            reading_view.set_dates(article.created_at, article.updated_at)

    def on_state_changed(state: str):
        if state in (SessionState.LOADING.value, SessionState.REWRITING.value):
            words.close_popup()
            reading_view.show_loading(STATUS_MESSAGES[state])
        else:
            reading_view.set_status(STATUS_MESSAGES[state])
        if state == SessionState.READING.value:
            reading_view.set_rewritten(bool(session.session.payload.rewritten))

    def on_rewrite_failed(message: str):
        reading_view.set_status(f"Showing the original article. {message}")

    def on_load_failed(message: str):
        main_window.show_error("Article Unavailable", message)
        library.show_library()

    def on_finished(summary):
        reading_view.highlight_slow_sentences(summary.unfamiliar_sentences)
        statistics_dialog.show_summary(summary, session.session.sentences)
        statistics_dialog.show()

    def on_word_added(word: str):
        word_popup.mark_added()
        reading_view.set_unfamiliar_keys(vocabulary_service.unfamiliar_keys())

    library.article_opened.connect(open_article)
    session.state_changed.connect(on_state_changed)
    session.sentences_ready.connect(reading_view.set_sentences)
    session.visible_count_changed.connect(reading_view.set_visible_count)
    session.rewrite_failed.connect(on_rewrite_failed)
    session.load_failed.connect(on_load_failed)
    session.session_finished.connect(on_finished)
    session.session_closed.connect(words.close_popup)
    session.session_closed.connect(library.show_library)

    reading_view.word_clicked.connect(words.handle_word_clicked)
    reading_view.finish_clicked.connect(session.finish)
    reading_view.save_clicked.connect(session.save_rewritten_article)
    reading_view.back_clicked.connect(session.exit_session)

    words.popup_requested.connect(word_popup.show_payload)
    words.popup_closed.connect(word_popup.hide)
    words.popup_visibility_changed.connect(session.set_lookup_open)
    words.word_added.connect(on_word_added)
    word_popup.add_clicked.connect(words.handle_add_unfamiliar)
    word_popup.closed.connect(words.close_popup)

    statistics_dialog.restart_requested.connect(session.restart)
    statistics_dialog.exit_requested.connect(session.exit_session)

    # 7. Warm the dictionary cache in the background
    if isinstance(lexicon_service, DatasetLexiconService):
        preload = DatasetPreloadWorker(lexicon_service)
        preload.signals.error.connect(lambda message: logger.warning("Dictionary preload failed: %s", message))
        session.thread_pool.start(preload)

    # 8. Show UI and start event loop
    library.show_library()
    main_window.show()

    try:
        return app.exec()
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
