"""Word Interaction Coordinator - Handles word clicks and unfamiliar-word tracking."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from vocab_reader.core import DictionaryEntry, UpstreamError
from vocab_reader.services import LexiconService, LookupResult, VocabularyService, normalize_word
from vocab_reader.services.api_workers import LookupWorker

logger = logging.getLogger(__name__)


class _LookupRequest(QObject):
    """Helper class to hold lookup request context and handle results safely."""

    def __init__(self, word: str, worker_id: int, parent: "WordInteractionCoordinator"):
        super().__init__()
        self.word = word
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_lookup_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_lookup_result(result, self.word, self.worker_id)
            except RuntimeError:
                pass

    @Slot(str)
    def on_lookup_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_lookup_error(error, self.word, self.worker_id)
            except RuntimeError:
                pass


def build_popup_payload(word: str, result: LookupResult, is_unfamiliar: bool) -> dict:
    """Flatten a lookup result into what the word popup renders."""
    entry = result.entry
    return {
        "word": entry.word if entry else word,
        "phonetic": (entry.phonetic or "") if entry else "",
        "partOfSpeech": (entry.pos or "") if entry else "",
        "definitions": entry.definition_lines() if entry else [],
        "translation": (entry.translation or "") if entry else "",
        "notFound": result.not_found,
        "error": result.message if result.is_error else None,
        "isUnfamiliar": is_unfamiliar,
        "loading": False,
    }


class WordInteractionCoordinator(QObject):
    """
    Manages the word click → lookup → popup → add-to-unfamiliar workflow.

    Lookups run on the thread pool; only the most recent click may update
    the popup. Opening and closing the popup is reported through
    ``popup_visibility_changed`` so the session can pause advancing.
    """

    popup_requested = Signal(object)  # dict payload
    popup_closed = Signal()
    popup_visibility_changed = Signal(bool)
    word_added = Signal(str)

    def __init__(
        self,
        lexicon_service: LexiconService,
        vocabulary_service: VocabularyService,
        main_window,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.lexicon_service = lexicon_service
        self.vocabulary_service = vocabulary_service
        self.main_window = main_window
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.last_clicked_word: Optional[str] = None
        self.current_entry: Optional[DictionaryEntry] = None
        self.popup_open = False

        self._worker_counter = 0
        self._active_lookup_worker_id: Optional[int] = None
        self._lookup_request_helper: Optional[_LookupRequest] = None

    @Slot(str)
    def handle_word_clicked(self, token_text: str) -> None:
        """Open the popup for a clicked token and start its lookup."""
        word = normalize_word(token_text)
        if not word:
            return

        self.last_clicked_word = word
        self.current_entry = None
        self._set_popup_open(True)
        self.popup_requested.emit({"word": word, "loading": True})

        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_lookup_worker_id = worker_id

        worker = LookupWorker(lexicon_service=self.lexicon_service, word=word)
        request_helper = _LookupRequest(word, worker_id, self)
        self._lookup_request_helper = request_helper

        worker.signals.lookup_result.connect(request_helper.on_lookup_result)
        worker.signals.error.connect(request_helper.on_lookup_error)

        self.thread_pool.start(worker)

    def _handle_lookup_result(self, result: LookupResult, word: str, worker_id: int) -> None:
        if worker_id != self._active_lookup_worker_id:
            logger.debug(
                "Ignoring stale lookup result (worker %s, current %s)",
                worker_id,
                self._active_lookup_worker_id,
            )
            return
        self._active_lookup_worker_id = None

        if result.is_error and result.error is not None:
            logger.warning("Lookup for %r failed: %s", word, result.error.detail or result.error.kind.value)

        self.current_entry = result.entry
        payload = build_popup_payload(word, result, self.vocabulary_service.is_unfamiliar(word))
        self.popup_requested.emit(payload)

    def _handle_lookup_error(self, error: str, word: str, worker_id: int) -> None:
        self._handle_lookup_result(LookupResult(error=UpstreamError(error)), word, worker_id)

    @Slot()
    def handle_add_unfamiliar(self) -> bool:
        """Add the entry shown in the popup to the unfamiliar-word list."""
        entry = self.current_entry
        if entry is None:
            return False

        if not self.vocabulary_service.add_entry(entry):
            self.main_window.show_error("Add Failed", f"Could not add '{entry.word}' to your word list.")
            return False

        self.word_added.emit(entry.word)
        return True

    @Slot()
    def close_popup(self) -> None:
        """Dismiss the popup; a lookup still in flight is discarded."""
        self._active_lookup_worker_id = None
        self.current_entry = None
        if self.popup_open:
            self._set_popup_open(False)
            self.popup_closed.emit()

    def _set_popup_open(self, is_open: bool) -> None:
        self.popup_open = is_open
        self.popup_visibility_changed.emit(is_open)
