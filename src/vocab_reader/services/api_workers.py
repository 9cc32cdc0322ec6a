"""Async workers for non-blocking lookups and rewrites using Qt threading."""

import logging
from typing import Iterable

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from vocab_reader.core import ReaderError
from vocab_reader.services.lexicon import DatasetLexiconService, LexiconService
from vocab_reader.services.rewrite import RewriteService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    lookup_result = Signal(object)  # LookupResult
    rewrite_result = Signal(object)  # RewriteResult


class LookupWorker(QRunnable):
    """Runs a lexicon lookup in a background thread."""

    def __init__(self, lexicon_service: LexiconService, word: str):
        super().__init__()
        self.lexicon_service = lexicon_service
        self.word = word
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            result = self.lexicon_service.lookup(self.word)
            self.signals.lookup_result.emit(result)
        except Exception as e:
            logger.exception("Unexpected lookup error for %r", self.word)
            self.signals.error.emit(f"Unexpected lookup error: {e}")
        finally:
            self.signals.finished.emit()


class RewriteWorker(QRunnable):
    """Runs an article rewrite in a background thread."""

    def __init__(self, rewrite_service: RewriteService, original_text: str, target_words: Iterable[str]):
        super().__init__()
        self.rewrite_service = rewrite_service
        self.original_text = original_text
        self.target_words = list(target_words)
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            result = self.rewrite_service.rewrite(self.original_text, self.target_words)
            self.signals.rewrite_result.emit(result)
        except Exception as e:
            logger.exception("Unexpected rewrite error")
            self.signals.error.emit(f"Unexpected rewrite error: {e}")
        finally:
            self.signals.finished.emit()


class DatasetPreloadWorker(QRunnable):
    """Warms the dictionary dataset cache so the first click is fast."""

    def __init__(self, lexicon_service: DatasetLexiconService):
        super().__init__()
        self.lexicon_service = lexicon_service
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            self.lexicon_service.preload()
        except ReaderError as e:
            self.signals.error.emit(e.user_message)
        finally:
            self.signals.finished.emit()
