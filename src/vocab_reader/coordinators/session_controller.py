"""Session Controller - drives one reading session from load to statistics."""

import logging
import time
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from vocab_reader.core import Article, UpstreamError
from vocab_reader.io import ArticleRepository
from vocab_reader.services import RewriteResult, RewriteService, SpeedSummary, VocabularyService
from vocab_reader.services.api_workers import RewriteWorker
from vocab_reader.coordinators.reading_session import ReadingSession, SessionState

logger = logging.getLogger(__name__)

REWRITTEN_TITLE_SUFFIX = " (rewritten)"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class _RewriteRequest(QObject):
    """Helper holding the worker id so results are routed back safely."""

    def __init__(self, worker_id: int, parent: "SessionController"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_rewrite_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_rewrite_result(result, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed
                pass

    @Slot(str)
    def on_rewrite_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_rewrite_error(error, self.worker_id)
            except RuntimeError:
                pass


class SessionController(QObject):
    """
    Orchestrates a reading session.

    Responsibilities:
    - Load the article and the reader's unfamiliar words.
    - Run the rewrite in a background worker and ignore stale results.
    - Reveal sentences one at a time and time each one.
    - Produce the end-of-session speed summary; restart or exit.

    All session state lives in a ReadingSession and is touched only on the
    UI thread. Views listen to the signals below.
    """

    state_changed = Signal(str)
    sentences_ready = Signal(object)  # List[str]
    visible_count_changed = Signal(int)
    rewrite_failed = Signal(str)
    session_finished = Signal(object)  # SpeedSummary
    load_failed = Signal(str)
    session_closed = Signal()

    def __init__(
        self,
        main_window,
        article_repository: ArticleRepository,
        vocabulary_service: VocabularyService,
        rewrite_service: RewriteService,
        clock: Optional[Callable[[], float]] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.article_repository = article_repository
        self.vocabulary_service = vocabulary_service
        self.rewrite_service = rewrite_service
        self.clock = clock or _monotonic_ms
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.session: Optional[ReadingSession] = None

        self._worker_counter = 0
        self._active_rewrite_worker_id: Optional[int] = None
        # Keep the helper alive while the worker runs
        self._rewrite_request_helper: Optional[_RewriteRequest] = None

    @property
    def state(self) -> Optional[SessionState]:
        return self.session.state if self.session else None

    # -- loading -------------------------------------------------------------

    def load_article(self, article_id: int) -> None:
        """Start a new session for ``article_id``, abandoning any current one."""
        self._invalidate_workers()
        self.session = ReadingSession(article_id)
        self.state_changed.emit(SessionState.LOADING.value)

        try:
            article = self.article_repository.get_article_by_id(article_id)
        except RuntimeError as e:
            logger.error("Could not load article %s: %s", article_id, e)
            article = None
        if article is None:
            self.session = None
            self.load_failed.emit("Article not found.")
            return

        target_words = self.vocabulary_service.target_words()
        state = self.session.article_loaded(article, target_words, self.clock())
        self.state_changed.emit(state.value)

        if state is SessionState.REWRITING:
            self._start_rewrite(article, target_words)
        else:
            self._publish_reading()

    def _start_rewrite(self, article: Article, target_words) -> None:
        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_rewrite_worker_id = worker_id

        worker = RewriteWorker(
            rewrite_service=self.rewrite_service,
            original_text=article.content,
            target_words=target_words,
        )
        request_helper = _RewriteRequest(worker_id, self)
        self._rewrite_request_helper = request_helper

        worker.signals.rewrite_result.connect(request_helper.on_rewrite_result)
        worker.signals.error.connect(request_helper.on_rewrite_error)

        logger.debug("Starting rewrite worker %s with %d target words", worker_id, len(target_words))
        self.thread_pool.start(worker)

    def _handle_rewrite_result(self, result: RewriteResult, worker_id: int) -> None:
        """Apply a rewrite result on the UI thread, unless it is stale."""
        if worker_id != self._active_rewrite_worker_id or self.state is not SessionState.REWRITING:
            logger.debug(
                "Ignoring stale rewrite result (worker %s, current %s)",
                worker_id,
                self._active_rewrite_worker_id,
            )
            return
        self._active_rewrite_worker_id = None

        self.session.rewrite_finished(result, self.clock())
        self.state_changed.emit(SessionState.READING.value)
        if result.is_error:
            self.rewrite_failed.emit(result.message or "Rewrite failed.")
        self._publish_reading()

    def _handle_rewrite_error(self, error: str, worker_id: int) -> None:
        """An unexpected worker failure is treated like an upstream failure."""
        logger.error("Rewrite worker %s failed: %s", worker_id, error)
        self._handle_rewrite_result(RewriteResult(success=False, error=UpstreamError(error)), worker_id)

    def _publish_reading(self) -> None:
        self.sentences_ready.emit(self.session.sentences)
        self.visible_count_changed.emit(self.session.visible_sentence_count)

    # -- reading -------------------------------------------------------------

    @Slot()
    def advance(self) -> bool:
        """Reveal the next sentence; a no-op outside READING or while a popup is open."""
        if self.state is not SessionState.READING:
            return False
        if not self.session.advance(self.clock()):
            return False
        self.visible_count_changed.emit(self.session.visible_sentence_count)
        return True

    @Slot(bool)
    def set_lookup_open(self, is_open: bool) -> None:
        if self.session is not None:
            self.session.set_lookup_open(is_open)

    @property
    def can_finish(self) -> bool:
        return self.session is not None and self.session.can_finish

    @Slot()
    def finish(self) -> Optional[SpeedSummary]:
        if not self.can_finish:
            return None
        summary = self.session.finish(self.clock())
        logger.info(
            "Session finished: %d sentences, average %.1f wpm",
            summary.completed_count,
            summary.average_wpm,
        )
        self.state_changed.emit(SessionState.FINISHED.value)
        self.session_finished.emit(summary)
        return summary

    @Slot()
    def restart(self) -> None:
        if self.state is not SessionState.FINISHED:
            return
        self.session.restart(self.clock())
        self.state_changed.emit(SessionState.READING.value)
        self._publish_reading()

    @Slot()
    def discard_session(self) -> bool:
        """Drop the session and its timings without leaving the current screen.

        Returns:
            True if a session was active.
        """
        self._invalidate_workers()
        had_session = self.session is not None
        if had_session:
            logger.debug("Discarding session in state %s", self.session.state.value)
        self.session = None
        return had_session

    @Slot()
    def exit_session(self) -> None:
        """Leave the session; in-flight results are discarded when they arrive."""
        self.discard_session()
        self.session_closed.emit()

    def save_rewritten_article(self) -> Optional[Article]:
        """Store the rewritten text as a new article; the source article is untouched."""
        session = self.session
        if session is None or session.state not in (SessionState.READING, SessionState.FINISHED):
            return None
        if not session.payload.rewritten:
            self.main_window.show_error("Save Failed", "This article has not been rewritten.")
            return None

        title = session.article.title + REWRITTEN_TITLE_SUFFIX
        try:
            saved = self.article_repository.save_rewritten_article(title, session.payload.text)
        except RuntimeError as e:
            logger.error("Could not save rewritten article: %s", e)
            self.main_window.show_error("Save Failed", "Could not save the rewritten article.")
            return None

        self.main_window.show_info("Article Saved", f"Saved as '{saved.title}'.")
        return saved

    def _invalidate_workers(self) -> None:
        self._active_rewrite_worker_id = None
