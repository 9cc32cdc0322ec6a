"""Reading session state machine: Loading -> (Rewriting) -> Reading -> Finished."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from vocab_reader.core import Article, SessionStateError
from vocab_reader.services import (
    ReadingSpeedAnalyzer,
    RewriteResult,
    SpeedSummary,
    count_words,
    segment_into_sentences,
)


class SessionState(Enum):
    LOADING = "loading"
    REWRITING = "rewriting"
    READING = "reading"
    FINISHED = "finished"


@dataclass(frozen=True)
class LoadingPayload:
    article_id: int


@dataclass(frozen=True)
class RewritingPayload:
    article: Article
    target_words: List[str]


@dataclass
class ReadingPayload:
    article: Article
    text: str
    sentences: List[str]
    visible_sentence_count: int
    rewritten: bool
    rewrite_error: Optional[str] = None
    lookup_open: bool = False


@dataclass(frozen=True)
class FinishedPayload:
    article: Article
    text: str
    sentences: List[str]
    rewritten: bool
    summary: SpeedSummary


class ReadingSession:
    """
    One reading pass over a single article.

    The session holds exactly one state and its payload; transitions that do
    not apply to the current state raise SessionStateError. Timestamps are
    milliseconds supplied by the caller.
    """

    def __init__(self, article_id: int):
        self.state = SessionState.LOADING
        self.payload: object = LoadingPayload(article_id)
        self.analyzer = ReadingSpeedAnalyzer()
        self._word_counts: List[int] = []

    # -- transitions ---------------------------------------------------------

    def article_loaded(self, article: Article, target_words: Sequence[str], now: float) -> SessionState:
        """Enter REWRITING when there are target words, else READING on the raw article."""
        self._require(SessionState.LOADING)
        if target_words:
            self._set(SessionState.REWRITING, RewritingPayload(article, list(target_words)))
        else:
            self._start_reading(article, article.content, rewritten=False, error=None, now=now)
        return self.state

    def rewrite_finished(self, result: RewriteResult, now: float) -> None:
        """Enter READING on the rewritten text, or on the original text if the rewrite failed."""
        payload = self._require(SessionState.REWRITING)
        if result.success and result.rewritten_text is not None:
            self._start_reading(payload.article, result.rewritten_text, rewritten=True, error=None, now=now)
        else:
            message = result.message or "Rewrite failed."
            self._start_reading(payload.article, payload.article.content, rewritten=False, error=message, now=now)

    def advance(self, now: float) -> bool:
        """Reveal the next sentence.

        Ignored (returns False) while a lookup popup is open or when every
        sentence is already visible.
        """
        payload = self._require(SessionState.READING)
        if payload.lookup_open:
            return False
        if payload.visible_sentence_count >= len(payload.sentences):
            return False

        left = payload.visible_sentence_count - 1
        self.analyzer.record_advance(left, now)
        payload.visible_sentence_count += 1
        revealed = payload.visible_sentence_count - 1
        self.analyzer.record_display(revealed, self._word_counts[revealed], now)
        return True

    def finish(self, now: float) -> SpeedSummary:
        payload = self._require(SessionState.READING)
        if not self.can_finish:
            raise SessionStateError("Cannot finish before every sentence is visible")
        if payload.sentences:
            self.analyzer.record_advance(payload.visible_sentence_count - 1, now)
        summary = self.analyzer.summarize()
        self._set(
            SessionState.FINISHED,
            FinishedPayload(payload.article, payload.text, payload.sentences, payload.rewritten, summary),
        )
        return summary

    def restart(self, now: float) -> None:
        """Start over at the first sentence with timing cleared."""
        payload = self._require(SessionState.FINISHED)
        self.analyzer.reset()
        self._set(
            SessionState.READING,
            ReadingPayload(
                article=payload.article,
                text=payload.text,
                sentences=payload.sentences,
                visible_sentence_count=min(1, len(payload.sentences)),
                rewritten=payload.rewritten,
            ),
        )
        self._open_first_sentence(now)

    def set_lookup_open(self, is_open: bool) -> None:
        """Track the lookup popup; advancing is blocked while it is open."""
        if self.state is SessionState.READING:
            self.payload.lookup_open = is_open

    # -- queries -------------------------------------------------------------

    @property
    def article(self) -> Optional[Article]:
        return getattr(self.payload, "article", None)

    @property
    def sentences(self) -> List[str]:
        return list(getattr(self.payload, "sentences", []))

    @property
    def visible_sentence_count(self) -> int:
        if self.state is SessionState.READING:
            return self.payload.visible_sentence_count
        if self.state is SessionState.FINISHED:
            return len(self.payload.sentences)
        return 0

    @property
    def can_finish(self) -> bool:
        return (
            self.state is SessionState.READING
            and self.payload.visible_sentence_count >= len(self.payload.sentences)
        )

    @property
    def summary(self) -> Optional[SpeedSummary]:
        return self.payload.summary if self.state is SessionState.FINISHED else None

    # -- internals -----------------------------------------------------------

    def _start_reading(self, article: Article, text: str, rewritten: bool, error: Optional[str], now: float) -> None:
        sentences = segment_into_sentences(text)
        self._word_counts = [count_words(sentence) for sentence in sentences]
        self.analyzer.reset()
        self._set(
            SessionState.READING,
            ReadingPayload(
                article=article,
                text=text,
                sentences=sentences,
                visible_sentence_count=min(1, len(sentences)),
                rewritten=rewritten,
                rewrite_error=error,
            ),
        )
        self._open_first_sentence(now)

    def _open_first_sentence(self, now: float) -> None:
        if self._word_counts:
            self.analyzer.record_display(0, self._word_counts[0], now)

    def _set(self, state: SessionState, payload: object) -> None:
        self.state = state
        self.payload = payload

    def _require(self, state: SessionState):
        if self.state is not state:
            raise SessionStateError(f"Expected state {state.value}, session is {self.state.value}")
        return self.payload


__all__ = [
    "FinishedPayload",
    "LoadingPayload",
    "ReadingPayload",
    "ReadingSession",
    "RewritingPayload",
    "SessionState",
]
