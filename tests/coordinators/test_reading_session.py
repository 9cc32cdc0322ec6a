"""Unit tests for the ReadingSession state machine."""

import pytest

from vocab_reader.coordinators import ReadingSession, SessionState
from vocab_reader.core import Article, SessionStateError, UpstreamError
from vocab_reader.services import RewriteResult

TEXT = "Cats run fast now. Dogs bark very loud."


@pytest.fixture
def article():
    return Article(1, "Pets", TEXT, "2024-01-01 00:00:00", "2024-01-01 00:00:00")


def reading_session(article, now=0):
    session = ReadingSession(article.id)
    session.article_loaded(article, [], now)
    return session


class TestLoading:
    def test_starts_loading(self):
        session = ReadingSession(7)
        assert session.state is SessionState.LOADING
        assert session.payload.article_id == 7
        assert session.visible_sentence_count == 0

    def test_no_target_words_goes_straight_to_reading(self, article):
        session = reading_session(article)

        assert session.state is SessionState.READING
        assert session.sentences == ["Cats run fast now.", "Dogs bark very loud."]
        assert session.visible_sentence_count == 1
        assert session.payload.rewritten is False
        assert session.analyzer.timings[0].display_time == 0

    def test_target_words_enter_rewriting(self, article):
        session = ReadingSession(article.id)
        assert session.article_loaded(article, ["run"], 0) is SessionState.REWRITING
        assert session.payload.target_words == ["run"]
        assert session.sentences == []


class TestRewriting:
    def test_success_reads_rewritten_text(self, article):
        session = ReadingSession(article.id)
        session.article_loaded(article, ["run"], 0)

        session.rewrite_finished(RewriteResult(success=True, rewritten_text="Cats [run] fast now."), 500)

        assert session.state is SessionState.READING
        assert session.sentences == ["Cats [run] fast now."]
        assert session.payload.rewritten is True
        assert session.payload.rewrite_error is None
        assert session.analyzer.timings[0].display_time == 500

    def test_failure_falls_back_to_original(self, article):
        session = ReadingSession(article.id)
        session.article_loaded(article, ["run"], 0)

        error = UpstreamError("HTTP 500", status=500)
        session.rewrite_finished(RewriteResult(success=False, error=error), 10)

        assert session.state is SessionState.READING
        assert session.sentences == ["Cats run fast now.", "Dogs bark very loud."]
        assert session.payload.rewritten is False
        assert session.payload.rewrite_error == error.user_message
        assert session.visible_sentence_count == 1


class TestReading:
    def test_advance_reveals_and_times_sentences(self, article):
        session = reading_session(article)

        assert session.advance(2000) is True
        assert session.visible_sentence_count == 2
        timings = session.analyzer.timings
        assert timings[0].read_time == 2000
        assert timings[1].display_time == 2000
        assert timings[1].word_count == 4

    def test_advance_is_capped(self, article):
        session = reading_session(article)
        session.advance(1000)

        assert session.advance(2000) is False
        assert session.visible_sentence_count == 2

    def test_advance_ignored_while_lookup_open(self, article):
        session = reading_session(article)
        session.set_lookup_open(True)

        assert session.advance(1000) is False
        assert session.visible_sentence_count == 1

        session.set_lookup_open(False)
        assert session.advance(1000) is True

    def test_cannot_finish_early(self, article):
        session = reading_session(article)
        assert not session.can_finish
        with pytest.raises(SessionStateError):
            session.finish(1000)


class TestFinishing:
    def test_two_sentence_speed_scenario(self):
        article = Article(2, "Five", "One two three four five. Six seven eight nine ten.", "", "")
        session = reading_session(article, now=0)
        session.advance(2000)

        summary = session.finish(3000)

        assert session.state is SessionState.FINISHED
        assert [t.words_per_minute for t in summary.timings] == [150, 300]
        assert summary.average_wpm == 225
        assert summary.unfamiliar_sentences == [0]
        assert session.summary is summary

    def test_restart_clears_timing(self, article):
        session = reading_session(article)
        session.advance(1000)
        session.finish(2000)

        session.restart(5000)

        assert session.state is SessionState.READING
        assert session.visible_sentence_count == 1
        timings = session.analyzer.timings
        assert len(timings) == 1
        assert timings[0].display_time == 5000
        assert not timings[0].is_complete

    def test_empty_article_can_finish_immediately(self):
        article = Article(3, "Blank", "   \n", "", "")
        session = reading_session(article)

        assert session.visible_sentence_count == 0
        assert session.can_finish
        assert session.finish(100).average_wpm == 0


class TestInvalidTransitions:
    def test_rewrite_result_outside_rewriting(self, article):
        session = reading_session(article)
        with pytest.raises(SessionStateError):
            session.rewrite_finished(RewriteResult(success=True, rewritten_text="x"), 0)

    def test_advance_while_loading(self):
        with pytest.raises(SessionStateError):
            ReadingSession(1).advance(0)

    def test_restart_before_finish(self, article):
        with pytest.raises(SessionStateError):
            reading_session(article).restart(0)

    def test_load_twice(self, article):
        session = reading_session(article)
        with pytest.raises(SessionStateError):
            session.article_loaded(article, [], 0)
