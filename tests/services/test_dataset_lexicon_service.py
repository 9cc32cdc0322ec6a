"""Tests for the dataset-backed lexicon."""

import threading
import time

import pytest

from vocab_reader.core import DictionaryEntry, ErrorKind
from vocab_reader.services import DatasetLexiconService, LoadState

pytestmark = pytest.mark.service


def entries(*words):
    return [DictionaryEntry(id=f"csv_{i}", word=word, definition=f"def of {word}") for i, word in enumerate(words)]


def make_service(words, calls=None):
    def loader(path):
        if calls is not None:
            calls.append(path)
        return entries(*words)

    return DatasetLexiconService("unused.csv", loader=loader)


class TestLookup:
    def test_normalization_invariance(self):
        service = make_service(["dog", "cat"])
        results = [service.lookup(variant) for variant in ("dog", "Dog", "DOG", " dog ", "dog!")]

        assert all(result.is_success for result in results)
        assert {result.entry.id for result in results} == {"csv_0"}

    def test_inflected_form_resolves_to_base_entry(self):
        service = make_service(["dog", "dogma"])

        assert service.lookup("dog").entry.word == "dog"
        # "dogs" has no exact entry and no entry starting with "dogs"
        assert service.lookup("Dogs!").entry.word == "dog"

    def test_exchange_forms_resolve_irregular_inflections(self):
        dataset = [
            DictionaryEntry(id="csv_0", word="run", exchange="p:ran/d:run/i:running/3:runs"),
            DictionaryEntry(id="csv_1", word="ranch"),
        ]
        service = DatasetLexiconService("unused.csv", loader=lambda path: dataset)

        # Prefix match still comes before inflections
        assert service.lookup("ran").entry.word == "ranch"
        assert service.lookup("running").entry.word == "run"

    @pytest.mark.parametrize("query, expected", [("cities", "city"), ("baked", "bake"), ("barked", "bark")])
    def test_suffix_rules(self, query, expected):
        service = make_service(["city", "bake", "bark"])
        assert service.lookup(query).entry.word == expected

    def test_unknown_word_still_not_found(self):
        result = make_service(["dog"]).lookup("zebras")
        assert result.not_found
        assert result.error.kind is ErrorKind.NOT_FOUND

    def test_prefix_match_uses_dataset_order(self):
        service = make_service(["cathedral", "catalog", "dog"])
        assert service.lookup("cat").entry.word == "cathedral"

    def test_exact_match_beats_prefix(self):
        service = make_service(["dogma", "dog"])
        assert service.lookup("dog").entry.word == "dog"

    def test_first_duplicate_wins(self):
        service = make_service(["Run", "run"])
        assert service.lookup("run").entry.id == "csv_0"

    def test_miss_is_not_an_error(self):
        result = make_service(["dog"]).lookup("zebra")
        assert result.not_found
        assert not result.is_error
        assert result.message == "No entry found."

    def test_empty_query_is_not_found_without_loading(self):
        calls = []
        service = make_service(["dog"], calls)

        assert service.lookup("123").not_found
        assert calls == []
        assert service.state is LoadState.UNLOADED


class TestLoading:
    def test_loads_once(self):
        calls = []
        service = make_service(["dog"], calls)

        service.lookup("dog")
        service.lookup("cat")
        service.preload()

        assert len(calls) == 1
        assert service.state is LoadState.READY

    def test_concurrent_callers_share_one_load(self):
        calls = []
        started = threading.Event()

        def slow_loader(path):
            calls.append(path)
            started.set()
            time.sleep(0.2)
            return entries("dog")

        service = DatasetLexiconService("unused.csv", loader=slow_loader)
        results = []

        def worker():
            results.append(service.lookup("dog"))

        threads = [threading.Thread(target=worker) for _ in range(5)]
        threads[0].start()
        started.wait(timeout=2)
        for thread in threads[1:]:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 5
        assert all(result.is_success for result in results)

    def test_failed_load_is_reported_and_retried(self):
        attempts = []

        def flaky_loader(path):
            attempts.append(path)
            if len(attempts) == 1:
                raise FileNotFoundError("no such file")
            return entries("dog")

        service = DatasetLexiconService("missing.csv", loader=flaky_loader)

        first = service.lookup("dog")
        assert first.is_error
        assert first.error.kind is ErrorKind.UPSTREAM
        assert service.state is LoadState.UNLOADED

        second = service.lookup("dog")
        assert second.is_success
        assert len(attempts) == 2

    def test_real_file_missing(self, tmp_path):
        service = DatasetLexiconService(tmp_path / "missing.csv")
        result = service.lookup("dog")
        assert result.is_error
        assert "missing.csv" not in result.message
