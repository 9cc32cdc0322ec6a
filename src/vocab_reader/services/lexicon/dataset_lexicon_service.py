"""Dataset Lexicon Service - lookups against the bundled dictionary CSV."""

import csv
import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

from vocab_reader.core import DictionaryEntry, NotFound, UpstreamError
from vocab_reader.io.dictionary_dataset import load_dataset
from vocab_reader.services.lexicon.lexicon_service import LexiconService, LookupResult
from vocab_reader.services.text_processing import normalize_word

logger = logging.getLogger(__name__)

# (suffix, replacement) tried in order when stripping inflections
_SUFFIX_RULES = (
    ("ies", "y"),
    ("es", ""),
    ("s", ""),
    ("ied", "y"),
    ("ed", "e"),
    ("ed", ""),
    ("ing", "e"),
    ("ing", ""),
)
# ECDICT exchange types that name the lemma rather than an inflected form
_LEMMA_EXCHANGE_TYPES = {"0", "1"}


def exchange_forms(exchange: Optional[str]) -> List[str]:
    """Inflected forms listed in an ECDICT ``exchange`` field (``s:dogs/d:dogged``)."""
    forms = []
    for item in (exchange or "").split("/"):
        kind, _, form = item.partition(":")
        if form and kind not in _LEMMA_EXCHANGE_TYPES:
            forms.append(form.strip().lower())
    return forms


class LoadState(Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"


class DatasetLexiconService(LexiconService):
    """
    Resolves words from the bulk dataset, loaded once and kept in memory.

    Lookups run on worker threads. The first caller loads the file; callers
    arriving while the load is in flight wait on a condition and observe the
    same outcome (the loaded index or the load failure). After a failure the
    state returns to UNLOADED so a later lookup retries.

    Matching is exact on the normalized word first, then the first entry in
    dataset order whose word starts with the query. Dataset order therefore
    decides prefix matches. An inflected form that matches neither (``dogs``)
    resolves to its base entry through the dataset's ``exchange`` forms or
    common English suffixes.
    """

    def __init__(
        self,
        dataset_path: Path,
        loader: Callable[[Path], List[DictionaryEntry]] = load_dataset,
    ):
        self._dataset_path = Path(dataset_path)
        self._loader = loader
        self._condition = threading.Condition()
        self._state = LoadState.UNLOADED
        self._load_generation = 0
        self._last_error: Optional[UpstreamError] = None
        self._entries: List[DictionaryEntry] = []
        self._index: Dict[str, DictionaryEntry] = {}
        self._forms: Dict[str, DictionaryEntry] = {}

    @property
    def state(self) -> LoadState:
        return self._state

    def preload(self) -> None:
        """Load the dataset now (raises UpstreamError on failure)."""
        self._ensure_loaded()

    def lookup(self, word: str) -> LookupResult:
        query = normalize_word(word)
        if not query:
            return LookupResult(error=NotFound(f"Empty query from {word!r}"))

        try:
            self._ensure_loaded()
        except UpstreamError as exc:
            return LookupResult(error=exc)

        entry = self._index.get(query)
        if entry is None:
            entry = next(
                (candidate for candidate in self._entries if candidate.word.lower().startswith(query)),
                None,
            )
        if entry is None:
            entry = self._base_form(query)
        if entry is None:
            logger.debug("No dataset entry for %r", query)
            return LookupResult(error=NotFound(query))
        return LookupResult(entry=entry)

    def _base_form(self, query: str) -> Optional[DictionaryEntry]:
        entry = self._forms.get(query)
        if entry is not None:
            return entry
        for suffix, replacement in _SUFFIX_RULES:
            if len(query) > len(suffix) + 1 and query.endswith(suffix):
                entry = self._index.get(query[: -len(suffix)] + replacement)
                if entry is not None:
                    return entry
        return None

    def _ensure_loaded(self) -> None:
        with self._condition:
            if self._state is LoadState.READY:
                return
            if self._state is LoadState.LOADING:
                generation = self._load_generation
                while self._state is LoadState.LOADING:
                    self._condition.wait()
                if self._state is LoadState.READY:
                    return
                if self._last_error is not None and generation == self._load_generation:
                    raise self._last_error
            self._state = LoadState.LOADING
            self._load_generation += 1
            self._last_error = None

        entries: Optional[List[DictionaryEntry]] = None
        error: Optional[UpstreamError] = None
        try:
            entries = self._loader(self._dataset_path)
        except (OSError, csv.Error, UnicodeDecodeError) as exc:
            logger.error("Failed to load dictionary dataset %s: %s", self._dataset_path, exc)
            error = UpstreamError(f"Dictionary dataset unavailable: {exc}")
        finally:
            with self._condition:
                if entries is not None:
                    self._entries = entries
                    self._index = {}
                    self._forms = {}
                    for entry in entries:
                        self._index.setdefault(entry.word.lower(), entry)
                        for form in exchange_forms(entry.exchange):
                            self._forms.setdefault(form, entry)
                    self._state = LoadState.READY
                else:
                    self._last_error = error or UpstreamError("Dictionary dataset load aborted")
                    self._state = LoadState.UNLOADED
                self._condition.notify_all()

        if error is not None:
            raise error
