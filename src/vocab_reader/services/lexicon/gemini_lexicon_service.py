"""Gemini Lexicon Service - word lookups through the generative backend."""

import json
import logging
import re
import uuid
from typing import Any

from vocab_reader.core import DictionaryEntry, MalformedResponse, NotFound, ReaderError
from vocab_reader.services.generative import GeminiTextClient
from vocab_reader.services.lexicon.lexicon_service import LexiconService, LookupResult
from vocab_reader.services.text_processing import normalize_word

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def decode_entry(raw: str) -> DictionaryEntry:
    """
    Decode the model's JSON record into a DictionaryEntry.

    ``word``, ``definition`` and ``translation`` must be non-empty strings;
    ``phonetic`` and ``pos`` are optional strings. Each decoded entry gets a
    fresh ``gemini_<uuid>`` id.

    Raises:
        MalformedResponse: If the text is not a JSON object or breaks the schema.
    """
    fenced = _CODE_FENCE.match(raw.strip())
    body = fenced.group(1) if fenced else raw
    try:
        payload: Any = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Lookup response is not JSON: {exc}", payload=raw) from exc

    if not isinstance(payload, dict):
        raise MalformedResponse("Lookup response is not a JSON object", payload=raw)

    for field in ("word", "definition", "translation"):
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            raise MalformedResponse(f"Lookup response missing '{field}'", payload=raw)

    for field in ("phonetic", "pos"):
        value = payload.get(field)
        if value is not None and not isinstance(value, str):
            raise MalformedResponse(f"Lookup response field '{field}' is not text", payload=raw)

    return DictionaryEntry(
        id=f"gemini_{uuid.uuid4().hex}",
        word=payload["word"].strip().lower(),
        phonetic=(payload.get("phonetic") or "").strip() or None,
        definition=payload["definition"].strip(),
        translation=payload["translation"].strip(),
        pos=(payload.get("pos") or "").strip() or None,
    )


class GeminiLexiconService(LexiconService):
    """Lexicon backed by a Gemini lookup call. Nothing is cached."""

    MAX_OUTPUT_TOKENS = 800
    TEMPERATURE = 0.3

    PROMPT_TEMPLATE = """Please provide detailed information about the English word: "{word}"

Return the response in the following JSON format:
{{
  "word": "the word in lowercase",
  "phonetic": "phonetic transcription (IPA format if possible)",
  "definition": "detailed English definition with examples",
  "translation": "Chinese translation and explanation",
  "pos": "part of speech (noun, verb, adjective, etc.)"
}}

Requirements:
1. Provide accurate phonetic transcription
2. Give comprehensive English definition with usage examples
3. Provide clear Chinese translation
4. Include part of speech information
5. Return only valid JSON format
"""

    def __init__(self, client: GeminiTextClient):
        self._client = client

    def lookup(self, word: str) -> LookupResult:
        query = normalize_word(word)
        if not query:
            return LookupResult(error=NotFound(f"Empty query from {word!r}"))

        try:
            raw = self._client.generate(
                self.PROMPT_TEMPLATE.format(word=query),
                max_output_tokens=self.MAX_OUTPUT_TOKENS,
                temperature=self.TEMPERATURE,
                response_mime_type="application/json",
            )
            entry = decode_entry(raw)
        except ReaderError as exc:
            logger.warning("Gemini lookup for %r failed: %s", query, exc.detail)
            return LookupResult(error=exc)

        logger.info("Gemini lookup for %r resolved to %r", query, entry.word)
        return LookupResult(entry=entry)
