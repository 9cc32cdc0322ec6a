"""Sentence and token segmentation for article text.

Sentence splitting is a punctuation heuristic: abbreviations ("Dr.") and
decimal numbers ("3.5") split a sentence in two. Tokenization is lossless;
joining the text of every token gives back the input string.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from vocab_reader.core.words import normalize_word

_SENTENCE = re.compile(r"[^.!?]+[.!?]+|[^.!?]+$")
_SPLIT = re.compile(r"(\[[^\[\]]*\]|\s+)")
_MARKED = re.compile(r"^\[([^\[\]]*[A-Za-z][^\[\]]*)\]$")
_CHUNK = re.compile(r"^([^A-Za-z]*)(.*[A-Za-z])([^A-Za-z]*)$", re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_NON_LETTER_OR_SPACE = re.compile(r"[^A-Za-z\s]")
_MARKER = re.compile(r"\[([^\[\]]+)\]")


class TokenKind(Enum):
    WORD = "word"
    MARKED = "marked"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """A renderable slice of a sentence."""

    text: str
    """Exact source text, including brackets for marked tokens."""

    kind: TokenKind

    @property
    def is_clickable(self) -> bool:
        return self.kind is not TokenKind.TEXT

    @property
    def display_text(self) -> str:
        """Text shown to the reader (brackets removed for marked tokens)."""
        if self.kind is TokenKind.MARKED:
            return self.text[1:-1]
        return self.text

    @property
    def lookup_text(self) -> str:
        """Normalized form passed to the lexicon."""
        return normalize_word(self.text) if self.is_clickable else ""


def segment_into_sentences(text: str) -> List[str]:
    """
    Split article text into sentences.

    Paragraphs (``\\n``) are split first and blank ones discarded. Inside a
    paragraph each run of non-terminators followed by ``.``, ``!`` or ``?``
    is a sentence; text after the last terminator forms a final sentence,
    so a paragraph without terminators comes back whole.

    Args:
        text: Article content.

    Returns:
        Stripped, non-empty sentences in reading order.
    """
    sentences: List[str] = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            continue
        for match in _SENTENCE.finditer(paragraph):
            sentence = match.group(0).strip()
            if sentence:
                sentences.append(sentence)
    return sentences


def tokenize(sentence: str) -> List[Token]:
    """
    Split a sentence into word, marked, and inert text tokens.

    Whitespace and ``[...]`` markers are split out first. Each remaining
    chunk that contains a letter becomes a WORD token, with any leading or
    trailing non-letters split off as TEXT tokens.

    Args:
        sentence: One sentence (or any string).

    Returns:
        Tokens whose texts concatenate back to ``sentence``.
    """
    tokens: List[Token] = []
    for piece in _SPLIT.split(sentence):
        if not piece:
            continue
        if _MARKED.match(piece):
            tokens.append(Token(piece, TokenKind.MARKED))
            continue
        chunk = _CHUNK.match(piece)
        if chunk is None:
            tokens.append(Token(piece, TokenKind.TEXT))
            continue
        leading, core, trailing = chunk.groups()
        if leading:
            tokens.append(Token(leading, TokenKind.TEXT))
        tokens.append(Token(core, TokenKind.WORD))
        if trailing:
            tokens.append(Token(trailing, TokenKind.TEXT))
    return tokens


def count_words(text: str) -> int:
    """Count words after dropping tag-like spans and non-letter characters."""
    cleaned = _NON_LETTER_OR_SPACE.sub("", _TAG.sub("", text))
    return len([fragment for fragment in cleaned.split() if fragment])


def extract_marked_words(text: str) -> List[str]:
    """Return the contents of every ``[...]`` marker, in order."""
    return _MARKER.findall(text)


def strip_markers(text: str) -> str:
    """Remove marker brackets, keeping the marked words in place."""
    return _MARKER.sub(r"\1", text)
