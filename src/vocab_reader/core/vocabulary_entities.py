"""Vocabulary entities used across services and persistence."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DictionaryEntry:
    """A dictionary record, from the bulk dataset or a generative lookup."""

    id: str
    word: str
    phonetic: Optional[str] = None
    definition: Optional[str] = None
    translation: Optional[str] = None
    pos: Optional[str] = None
    collins: Optional[int] = None
    oxford: Optional[int] = None
    tag: Optional[str] = None
    bnc: Optional[int] = None
    frq: Optional[int] = None
    exchange: Optional[str] = None
    detail: Optional[str] = None
    audio: Optional[str] = None

    def definition_lines(self) -> list[str]:
        """Split the definition into display lines.

        The dataset stores multi-sense definitions with literal ``\\n``
        sequences; real newlines are accepted as well.
        """
        if not self.definition:
            return []
        text = self.definition.replace("\\n", "\n")
        return [line.strip() for line in text.split("\n") if line.strip()]


@dataclass
class UnfamiliarWord:
    id: Optional[int]
    word: str
    phonetic: Optional[str]
    definition: Optional[str]
    translation: Optional[str]
    created_at: Optional[str]
