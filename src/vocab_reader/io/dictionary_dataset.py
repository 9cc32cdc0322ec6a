"""Reader for the bulk ECDICT-format dictionary CSV."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from vocab_reader.core import DictionaryEntry

logger = logging.getLogger(__name__)

COLUMNS = (
    "word",
    "phonetic",
    "definition",
    "translation",
    "pos",
    "collins",
    "oxford",
    "tag",
    "bnc",
    "frq",
    "exchange",
    "detail",
    "audio",
)


def _text(row: Sequence[str], index: int) -> Optional[str]:
    if index >= len(row):
        return None
    value = row[index].strip()
    return value or None


def _number(row: Sequence[str], index: int) -> Optional[int]:
    value = _text(row, index)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_rows(rows: Iterable[Sequence[str]]) -> Iterator[DictionaryEntry]:
    """
    Convert parsed CSV rows into entries, preserving dataset order.

    The first non-blank row is treated as a header when its first field is
    ``word``. Blank rows and rows with an empty word are skipped. Entry ids are ``csv_<row index>``
    where the index counts rows from the start of the file.

    Args:
        rows: Field lists as produced by ``csv.reader``.

    Yields:
        DictionaryEntry per usable row.
    """
    seen_content = False
    for index, row in enumerate(rows):
        if not any(field.strip() for field in row):
            continue
        is_first = not seen_content
        seen_content = True
        if is_first and row[0].strip() == COLUMNS[0]:
            continue
        word = _text(row, 0)
        if word is None:
            continue
        yield DictionaryEntry(
            id=f"csv_{index}",
            word=word,
            phonetic=_text(row, 1),
            definition=_text(row, 2),
            translation=_text(row, 3),
            pos=_text(row, 4),
            collins=_number(row, 5),
            oxford=_number(row, 6),
            tag=_text(row, 7),
            bnc=_number(row, 8),
            frq=_number(row, 9),
            exchange=_text(row, 10),
            detail=_text(row, 11),
            audio=_text(row, 12),
        )


def parse_lines(lines: Iterable[str]) -> List[DictionaryEntry]:
    """Parse CSV text lines (quoted fields may hold commas)."""
    return list(parse_rows(csv.reader(lines)))


def load_dataset(path: Path) -> List[DictionaryEntry]:
    """
    Load every entry from a dictionary CSV file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    logger.info("Loading dictionary dataset from %s", path)
    with path.open("r", encoding="utf-8", newline="") as handle:
        entries = parse_lines(handle)
    logger.info("Dictionary dataset loaded: %d entries", len(entries))
    return entries
