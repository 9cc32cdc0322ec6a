"""Word keys shared by lookup, storage, and de-duplication."""

import re

_NON_LETTER = re.compile(r"[^a-z]")


def normalize_word(word: str) -> str:
    """
    Normalize a raw token for lookup and de-duplication.

    Rules:
    - Trim leading and trailing whitespace
    - Lowercase
    - Drop every character that is not a letter (brackets, digits,
      punctuation, apostrophes, hyphens)

    Args:
        word: Raw token as clicked or typed.

    Returns:
        Normalized key; empty string if nothing alphabetic remains.
    """
    return _NON_LETTER.sub("", word.strip().lower())
