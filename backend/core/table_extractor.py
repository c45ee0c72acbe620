"""
Table-name extraction for cache queries.
Best-effort heuristic: "... cache of TBCD" first, then any all-caps token.
"""
from typing import Optional

UNKNOWN_TABLE = "UNKNOWN"


def _after_of(utterance: str) -> Optional[str]:
    words = utterance.lower().split()
    for i, word in enumerate(words):
        if word == "of" and i + 1 < len(words):
            return words[i + 1].upper()
    return None


def _first_uppercase_token(utterance: str) -> Optional[str]:
    for word in utterance.strip().split():
        if len(word) > 2 and word.upper() == word:
            return word
    return None


def extract_table_name(utterance: str) -> str:
    """
    Pull a table identifier out of a cache query.

    "what's the table cache of tbcd" -> "TBCD"
    "TBCD table cache"               -> "TBCD"
    "table cache of"                 -> "UNKNOWN"

    Punctuation is kept, so "of TBCD?" yields "TBCD?".
    """
    return _after_of(utterance) or _first_uppercase_token(utterance) or UNKNOWN_TABLE
