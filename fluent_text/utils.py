"""
Utility functions shared by the text helpers.
"""

import re
from collections.abc import Iterable

from .errors import InvalidArgumentError, NullInputError

# Characters that end a word for counting and word extraction
WORD_DELIMITERS = " \t\n\r,.;!?"

_WORD_DELIMITER_PATTERN = re.compile(f"[{re.escape(WORD_DELIMITERS)}]+")

# A sentence ends at '.', '!' or '?' followed by whitespace
SENTENCE_BREAK_PATTERN = re.compile(r"(?<=[\.!\?])\s+")


def require_text(value, name: str = "value") -> str:
    """Raise NullInputError when value is None, otherwise return it."""
    if value is None:
        raise NullInputError(name)
    return value


def require_char(value, name: str) -> str:
    """Check that value is a single character."""
    require_text(value, name)
    if len(value) != 1:
        raise InvalidArgumentError(f"Argument '{name}' must be a single character, got {value!r}")
    return value


def require_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise InvalidArgumentError(f"Argument '{name}' must be non-negative, got {value}")
    return value


def capitalize_first(word: str) -> str:
    """Uppercase the first character and lowercase the rest.

    Examples:
        "hELLO" -> "Hello"
        "" -> ""
    """
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def split_words(text: str) -> list[str]:
    """Split text on whitespace and sentence punctuation, dropping empty pieces."""
    return [word for word in _WORD_DELIMITER_PATTERN.split(text) if word]


def split_sentences(text: str) -> list[str]:
    """Split text after sentence-ending punctuation, dropping blank pieces."""
    return [sentence for sentence in SENTENCE_BREAK_PATTERN.split(text) if sentence.strip()]


def distinct_ignore_case(items: Iterable[str]) -> list[str]:
    """Remove case-insensitive duplicates, keeping the first occurrence."""
    seen = set()
    result = []
    for item in items:
        key = item.casefold()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result
