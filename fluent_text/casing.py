"""
Casing conversions.

PascalCase, camelCase, kebab-case, snake_case and SCREAMING_SNAKE_CASE are
built on word_segmentize(); name casing lives in name_case.py.
"""

from __future__ import annotations

import random
import re

from .name_case import to_name_case
from .segmenter import word_segmentize
from .utils import capitalize_first, require_text

__all__ = [
    "to_pascal_case",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "to_screaming_snake_case",
    "to_name_case",
    "to_upper_case",
    "to_lower_case",
    "to_title_case",
    "to_proper_case",
    "to_sentence_case",
    "to_alternating_case",
    "to_random_case",
    "to_leet_speak",
]

# A title-case word: letters, optionally joined by apostrophes ("don't")
_TITLE_WORD_PATTERN = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

_LEET_TABLE = str.maketrans(
    {
        "A": "4",
        "a": "4",
        "E": "3",
        "e": "3",
        "I": "1",
        "i": "1",
        "O": "0",
        "o": "0",
        "S": "5",
        "s": "5",
        "T": "7",
        "t": "7",
        "B": "8",
        "b": "8",
        "G": "6",
        "g": "6",
    }
)


def _join_words(text: str, separator: str, transform) -> str:
    require_text(text, "text")
    if not text:
        return text
    return separator.join(transform(word) for word in word_segmentize(text))


def to_pascal_case(text: str) -> str:
    """Convert text to PascalCase.

    Examples:
        "hello world" -> "HelloWorld"
        "hello_world" -> "HelloWorld"
        "helloWorld" -> "HelloWorld"
        "HELLO" -> "Hello"

    Args:
        text: The text to convert (space, hyphen, underscore or camelCase separated)

    Returns:
        PascalCase string
    """
    return _join_words(text, "", capitalize_first)


def to_camel_case(text: str) -> str:
    """Convert text to camelCase ("HelloWorld" -> "helloWorld")."""
    pascal = to_pascal_case(text)
    if not pascal:
        return pascal
    return pascal[0].lower() + pascal[1:]


def to_kebab_case(text: str) -> str:
    """Convert text to kebab-case ("HelloWorld" -> "hello-world")."""
    return _join_words(text, "-", str.lower)


def to_snake_case(text: str) -> str:
    """Convert text to snake_case ("helloWorld" -> "hello_world")."""
    return _join_words(text, "_", str.lower)


def to_screaming_snake_case(text: str) -> str:
    """Convert text to SCREAMING_SNAKE_CASE ("helloWorld" -> "HELLO_WORLD")."""
    return _join_words(text, "_", str.upper)


def to_upper_case(text: str) -> str:
    return require_text(text, "text").upper()


def to_lower_case(text: str) -> str:
    return require_text(text, "text").lower()


def to_title_case(text: str) -> str:
    """Lowercase text, then capitalize the first letter of every word.

    Apostrophes stay inside a word, so "DON'T STOP" becomes "Don't Stop".
    """
    lowered = require_text(text, "text").lower()
    return _TITLE_WORD_PATTERN.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], lowered)


def to_proper_case(text: str) -> str:
    """Alias of to_title_case()."""
    return to_title_case(text)


def to_sentence_case(text: str, lower_rest: bool = False) -> str:
    """Uppercase the first character.

    The remaining characters are kept as they are, or lowercased when lower_rest is set.
    """
    require_text(text, "text")
    if not text:
        return text
    rest = text[1:].lower() if lower_rest else text[1:]
    return text[0].upper() + rest


def to_alternating_case(text: str, start_with_upper: bool = True) -> str:
    """Alternate upper and lower case over the letters of text ("hello" -> "HeLlO").

    Non-letters are copied unchanged and do not advance the alternation.
    """
    require_text(text, "text")
    result = []
    make_upper = start_with_upper
    for char in text:
        if char.isalpha():
            result.append(char.upper() if make_upper else char.lower())
            make_upper = not make_upper
        else:
            result.append(char)
    return "".join(result)


def to_random_case(text: str, rng: random.Random | None = None) -> str:
    """Randomly upper- or lowercase every letter.

    Pass a seeded random.Random as rng for reproducible output.
    """
    require_text(text, "text")
    rng = rng or random.Random()
    return "".join((char.upper() if rng.randrange(2) else char.lower()) if char.isalpha() else char for char in text)


def to_leet_speak(text: str) -> str:
    """Replace letters with look-alike digits ("elite" -> "3l173")."""
    return require_text(text, "text").translate(_LEET_TABLE)
