"""
Word segmentation used by the programmer-style casings.

Words break at whitespace, '-' and '_' (the separator is dropped) and at a
lowercase letter followed by an uppercase one ("helloWorld" -> "hello", "World").
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from .utils import require_text

SEPARATORS = "-_"


class Token(NamedTuple):
    """A word produced by segmentation and its index in the output."""

    text: str
    position: int


def _is_separator(char: str) -> bool:
    return char.isspace() or char in SEPARATORS


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield the words of text in order. Empty runs between separators are skipped."""
    require_text(text, "text")
    return _generate_tokens(text)


def _generate_tokens(text: str) -> Iterator[Token]:
    current: list[str] = []
    position = 0
    previous = ""

    for char in text:
        if _is_separator(char):
            if current:
                yield Token("".join(current), position)
                position += 1
                current = []
        elif char.isupper() and previous.islower():
            # camelCase boundary: previous is still part of the current word
            yield Token("".join(current), position)
            position += 1
            current = [char]
        else:
            current.append(char)
        previous = char

    if current:
        yield Token("".join(current), position)


def word_segmentize(text: str) -> list[str]:
    """Split text into words for PascalCase, camelCase, kebab-case and snake_case conversion.

    Examples:
        "hello world" -> ["hello", "world"]
        "helloWorld" -> ["hello", "World"]
        "--__  " -> []

    Args:
        text: The text to split

    Returns:
        List of non-empty words in input order

    Raises:
        NullInputError: If text is None
    """
    return [token.text for token in iter_tokens(text)]


split_into_words = word_segmentize
