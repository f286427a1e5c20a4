"""
String manipulation: whitespace cleanup, masking, repeating, shuffling,
truncation and word wrapping.

Shuffling functions take an optional random.Random so callers (and tests) can
supply a seeded generator.
"""

from __future__ import annotations

import random
import re

from .config import DEFAULT_CONFIG, TextConfig
from .errors import InvalidArgumentError
from .utils import require_char, require_non_negative, require_text, split_sentences

_WHITESPACE_PATTERN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space ("a  \t b" -> "a b")."""
    return _WHITESPACE_PATTERN.sub(" ", require_text(text, "text"))


def remove_whitespace(text: str) -> str:
    return "".join(c for c in require_text(text, "text") if not c.isspace())


def insert_at(text: str, index: int, insertion: str) -> str:
    """Insert insertion before position index ("hello world", 6, "big " -> "hello big world").

    Raises:
        InvalidArgumentError: If index is outside 0..len(text)
    """
    require_text(text, "text")
    require_text(insertion, "insertion")
    if index < 0 or index > len(text):
        raise InvalidArgumentError(f"Index {index} is outside the string (length {len(text)})")
    return text[:index] + insertion + text[index:]


def mask(text: str, start: int, length: int, mask_char: str = "*") -> str:
    """Replace length characters from start with mask_char.

    Out-of-range starts and non-positive lengths return text unchanged; the
    masked run stops at the end of text.

    Examples:
        mask("1234567890", 4, 4) -> "1234****90"
        mask("password123", 0, 8, "#") -> "########123"
    """
    require_text(text, "text")
    require_char(mask_char, "mask_char")
    if start < 0 or start >= len(text) or length <= 0:
        return text
    end = min(start + length, len(text))
    return text[:start] + mask_char * (end - start) + text[end:]


def repeat(text: str, count: int, config: TextConfig | None = None) -> str:
    """Repeat text count times ("Ha", 3 -> "HaHaHa").

    Raises:
        InvalidArgumentError: If count is negative or the result would be longer
            than config.max_result_length
    """
    require_text(text, "text")
    require_non_negative(count, "count")
    config = config or DEFAULT_CONFIG
    result_length = len(text) * count
    if result_length > config.max_result_length:
        raise InvalidArgumentError(
            f"Result would be {result_length} characters, exceeding maximum allowed length of {config.max_result_length}"
        )
    return text * count


def reverse(text: str) -> str:
    return require_text(text, "text")[::-1]


def shuffle(text: str, rng: random.Random | None = None) -> str:
    """Return the characters of text in random order."""
    chars = list(require_text(text, "text"))
    (rng or random.Random()).shuffle(chars)
    return "".join(chars)


def shuffle_words(text: str, rng: random.Random | None = None) -> str:
    """Shuffle space/tab separated words and join them with single spaces.

    Blank text is returned unchanged.
    """
    require_text(text, "text")
    if not text.strip():
        return text
    words = [word for word in re.split(r"[ \t]+", text) if word]
    (rng or random.Random()).shuffle(words)
    return " ".join(words)


def shuffle_sentences(text: str, rng: random.Random | None = None) -> str:
    """Shuffle sentences and join them with single spaces.

    Blank text is returned unchanged.
    """
    require_text(text, "text")
    if not text.strip():
        return text
    sentences = split_sentences(text)
    (rng or random.Random()).shuffle(sentences)
    return " ".join(sentences)


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to max_length, adding suffix if truncated.

    When the suffix alone does not fit, the suffix itself is cut to max_length.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text with suffix, or original if short enough

    Example:
        >>> truncate("This is a long sentence", 10)
        'This is...'
        >>> truncate("This is a long sentence", 10, "~")
        'This is a~'
    """
    require_text(text, "text")
    require_text(suffix, "suffix")
    require_non_negative(max_length, "max_length")
    if len(text) <= max_length:
        return text
    cut = max_length - len(suffix)
    if cut <= 0:
        return suffix[:max_length]
    return text[:cut] + suffix


def _chunks(word: str, size: int) -> list[str]:
    return [word[i : i + size] for i in range(0, len(word), size)]


def wrap_text_at(text: str, max_length: int, break_words: bool = True) -> str:
    """Wrap text into lines of at most max_length characters, joined by '\\n'.

    Words are separated by single spaces. A word longer than max_length is
    split into chunks when break_words is set, otherwise it gets a line of
    its own.

    Example:
        wrap_text_at("This is a very long sentence that needs wrapping", 20, False)
        -> "This is a very long\\nsentence that needs\\nwrapping"

    Raises:
        InvalidArgumentError: If max_length is not positive
    """
    require_text(text, "text")
    if max_length <= 0:
        raise InvalidArgumentError(f"max_length must be positive, got {max_length}")
    if len(text) <= max_length:
        return text

    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        if break_words and len(word) > max_length:
            if current:
                lines.append(current)
                current = ""
            lines.extend(_chunks(word, max_length))
            continue

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_length:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)
    return "\n".join(lines).rstrip("\r\n")
