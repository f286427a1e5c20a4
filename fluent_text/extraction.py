"""
Extraction of substrings and common entities (emails, URLs, dates, ...).

The extract_* functions return a list that is never None: matches appear in
input order, case-insensitive duplicates are dropped (the first one wins) and
blank text gives an empty list.
"""

from __future__ import annotations

import re

from .errors import InvalidArgumentError
from .utils import (
    SENTENCE_BREAK_PATTERN,
    distinct_ignore_case,
    require_non_negative,
    require_text,
    split_words,
)

DATE_PATTERN = re.compile(r"\b\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b|\b\d{4}[/-]\d{1,2}[/-]\d{1,2}\b")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
HASHTAG_PATTERN = re.compile(r"#\w+")
MENTION_PATTERN = re.compile(r"@\w+")
NUMBER_PATTERN = re.compile(r"\b\d+(\.\d+)?\b")
PHONE_PATTERN = re.compile(r"\+?\d[\d -]{8,}\d")
URL_PATTERN = re.compile(r"(http|https)://[^\s/$.?#].[^\s]*")


def _extract(pattern: re.Pattern, text: str) -> list[str]:
    require_text(text, "text")
    if not text.strip():
        return []
    return distinct_ignore_case(match.group(0) for match in pattern.finditer(text))


def extract_dates(text: str) -> list[str]:
    """Extract dates like 2024-12-25 or 12/31/2024."""
    return _extract(DATE_PATTERN, text)


def extract_emails(text: str) -> list[str]:
    return _extract(EMAIL_PATTERN, text)


def extract_hashtags(text: str) -> list[str]:
    """Extract hashtags, keeping the '#' ("Love #coding" -> ["#coding"])."""
    return _extract(HASHTAG_PATTERN, text)


def extract_mentions(text: str) -> list[str]:
    """Extract mentions, keeping the '@' ("Thanks @john" -> ["@john"])."""
    return _extract(MENTION_PATTERN, text)


def extract_numbers(text: str) -> list[str]:
    """Extract integers and decimals as strings ("Price: 19.99 and 5" -> ["19.99", "5"])."""
    return _extract(NUMBER_PATTERN, text)


def extract_phone_numbers(text: str) -> list[str]:
    """Extract phone numbers: at least ten digits, optionally with '+', spaces or dashes."""
    return _extract(PHONE_PATTERN, text)


def extract_urls(text: str) -> list[str]:
    return _extract(URL_PATTERN, text)


def extract_all_sentences(text: str) -> list[str]:
    """Extract sentences, stripped of surrounding whitespace.

    Example:
        "Hello world. How are you? I'm fine!" -> ["Hello world.", "How are you?", "I'm fine!"]
    """
    require_text(text, "text")
    if not text.strip():
        return []
    sentences = (sentence.strip() for sentence in SENTENCE_BREAK_PATTERN.split(text))
    return distinct_ignore_case(sentence for sentence in sentences if sentence)


def extract_all_words(text: str) -> list[str]:
    """Extract words separated by whitespace or , . ; ! ?"""
    require_text(text, "text")
    return distinct_ignore_case(split_words(text))


def _words_matching(text: str, needle: str, name: str, case_sensitive: bool, predicate) -> list[str]:
    require_text(text, "text")
    require_text(needle, name)
    if not text.strip() or not needle.strip():
        return []
    if not case_sensitive:
        needle = needle.casefold()
    words = split_words(text)
    return distinct_ignore_case(w for w in words if predicate(w if case_sensitive else w.casefold(), needle))


def extract_words_containing(text: str, substring: str, case_sensitive: bool = False) -> list[str]:
    """Extract words that contain substring ("hello world wonderful", "or" -> ["world", "wonderful"])."""
    return _words_matching(text, substring, "substring", case_sensitive, lambda w, s: s in w)


def extract_words_starting_with(text: str, prefix: str, case_sensitive: bool = False) -> list[str]:
    return _words_matching(text, prefix, "prefix", case_sensitive, str.startswith)


def extract_words_ending_with(text: str, suffix: str, case_sensitive: bool = False) -> list[str]:
    return _words_matching(text, suffix, "suffix", case_sensitive, str.endswith)


def extract_words_of_length(text: str, length: int) -> list[str]:
    require_text(text, "text")
    if not text.strip() or length <= 0:
        return []
    return distinct_ignore_case(w for w in split_words(text) if len(w) == length)


def extract_between(text: str, start: str, end: str, include_markers: bool = False) -> list[str]:
    """Extract every segment enclosed by the start and end markers.

    A segment runs from start up to the first character that also occurs in
    end. Results keep duplicates.

    Examples:
        extract_between("Hello [world] and [universe]!", "[", "]") -> ["world", "universe"]
        extract_between("Hello [world]!", "[", "]", include_markers=True) -> ["[world]"]

    Raises:
        NullInputError: If any argument is None
        InvalidArgumentError: If a marker is empty
    """
    require_text(text, "text")
    require_text(start, "start")
    require_text(end, "end")
    if not start or not end:
        raise InvalidArgumentError("Start and end markers must not be empty")
    if not text.strip():
        return []

    open_marker = re.escape(start)
    close_marker = re.escape(end)
    body = f"[^{close_marker}]*"
    if include_markers:
        pattern = f"{open_marker}{body}{close_marker}"
    else:
        pattern = f"(?<={open_marker}){body}(?={close_marker})"
    return [match.group(0) for match in re.finditer(pattern, text)]


def left(text: str, length: int) -> str:
    """Return the first length characters ("hello world", 5 -> "hello")."""
    require_text(text, "text")
    require_non_negative(length, "length")
    return text[:length]


def right(text: str, length: int) -> str:
    """Return the last length characters ("hello world", 5 -> "world")."""
    require_text(text, "text")
    require_non_negative(length, "length")
    if length == 0:
        return ""
    return text[-length:]


def mid(text: str, start: int, length: int) -> str:
    """Return up to length characters starting at start ("hello world", 6, 5 -> "world")."""
    require_text(text, "text")
    require_non_negative(start, "start")
    require_non_negative(length, "length")
    return text[start : start + length]
