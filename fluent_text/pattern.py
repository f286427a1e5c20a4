"""
Pattern matching helpers modelled on SQL operators (LIKE, IN, BETWEEN).

Comparisons ignore case unless case_sensitive=True.
"""

import re
from collections.abc import Iterable

from .utils import require_text


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.casefold()


def between(text: str, start: str, end: str, case_sensitive: bool = False) -> bool:
    """Check that start <= text <= end in ordinal order.

    Examples:
        between("bob", "alice", "charlie") -> True
        between("alice", "alice", "charlie") -> True
        between("dave", "alice", "charlie") -> False
    """
    require_text(text, "text")
    require_text(start, "start")
    require_text(end, "end")
    value = _fold(text, case_sensitive)
    return _fold(start, case_sensitive) <= value <= _fold(end, case_sensitive)


def contains_text(text: str, search_term: str, case_sensitive: bool = False) -> bool:
    require_text(text, "text")
    require_text(search_term, "search_term")
    return _fold(search_term, case_sensitive) in _fold(text, case_sensitive)


def starts_with_text(text: str, prefix: str, case_sensitive: bool = False) -> bool:
    require_text(text, "text")
    require_text(prefix, "prefix")
    return _fold(text, case_sensitive).startswith(_fold(prefix, case_sensitive))


def ends_with_text(text: str, suffix: str, case_sensitive: bool = False) -> bool:
    require_text(text, "text")
    require_text(suffix, "suffix")
    return _fold(text, case_sensitive).endswith(_fold(suffix, case_sensitive))


def is_in(text: str, values: Iterable[str], case_sensitive: bool = False) -> bool:
    """Check whether text equals any of values ("HELLO" in ["hello", "world"] -> True)."""
    require_text(text, "text")
    require_text(values, "values")
    value = _fold(text, case_sensitive)
    return any(candidate is not None and _fold(candidate, case_sensitive) == value for candidate in values)


def like_to_regex(pattern: str) -> str:
    """Translate a SQL LIKE pattern to a regular expression.

    '%' matches any run of characters and '_' exactly one character.
    """
    return re.escape(pattern).replace("%", ".*").replace("_", ".")


def is_like(text: str, pattern: str, case_sensitive: bool = False) -> bool:
    """Match text against a SQL LIKE pattern.

    Examples:
        is_like("hello world", "hello%") -> True
        is_like("hello world", "hello_world") -> True
        is_like("hello world", "HELLO%", case_sensitive=True) -> False

    Args:
        text: The text to match
        pattern: LIKE pattern; the whole text must match
        case_sensitive: Whether to match case exactly

    Returns:
        True if text matches the pattern
    """
    require_text(text, "text")
    require_text(pattern, "pattern")
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.fullmatch(like_to_regex(pattern), text, flags) is not None
