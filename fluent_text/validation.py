"""
Emptiness and whitespace predicates.
"""

from .utils import require_text


def is_empty(text: str) -> bool:
    """Return True for "". Raises NullInputError for None."""
    return len(require_text(text, "text")) == 0


def is_null_or_empty(text: str | None) -> bool:
    return not text


def is_null_or_whitespace(text: str | None) -> bool:
    return text is None or not text.strip()


def is_whitespace(text: str) -> bool:
    """Return True when text is non-empty and made only of whitespace ("" -> False)."""
    return require_text(text, "text").isspace()
