"""
Counting helpers.

All counts are non-negative and every function raises NullInputError when the
text is None.
"""

from .utils import require_text, split_sentences, split_words

VOWELS = frozenset("aeiou")


def count_letters(text: str) -> int:
    return sum(1 for c in require_text(text, "text") if c.isalpha())


def count_digits(text: str) -> int:
    return sum(1 for c in require_text(text, "text") if c.isdecimal())


def count_uppercase(text: str) -> int:
    return sum(1 for c in require_text(text, "text") if c.isupper())


def count_lowercase(text: str) -> int:
    return sum(1 for c in require_text(text, "text") if c.islower())


def count_vowels(text: str, case_sensitive: bool = False) -> int:
    """Count a, e, i, o and u in text ("Hello World" -> 3).

    With case_sensitive=True uppercase vowels are still vowels; the flag only
    controls whether text is lowercased before matching.
    """
    require_text(text, "text")
    if not case_sensitive:
        text = text.lower()
    return sum(1 for c in text if c.lower() in VOWELS)


def count_consonants(text: str, case_sensitive: bool = False) -> int:
    """Count letters that are not vowels ("Hello World" -> 7)."""
    require_text(text, "text")
    if not case_sensitive:
        text = text.lower()
    return sum(1 for c in text if c.isalpha() and c.lower() not in VOWELS)


def count_occurrences(text: str, target: str, case_sensitive: bool = False) -> int:
    """Count non-overlapping occurrences of target in text.

    Examples:
        count_occurrences("hello world", "l") -> 3
        count_occurrences("Hello HELLO hello", "hello") -> 3
        count_occurrences("aaaa", "aa") -> 2

    Args:
        text: The text to search
        target: Character or substring to count; an empty target counts as 0
        case_sensitive: Whether to match case exactly

    Returns:
        Number of occurrences
    """
    require_text(text, "text")
    require_text(target, "target")
    if not target:
        return 0
    if not case_sensitive:
        text = text.lower()
        target = target.lower()
    return text.count(target)


def count_words(text: str) -> int:
    """Count words separated by whitespace or , . ; ! ? ("Hello world, how are you?" -> 5)."""
    return len(split_words(require_text(text, "text")))


def count_lines(text: str) -> int:
    """Count newline-separated lines. Blank text has no lines."""
    require_text(text, "text")
    if not text.strip():
        return 0
    return len(text.split("\n"))


def count_sentences(text: str) -> int:
    """Count sentences ending in '.', '!' or '?' ("Hello. How are you? I'm fine!" -> 3)."""
    require_text(text, "text")
    if not text.strip():
        return 0
    return len(split_sentences(text))
