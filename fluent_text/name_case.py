"""
Name casing for personal names.

Each whitespace-separated word is classified and then capitalized:

- particles stay lowercase ("von Neumann", "Jean-Claude van Damme")
- Roman numerals are uppercased ("Henry VIII")
- hyphenated parts are cased one by one ("Mary-Jane")
- a single apostrophe capitalizes both sides ("O'Brien")
- Mc/Mac prefixes capitalize the following letter ("McDonald", "MacArthur")
"""

from __future__ import annotations

import re
from enum import Enum

from .config import DEFAULT_CONFIG, TextConfig
from .utils import capitalize_first, require_text

ROMAN_NUMERAL_LETTERS = frozenset("IVXLCDM")

_ROMAN_NUMERAL_PATTERN = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")


class NameTokenKind(str, Enum):
    """How a word of a name is capitalized, in priority order."""

    PARTICLE = "particle"
    ROMAN_NUMERAL = "roman_numeral"
    HYPHENATED = "hyphenated"
    APOSTROPHED = "apostrophed"
    MC_PREFIXED = "mc_prefixed"
    MAC_PREFIXED = "mac_prefixed"
    PLAIN = "plain"


def is_name_particle(word: str, config: TextConfig | None = None) -> bool:
    config = config or DEFAULT_CONFIG
    return word.lower() in config.name_particles


def is_roman_numeral(word: str, strict: bool = False) -> bool:
    """Check whether word reads as a Roman numeral.

    The default check only looks at the letters, so "MIX" or "DID" count as
    numerals. With strict=True the word must follow the numeral grammar (1-3999).
    """
    upper = word.upper()
    if strict:
        return bool(upper) and _ROMAN_NUMERAL_PATTERN.fullmatch(upper) is not None
    return bool(upper) and all(c in ROMAN_NUMERAL_LETTERS for c in upper)


def _classify_structure(word: str) -> NameTokenKind:
    if "-" in word:
        return NameTokenKind.HYPHENATED
    if word.count("'") == 1:
        return NameTokenKind.APOSTROPHED

    lower = word.lower()
    if lower.startswith("mc") and len(lower) > 2:
        return NameTokenKind.MC_PREFIXED
    if lower.startswith("mac") and len(lower) > 3:
        return NameTokenKind.MAC_PREFIXED
    return NameTokenKind.PLAIN


def classify_name_word(word: str, config: TextConfig | None = None) -> NameTokenKind:
    """Return the kind of a single name word.

    Args:
        word: One whitespace-free word of a name
        config: Particle list and Roman numeral mode (defaults to DEFAULT_CONFIG)

    Returns:
        The first matching NameTokenKind
    """
    config = config or DEFAULT_CONFIG
    if is_name_particle(word, config):
        return NameTokenKind.PARTICLE
    # Numerals win over Mc/Mac, so a lone "mc" is MC (1100). Only _case_name_part gives "Mc".
    if is_roman_numeral(word, config.strict_roman_numerals):
        return NameTokenKind.ROMAN_NUMERAL
    return _classify_structure(word)


def _case_name_part(word: str) -> str:
    """Capitalize a word or a hyphen-separated part of one."""
    kind = _classify_structure(word)

    if kind is NameTokenKind.HYPHENATED:
        return "-".join(_case_name_part(part) for part in word.split("-"))
    if kind is NameTokenKind.APOSTROPHED:
        head, tail = word.split("'")
        return f"{capitalize_first(head)}'{capitalize_first(tail)}"
    if kind is NameTokenKind.MC_PREFIXED:
        return "Mc" + capitalize_first(word.lower()[2:])
    if kind is NameTokenKind.MAC_PREFIXED:
        return "Mac" + capitalize_first(word.lower()[3:])
    return capitalize_first(word)


def case_name_word(word: str, config: TextConfig | None = None) -> str:
    kind = classify_name_word(word, config)
    if kind is NameTokenKind.PARTICLE:
        return word.lower()
    if kind is NameTokenKind.ROMAN_NUMERAL:
        return word.upper()
    return _case_name_part(word)


def to_name_case(text: str, config: TextConfig | None = None) -> str:
    """Convert a personal name to name case.

    Examples:
        "o'brien" -> "O'Brien"
        "jean-claude van damme" -> "Jean-Claude van Damme"
        "mcdonald" -> "McDonald"
        "henry viii" -> "Henry VIII"

    Args:
        text: The name to convert
        config: Particle list and Roman numeral mode (defaults to DEFAULT_CONFIG)

    Returns:
        The words of text, cased and joined with single spaces

    Raises:
        NullInputError: If text is None
    """
    require_text(text, "text")
    if not text:
        return text
    return " ".join(case_name_word(word, config) for word in text.split())
