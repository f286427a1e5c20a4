"""Fluent Text

Pure string helpers: casing conversions (including name-aware casing),
validation predicates, SQL-style pattern matching, extraction, counting,
manipulation, line-ending conversion and data-format encoding.
"""

__version__ = "1.0.0"

from .builder import FluentTextBuilder
from .casing import (
    to_alternating_case,
    to_camel_case,
    to_kebab_case,
    to_leet_speak,
    to_lower_case,
    to_name_case,
    to_pascal_case,
    to_proper_case,
    to_random_case,
    to_screaming_snake_case,
    to_sentence_case,
    to_snake_case,
    to_title_case,
    to_upper_case,
)
from .config import DEFAULT_CONFIG, EXTENDED_NAME_PARTICLES, NAME_PARTICLES, TextConfig
from .errors import FluentTextError, FormatError, InvalidArgumentError, NullInputError
from .name_case import NameTokenKind, classify_name_word
from .segmenter import Token, iter_tokens, split_into_words, word_segmentize

__all__ = [
    "FluentTextBuilder",
    "TextConfig",
    "DEFAULT_CONFIG",
    "NAME_PARTICLES",
    "EXTENDED_NAME_PARTICLES",
    "FluentTextError",
    "NullInputError",
    "FormatError",
    "InvalidArgumentError",
    "NameTokenKind",
    "classify_name_word",
    "Token",
    "iter_tokens",
    "word_segmentize",
    "split_into_words",
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
