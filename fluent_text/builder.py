"""
Fluent wrapper for chaining text operations.

Example:
    FluentTextBuilder.from_value("  jean-claude   van damme ").apply(collapse_whitespace).apply(str.strip).apply(to_name_case).build()
    -> "Jean-Claude van Damme"
"""

from __future__ import annotations

from collections.abc import Callable

from .utils import require_text


class FluentTextBuilder:
    """Immutable holder of a string; every apply() returns a new builder."""

    def __init__(self, value: str):
        self._value = require_text(value)

    @classmethod
    def from_value(cls, value: str) -> FluentTextBuilder:
        """Create a builder over value. Raises NullInputError when value is None."""
        return cls(value)

    def apply(self, func: Callable[..., str], *args, **kwargs) -> FluentTextBuilder:
        """Return a builder over func(value, *args, **kwargs)."""
        return type(self)(func(self._value, *args, **kwargs))

    def build(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
