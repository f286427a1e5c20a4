"""
Configuration for the text helpers.

Only a handful of operations consult it: name casing (particles and Roman
numeral detection) and the operations that guard against huge results.
Configs are frozen, so DEFAULT_CONFIG can be shared safely.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

# Particles that stay lowercase in names ("von Neumann", "van Damme")
NAME_PARTICLES: tuple[str, ...] = ("von", "van", "de", "del", "della", "di", "da", "le", "la")

# Larger list some style guides use; opt in through TextConfig.name_particles
EXTENDED_NAME_PARTICLES: tuple[str, ...] = NAME_PARTICLES + ("der", "den", "dos", "das", "el")


@dataclass(frozen=True)
class TextConfig:
    """Configuration options for the text helpers."""

    # Words kept lowercase by to_name_case, stored lowercased
    name_particles: Iterable[str] = NAME_PARTICLES

    # Check Roman numerals against the numeral grammar instead of the letter set
    strict_roman_numerals: bool = False

    # Longest string repeat() may build
    max_result_length: int = 50_000_000

    # Largest payload from_base64() and from_hex() may decode
    max_decoded_bytes: int = 100_000_000

    def __post_init__(self):
        object.__setattr__(self, "name_particles", tuple(p.lower() for p in self.name_particles))

    @staticmethod
    def from_dict(d: dict) -> TextConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(TextConfig)}
        return TextConfig(**{k: v for k, v in d.items() if k in known})

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "name_particles": list(self.name_particles),
            "strict_roman_numerals": self.strict_roman_numerals,
            "max_result_length": self.max_result_length,
            "max_decoded_bytes": self.max_decoded_bytes,
        }


DEFAULT_CONFIG = TextConfig()
