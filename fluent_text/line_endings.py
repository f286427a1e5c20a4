"""
Line ending conversion.

"\r\n" (Windows), "\n" (Unix) and a lone "\r" (classic Mac) are all recognised
as line breaks on input.
"""

import os

from .utils import require_text


def to_unix_line_endings(text: str) -> str:
    """Convert every line break to "\\n"."""
    return require_text(text, "text").replace("\r\n", "\n").replace("\r", "\n")


def to_windows_line_endings(text: str) -> str:
    """Convert every line break to "\\r\\n"."""
    return to_unix_line_endings(text).replace("\n", "\r\n")


def to_mac_line_endings(text: str) -> str:
    """Convert every line break to "\\r"."""
    return require_text(text, "text").replace("\r\n", "\r").replace("\n", "\r")


def normalize_line_endings(text: str, newline: str | None = None) -> str:
    """Convert every line break to newline, which defaults to os.linesep."""
    normalized = to_unix_line_endings(text)
    newline = os.linesep if newline is None else newline
    if newline == "\n":
        return normalized
    return normalized.replace("\n", newline)
