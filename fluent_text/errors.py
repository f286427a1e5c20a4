"""
Exceptions raised by the text helpers.
"""


class FluentTextError(Exception):
    """Base class for every error raised by fluent_text."""

    pass


class NullInputError(FluentTextError, TypeError):
    """Raised when a required string argument is None."""

    def __init__(self, name: str = "value"):
        super().__init__(f"Argument '{name}' cannot be None")
        self.name = name


class FormatError(FluentTextError, ValueError):
    """Raised when encoded input (Base64, hex, JSON, ...) is malformed."""

    pass


class InvalidArgumentError(FluentTextError, ValueError):
    """Raised when an argument is out of range or a result would exceed a size limit.

    This can happen when:
    - A length, index or count is negative or past the end of the string
    - A delimiter or mask character is not exactly one character
    - A result would be larger than the configured limits
    """

    pass
