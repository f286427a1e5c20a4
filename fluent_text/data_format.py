"""
Encoding and escaping helpers for common data formats.

Covers CSV fields and lines, JSON string escaping and string tables, XML
content escaping, Base64, URL encoding, HTML encoding and hex. Text is
converted to bytes as UTF-8; undecodable bytes become U+FFFD on the way back.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
import unicodedata
import urllib.parse
from collections.abc import Iterable

from markupsafe import Markup, escape

from .config import DEFAULT_CONFIG, TextConfig
from .errors import FormatError, InvalidArgumentError
from .utils import require_char, require_text

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]*")
_UNICODE_ESCAPE_PATTERN = re.compile(r"[0-9A-Fa-f]{4}")

_JSON_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_JSON_UNESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_XML_ESCAPES = [
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
]


# CSV


def to_csv_field(value: str, delimiter: str = ",") -> str:
    """Quote a CSV field when it contains the delimiter, a quote or a line break.

    Examples:
        to_csv_field("hello") -> 'hello'
        to_csv_field("hello, world") -> '"hello, world"'
        to_csv_field('say "hi"') -> '"say ""hi\"\"\"'
    """
    require_text(value)
    require_char(delimiter, "delimiter")
    if not any(c in value for c in (delimiter, '"', "\n", "\r")):
        return value
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def from_csv_field(value: str) -> str:
    """Remove surrounding quotes and unescape doubled quotes."""
    require_text(value)
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value.replace('""', '"')


def split_csv_line(value: str, delimiter: str = ",") -> list[str]:
    """Split one CSV line into unescaped fields.

    Example:
        split_csv_line('a,"b,c","say ""hi\"\"\"') -> ["a", "b,c", 'say "hi"']
    """
    require_text(value)
    require_char(delimiter, "delimiter")

    fields = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(value):
        c = value[i]
        if c == '"':
            if in_quotes and i + 1 < len(value) and value[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(c)
        i += 1

    fields.append("".join(current))
    return fields


def to_csv_line(values: Iterable[str], delimiter: str = ",") -> str:
    require_text(values, "values")
    return delimiter.join(to_csv_field(v if v is not None else "", delimiter) for v in values)


def to_csv(rows: Iterable[Iterable[str]], delimiter: str = ",") -> str:
    """Join rows into CSV text, one line per row separated by '\\n'. None cells become empty fields."""
    require_text(rows, "rows")
    return "\n".join(to_csv_line(row, delimiter) for row in rows)


def _pad_rows(rows: list[list[str]]) -> list[list[str]]:
    width = max((len(row) for row in rows), default=0)
    return [row + [""] * (width - len(row)) for row in rows]


def from_csv_to_list(value: str, delimiter: str = ",", pad: bool = False) -> list[list[str]]:
    """Parse CSV text into rows of fields.

    Lines are split on '\\n' and stripped; blank lines are skipped.

    Args:
        value: CSV text
        delimiter: Field delimiter
        pad: Pad short rows with "" so every row has the same width

    Returns:
        List of rows
    """
    require_text(value)
    lines = (line.strip() for line in value.split("\n"))
    rows = [split_csv_line(line, delimiter) for line in lines if line]
    return _pad_rows(rows) if pad else rows


# JSON


def to_json_string(value: str) -> str:
    """Escape value for use inside a JSON string literal (without the quotes)."""
    require_text(value)
    result = []
    for c in value:
        if c in _JSON_ESCAPES:
            result.append(_JSON_ESCAPES[c])
        elif unicodedata.category(c) == "Cc":
            result.append(f"\\u{ord(c):04x}")
        else:
            result.append(c)
    return "".join(result)


def from_json_string(value: str) -> str:
    """Unescape the contents of a JSON string literal.

    Unknown escapes yield the escaped character; a "\\u" not followed by four
    hex digits is dropped.
    """
    require_text(value)
    result = []
    escaping = False
    i = 0
    while i < len(value):
        c = value[i]
        if escaping:
            if c == "u":
                digits = value[i + 1 : i + 5]
                if len(digits) == 4 and _UNICODE_ESCAPE_PATTERN.fullmatch(digits):
                    result.append(chr(int(digits, 16)))
                    i += 4
            else:
                result.append(_JSON_UNESCAPES.get(c, c))
            escaping = False
        elif c == "\\":
            escaping = True
        else:
            result.append(c)
        i += 1
    return "".join(result)


def to_json_array(rows: Iterable[Iterable[str]]) -> str:
    """Serialize rows of strings as a compact JSON array of arrays.

    Example:
        to_json_array([["a", "b"], ["c"]]) -> '[["a","b"],["c"]]'
    """
    require_text(rows, "rows")
    encoded_rows = (",".join(f'"{to_json_string(cell if cell is not None else "")}"' for cell in row) for row in rows)
    return "[" + ",".join(f"[{row}]" for row in encoded_rows) + "]"


def from_json_to_list(value: str, pad: bool = False) -> list[list[str]]:
    """Parse a JSON array of string arrays.

    Blank text and a root that is not an array give []. null cells become "".

    Raises:
        FormatError: If value is not valid JSON, a row is not an array or a
            cell is not a string
    """
    require_text(value)
    if not value.strip():
        return []
    try:
        document = json.loads(value)
    except ValueError as e:
        raise FormatError(f"Invalid JSON: {e}") from e

    if not isinstance(document, list):
        return []

    rows = []
    for row in document:
        if not isinstance(row, list):
            raise FormatError(f"Expected an array for each row, got {type(row).__name__}")
        cells = []
        for cell in row:
            if cell is None:
                cells.append("")
            elif isinstance(cell, str):
                cells.append(cell)
            else:
                raise FormatError(f"Expected string cells, got {type(cell).__name__}")
        rows.append(cells)
    return _pad_rows(rows) if pad else rows


def is_valid_json(value: str) -> bool:
    require_text(value)
    if not value.strip():
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


# XML


def to_xml_content(value: str) -> str:
    """Escape &, <, >, " and ' as XML entities."""
    require_text(value)
    for char, entity in _XML_ESCAPES:
        value = value.replace(char, entity)
    return value


def from_xml_content(value: str) -> str:
    require_text(value)
    for char, entity in reversed(_XML_ESCAPES):
        value = value.replace(entity, char)
    return value


# Base64


def to_base64(value: str) -> str:
    return base64.b64encode(require_text(value).encode("utf-8")).decode("ascii")


def _decode_base64(value: str) -> bytes:
    compact = "".join(value.split())
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as e:
        raise FormatError(f"Invalid Base64 string: {e}") from e


def from_base64(value: str, config: TextConfig | None = None) -> str:
    """Decode Base64 text to a UTF-8 string. Whitespace in the input is ignored.

    Raises:
        FormatError: If value is not valid Base64
        InvalidArgumentError: If the decoded payload would exceed config.max_decoded_bytes
    """
    require_text(value)
    config = config or DEFAULT_CONFIG
    estimated_size = len(value) * 3 // 4
    if estimated_size > config.max_decoded_bytes:
        raise InvalidArgumentError(
            f"Base64 string too large: would decode to approximately {estimated_size} bytes, "
            f"exceeding maximum of {config.max_decoded_bytes}"
        )
    return _decode_base64(value).decode("utf-8", errors="replace")


def is_valid_base64(value: str) -> bool:
    require_text(value)
    if not value.strip():
        return False
    try:
        _decode_base64(value)
    except FormatError:
        return False
    return True


# URL


def to_url_encoded(value: str) -> str:
    """Form-encode value: spaces become '+', reserved characters become %XX."""
    return urllib.parse.quote_plus(require_text(value), safe="!*()")


def from_url_encoded(value: str) -> str:
    return urllib.parse.unquote_plus(require_text(value))


# HTML


def to_html_encoded(value: str) -> str:
    """Escape &, <, >, ' and " with the same rules Jinja2 autoescaping uses."""
    return str(escape(require_text(value)))


def from_html_encoded(value: str) -> str:
    """Replace named and numeric HTML character references ("&lt;b&gt;" -> "<b>")."""
    return Markup(require_text(value)).unescape()


# Hex


def to_hex(value: str, uppercase: bool = True) -> str:
    """Hex-encode the UTF-8 bytes of value ("Hi" -> "4869")."""
    encoded = require_text(value).encode("utf-8").hex()
    return encoded.upper() if uppercase else encoded


def from_hex(value: str, config: TextConfig | None = None) -> str:
    """Decode hex pairs to a UTF-8 string.

    Raises:
        FormatError: If value has odd length or non-hex characters
        InvalidArgumentError: If the decoded payload would exceed config.max_decoded_bytes
    """
    require_text(value)
    config = config or DEFAULT_CONFIG
    if len(value) % 2 != 0:
        raise FormatError("Hex string must have an even number of characters.")
    byte_count = len(value) // 2
    if byte_count > config.max_decoded_bytes:
        raise InvalidArgumentError(
            f"Hex string too large: would decode to {byte_count} bytes, exceeding maximum of {config.max_decoded_bytes}"
        )
    if not _HEX_PATTERN.fullmatch(value):
        raise FormatError("Hex string contains non-hex characters.")
    return bytes.fromhex(value).decode("utf-8", errors="replace")


def is_valid_hex(value: str) -> bool:
    require_text(value)
    return bool(value.strip()) and len(value) % 2 == 0 and _HEX_PATTERN.fullmatch(value) is not None
