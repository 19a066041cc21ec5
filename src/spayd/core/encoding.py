"""
Percent-encoding for descriptor field names and values.

The field separator ``*``, the name/value separator ``:``, the percent sign, ASCII
control characters, and every non-ASCII character are escaped byte-wise over
UTF-8 as ``%XX`` with uppercase hex. Everything else in the printable ASCII range
passes through untouched, spaces included. This module is zero-IO.

Notes:
    - decode(encode(x)) == x for any valid Unicode text x. Lone surrogates such as
      ``"\ud800"`` have no UTF-8 form; encode raises UnicodeEncodeError for them.
    - Non-ASCII text is always escaped so serialized descriptors stay within the
      printable ASCII alphabet the parser accepts.
    - A ``%`` that is not followed by two hex digits decodes to itself.

Examples:
    >>> from spayd.core.encoding import encode, decode
    >>> encode("****!")
    '%2A%2A%2A%2A!'
    >>> encode("PŘÍKLAD")
    'P%C5%98%C3%8DKLAD'
    >>> decode("%40%3F%2A%24%21")
    '@?*$!'
"""

from __future__ import annotations

from typing import Final
from urllib.parse import quote, unquote

from .errors import EncodingError

__all__ = [
    "FIELD_SEPARATOR",
    "VALUE_SEPARATOR",
    "ESCAPED_CHARS",
    "encode",
    "decode",
]

FIELD_SEPARATOR: Final[str] = "*"
VALUE_SEPARATOR: Final[str] = ":"
ESCAPED_CHARS: Final[str] = FIELD_SEPARATOR + VALUE_SEPARATOR + "%"

# Printable ASCII (0x20..0x7E) minus the reserved characters; DEL and C0 controls
# are outside this range and therefore always escaped.
_SAFE: Final[str] = "".join(
    chr(c) for c in range(0x20, 0x7F) if chr(c) not in ESCAPED_CHARS
)


def encode(text: str) -> str:
    """
    Percent-escape reserved, control, and non-ASCII characters.

    Args:
        text (str): Raw field name or value.

    Returns:
        str: Escaped text containing only printable ASCII and no literal ``*`` or ``:``.

    Raises:
        UnicodeEncodeError: If text contains a lone surrogate.
    """
    return quote(text, safe=_SAFE, encoding="utf-8", errors="strict")


def decode(text: str) -> str:
    """
    Reverse percent-escapes and decode the resulting bytes as UTF-8.

    Args:
        text (str): Escaped field name or value.

    Returns:
        str: Decoded text.

    Raises:
        EncodingError: If the unescaped byte sequence is not valid UTF-8.
    """
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise EncodingError(text) from exc
