"""
Parser for Short Payment Descriptor text.

Grammar (informal EBNF)::

    descriptor := "SPD*" version "*" field-list
    version    := digits "." digits
    field-list := field ("*" field)*
    field      := name ":" value
    name       := one or more characters other than ":"
    value      := zero or more characters other than "*"

Before the grammar is applied the whole input must consist of printable ASCII
(0x20..0x7E). Names and values are percent-decoded after splitting, so decoded
text may hold arbitrary Unicode.

Notes:
    - Parsing is all-or-nothing: the result is a fully populated Descriptor or a
      ParseError whose ``fragment`` is the unconsumed input from the failure point.
    - Duplicate names are accepted; the last occurrence wins.
    - A trailing ``*`` after the last field is reported as TRAILING_INPUT.

Examples:
    >>> from spayd.core.parser import parse_descriptor
    >>> d = parse_descriptor("SPD*1.0*MSG:%40%3F%2A%24%21")
    >>> d.field("MSG")
    '@?*$!'
"""

from __future__ import annotations

import logging
import re

from .canonical import HEADER_PREFIX
from .descriptor import Descriptor
from .encoding import FIELD_SEPARATOR, VALUE_SEPARATOR, decode
from .errors import EncodingError, ParseError, ParseErrorCode
from .validation import validate
from .versioning import Version

__all__ = ["parse_descriptor"]

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)")


def _check_printable(text: str) -> None:
    for i, ch in enumerate(text):
        if not " " <= ch <= "~":
            raise ParseError(text[i:], ParseErrorCode.NON_PRINTABLE)


def _parse_header(text: str) -> tuple[Version, int]:
    """Return the header version and the offset where the field list starts."""
    if not text.startswith(HEADER_PREFIX):
        raise ParseError(text, ParseErrorCode.BAD_HEADER)
    pos = len(HEADER_PREFIX)
    m = _VERSION_RE.match(text, pos)
    if m is None:
        raise ParseError(text[pos:], ParseErrorCode.BAD_VERSION)
    version = Version(int(m.group(1)), int(m.group(2)))
    pos = m.end()
    if pos == len(text):
        # "SPD*1.0" - no separator, no fields.
        raise ParseError(text[pos:], ParseErrorCode.EMPTY_FIELD_LIST)
    if text[pos] != FIELD_SEPARATOR:
        raise ParseError(text[pos:], ParseErrorCode.BAD_VERSION)
    return version, pos + 1


def _decode_part(part: str) -> str:
    try:
        return decode(part)
    except EncodingError as exc:
        raise ParseError(part, ParseErrorCode.ENCODING) from exc


def _parse_fields(text: str, start: int) -> list[tuple[str, str]]:
    if start == len(text):
        raise ParseError("", ParseErrorCode.EMPTY_FIELD_LIST)

    fields: list[tuple[str, str]] = []
    pos = start
    while True:
        end = text.find(FIELD_SEPARATOR, pos)
        if end == -1:
            end = len(text)
        entry = text[pos:end]
        if not entry and fields and end == len(text):
            # Well-formed fields followed by a dangling separator.
            raise ParseError(text[pos - 1 :], ParseErrorCode.TRAILING_INPUT)
        name, sep, value = entry.partition(VALUE_SEPARATOR)
        if not sep or not name:
            raise ParseError(text[pos:], ParseErrorCode.MALFORMED_FIELD)
        fields.append((_decode_part(name), _decode_part(value)))
        if end == len(text):
            return fields
        pos = end + 1


def parse_descriptor(text: str, *, validate_required: bool = False) -> Descriptor:
    """
    Parse descriptor text into a Descriptor.

    Args:
        text (str): Raw descriptor text, e.g. "SPD*1.0*ACC:CZ58...*AM:480.50".
        validate_required (bool): If True, also enforce the fields mandated by the
            header version (see spayd.core.validation).

    Returns:
        Descriptor: Descriptor holding the header version and decoded fields.

    Raises:
        ParseError: On non-printable input, grammar violations, or undecodable escapes.
        RequiredFieldMissing: If validate_required is set and a mandated field is absent.
    """
    _check_printable(text)
    version, start = _parse_header(text)
    fields = _parse_fields(text, start)

    descriptor = Descriptor(version)
    for name, value in fields:
        if name in descriptor:
            logger.debug("duplicate field %r in descriptor; keeping last value", name)
        descriptor.set_field(name, value)

    if validate_required:
        validate(descriptor)
    return descriptor
