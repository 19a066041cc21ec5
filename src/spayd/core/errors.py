"""
Core exception types raised by parsing, decoding, validation, and checksum checks.

Provides typed exceptions for core-domain failures:
- ParseError for malformed descriptor text (with a machine-readable code).
- EncodingError for percent-escapes that do not decode to UTF-8.
- RequiredFieldMissing for descriptors lacking a format-mandated field.
- ChecksumError for CRC32 problems (malformed, mismatch, required but absent).

Notes:
    - Every exception derives from SpaydError, itself a ValueError, so callers can
      catch the whole family at once.
    - Each error keeps the offending input (fragment, field name, or checksum
      values) as attributes for inspection.

Examples:
    Catch a parse failure and inspect its reason.

    >>> from spayd.core import parse_descriptor
    >>> from spayd.core.errors import ParseError, ParseErrorCode
    >>> try:
    ...     parse_descriptor("SPD*1.0*")
    ... except ParseError as e:
    ...     code = e.code
    >>> code is ParseErrorCode.EMPTY_FIELD_LIST
    True
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "SpaydError",
    "ParseErrorCode",
    "ParseError",
    "EncodingError",
    "RequiredFieldMissing",
    "ChecksumErrorKind",
    "ChecksumError",
]


class SpaydError(ValueError):
    """Base class for all descriptor-related failures."""


class ParseErrorCode(Enum):
    """Reason a descriptor text was rejected by the parser."""

    BAD_HEADER = "bad_header"
    BAD_VERSION = "bad_version"
    EMPTY_FIELD_LIST = "empty_field_list"
    MALFORMED_FIELD = "malformed_field"
    ENCODING = "encoding"
    NON_PRINTABLE = "non_printable"
    TRAILING_INPUT = "trailing_input"


class ParseError(SpaydError):
    """
    Descriptor text failed the printable pre-check or the field-list grammar.

    Attributes:
        fragment (str): Unconsumed input starting at the offending position.
        code (ParseErrorCode): Machine-distinguishable reason.
    """

    def __init__(self, fragment: str, code: ParseErrorCode) -> None:
        self.fragment = fragment
        self.code = code
        super().__init__(f"couldn't parse text ({code.value}): {fragment!r}")


class EncodingError(SpaydError):
    """
    Percent-decoded bytes are not valid UTF-8.

    Attributes:
        fragment (str): Raw (still escaped) text that failed to decode.
    """

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f"percent-escapes do not decode to UTF-8: {fragment!r}")


class RequiredFieldMissing(SpaydError):
    """
    A field mandated by the descriptor's format version is absent.

    Attributes:
        field_name (str): Name of the missing field (e.g., "ACC").
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"the required field {field_name!r} is missing")


class ChecksumErrorKind(Enum):
    MALFORMED = "malformed"
    MISMATCH = "mismatch"
    REQUIRED = "required"


class ChecksumError(SpaydError):
    """
    CRC32 verification failed.

    Attributes:
        kind (ChecksumErrorKind): Which check failed.
        supplied (str | None): Raw CRC32 field text, when present.
        expected (int | None): Checksum computed over the canonical form, when computed.
    """

    def __init__(
        self,
        kind: ChecksumErrorKind,
        *,
        supplied: str | None = None,
        expected: int | None = None,
    ) -> None:
        self.kind = kind
        self.supplied = supplied
        self.expected = expected
        if kind is ChecksumErrorKind.MALFORMED:
            msg = f"the CRC32 field is not a hexadecimal checksum: {supplied!r}"
        elif kind is ChecksumErrorKind.MISMATCH:
            computed = "" if expected is None else f", computed {expected:08X}"
            msg = f"the data doesn't match the CRC32 checksum (supplied {supplied}{computed})"
        else:
            msg = "a CRC32 checksum is required but was not provided"
        super().__init__(msg)
