"""
CRC32 integrity checks over the canonical descriptor form.

The checksum is the standard IEEE CRC-32 (zlib polynomial, reflected) of the UTF-8
bytes of ``canonical_text(descriptor)``, carried in the reserved ``CRC32`` field
as hexadecimal. It detects accidental corruption only; it offers no authenticity
guarantee.

Notes:
    - check() tolerates a missing CRC32 field (NOT_PROVIDED); require() does not.
    - The CRC32 field never participates in its own computation.
    - Supplied values are parsed case-insensitively as 1..8 hex digits.

Examples:
    >>> from spayd.core import Descriptor
    >>> from spayd.core.checksum import ChecksumOutcome, check, sign
    >>> d = Descriptor.v1_0({"ACC": "CZ5855000000001265098001", "AM": "100.00", "CC": "CZK"})
    >>> check(d) is ChecksumOutcome.NOT_PROVIDED
    True
    >>> sign(d).field("CRC32")
    'AAD80227'
    >>> check(d) is ChecksumOutcome.PASSED
    True
"""

from __future__ import annotations

import logging
import re
import zlib
from enum import Enum
from typing import TYPE_CHECKING

from .canonical import canonical_text
from .errors import ChecksumError, ChecksumErrorKind
from .fields import CHECKSUM

if TYPE_CHECKING:
    from .descriptor import Descriptor

__all__ = [
    "ChecksumOutcome",
    "compute",
    "format_checksum",
    "check",
    "require",
    "sign",
]

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,8}")


class ChecksumOutcome(Enum):
    """
    Successful result of a checksum check.

    PASSED means a CRC32 value was supplied and matched; NOT_PROVIDED means the
    field was absent and nothing was verified.
    """

    PASSED = "passed"
    NOT_PROVIDED = "not_provided"


def compute(descriptor: Descriptor) -> int:
    """Return the unsigned CRC-32 of the descriptor's canonical form."""
    return zlib.crc32(canonical_text(descriptor).encode("utf-8")) & 0xFFFFFFFF


def format_checksum(value: int) -> str:
    """Format a checksum as eight uppercase hex digits."""
    return f"{value:08X}"


def _parse_supplied(text: str) -> int:
    if not _HEX_RE.fullmatch(text):
        raise ChecksumError(ChecksumErrorKind.MALFORMED, supplied=text)
    return int(text, 16)


def check(descriptor: Descriptor) -> ChecksumOutcome:
    """
    Verify the CRC32 field against the canonical form, if one is present.

    Args:
        descriptor (Descriptor): Descriptor to verify.

    Returns:
        ChecksumOutcome: PASSED if the supplied value matches, NOT_PROVIDED if the
        CRC32 field is absent.

    Raises:
        ChecksumError: MALFORMED if the field is not hex, MISMATCH if it differs
            from the computed checksum.
    """
    supplied = descriptor.field(CHECKSUM)
    if supplied is None:
        logger.debug("no CRC32 field; checksum not verified")
        return ChecksumOutcome.NOT_PROVIDED

    value = _parse_supplied(supplied)
    expected = compute(descriptor)
    if value != expected:
        logger.debug("CRC32 mismatch: supplied %s, computed %08X", supplied, expected)
        raise ChecksumError(ChecksumErrorKind.MISMATCH, supplied=supplied, expected=expected)
    return ChecksumOutcome.PASSED


def require(descriptor: Descriptor) -> ChecksumOutcome:
    """
    Like check(), but treat a missing CRC32 field as a failure.

    Raises:
        ChecksumError: REQUIRED if the field is absent, otherwise as check().
    """
    outcome = check(descriptor)
    if outcome is ChecksumOutcome.NOT_PROVIDED:
        raise ChecksumError(ChecksumErrorKind.REQUIRED)
    return outcome


def sign(descriptor: Descriptor) -> Descriptor:
    """Write the computed checksum into the CRC32 field and return the descriptor."""
    descriptor.set_field(CHECKSUM, format_checksum(compute(descriptor)))
    return descriptor
