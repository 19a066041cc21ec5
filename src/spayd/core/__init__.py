"""
Core package aggregator for Short Payment Descriptor handling (model, codec, checksum).

## Contracts (single source of truth)
- Versioning — the Version value carried in every header.
- Descriptor — version plus an ordered, unique-key field store.
- Encoding — percent-escaping of names and values.
- Parser — text to Descriptor, all-or-nothing with coded errors.
- Canonical — canonical (checksum input) and display renderings.
- Checksum — CRC32 check/require/sign over the canonical form.
- Validation — presence of version-mandated fields.
- Fields — the standard field-name vocabulary.

## Notes
- Zero-IO policy: stdlib only; no file/network IO.
- Field names are case-sensitive opaque keys; ``CRC32`` is reserved.
- Iteration and serialization are always in ascending name order.

## Examples
```python
from spayd.core import parse_descriptor, check, ChecksumOutcome
d = parse_descriptor("SPD*1.0*ACC:CZ5855000000001265098001*AM:480.50*CC:CZK")
d.field("AM")  # '480.50'
check(d) is ChecksumOutcome.NOT_PROVIDED  # True
str(d)  # 'SPD*1.0*ACC:CZ5855000000001265098001*AM:480.50*CC:CZK'
```
"""

from .canonical import canonical_text, display_text
from .checksum import ChecksumOutcome, check, compute, format_checksum, require, sign
from .descriptor import Descriptor
from .encoding import decode, encode
from .errors import (
    ChecksumError,
    ChecksumErrorKind,
    EncodingError,
    ParseError,
    ParseErrorCode,
    RequiredFieldMissing,
    SpaydError,
)
from .parser import parse_descriptor
from .validation import validate
from .versioning import V1_0, Version, parse_version

__all__ = [
    "Version",
    "V1_0",
    "parse_version",
    "Descriptor",
    "encode",
    "decode",
    "parse_descriptor",
    "canonical_text",
    "display_text",
    "ChecksumOutcome",
    "check",
    "require",
    "compute",
    "format_checksum",
    "sign",
    "validate",
    "SpaydError",
    "ParseError",
    "ParseErrorCode",
    "EncodingError",
    "RequiredFieldMissing",
    "ChecksumError",
    "ChecksumErrorKind",
]
