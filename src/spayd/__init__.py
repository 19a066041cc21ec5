"""
spayd — Short Payment Descriptor (SPAYD / SPD) text handling.

## Packages
- spayd.core — descriptor model, percent-encoding, parser, canonical form, CRC32 (zero-IO).
- spayd.convert — typed adapters and the PaymentRequest pydantic model.
- spayd.io — batch reports as Polars DataFrames.
- spayd.config — SpaydSettings (env > TOML > defaults).
- spayd.cli — the ``spayd`` console script.

## Examples
```python
from spayd import Descriptor, parse_descriptor, sign, check
d = Descriptor.v1_0({"ACC": "CZ5855000000001265098001", "AM": "100.00", "CC": "CZK"})
sign(d).field("CRC32")  # 'AAD80227'
check(parse_descriptor(str(d)))  # ChecksumOutcome.PASSED
```
"""

from spayd.core import (
    V1_0,
    ChecksumError,
    ChecksumErrorKind,
    ChecksumOutcome,
    Descriptor,
    EncodingError,
    ParseError,
    ParseErrorCode,
    RequiredFieldMissing,
    SpaydError,
    Version,
    canonical_text,
    check,
    display_text,
    parse_descriptor,
    require,
    sign,
    validate,
)

__all__ = [
    "Version",
    "V1_0",
    "Descriptor",
    "parse_descriptor",
    "canonical_text",
    "display_text",
    "ChecksumOutcome",
    "check",
    "require",
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

__version__ = "0.2.1"
