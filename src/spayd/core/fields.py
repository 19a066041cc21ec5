"""
Standard field-name vocabulary for Short Payment Descriptors.

The core treats every name as an opaque, case-sensitive key; these constants exist
for typed adapters (spayd.convert) and callers building descriptors by hand.
This module is zero-IO.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "ACCOUNT",
    "ALTERNATIVE_ACCOUNTS",
    "AMOUNT",
    "CURRENCY",
    "REFERENCE",
    "RECIPIENT_NAME",
    "DUE_DATE",
    "PAYMENT_TYPE",
    "MESSAGE",
    "CHECKSUM",
    "STANDARD_FIELDS",
]

# Main account number; an IBAN optionally followed by "+BIC".
ACCOUNT: Final[str] = "ACC"
# Comma-separated accounts that may be used instead of ACCOUNT.
ALTERNATIVE_ACCOUNTS: Final[str] = "ALT-ACC"
AMOUNT: Final[str] = "AM"
CURRENCY: Final[str] = "CC"
# Payee's reference number.
REFERENCE: Final[str] = "RF"
RECIPIENT_NAME: Final[str] = "RN"
# YYYYMMDD
DUE_DATE: Final[str] = "DT"
PAYMENT_TYPE: Final[str] = "PT"
MESSAGE: Final[str] = "MSG"
# Reserved; excluded from the canonical form.
CHECKSUM: Final[str] = "CRC32"

STANDARD_FIELDS: Final[tuple[str, ...]] = (
    ACCOUNT,
    ALTERNATIVE_ACCOUNTS,
    AMOUNT,
    CURRENCY,
    REFERENCE,
    RECIPIENT_NAME,
    DUE_DATE,
    PAYMENT_TYPE,
    MESSAGE,
    CHECKSUM,
)
