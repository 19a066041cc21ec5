"""
spayd.convert — typed adapters layered on the descriptor field contract.

## Responsibilities
- Convert raw field text to domain types (AccountRef, date, Decimal, currency code)
  and back, one narrow parse/format pair per standard field.
- Surface "missing" (FieldMissing) separately from "unparseable" (ConversionError).
- Offer PaymentRequest, a pydantic model with every standard field typed.

## Import DAG discipline
- Depends only on stdlib, pydantic, and spayd.core.*.
"""

from .accounts import (
    AccountRef,
    account,
    alternative_accounts,
    set_account,
    set_alternative_accounts,
)
from .errors import ConversionError, FieldMissing
from .schema import PaymentRequest
from .values import amount, currency, due_date, set_amount, set_currency, set_due_date

__all__ = [
    "AccountRef",
    "account",
    "set_account",
    "alternative_accounts",
    "set_alternative_accounts",
    "due_date",
    "set_due_date",
    "amount",
    "set_amount",
    "currency",
    "set_currency",
    "PaymentRequest",
    "FieldMissing",
    "ConversionError",
]
