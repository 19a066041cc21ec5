"""
Scalar-field adapters: due date (DT), amount (AM), and currency (CC).

Formats
- DT: ``YYYYMMDD`` (e.g. ``20121231``).
- AM: decimal text with a ``.`` separator (e.g. ``480.50``); finite values only.
- CC: an assigned ISO 4217 alphabetic code (three uppercase ASCII letters),
  looked up in pycountry.

Notes
- Amounts are checked for shape only; whether one is positive is left to callers.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Final

import pycountry

from spayd.core.descriptor import Descriptor
from spayd.core.fields import AMOUNT, CURRENCY, DUE_DATE

from ._base import field_converted, set_field_converted

__all__ = [
    "DATE_FORMAT",
    "parse_due_date",
    "format_due_date",
    "parse_amount",
    "format_amount",
    "parse_currency",
    "due_date",
    "set_due_date",
    "amount",
    "set_amount",
    "currency",
    "set_currency",
]

DATE_FORMAT: Final[str] = "%Y%m%d"

_DATE_RE = re.compile(r"[0-9]{8}")
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_CURRENCY_RE = re.compile(r"[A-Z]{3}")


def parse_due_date(text: str) -> date:
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"due date must be YYYYMMDD, got {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_due_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_amount(text: str) -> Decimal:
    # Decimal() alone would also accept "NaN", "1e3", and surrounding whitespace.
    if not _AMOUNT_RE.fullmatch(text):
        raise ValueError(f"amount must be a plain decimal number, got {text!r}")
    return Decimal(text)


def format_amount(value: Decimal) -> str:
    if not value.is_finite():
        raise ValueError(f"amount must be finite, got {value!r}")
    return format(value, "f")


def parse_currency(text: str) -> str:
    if not _CURRENCY_RE.fullmatch(text):
        raise ValueError(f"currency must be three uppercase letters, got {text!r}")
    if pycountry.currencies.get(alpha_3=text) is None:
        raise ValueError(f"currency is not an ISO 4217 code: {text!r}")
    return text


def due_date(descriptor: Descriptor) -> date:
    return field_converted(descriptor, DUE_DATE, parse_due_date)


def set_due_date(descriptor: Descriptor, value: date) -> None:
    set_field_converted(descriptor, DUE_DATE, value, format_due_date)


def amount(descriptor: Descriptor) -> Decimal:
    return field_converted(descriptor, AMOUNT, parse_amount)


def set_amount(descriptor: Descriptor, value: Decimal) -> None:
    set_field_converted(descriptor, AMOUNT, value, format_amount)


def currency(descriptor: Descriptor) -> str:
    return field_converted(descriptor, CURRENCY, parse_currency)


def set_currency(descriptor: Descriptor, code: str) -> None:
    set_field_converted(descriptor, CURRENCY, code, parse_currency)
