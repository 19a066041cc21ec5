"""
Pydantic v2 model giving a typed view over a payment descriptor.

Responsibilities
- Convert between a Descriptor (raw text fields) and PaymentRequest (typed fields)
  by reusing the adapters in spayd.convert.accounts and spayd.convert.values.
- Keep non-standard fields verbatim in ``extra`` so a round trip loses nothing
  except the CRC32 field, which is recomputed on demand.

Style
- Zero-IO (stdlib + pydantic only).
- Validators raise ValueError subclasses; pydantic surfaces them as ValidationError.

Examples:
    >>> from spayd.core import parse_descriptor
    >>> from spayd.convert.schema import PaymentRequest
    >>> d = parse_descriptor("SPD*1.0*ACC:CZ5855000000001265098001*AM:480.50*CC:CZK")
    >>> req = PaymentRequest.from_descriptor(d)
    >>> str(req.amount), req.currency
    ('480.50', 'CZK')
    >>> req.to_descriptor() == d
    True
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spayd.core import fields as f
from spayd.core.descriptor import Descriptor
from spayd.core.errors import RequiredFieldMissing
from spayd.core.versioning import V1_0, Version

from . import accounts, values

__all__ = ["PaymentRequest"]

# Plain-text fields copied without conversion: model attribute -> field name.
_TEXT_FIELDS: dict[str, str] = {
    "reference": f.REFERENCE,
    "recipient_name": f.RECIPIENT_NAME,
    "payment_type": f.PAYMENT_TYPE,
    "message": f.MESSAGE,
}


class PaymentRequest(BaseModel):
    """
    Typed payment request.

    Attributes:
        account (str): Main account as ``IBAN[+BIC]`` text (ACC).
        alternative_accounts (list[str]): Alternative ``IBAN[+BIC]`` entries (ALT-ACC).
        amount (Decimal | None): Amount (AM).
        currency (str | None): Three-letter currency code (CC), normalized to upper case.
        reference (str | None): Payee reference (RF).
        recipient_name (str | None): Payee name (RN).
        due_date (date | None): Due date (DT).
        payment_type (str | None): Payment type (PT).
        message (str | None): Message for the payee (MSG).
        extra (dict[str, str]): Any other fields, keyed by their wire names.

    Raises:
        pydantic.ValidationError: If an account entry or the currency is malformed,
            or extra repeats a standard field name.
    """

    model_config = ConfigDict(extra="forbid")

    account: str
    alternative_accounts: list[str] = Field(default_factory=list)
    amount: Decimal | None = None
    currency: str | None = None
    reference: str | None = None
    recipient_name: str | None = None
    due_date: date | None = None
    payment_type: str | None = None
    message: str | None = None
    extra: dict[str, str] = Field(default_factory=dict)

    @field_validator("account", mode="before")
    @classmethod
    def _check_account(cls, v: Any) -> str:
        return str(accounts.AccountRef.parse(str(v)))

    @field_validator("alternative_accounts", mode="before")
    @classmethod
    def _check_alternative_accounts(cls, v: Any) -> list[str]:
        items = v.split(",") if isinstance(v, str) else list(v or [])
        return [str(accounts.AccountRef.parse(str(item))) for item in items]

    @field_validator("currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v: Any) -> Any:
        if v is None:
            return v
        return values.parse_currency(str(v).strip().upper())

    @field_validator("extra")
    @classmethod
    def _check_extra(cls, v: dict[str, str]) -> dict[str, str]:
        clash = sorted(set(v) & set(f.STANDARD_FIELDS))
        if clash:
            raise ValueError(f"extra must not contain standard field names: {clash}")
        return v

    @property
    def account_ref(self) -> accounts.AccountRef:
        return accounts.AccountRef.parse(self.account)

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor) -> PaymentRequest:
        """
        Build a typed view of a descriptor.

        Args:
            descriptor (Descriptor): Source descriptor.

        Returns:
            PaymentRequest: Typed request; the CRC32 field is not carried over.

        Raises:
            RequiredFieldMissing: If the account field is absent.
            ConversionError: If a typed field's text cannot be converted.
        """
        if f.ACCOUNT not in descriptor:
            raise RequiredFieldMissing(f.ACCOUNT)

        data: dict[str, Any] = {"account": str(accounts.account(descriptor))}
        if f.ALTERNATIVE_ACCOUNTS in descriptor:
            data["alternative_accounts"] = [
                str(ref) for ref in accounts.alternative_accounts(descriptor)
            ]
        if f.AMOUNT in descriptor:
            data["amount"] = values.amount(descriptor)
        if f.CURRENCY in descriptor:
            data["currency"] = values.currency(descriptor)
        if f.DUE_DATE in descriptor:
            data["due_date"] = values.due_date(descriptor)
        for attr, name in _TEXT_FIELDS.items():
            text = descriptor.field(name)
            if text is not None:
                data[attr] = text
        data["extra"] = {
            name: value
            for name, value in descriptor.iter_fields()
            if name not in f.STANDARD_FIELDS
        }
        return cls(**data)

    def to_descriptor(self, version: Version = V1_0) -> Descriptor:
        """Render this request into a new descriptor (without a CRC32 field)."""
        d = Descriptor(version, self.extra)
        accounts.set_account(d, self.account_ref)
        if self.alternative_accounts:
            accounts.set_alternative_accounts(
                d, (accounts.AccountRef.parse(item) for item in self.alternative_accounts)
            )
        if self.amount is not None:
            values.set_amount(d, self.amount)
        if self.currency is not None:
            values.set_currency(d, self.currency)
        if self.due_date is not None:
            values.set_due_date(d, self.due_date)
        for attr, name in _TEXT_FIELDS.items():
            text = getattr(self, attr)
            if text is not None:
                d.set_field(name, text)
        return d
