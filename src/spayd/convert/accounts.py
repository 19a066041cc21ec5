"""
Account-field adapters (ACC and ALT-ACC).

Account text is an IBAN optionally followed by ``+`` and a BIC, e.g.
``CZ5855000000001265098001+RZBCCZPP``. The alternative-accounts field holds a
comma-separated list of such entries.

Examples:
    >>> from spayd.convert.accounts import AccountRef
    >>> AccountRef.parse("CZ5855000000001265098001+RZBCCZPP")
    AccountRef(iban='CZ5855000000001265098001', bic='RZBCCZPP')
    >>> str(AccountRef("CZ5855000000001265098001"))
    'CZ5855000000001265098001'

Parsing only splits the text; ``AccountRef.validate_iban()`` checks the IBAN
country format and check digits with schwifty.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from schwifty import IBAN
from schwifty.exceptions import SchwiftyException

from spayd.core.descriptor import Descriptor
from spayd.core.fields import ACCOUNT, ALTERNATIVE_ACCOUNTS

from ._base import field_converted, set_field_converted
from .errors import ConversionError

__all__ = [
    "AccountRef",
    "account",
    "set_account",
    "alternative_accounts",
    "set_alternative_accounts",
]

_BIC_SEPARATOR = "+"
_LIST_SEPARATOR = ","


@dataclass(frozen=True)
class AccountRef:
    """
    An IBAN with an optional BIC (ISO 9362).

    Attributes:
        iban (str): International Bank Account Number, kept verbatim.
        bic (str | None): Bank Identifier Code, if supplied.
    """

    iban: str
    bic: str | None = None

    @classmethod
    def parse(cls, text: str) -> AccountRef:
        """
        Split ``IBAN[+BIC]`` text.

        Raises:
            ValueError: If the IBAN part or a present BIC part is empty.
        """
        iban, sep, bic = text.partition(_BIC_SEPARATOR)
        if not iban:
            raise ValueError(f"account has no IBAN: {text!r}")
        if sep and not bic:
            raise ValueError(f"account has an empty BIC: {text!r}")
        return cls(iban=iban, bic=bic if sep else None)

    def parse_iban(self, field_name: str = ACCOUNT) -> IBAN:
        """
        Check the IBAN part and return it as a schwifty IBAN.

        Args:
            field_name (str): Field reported in the error, ``ACC`` by default.

        Raises:
            ConversionError: If the IBAN has a bad length, format, or check digits.
        """
        try:
            return IBAN(self.iban)
        except SchwiftyException as e:
            raise ConversionError(field_name, self.iban) from e

    def validate_iban(self, field_name: str = ACCOUNT) -> None:
        self.parse_iban(field_name)

    def __str__(self) -> str:
        if self.bic is None:
            return self.iban
        return f"{self.iban}{_BIC_SEPARATOR}{self.bic}"


def _parse_account_list(text: str) -> list[AccountRef]:
    return [AccountRef.parse(part) for part in text.split(_LIST_SEPARATOR)]


def account(descriptor: Descriptor) -> AccountRef:
    """Read the main account (ACC)."""
    return field_converted(descriptor, ACCOUNT, AccountRef.parse)


def set_account(descriptor: Descriptor, ref: AccountRef) -> None:
    set_field_converted(descriptor, ACCOUNT, ref, str)


def alternative_accounts(descriptor: Descriptor) -> list[AccountRef]:
    """Read the alternative accounts (ALT-ACC) in their stored order."""
    return field_converted(descriptor, ALTERNATIVE_ACCOUNTS, _parse_account_list)


def set_alternative_accounts(descriptor: Descriptor, refs: Iterable[AccountRef]) -> None:
    set_field_converted(
        descriptor,
        ALTERNATIVE_ACCOUNTS,
        refs,
        lambda items: _LIST_SEPARATOR.join(str(ref) for ref in items),
    )
