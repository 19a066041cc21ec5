import pytest

from spayd.convert.accounts import (
    AccountRef,
    account,
    alternative_accounts,
    set_account,
    set_alternative_accounts,
)
from spayd.convert.errors import ConversionError, FieldMissing
from spayd.core.descriptor import Descriptor

IBAN = "CZ5855000000001265098001"


def test_account_without_bic() -> None:
    d = Descriptor.v1_0({"ACC": IBAN})
    assert account(d) == AccountRef(IBAN)


def test_account_with_bic() -> None:
    d = Descriptor.v1_0({"ACC": f"{IBAN}+RZBCCZPP"})
    assert account(d) == AccountRef(IBAN, "RZBCCZPP")


def test_account_missing_vs_unparseable() -> None:
    with pytest.raises(FieldMissing) as missing:
        account(Descriptor.v1_0())
    assert missing.value.field_name == "ACC"

    with pytest.raises(ConversionError) as bad:
        account(Descriptor.v1_0({"ACC": "+RZBCCZPP"}))
    assert bad.value.text == "+RZBCCZPP"


def test_two_alternative_accounts() -> None:
    d = Descriptor.v1_0({"ALT-ACC": f"{IBAN}+RZBCCZPP,{IBAN}"})
    assert alternative_accounts(d) == [AccountRef(IBAN, "RZBCCZPP"), AccountRef(IBAN)]


def test_set_alternative_accounts() -> None:
    d = Descriptor.v1_0()
    set_alternative_accounts(d, [AccountRef(IBAN, "RZBCCZPP")])
    assert d == Descriptor.v1_0({"ALT-ACC": f"{IBAN}+RZBCCZPP"})

    set_alternative_accounts(d, [AccountRef(IBAN, "RZBCCZPP"), AccountRef(IBAN)])
    assert d.field("ALT-ACC") == f"{IBAN}+RZBCCZPP,{IBAN}"


def test_set_account_roundtrip() -> None:
    d = Descriptor.v1_0()
    set_account(d, AccountRef(IBAN, "RZBCCZPP"))
    assert d.field("ACC") == f"{IBAN}+RZBCCZPP"
    assert account(d) == AccountRef(IBAN, "RZBCCZPP")


def test_validate_iban_accepts_checked_iban() -> None:
    ref = AccountRef(IBAN, "RZBCCZPP")
    ref.validate_iban()
    assert ref.parse_iban().country_code == "CZ"


@pytest.mark.parametrize("text", ["CZ5855000000001265098002", "CZ58", "XX00123"])
def test_validate_iban_rejects_bad_iban(text: str) -> None:
    with pytest.raises(ConversionError) as excinfo:
        AccountRef(text).validate_iban()
    assert excinfo.value.field_name == "ACC"
    assert excinfo.value.text == text


def test_alternative_account_iban_error_names_field() -> None:
    d = Descriptor.v1_0({"ALT-ACC": f"{IBAN},CZ5855000000001265098002"})
    refs = alternative_accounts(d)
    refs[0].validate_iban("ALT-ACC")
    with pytest.raises(ConversionError) as excinfo:
        refs[1].validate_iban("ALT-ACC")
    assert excinfo.value.field_name == "ALT-ACC"
