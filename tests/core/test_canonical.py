import itertools

import pytest

from spayd.core.canonical import canonical_text, display_text
from spayd.core.descriptor import Descriptor
from spayd.core.parser import parse_descriptor

FIELDS = [
    ("CC", "CZK"),
    ("MSG", "Payment for the goods"),
    ("AM", "480.50"),
    ("ACC", "CZ5855000000001265098001"),
]


def test_canonical_text_sorts_and_omits_checksum() -> None:
    d = Descriptor.v1_0(FIELDS + [("CRC32", "JUNKDATA")])
    assert canonical_text(d) == (
        "SPD*1.0*ACC:CZ5855000000001265098001*AM:480.50*CC:CZK*MSG:Payment for the goods"
    )


def test_display_text_includes_checksum() -> None:
    d = Descriptor.v1_0(FIELDS + [("CRC32", "AAAAAAAA")])
    assert display_text(d) == (
        "SPD*1.0*ACC:CZ5855000000001265098001*AM:480.50*CC:CZK*CRC32:AAAAAAAA"
        "*MSG:Payment for the goods"
    )
    assert str(d) == display_text(d)


def test_canonical_text_is_independent_of_insertion_order() -> None:
    texts = {canonical_text(Descriptor.v1_0(perm)) for perm in itertools.permutations(FIELDS)}
    assert len(texts) == 1


def test_serialization_percent_encodes_names_and_values() -> None:
    assert str(Descriptor.v1_0([("MSG", "****!")])) == "SPD*1.0*MSG:%2A%2A%2A%2A!"
    assert str(Descriptor.v1_0([("MSG", "PŘÍKLAD")])) == "SPD*1.0*MSG:P%C5%98%C3%8DKLAD"
    assert str(Descriptor.v1_0([("A:B", "c*d")])) == "SPD*1.0*A%3AB:c%2Ad"


def test_serialized_fields_never_contain_raw_separators() -> None:
    d = Descriptor.v1_0([("N*:%", "v*:%\x01"), ("OK", "")])
    body = display_text(d)[len("SPD*1.0*") :]
    for entry in body.split("*"):
        name, sep, value = entry.partition(":")
        assert sep == ":"
        assert ":" not in value


@pytest.mark.parametrize(
    "fields",
    [
        {"ACC": "CZ5855000000001265098001"},
        {"MSG": ""},
        {"MSG": "a*b:c%d", "X-ÚČET": "ž\n\t\x00", "CRC32": "12345678"},
        {"🙂": "🙂", "A": "%41"},
    ],
)
def test_parse_display_text_roundtrip(fields: dict[str, str]) -> None:
    d = Descriptor.v1_0(fields)
    assert parse_descriptor(display_text(d)) == d
