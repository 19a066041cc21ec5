from __future__ import annotations

import json
from pathlib import Path

import polars as pl
import pytest

from spayd.config import SpaydSettings
from spayd.io.errors import IoWriteError
from spayd.io.report import REPORT_SCHEMA, build_report, write_report

LINES = [
    "SPD*1.0*ACC:CZ5855000000001265098001*AM:100.00*CC:CZK*CRC32:AAD80227\n",
    "\n",
    "SPD*1.0*ACC:CZ5855000000001265098001*AM:100.00*CC:CZK*CRC32:12345678\n",
    "SPD*1.0*AM:100.00\n",
    "SPD*1.0*\n",
    "SPD*1.0*ACC:CZ5855000000001265098001\n",
]


def test_build_report_rows_and_schema() -> None:
    df = build_report(LINES)

    assert df.columns == list(REPORT_SCHEMA)
    assert df["line"].to_list() == [1, 3, 4, 5, 6]
    assert df["ok"].to_list() == [True, False, False, False, True]
    assert df["checksum"].to_list() == ["passed", None, None, None, "not_provided"]
    assert df["version"].to_list() == ["1.0", "1.0", None, None, "1.0"]

    errors = df["error"].to_list()
    assert errors[0] is None
    assert errors[1].startswith("ChecksumError")
    assert errors[2].startswith("RequiredFieldMissing")
    assert errors[3].startswith("ParseError")


def test_build_report_fields_are_canonical_json() -> None:
    df = build_report(["SPD*1.0*MSG:%C5%98*ACC:x"])
    assert json.loads(df["fields"][0]) == {"ACC": "x", "MSG": "Ř"}


def test_build_report_honors_settings() -> None:
    lenient = SpaydSettings(validate_required=False)
    strict = SpaydSettings(require_checksum=True)

    assert build_report(["SPD*1.0*AM:1.00"], lenient)["ok"].to_list() == [True]
    df = build_report(["SPD*1.0*ACC:x"], strict)
    assert df["ok"].to_list() == [False]
    assert "required" in df["error"][0]


def test_build_report_empty_input_keeps_schema() -> None:
    df = build_report([])
    assert df.height == 0
    assert df.schema["ok"] == pl.Boolean


@pytest.mark.parametrize("name", ["report.parquet", "nested/report.csv"])
def test_write_report(tmp_path: Path, name: str) -> None:
    df = build_report(LINES)
    out = write_report(df, tmp_path / name)

    assert out.exists()
    assert not out.with_name(out.name + ".tmp").exists()
    back = pl.read_parquet(out) if out.suffix == ".parquet" else pl.read_csv(out)
    assert back["line"].to_list() == df["line"].to_list()


def test_write_report_rejects_unknown_suffix(tmp_path: Path) -> None:
    with pytest.raises(IoWriteError, match="unsupported report format"):
        write_report(build_report(LINES), tmp_path / "report.json")
