from __future__ import annotations

import io
from pathlib import Path

import pytest

from spayd import cli

GOOD = "SPD*1.0*ACC:CZ5855000000001265098001*AM:100.00*CC:CZK*CRC32:AAD80227"
UNSIGNED = "SPD*1.0*CC:CZK*AM:100.00*ACC:CZ5855000000001265098001"


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch) -> None:
    # No stray spayd.toml/.env/SPAYD_* from the developer environment.
    monkeypatch.chdir(tmp_path)
    for key in [
        "SPAYD_REQUIRE_CHECKSUM",
        "SPAYD_VALIDATE_REQUIRED",
        "SPAYD_SIGN_OUTPUT",
    ]:
        monkeypatch.delenv(key, raising=False)


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    return int(excinfo.value.code)


def test_parse_prints_fields_and_status(capsys) -> None:
    assert _run(["parse", GOOD]) == 0
    out = capsys.readouterr().out
    assert "version: 1.0" in out
    assert "AM: 100.00" in out
    assert "[INFO] checksum: passed" in out


def test_check_fails_on_mismatch(capsys) -> None:
    assert _run(["check", GOOD.replace("AAD80227", "12345678")]) == 1
    assert "ChecksumError" in capsys.readouterr().err


def test_check_require_checksum_flag(capsys) -> None:
    assert _run(["check", UNSIGNED]) == 0
    assert _run(["check", "--require-checksum", UNSIGNED]) == 1


def test_check_reports_parse_errors(capsys) -> None:
    assert _run(["check", "SPD*1.0*"]) == 1
    assert "ParseError" in capsys.readouterr().err


def test_canonical_and_sign(capsys) -> None:
    assert _run(["canonical", GOOD]) == 0
    assert capsys.readouterr().out.strip() == (
        "SPD*1.0*ACC:CZ5855000000001265098001*AM:100.00*CC:CZK"
    )
    assert _run(["sign", UNSIGNED]) == 0
    assert capsys.readouterr().out.strip() == GOOD


def test_reads_stdin(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(UNSIGNED + "\n"))
    assert _run(["sign", "-"]) == 0
    assert capsys.readouterr().out.strip() == GOOD


def test_stdin_keeps_trailing_space_in_last_value(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("SPD*1.0*ACC:x*MSG:x \r\n"))
    assert _run(["canonical", "-"]) == 0
    assert capsys.readouterr().out == "SPD*1.0*ACC:x*MSG:x \n"


def test_sign_output_setting_from_env(capsys, monkeypatch) -> None:
    monkeypatch.setenv("SPAYD_SIGN_OUTPUT", "1")
    assert _run(["parse", UNSIGNED]) == 0
    assert f"[INFO] normalized: {GOOD}" in capsys.readouterr().out


def test_report_writes_file_and_flags_failures(tmp_path: Path, capsys) -> None:
    src = tmp_path / "batch.txt"
    src.write_text(f"{GOOD}\nSPD*1.0*\n")
    out = tmp_path / "report.csv"

    assert _run(["report", str(src), "--out", str(out)]) == 1
    assert out.exists()
    printed = capsys.readouterr().out
    assert "[WARN] 1 of 2 descriptors failed" in printed


def test_invalid_config_exits_2(capsys, monkeypatch) -> None:
    monkeypatch.setenv("SPAYD_REQUIRE_CHECKSUM", "maybe")
    assert _run(["check", GOOD]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_unknown_command(capsys) -> None:
    assert _run(["frobnicate"]) == 2
