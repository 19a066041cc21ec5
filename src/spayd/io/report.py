"""
Batch validation reports for descriptor text, built as Polars DataFrames.

Each input line is parsed and checked independently; failures are recorded in the
row rather than raised, so one bad line never hides the rest of the batch.

Columns
- line (i64): 1-based line number in the input.
- text (str): Raw line (trailing newline stripped).
- ok (bool): True if parsing, required-field validation, and the checksum policy passed.
- error (str | null): Error class and message when ok is False.
- checksum (str | null): "passed" / "not_provided", null when parsing failed.
- version (str | null): Header version, null when parsing failed.
- fields (str | null): Decoded fields as canonical JSON (sorted keys).

Notes
- Blank lines are skipped but still counted for line numbering.
- Writes are atomic: tmp file → os.replace.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import polars as pl

from spayd.config import SpaydSettings
from spayd.core import checksum
from spayd.core.errors import SpaydError
from spayd.core.parser import parse_descriptor

from .errors import IoWriteError

__all__ = ["REPORT_SCHEMA", "build_report", "write_report"]

logger = logging.getLogger(__name__)

REPORT_SCHEMA: dict[str, Any] = {
    "line": pl.Int64,
    "text": pl.Utf8,
    "ok": pl.Boolean,
    "error": pl.Utf8,
    "checksum": pl.Utf8,
    "version": pl.Utf8,
    "fields": pl.Utf8,
}


def _check_line(lineno: int, text: str, settings: SpaydSettings) -> dict[str, Any]:
    row: dict[str, Any] = {
        "line": lineno,
        "text": text,
        "ok": False,
        "error": None,
        "checksum": None,
        "version": None,
        "fields": None,
    }
    try:
        d = parse_descriptor(text, validate_required=settings.validate_required)
    except SpaydError as exc:
        row["error"] = f"{type(exc).__name__}: {exc}"
        return row

    row["version"] = str(d.version)
    row["fields"] = json.dumps(dict(d.iter_fields()), sort_keys=True, ensure_ascii=False)
    try:
        outcome = checksum.require(d) if settings.require_checksum else checksum.check(d)
    except SpaydError as exc:
        row["error"] = f"{type(exc).__name__}: {exc}"
        return row

    row["checksum"] = outcome.value
    row["ok"] = True
    return row


def build_report(lines: Iterable[str], settings: SpaydSettings | None = None) -> pl.DataFrame:
    """
    Parse and check every non-blank line.

    Args:
        lines (Iterable[str]): Descriptor texts, one per line (newlines are stripped).
        settings (SpaydSettings | None): Policy; defaults to SpaydSettings().

    Returns:
        pl.DataFrame: One row per non-blank line, columns as in REPORT_SCHEMA.
    """
    s = settings or SpaydSettings()
    rows: list[dict[str, Any]] = []
    for lineno, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        if not text.strip():
            continue
        rows.append(_check_line(lineno, text, s))

    columns = {name: [row[name] for row in rows] for name in REPORT_SCHEMA}
    df = pl.DataFrame(columns, schema=REPORT_SCHEMA)
    logger.debug("report built: %d rows, %d failing", df.height, df.height - int(df["ok"].sum()))
    return df


def write_report(df: pl.DataFrame, path: str | os.PathLike[str]) -> Path:
    """
    Atomically write a report as Parquet or CSV, chosen by file suffix.

    Args:
        df (pl.DataFrame): Report frame from build_report.
        path (str | PathLike): Destination ending in ``.parquet`` or ``.csv``.

    Returns:
        Path: Final path written.

    Raises:
        IoWriteError: If the suffix is unsupported or the write/rename fails.
    """
    out = Path(path)
    suffix = out.suffix.lower()
    if suffix not in (".parquet", ".csv"):
        raise IoWriteError(f"unsupported report format {suffix!r}; use .parquet or .csv")

    tmp = out.with_name(out.name + ".tmp")
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        if suffix == ".parquet":
            df.write_parquet(tmp)
        else:
            df.write_csv(tmp)
        os.replace(tmp, out)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise IoWriteError(f"failed to write report to {out}: {exc}") from exc
    return out
