"""
Command-line interface for Short Payment Descriptors.

Commands
- parse      Parse a descriptor and print its version, fields, and checksum status.
- check      Verify required fields and the CRC32 checksum; exit 1 on failure.
- canonical  Print the canonical form (the checksum input).
- sign       Print the display form with a freshly computed CRC32 field.
- report     Check a file of descriptors (one per line) and print or write a report.

Every descriptor argument may be ``-`` to read from standard input. Settings come
from SpaydSettings.load() (env > TOML > defaults); a ``.env`` file is loaded first
unless ``--no-env`` is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from spayd.config import ConfigError, SpaydSettings
from spayd.core import checksum
from spayd.core.descriptor import Descriptor
from spayd.core.errors import SpaydError
from spayd.core.parser import parse_descriptor
from spayd.io.errors import IoError
from spayd.io.report import build_report, write_report

__all__ = ["build_argparser", "main"]


def _common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", type=str, default=None, help="Path to a spayd TOML config.")
    p.add_argument(
        "--no-env",
        action="store_true",
        help="Do not auto-load .env (by default, .env is loaded if present).",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    p.add_argument(
        "--require-checksum",
        action="store_true",
        help="Treat a missing CRC32 field as a failure.",
    )


def _setup(args: argparse.Namespace) -> SpaydSettings:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not args.no_env:
        load_dotenv(Path(".env"))
    settings = SpaydSettings.load(args.config)
    if args.require_checksum:
        settings = replace(settings, require_checksum=True)
    return settings


def _read_text(arg: str) -> str:
    if arg == "-":
        # Only the line ending; trailing spaces can belong to the last value.
        return sys.stdin.read().rstrip("\r\n")
    return arg


def _load(args: argparse.Namespace, settings: SpaydSettings) -> Descriptor:
    return parse_descriptor(_read_text(args.text), validate_required=settings.validate_required)


def _verify(d: Descriptor, settings: SpaydSettings) -> checksum.ChecksumOutcome:
    if settings.require_checksum:
        return checksum.require(d)
    return checksum.check(d)


def _text_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("text", type=str, help="Descriptor text, or '-' to read stdin.")
    _common_args(p)
    return p


def _cmd_parse(argv: list[str]) -> int:
    args = _text_parser("spayd parse", "Parse a descriptor and show its fields.").parse_args(argv)
    settings = _setup(args)
    d = _load(args, settings)
    print(f"version: {d.version}")
    for name, value in d.iter_fields():
        print(f"{name}: {value}")
    outcome = _verify(d, settings)
    print(f"[INFO] checksum: {outcome.value}")
    if settings.sign_output:
        checksum.sign(d)
    print(f"[INFO] normalized: {d.display_text()}")
    return 0


def _cmd_check(argv: list[str]) -> int:
    args = _text_parser("spayd check", "Validate a descriptor and its CRC32.").parse_args(argv)
    settings = _setup(args)
    d = _load(args, settings)
    outcome = _verify(d, settings)
    print(f"[INFO] OK ({outcome.value})")
    return 0


def _cmd_canonical(argv: list[str]) -> int:
    args = _text_parser("spayd canonical", "Print the canonical form.").parse_args(argv)
    settings = _setup(args)
    print(_load(args, settings).canonical_text())
    return 0


def _cmd_sign(argv: list[str]) -> int:
    args = _text_parser("spayd sign", "Print the descriptor with a fresh CRC32.").parse_args(argv)
    settings = _setup(args)
    print(checksum.sign(_load(args, settings)).display_text())
    return 0


def _cmd_report(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="spayd report",
        description="Check one descriptor per line and print or write a report.",
    )
    p.add_argument("file", type=str, help="Input file, or '-' to read stdin.")
    p.add_argument("--out", type=str, default=None, help="Write report (.parquet or .csv).")
    _common_args(p)
    args = p.parse_args(argv)
    settings = _setup(args)

    if args.file == "-":
        df = build_report(sys.stdin, settings)
    else:
        with open(args.file, encoding="utf-8") as fh:
            df = build_report(fh, settings)

    failing = df.height - int(df["ok"].sum())
    if args.out:
        out = write_report(df, args.out)
        print(f"[INFO] Wrote report to {out}")
    else:
        print(df)
    if failing:
        print(f"[WARN] {failing} of {df.height} descriptors failed")
        return 1
    print(f"[INFO] {df.height} descriptors OK")
    return 0


_COMMANDS = {
    "parse": _cmd_parse,
    "check": _cmd_check,
    "canonical": _cmd_canonical,
    "sign": _cmd_sign,
    "report": _cmd_report,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="spayd", description="Short Payment Descriptor utilities.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        raise SystemExit(2)
    try:
        code = handler(rest)
    except ConfigError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        code = 2
    except (SpaydError, IoError, OSError) as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
