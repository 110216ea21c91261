"""
rtfs — upraszczanie dokumentów RTF z edytora tekstu.

Użycie:
  rtfs <komenda> [opcje]

Komendy:
  simplify   Konwertuje jeden plik RTF do uproszczonego RTF.
  batch      Konwertuje wszystkie pliki .rtf w katalogu (→ *_sanitized.rtf).
  styles     Waliduje i wyświetla tabelę stylów (styles.tsv).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rtfs.commands import simplify as cmd_simplify
from rtfs.commands import batch as cmd_batch
from rtfs.commands import styles as cmd_styles


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtfs",
        description="rtfs — upraszczanie RTF do list i akapitów z tabelą stylów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="rtfs 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_simplify.add_parser(subparsers)
    cmd_batch.add_parser(subparsers)
    cmd_styles.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
