"""Komenda: rtfs styles — walidacja i podgląd tabeli stylów."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from data_model.styles import REQUIRED_STYLE_KEYS
from rtfs._config import styles_path
from rtfs._io import load_styles_or_exit

console = Console(width=160)


def run(args: argparse.Namespace) -> None:
    path   = styles_path(args.styles)
    styles = load_styles_or_exit(path, console)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("KLUCZ",   style="bold", no_wrap=True)
    table.add_column("WYMAGANY", justify="center", no_wrap=True)
    table.add_column("WARTOŚĆ", no_wrap=False, max_width=90)

    for name, value in styles.styles.items():
        required = Text("tak", style="cyan") if name in REQUIRED_STYLE_KEYS else Text("—", style="dim")
        # Text zamiast str: bez interpretacji markupu rich w wartościach RTF
        table.add_row(name, required, Text(value))

    console.print()
    console.print(f"[green]OK:[/green] {path}")
    console.print(table)
    console.print(f"  [dim]{len(styles.header_lines)} linii nagłówka[/dim]")
    if args.header:
        for line in styles.header_lines:
            console.print(Text(line))
    console.print()


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "styles",
        help="Waliduje i wyświetla tabelę stylów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje tabelę stylów (TSV: type, name, value), sprawdza wymagane klucze
(level1_prefix, level1_label_sep, level2_prefix, level2_label_sep) oraz
obecność header_line i wyświetla jej zawartość.

Przykłady:
  rtfs styles
  rtfs styles --styles styles.tsv --header
        """,
    )
    p.add_argument(
        "--styles",
        metavar="PLIK.tsv",
        default=None,
        help="Tabela stylów (domyślnie: $RTFS_STYLES lub styles.tsv).",
    )
    p.add_argument(
        "--header",
        action="store_true",
        help="Wypisz również linie nagłówka.",
    )
    p.set_defaults(func=run)
