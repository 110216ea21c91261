"""Komenda: rtfs simplify — konwersja jednego pliku RTF Worda do uproszczonego RTF."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from data_model.entries import EntryList, ListEntry
from rtf_parser import BOLD_OFF, BOLD_ON, RtfParseError, extract_entries, render_document
from rtfs._config import caps_enabled, styles_path
from rtfs._io import load_styles_or_exit, read_rtf

console = Console()

TYPE_STYLE: dict[str, str] = {
    "ordered-numeric": "cyan",
    "ordered-alpha":   "green",
    "bullet":          "yellow",
    "text":            "dim",
}


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _body_text(body: str) -> Text:
    """Treść z pogrubieniem odwzorowanym stylem rich zamiast znaczników."""
    text = Text()
    bold = False
    for ch in body:
        if ch == BOLD_ON:
            bold = True
        elif ch == BOLD_OFF:
            bold = False
        else:
            text.append(ch, style="bold" if bold else "")
    return text


def _show_table(entries: EntryList) -> None:
    if not entries:
        console.print("[yellow]Brak wpisów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",      justify="right", no_wrap=True, style="dim")
    table.add_column("TYP",    no_wrap=True)
    table.add_column("ETYKIETA", no_wrap=True, style="bold")
    table.add_column("TREŚĆ",  no_wrap=False, max_width=80)

    for i, entry in enumerate(entries, 1):
        if isinstance(entry, ListEntry):
            kind, label = str(entry.label_type), entry.label
        else:
            kind, label = "text", "-"
        table.add_row(
            str(i),
            Text(kind, style=TYPE_STYLE.get(kind, "")),
            label,
            _body_text(entry.body),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(entries)} wpisów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    in_path  = Path(args.in_path)
    out_path = Path(args.out_path)
    caps     = caps_enabled(args.caps)

    # Style walidujemy przed odczytem dokumentu.
    styles = load_styles_or_exit(styles_path(args.styles), console)

    if not in_path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {in_path}")
        raise SystemExit(1)

    try:
        entries = extract_entries(read_rtf(in_path))
    except RtfParseError as e:
        console.print(f"[red]Błąd parsowania {in_path.name}:[/red] {e}")
        raise SystemExit(1)

    result = render_document(entries, styles, caps)
    try:
        out_path.write_text(result, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Błąd zapisu:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]RTF:[/green] {out_path}  ({len(entries)} wpisów)")

    if args.show:
        _show_table(entries)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "simplify",
        help="Konwertuje plik RTF Worda do uproszczonego RTF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga elementy list (1. / a. / punktory) i zwykłe akapity z RTF Worda,
usuwa całe formatowanie (poza pogrubieniem) i zapisuje czysty RTF
z prefiksami z tabeli stylów.

Przykłady:
  rtfs simplify --in word.rtf --out output.rtf
  rtfs simplify --in word.rtf --out output.rtf --styles styles.tsv --caps
  rtfs simplify --in word.rtf --out output.rtf --show
        """,
    )
    p.add_argument(
        "--in",
        dest="in_path",
        metavar="WEJŚCIE.rtf",
        required=True,
        help="Plik RTF wygenerowany przez edytor tekstu.",
    )
    p.add_argument(
        "--out",
        dest="out_path",
        metavar="WYJŚCIE.rtf",
        required=True,
        help="Plik wynikowy (nadpisywany).",
    )
    p.add_argument(
        "--styles",
        metavar="PLIK.tsv",
        default=None,
        help="Tabela stylów (domyślnie: $RTFS_STYLES lub styles.tsv).",
    )
    p.add_argument(
        "--caps",
        action="store_true",
        help="Treść wpisów wielkimi literami.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę odzyskanych wpisów po zapisie.",
    )
    p.set_defaults(func=run)
