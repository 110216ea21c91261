"""Komenda: rtfs batch — konwersja wszystkich plików .rtf w katalogu."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich import box

from rtf_parser import RtfParseError
from rtfs._config import caps_enabled, output_suffix, styles_path
from rtfs._io import convert_file, load_styles_or_exit

console = Console()


# ---------------------------------------------------------------------------
# Wybór plików
# ---------------------------------------------------------------------------

def list_rtf_files(directory: Path, suffix: str) -> list[Path]:
    """Pliki *.rtf z katalogu (bez podkatalogów), z pominięciem wcześniejszych wyników."""
    done_suffix = f"{suffix}.rtf".lower()
    return sorted(
        p for p in directory.iterdir()
        if p.is_file()
        and p.name.lower().endswith(".rtf")
        and not p.name.lower().endswith(done_suffix)
    )


def output_path_for(input_path: Path, suffix: str) -> Path:
    """word.rtf → word_sanitized.rtf (w tym samym katalogu)."""
    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    directory = Path(args.dir).resolve()
    suffix    = output_suffix(args.suffix)
    caps      = caps_enabled(args.caps)

    if not directory.is_dir():
        console.print(f"[red]To nie jest katalog:[/red] {directory}")
        raise SystemExit(1)

    styles = load_styles_or_exit(styles_path(args.styles).resolve(), console)

    files = list_rtf_files(directory, suffix)
    if not files:
        console.print("[yellow]Brak plików .rtf do przetworzenia.[/yellow]")
        return

    console.print(
        f"Katalog: [bold]{directory}[/bold]  "
        f"plików do przetworzenia: [bold]{len(files)}[/bold]"
    )

    # Błąd jednego dokumentu nie przerywa pozostałych.
    failures: list[tuple[str, str]] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Konwersja", total=len(files))
        for path in files:
            progress.update(task, description=path.name)
            out_path = output_path_for(path, suffix)
            try:
                convert_file(path, out_path, styles, caps)
            except (RtfParseError, OSError) as e:
                failures.append((path.name, str(e)))
            else:
                console.print(f"  [green]OK[/green] {path.name} → {out_path.name}")
            progress.advance(task)

    console.print()
    if not failures:
        console.print(f"[green]Gotowe[/green] — przetworzono {len(files)} plików")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("PLIK",  style="cyan", no_wrap=True)
    table.add_column("BŁĄD",  style="red", max_width=80)
    for name, message in failures:
        table.add_row(name, message)
    console.print(table)
    console.print(
        f"[yellow]Gotowe z {len(failures)} błędami[/yellow] — "
        f"poprawnie: {len(files) - len(failures)} z {len(files)}"
    )
    raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "batch",
        help="Konwertuje wszystkie pliki .rtf w katalogu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego pliku .rtf w katalogu (z pominięciem *_sanitized.rtf) zapisuje
obok niego <nazwa>_sanitized.rtf, nadpisując istniejące wyniki. Błąd jednego
pliku nie przerywa przetwarzania pozostałych; kod wyjścia 1 gdy wystąpił
jakikolwiek błąd.

Przykłady:
  rtfs batch --dir ./dokumenty
  rtfs batch --dir ./dokumenty --styles styles.tsv --caps
  rtfs batch --dir ./dokumenty --suffix _clean
        """,
    )
    p.add_argument(
        "--dir",
        metavar="KATALOG",
        required=True,
        help="Katalog z plikami .rtf.",
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
        "--suffix",
        metavar="PRZYROSTEK",
        default=None,
        help="Przyrostek plików wynikowych (domyślnie: $RTFS_SUFFIX lub _sanitized).",
    )
    p.set_defaults(func=run)
