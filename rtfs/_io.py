"""Wspólne operacje plikowe komend rtfs: tabela stylów i konwersja pliku."""

from __future__ import annotations

import pathlib

from rich.console import Console

from data_model.styles import StyleTable
from rtf_parser import StyleConfigError, load_style_table, simplify_rtf


def load_styles_or_exit(path: pathlib.Path, console: Console) -> StyleTable:
    """Wczytuje tabelę stylów; przy błędzie wypisuje komunikat i kończy (exit 1)."""
    if not path.exists():
        console.print(f"[red]Plik stylów nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        return load_style_table(path)
    except StyleConfigError as e:
        console.print(f"[red]Błąd konfiguracji stylów:[/red] {e}")
        raise SystemExit(1)


def read_rtf(path: pathlib.Path) -> str:
    # Niepoprawne bajty UTF-8 → U+FFFD; i tak wypadają przy zawężaniu do ASCII.
    return path.read_text(encoding="utf-8", errors="replace")


def convert_file(
    in_path: pathlib.Path,
    out_path: pathlib.Path,
    styles: StyleTable,
    caps: bool = False,
) -> str:
    """
    Konwertuje jeden plik i zapisuje wynik.

    Wynik jest zapisywany dopiero po udanej konwersji całego dokumentu —
    przy RtfParseError plik docelowy nie powstaje (ani nie jest nadpisywany).
    Zwraca zapisany tekst.
    """
    result = simplify_rtf(read_rtf(in_path), styles, caps)
    out_path.write_text(result, encoding="utf-8")
    return result
