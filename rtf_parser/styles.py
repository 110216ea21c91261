"""
rtf_parser/styles.py — wczytywanie tabeli stylów z pliku TSV.

Format (eksport z wzorcowego dokumentu RTF, kolumny rozdzielone tabulatorem):

  type         name              value
  header_line  -                 {\\rtf1\\ansi\\ansicpg1252\\deff0
  header_line  -                 {\\fonttbl{\\f0 Roboto;}}
  style        level1_prefix     \\pard\\s1\\fi-360\\li360
  style        level1_label_sep \\tab
  ...

- wiersz nagłówka kolumn ("type", "name") jest pomijany
- puste linie są pomijane, końcowe \\r jest obcinane
- header_line — w kolejności pliku; style — do słownika (brak wartości → "")
- nieznane rodzaje wierszy są ignorowane

Publiczne API:
  load_style_table(path)        -> StyleTable
  parse_style_table(text, src)  -> StyleTable
"""

from __future__ import annotations

import pathlib

from data_model.styles import StyleTable
from rtf_parser.errors import StyleConfigError

_KIND_HEADER = "header_line"
_KIND_STYLE  = "style"


def load_style_table(path: str | pathlib.Path) -> StyleTable:
    """
    Wczytuje i waliduje tabelę stylów z pliku.

    Raises:
        StyleConfigError gdy pliku nie da się odczytać albo jest niekompletny.
    """
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StyleConfigError(f"Nie można odczytać pliku stylów {path}: {exc}") from exc
    return parse_style_table(text, source=str(path))


def parse_style_table(text: str, source: str = "<styles>") -> StyleTable:
    """Parsuje zawartość TSV i waliduje wymagane klucze oraz header_line."""
    table = StyleTable()

    for raw in text.split("\n"):
        line = raw.removesuffix("\r")
        if not line.strip():
            continue
        kind, name, value = _split_row(line)
        if kind == "type" and name == "name":
            continue
        if kind == _KIND_HEADER:
            table.header_lines.append(value)
        elif kind == _KIND_STYLE:
            table.styles[name] = value

    missing = table.missing_keys()
    if missing:
        raise StyleConfigError(f"Brak stylu: {missing[0]} w {source}")
    if not table.header_lines:
        raise StyleConfigError(f"Brak wpisów header_line w {source}")
    return table


def _split_row(line: str) -> tuple[str, str, str]:
    # wartość może zawierać tabulatory: dzielimy tylko na dwóch pierwszych
    parts = line.split("\t", 2)
    parts += [""] * (3 - len(parts))
    return parts[0], parts[1], parts[2]
