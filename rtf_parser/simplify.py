"""
rtf_parser/simplify.py — konwersja całego dokumentu: RTF Worda → uproszczony RTF.

Architektura:
  rtf → extract_entries() → EntryList → render_document(styles, caps) → str

Funkcja jest czysta (str → str) i bezstanowa; wejście/wyjście plikowe należy
do wywołującego. Przy błędzie parsowania nie powstaje żaden częściowy wynik.
"""

from __future__ import annotations

from data_model.styles import StyleTable
from rtf_parser.emitter import render_document
from rtf_parser.extractor import extract_entries


def simplify_rtf(rtf: str, styles: StyleTable, caps: bool = False) -> str:
    """
    Zwraca uproszczony dokument RTF.

    Args:
        rtf:    pełna treść dokumentu źródłowego
        styles: zwalidowana tabela stylów
        caps:   True → treść wpisów wielkimi literami

    Raises:
        RtfParseError gdy grupy dokumentu są niezbalansowane.
    """
    return render_document(extract_entries(rtf), styles, caps)
