"""
rtf_parser/errors.py — wyjątki konwersji.

RtfParseError    — niezbalansowane grupy w dokumencie (błąd krytyczny
                   dla danego dokumentu; nie zapisujemy częściowego wyniku).
StyleConfigError — brak wymaganego stylu, brak header_line lub nieczytelny
                   plik stylów (błąd krytyczny przed wczytaniem dokumentu).
"""

from __future__ import annotations


class RtfParseError(ValueError):
    """Dokument RTF ma niezbalansowane nawiasy klamrowe."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class StyleConfigError(ValueError):
    """Nieprawidłowa lub niekompletna tabela stylów."""
