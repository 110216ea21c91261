"""
data_model/entries.py — model wpisów odzyskanych z dokumentu RTF.

Entry to jedna logiczna jednostka treści w kolejności dokumentu:
  ListEntry — element listy z etykietą ("1.", "a.", punktor) i treścią
  TextEntry — zwykły akapit (tylko treść)

Pole `body` to oczyszczony tekst ASCII; może zawierać znaczniki pogrubienia
BOLD_ON / BOLD_OFF (rtf_parser.constants), zawsze zbalansowane.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class LabelType(StrEnum):
    """Rodzaj etykiety elementu listy."""
    ORDERED_NUMERIC = "ordered-numeric"   # "1.", "12."
    ORDERED_ALPHA   = "ordered-alpha"     # "a.", "B."
    BULLET          = "bullet"            # \'b7 lub punktor unicode


@dataclass(slots=True)
class ListEntry:
    """
    Element listy.

    - label:      dosłowny tekst etykiety, np. "1." albo "a."
    - label_type: rodzaj etykiety (LabelType)
    - body:       oczyszczona treść (ze znacznikami pogrubienia)
    - label_bold: True gdy etykieta kończy się w stanie pogrubienia;
                  emiter wyłącza wtedy pogrubienie przed treścią
    """
    label: str
    label_type: LabelType
    body: str
    label_bold: bool = False

    @property
    def is_level2(self) -> bool:
        """Litery i punktory trafiają na drugi poziom stylu."""
        return self.label_type is not LabelType.ORDERED_NUMERIC


@dataclass(slots=True)
class TextEntry:
    """Zwykły akapit bez etykiety listy."""
    body: str


Entry: TypeAlias = "ListEntry | TextEntry"

# Wpisy w kolejności akapitów dokumentu.
EntryList: TypeAlias = "list[Entry]"
