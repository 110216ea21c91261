"""
data_model — struktury danych rtf-simplify.

Użycie:
  from data_model import ListEntry, TextEntry, LabelType, StyleTable, ...

Moduły:
  entries — LabelType, ListEntry, TextEntry, Entry, EntryList
  styles  — StyleTable, REQUIRED_STYLE_KEYS, DEFAULT_NORMAL_PREFIX
"""

from .entries import (
    LabelType,
    ListEntry,
    TextEntry,
    Entry,
    EntryList,
)
from .styles import (
    REQUIRED_STYLE_KEYS,
    DEFAULT_NORMAL_PREFIX,
    StyleTable,
)

__all__ = [
    # entries
    "LabelType",
    "ListEntry",
    "TextEntry",
    "Entry",
    "EntryList",
    # styles
    "REQUIRED_STYLE_KEYS",
    "DEFAULT_NORMAL_PREFIX",
    "StyleTable",
]
