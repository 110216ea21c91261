"""
rtf_parser/cleaner.py — usuwanie grup RTF bez treści.

Dwa przejścia (kolejność ma znaczenie):
  1. strip_destination_groups — grupy {\\* ...} (destination) w całości,
     niezależnie od słowa kluczowego (mogą go w ogóle nie mieć).
  2. strip_keyword_groups     — grupy otwierane słowem z NON_CONTENT_KEYWORDS
     (tablice fontów, stylów, metadane, motywy itp.).

Wynik zawiera tylko treść akapitów i grupy \\listtext.
"""

from __future__ import annotations

from collections.abc import Callable, Set

from rtf_parser.constants import NON_CONTENT_KEYWORDS
from rtf_parser.scanner import check_balanced, group_keyword, skip_group


def clean_document(rtf: str) -> str:
    """Waliduje zbalansowanie grup i usuwa grupy bez treści."""
    check_balanced(rtf)
    return strip_keyword_groups(strip_destination_groups(rtf), NON_CONTENT_KEYWORDS)


def strip_destination_groups(rtf: str) -> str:
    """Usuwa każdą grupę otwieraną sekwencją {\\*."""
    return _strip_groups(rtf, lambda pos: rtf.startswith("{\\*", pos))


def strip_keyword_groups(rtf: str, keywords: Set[str] = NON_CONTENT_KEYWORDS) -> str:
    """Usuwa grupy, których słowo kluczowe należy do `keywords`."""
    return _strip_groups(rtf, lambda pos: group_keyword(rtf, pos) in keywords)


def _strip_groups(rtf: str, should_strip: Callable[[int], bool]) -> str:
    """
    Kopiuje tekst z pominięciem grup, dla których should_strip(pos) jest True.

    pos wskazuje na '{' grupy; ucieczki (\\{ itp.) kopiujemy parami,
    żeby nie uznać ich za początek grupy.
    """
    out: list[str] = []
    n = len(rtf)
    copied_from = 0
    i = 0
    while i < n:
        ch = rtf[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{" and should_strip(i):
            out.append(rtf[copied_from:i])
            i = skip_group(rtf, i)
            copied_from = i
            continue
        i += 1
    out.append(rtf[copied_from:])
    return "".join(out)
