"""
rtf_parser/labels.py — rozpoznawanie etykiet list w grupach {\\listtext ...}.

Word zapisuje widoczną etykietę elementu listy w osobnej grupie:

  {\\listtext\\pard\\plain\\f0 1.\\tab}Treść elementu\\par
  {\\listtext\\pard\\plain\\f3 \\'b7\\tab}Punktor\\par

Klasyfikacja (pierwsza pasująca reguła wygrywa):
  1. \\'b7\\tab lub \\uN z N ∈ BULLET_CODE_POINTS przed \\tab → punktor
  2. cyfry + "." przed \\tab                                → ORDERED_NUMERIC
  3. jedna litera + "." przed \\tab                         → ORDERED_ALPHA
  4. inaczej                                               → brak etykiety

Wyjątek producenta: w akapitach wstawionych w trybie śledzenia zmian Word
potrafi pominąć \\listtext. Wtedy treść zaczyna się od znacznika \\insrsidN
(patrz content_start). To wąska, udokumentowana reguła, nie uogólnienie.
"""

from __future__ import annotations

import re

from data_model.entries import LabelType
from rtf_parser.constants import (
    BOLD_WORD,
    BULLET_CODE_POINTS,
    BULLET_PLACEHOLDER,
    LISTTEXT_WORD,
)
from rtf_parser.scanner import is_letter, read_control_word, skip_group

_GROUP_OPEN = "{\\" + LISTTEXT_WORD

_LISTTEXT_RE = re.compile(r"\\listtext\b")
_INSRSID_RE = re.compile(r"\\insrsid\d+")

_BULLET_HEX_RE = re.compile(r"\\'b7\\tab(?![a-zA-Z])", re.IGNORECASE)
_BULLET_UNICODE_RE = re.compile(r"\\u(-?\d+)\??\\tab(?![a-zA-Z])", re.IGNORECASE)
_ORDERED_RE = re.compile(r"([0-9]+\.|[a-z]\.)\\tab(?![a-zA-Z])", re.IGNORECASE)
_NUMERIC_LABEL_RE = re.compile(r"^[0-9]+\.$")


def content_start(fragment: str) -> int:
    """
    Zwraca indeks, od którego zaczyna się treść akapitu.

    - jest \\listtext → od '{' jego grupy (wcześniejszy tekst to tylko
      właściwości akapitu)
    - brak \\listtext, jest \\insrsidN → od tego znacznika
    - inaczej → 0
    """
    m = _LISTTEXT_RE.search(fragment)
    if m:
        start = m.start()
        if start > 0 and fragment[start - 1] == "{":
            start -= 1
        return start
    m = _INSRSID_RE.search(fragment)
    if m:
        return m.start()
    return 0


def find_marker_group(fragment: str) -> str | None:
    """Zwraca tekst pierwszej grupy {\\listtext ...} (z nawiasami) lub None."""
    start = _find_group_open(fragment, 0)
    if start == -1:
        return None
    return fragment[start:skip_group(fragment, start)]


def remove_marker_groups(fragment: str) -> str:
    """Usuwa wszystkie grupy {\\listtext ...} z fragmentu."""
    out: list[str] = []
    pos = 0
    while True:
        start = _find_group_open(fragment, pos)
        if start == -1:
            out.append(fragment[pos:])
            return "".join(out)
        out.append(fragment[pos:start])
        pos = skip_group(fragment, start)


def classify_label(group: str | None) -> tuple[str, LabelType] | None:
    """
    Zwraca (etykieta, typ) dla grupy \\listtext albo None.

    Przykłady::

        "{\\\\listtext 1.\\\\tab}"    → ("1.", ORDERED_NUMERIC)
        "{\\\\listtext b.\\\\tab}"    → ("b.", ORDERED_ALPHA)
        "{\\\\listtext \\\\'b7\\\\tab}" → (BULLET_PLACEHOLDER, BULLET)
    """
    if not group:
        return None
    if _BULLET_HEX_RE.search(group):
        return BULLET_PLACEHOLDER, LabelType.BULLET
    m = _BULLET_UNICODE_RE.search(group)
    if m and int(m.group(1)) in BULLET_CODE_POINTS:
        return BULLET_PLACEHOLDER, LabelType.BULLET
    m = _ORDERED_RE.search(group)
    if m:
        label = m.group(1)
        if _NUMERIC_LABEL_RE.match(label):
            return label, LabelType.ORDERED_NUMERIC
        return label, LabelType.ORDERED_ALPHA
    return None


def bold_state_after(group: str) -> bool:
    """Stan pogrubienia po ostatnim \\b / \\b0 w grupie etykiety."""
    bold = False
    i = 0
    n = len(group)
    while i < n:
        if group[i] != "\\":
            i += 1
            continue
        if i + 1 < n and is_letter(group[i + 1]):
            cw = read_control_word(group, i)
            if cw.word == BOLD_WORD:
                bold = cw.param != 0
            i = cw.end
            continue
        i += 2
    return bold


def _find_group_open(fragment: str, pos: int) -> int:
    """Indeks '{' najbliższej grupy \\listtext od pozycji pos (-1 gdy brak)."""
    while True:
        start = fragment.find(_GROUP_OPEN, pos)
        if start == -1:
            return -1
        end = start + len(_GROUP_OPEN)
        if end >= len(fragment) or not is_letter(fragment[end]):
            return start
        pos = end
