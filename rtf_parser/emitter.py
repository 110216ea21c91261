"""
rtf_parser/emitter.py — ponowna emisja wpisów jako uproszczony RTF.

Linia wyjściowa:
  ListEntry: prefix + etykieta + label_sep + treść + \\par
  TextEntry: normal_prefix + treść + \\par

Dobór szablonu:
  ORDERED_NUMERIC           → level1_prefix / level1_label_sep
  ORDERED_ALPHA, BULLET     → level2_prefix / level2_label_sep
  BULLET                    → etykieta z bullet_label (jeśli zdefiniowana)

Escapowanie treści (escape_rtf_text):
  1. opcjonalnie wielkie litery (znaczniki pogrubienia są odporne na upper())
  2. \\ { } → \\\\ \\{ \\}
  3. usunięcie znaków spoza ASCII, scalenie spacji, przycięcie
  4. odtworzenie znaczników jako \\b / \\b0 — po segmentach tekstu, nigdy
     wyrażeniem regularnym po już escapowanym tekście:
     - po słowie sterującym zawsze dokładnie jedna spacja-ogranicznik
     - odstęp stojący za znacznikiem przenosimy przed słowo sterujące,
       żeby pozostał widoczny (ogranicznik go nie "zjada")
     - słowo sterujące tuż po , . ; : ! ? (a przed dalszym tekstem)
       dostaje widoczną spację przed sobą
"""

from __future__ import annotations

import re

from data_model.entries import Entry, EntryList, LabelType, ListEntry
from data_model.styles import StyleTable
from rtf_parser.constants import BOLD_OFF, BOLD_ON
from rtf_parser.sanitizer import strip_bold_markers

PAR = "\\par"
CLOSING = "}"

_RTF_SPECIAL_RE = re.compile(r"([\\{}])")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_MULTI_SPACE_RE = re.compile(r" {2,}")
_BOLD_SPLIT_RE = re.compile(f"([{BOLD_ON}{BOLD_OFF}])")

_BOLD_CONTROL: dict[str, str] = {
    BOLD_ON:  "\\b",
    BOLD_OFF: "\\b0",
}

# Interpunkcja, po której słowo sterujące dostaje widoczną spację.
_SPACED_PUNCTUATION = frozenset(",.;:!?")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def escape_rtf_text(body: str, caps: bool = False) -> str:
    """
    Zamienia oczyszczoną treść (ze znacznikami pogrubienia) na bezpieczny RTF.

    Przykład::

        escape_rtf_text("a " + BOLD_ON + "b" + BOLD_OFF + ", c{d}")
        → "a \\\\b b\\\\b0 , c\\\\{d\\\\}"
    """
    text = body.upper() if caps else body
    text = _RTF_SPECIAL_RE.sub(r"\\\1", text)
    text = _NON_ASCII_RE.sub("", text)
    text = _MULTI_SPACE_RE.sub(" ", text).strip()
    return _restore_bold(text)


def template_for(entry: ListEntry, styles: StyleTable) -> tuple[str, str, str]:
    """Zwraca (prefix, etykieta, label_sep) dla elementu listy."""
    prefix, label_sep = styles.level_template(entry.is_level2)
    label = entry.label
    if entry.label_type is LabelType.BULLET and styles.bullet_label:
        label = styles.bullet_label
    return prefix, label, label_sep


def render_entry(entry: Entry, styles: StyleTable, caps: bool = False) -> str | None:
    """Zwraca linię RTF dla wpisu albo None, gdy treść po escapowaniu jest pusta."""
    if not strip_bold_markers(escape_rtf_text(entry.body, caps)).strip():
        return None

    if isinstance(entry, ListEntry):
        body = (BOLD_OFF + entry.body) if entry.label_bold else entry.body
        prefix, label, label_sep = template_for(entry, styles)
        return prefix + label + label_sep + escape_rtf_text(body, caps) + PAR

    return styles.normal_prefix + escape_rtf_text(entry.body, caps) + PAR


def render_document(entries: EntryList, styles: StyleTable, caps: bool = False) -> str:
    """Składa dokument: linie nagłówka, linie wpisów i zamykające '}'."""
    lines: list[str] = list(styles.header_lines)
    for entry in entries:
        line = render_entry(entry, styles, caps)
        if line is not None:
            lines.append(line)
    lines.append(CLOSING)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _restore_bold(text: str) -> str:
    """Zamienia znaczniki na \\b / \\b0 z deterministycznymi odstępami."""
    parts = _BOLD_SPLIT_RE.split(text)
    out: list[str] = []
    last_visible = ""

    for idx, part in enumerate(parts):
        if part not in _BOLD_CONTROL:
            if part:
                out.append(part)
                last_visible = part[-1]
            continue

        following = parts[idx + 1] if idx + 1 < len(parts) else ""
        if following[:1].isspace():
            parts[idx + 1] = following.lstrip()
            pad = bool(last_visible)
        else:
            pad = last_visible in _SPACED_PUNCTUATION and following[:1].isalnum()

        if pad and last_visible != " ":
            out.append(" ")
            last_visible = " "
        out.append(_BOLD_CONTROL[part] + " ")

    return "".join(out).rstrip()
