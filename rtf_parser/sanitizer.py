"""
rtf_parser/sanitizer.py — redukcja fragmentu RTF do czystego tekstu ASCII.

Jedno przejście od lewej do prawej z jawnym stanem:
  i      — kursor w fragmencie
  bold   — bieżący stan pogrubienia
  stack  — stan pogrubienia zapamiętany przy wejściu do każdej grupy;
           '}' przywraca stan grupy nadrzędnej (pogrubienie ma zasięg grupy)

Zmiany stanu pogrubienia są zapisywane w tekście jako BOLD_ON / BOLD_OFF.
Wynik zawsze ma zbalansowane znaczniki: otwarte pogrubienie jest domykane
na końcu fragmentu.

Fragment nie musi być zbalansowany (akapit może przeciąć grupę), więc '}'
przy pustym stosie przywraca stan "bez pogrubienia".
"""

from __future__ import annotations

import re

from rtf_parser.constants import BOLD_MARKERS, BOLD_OFF, BOLD_ON, BOLD_WORD, UNICODE_WORD
from rtf_parser.escapes import decode_hex, decode_unicode
from rtf_parser.scanner import is_letter, read_control_word

_CONTROL_WHITESPACE_RE = re.compile(r"[\n\r\t]+")
_NON_PRINTABLE_RE = re.compile(f"[^\\x20-\\x7E{BOLD_ON}{BOLD_OFF}]")
_MULTI_SPACE_RE = re.compile(r" {2,}")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:])")
_BOLD_MARKER_RE = re.compile(f"[{BOLD_ON}{BOLD_OFF}]")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def sanitize_fragment(fragment: str) -> str:
    """
    Zwraca czysty tekst fragmentu ze znacznikami pogrubienia.

    Przykład::

        sanitize_fragment("plain {\\\\b bold} text")
        → "plain " + BOLD_ON + "bold" + BOLD_OFF + " text"
    """
    out: list[str] = []
    bold = False
    stack: list[bool] = []
    n = len(fragment)
    i = 0

    while i < n:
        ch = fragment[i]

        if ch == "{":
            stack.append(bold)
            i += 1
            continue

        if ch == "}":
            prev = stack.pop() if stack else False
            if prev != bold:
                _mark(out, prev)
                bold = prev
            i += 1
            continue

        if ch != "\\":
            _append_text(out, ch)
            i += 1
            continue

        nxt = fragment[i + 1:i + 2]

        if nxt in ("\\", "{", "}"):
            out.append(nxt)
            i += 2
            continue

        if nxt == "'":
            decoded = decode_hex(fragment[i + 2:i + 4])
            if decoded is not None:
                _append_text(out, decoded)
                i += 4
            else:
                i += 2
            continue

        if nxt == "~":
            out.append(" ")
            i += 2
            continue

        if nxt and is_letter(nxt):
            cw = read_control_word(fragment, i)
            i = cw.end
            if cw.word == UNICODE_WORD and cw.param is not None:
                _append_text(out, decode_unicode(cw.param))
                # znak zastępczy po \uN
                if fragment.startswith("?", i):
                    i += 1
            elif cw.word == BOLD_WORD:
                new_bold = cw.param != 0
                if new_bold != bold:
                    _mark(out, new_bold)
                    bold = new_bold
            continue

        # pozostałe symbole sterujące (\*, \-, \_, \|, \<nowa linia> ...)
        i += 2

    if bold:
        _mark(out, False)

    text = "".join(out)
    text = _CONTROL_WHITESPACE_RE.sub("", text)
    text = _NON_PRINTABLE_RE.sub("", text)
    return normalize_whitespace(text)


def normalize_whitespace(text: str) -> str:
    """
    Scala wielokrotne spacje, usuwa odstęp przed , . ; : i przycina brzegi.

    Operacja jest idempotentna.
    """
    text = _MULTI_SPACE_RE.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return text.strip()


def strip_bold_markers(text: str) -> str:
    """Usuwa znaczniki pogrubienia (np. do sprawdzenia, czy treść jest pusta)."""
    return _BOLD_MARKER_RE.sub("", text)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _mark(out: list[str], on: bool) -> None:
    """Dopisuje znacznik zmiany pogrubienia; sąsiednie ON/OFF znoszą się."""
    marker = BOLD_ON if on else BOLD_OFF
    opposite = BOLD_OFF if on else BOLD_ON
    if out and out[-1] == opposite:
        out.pop()
        return
    out.append(marker)


def _append_text(out: list[str], text: str) -> None:
    # znak identyczny ze znacznikiem nie może przejść jako tekst
    if text and text not in BOLD_MARKERS:
        out.append(text)
