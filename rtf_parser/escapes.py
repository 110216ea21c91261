"""
rtf_parser/escapes.py — dekodowanie sekwencji ucieczki RTF do tekstu ASCII.

  \\uN   → decode_unicode(N)   (N ze znakiem; ujemne = górna połowa 16 bitów)
  \\'hh  → decode_hex("hh")    (bajt w zapisie szesnastkowym)

Zawężenie do ASCII jest celowo stratne: typograficzne cudzysłowy i myślniki
mają odpowiedniki ASCII, wszystko inne spoza [0, 128) jest pomijane.
"""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^[0-9a-fA-F]{2}$")

# "Inteligentna" interpunkcja → ASCII.
_SMART_PUNCTUATION: dict[int, str] = {
    8220: '"',  # lewy cudzysłów podwójny
    8221: '"',  # prawy cudzysłów podwójny
    8216: "'",  # lewy cudzysłów pojedynczy
    8217: "'",  # apostrof / prawy pojedynczy
    8211: "-",  # półpauza
    8212: "-",  # pauza
}


def decode_unicode(code: int) -> str:
    """
    Zwraca reprezentację ASCII punktu kodowego z \\uN (albo "" gdy brak).

    Przykłady::

        decode_unicode(8220)  → '"'
        decode_unicode(65)    → 'A'
        decode_unicode(-3913) → ''   (61623, poza ASCII)
    """
    if code < 0:
        code += 65536
    if code in _SMART_PUNCTUATION:
        return _SMART_PUNCTUATION[code]
    if 0 <= code < 128:
        return chr(code)
    return ""


def decode_hex(digits: str) -> str | None:
    """Dekoduje dwie cyfry szesnastkowe z \\'hh; None gdy to nie są dwie cyfry hex."""
    if not _HEX_RE.match(digits):
        return None
    return chr(int(digits, 16))
