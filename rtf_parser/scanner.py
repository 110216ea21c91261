"""
rtf_parser/scanner.py — skaner RTF świadomy zagnieżdżenia grup.

Jedyne miejsce, w którym liczymy nawiasy klamrowe. Wszystkie przejścia, które
pomijają całe grupy (cleaner, etykiety list), korzystają z skip_group().

Sekwencje ucieczki (\\{, \\}, \\\\) są przeskakiwane parami i nie zmieniają
głębokości.

Publiczne API:
  read_control_word(text, pos) -> ControlWord
  skip_group(text, pos)        -> int
  group_keyword(text, pos)     -> str
  check_balanced(text)         -> None
"""

from __future__ import annotations

from dataclasses import dataclass

from rtf_parser.errors import RtfParseError


@dataclass(frozen=True, slots=True)
class ControlWord:
    """
    Słowo sterujące: \\word[-]N[ ].

    - word:  litery słowa, np. "b", "listtext", "u"
    - param: parametr liczbowy ze znakiem (None gdy brak)
    - end:   indeks tuż za słowem (łącznie z ewentualną spacją-ogranicznikiem)
    """
    word: str
    param: int | None
    end: int


def is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def read_control_word(text: str, pos: int) -> ControlWord:
    """
    Czyta słowo sterujące zaczynające się od ukośnika na pozycji pos.

    Zakłada, że text[pos + 1] jest literą ASCII. Pojedyncza spacja po słowie
    jest ogranicznikiem i należy do słowa.
    """
    n = len(text)
    i = pos + 1
    while i < n and is_letter(text[i]):
        i += 1
    word = text[pos + 1:i]

    sign = 1
    if i < n and text[i] == "-":
        sign = -1
        i += 1
    digits_start = i
    while i < n and _is_digit(text[i]):
        i += 1
    digits = text[digits_start:i]
    param = sign * int(digits) if digits else None

    if i < n and text[i] == " ":
        i += 1
    return ControlWord(word=word, param=param, end=i)


def skip_group(text: str, pos: int) -> int:
    """
    Zwraca indeks tuż za nawiasem zamykającym grupę otwartą na pozycji pos.

    Raises:
        RtfParseError gdy tekst kończy się przed domknięciem grupy.
    """
    if text[pos:pos + 1] != "{":
        raise RtfParseError(f"Oczekiwano '{{' na pozycji {pos}", pos)

    n = len(text)
    depth = 0
    i = pos
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise RtfParseError(f"Niezamknięta grupa otwarta na pozycji {pos}", pos)


def group_keyword(text: str, pos: int) -> str:
    """
    Zwraca słowo kluczowe grupy otwartej na pozycji pos ("" gdy brak).

    Obsługuje zarówno {\\fonttbl ...}, jak i {\\*\\keyword ...}.
    """
    j = pos + 1
    if text[j:j + 1] != "\\":
        return ""
    j += 1
    if text[j:j + 1] == "*":
        j += 1
        if text[j:j + 1] == "\\":
            j += 1
    start = j
    while j < len(text) and is_letter(text[j]):
        j += 1
    return text[start:j]


def check_balanced(text: str) -> None:
    """
    Sprawdza, czy wszystkie grupy dokumentu są zbalansowane.

    Raises:
        RtfParseError przy nadmiarowym '}' albo niezamkniętej grupie.
    """
    opened: list[int] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            opened.append(i)
        elif ch == "}":
            if not opened:
                raise RtfParseError(f"Nadmiarowy '}}' na pozycji {i}", i)
            opened.pop()
        i += 1
    if opened:
        pos = opened[-1]
        raise RtfParseError(f"Niezamknięta grupa otwarta na pozycji {pos}", pos)
