"""rtf_parser/paragraphs.py — podział oczyszczonego RTF na fragmenty akapitów."""

from __future__ import annotations

from rtf_parser.constants import PAR_WORD
from rtf_parser.scanner import is_letter

_PAR = "\\" + PAR_WORD


def split_paragraphs(rtf: str) -> list[str]:
    """
    Dzieli tekst na fragmenty rozdzielone słowem \\par.

    Dopasowanie wymaga, by po \\par nie stała litera — \\pard czy \\pararsid
    nie dzielą akapitu. Znacznik nie wchodzi do fragmentów; końcowy fragment
    jest dodawany tylko gdy po ostatnim \\par został jakiś tekst.
    """
    paras: list[str] = []
    n = len(rtf)
    last = 0
    i = 0
    while i < n:
        if rtf[i] != "\\":
            i += 1
            continue
        end = i + len(_PAR)
        if rtf.startswith(_PAR, i) and not (end < n and is_letter(rtf[end])):
            paras.append(rtf[last:i])
            last = i = end
            continue
        i += 2
    if last < n:
        paras.append(rtf[last:])
    return paras
