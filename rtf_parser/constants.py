"""
rtf_parser/constants.py — stałe parsera RTF.

Znaczniki pogrubienia to znaki sterujące spoza pasma drukowalnego ASCII:
nie mogą pojawić się w oczyszczonym tekście inaczej niż jako znacznik
(sanityzer odrzuca je z wejścia).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Znaczniki pogrubienia (in-band)
# ---------------------------------------------------------------------------

BOLD_ON  = "\x0e"
BOLD_OFF = "\x0f"
BOLD_MARKERS = frozenset({BOLD_ON, BOLD_OFF})

# ---------------------------------------------------------------------------
# Słowa sterujące
# ---------------------------------------------------------------------------

PAR_WORD      = "par"
LISTTEXT_WORD = "listtext"
BOLD_WORD     = "b"
UNICODE_WORD  = "u"

# Grupy bez treści usuwane w całości przez cleaner.
NON_CONTENT_KEYWORDS: frozenset[str] = frozenset({
    "fonttbl",
    "stylesheet",
    "info",
    "colortbl",
    "listtable",
    "listoverridetable",
    "rsidtbl",
    "xmlnstbl",
    "datastore",
    "themedata",
    "colorschememapping",
    "latentstyles",
    "generator",
})

# ---------------------------------------------------------------------------
# Etykiety list
# ---------------------------------------------------------------------------

# Etykieta punktora w wyjściu, gdy tabela stylów nie definiuje bullet_label.
BULLET_PLACEHOLDER = "\\u8226?"

# Punkty kodowe traktowane jako punktor w \listtext.
BULLET_CODE_POINTS = frozenset({8226, 9679})
