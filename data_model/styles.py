"""
data_model/styles.py — tabela stylów wyjściowego dokumentu RTF.

StyleTable łączy:
  header_lines — nagłówek dokumentu wyjściowego (w kolejności, dosłownie)
  styles       — mapę klucz → literał RTF (prefiksy i separatory etykiet)

Wymagane klucze: REQUIRED_STYLE_KEYS. Opcjonalne: bullet_label, normal_prefix.
Wczytywanie i walidację z pliku TSV realizuje rtf_parser.styles.
"""

from __future__ import annotations

from dataclasses import dataclass, field

REQUIRED_STYLE_KEYS: tuple[str, ...] = (
    "level1_prefix",
    "level1_label_sep",
    "level2_prefix",
    "level2_label_sep",
)

# Prefiks zwykłego akapitu, gdy tabela nie definiuje normal_prefix.
DEFAULT_NORMAL_PREFIX = "\\pard\\s0 "


@dataclass(slots=True)
class StyleTable:
    """
    Tabela stylów (tylko do odczytu po wczytaniu).

    - header_lines: linie nagłówka RTF, np. "{\\rtf1\\ansi ..."
    - styles:       słownik stylów, np. {"level1_prefix": "\\pard\\s1 ", ...}
    """
    header_lines: list[str] = field(default_factory=list)
    styles: dict[str, str] = field(default_factory=dict)

    def missing_keys(self) -> list[str]:
        return [k for k in REQUIRED_STYLE_KEYS if k not in self.styles]

    def level_template(self, level2: bool) -> tuple[str, str]:
        """Zwraca (prefix, label_sep) dla poziomu 1 lub 2."""
        if level2:
            return self.styles["level2_prefix"], self.styles["level2_label_sep"]
        return self.styles["level1_prefix"], self.styles["level1_label_sep"]

    @property
    def bullet_label(self) -> str | None:
        # Pusta wartość traktowana jak brak (fallback na etykietę z dokumentu).
        return self.styles.get("bullet_label") or None

    @property
    def normal_prefix(self) -> str:
        return self.styles.get("normal_prefix") or DEFAULT_NORMAL_PREFIX
