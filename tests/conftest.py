"""Wspólne fikstury testów: minimalna tabela stylów."""

from pathlib import Path

import pytest

from data_model.styles import StyleTable
from rtf_parser.styles import parse_style_table

STYLE_ROWS = [
    ("type", "name", "value"),
    ("header_line", "-", r"{\rtf1\ansi\deff0"),
    ("header_line", "-", r"{\fonttbl{\f0 Arial;}}"),
    ("style", "level1_prefix", r"\pard\s1 "),
    ("style", "level1_label_sep", r"\tab "),
    ("style", "level2_prefix", r"\pard\s2 "),
    ("style", "level2_label_sep", r"\tab "),
]


def styles_tsv(rows=STYLE_ROWS) -> str:
    return "\n".join("\t".join(row) for row in rows) + "\n"


@pytest.fixture
def styles() -> StyleTable:
    return parse_style_table(styles_tsv())


@pytest.fixture
def styles_file(tmp_path: Path) -> Path:
    path = tmp_path / "styles.tsv"
    path.write_text(styles_tsv(), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Zmienne RTFS_* z otoczenia nie mogą wpływać na wynik testów."""
    for name in ("RTFS_STYLES", "RTFS_SUFFIX", "RTFS_CAPS"):
        monkeypatch.delenv(name, raising=False)
