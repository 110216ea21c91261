"""
Konfiguracja rtfs — zmienne środowiskowe, opcjonalnie z pliku .env.

Zmienne:
  RTFS_STYLES   ścieżka do tabeli stylów (domyślnie: styles.tsv)
  RTFS_SUFFIX   przyrostek plików wynikowych batch (domyślnie: _sanitized)
  RTFS_CAPS     1/true/yes/on → domyślnie wielkie litery w treści

Opcje wiersza poleceń mają pierwszeństwo przed zmiennymi.
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=True)

DEFAULT_STYLES = "styles.tsv"
DEFAULT_SUFFIX = "_sanitized"

_TRUTHY = {"1", "true", "yes", "on"}


def styles_path(cli_value: str | None = None) -> pathlib.Path:
    return pathlib.Path(cli_value or os.getenv("RTFS_STYLES", DEFAULT_STYLES))


def output_suffix(cli_value: str | None = None) -> str:
    return cli_value or os.getenv("RTFS_SUFFIX", DEFAULT_SUFFIX)


def caps_enabled(cli_flag: bool = False) -> bool:
    return cli_flag or os.getenv("RTFS_CAPS", "").strip().lower() in _TRUTHY
