"""
rtf_parser — parser i emiter uproszczonego RTF.

Publiczne API:
  simplify_rtf(rtf, styles, caps)       -> str
  extract_entries(rtf)                  -> EntryList
  render_document(entries, styles, caps) -> str
  render_entry(entry, styles, caps)     -> str | None
  escape_rtf_text(body, caps)           -> str
  sanitize_fragment(fragment)           -> str
  load_style_table(path)                -> StyleTable
  parse_style_table(text, source)       -> StyleTable
  RtfParseError, StyleConfigError       wyjątki

Typowe użycie:
    from rtf_parser import load_style_table, simplify_rtf

    styles = load_style_table("styles.tsv")
    out    = simplify_rtf(Path("word.rtf").read_text(encoding="utf-8"), styles)
"""

from .constants import BOLD_ON, BOLD_OFF, BULLET_PLACEHOLDER
from .emitter import escape_rtf_text, render_document, render_entry
from .errors import RtfParseError, StyleConfigError
from .extractor import extract_entries
from .sanitizer import sanitize_fragment
from .simplify import simplify_rtf
from .styles import load_style_table, parse_style_table

__all__ = [
    "BOLD_ON",
    "BOLD_OFF",
    "BULLET_PLACEHOLDER",
    "escape_rtf_text",
    "render_document",
    "render_entry",
    "RtfParseError",
    "StyleConfigError",
    "extract_entries",
    "sanitize_fragment",
    "simplify_rtf",
    "load_style_table",
    "parse_style_table",
]
