"""
rtf_parser/extractor.py — ekstrakcja uporządkowanych wpisów z dokumentu RTF.

Architektura:
  rtf → clean_document() → split_paragraphs()
      → dla każdego fragmentu: content_start() → find_marker_group()
        → classify_label() → sanitize_fragment()
      → EntryList (ListEntry | TextEntry w kolejności dokumentu)

Kluczowe funkcje publiczne:
  extract_entries(rtf) -> EntryList
"""

from __future__ import annotations

from data_model.entries import Entry, EntryList, ListEntry, TextEntry
from rtf_parser.cleaner import clean_document
from rtf_parser.labels import (
    bold_state_after,
    classify_label,
    content_start,
    find_marker_group,
    remove_marker_groups,
)
from rtf_parser.paragraphs import split_paragraphs
from rtf_parser.sanitizer import sanitize_fragment, strip_bold_markers


def extract_entries(rtf: str) -> EntryList:
    """
    Zwraca listę wpisów (elementy list i zwykłe akapity) w kolejności dokumentu.

    Wpisy z pustą treścią są pomijane. Nierozpoznana etykieta w \\listtext
    nie tworzy elementu listy — akapit trafia do wyniku jako TextEntry.

    Raises:
        RtfParseError gdy grupy dokumentu są niezbalansowane.
    """
    cleaned = clean_document(rtf.replace("\r\n", "\n"))
    entries: EntryList = []
    for para in split_paragraphs(cleaned):
        if not para.strip():
            continue
        entry = _extract_entry(para)
        if entry is not None:
            entries.append(entry)
    return entries


def _extract_entry(para: str) -> Entry | None:
    content = para[content_start(para):]
    group = find_marker_group(content)
    label_info = classify_label(group)

    if group is not None and label_info is not None:
        label, label_type = label_info
        body = sanitize_fragment(remove_marker_groups(content))
        if not _has_text(body):
            return None
        return ListEntry(
            label=label,
            label_type=label_type,
            body=body,
            label_bold=bold_state_after(group),
        )

    body = sanitize_fragment(content)
    if not _has_text(body):
        return None
    return TextEntry(body=body)


def _has_text(body: str) -> bool:
    return bool(strip_bold_markers(body).strip())
