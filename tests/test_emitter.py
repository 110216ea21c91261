from data_model.entries import LabelType, ListEntry, TextEntry
from data_model.styles import DEFAULT_NORMAL_PREFIX
from rtf_parser import escape_rtf_text, render_document, render_entry, simplify_rtf
from rtf_parser.constants import BOLD_OFF, BOLD_ON, BULLET_PLACEHOLDER
from rtf_parser.scanner import check_balanced


def test_escape_special_characters():
    assert escape_rtf_text(r"a{b}\c") == r"a\{b\}\\c"


def test_escape_strips_non_ascii_and_collapses_spaces():
    assert escape_rtf_text("  zażółć   ok  ") == "za ok"


def test_escape_caps():
    assert escape_rtf_text(f"abc {BOLD_ON}def{BOLD_OFF}", caps=True) == r"ABC \b DEF\b0"


def test_bold_keeps_space_after_closing_marker():
    assert escape_rtf_text(f"Plain {BOLD_ON}Bold{BOLD_OFF} text") == r"Plain \b Bold \b0 text"


def test_bold_after_punctuation_gets_space():
    assert escape_rtf_text(f"Note,{BOLD_ON}bold{BOLD_OFF} end") == r"Note, \b bold \b0 end"


def test_bold_mid_word_has_no_extra_space():
    assert escape_rtf_text(f"un{BOLD_ON}bold{BOLD_OFF}ed") == r"un\b bold\b0 ed"


def test_render_list_entries(styles):
    numeric = ListEntry(label="1.", label_type=LabelType.ORDERED_NUMERIC, body="One")
    alpha = ListEntry(label="a.", label_type=LabelType.ORDERED_ALPHA, body="Two")
    assert render_entry(numeric, styles) == r"\pard\s1 1.\tab One\par"
    assert render_entry(alpha, styles) == r"\pard\s2 a.\tab Two\par"


def test_render_bullet_placeholder(styles):
    bullet = ListEntry(label=BULLET_PLACEHOLDER, label_type=LabelType.BULLET, body="Dot")
    assert render_entry(bullet, styles) == r"\pard\s2 " + BULLET_PLACEHOLDER + r"\tab Dot\par"


def test_render_bullet_label_override(styles):
    styles.styles["bullet_label"] = r"\'95"
    bullet = ListEntry(label=BULLET_PLACEHOLDER, label_type=LabelType.BULLET, body="Dot")
    assert render_entry(bullet, styles) == r"\pard\s2 \'95\tab Dot\par"


def test_render_text_entry_default_prefix(styles):
    assert render_entry(TextEntry(body="Plain"), styles) == DEFAULT_NORMAL_PREFIX + r"Plain\par"


def test_render_text_entry_custom_prefix(styles):
    styles.styles["normal_prefix"] = r"\pard\s9 "
    assert render_entry(TextEntry(body="Plain"), styles) == r"\pard\s9 Plain\par"


def test_render_bold_label_turns_bold_off(styles):
    entry = ListEntry(
        label="1.", label_type=LabelType.ORDERED_NUMERIC, body="Body", label_bold=True,
    )
    assert render_entry(entry, styles) == r"\pard\s1 1.\tab \b0 Body\par"


def test_render_entry_empty_after_escaping(styles):
    assert render_entry(TextEntry(body="éè"), styles) is None


def test_render_document_layout(styles):
    entries = [
        TextEntry(body="Intro"),
        TextEntry(body="é"),
        ListEntry(label="1.", label_type=LabelType.ORDERED_NUMERIC, body="One"),
    ]
    assert render_document(entries, styles).split("\n") == [
        r"{\rtf1\ansi\deff0",
        r"{\fonttbl{\f0 Arial;}}",
        r"\pard\s0 Intro\par",
        r"\pard\s1 1.\tab One\par",
        "}",
    ]


def test_render_empty_document(styles):
    assert render_document([], styles) == "\n".join(styles.header_lines + ["}"])


def test_simplify_end_to_end(styles):
    out = simplify_rtf(r"{\rtf1{\listtext 1.\tab}Hello World\par}", styles)
    assert out == "\n".join([
        r"{\rtf1\ansi\deff0",
        r"{\fonttbl{\f0 Arial;}}",
        r"\pard\s1 1.\tab Hello World\par",
        "}",
    ])


def test_simplify_output_is_balanced(styles):
    rtf = r"{\rtf1 Braces \{x\} and {\b bold \\ text}\par{\listtext b.\tab}Sub\par}"
    check_balanced(simplify_rtf(rtf, styles))
