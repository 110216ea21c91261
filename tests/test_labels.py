import pytest

from data_model.entries import LabelType
from rtf_parser.constants import BULLET_PLACEHOLDER
from rtf_parser.labels import (
    bold_state_after,
    classify_label,
    content_start,
    find_marker_group,
    remove_marker_groups,
)


@pytest.mark.parametrize(
    "group, expected",
    [
        (r"{\listtext 1.\tab}", ("1.", LabelType.ORDERED_NUMERIC)),
        (r"{\listtext\pard\plain\f0 12.\tab}", ("12.", LabelType.ORDERED_NUMERIC)),
        (r"{\listtext b.\tab}", ("b.", LabelType.ORDERED_ALPHA)),
        (r"{\listtext B.\tab}", ("B.", LabelType.ORDERED_ALPHA)),
        (r"{\listtext\pard\plain\f3 \'b7\tab}", (BULLET_PLACEHOLDER, LabelType.BULLET)),
        ("{\\listtext \\u8226?\\tab}", (BULLET_PLACEHOLDER, LabelType.BULLET)),
        ("{\\listtext \\u9679\\tab}", (BULLET_PLACEHOLDER, LabelType.BULLET)),
    ],
)
def test_classify_label(group, expected):
    assert classify_label(group) == expected


@pytest.mark.parametrize(
    "group",
    [None, "", r"{\listtext (i)\tab}", r"{\listtext 1.\tabx}", "{\\listtext \\u65?\\tab}"],
)
def test_classify_label_unrecognized(group):
    assert classify_label(group) is None


def test_find_marker_group_skips_longer_keywords():
    fragment = r"x{\listtextfoo}{\listtext 1.\tab}y"
    assert find_marker_group(fragment) == r"{\listtext 1.\tab}"


def test_find_marker_group_nested():
    fragment = r"{\listtext{\b 1.}\tab}Body"
    assert find_marker_group(fragment) == r"{\listtext{\b 1.}\tab}"


def test_remove_marker_groups():
    assert remove_marker_groups(r"{\listtext 1.\tab}Body{\listtext 2.\tab} tail") == "Body tail"


def test_content_start_listtext():
    fragment = r"\pard\s1 {\listtext 1.\tab}Body"
    assert fragment[content_start(fragment):] == r"{\listtext 1.\tab}Body"


def test_content_start_insrsid():
    fragment = r"\pard\s1 junk\insrsid5 Body"
    assert fragment[content_start(fragment):] == r"\insrsid5 Body"


def test_content_start_plain():
    assert content_start(r"\pard Body") == 0


def test_bold_state_after():
    assert bold_state_after(r"{\listtext\b 1.\tab}") is True
    assert bold_state_after(r"{\listtext\b 1.\b0\tab}") is False
    assert bold_state_after(r"{\listtext\bin 1.\tab}") is False
