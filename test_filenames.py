#!/usr/bin/env python3
"""
Filename helper tests

Tests:
1. Illegal characters are deleted, everything else kept in order
2. Ordinals are zero-padded to two digits and grow past 99
3. Filenames and stub bodies for generated questions
4. Whitespace runs become single underscores
"""

import pytest

from qdocs.filenames import (
    ILLEGAL_FILENAME_CHARS,
    build_question_filename,
    format_ordinal,
    render_question_stub,
    sanitize_filename,
    underscore_whitespace,
)


def test_sanitize_keeps_parentheses_and_drops_question_mark():
    assert (
        sanitize_filename("What is the time complexity of map()?")
        == "What is the time complexity of map()"
    )


def test_sanitize_removes_every_illegal_character():
    raw = 'a<b>c:d"e/f\\g|h?i*j'
    assert sanitize_filename(raw) == "abcdefghij"


@pytest.mark.parametrize("raw", [
    "",
    "plain text",
    "  leading and trailing  ",
    "What happens if filter() doesn’t find any matching elements?",
    "How do generators (function*) work in JavaScript?",
    'mixed <>:"/\\|?* with ünïcödé',
])
def test_sanitize_preserves_other_characters_in_order(raw):
    result = sanitize_filename(raw)
    assert not any(ch in result for ch in ILLEGAL_FILENAME_CHARS)
    assert result == "".join(ch for ch in raw if ch not in ILLEGAL_FILENAME_CHARS)


def test_sanitize_collapses_words_without_separator():
    assert sanitize_filename("either/or") == "eitheror"


def test_sanitize_does_not_change_case_or_whitespace():
    assert sanitize_filename("  MiXeD  Case  ") == "  MiXeD  Case  "


@pytest.mark.parametrize("index,offset,expected", [
    (0, 1, "01"),
    (8, 1, "09"),
    (9, 1, "10"),
    (0, 0, "00"),
    (11, 8, "19"),
    (19, 61, "80"),
    (98, 1, "99"),
])
def test_ordinal_is_two_digits_up_to_99(index, offset, expected):
    assert format_ordinal(index, offset) == expected
    assert len(expected) == 2


def test_ordinal_grows_past_99():
    assert format_ordinal(99, 1) == "100"
    assert format_ordinal(0, 1234) == "1234"


def test_ordinal_rejects_negative_numbers():
    with pytest.raises(ValueError):
        format_ordinal(0, -1)


def test_build_question_filename():
    assert build_question_filename(0, "Alpha") == "01. Alpha.md"
    assert build_question_filename(1, "Beta", offset=1) == "02. Beta.md"
    assert (
        build_question_filename(11, "What is the time complexity of map()?", offset=8)
        == "19. What is the time complexity of map().md"
    )


def test_render_question_stub_keeps_raw_text():
    assert render_question_stub("Is a/b ok?") == "# Is a/b ok?\n\n"


@pytest.mark.parametrize("name,expected", [
    ("My Question.md", "My_Question.md"),
    ("No_Spaces.md", "No_Spaces.md"),
    ("01. What  is\ta closure.md", "01._What_is_a_closure.md"),
    ("trailing .md", "trailing_.md"),
])
def test_underscore_whitespace(name, expected):
    assert underscore_whitespace(name) == expected
