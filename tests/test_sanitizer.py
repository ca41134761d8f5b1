"""sanitize_query() tests."""

import pytest

from core.search.sanitizer import sanitize_query


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_empty_input_yields_empty_query(raw):
    assert sanitize_query(raw) == ""


def test_quotes_and_slashes_are_removed_not_replaced():
    assert sanitize_query("""it's "sun`set" a/b c\\d""") == "its sunset ab cd"


@pytest.mark.parametrize(
    "raw",
    ['say "hi"', "x'y", "`cmd`", "back\\slash", "a/b/c", """'"`\\/""" * 10],
)
def test_stripped_characters_never_survive(raw):
    cleaned = sanitize_query(raw)
    for char in "\"'`\\/":
        assert char not in cleaned


def test_other_special_characters_become_single_spaces():
    assert sanitize_query("cat&dog|bird") == "cat dog bird"
    assert sanitize_query("remove $bg$ (now)") == "remove bg now"


def test_hyphens_underscores_and_periods_are_kept():
    assert sanitize_query("16:9 old-photo my_image v1.2") == "16 9 old-photo my_image v1.2"


def test_whitespace_is_collapsed_and_trimmed():
    assert sanitize_query("  sunset \t\n  beach  ") == "sunset beach"


def test_output_is_bounded_by_default_length():
    assert len(sanitize_query("a" * 500)) == 120
    assert len(sanitize_query("word " * 100)) <= 120


def test_custom_max_length_applies_after_cleaning():
    assert sanitize_query('"abc" def', max_len=5) == "abc d"


def test_truncation_never_leaves_trailing_space():
    assert sanitize_query("abcd efgh", max_len=5) == "abcd"
