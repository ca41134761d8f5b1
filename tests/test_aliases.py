"""Alias and misspelling expansion tests."""

import pytest

from core.search.aliases import (
    COMMON_MISSPELLINGS,
    TRANSFORMATION_ALIASES,
    canonical_spelling,
    expand_query,
)


def test_misspelling_maps_back_to_canonical():
    terms = expand_query("remvoe bg")
    assert "remove" in terms.spelling_variations
    assert "background" in terms.spelling_variations


def test_canonical_word_expands_to_its_misspellings():
    terms = expand_query("blur")
    assert set(COMMON_MISSPELLINGS["blur"]) <= terms.spelling_variations
    assert "blur" not in terms.spelling_variations


def test_removebg_pulls_in_remove_background_aliases():
    terms = expand_query("removebg")
    assert "removeBackground" in terms.transformation_variations
    assert "remove background" in terms.transformation_variations


def test_alias_value_match_adds_the_whole_group():
    terms = expand_query("vintage look")
    assert terms.transformation_variations == frozenset(TRANSFORMATION_ALIASES["sepia"])


def test_camel_case_alias_values_match_lowercased_queries():
    terms = expand_query("objectremove")
    assert "objectRemove" in terms.transformation_variations


def test_substring_inside_longer_word_still_matches():
    # "fixture" contains the misspelling "fix" of "restore".
    assert "restore" in expand_query("fixture").spelling_variations


def test_unrelated_query_expands_to_nothing():
    terms = expand_query("mountain")
    assert terms.transformation_variations == frozenset()
    assert terms.spelling_variations == frozenset()


def test_mixed_case_input_is_lowered():
    assert "removeBackground" in expand_query("RemoveBG").transformation_variations


@pytest.mark.parametrize(
    "token, expected",
    [("remvoe", "remove"), ("BG", "background"), ("colour", "color"), ("sunset", None)],
)
def test_canonical_spelling_lookup(token, expected):
    assert canonical_spelling(token) == expected


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        TRANSFORMATION_ALIASES["new"] = ("new",)
