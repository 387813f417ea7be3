"""Tests for token normalization and word matching."""

import pytest

from word_engine import (
    edit_distance,
    is_token_sequence_match,
    is_word_match,
    normalize_token,
    similarity_ratio,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Sunset", "sunset"),
        ("sun-set", "sunset"),
        ("Sun Set", "sunset"),
        ("sun–set", "sunset"),
        ("sun—set", "sunset"),
        ("\tCat\n", "cat"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_token(raw, expected):
    assert normalize_token(raw) == expected


class TestEditDistance:
    def test_known_distances(self):
        assert edit_distance("cat", "cat") == 0
        assert edit_distance("cat", "bat") == 1
        assert edit_distance("", "abc") == 3
        assert edit_distance("abc", "") == 3
        assert edit_distance("kitten", "sitting") == 3

    def test_symmetric(self):
        assert edit_distance("flaw", "lawn") == edit_distance("lawn", "flaw") == 2

    def test_similarity_ratio(self):
        assert similarity_ratio("", "") == 1.0
        assert similarity_ratio("cat", "bat") == pytest.approx(2 / 3)
        assert similarity_ratio("abc", "") == 0.0


class TestWordMatch:
    def test_exact(self):
        assert is_word_match("Cat", "cat")

    def test_response_contains_target(self):
        assert is_word_match("the cat", "cat")

    def test_target_contains_response(self):
        assert is_word_match("ball", "football")

    def test_formatting_ignored(self):
        assert is_word_match("Sun Set", "sun-set")

    def test_near_miss_spelling(self):
        assert is_word_match("elephent", "elephant")

    def test_threshold_is_strict(self):
        # two edits over eight characters is exactly 0.75
        assert not is_word_match("elefant", "elephant")

    def test_wrong_word(self):
        assert not is_word_match("dog", "cat")

    def test_empty_form_is_contained_in_any_word(self):
        assert is_word_match("", "cat")
        assert is_word_match("  - ", "cat")
        assert is_word_match(None, "cat")
        assert is_word_match("cat", "")


class TestTokenSequenceMatch:
    def test_syllables_in_order(self):
        assert is_token_sequence_match(["sun", "set"], ["sun", "set"], "sunset")

    def test_wrong_order(self):
        assert not is_token_sequence_match(["set", "sun"], ["sun", "set"], "sunset")

    def test_joined_word_still_counts(self):
        assert is_token_sequence_match(["set", "sun"], ["sun", "set"], "set sun")

    def test_different_split_spells_target(self):
        assert is_token_sequence_match(["su", "nset"], ["sun", "set"], "sunset")

    def test_formatting_ignored(self):
        assert is_token_sequence_match(["Sun-", "SET"], ["sun", "set"], "Sun–set")

    def test_missing_syllable(self):
        assert not is_token_sequence_match(["sun"], ["sun", "set"], "sunset")
