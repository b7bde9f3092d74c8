"""Property-based tests for string normalization and similarity."""

import pytest
from hypothesis import given, strategies as st, settings

from career_inbox.analysis.similarity import (
    is_similar,
    levenshtein_distance,
    levenshtein_similarity,
    normalize
)


class TestNormalize:
    """Test cases for comparison normalization."""
    
    def test_lowercases_and_strips_punctuation(self):
        assert normalize("  Full-Stack Developer (Remote) ") == "fullstackdeveloperremote"
    
    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""
    
    def test_non_ascii_letters_are_removed(self):
        assert normalize("Société Générale") == "socitgnrale"
    
    @given(st.text())
    def test_output_alphabet(self, value):
        assert all(c in "abcdefghijklmnopqrstuvwxyz0123456789" for c in normalize(value))
    
    @given(st.text())
    def test_idempotent(self, value):
        assert normalize(normalize(value)) == normalize(value)


class TestLevenshtein:
    """Test cases for edit distance and similarity ratio."""
    
    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("google", "google", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("microsoft", "microsft", 1),
    ])
    def test_known_distances(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected
    
    def test_similarity_ratio(self):
        # distance 3 over max length 7
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    
    def test_empty_inputs(self):
        assert levenshtein_similarity("abc", "") == 0.0
        assert levenshtein_similarity("", "abc") == 0.0
        assert levenshtein_similarity("", "") == 1.0
    
    @given(st.text(min_size=1, max_size=30))
    @settings(max_examples=50)
    def test_identity_scores_one(self, value):
        assert levenshtein_similarity(value, value) == 1.0
    
    @given(st.text(min_size=1, max_size=30))
    @settings(max_examples=50)
    def test_against_empty_scores_zero(self, value):
        assert levenshtein_similarity(value, "") == 0.0
    
    @given(st.text(max_size=20), st.text(max_size=20))
    @settings(max_examples=100)
    def test_symmetric_and_bounded(self, a, b):
        forward = levenshtein_similarity(a, b)
        assert forward == levenshtein_similarity(b, a)
        assert 0.0 <= forward <= 1.0
        assert levenshtein_distance(a, b) <= max(len(a), len(b))


class TestIsSimilar:
    """Test cases for the three-way similarity test."""
    
    def test_substring_counts_as_similar(self):
        assert is_similar("google", "googlellc", 0.99)
    
    def test_threshold_is_strict(self):
        # one edit over two characters is exactly 0.5
        assert not is_similar("ab", "ax", 0.5)
        assert is_similar("ab", "ax", 0.4)
    
    def test_dissimilar(self):
        assert not is_similar("abcde", "abxyz", 0.7)
