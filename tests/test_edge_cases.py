"""
Edge case tests for levkit.

Tests cover:
- Unicode: accents, combining marks, CJK, emoji, astral-plane characters
- Whitespace and control characters
- Strings of very different lengths
"""

import pytest

import levkit as lk


class TestUnicodeCodePoints:
    """Every code point counts as one unit of length."""

    def test_emoji(self):
        assert lk.distance("\U0001F600", "\U0001F603") == 1
        assert lk.normalized_distance("\U0001F600a", "\U0001F603a") == 0.5

    def test_emoji_not_counted_as_bytes(self):
        # Four UTF-8 bytes, one code point
        assert lk.distance("\U0001F600", "") == 1
        assert lk.similarity("\U0001F600", "\U0001F600") == 1

    def test_combining_marks_are_separate(self):
        # Decomposed e + combining acute is two code points; no normalization
        assert lk.distance("e\u0301", "\u00e9") == 2
        assert lk.distance("cafe\u0301", "cafe") == 1
        assert lk.distance("caf\u00e9", "cafe") == 1

    def test_cjk(self):
        assert lk.distance("東京都", "京都") == 1
        assert lk.partial_distance("京都", "東京都庁") == 0

    def test_mixed_scripts(self):
        assert lk.distance("abc日本", "abc日本") == 0
        assert lk.distance("Привет", "Привед") == 1


class TestWhitespace:
    def test_spaces_are_characters(self):
        assert lk.distance("a b", "ab") == 1
        assert lk.distance(" ", "") == 1

    def test_control_characters(self):
        assert lk.distance("a\tb", "a\nb") == 1
        assert lk.distance("\x00", "\x00") == 0


class TestSkewedLengths:
    """Very short against very long inputs."""

    def test_single_char_in_long_string(self):
        assert lk.partial_distance("z", "a" * 300 + "z") == 0
        assert lk.partial_distance("z", "a" * 300) == 1

    def test_full_distance_is_length_difference(self):
        long = "x" * 200
        assert lk.distance("x", long) == 199
        assert lk.similarity("x", long) == 1
        assert lk.normalized_distance("x", long) == pytest.approx(199 / 200)

    def test_partial_scores_on_skewed_input(self):
        long = "the quick brown fox jumps over the lazy dog"
        assert lk.partial_distance("lazy", long) == 0
        assert lk.partial_distance("lasy", long) == 1
        assert lk.normalized_partial_similarity("lasy", long) == 0.75
