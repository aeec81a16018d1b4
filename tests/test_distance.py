"""Unit tests for Levenshtein distance."""

from __future__ import annotations

import itertools

import pytest

from typocheck.distance import levenshtein

WORDS = ["", "a", "ab", "abc", "kitten", "sitting", "hello", "helo", "world", "café", "cafe"]


class TestKnownValues:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("flaw", "lawn", 2),
            ("helo", "hello", 1),
            ("helo", "help", 1),
            ("helo", "held", 1),
            ("helo", "hells", 2),
            ("helo", "world", 4),
            ("ab", "ac", 1),
            ("ab", "xyz", 3),
        ],
    )
    def test_distance(self, a: str, b: str, expected: int) -> None:
        assert levenshtein(a, b) == expected

    def test_identical(self) -> None:
        for w in WORDS:
            assert levenshtein(w, w) == 0

    def test_empty_side_is_length(self) -> None:
        for w in WORDS:
            assert levenshtein(w, "") == len(w)
            assert levenshtein("", w) == len(w)


class TestCodePoints:
    def test_accent_is_one_substitution(self) -> None:
        # Byte-wise this would be 2 ("é" is two UTF-8 bytes)
        assert levenshtein("café", "cafe") == 1

    def test_multibyte_insert(self) -> None:
        assert levenshtein("strae", "straße") == 1

    def test_cjk(self) -> None:
        assert levenshtein("日本語", "日本") == 1


class TestMetricProperties:
    def test_symmetry(self) -> None:
        for a, b in itertools.product(WORDS, repeat=2):
            assert levenshtein(a, b) == levenshtein(b, a)

    def test_zero_iff_equal(self) -> None:
        for a, b in itertools.product(WORDS, repeat=2):
            assert (levenshtein(a, b) == 0) == (a == b)

    def test_triangle_inequality(self) -> None:
        for a, b, c in itertools.product(WORDS, repeat=3):
            assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

    def test_bounded_by_longer_length(self) -> None:
        for a, b in itertools.product(WORDS, repeat=2):
            assert abs(len(a) - len(b)) <= levenshtein(a, b) <= max(len(a), len(b))
