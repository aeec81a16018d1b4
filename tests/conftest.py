"""Shared fixtures for spell checker tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from typocheck.checker import SpellChecker
from typocheck.dictionary import PrefixSet


@pytest.fixture
def small_vocabulary() -> list[str]:
    """Hand-picked words in a fixed, unsorted order. No file I/O."""
    return [
        "hello", "help", "held", "world",
        "cat", "cap", "bat", "car", "cart",
        "spell", "spelt", "smell",
        "café", "straße", "naïve",
        "a", "an", "and",
    ]


@pytest.fixture
def small_prefix_set(small_vocabulary: list[str]) -> PrefixSet:
    ps = PrefixSet()
    for w in small_vocabulary:
        ps.insert(w)
    return ps


@pytest.fixture
def checker(small_vocabulary: list[str]) -> SpellChecker:
    return SpellChecker(small_vocabulary)


@pytest.fixture
def words_file(tmp_path: Path, small_vocabulary: list[str]) -> Path:
    """The small vocabulary written one word per line, with some noise."""
    path = tmp_path / "words.txt"
    lines = ["  " + small_vocabulary[0] + "  ", ""] + small_vocabulary[1:] + ["", "   "]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
