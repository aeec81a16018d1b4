"""Trie-backed word set for exact membership checks, plus the words-file loader."""

from __future__ import annotations

import logging
from pathlib import Path

from typocheck.constants import DEFAULT_WORDS_FILE

log = logging.getLogger("typocheck")


class VocabularyUnavailable(Exception):
    """The words file could not be read or contained no words."""


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class PrefixSet:
    """Trie of words keyed by code point.

    Each edge is one element of a Python ``str``, so a character such as
    ``é`` or ``ß`` is a single edge no matter how many bytes it takes in
    UTF-8.  There is no removal; the set is built once and then only read.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._word_count = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @property
    def word_count(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._word_count


def load_words(path: str | Path) -> list[str]:
    """Read words from a file (one word per line).

    Blank lines are skipped; order and duplicates are kept as in the file.
    Raises VocabularyUnavailable if the file can't be read or is empty.
    """
    words: list[str] = []
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word:
                    words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise VocabularyUnavailable(f"cannot read words from {path}: {e}") from e

    if not words:
        raise VocabularyUnavailable(f"no words found in {path}")

    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def default_words_path() -> Path:
    """Locate the words file: ./words.txt first, then the word list bundled with the package."""
    data_dir = Path(__file__).resolve().parent / "data"
    for path in (Path.cwd() / DEFAULT_WORDS_FILE, data_dir / DEFAULT_WORDS_FILE):
        if path.exists():
            return path
    raise VocabularyUnavailable(
        f"Dictionary not found. Place a word list at ./{DEFAULT_WORDS_FILE} "
        f"or {data_dir / DEFAULT_WORDS_FILE}"
    )
