"""Spell-check engine: trie membership first, edit-distance suggestions on a miss."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path

from typocheck.constants import MAX_DISTANCE, MAX_SUGGESTIONS
from typocheck.dictionary import PrefixSet, default_words_path, load_words
from typocheck.suggest import best_suggestion, suggest_words


@dataclass
class CheckResult:
    """Outcome of checking one word."""
    word: str
    known: bool
    suggestions: list[str] = field(default_factory=list)
    best: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_query(raw: str) -> str:
    """Trim and lowercase user input before it reaches the engine."""
    return raw.strip().lower()


def _check_limit(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class SpellChecker:
    """A PrefixSet plus the vocabulary list it was built from.

    The trie answers "is this a word?"; the list, kept in source order with
    any duplicates, is what suggestions are ranked from.  Both are filled
    once here and only read afterwards.
    """

    def __init__(self, words: Iterable[str],
                 max_distance: int = MAX_DISTANCE,
                 max_suggestions: int = MAX_SUGGESTIONS) -> None:
        self.max_distance = _check_limit("max_distance", max_distance)
        self.max_suggestions = _check_limit("max_suggestions", max_suggestions)
        self.prefix_set = PrefixSet()
        self.vocabulary: list[str] = []
        for word in words:
            self._require_str(word)
            self.prefix_set.insert(word)
            self.vocabulary.append(word)

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> SpellChecker:
        return cls(load_words(path), **kwargs)

    @staticmethod
    def _require_str(word: object) -> str:
        if not isinstance(word, str):
            raise TypeError(f"word must be a str, got {type(word).__name__}")
        return word

    @property
    def word_count(self) -> int:
        return self.prefix_set.word_count

    def is_known(self, word: str) -> bool:
        return self.prefix_set.contains(self._require_str(word))

    def suggest(self, word: str, max_distance: int | None = None,
                max_suggestions: int | None = None) -> list[str]:
        word = self._require_str(word)
        if max_distance is None:
            max_distance = self.max_distance
        if max_suggestions is None:
            max_suggestions = self.max_suggestions
        return suggest_words(
            word,
            self.vocabulary,
            _check_limit("max_distance", max_distance),
            _check_limit("max_suggestions", max_suggestions),
        )

    def check(self, word: str, max_distance: int | None = None,
              max_suggestions: int | None = None) -> CheckResult:
        """Report whether *word* is known; if not, attach ranked suggestions.

        The best pick is taken from the returned suggestion list.
        """
        if self.is_known(word):
            return CheckResult(word, known=True)
        suggestions = self.suggest(word, max_distance, max_suggestions)
        return CheckResult(
            word,
            known=False,
            suggestions=suggestions,
            best=best_suggestion(word, suggestions),
        )


def load_default_dictionary(**kwargs) -> SpellChecker:
    """Build a SpellChecker from ./words.txt or the bundled word list."""
    return SpellChecker.from_file(default_words_path(), **kwargs)
