"""Rank vocabulary words by edit distance to a misspelled query."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from typocheck.constants import MAX_DISTANCE, MAX_SUGGESTIONS
from typocheck.distance import levenshtein


@dataclass(frozen=True)
class Suggestion:
    """A candidate word paired with its distance to the query."""
    word: str
    distance: int


def rank_candidates(query: str, vocabulary: Iterable[str],
                    max_distance: int = MAX_DISTANCE) -> list[Suggestion]:
    """Candidates within *max_distance* of *query*, closest first.

    Each distance is computed once.  sorted() is stable, so words at the
    same distance keep their vocabulary order.
    """
    candidates: list[Suggestion] = []
    for word in vocabulary:
        d = levenshtein(query, word)
        if d <= max_distance:
            candidates.append(Suggestion(word, d))
    return sorted(candidates, key=lambda s: s.distance)


def suggest_words(query: str, vocabulary: Iterable[str],
                  max_distance: int = MAX_DISTANCE,
                  max_suggestions: int = MAX_SUGGESTIONS) -> list[str]:
    """Return up to *max_suggestions* vocabulary words within *max_distance* edits.

    Filtering happens before truncation, so the cap can only drop
    candidates that are at least as far as every word it keeps.
    """
    if max_suggestions <= 0:
        return []
    ranked = rank_candidates(query, vocabulary, max_distance)
    return [s.word for s in ranked[:max_suggestions]]


def best_suggestion(query: str, suggestions: Sequence[str]) -> str | None:
    """Pick the suggestion closest to *query*. Ties go to the earliest one."""
    if not suggestions:
        return None
    best = suggestions[0]
    best_distance = levenshtein(query, best)
    for s in suggestions[1:]:
        d = levenshtein(query, s)
        if d < best_distance:
            best = s
            best_distance = d
    return best
