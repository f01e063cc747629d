"""Stable sorting and sortedness checks on score cards."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from operator import attrgetter
from typing import Iterable, Sequence


@dataclass(frozen=True)
class ScoreCard:
    """A named score."""

    name: str
    score: int


_by_score = attrgetter("score")


def sample_cards() -> list[ScoreCard]:
    """Return the sample score cards; Bob and Alice share a score."""
    return [
        ScoreCard("Bob", 2),
        ScoreCard("Mallory", 1),
        ScoreCard("Alice", 2),
        ScoreCard("carol", 0),
    ]


def stable_sort_by_score(cards: Iterable[ScoreCard]) -> list[ScoreCard]:
    """Sort by ascending score, keeping the input order of equal scores."""
    return sorted(cards, key=_by_score)


def is_sorted_by_score(cards: Iterable[ScoreCard]) -> bool:
    """Return True if the scores never decrease."""
    return all(a.score <= b.score for a, b in pairwise(cards))


def sorted_until(cards: Sequence[ScoreCard]) -> int:
    """Return the index of the first card whose score breaks the ascending order.

    Returns ``len(cards)`` when the whole sequence is sorted.
    """
    for index, (previous, current) in enumerate(pairwise(cards), start=1):
        if current.score < previous.score:
            return index
    return len(cards)