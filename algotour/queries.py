"""Queries over sequences: sampling, comparisons, searches and extremes."""

from __future__ import annotations

import bisect
import random
from collections import Counter
from itertools import pairwise
from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T", bound=Any)


def sample(
    values: Iterable[T], k: int, rng: random.Random | None = None
) -> list[T]:
    """Pick ``k`` values at random, keeping their relative order.

    When fewer than ``k`` values are available, all of them are returned.
    """
    if k < 0:
        raise ValueError("sample size must not be negative")
    items = list(values)
    rng = rng if rng is not None else random.Random()
    chosen: list[T] = []
    needed = min(k, len(items))
    remaining = len(items)
    for item in items:
        if needed == 0:
            break
        if rng.randrange(remaining) < needed:
            chosen.append(item)
            needed -= 1
        remaining -= 1
    return chosen


def is_permutation(first: Iterable[T], second: Iterable[T]) -> bool:
    """Return True if both collections hold the same values, in any order."""
    return Counter(first) == Counter(second)


def lexicographically_less(first: Iterable[T], second: Iterable[T]) -> bool:
    """Return True if ``first`` orders strictly before ``second``."""
    return tuple(first) < tuple(second)


def mismatch(first: Sequence[T], second: Sequence[T]) -> int | None:
    """Return the index where the sequences first differ, or None if they are equal.

    If one sequence is a proper prefix of the other, the shorter one's length
    is returned.
    """
    for index, (a, b) in enumerate(zip(first, second)):
        if a != b:
            return index
    if len(first) == len(second):
        return None
    return min(len(first), len(second))


def find_index(values: Iterable[T], target: T) -> int | None:
    """Return the index of the first value equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def adjacent_find(values: Iterable[T]) -> int | None:
    """Return the index of the first of two equal neighbours, or None."""
    return next(
        (i for i, (a, b) in enumerate(pairwise(values)) if a == b), None
    )


def equal_range(values: Sequence[T], target: T) -> tuple[int, int]:
    """Return ``(start, stop)`` of the run equal to ``target`` in a sorted sequence."""
    return (
        bisect.bisect_left(values, target),
        bisect.bisect_right(values, target),
    )


def _matches_at(values: Sequence[T], pattern: Sequence[T], start: int) -> bool:
    return all(values[start + offset] == item for offset, item in enumerate(pattern))


def search(values: Sequence[T], pattern: Sequence[T]) -> int | None:
    """Return the index of the first occurrence of ``pattern``, or None.

    An empty pattern is found at index 0.
    """
    last_start = len(values) - len(pattern)
    return next(
        (i for i in range(last_start + 1) if _matches_at(values, pattern, i)), None
    )


def find_end(values: Sequence[T], pattern: Sequence[T]) -> int | None:
    """Return the index of the last occurrence of ``pattern``, or None.

    An empty pattern is never found.
    """
    if not pattern:
        return None
    last_start = len(values) - len(pattern)
    return next(
        (
            i
            for i in reversed(range(last_start + 1))
            if _matches_at(values, pattern, i)
        ),
        None,
    )


def find_first_of(values: Iterable[T], candidates: Iterable[T]) -> int | None:
    """Return the index of the first value that is among ``candidates``, or None."""
    wanted = list(candidates)
    return next((i for i, value in enumerate(values) if value in wanted), None)


def _require_items(values: Iterable[T]) -> list[T]:
    items = list(values)
    if not items:
        raise ValueError("sequence is empty")
    return items


def max_element(values: Iterable[T]) -> int:
    """Return the index of the first largest value."""
    items = _require_items(values)
    best = 0
    for index, item in enumerate(items):
        if items[best] < item:
            best = index
    return best


def min_element(values: Iterable[T]) -> int:
    """Return the index of the first smallest value."""
    items = _require_items(values)
    best = 0
    for index, item in enumerate(items):
        if item < items[best]:
            best = index
    return best


def minmax_element(values: Iterable[T]) -> tuple[int, int]:
    """Return the indices of the first smallest and the last largest value."""
    items = _require_items(values)
    low = high = 0
    for index, item in enumerate(items):
        if item < items[low]:
            low = index
        if not item < items[high]:
            high = index
    return low, high