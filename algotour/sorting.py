"""Sorting helpers: full sort, partial sort, nth element and merging."""

from __future__ import annotations

import heapq
from typing import Any, Iterable, NamedTuple, Sequence, TypeVar

T = TypeVar("T", bound=Any)


class NthElement(NamedTuple):
    """The value at a sorted position and the values that come before it."""

    value: Any
    below: list


def _is_sorted(values: Sequence) -> bool:
    return not any(b < a for a, b in zip(values, values[1:]))


def sort_values(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order."""
    return sorted(values)


def lowest_fraction(values: Iterable[T], fraction: float) -> list[T]:
    """Return, sorted, the lowest ``fraction`` of the values (count truncated)."""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError("fraction must be between 0 and 1")
    items = list(values)
    return heapq.nsmallest(int(len(items) * fraction), items)


def nth_smallest(values: Iterable[T], n: int) -> NthElement:
    """Return the value at sorted position ``n`` and the ``n`` values below it."""
    items = list(values)
    if not 0 <= n < len(items):
        raise IndexError("position out of range")
    lowest = heapq.nsmallest(n + 1, items)
    return NthElement(lowest[n], lowest[:n])


def inplace_merge(values: Sequence[T], middle: int) -> list[T]:
    """Merge the sorted runs ``values[:middle]`` and ``values[middle:]``."""
    if not 0 <= middle <= len(values):
        raise ValueError("middle out of range")
    left, right = list(values[:middle]), list(values[middle:])
    if not (_is_sorted(left) and _is_sorted(right)):
        raise ValueError("both runs must be sorted")
    return list(heapq.merge(left, right))