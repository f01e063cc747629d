"""Partitioning, rotation, shuffling and reversal of sequences."""

from __future__ import annotations

import bisect
import random
import string
from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T", bound=Any)


def partition(values: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the values with those matching ``predicate`` placed first."""
    items = list(values)
    matching = [item for item in items if predicate(item)]
    rest = [item for item in items if not predicate(item)]
    return matching + rest


def partition_point(values: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """Return the index of the first value of a partitioned sequence failing ``predicate``.

    The sequence must already be partitioned by ``predicate``.
    """
    return bisect.bisect_left(values, True, key=lambda item: not predicate(item))


def _normalise(index: int, length: int) -> int:
    if index < 0:
        index += length
    if not 0 <= index <= length:
        raise IndexError("rotation point out of range")
    return index


def rotate(values: Sequence[T], middle: int) -> list[T]:
    """Return the values rotated so that ``values[middle]`` comes first.

    A negative ``middle`` counts from the end, as in Python indexing.
    """
    items = list(values)
    middle = _normalise(middle, len(items))
    return items[middle:] + items[:middle]


def rotate_range(values: Sequence[T], first: int, middle: int) -> list[T]:
    """Rotate ``values[first:]`` so that ``values[middle]`` lands at ``first``."""
    items = list(values)
    first = _normalise(first, len(items))
    middle = _normalise(middle, len(items))
    if middle < first:
        raise IndexError("rotation point precedes the start of the range")
    return items[:first] + items[middle:] + items[first:middle]


def shuffled(values: Iterable[T], seed: int = 0) -> list[T]:
    """Return a copy of the values shuffled by a generator seeded with ``seed``."""
    items = list(values)
    random.Random(seed).shuffle(items)
    return items


def reversed_alphabet() -> list[str]:
    """Return the lowercase letters from ``z`` down to ``a``."""
    return list(reversed(string.ascii_lowercase))