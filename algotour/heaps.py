"""Max-heap operations over plain lists."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

T = TypeVar("T", bound=Any)


def _sift_down(heap: list, root: int, end: int) -> None:
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and heap[child] < heap[child + 1]:
            child += 1
        if heap[root] < heap[child]:
            heap[root], heap[child] = heap[child], heap[root]
            root = child
        else:
            return


def _sift_up(heap: list, pos: int) -> None:
    while pos > 0:
        parent = (pos - 1) // 2
        if heap[parent] < heap[pos]:
            heap[parent], heap[pos] = heap[pos], heap[parent]
            pos = parent
        else:
            return


def is_heap(values: Iterable[T]) -> bool:
    """Return True if the sequence is ordered as a max-heap."""
    items = list(values)
    return not any(items[(i - 1) // 2] < item for i, item in enumerate(items) if i)


def make_heap(values: Iterable[T]) -> list[T]:
    """Return a new list holding the values arranged as a max-heap."""
    heap = list(values)
    for root in reversed(range(len(heap) // 2)):
        _sift_down(heap, root, len(heap))
    return heap


def push_heap(heap: Iterable[T], values: Iterable[T]) -> list[T]:
    """Return a new heap with ``values`` added to ``heap``."""
    result = list(heap)
    for value in values:
        result.append(value)
        _sift_up(result, len(result) - 1)
    return result


def pop_heap(heap: Iterable[T]) -> tuple[list[T], T]:
    """Remove the largest value; return the remaining heap and that value."""
    result = list(heap)
    if not result:
        raise IndexError("pop from an empty heap")
    top = result[0]
    last = result.pop()
    if result:
        result[0] = last
        _sift_down(result, 0, len(result))
    return result, top


def sort_heap(heap: Iterable[T]) -> list[T]:
    """Turn a max-heap into an ascending list."""
    result = list(heap)
    if not is_heap(result):
        raise ValueError("input is not a max-heap")
    for end in reversed(range(1, len(result))):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result