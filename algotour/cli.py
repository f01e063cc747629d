"""A guided tour of the sequence algorithms, printed as one report."""

from __future__ import annotations

import argparse
import random
from itertools import count
from typing import Callable, Iterable, Sequence

from algotour.grades import flat_scores, format_all, get_scores, john_doe_scores
from algotour.heaps import make_heap, pop_heap, push_heap
from algotour.numeric import (
    Product,
    adjacent_difference,
    average_score,
    discounted_total,
    exclusive_scan,
    partial_products,
)
from algotour.permutations import (
    partition,
    partition_point,
    reversed_alphabet,
    rotate,
    rotate_range,
    shuffled,
)
from algotour.queries import (
    adjacent_find,
    equal_range,
    find_end,
    find_first_of,
    find_index,
    is_permutation,
    lexicographically_less,
    max_element,
    min_element,
    minmax_element,
    mismatch,
    sample,
    search,
)
from algotour.runes import (
    ScoreCard,
    is_sorted_by_score,
    sample_cards,
    sorted_until,
    stable_sort_by_score,
)
from algotour.sorting import inplace_merge, lowest_fraction, nth_smallest, sort_values


def _floats(values: Iterable[float]) -> str:
    return "".join(f"{value:.2f}," for value in values)


def _ints(values: Iterable[object]) -> str:
    return "".join(f"{value}," for value in values)


def _lines(values: Iterable[object]) -> str:
    return "".join(f"{value}\n" for value in values)


def _heading(title: str, underline: str) -> str:
    return f"{title}\n{underline}\n"


def _card(card: ScoreCard) -> str:
    return f"{card.name}:{card.score}"


class _HeapSteps:
    """The heap steps share one evolving heap of scores."""

    def __init__(self) -> None:
        self.heap: list[float] = []

    def make(self) -> str:
        self.heap = make_heap(flat_scores(get_scores()))
        return "Data in heap format:\n" + _floats(self.heap)

    def push(self) -> str:
        self.heap = push_heap(self.heap, flat_scores([john_doe_scores()]))
        return "Adding John Doe's Scores in the heap:\n" + _floats(self.heap)

    def pop(self) -> str:
        self.heap, top = pop_heap(self.heap)
        return "Removing the highest score from the heap:\n" + _floats([*self.heap, top])

    def sort(self) -> str:
        return "All scores sorted:\n" + _floats(sort_values(self.heap))


def _partial_sort() -> str:
    lowest = lowest_fraction(flat_scores(get_scores()), 0.15)
    return "Lowest 15% of scores:\n" + _floats(lowest)


def _nth_element() -> str:
    failing = nth_smallest(flat_scores(get_scores()), 10).below
    return "Failing Scores:\n" + _floats(failing)


def _inplace_merge() -> str:
    return _ints(inplace_merge([0, 2, 4, 5, 6, 1, 3, 5, 7], 5))


def _partition_point() -> str:
    def less_than_4(value: int) -> bool:
        return value < 4

    data = partition([0, 2, 4, 5, 6, 1, 3, 5, 7], less_than_4)
    point = partition_point(data, less_than_4)
    return _ints(data) + f"\nPartition is at {point}\n"


def _rotate() -> str:
    data = rotate([0, 2, 4, 5, 6, 1, 3, 5, 7], -1)
    moved = rotate_range(data, 1, -2)
    return _ints(data) + "\n" + _ints(moved)


def _shuffle() -> str:
    return _ints(shuffled(range(9), 0))


def _reverse() -> str:
    return _ints(reversed_alphabet())


def _stable_sort() -> str:
    return "".join(f"{_card(card)}," for card in stable_sort_by_score(sample_cards()))


def _is_sorted() -> str:
    cards = sample_cards()

    def answer(items: Sequence[ScoreCard]) -> str:
        return "Yes" if is_sorted_by_score(items) else "No"

    before = answer(cards)
    after = answer(stable_sort_by_score(cards))
    return (
        f"before sorting: is_sorted? {before}\n"
        f"after sorting: is_sorted? {after}\n"
    )


def _is_sorted_until() -> str:
    cards = [
        ScoreCard("Bob", 1),
        ScoreCard("Mallory", 1),
        ScoreCard("Alice", 2),
        ScoreCard("carol", 0),
    ]

    def answer(items: Sequence[ScoreCard]) -> str:
        index = sorted_until(items)
        return _card(items[index]) if index < len(items) else "All the way"

    before = answer(cards)
    after = answer(stable_sort_by_score(cards))
    return (
        f"before sorting: is_sorted_until? {before}\n"
        f"after sorting: is_sorted_until? {after}\n"
    )


def _accumulate() -> str:
    average = average_score(sample_cards())
    return "".join(
        f"average score{how} is: {average:.2f}\n"
        for how in ("", " (using reduce)", " (using transform_reduce)")
    )


def _partial_sum() -> str:
    return "partal sum: \n" + _lines(partial_products([2, 1, 2, 0]))


def _exclusive_scan() -> str:
    running = exclusive_scan(sample_cards(), 0, key=lambda card: card.score)
    return "partal sum: \n" + _lines(running)


def _discounted_total() -> str:
    products = [
        Product("Milk", 2.0),
        Product("Cheese", 2.0),
        Product("Water", 1.0),
        Product("Coffee", 0.5),
    ]
    total = discounted_total(products, [1.0, 0.5, 0.25, 0.125])
    return f"Total cost after dicount: {total:.2f}\n"


def _adjacent_difference() -> str:
    return "adjacent difference: \n" + _lines(adjacent_difference([1, 2, 3, 4, 5, 6]))


def _sample() -> str:
    return "sample: \n" + _lines(sample([1, 2, 3, 4, 5, 6], 3, random.Random()))


_SIX = (1, 2, 3, 4, 5, 6)


def _all_of() -> str:
    def report(limit: int) -> str:
        if all(value > limit for value in _SIX):
            return f"All are more than {limit}\n"
        return f"Not all are more than {limit}\n"

    return "all_of: \n" + report(0) + report(2)


def _any_of() -> str:
    def report(divisor: int) -> str:
        if any(value % divisor == 0 for value in _SIX):
            return f"At least one is divisible by {divisor}\n"
        return f"None are divisible by {divisor}\n"

    return "any_of: \n" + report(3) + report(10)


def _none_of() -> str:
    def report(limit: int) -> str:
        if not any(value > limit for value in _SIX):
            return f"None are larger than {limit}\n"
        return f"At leaset one is larger than {limit}\n"

    return "none_of: \n" + report(5) + report(10)


def _equal() -> str:
    first = list(_SIX)
    second = list(_SIX)

    def report() -> str:
        return "Collections are equal\n" if first == second else "Collections are not equal\n"

    before = report()
    second[2] = 100
    return "equal: \n" + before + report()


def _is_permutation() -> str:
    if is_permutation([1, 6, 3, 4, 5, 2], list(_SIX)):
        verdict = "Collections are a permutation of one another\n"
    else:
        verdict = "Collections are not a permutation of one another\n"
    return "equal: \n" + verdict


_JOHN = "Smith, John"
_JANE = "Smith, Jane"


def _lexicographical_compare() -> str:
    where = "before" if lexicographically_less(_JOHN, _JANE) else "after"
    return f"lexicographical_compare: \n{_JOHN} would show up {where} {_JANE}\n"


def _mismatch() -> str:
    index = mismatch(_JOHN, _JANE)
    text = "mismatch: \n"
    if index is None:
        index = len(_JOHN)
    text += (
        f"Strings deviate at {index}\n"
        f"First string difference: {_JOHN[index:]}\n"
        f"Second string difference: {_JANE[index:]}\n"
    )
    if mismatch(_JOHN, _JOHN) is None:
        text += "Strings match exactly."
    return text


def _find() -> str:
    data = list(_SIX)
    text = "find: \n"
    four = find_index(data, 4)
    if four is None:
        text += "No value above 4."
    else:
        text += f"First value 4 at index {four}\n"
    seven = find_index(data, 7)
    if seven is None:
        text += "No value above 7.\n"
    else:
        text += f"First value 4 at index {four}\n"
    return text


def _adjacent_find() -> str:
    data = list(_SIX)
    text = "adjacent_find: \n"
    index = adjacent_find(data)
    if index is None:
        text += "No adjacent values"
    else:
        text += f"Adjacent values found at {index} equal to: {data[index]}\n"
    data[4] = 4
    index = adjacent_find(data)
    if index is None:
        text += "No adjacent values"
    else:
        text += f"Adjacent values found at index {index} equal to: {data[index]}\n"
    return text


def _equal_range() -> str:
    data = [1, 2, 3, 3, 3, 3, 4, 5, 6]
    start, stop = equal_range(data, 3)
    text = "equal_range: \n"
    if stop == len(data):
        return text + "No adjacent values"
    return text + (
        f"The range equal to 3 starts at index {start} and ends at index: {stop}"
        f" with value: {data[stop]}\n"
    )


_NINE = (1, 2, 3, 4, 5, 6, 3, 4, 5)


def _search() -> str:
    index = search(_NINE, (3, 4, 5))
    if index is None:
        return "search: \nCouldn't find search vector\n"
    return f"search: \nSearch vector found at index {index}\n"


def _find_end() -> str:
    index = find_end(_NINE, (3, 4, 5))
    if index is None:
        return "find_end: \nCouldn't find search vector\n"
    return f"find_end: \nEnd of search vector found at index {index}\n"


def _find_first_of() -> str:
    index = find_first_of(_NINE, (4, 8, 2))
    if index is None:
        return "find_end: \nCouldn't find any element of the search vector in data\n"
    return f"find_end: \nFound element {_NINE[index]} at location {index}\n"


def _max_element() -> str:
    return f"find_end: \nLargest element in the array is {_NINE[max_element(_NINE)]}\n"


def _min_element() -> str:
    return f"find_end: \nSmallest element in the array is {_NINE[min_element(_NINE)]}\n"


def _max_min_element() -> str:
    low, high = minmax_element(_NINE)
    return (
        "max_min_element: \n"
        f"Largest element is {_NINE[high]}, the smallest element is {_NINE[low]}\n"
    )


def render_tour() -> str:
    """Run every step of the tour and return the full report."""
    numbers = count(1)
    parts: list[str] = []

    def step(title: str, run: Callable[[], str], *, colon: bool = False,
             end: str = "\n") -> None:
        parts.append(f"{next(numbers)}. {title}{':' if colon else ''}\n")
        parts.append(run() + end)

    heaps = _HeapSteps()

    parts.append(_heading("Province of Heaps:", "=================="))
    step("for_each", lambda: format_all(get_scores()), colon=True)
    step("make_heap", heaps.make, colon=True)
    step("push_heap", heaps.push, colon=True)
    step("pop_heap", heaps.pop, colon=True, end="")

    parts.append("\n" + _heading("Shore of Sorting:", "================="))
    step("sort", heaps.sort)
    step("partial_sort", _partial_sort)
    step("nth_element", _nth_element)
    step("inplace_merge", _inplace_merge)

    parts.append(_heading("Region of partitioning:", "======================"))
    step("partition_point", _partition_point)

    parts.append(_heading("Land of Permutations:", "===================="))
    step("rotate", _rotate)
    step("shuffle", _shuffle)
    # Two numbers are set aside for the permutation-stepping algorithms.
    next(numbers)
    next(numbers)
    step("reverse", _reverse)

    parts.append(_heading("Secret Runes:", "============"))
    parts.append("16. stable_*\n" + _stable_sort() + "\n")
    step("is_*", _is_sorted)
    step("is_*_until", _is_sorted_until)

    parts.append(_heading("Land of Queries:", "==============="))
    step("accumilate", _accumulate)
    step("partial_sum", _partial_sum)
    step("accumilate", _accumulate)
    step("transform_exclusive_scan", _exclusive_scan)
    step("discounted_sum", _discounted_total)
    step("adjacent_difference", _adjacent_difference)
    step("sample", _sample)
    step("all_of", _all_of)
    step("any_of", _any_of)
    step("none_of", _none_of)
    step("equal", _equal)
    step("is_permuatation", _is_permutation)
    step("lexicographical_compare", _lexicographical_compare)
    step("mismatch", _mismatch)
    step("find", _find)
    step("adjacent_find", _adjacent_find)
    step("equal_range", _equal_range)
    step("search", _search)
    step("find_end", _find_end)
    step("find_first_of", _find_first_of)
    step("max_element", _max_element)
    step("min_element", _min_element)
    step("max_min_element", _max_min_element)

    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tour of algorithms to standard output."""
    parser = argparse.ArgumentParser(
        prog="algotour", description="Print a guided tour of sequence algorithms."
    )
    parser.parse_args(argv)
    print(render_tour(), end="")
    return 0