# algotour

A walk through classic sequence algorithms: heaps, sorting, partitioning,
permutations, numeric scans and queries. A teacher's set of student exam
scores serves as the running example.

Requires Python 3.10 or later and has no third-party dependencies.

## Installation

```
pip install .
```

## Running the tour

```
algotour
```

This prints every stop of the tour in turn, grouped under headings:

- **Province of Heaps**: all student grades, then a max-heap of every score,
  the heap after adding one more student's scores, and the heap after
  removing its highest score.
- **Shore of Sorting**: the remaining scores sorted, the lowest 15% of all
  scores, the ten scores below the 10th smallest, and a merge of two sorted
  runs.
- **Region of partitioning**: a partition around `< 4` and its partition
  point.
- **Land of Permutations**: rotations, a seeded shuffle and the reversed
  alphabet.
- **Secret Runes**: stable sorting of score cards and sortedness checks.
- **Land of Queries**: averages, running products, exclusive scans, a
  discounted total, adjacent differences, a random sample, `all`/`any`/`none`
  checks, equality, permutation and lexicographic comparison, mismatch,
  finds, searches and extremes.

The command takes no options other than `-h`/`--help`. The sample step draws
from an unseeded generator, so its three numbers change from run to run;
everything else in the report is the same each time.

## Using the library

The modules can also be used on their own:

```python
from algotour.grades import get_scores, flat_scores
from algotour.heaps import make_heap, pop_heap
from algotour.sorting import lowest_fraction, nth_smallest
from algotour.queries import search, minmax_element

scores = flat_scores(get_scores())
heap = make_heap(scores)
rest, highest = pop_heap(heap)

print(lowest_fraction(scores, 0.15))
print(nth_smallest(scores, 10))          # NthElement(value=..., below=[...])
print(search([1, 2, 3, 4, 5, 6, 3, 4, 5], [3, 4, 5]))   # 2
print(minmax_element([1, 2, 3, 4, 5, 6, 3, 4, 5]))      # (0, 5)
```

Functions return new lists and leave their inputs untouched. Searches return
an index, or `None` when nothing is found.

### Modules

- `algotour.grades`: the frozen dataclasses `CourseScore` and
  `StudentGrades` (each with `format()`), `flat_scores`, `get_scores` (the
  sample data set), `john_doe_scores` and `format_all`.
- `algotour.heaps`: max-heap operations `make_heap`, `push_heap`,
  `pop_heap` (returns the remaining heap and the removed value; raises
  `IndexError` on an empty heap), `sort_heap` (raises `ValueError` if the
  input is not a max-heap) and `is_heap`.
- `algotour.sorting`: `sort_values`, `lowest_fraction` (fraction between 0
  and 1, count truncated), `nth_smallest` (returns an `NthElement` of the
  value and the values below it) and `inplace_merge` (both runs must be
  sorted).
- `algotour.permutations`: `partition`, `partition_point`, `rotate`,
  `rotate_range` (negative positions count from the end), `shuffled`
  (seeded, default seed 0) and `reversed_alphabet`.
- `algotour.runes`: the `ScoreCard` dataclass, `sample_cards`,
  `stable_sort_by_score`, `is_sorted_by_score` and `sorted_until`.
- `algotour.numeric`: the `Product` dataclass, `average_score`,
  `partial_products`, `inclusive_scan`, `exclusive_scan`,
  `discounted_total` and `adjacent_difference`.
- `algotour.queries`: `sample` (order-preserving, optional
  `random.Random`), `is_permutation`, `lexicographically_less`, `mismatch`,
  `find_index`, `adjacent_find`, `equal_range`, `search`, `find_end`,
  `find_first_of`, `max_element`, `min_element` and `minmax_element` (the
  last three return indices and raise `ValueError` on empty input).
- `algotour.cli`: `render_tour()` returns the whole report as a string;
  `main()` prints it.

## What it does not do

There are no functions for stepping to the next or previous permutation;
the tour leaves numbers 13 and 14 unused for them. The package also has no
count-by-value query. The report is printed as plain text only: there is no
file output, no other format and no way to choose which steps run.

## Tests

```
pip install ".[test]"
pytest
```