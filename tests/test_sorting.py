import pytest
from hypothesis import given
from hypothesis import strategies as st

from algotour.grades import flat_scores, get_scores
from algotour.sorting import inplace_merge, lowest_fraction, nth_smallest, sort_values

int_lists = st.lists(st.integers(-1000, 1000))


def test_sort_grades():
    scores = flat_scores(get_scores())
    result = sort_values(scores)
    assert result == sorted(scores)
    assert result[0] == min(scores)


def test_lowest_fifteen_percent():
    scores = flat_scores(get_scores())
    lowest = lowest_fraction(scores, 0.15)
    assert len(lowest) == int(len(scores) * 0.15)
    assert lowest == sorted(scores)[: len(lowest)]


def test_lowest_fraction_rejects_bad_fraction():
    with pytest.raises(ValueError):
        lowest_fraction([1, 2], 1.5)


def test_nth_element_of_grades():
    scores = flat_scores(get_scores())
    result = nth_smallest(scores, 10)
    ordered = sorted(scores)
    assert result.value == ordered[10]
    assert len(result.below) == 10
    assert all(v <= result.value for v in result.below)


def test_nth_smallest_out_of_range():
    with pytest.raises(IndexError):
        nth_smallest([1, 2, 3], 3)
    with pytest.raises(IndexError):
        nth_smallest([1, 2, 3], -1)


def test_inplace_merge_example():
    data = [0, 2, 4, 5, 6, 1, 3, 5, 7]
    assert inplace_merge(data, 5) == sorted(data)


def test_inplace_merge_rejects_unsorted_run():
    with pytest.raises(ValueError):
        inplace_merge([3, 1, 2], 2)


def test_inplace_merge_bad_middle():
    with pytest.raises(ValueError):
        inplace_merge([1, 2], 5)


@given(int_lists, int_lists)
def test_inplace_merge_property(first, second):
    a, b = sorted(first), sorted(second)
    assert inplace_merge(a + b, len(a)) == sorted(a + b)


@given(int_lists, st.floats(0.0, 1.0))
def test_lowest_fraction_property(values, fraction):
    result = lowest_fraction(values, fraction)
    assert result == sorted(values)[: int(len(values) * fraction)]


@given(int_lists.filter(bool), st.data())
def test_nth_smallest_property(values, data):
    n = data.draw(st.integers(0, len(values) - 1))
    result = nth_smallest(values, n)
    assert result.value == sorted(values)[n]
    assert sorted(result.below) == sorted(values)[:n]