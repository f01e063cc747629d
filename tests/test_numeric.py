import math
from itertools import accumulate

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algotour.numeric import (
    Product,
    adjacent_difference,
    average_score,
    discounted_total,
    exclusive_scan,
    inclusive_scan,
    partial_products,
)
from algotour.runes import sample_cards

ints = st.lists(st.integers(-100, 100))


def score(card):
    return card.score


def test_average_score_of_sample_cards():
    assert average_score(sample_cards()) == pytest.approx(1.25)


def test_average_score_empty_raises():
    with pytest.raises(ValueError):
        average_score([])


def test_partial_products_of_source_data():
    assert partial_products([2, 1, 2, 0]) == [2, 2, 4, 0]


@given(ints)
def test_partial_products_prefixes(values):
    result = partial_products(values)
    assert len(result) == len(values)
    if values:
        assert result[-1] == math.prod(values)


def test_inclusive_scan_with_key_ends_in_total():
    cards = sample_cards()
    result = inclusive_scan(cards, score)
    assert result[-1] == sum(card.score for card in cards)
    assert len(result) == len(cards)


def test_exclusive_scan_starts_with_initial():
    cards = sample_cards()
    result = exclusive_scan(cards, 0, score)
    assert result[0] == 0
    assert len(result) == len(cards)


def test_exclusive_scan_empty():
    assert exclusive_scan([], 7) == []


@given(ints, st.integers(-10, 10))
def test_exclusive_and_inclusive_scan_agree(values, initial):
    exclusive = exclusive_scan(values, initial)
    inclusive = inclusive_scan(values)
    for excl, incl, value in zip(exclusive, inclusive, values):
        assert excl + value == incl + initial


def test_discounted_total_of_source_example():
    products = [
        Product("Milk", 2),
        Product("Cheese", 2),
        Product("Water", 1),
        Product("Coffee", 0.5),
    ]
    assert discounted_total(products, [1, 0.5, 0.25, 0.125]) == pytest.approx(3.3125)


def test_discounted_total_without_discount_is_sum_of_prices():
    products = [Product("Milk", 2), Product("Water", 1), Product("Coffee", 0.5)]
    assert discounted_total(products, [1, 1, 1]) == pytest.approx(3.5)


def test_discounted_total_needs_enough_discounts():
    with pytest.raises(ValueError):
        discounted_total([Product("Milk", 2), Product("Water", 1)], [1])


def test_adjacent_difference_empty():
    assert adjacent_difference([]) == []


@given(ints)
def test_adjacent_difference_round_trip(values):
    result = adjacent_difference(values)
    assert len(result) == len(values)
    assert list(accumulate(result)) == values


def test_adjacent_difference_of_consecutive_integers_is_constant():
    result = adjacent_difference([1, 2, 3, 4, 5, 6])
    assert set(result) == {1}