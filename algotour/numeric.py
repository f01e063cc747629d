"""Numeric folds and scans: averages, running products, scans and differences."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from itertools import accumulate, pairwise
from typing import Any, Callable, Iterable, Sequence

from algotour.runes import ScoreCard


@dataclass(frozen=True)
class Product:
    """A product and its price."""

    name: str
    price: float


def _keyed(values: Iterable[Any], key: Callable[[Any], Any] | None) -> Iterable[Any]:
    return values if key is None else map(key, values)


def average_score(cards: Iterable[ScoreCard]) -> float:
    """Return the mean score of the cards."""
    scores = [card.score for card in cards]
    if not scores:
        raise ValueError("cannot average an empty collection")
    return sum(scores) / len(scores)


def partial_products(values: Iterable[Any]) -> list[Any]:
    """Return the running products of the values."""
    return list(accumulate(values, operator.mul))


def inclusive_scan(
    values: Iterable[Any], key: Callable[[Any], Any] | None = None
) -> list[Any]:
    """Return running sums of ``key(value)``, each including its own value."""
    return list(accumulate(_keyed(values, key)))


def exclusive_scan(
    values: Iterable[Any], initial: Any = 0, key: Callable[[Any], Any] | None = None
) -> list[Any]:
    """Return running sums of ``key(value)`` from ``initial``, each excluding its own value."""
    keyed = list(_keyed(values, key))
    return list(accumulate(keyed, initial=initial))[:-1]


def discounted_total(products: Sequence[Product], discounts: Sequence[float]) -> float:
    """Return the sum of each product's price times its matching discount factor."""
    if len(discounts) < len(products):
        raise ValueError("fewer discounts than products")
    return sum(
        (product.price * discount for product, discount in zip(products, discounts)),
        0.0,
    )


def adjacent_difference(values: Iterable[Any]) -> list[Any]:
    """Return the first value followed by the difference of each neighbouring pair."""
    items = list(values)
    if not items:
        return []
    return [items[0]] + [b - a for a, b in pairwise(items)]