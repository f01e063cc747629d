from hypothesis import given
from hypothesis import strategies as st

from algotour.runes import (
    ScoreCard,
    is_sorted_by_score,
    sample_cards,
    sorted_until,
    stable_sort_by_score,
)

cards_strategy = st.lists(
    st.builds(ScoreCard, st.text(max_size=5), st.integers(-5, 5))
)


def test_sample_cards_sorted_keeps_bob_before_alice():
    result = stable_sort_by_score(sample_cards())
    assert [card.name for card in result] == ["carol", "Mallory", "Bob", "Alice"]


def test_sample_cards_sortedness_before_and_after():
    cards = sample_cards()
    assert not is_sorted_by_score(cards)
    assert is_sorted_by_score(stable_sort_by_score(cards))


def test_sorted_until_points_at_first_break():
    cards = [
        ScoreCard("Bob", 1),
        ScoreCard("Mallory", 1),
        ScoreCard("Alice", 2),
        ScoreCard("carol", 0),
    ]
    index = sorted_until(cards)
    assert cards[index].name == "carol"
    assert sorted_until(stable_sort_by_score(cards)) == len(cards)


def test_sorted_until_empty():
    assert sorted_until([]) == 0


def test_stable_sort_does_not_mutate_input():
    cards = sample_cards()
    stable_sort_by_score(cards)
    assert cards == sample_cards()


@given(cards_strategy)
def test_stable_sort_keeps_relative_order_of_equal_scores(cards):
    result = stable_sort_by_score(cards)
    assert is_sorted_by_score(result)
    for score in {card.score for card in cards}:
        assert [c for c in result if c.score == score] == [
            c for c in cards if c.score == score
        ]


@given(cards_strategy)
def test_sorted_until_agrees_with_is_sorted(cards):
    index = sorted_until(cards)
    assert is_sorted_by_score(cards[:index])
    assert is_sorted_by_score(cards) == (index == len(cards))