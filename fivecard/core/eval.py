# fivecard/core/eval.py
"""
Classification of a five-card hand.

Every function here takes the five cards already sorted by descending game
value. The category predicates are checked in strict priority order and each
one explicitly rules out every category above it, so exactly one predicate
holds for any hand.
"""
from __future__ import annotations
from itertools import groupby
from typing import List, Sequence

from .cards import ACE_HIGH, Card
from .types import HandCategory

CARDS_HELD = 5
_WHEEL_FACE_VALUES = [1, 2, 3, 4, 5]


def sort_cards(cards: Sequence[Card]) -> List[Card]:
    """Return the cards ordered by descending game value. Suit never breaks ties."""
    return sorted(cards, key=lambda c: c.game_value, reverse=True)


def runs(cards: Sequence[Card]) -> List[List[Card]]:
    """Split sorted cards into maximal runs of equal game value."""
    return [list(g) for _, g in groupby(cards, key=lambda c: c.game_value)]


# ----- primitives -----
def has_ace_low_sequence(cards: Sequence[Card]) -> bool:
    """True for A,5,4,3,2 in any suits, the only straight where the ace plays low."""
    return sorted(c.face_value for c in cards) == _WHEEL_FACE_VALUES


def has_sequential_order(cards: Sequence[Card]) -> bool:
    """
    Check the cards step down by exactly one game value each, or form the
    ace-low wheel.
    """
    if all(cards[i].game_value == cards[i - 1].game_value - 1 for i in range(1, len(cards))):
        return True
    return has_ace_low_sequence(cards)


def has_all_same_suit(cards: Sequence[Card]) -> bool:
    return len({c.suit for c in cards}) == 1


def segment_match(cards: Sequence[Card], length: int) -> bool:
    """
    True iff some maximal run of equal game value has exactly ``length`` cards.

    A longer run never matches a shorter length, so a pair is not found inside
    three of a kind and three of a kind is not found inside four.
    """
    return any(len(run) == length for run in runs(cards))


def segment_sort(cards: Sequence[Card], length: int) -> List[Card]:
    """
    Bring the first run of exactly ``length`` matching cards to the front,
    followed by the remaining cards in their original descending order.

    Raises:
        ValueError: If no run of that exact length exists.
    """
    for run in runs(cards):
        if len(run) == length:
            rest = [c for c in cards if c.game_value != run[0].game_value]
            return run + rest
    raise ValueError(f"No run of exactly {length} cards in {' '.join(map(str, cards))}")


def pair_values(cards: Sequence[Card]) -> List[int]:
    """Game values of every run of exactly two cards, highest first."""
    return [run[0].game_value for run in runs(cards) if len(run) == 2]


def straight_high_value(cards: Sequence[Card]) -> int:
    """
    High card of a straight. The wheel's high card is the five, not the ace.
    """
    if has_ace_low_sequence(cards):
        return cards[1].game_value
    return cards[0].game_value


# ----- category predicates -----
def is_royal_flush(cards: Sequence[Card]) -> bool:
    return (cards[0].game_value == ACE_HIGH and has_sequential_order(cards)
            and has_all_same_suit(cards) and not has_ace_low_sequence(cards))


def is_straight_flush(cards: Sequence[Card]) -> bool:
    if is_royal_flush(cards):
        return False
    return has_sequential_order(cards) and has_all_same_suit(cards)


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return segment_match(cards, 4)


def is_full_house(cards: Sequence[Card]) -> bool:
    return segment_match(cards, 3) and segment_match(cards, 2)


def is_flush(cards: Sequence[Card]) -> bool:
    if is_straight_flush(cards) or is_royal_flush(cards):
        return False
    return has_all_same_suit(cards)


def is_straight(cards: Sequence[Card]) -> bool:
    if is_straight_flush(cards) or is_royal_flush(cards):
        return False
    return has_sequential_order(cards)


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    if is_full_house(cards):
        return False
    return segment_match(cards, 3)


def is_two_pair(cards: Sequence[Card]) -> bool:
    if is_full_house(cards) or is_four_of_a_kind(cards):
        return False
    return len(pair_values(cards)) == 2


def is_one_pair(cards: Sequence[Card]) -> bool:
    if is_two_pair(cards) or is_full_house(cards):
        return False
    return segment_match(cards, 2)


def is_high_card(cards: Sequence[Card]) -> bool:
    return not any(check(cards) for _, check in _PRIORITY[:-1])


_PRIORITY = [
    (HandCategory.ROYAL_FLUSH, is_royal_flush),
    (HandCategory.STRAIGHT_FLUSH, is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandCategory.FULL_HOUSE, is_full_house),
    (HandCategory.FLUSH, is_flush),
    (HandCategory.STRAIGHT, is_straight),
    (HandCategory.THREE_OF_A_KIND, is_three_of_a_kind),
    (HandCategory.TWO_PAIR, is_two_pair),
    (HandCategory.ONE_PAIR, is_one_pair),
    (HandCategory.HIGH_CARD, is_high_card),
]

PREDICATES = dict(_PRIORITY)


def classify(cards: Sequence[Card]) -> HandCategory:
    """
    Determine the unique category of five cards sorted by descending game value.

    Args:
        cards: Exactly five cards, as returned by :func:`sort_cards`.

    Returns:
        HandCategory: The highest category whose predicate holds.
    """
    assert len(cards) == CARDS_HELD, f"expected {CARDS_HELD} cards, got {len(cards)}"
    for category, check in _PRIORITY[:-1]:
        if check(cards):
            return category
    return HandCategory.HIGH_CARD


def is_busted_flush(cards: Sequence[Card]) -> bool:
    """Exactly four of the five cards share a suit."""
    suits = [c.suit for c in cards]
    return max(suits.count(s) for s in set(suits)) == len(cards) - 1
