# fivecard/core/score.py
"""
Scalar scoring of a classified five-card hand.

A score is the category's base (10^8 apart) plus a tie-break term built from
game values in base 15. Game values never exceed 14, so each base-15 digit
holds one card without carrying into the next, and the largest tie-break
(15^5 - 1) stays far below the 10^8 gap between categories.
"""
from __future__ import annotations
from typing import Sequence

from .cards import Card
from .eval import pair_values, runs, segment_sort, straight_high_value
from .types import HandCategory

EXPONENTIAL_BASE = 15


def positional_value(values: Sequence[int]) -> int:
    """Weight ``values`` as base-15 digits, most significant first."""
    total = 0
    for v in values:
        total = total * EXPONENTIAL_BASE + v
    return total


def tie_break(cards: Sequence[Card], category: HandCategory) -> int:
    """
    Tie-break term within ``category`` for cards sorted by descending game value.
    """
    if category is HandCategory.ROYAL_FLUSH:
        return 0
    if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
        return straight_high_value(cards)
    if category is HandCategory.FOUR_OF_A_KIND:
        quad = segment_sort(cards, 4)
        return positional_value([quad[0].game_value, quad[4].game_value])
    if category in (HandCategory.FULL_HOUSE, HandCategory.THREE_OF_A_KIND):
        # one deck cannot hold two hands with the same triple
        return segment_sort(cards, 3)[0].game_value
    if category is HandCategory.TWO_PAIR:
        high_pair, low_pair = pair_values(cards)
        kicker = next(run[0].game_value for run in runs(cards) if len(run) == 1)
        return positional_value([high_pair, low_pair, kicker])
    if category is HandCategory.ONE_PAIR:
        paired = segment_sort(cards, 2)
        return positional_value([c.game_value for c in paired[1:]])
    # flush and high card
    return positional_value([c.game_value for c in cards])


def score_hand(cards: Sequence[Card], category: HandCategory) -> int:
    """
    Score five cards already sorted and classified.

    Args:
        cards: Five cards sorted by descending game value.
        category: The hand's category as returned by ``classify``.

    Returns:
        int: A score that orders every pair of hands correctly and ignores suit.

    Example:
        - Input: 4♦ 4♣ 3♠ 3♥ 2♦, TWO_PAIR
        - Output: 300000947  (3×10^8 + 4×225 + 3×15 + 2)
    """
    return category.base_score + tie_break(cards, category)
