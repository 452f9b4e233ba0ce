# fivecard/core/types.py
from __future__ import annotations
from enum import IntEnum

CATEGORY_SPACING = 10**8


class HandCategory(IntEnum):
    """
    The ten mutually exclusive five-card poker hand categories.

    Values increase with strength, so categories compare directly and
    ``base_score`` spaces them 10^8 apart (High Card = 10^8 up to
    Royal Flush = 10^9).
    """

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def base_score(self) -> int:
        return int(self) * CATEGORY_SPACING

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three Of A Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four Of A Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


class FiveCardError(Exception):
    """Base class for errors raised by the deck and hand components."""


class DeckLockError(FiveCardError, RuntimeError):
    """The deck lock could not be acquired within the configured timeout."""


class CardNotDealtError(FiveCardError, ValueError):
    """A card was returned to the deck that is not currently dealt out."""


class HandSizeError(FiveCardError, ValueError):
    """A hand was populated with something other than five distinct cards."""


class DeckExhaustedError(FiveCardError, RuntimeError):
    """A hand needed cards that its deck can no longer supply."""
