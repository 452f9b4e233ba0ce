# fivecard/core/hand.py
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from . import eval as _eval
from .cards import Card
from .deck import Deck
from .score import score_hand
from .types import DeckExhaustedError, HandCategory, HandSizeError

logger = logging.getLogger(__name__)

MAX_DISCARDS = 3


class Hand:
    """
    Five cards held by one player, always sorted by descending game value.

    The category and score are computed lazily and cached; any change to the
    cards clears both.

    Args:
        cards (Sequence[Card]): Exactly five distinct cards.
        deck (Optional[Deck]): The deck the cards came from. Needed only for
            ``discard_and_draw``.

    Example:
        >>> hand = Hand(parse_cards("4D 4C 3S 3H 2D"))
        >>> hand.category
        <HandCategory.TWO_PAIR: 3>
        >>> hand.score
        300000947
    """

    CARDS_HELD = _eval.CARDS_HELD

    def __init__(self, cards: Sequence[Card], deck: Optional[Deck] = None):
        self.deck = deck
        self._cards: List[Card] = []
        self._category: Optional[HandCategory] = None
        self._score: Optional[int] = None
        self.set_cards(cards)

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "Hand":
        """Build a hand from an explicit card list, bypassing any deck."""
        return cls(cards)

    @classmethod
    def from_deck(cls, deck: Deck) -> "Hand":
        """
        Deal five cards from ``deck`` in one atomic draw.

        Raises:
            DeckExhaustedError: If fewer than five cards remain.
        """
        cards = deck.deal(cls.CARDS_HELD)
        if cards is None:
            raise DeckExhaustedError(
                f"Deck has {deck.remaining} cards left, a hand needs {cls.CARDS_HELD}"
            )
        return cls(cards, deck=deck)

    # ----- cards -----
    def set_cards(self, cards: Sequence[Card]) -> None:
        """
        Replace the held cards, re-sort them and drop the cached classification.

        Raises:
            HandSizeError: Unless given exactly five distinct cards.
        """
        cards = list(cards)
        if len(cards) != self.CARDS_HELD:
            raise HandSizeError(f"A hand holds {self.CARDS_HELD} cards, got {len(cards)}")
        if len(set(cards)) != len(cards):
            raise HandSizeError(f"Duplicate cards in hand: {' '.join(map(str, cards))}")
        self._cards = _eval.sort_cards(cards)
        self._category = None
        self._score = None

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return " ".join(f"{c}({c.game_value})" for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(map(str, self._cards))})"

    # ----- classification -----
    @property
    def category(self) -> HandCategory:
        if self._category is None:
            self._category = _eval.classify(self._cards)
        return self._category

    @property
    def hand_type(self) -> str:
        return self.category.label

    @property
    def score(self) -> int:
        if self._score is None:
            self._score = score_hand(self._cards, self.category)
        return self._score

    def is_royal_flush(self) -> bool:
        return _eval.is_royal_flush(self._cards)

    def is_straight_flush(self) -> bool:
        return _eval.is_straight_flush(self._cards)

    def is_four_of_a_kind(self) -> bool:
        return _eval.is_four_of_a_kind(self._cards)

    def is_full_house(self) -> bool:
        return _eval.is_full_house(self._cards)

    def is_flush(self) -> bool:
        return _eval.is_flush(self._cards)

    def is_straight(self) -> bool:
        return _eval.is_straight(self._cards)

    def is_three_of_a_kind(self) -> bool:
        return _eval.is_three_of_a_kind(self._cards)

    def is_two_pair(self) -> bool:
        return _eval.is_two_pair(self._cards)

    def is_one_pair(self) -> bool:
        return _eval.is_one_pair(self._cards)

    def is_high_card(self) -> bool:
        return _eval.is_high_card(self._cards)

    def is_busted_flush(self) -> bool:
        """Four of the five cards share a suit."""
        return _eval.is_busted_flush(self._cards)

    # ----- ordering -----
    def compare(self, other: "Hand") -> int:
        """Return 1, 0 or -1 as this hand beats, ties or loses to ``other``."""
        return (self.score > other.score) - (self.score < other.score)

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.score >= other.score

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return set(self._cards) == set(other._cards)

    __hash__ = None  # mutable

    # ----- drawing -----
    def discard_and_draw(self, positions: Iterable[int]) -> List[Card]:
        """
        Swap the cards at ``positions`` (indices into the sorted hand) for fresh
        cards from the hand's deck.

        Replacements are dealt and the discards returned to the bottom of the
        deck in one atomic exchange, so a discarded card can never come
        straight back. If any discard is not dealt out from the deck (the hand
        was re-populated with ``set_cards``), neither the hand nor the deck
        changes.

        Args:
            positions: Up to three distinct indices in 0..4.

        Returns:
            List[Card]: The discarded cards.

        Raises:
            ValueError: On more than three positions or an index out of range.
            RuntimeError: If the hand was not dealt from a deck.
            DeckExhaustedError: If the deck cannot supply the replacements.
            CardNotDealtError: If a discard is not dealt out from the deck.
        """
        idxs = sorted(set(positions))
        if len(idxs) > MAX_DISCARDS:
            raise ValueError(f"At most {MAX_DISCARDS} cards may be discarded, got {len(idxs)}")
        if any(not 0 <= i < self.CARDS_HELD for i in idxs):
            raise ValueError(f"Discard positions must be in 0..{self.CARDS_HELD - 1}: {idxs}")
        if not idxs:
            return []
        if self.deck is None:
            raise RuntimeError("Hand has no deck to draw replacements from")

        discarded = [self._cards[i] for i in idxs]
        replacements = self.deck.exchange(discarded)
        if replacements is None:
            raise DeckExhaustedError(f"Deck cannot replace {len(idxs)} discarded cards")
        kept = [c for i, c in enumerate(self._cards) if i not in idxs]
        self.set_cards(kept + replacements)
        logger.debug("discarded %s, drew %s",
                     " ".join(map(str, discarded)), " ".join(map(str, replacements)))
        return discarded
