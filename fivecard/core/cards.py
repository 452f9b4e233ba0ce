"""
Card representation and utilities for five-card poker.

Every card is derived from a canonical rank index (0-12) and a suit index
(0-3).  The rank index maps onto three parallel tables so a single lookup
gives the display label, the face value (ace low) and the game value (ace
high).

Constants:
    SUITS: Suit characters in pack order (H, D, C, S)
    RANK_LABELS: Rank labels in pack order (A, 2..10, J, Q, K)
    FACE_VALUES: 1..13, ace counts as 1
    GAME_VALUES: 2..14, ace counts as 14

Card Encoding (card_from_index):
    Cards 0-12:  AH, 2H, 3H, ..., KH
    Cards 13-25: AD, 2D, 3D, ..., KD
    Cards 26-38: AC, 2C, 3C, ..., KC
    Cards 39-51: AS, 2S, 3S, ..., KS
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

HEARTS, DIAMONDS, CLUBS, SPADES = "H", "D", "C", "S"
SUITS = [HEARTS, DIAMONDS, CLUBS, SPADES]
SUIT_GLYPHS = {HEARTS: "♥", DIAMONDS: "♦", CLUBS: "♣", SPADES: "♠"}

RANK_LABELS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
FACE_VALUES = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13]
GAME_VALUES = [14, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13]

UNIQUE_CARD_COUNT = 52
ACE_HIGH = 14

_GLYPH_TO_SUIT = {g: s for s, g in SUIT_GLYPHS.items()}


@dataclass(frozen=True)
class Card:
    """
    An immutable playing card.

    Attributes:
        rank_label (str): One of A, 2..10, J, Q, K.
        suit (str): One of H, D, C, S.
        face_value (int): 1..13 with the ace as 1. Only used to spot the ace-low straight.
        game_value (int): 2..14 with the ace as 14. Used for every ranking decision.
    """

    rank_label: str
    suit: str
    face_value: int
    game_value: int

    def __str__(self) -> str:
        return f"{self.rank_label}{self.suit}"

    @property
    def symbol(self) -> str:
        """Rank label followed by the unicode suit glyph, e.g. ``10♠``."""
        return f"{self.rank_label}{SUIT_GLYPHS[self.suit]}"

    @staticmethod
    def from_string(code: str) -> "Card":
        """
        Parse a display string such as ``"10S"``, ``"ad"``, ``"Th"`` or ``"Q♥"``.

        Raises:
            ValueError: If the rank or suit part is not recognised.
        """
        code = str(code).strip().upper()
        if len(code) < 2:
            raise ValueError(f"Malformed card code: {code!r}")
        rank_part, suit_part = code[:-1], code[-1]
        if rank_part == "T":
            rank_part = "10"
        suit_part = _GLYPH_TO_SUIT.get(suit_part, suit_part)
        if rank_part not in RANK_LABELS:
            raise ValueError(f"Unknown rank {rank_part!r} in card code {code!r}")
        if suit_part not in SUITS:
            raise ValueError(f"Unknown suit {suit_part!r} in card code {code!r}")
        return make_card(RANK_LABELS.index(rank_part), SUITS.index(suit_part))


def make_card(rank_index: int, suit_index: int) -> Card:
    """
    Build a card from its canonical indices.

    Args:
        rank_index: 0..12 (0 = ace, 12 = king)
        suit_index: 0..3 (hearts, diamonds, clubs, spades)
    """
    if not 0 <= rank_index < 13 or not 0 <= suit_index < 4:
        raise ValueError(f"Card indices out of range: rank={rank_index}, suit={suit_index}")
    return Card(
        rank_label=RANK_LABELS[rank_index],
        suit=SUITS[suit_index],
        face_value=FACE_VALUES[rank_index],
        game_value=GAME_VALUES[rank_index],
    )


def card_from_index(i: int) -> Card:
    """Map 0..51 onto a card, suit-major as in the pack order above."""
    if not 0 <= i < UNIQUE_CARD_COUNT:
        raise ValueError(f"Card index out of range: {i}")
    return make_card(i % 13, i // 13)


def new_full_pack() -> List[Card]:
    """
    Create the 52 unique cards sorted by suit, then by face value.

    Returns:
        List[Card]: A fresh list; callers are free to reorder it.
    """
    return [card_from_index(i) for i in range(UNIQUE_CARD_COUNT)]


def parse_cards(codes: str) -> List[Card]:
    """Parse a whitespace separated list of card codes, e.g. ``"AS KS QS JS 10S"``."""
    return [Card.from_string(code) for code in codes.split()]
