# fivecard/core/stats.py
"""
Enumeration and tallying of five-card hands.

Used to check the classifier against the known category frequencies of a
52-card deck, either exhaustively (2,598,960 hands) or over a random sample.
"""
from __future__ import annotations
from itertools import combinations
from math import comb
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
import random

import numpy as np
import tqdm

from .cards import Card, new_full_pack
from .deck import Deck
from .eval import CARDS_HELD, classify, sort_cards
from .hand import Hand
from .types import HandCategory

CATEGORIES: List[HandCategory] = sorted(HandCategory)

# Exhaustive counts over every 5-card subset of one deck.
FULL_DECK_COUNTS: Dict[HandCategory, int] = {
    HandCategory.ROYAL_FLUSH: 4,
    HandCategory.STRAIGHT_FLUSH: 36,
    HandCategory.FOUR_OF_A_KIND: 624,
    HandCategory.FULL_HOUSE: 3744,
    HandCategory.FLUSH: 5108,
    HandCategory.STRAIGHT: 10200,
    HandCategory.THREE_OF_A_KIND: 54912,
    HandCategory.TWO_PAIR: 123552,
    HandCategory.ONE_PAIR: 1098240,
    HandCategory.HIGH_CARD: 1302540,
}


def iter_hands(cards: Optional[Sequence[Card]] = None) -> Iterator[Tuple[Card, ...]]:
    """Yield every five-card combination of ``cards`` (default: a full pack)."""
    pool = list(cards) if cards is not None else new_full_pack()
    return combinations(pool, CARDS_HELD)


def category_counts(hands: Iterable[Sequence[Card]], progress: bool = False,
                    total: Optional[int] = None) -> np.ndarray:
    """
    Count how many hands fall into each category.

    Args:
        hands: Five-card groups in any order.
        progress: Show a tqdm progress bar.
        total: Length hint for the progress bar.

    Returns:
        np.ndarray: int64 array of length 10, indexed by ``int(category) - 1``.
    """
    counts = np.zeros(len(CATEGORIES), dtype=np.int64)
    it = tqdm.tqdm(hands, total=total, desc="Classifying hands") if progress else hands
    for cards in it:
        counts[int(classify(sort_cards(cards))) - 1] += 1
    return counts


def counts_by_category(counts: np.ndarray) -> Dict[HandCategory, int]:
    return {cat: int(counts[int(cat) - 1]) for cat in CATEGORIES}


def full_deck_counts(progress: bool = False) -> Dict[HandCategory, int]:
    """Classify all 2,598,960 hands of a single deck. Slow in pure Python."""
    counts = category_counts(iter_hands(), progress=progress, total=comb(52, CARDS_HELD))
    return counts_by_category(counts)


def sample_hands(n: int, rng: Optional[random.Random] = None) -> List[Hand]:
    """
    Deal ``n`` hands, each from a freshly shuffled deck sharing ``rng``.
    """
    rng = rng or random.Random()
    deck = Deck(rng=rng)
    hands = []
    for _ in range(n):
        deck.reset()
        deck.shuffle()
        hands.append(Hand.from_deck(deck))
    return hands
