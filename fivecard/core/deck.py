# fivecard/core/deck.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple
import logging
import random
import threading
import warnings

from .cards import Card, UNIQUE_CARD_COUNT, new_full_pack
from .config import DeckConfig
from .types import CardNotDealtError, DeckLockError

logger = logging.getLogger(__name__)


class Deck:
    """
    A single 52-card deck with a deal cursor, safe to share between threads.

    Cards at indices ``[0, dealt)`` are out, cards at ``[dealt, 52)`` are still
    available. Only the order of the cards and the cursor ever change; the set
    of cards is fixed for the lifetime of the deck.

    Every operation that reads or writes the cursor or the card order holds
    one lock. Acquiring it is bounded by ``config.lock_timeout`` and a miss
    raises :class:`DeckLockError`.

    Args:
        rng (Optional[random.Random]): Source of randomness for shuffling.
            Defaults to ``random.Random(config.seed)``.
        config (Optional[DeckConfig]): Seed and lock timeout.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 config: Optional[DeckConfig] = None):
        self.config = config or DeckConfig()
        self.rng = rng or random.Random(self.config.seed)
        self._lock = threading.Lock()
        self._cards: List[Card] = new_full_pack()
        self._dealt = 0
        self.shuffle()
        self.reset()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self.config.lock_timeout):
            raise DeckLockError(
                f"Could not acquire deck lock within {self.config.lock_timeout}s"
            )
        try:
            yield
        finally:
            self._lock.release()

    # ----- views -----
    def __len__(self) -> int:
        return len(self._cards)

    @property
    def dealt_count(self) -> int:
        return self._dealt

    @property
    def remaining(self) -> int:
        return UNIQUE_CARD_COUNT - self._dealt

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the full card order, dealt region first."""
        with self._locked():
            return tuple(self._cards)

    # ----- lifecycle -----
    def shuffle(self) -> None:
        """
        Randomly permute all 52 cards.

        Shuffling while cards are out leaves the dealt/undealt split undefined,
        so callers should ``reset()`` first.
        """
        with self._locked():
            if self._dealt:
                warnings.warn(
                    f"Shuffling with {self._dealt} cards still dealt; call reset() first.",
                    RuntimeWarning,
                    stacklevel=2,
                )
            self.rng.shuffle(self._cards)
        logger.debug("deck shuffled")

    def reset(self) -> None:
        """Move the cursor back to the top without touching the card order."""
        with self._locked():
            self._dealt = 0
        logger.debug("deck reset")

    # ----- dealing -----
    def deal_next(self) -> Optional[Card]:
        """
        Deal the card under the cursor.

        Returns:
            Optional[Card]: The next card, or None once all 52 are out.
        """
        with self._locked():
            if self._dealt >= UNIQUE_CARD_COUNT:
                return None
            card = self._cards[self._dealt]
            self._dealt += 1
            out = self._dealt
        logger.debug("dealt %s (%d out)", card, out)
        return card

    def deal(self, n: int) -> Optional[List[Card]]:
        """
        Deal ``n`` consecutive cards under a single lock acquisition.

        Returns:
            Optional[List[Card]]: The cards in deal order, or None (cursor
            untouched) if fewer than ``n`` remain.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        with self._locked():
            if self._dealt + n > UNIQUE_CARD_COUNT:
                return None
            cards = self._cards[self._dealt:self._dealt + n]
            self._dealt += n
            out = self._dealt
        logger.debug("dealt %s (%d out)", " ".join(str(c) for c in cards), out)
        return cards

    def return_card(self, card: Card) -> None:
        """
        Put a dealt card back at the bottom of the deck.

        The card is removed from the dealt region, every card after it moves
        up one place, the card lands at index 51 and the cursor steps back.

        Raises:
            CardNotDealtError: If ``card`` is not currently dealt out.
        """
        with self._locked():
            self._check_dealt([card])
            self._to_bottom(card)
            out = self._dealt
        logger.debug("returned %s to bottom (%d out)", card, out)

    def exchange(self, discards: Sequence[Card]) -> Optional[List[Card]]:
        """
        Deal one replacement per discard, then return the discards to the bottom.

        Both steps happen under a single lock acquisition, and nothing changes
        unless every discard is dealt out and enough cards remain.

        Returns:
            Optional[List[Card]]: The replacements in deal order, or None (deck
            untouched) if fewer than ``len(discards)`` remain.

        Raises:
            CardNotDealtError: If any discard is not currently dealt out.
        """
        discards = list(discards)
        n = len(discards)
        if len(set(discards)) != n:
            raise ValueError(f"Duplicate discards: {' '.join(map(str, discards))}")
        with self._locked():
            self._check_dealt(discards)
            if self._dealt + n > UNIQUE_CARD_COUNT:
                return None
            drawn = self._cards[self._dealt:self._dealt + n]
            self._dealt += n
            for card in discards:
                self._to_bottom(card)
            out = self._dealt
        logger.debug("exchanged %s for %s (%d out)", " ".join(map(str, discards)),
                     " ".join(map(str, drawn)), out)
        return drawn

    # ----- internals, lock held -----
    def _check_dealt(self, cards: Sequence[Card]) -> None:
        dealt = set(self._cards[:self._dealt])
        missing = [c for c in cards if c not in dealt]
        if missing:
            raise CardNotDealtError(
                f"{' '.join(map(str, missing))} not in the dealt region"
            )

    def _to_bottom(self, card: Card) -> None:
        del self._cards[self._cards.index(card, 0, self._dealt)]
        self._cards.append(card)
        self._dealt -= 1
        assert len(self._cards) == UNIQUE_CARD_COUNT
