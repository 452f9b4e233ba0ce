import random
import threading

import pytest

from fivecard.core.cards import parse_cards
from fivecard.core.deck import Deck
from fivecard.core.hand import Hand
from fivecard.core.types import (
    CardNotDealtError,
    DeckExhaustedError,
    HandCategory,
    HandSizeError,
)


def _hand(codes: str) -> Hand:
    return Hand.from_cards(parse_cards(codes))


def test_hand_sorted_descending_on_construction():
    hand = _hand("2H AS 10D 5C KH")
    assert [c.game_value for c in hand] == [14, 13, 10, 5, 2]
    assert str(hand) == "AS(14) KH(13) 10D(10) 5C(5) 2H(2)"


def test_two_pair_scenario():
    hand = _hand("4D 4C 3S 3H 2D")
    assert hand.category is HandCategory.TWO_PAIR
    assert hand.is_two_pair()
    assert hand.hand_type == "Two Pair"
    assert hand.score == 300000947


@pytest.mark.parametrize(
    "codes, predicate",
    [
        ("AS KS QS JS 10S", "is_royal_flush"),
        ("KH QH JH 10H 9H", "is_straight_flush"),
        ("9C 9D 9H 9S 2C", "is_four_of_a_kind"),
        ("3S 3H 3D 7C 7H", "is_full_house"),
        ("AS KS 9S 7S 2S", "is_flush"),
        ("5H 4D 3S 2C AH", "is_straight"),
        ("7S 7H 7D KC 2H", "is_three_of_a_kind"),
        ("4D 4C 3S 3H 2D", "is_two_pair"),
        ("JD JC 8S 5H 2D", "is_one_pair"),
        ("AD KC 8S 5H 2D", "is_high_card"),
    ],
)
def test_exactly_one_predicate(codes: str, predicate: str):
    hand = _hand(codes)
    names = [
        "is_royal_flush", "is_straight_flush", "is_four_of_a_kind", "is_full_house",
        "is_flush", "is_straight", "is_three_of_a_kind", "is_two_pair",
        "is_one_pair", "is_high_card",
    ]
    truths = [n for n in names if getattr(hand, n)()]
    assert truths == [predicate]


def test_from_deck_draws_five_and_links_deck(deck: Deck):
    top = deck.cards[:5]
    hand = Hand.from_deck(deck)
    assert set(hand.cards) == set(top)
    assert deck.dealt_count == 5
    assert hand.deck is deck


def test_from_deck_exhausted():
    deck = Deck(rng=random.Random(0))
    deck.deal(50)
    with pytest.raises(DeckExhaustedError):
        Hand.from_deck(deck)
    assert deck.dealt_count == 50


def test_ten_hands_from_one_deck_are_disjoint(deck: Deck):
    hands = [Hand.from_deck(deck) for _ in range(10)]
    seen = [c for h in hands for c in h]
    assert len(set(seen)) == 50
    with pytest.raises(DeckExhaustedError):
        Hand.from_deck(deck)


@pytest.mark.parametrize("codes", ["AS KS QS JS", "AS KS QS JS 10S 9S", ""])
def test_wrong_size_rejected(codes: str):
    with pytest.raises(HandSizeError):
        _hand(codes)


def test_duplicate_cards_rejected():
    with pytest.raises(HandSizeError):
        _hand("AS AS QS JS 10S")


def test_set_cards_resorts_and_invalidates_cache():
    hand = _hand("AD KC 8S 5H 2D")
    assert hand.category is HandCategory.HIGH_CARD
    first_score = hand.score
    hand.set_cards(parse_cards("2S 3S AS 5S 4S"))
    assert [c.game_value for c in hand] == [14, 5, 4, 3, 2]
    assert hand.category is HandCategory.STRAIGHT_FLUSH
    assert hand.score == 9 * 10**8 + 5
    assert hand.score != first_score


def test_ordering_between_hands():
    royal = _hand("AS KS QS JS 10S")
    quads = _hand("2S 2H 2D 2C KD")
    wheel = _hand("5H 4D 3S 2C AH")
    six_high = _hand("6H 5D 4S 3C 2H")
    assert royal > six_high > wheel
    assert wheel < six_high
    assert royal.compare(six_high) == 1
    assert wheel.compare(six_high) == -1
    assert quads >= quads
    assert sorted([six_high, royal, wheel]) == [wheel, six_high, royal]


def test_equal_scores_compare_equal_but_hands_differ():
    a = _hand("AS KS QS JS 10S")
    b = _hand("AH KH QH JH 10H")
    assert a.compare(b) == 0
    assert a <= b and a >= b
    assert a != b
    assert a == _hand("10S JS QS KS AS")


def test_busted_flush():
    assert _hand("AH KH QH JD 9H").is_busted_flush()
    assert not _hand("AH KH QH JH 9H").is_busted_flush()


def test_discard_and_draw_replaces_and_returns_to_bottom():
    deck = Deck(rng=random.Random(42))
    hand = Hand.from_deck(deck)
    before = hand.cards
    next_up = deck.cards[5:7]

    discarded = hand.discard_and_draw([0, 4])

    assert discarded == [before[0], before[4]]
    assert set(hand.cards) == (set(before) - set(discarded)) | set(next_up)
    assert deck.dealt_count == 5
    assert deck.cards[-2:] == tuple(discarded)
    assert [c.game_value for c in hand] == sorted((c.game_value for c in hand), reverse=True)


def test_discard_nothing_is_noop(deck: Deck):
    hand = Hand.from_deck(deck)
    before = hand.cards
    assert hand.discard_and_draw([]) == []
    assert hand.cards == before
    assert deck.dealt_count == 5


def test_discard_limits(deck: Deck):
    hand = Hand.from_deck(deck)
    with pytest.raises(ValueError):
        hand.discard_and_draw([0, 1, 2, 3])
    with pytest.raises(ValueError):
        hand.discard_and_draw([5])
    with pytest.raises(RuntimeError):
        _hand("AD KC 8S 5H 2D").discard_and_draw([0])


def test_discard_when_deck_exhausted_leaves_hand_untouched():
    deck = Deck(rng=random.Random(1))
    hand = Hand.from_deck(deck)
    deck.deal(deck.remaining - 1)
    before = hand.cards
    with pytest.raises(DeckExhaustedError):
        hand.discard_and_draw([0, 1])
    assert hand.cards == before
    assert deck.remaining == 1


def test_discard_of_undealt_cards_leaves_deck_and_hand_untouched():
    deck = Deck(rng=random.Random(1))
    hand = Hand.from_deck(deck)
    hand.set_cards(deck.cards[10:15])
    order, before = deck.cards, hand.cards
    with pytest.raises(CardNotDealtError):
        hand.discard_and_draw([0, 1])
    assert deck.dealt_count == 5
    assert deck.cards == order
    assert hand.cards == before


def test_discard_with_one_undealt_card_returns_nothing():
    deck = Deck(rng=random.Random(8))
    hand = Hand.from_deck(deck)
    stranger = deck.cards[20]
    kept = list(hand.cards[:4])
    hand.set_cards(kept + [stranger])
    order, before = deck.cards, hand.cards
    positions = [before.index(stranger), before.index(kept[0])]
    with pytest.raises(CardNotDealtError):
        hand.discard_and_draw(positions)
    assert deck.dealt_count == 5
    assert deck.cards == order
    assert hand.cards == before


def test_concurrent_hands_are_consecutive_and_disjoint():
    deck = Deck(rng=random.Random(17))
    order = deck.cards
    slices = [frozenset(order[i:i + 5]) for i in range(0, 50, 5)]
    hands = []
    hands_lock = threading.Lock()
    barrier = threading.Barrier(10)

    def worker():
        barrier.wait()
        hand = Hand.from_deck(deck)
        with hands_lock:
            hands.append(hand)

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(hands) == 10
    drawn = [frozenset(h.cards) for h in hands]
    assert set(drawn) == set(slices)
    assert len({c for h in hands for c in h}) == 50
    assert deck.dealt_count == 50


def test_high_card_naming_is_consistent():
    hand = _hand("AD KC 8S 5H 2D")
    assert hand.is_high_card()
    assert hand.category is HandCategory.HIGH_CARD
    assert hand.hand_type == "High Card"
