"""
Unit tests for the card and deck model.
"""

import random
import pytest
from hearts_bot.card import Card, Suit, Rank, create_deck, QUEEN_OF_SPADES, TWO_OF_CLUBS
from hearts_bot.deck import Deck, sort_hand, get_cards_by_suit


class TestCard:
    """Test card functionality."""

    def test_card_creation(self):
        card = Card(Suit.SPADES, Rank.ACE)
        assert card.suit == Suit.SPADES
        assert card.rank == Rank.ACE
        assert str(card) == "A♠"
        assert str(Card(Suit.HEARTS, Rank.TEN)) == "10♥"

    def test_card_comparison(self):
        ace_spades = Card(Suit.SPADES, Rank.ACE)
        king_spades = Card(Suit.SPADES, Rank.KING)
        ace_hearts = Card(Suit.HEARTS, Rank.ACE)

        assert ace_spades > king_spades
        assert king_spades < ace_spades
        # Ordering ignores suit, equality does not
        assert not ace_spades < ace_hearts
        assert not ace_hearts < ace_spades
        assert ace_spades != ace_hearts

    def test_same_suit_ordering(self):
        for suit in Suit:
            ranked = [Card(suit, rank) for rank in Rank]
            for lower, higher in zip(ranked, ranked[1:]):
                assert lower < higher
        assert min(Rank, key=lambda r: r.value) == Rank.TWO
        assert max(Rank, key=lambda r: r.value) == Rank.ACE

    def test_equality_and_hash(self):
        assert Card(Suit.CLUBS, Rank.TWO) == TWO_OF_CLUBS
        assert len({Card(Suit.CLUBS, Rank.TWO), TWO_OF_CLUBS}) == 1
        assert Card(Suit.CLUBS, Rank.TWO) != "2♣"

    def test_immutable(self):
        with pytest.raises(AttributeError):
            QUEEN_OF_SPADES.rank = Rank.KING

    def test_points(self):
        assert QUEEN_OF_SPADES.points == 13
        assert QUEEN_OF_SPADES.is_point_card
        for rank in Rank:
            assert Card(Suit.HEARTS, rank).points == 1
            assert Card(Suit.DIAMONDS, rank).points == 0
            assert Card(Suit.CLUBS, rank).points == 0
        assert Card(Suit.SPADES, Rank.KING).points == 0
        assert sum(card.points for card in create_deck()) == 26

    def test_rank_symbols(self):
        assert [r.symbol for r in Rank] == ["2", "3", "4", "5", "6", "7", "8", "9", "10",
                                            "J", "Q", "K", "A"]


class TestDeck:
    """Test deck functionality."""

    def test_deck_creation(self):
        deck = Deck()
        assert deck.count == 52
        assert len(set(deck.cards)) == 52
        for suit in Suit:
            assert len([c for c in deck.cards if c.suit == suit]) == 13

    def test_canonical_order(self):
        assert Deck().cards == create_deck()
        assert Deck().cards == Deck().cards
        assert create_deck()[0] == Card(Suit.SPADES, Rank.TWO)

    def test_shuffle_is_deterministic_with_seeded_rng(self):
        first = Deck(random.Random(5))
        second = Deck(random.Random(5))
        first.shuffle()
        second.shuffle()
        assert first.cards == second.cards
        assert set(first.cards) == set(create_deck())

    def test_deck_dealing(self):
        deck = Deck()
        last = deck.cards[-1]
        assert deck.deal() == last
        assert deck.count == 51

        hand = deck.deal_hand(13)
        assert len(hand) == 13
        assert deck.count == 38
        assert len(set(hand)) == 13

    def test_deal_from_empty_deck(self):
        deck = Deck()
        deck.deal_hand(52)
        assert deck.count == 0
        with pytest.raises(ValueError):
            deck.deal()
        with pytest.raises(ValueError):
            deck.deal_hand(1)

    def test_round_dealing(self):
        deck = Deck(random.Random(3))
        deck.shuffle()
        hands = deck.deal_round(4)

        assert len(hands) == 4
        for hand in hands.values():
            assert len(hand) == 13
        assert deck.count == 0

        dealt = [card for hand in hands.values() for card in hand]
        assert len(dealt) == 52
        assert set(dealt) == set(create_deck())

    def test_round_robin_order(self):
        deck = Deck()
        top = list(reversed(deck.cards))
        hands = deck.deal_round(4)
        assert hands[0][:2] == [top[0], top[4]]
        assert hands[3][0] == top[3]


class TestHandHelpers:

    def test_sort_hand(self, cards):
        hand = cards("2C AH 10S AS QD")
        assert sort_hand(hand) == cards("AS AH QD 10S 2C")

    def test_get_cards_by_suit(self, cards):
        by_suit = get_cards_by_suit(cards("KH 2H 7C"))
        assert by_suit[Suit.HEARTS] == cards("2H KH")
        assert by_suit[Suit.CLUBS] == cards("7C")
        assert Suit.SPADES not in by_suit
