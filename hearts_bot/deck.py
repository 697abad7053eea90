"""
Deck module for Hearts.
Handles deck creation, shuffling, and dealing cards to players.
"""

import random
from typing import List, Dict, Optional
from hearts_bot.card import Card, Suit, create_deck
from hearts_bot.rules import CARDS_PER_PLAYER, NUM_PLAYERS


class Deck:
    """Manages a deck of cards with shuffling and dealing capabilities."""

    def __init__(self, rng: Optional[random.Random] = None):
        # Canonical order until shuffle() is called
        self.cards = create_deck()
        self.rng = rng or random.Random()

    @property
    def count(self) -> int:
        return len(self.cards)

    def shuffle(self):
        """Shuffle the deck in place using the deck's random source."""
        self.rng.shuffle(self.cards)

    def deal(self) -> Card:
        """
        Remove and return the card at the end of the deck.

        Raises:
            ValueError: If the deck is empty
        """
        if not self.cards:
            raise ValueError("Cannot deal from an empty deck")
        return self.cards.pop()

    def deal_hand(self, size: int) -> List[Card]:
        """
        Deal a hand of specified size.

        Args:
            size: Number of cards to deal

        Returns:
            List of cards dealt

        Raises:
            ValueError: If not enough cards remaining
        """
        if len(self.cards) < size:
            raise ValueError(f"Not enough cards in deck. Need {size}, have {len(self.cards)}")

        return [self.deal() for _ in range(size)]

    def deal_round(self, num_players: int = NUM_PLAYERS,
                   cards_per_player: int = CARDS_PER_PLAYER) -> Dict[int, List[Card]]:
        """
        Deal cards one at a time, round-robin, to each seat.

        Args:
            num_players: Number of players (default 4)
            cards_per_player: Cards each seat receives (default 13)

        Returns:
            Dictionary mapping seat index to that seat's hand
        """
        needed = num_players * cards_per_player
        if len(self.cards) < needed:
            raise ValueError(f"Not enough cards in deck. Need {needed}, have {len(self.cards)}")

        hands: Dict[int, List[Card]] = {seat: [] for seat in range(num_players)}
        for _ in range(cards_per_player):
            for seat in range(num_players):
                hands[seat].append(self.deal())
        return hands


def sort_hand(hand: List[Card]) -> List[Card]:
    """
    Sort a hand for display: rank descending, then suit.

    Args:
        hand: List of cards to sort

    Returns:
        Sorted list of cards
    """
    suit_order = {suit: idx for idx, suit in enumerate(Suit)}
    return sorted(hand, key=lambda card: (-card.rank.value, suit_order[card.suit]))


def get_cards_by_suit(hand: List[Card]) -> Dict[Suit, List[Card]]:
    """
    Group cards in hand by suit.

    Args:
        hand: List of cards

    Returns:
        Dictionary mapping suits to lists of cards, each sorted low to high
    """
    by_suit: Dict[Suit, List[Card]] = {}
    for card in hand:
        by_suit.setdefault(card.suit, []).append(card)

    for suit in by_suit:
        by_suit[suit] = sorted(by_suit[suit], key=lambda c: c.rank.value)

    return by_suit
