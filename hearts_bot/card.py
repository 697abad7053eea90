"""
Card module for Hearts.
Defines Card, Suit, and Rank classes with rank ordering and point values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """Card suits. Order is only used for display and sorting."""
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks with proper ordering (2 lowest, Ace highest)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __str__(self):
        return self.symbol

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True, eq=False)
class Card:
    """Represents a playing card with suit and rank."""

    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self):
        return hash((self.suit, self.rank))

    def __lt__(self, other):
        """Compare cards by rank only (suit comparison handled by trick logic)."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    @property
    def points(self) -> int:
        """Penalty points: 1 per heart, 13 for the Queen of Spades."""
        if self.suit == Suit.HEARTS:
            return 1
        if self.suit == Suit.SPADES and self.rank == Rank.QUEEN:
            return 13
        return 0

    @property
    def is_point_card(self) -> bool:
        return self.points > 0


TWO_OF_CLUBS = Card(Suit.CLUBS, Rank.TWO)
QUEEN_OF_SPADES = Card(Suit.SPADES, Rank.QUEEN)
JACK_OF_DIAMONDS = Card(Suit.DIAMONDS, Rank.JACK)


def create_deck() -> List[Card]:
    """Create a standard 52-card deck in canonical (suit, rank) order."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit, rank))
    return deck
