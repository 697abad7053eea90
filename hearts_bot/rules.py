"""
Rules module for Hearts.
Contains rule constants, exchange direction logic, and legal-move computation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TYPE_CHECKING
from hearts_bot.card import Card, Suit, TWO_OF_CLUBS

if TYPE_CHECKING:
    from hearts_bot.trick import Trick


# Game constants
NUM_PLAYERS = 4
CARDS_PER_PLAYER = 13
TOTAL_CARDS = 52
TRICKS_PER_HAND = 13
PASS_COUNT = 3

# Scoring constants
TOTAL_HAND_POINTS = 26
MOON_SHOT_PENALTY = 26
JACK_OF_DIAMONDS_BONUS = -10
DEFAULT_WINNING_SCORE = 100


class ExchangeDirection(Enum):
    """Pass direction; the value is the seat offset of the receiving player."""
    NONE = 0
    LEFT = 1
    ACROSS = 2
    RIGHT = 3

    @property
    def offset(self) -> int:
        return self.value


EXCHANGE_ROTATION = [
    ExchangeDirection.LEFT,
    ExchangeDirection.RIGHT,
    ExchangeDirection.ACROSS,
    ExchangeDirection.NONE,
]


def exchange_direction_for(round_number: int) -> ExchangeDirection:
    """Get the pass direction for a hand: left, right, across, none, repeat."""
    return EXCHANGE_ROTATION[round_number % len(EXCHANGE_ROTATION)]


def only_hearts(hand: List[Card]) -> bool:
    """True if every card in a non-empty hand is a heart."""
    return bool(hand) and all(card.suit == Suit.HEARTS for card in hand)


def only_point_cards(hand: List[Card]) -> bool:
    """True if every card in a non-empty hand carries points."""
    return bool(hand) and all(card.is_point_card for card in hand)


@dataclass
class TrickContext:
    """Everything a player needs to know to pick a legal card."""

    hand: List[Card]
    current_trick: "Trick"
    hearts_broken: bool
    is_first_trick: bool

    @property
    def is_leading(self) -> bool:
        return not self.current_trick.plays

    @property
    def lead_suit(self) -> Optional[Suit]:
        return self.current_trick.lead_suit

    def legal_moves(self) -> List[Card]:
        """
        Get all cards that can legally be played right now.

        Returns:
            Legal cards, in hand order
        """
        return get_legal_plays(self.hand, self.lead_suit, self.hearts_broken, self.is_first_trick)


def get_legal_plays(hand: List[Card], lead_suit: Optional[Suit],
                    hearts_broken: bool, is_first_trick: bool) -> List[Card]:
    """
    Get all legal card plays for current situation.

    Args:
        hand: Player's current hand
        lead_suit: Suit led in trick (None if leading)
        hearts_broken: Whether a heart has been played this hand
        is_first_trick: Whether no trick has been completed yet this hand

    Returns:
        List of cards that can legally be played
    """
    if lead_suit is None:
        if is_first_trick and TWO_OF_CLUBS in hand:
            return [TWO_OF_CLUBS]
        if hearts_broken or only_hearts(hand):
            candidates = list(hand)
        else:
            candidates = [card for card in hand if card.suit != Suit.HEARTS]
    else:
        following_suit = [card for card in hand if card.suit == lead_suit]
        candidates = following_suit or list(hand)

    if is_first_trick and not only_point_cards(hand):
        candidates = [card for card in candidates if not card.is_point_card]

    return candidates


def is_legal_play(card: Card, context: TrickContext) -> bool:
    """Check whether a card is among the legal moves of a context."""
    return card in context.legal_moves()
