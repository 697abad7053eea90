"""
Player module for Hearts.
Defines player state, player kinds and the strategy interface bots implement.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple
from hearts_bot.card import Card, Suit
from hearts_bot.exceptions import CardNotInHandError
from hearts_bot.rules import CARDS_PER_PLAYER, PASS_COUNT, TrickContext


class BotDifficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class PlayerType:
    """Human, or bot with a difficulty level."""

    difficulty: Optional[BotDifficulty] = None

    @classmethod
    def human(cls) -> "PlayerType":
        return cls()

    @classmethod
    def bot(cls, difficulty: BotDifficulty = BotDifficulty.MEDIUM) -> "PlayerType":
        return cls(difficulty)

    @property
    def is_bot(self) -> bool:
        return self.difficulty is not None

    @property
    def is_human(self) -> bool:
        return self.difficulty is None

    def __str__(self):
        return f"bot({self.difficulty.value})" if self.is_bot else "human"


class PassedCards:
    """Exactly three distinct cards handed to another player during the exchange."""

    def __init__(self, *cards: Card):
        if len(cards) != PASS_COUNT:
            raise ValueError(f"Exactly {PASS_COUNT} cards must be passed, got {len(cards)}")
        if len(set(cards)) != PASS_COUNT:
            raise ValueError(f"Passed cards must be distinct: {', '.join(str(c) for c in cards)}")
        self._cards: Tuple[Card, ...] = tuple(cards)

    @property
    def first(self) -> Card:
        return self._cards[0]

    @property
    def second(self) -> Card:
        return self._cards[1]

    @property
    def third(self) -> Card:
        return self._cards[2]

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __eq__(self, other):
        if not isinstance(other, PassedCards):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self):
        return hash(self._cards)

    def __repr__(self):
        return f"PassedCards({', '.join(str(c) for c in self._cards)})"


class Player:
    """Represents a player in the Hearts game. Identity is the opaque player_id."""

    def __init__(self, name: str, player_type: Optional[PlayerType] = None):
        self.player_id = uuid.uuid4().hex
        self.name = name
        self.player_type = player_type or PlayerType.human()
        self.hand: List[Card] = []
        self.round_score = 0
        self.total_score = 0

    def receive_cards(self, cards: List[Card]):
        """Add cards to player's hand."""
        self.hand.extend(cards)

    def has_card(self, card: Card) -> bool:
        return card in self.hand

    def has_suit(self, suit: Suit) -> bool:
        """Check if player has any cards of given suit."""
        return any(card.suit == suit for card in self.hand)

    def play_card(self, card: Card) -> Card:
        """
        Remove and return a card from hand.

        Raises:
            CardNotInHandError: If card not in hand
        """
        if card not in self.hand:
            raise CardNotInHandError(f"Card {card} not in hand")
        self.hand.remove(card)
        return card

    def pick_cards(self, passed: PassedCards) -> PassedCards:
        """
        Take the three cards to pass out of the hand (13 -> 10).

        Raises:
            ValueError: If any of the cards is not held
        """
        missing = [card for card in passed if card not in self.hand]
        if missing:
            raise ValueError(f"{self.name} cannot pass cards not in hand: "
                             f"{', '.join(str(c) for c in missing)}")
        for card in passed:
            self.hand.remove(card)
        return passed

    def accept_exchange(self, passed: PassedCards):
        """Receive three passed cards (10 -> 13)."""
        assert len(self.hand) == CARDS_PER_PLAYER - PASS_COUNT, \
            f"{self.name} must hold {CARDS_PER_PLAYER - PASS_COUNT} cards before accepting an exchange"
        self.hand.extend(passed)
        assert len(self.hand) == CARDS_PER_PLAYER

    def add_round_points(self, points: int):
        """Credit points captured in a trick to this hand's score."""
        self.round_score += points

    def reset_hand(self):
        """Clear cards before a new deal."""
        self.hand = []

    def __eq__(self, other):
        if not isinstance(other, Player):
            return False
        return self.player_id == other.player_id

    def __hash__(self):
        return hash(self.player_id)

    def __str__(self):
        return f"{self.name} (Score: {self.total_score})"

    def __repr__(self):
        return (f"Player(id={self.player_id}, name={self.name}, type={self.player_type}, "
                f"round_score={self.round_score}, total_score={self.total_score})")


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    @abstractmethod
    def choose_cards_to_pass(self, hand: List[Card]) -> PassedCards:
        """
        Choose three cards to pass during the exchange.

        Args:
            hand: Current 13-card hand

        Returns:
            The three distinct cards to pass
        """
        pass

    @abstractmethod
    def choose_card(self, context: TrickContext) -> Card:
        """
        Choose which card to play.

        Args:
            context: Hand, current trick, hearts-broken flag and first-trick flag

        Returns:
            A card from context.legal_moves()
        """
        pass


BOT_NAMES = ["Watson", "Beth", "Cindy", "Max"]


def make_bot_players(difficulty: BotDifficulty = BotDifficulty.MEDIUM) -> List[Player]:
    """Create the default table of four bots."""
    return [Player(name, PlayerType.bot(difficulty)) for name in BOT_NAMES]
