"""Hearts rules engine and round-lifecycle controller."""

__version__ = "0.1.0"

from .card import Card, Rank, Suit, create_deck, TWO_OF_CLUBS, QUEEN_OF_SPADES, JACK_OF_DIAMONDS
from .deck import Deck, sort_hand, get_cards_by_suit
from .exceptions import (
    HeartsError,
    TrickError,
    GameError,
    TrickAlreadyCompleteError,
    PlayerAlreadyPlayedError,
    CardNotInHandError,
    MustFollowSuitError,
    NotPlayersTurnError,
    HandCompleteError,
    MustLeadWithTwoOfClubsError,
    CannotPlayPointsOnFirstTrickError,
    HeartsNotBrokenError,
)
from .rules import ExchangeDirection, TrickContext, exchange_direction_for, get_legal_plays, is_legal_play
from .player import BotDifficulty, BotInterface, PassedCards, Player, PlayerType, make_bot_players
from .trick import Play, Trick
from .config import GameConfiguration, STANDARD, WITH_JACK_BONUS, load_configuration
from .utils import GameLogger
from .game import HeartsGame

__all__ = [
    "__version__",
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "TWO_OF_CLUBS",
    "QUEEN_OF_SPADES",
    "JACK_OF_DIAMONDS",
    "Deck",
    "sort_hand",
    "get_cards_by_suit",
    "HeartsError",
    "TrickError",
    "GameError",
    "TrickAlreadyCompleteError",
    "PlayerAlreadyPlayedError",
    "CardNotInHandError",
    "MustFollowSuitError",
    "NotPlayersTurnError",
    "HandCompleteError",
    "MustLeadWithTwoOfClubsError",
    "CannotPlayPointsOnFirstTrickError",
    "HeartsNotBrokenError",
    "ExchangeDirection",
    "TrickContext",
    "exchange_direction_for",
    "get_legal_plays",
    "is_legal_play",
    "BotDifficulty",
    "BotInterface",
    "PassedCards",
    "Player",
    "PlayerType",
    "make_bot_players",
    "Play",
    "Trick",
    "GameConfiguration",
    "STANDARD",
    "WITH_JACK_BONUS",
    "load_configuration",
    "GameLogger",
    "HeartsGame",
]
