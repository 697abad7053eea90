"""
Utility module for Hearts.
Contains logging and formatting helpers.
"""

import json
import os
import logging
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from hearts_bot.card import Card, Suit
from hearts_bot.deck import get_cards_by_suit

if TYPE_CHECKING:
    from hearts_bot.player import Player, PassedCards
    from hearts_bot.trick import Trick

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def format_hand(hand: List[Card]) -> str:
    """
    Format a hand of cards grouped by suit, high to low within each suit.

    Args:
        hand: List of cards

    Returns:
        Formatted string representation
    """
    if not hand:
        return "Empty hand"

    by_suit = get_cards_by_suit(hand)
    suit_strings = []
    for suit in Suit:
        if suit in by_suit:
            ranks = ' '.join(str(card.rank) for card in reversed(by_suit[suit]))
            suit_strings.append(f"{suit.value}: {ranks}")
    return ' | '.join(suit_strings)


def format_scores(players: List["Player"]) -> str:
    """Format current scores for display."""
    return '\n'.join(f"{p.name}: {p.total_score} (hand: {p.round_score})" for p in players)


def format_trick(trick: "Trick") -> str:
    return ', '.join(f"{play.player.name}: {play.card}" for play in trick.plays)


def log_game_state(game_state: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """Log current game state."""
    if logger is None:
        logger = logging.getLogger(__name__)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Game State: %s", json.dumps(game_state, indent=2))


class GameLogger:
    """Logging wrapper for game events."""

    def __init__(self, log_file: Optional[str] = None, verbose: bool = False,
                 name: str = "HeartsGame"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        formatter = logging.Formatter(LOG_FORMAT)

        if log_file and not self._has_file_handler(log_file):
            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        if verbose and not self._has_console_handler():
            ch = logging.StreamHandler()
            ch.setLevel(logging.INFO)
            ch.setFormatter(formatter)
            self.logger.addHandler(ch)

    def _has_file_handler(self, log_file: str) -> bool:
        target = os.path.abspath(log_file)
        return any(isinstance(h, logging.FileHandler) and h.baseFilename == target
                   for h in self.logger.handlers)

    def _has_console_handler(self) -> bool:
        return any(type(h) is logging.StreamHandler for h in self.logger.handlers)

    def log_game_start(self, player_names: List[str], configuration: Dict[str, Any]):
        """Log the start of a new game."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(f"Players: {', '.join(player_names)}")
        self.logger.info(f"Configuration: {configuration}")

    def log_hand_start(self, round_number: int, direction: str):
        self.logger.info(f"=== Hand {round_number + 1} - Pass: {direction} ===")

    def log_exchange(self, player_name: str, target_name: str, passed: "PassedCards"):
        self.logger.info(f"{player_name} passes 3 cards to {target_name}")
        self.logger.debug(f"{player_name} passed: {', '.join(str(c) for c in passed)}")

    def log_hand(self, player_name: str, hand: List[Card]):
        self.logger.debug(f"{player_name} hand: {format_hand(hand)}")

    def log_card_play(self, player_name: str, card: Card, trick_state: str):
        """Log a card play."""
        self.logger.info(f"{player_name} plays {card} ({trick_state})")

    def log_trick_winner(self, winner_name: str, trick_cards: List[Card], points: int):
        """Log trick winner and cards played."""
        cards_str = ', '.join(str(card) for card in trick_cards)
        self.logger.info(f"{winner_name} wins trick with: {cards_str} ({points:+d} points)")

    def log_moon_shot(self, player_name: str):
        self.logger.info(f"{player_name} shot the moon!")

    def log_hand_end(self, round_number: int, hand_scores: Dict[str, int], players: List["Player"]):
        self.logger.info(f"--- Hand {round_number + 1} Complete ---")
        for name, points in hand_scores.items():
            self.logger.info(f"{name}: {points:+d}")
        self.logger.info(f"Scores:\n{format_scores(players)}")

    def log_game_end(self, winner_name: str, players: List["Player"]):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        self.logger.info(f"Winner: {winner_name}")
        self.logger.info(f"Final scores:\n{format_scores(players)}")

    def close(self):
        """Detach and close the file handlers this logger writes to."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                self.logger.removeHandler(handler)
