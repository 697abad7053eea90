"""
Shared fixtures for Hearts tests.
"""

import random
import pytest
from hearts_bot.card import Card, Rank, Suit
from hearts_bot.config import WITH_JACK_BONUS
from hearts_bot.game import HeartsGame
from hearts_bot.trick import Trick

RANKS = {rank.symbol: rank for rank in Rank}
SUITS = {"S": Suit.SPADES, "H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS}


def parse_card(text: str) -> Card:
    """'QS' -> Queen of Spades, '10H' -> Ten of Hearts."""
    return Card(SUITS[text[-1]], RANKS[text[:-1]])


def parse_cards(text: str):
    return [parse_card(token) for token in text.split()]


@pytest.fixture
def card():
    return parse_card


@pytest.fixture
def cards():
    return parse_cards


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(rng):
    return HeartsGame(rng=rng)


@pytest.fixture
def bonus_game():
    return HeartsGame(configuration=WITH_JACK_BONUS, rng=random.Random(99))


@pytest.fixture
def rig():
    """Replace the dealt hands with known ones and position the hand mid-play."""

    def _rig(game, hands, current=0, completed=0, hearts_broken=False):
        for player, hand in zip(game.players, hands):
            player.hand = parse_cards(hand)
            player.round_score = 0
        game.current_player_index = current
        # Placeholder tricks only advance the trick count
        game.completed_tricks = [Trick() for _ in range(completed)]
        game.current_trick = Trick()
        game.hearts_broken = hearts_broken
        return game

    return _rig
