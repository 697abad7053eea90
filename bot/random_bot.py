"""
Random bot implementation for Hearts.
Provides a baseline bot that makes random legal moves.
"""

import random
from typing import List, Optional
from hearts_bot.card import Card
from hearts_bot.player import BotInterface, PassedCards
from hearts_bot.rules import PASS_COUNT, TrickContext


class RandomBot(BotInterface):
    """Bot that makes completely random legal moves."""

    def __init__(self, name: str = "RandomBot", rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def choose_cards_to_pass(self, hand: List[Card]) -> PassedCards:
        """Pass three random cards."""
        if len(hand) < PASS_COUNT:
            raise ValueError(f"Need at least {PASS_COUNT} cards to pass, have {len(hand)}")
        return PassedCards(*self.rng.sample(hand, PASS_COUNT))

    def choose_card(self, context: TrickContext) -> Card:
        """Choose a random legal card to play."""
        legal = context.legal_moves()
        if not legal:
            raise ValueError("No valid plays available")

        return self.rng.choice(legal)

    def __str__(self):
        return self.name
