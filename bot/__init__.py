"""
Play-selection strategies for Hearts bots.
"""

import random
from typing import Optional
from hearts_bot.player import BotDifficulty, BotInterface
from bot.random_bot import RandomBot
from bot.heuristic_bot import HeuristicBot, AdvancedHeuristicBot

STRATEGIES = {
    BotDifficulty.EASY: RandomBot,
    BotDifficulty.MEDIUM: HeuristicBot,
    BotDifficulty.HARD: AdvancedHeuristicBot,
}


def make_strategy(difficulty: BotDifficulty, rng: Optional[random.Random] = None) -> BotInterface:
    """Create the strategy that plays at the given difficulty."""
    try:
        strategy_cls = STRATEGIES[difficulty]
    except KeyError:
        raise ValueError(f"Unknown bot difficulty: {difficulty!r}") from None
    return strategy_cls(rng=rng)


__all__ = ["RandomBot", "HeuristicBot", "AdvancedHeuristicBot", "STRATEGIES", "make_strategy"]
