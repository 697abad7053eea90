"""
Game configuration for Hearts variants.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
from hearts_bot.rules import DEFAULT_WINNING_SCORE


@dataclass(frozen=True)
class GameConfiguration:
    """
    Rule options fixed for the lifetime of a game.

    jack_of_diamonds_bonus: the trick winner who captures J♦ is credited 10
        points less for that trick.
    winning_score: the game ends once any player's total reaches this score;
        the lowest total wins.
    """

    jack_of_diamonds_bonus: bool = False
    winning_score: int = DEFAULT_WINNING_SCORE

    def __post_init__(self):
        if not isinstance(self.jack_of_diamonds_bonus, bool):
            raise ValueError(f"jack_of_diamonds_bonus must be a bool, got {self.jack_of_diamonds_bonus!r}")
        if isinstance(self.winning_score, bool) or not isinstance(self.winning_score, int):
            raise ValueError(f"winning_score must be an int, got {self.winning_score!r}")
        if self.winning_score <= 0:
            raise ValueError(f"winning_score must be positive, got {self.winning_score}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfiguration":
        """Build a configuration from raw data; missing keys take defaults."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)


STANDARD = GameConfiguration()
WITH_JACK_BONUS = GameConfiguration(jack_of_diamonds_bonus=True)


def load_configuration(path: Optional[Union[str, Path]] = None) -> GameConfiguration:
    """Load a configuration from a JSON file, falling back to STANDARD."""
    if path is None:
        return STANDARD
    cfg_path = Path(path)
    if not cfg_path.exists():
        return STANDARD
    with cfg_path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {cfg_path} must contain a JSON object")
    return GameConfiguration.from_dict(data)
