"""
Trick module for Hearts.
A trick collects one play from each of the four players and resolves a winner.
"""

from typing import List, NamedTuple, Optional, TYPE_CHECKING
from hearts_bot.card import Card, Suit
from hearts_bot.exceptions import (
    CardNotInHandError,
    MustFollowSuitError,
    PlayerAlreadyPlayedError,
    TrickAlreadyCompleteError,
)

if TYPE_CHECKING:
    from hearts_bot.player import Player

PLAYS_PER_TRICK = 4


class Play(NamedTuple):
    player: "Player"
    card: Card


class Trick:
    """Represents a single trick: empty, collecting, then complete at 4 plays."""

    def __init__(self):
        self.plays: List[Play] = []

    @property
    def lead_suit(self) -> Optional[Suit]:
        """Suit of the first card played, None while the trick is empty."""
        return self.plays[0].card.suit if self.plays else None

    @property
    def is_complete(self) -> bool:
        return len(self.plays) == PLAYS_PER_TRICK

    @property
    def points(self) -> int:
        """Raw point total of the cards in the trick (never negative)."""
        return sum(play.card.points for play in self.plays)

    @property
    def cards(self) -> List[Card]:
        return [play.card for play in self.plays]

    @property
    def players(self) -> List["Player"]:
        return [play.player for play in self.plays]

    @property
    def winner(self) -> Optional["Player"]:
        """The highest card of the lead suit wins. None until complete."""
        if not self.is_complete:
            return None
        lead_suit = self.lead_suit
        following = [play for play in self.plays if play.card.suit == lead_suit]
        return max(following, key=lambda play: play.card.rank.value).player

    def has_played(self, player: "Player") -> bool:
        """Check if a specific player has already played in this trick."""
        return any(play.player == player for play in self.plays)

    def contains(self, card: Card) -> bool:
        return any(play.card == card for play in self.plays)

    def play(self, card: Card, player: "Player", hand: List[Card]):
        """
        Add a card to the trick.

        Args:
            card: The card to play
            player: The player playing the card
            hand: The player's current hand, used for validation only

        Raises:
            TrickAlreadyCompleteError: If four cards were already played
            PlayerAlreadyPlayedError: If this player already played here
            CardNotInHandError: If the card is not in the given hand
            MustFollowSuitError: If the player could follow suit but did not
        """
        if self.is_complete:
            raise TrickAlreadyCompleteError()

        if self.has_played(player):
            raise PlayerAlreadyPlayedError()

        if card not in hand:
            raise CardNotInHandError(f"Card {card} not in hand")

        lead_suit = self.lead_suit
        if lead_suit is not None and card.suit != lead_suit:
            if any(held.suit == lead_suit for held in hand):
                raise MustFollowSuitError(lead_suit)

        self.plays.append(Play(player, card))

    def __repr__(self):
        plays = ", ".join(f"{play.player.name}: {play.card}" for play in self.plays)
        winner = self.winner
        winner_str = f" | Winner: {winner.name}" if winner is not None else ""
        return f"Trick[{plays}{winner_str}]"
