"""
Exception hierarchy for Hearts rule violations.

Every error here is raised synchronously when a play is rejected and leaves
the trick, hands and scores untouched. They subclass ValueError so callers
that only care about "illegal move" can keep catching that.
"""

from hearts_bot.card import Suit


class HeartsError(ValueError):
    """Base exception for rejected plays."""

    def __repr__(self):
        return f"{self.__class__.__name__}({self.args})"


class TrickError(HeartsError):
    """A play rejected by the trick itself."""


class GameError(HeartsError):
    """A play rejected by the game orchestrator."""


class TrickAlreadyCompleteError(TrickError):
    """The trick already holds four plays."""

    def __init__(self, message: str = "Trick is already complete"):
        super().__init__(message)


class PlayerAlreadyPlayedError(TrickError):
    """The player already has a card in this trick."""

    def __init__(self, message: str = "Player has already played in this trick"):
        super().__init__(message)


class CardNotInHandError(TrickError, GameError):
    """The card is not held by the player. Raised by both Trick and Game."""

    def __init__(self, message: str = "Card is not in the player's hand"):
        super().__init__(message)


class MustFollowSuitError(TrickError):
    """The player holds the lead suit but played something else."""

    def __init__(self, required_suit: Suit):
        self.required_suit = required_suit
        super().__init__(f"Must follow suit: {required_suit.name}")


class NotPlayersTurnError(GameError):
    def __init__(self, message: str = "It is not this player's turn"):
        super().__init__(message)


class HandCompleteError(GameError):
    def __init__(self, message: str = "All 13 tricks of this hand have been played"):
        super().__init__(message)


class MustLeadWithTwoOfClubsError(GameError):
    def __init__(self, message: str = "The first trick must be led with the Two of Clubs"):
        super().__init__(message)


class CannotPlayPointsOnFirstTrickError(GameError):
    def __init__(self, message: str = "Point cards cannot be played on the first trick"):
        super().__init__(message)


class HeartsNotBrokenError(GameError):
    def __init__(self, message: str = "Hearts cannot be led until hearts are broken"):
        super().__init__(message)
