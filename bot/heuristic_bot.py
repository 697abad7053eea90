"""
Heuristic bot implementation for Hearts.
Uses rule-based strategy to avoid taking points.
"""

import random
from typing import List, Optional
from hearts_bot.card import Card, Rank, Suit, QUEEN_OF_SPADES
from hearts_bot.deck import get_cards_by_suit
from hearts_bot.player import BotInterface, PassedCards
from hearts_bot.rules import PASS_COUNT, TrickContext


class HeuristicBot(BotInterface):
    """Rule-based bot: dump dangerous cards, play low, discard points when void."""

    def __init__(self, name: str = "HeuristicBot", rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def choose_cards_to_pass(self, hand: List[Card]) -> PassedCards:
        """Pass the Queen of Spades, then high hearts, then high spades, then high cards."""
        if len(hand) < PASS_COUNT:
            raise ValueError(f"Need at least {PASS_COUNT} cards to pass, have {len(hand)}")
        ranked = sorted(hand, key=self._pass_priority)
        return PassedCards(*ranked[:PASS_COUNT])

    def _pass_priority(self, card: Card):
        if card == QUEEN_OF_SPADES:
            return (0, 0)
        if card.suit == Suit.HEARTS:
            return (1, -card.rank.value)
        if card.suit == Suit.SPADES and card.rank.value >= Rank.KING.value:
            return (2, -card.rank.value)
        return (3, -card.rank.value)

    def choose_card(self, context: TrickContext) -> Card:
        """Choose which legal card to play."""
        legal = context.legal_moves()
        if not legal:
            raise ValueError("No valid plays available")

        if len(legal) == 1:
            return legal[0]

        if context.is_leading:
            return self._choose_lead_card(legal)

        if any(card.suit == context.lead_suit for card in legal):
            return self._choose_follow_card(legal, context)

        return self._choose_discard(legal)

    def _choose_lead_card(self, legal: List[Card]) -> Card:
        """Lead the lowest card that carries no points."""
        safe = [card for card in legal if not card.is_point_card]
        return _lowest(safe or legal)

    def _choose_follow_card(self, legal: List[Card], context: TrickContext) -> Card:
        return _lowest(legal)

    def _choose_discard(self, legal: List[Card]) -> Card:
        """Void in the lead suit: unload the Queen, then the highest heart, then the highest card."""
        if QUEEN_OF_SPADES in legal:
            return QUEEN_OF_SPADES
        hearts = [card for card in legal if card.suit == Suit.HEARTS]
        if hearts:
            return _highest(hearts)
        return _highest(legal)

    def __str__(self):
        return self.name


class AdvancedHeuristicBot(HeuristicBot):
    """Stronger heuristics: void a short suit when passing and duck under the winning card."""

    DANGER_RANK = Rank.JACK

    def __init__(self, name: str = "AdvancedHeuristicBot", rng: Optional[random.Random] = None):
        super().__init__(name, rng)

    def choose_cards_to_pass(self, hand: List[Card]) -> PassedCards:
        """
        Try to void the shortest suit of three cards or fewer, then fill with danger cards.

        Args:
            hand: Current 13-card hand

        Returns:
            The three distinct cards to pass
        """
        if len(hand) < PASS_COUNT:
            raise ValueError(f"Need at least {PASS_COUNT} cards to pass, have {len(hand)}")

        chosen: List[Card] = []
        short_suit = self._shortest_suit(hand)
        if short_suit is not None:
            chosen.extend(card for card in hand if card.suit == short_suit)

        for card in sorted(hand, key=self._danger_priority):
            if len(chosen) == PASS_COUNT:
                break
            if card not in chosen:
                chosen.append(card)

        return PassedCards(*chosen[:PASS_COUNT])

    def _shortest_suit(self, hand: List[Card]) -> Optional[Suit]:
        """Shortest held suit with at most three cards; ties go to suit order."""
        by_suit = get_cards_by_suit(hand)
        candidates = [suit for suit in Suit if 0 < len(by_suit.get(suit, [])) <= PASS_COUNT]
        if not candidates:
            return None
        return min(candidates, key=lambda suit: len(by_suit[suit]))

    def _danger_priority(self, card: Card):
        if card == QUEEN_OF_SPADES:
            return (0, 0)
        if card.suit == Suit.HEARTS and card.rank.value >= self.DANGER_RANK.value:
            return (1, -card.rank.value)
        if card.suit == Suit.SPADES and card.rank.value >= self.DANGER_RANK.value:
            return (2, -card.rank.value)
        return (3, -card.rank.value)

    def _choose_lead_card(self, legal: List[Card]) -> Card:
        """Lead a middling card from the longest suit to keep control without winning big."""
        by_suit = get_cards_by_suit(legal)
        longest = max(Suit, key=lambda suit: len(by_suit.get(suit, [])))
        in_suit = by_suit.get(longest, [])
        if not in_suit:
            return _lowest(legal)
        if len(in_suit) >= 3:
            return in_suit[len(in_suit) // 2]
        return in_suit[0]

    def _choose_follow_card(self, legal: List[Card], context: TrickContext) -> Card:
        """Duck under the current winner when possible."""
        lead_suit = context.lead_suit
        following = sorted((card for card in legal if card.suit == lead_suit),
                           key=lambda c: c.rank.value)
        winning_rank = max(card.rank.value for card in context.current_trick.cards
                           if card.suit == lead_suit)

        ducks = [card for card in following if card.rank.value < winning_rank]
        if ducks:
            return ducks[-1]

        # Forced to win: take it cheaply if there are points, otherwise shed a middle card
        if context.current_trick.points > 0:
            return following[0]
        if len(following) >= 3:
            return following[len(following) // 2]
        return following[0]


def _lowest(cards: List[Card]) -> Card:
    return min(cards, key=lambda c: c.rank.value)


def _highest(cards: List[Card]) -> Card:
    return max(cards, key=lambda c: c.rank.value)
