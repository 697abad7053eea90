"""
Main game module for Hearts.
Manages dealing, the card exchange, trick play, hand scoring and game end.
"""

import random
from typing import Dict, List, Optional
from hearts_bot.card import Card, Rank, Suit, JACK_OF_DIAMONDS, QUEEN_OF_SPADES, TWO_OF_CLUBS
from hearts_bot.config import GameConfiguration, STANDARD
from hearts_bot.deck import Deck
from hearts_bot.exceptions import (
    CannotPlayPointsOnFirstTrickError,
    CardNotInHandError,
    HandCompleteError,
    HeartsNotBrokenError,
    MustLeadWithTwoOfClubsError,
    NotPlayersTurnError,
)
from hearts_bot.player import BotInterface, PassedCards, Player, make_bot_players
from hearts_bot.rules import (
    JACK_OF_DIAMONDS_BONUS,
    MOON_SHOT_PENALTY,
    NUM_PLAYERS,
    TOTAL_CARDS,
    TRICKS_PER_HAND,
    ExchangeDirection,
    TrickContext,
    exchange_direction_for,
    only_hearts,
    only_point_cards,
)
from hearts_bot.trick import Trick
from hearts_bot.utils import GameLogger, format_trick, log_game_state

ALL_HEARTS = frozenset(Card(Suit.HEARTS, rank) for rank in Rank)
MOON_CARDS = ALL_HEARTS | {QUEEN_OF_SPADES}


class HeartsGame:
    """Main game controller for Hearts."""

    def __init__(self, players: Optional[List[Player]] = None,
                 configuration: GameConfiguration = STANDARD,
                 rng: Optional[random.Random] = None,
                 strategies: Optional[Dict[str, BotInterface]] = None,
                 logger: Optional[GameLogger] = None):
        if players is None:
            players = make_bot_players()
        if len(players) != NUM_PLAYERS:
            raise ValueError("Hearts requires exactly 4 players")
        if len(set(players)) != NUM_PLAYERS:
            raise ValueError("Each player may only take one seat")

        self.players = list(players)
        self.configuration = configuration
        self.rng = rng or random.Random()
        self.logger = logger or GameLogger()
        # bot strategies import the engine modules, so resolve them late
        from bot import make_strategy

        self.strategies: Dict[str, BotInterface] = dict(strategies or {})
        for player in self.players:
            if player.player_id not in self.strategies and player.player_type.is_bot:
                self.strategies[player.player_id] = make_strategy(player.player_type.difficulty, rng=self.rng)

        self.deck = Deck(self.rng)
        self.round_number = 0
        self.current_trick = Trick()
        self.completed_tricks: List[Trick] = []
        self.hearts_broken = False
        self.current_player_index = 0
        self.last_exchange: Dict[str, PassedCards] = {}

        self.logger.log_game_start([p.name for p in self.players], configuration.to_dict())
        self.start_new_hand()

    # Seating

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def leader(self) -> Optional[Player]:
        """The player holding the Two of Clubs, if anyone still does."""
        for player in self.players:
            if TWO_OF_CLUBS in player.hand:
                return player
        return None

    def seat_of(self, player: Player) -> int:
        try:
            return self.players.index(player)
        except ValueError:
            raise ValueError(f"{player.name} is not seated in this game") from None

    def get_opponent(self, player: Player, direction: ExchangeDirection) -> Player:
        """Get the player seated at the given direction from a player."""
        if direction == ExchangeDirection.NONE:
            raise ValueError("No opponent in direction NONE")
        return self.players[(self.seat_of(player) + direction.offset) % NUM_PLAYERS]

    @property
    def exchange_direction(self) -> ExchangeDirection:
        return exchange_direction_for(self.round_number)

    # Hand lifecycle

    def deal(self):
        """Shuffle a fresh deck and deal 13 cards to each seat, round-robin."""
        self.deck = Deck(self.rng)
        self.deck.shuffle()
        hands = self.deck.deal_round(NUM_PLAYERS)

        for seat, player in enumerate(self.players):
            player.reset_hand()
            player.receive_cards(hands[seat])

        dealt = [card for player in self.players for card in player.hand]
        assert len(set(dealt)) == TOTAL_CARDS, "Deal produced duplicate cards"

    def exchange_cards(self) -> Dict[str, PassedCards]:
        """
        Pass three cards to the player in this hand's exchange direction.

        Every selection is made from the pre-exchange hands before any hand
        is changed; then all players pick, then all players receive.

        Returns:
            Mapping of player_id to the cards that player passed
        """
        direction = self.exchange_direction
        if direction == ExchangeDirection.NONE:
            self.last_exchange = {}
            return {}

        selections: Dict[str, PassedCards] = {}
        for player in self.players:
            strategy = self._strategy_for(player)
            selections[player.player_id] = strategy.choose_cards_to_pass(list(player.hand))

        for player in self.players:
            player.pick_cards(selections[player.player_id])

        for player in self.players:
            target = self.get_opponent(player, direction)
            passed = selections[player.player_id]
            target.accept_exchange(passed)
            self.logger.log_exchange(player.name, target.name, passed)

        self.last_exchange = selections
        return selections

    def start_new_hand(self):
        """Clear hands, deal, exchange, and hand the lead to the Two of Clubs holder."""
        self.logger.log_hand_start(self.round_number, self.exchange_direction.name)

        self.deal()
        self.exchange_cards()

        self.hearts_broken = False
        self.completed_tricks = []
        self.current_trick = Trick()

        leader = self.leader
        assert leader is not None, "No player holds the Two of Clubs after the deal"
        self.current_player_index = self.seat_of(leader)

        for player in self.players:
            self.logger.log_hand(player.name, player.hand)

    @property
    def is_first_trick(self) -> bool:
        return not self.completed_tricks

    @property
    def is_hand_complete(self) -> bool:
        return len(self.completed_tricks) >= TRICKS_PER_HAND

    # Playing

    def trick_context(self, player: Player) -> TrickContext:
        return TrickContext(
            hand=list(player.hand),
            current_trick=self.current_trick,
            hearts_broken=self.hearts_broken,
            is_first_trick=self.is_first_trick,
        )

    def play_card(self, card: Card, player: Player):
        """
        Play a card for a player, enforcing every Hearts rule.

        All checks run before any state changes, so a rejected play leaves
        the game exactly as it was.

        Raises:
            NotPlayersTurnError, HandCompleteError, CardNotInHandError,
            MustLeadWithTwoOfClubsError, CannotPlayPointsOnFirstTrickError,
            HeartsNotBrokenError, MustFollowSuitError
        """
        if player != self.current_player:
            raise NotPlayersTurnError(f"It is {self.current_player.name}'s turn, not {player.name}'s")

        if self.is_hand_complete:
            raise HandCompleteError()

        hand = self.current_player.hand
        if card not in hand:
            raise CardNotInHandError(f"Card {card} not in {player.name}'s hand")

        is_leading = not self.current_trick.plays

        if self.is_first_trick:
            if is_leading and card != TWO_OF_CLUBS:
                raise MustLeadWithTwoOfClubsError()
            if card.is_point_card and not only_point_cards(hand):
                raise CannotPlayPointsOnFirstTrickError()

        if is_leading and card.suit == Suit.HEARTS:
            if not self.hearts_broken and not only_hearts(hand):
                raise HeartsNotBrokenError()

        self.current_trick.play(card, self.current_player, hand)

        self.current_player.play_card(card)
        if card.suit == Suit.HEARTS:
            self.hearts_broken = True
        self.logger.log_card_play(self.current_player.name, card, format_trick(self.current_trick))

        if self.current_trick.is_complete:
            self._complete_trick()
        else:
            self.current_player_index = (self.current_player_index + 1) % NUM_PLAYERS

    def _complete_trick(self):
        """Credit the finished trick to its winner, who leads the next one."""
        trick = self.current_trick
        winner = trick.winner
        assert winner is not None

        points = self.trick_points(trick)
        winner.add_round_points(points)
        self.completed_tricks.append(trick)
        self.current_trick = Trick()
        self.current_player_index = self.seat_of(winner)

        self.logger.log_trick_winner(winner.name, trick.cards, points)

    def trick_points(self, trick: Trick) -> int:
        """Points credited to a trick's winner, including the J♦ bonus when enabled."""
        points = trick.points
        if self.configuration.jack_of_diamonds_bonus and trick.contains(JACK_OF_DIAMONDS):
            points += JACK_OF_DIAMONDS_BONUS
        return points

    # Scoring

    def captured_cards(self, player: Player) -> List[Card]:
        """Cards from this hand's completed tricks that the player won."""
        captured = []
        for trick in self.completed_tricks:
            if trick.winner == player:
                captured.extend(trick.cards)
        return captured

    def moon_shooter(self) -> Optional[Player]:
        """The player who captured every heart and the Queen of Spades, if any."""
        for player in self.players:
            if MOON_CARDS.issubset(self.captured_cards(player)):
                return player
        return None

    def end_hand(self) -> Dict[str, int]:
        """
        Move hand scores into total scores and advance the round number.

        A moon shot is detected from captured cards, not from point totals,
        since the J♦ bonus changes the shooter's total.

        Returns:
            Mapping of player_id to the points added to their total
        """
        added: Dict[str, int] = {}
        shooter = self.moon_shooter()

        if shooter is not None:
            self.logger.log_moon_shot(shooter.name)
            for player in self.players:
                if player == shooter:
                    jack_captured = JACK_OF_DIAMONDS in self.captured_cards(player)
                    bonus = self.configuration.jack_of_diamonds_bonus and jack_captured
                    added[player.player_id] = JACK_OF_DIAMONDS_BONUS if bonus else 0
                else:
                    added[player.player_id] = MOON_SHOT_PENALTY
        else:
            for player in self.players:
                added[player.player_id] = player.round_score

        for player in self.players:
            player.total_score += added[player.player_id]
            player.round_score = 0

        self.logger.log_hand_end(self.round_number,
                                 {p.name: added[p.player_id] for p in self.players}, self.players)
        self.round_number += 1
        log_game_state(self.get_game_state(), self.logger.logger)
        return added

    @property
    def is_game_over(self) -> bool:
        return any(p.total_score >= self.configuration.winning_score for p in self.players)

    @property
    def game_winner(self) -> Optional[Player]:
        """Lowest total score once the game is over; ties go to the lower seat."""
        if not self.is_game_over:
            return None
        return min(self.players, key=lambda p: p.total_score)

    def get_final_scores(self) -> Dict[str, int]:
        return {p.player_id: p.total_score for p in self.players}

    # Bot driving loop

    def _strategy_for(self, player: Player) -> BotInterface:
        strategy = self.strategies.get(player.player_id)
        if strategy is None:
            raise ValueError(f"{player.name} has no play-selection strategy")
        return strategy

    def select_card_for_bot_play(self, player: Player) -> Card:
        """Ask the player's strategy for a card; the engine still validates it."""
        return self._strategy_for(player).choose_card(self.trick_context(player))

    def play_complete_trick(self) -> Player:
        """
        Play strategy-selected cards until the current trick completes.

        Returns:
            The trick winner, who now leads
        """
        if self.is_hand_complete:
            raise HandCompleteError()

        tricks_before = len(self.completed_tricks)
        while len(self.completed_tricks) == tricks_before:
            player = self.current_player
            self.play_card(self.select_card_for_bot_play(player), player)
        return self.current_player

    def play_complete_hand(self) -> Dict[str, int]:
        """Play the remaining tricks of the hand and score it."""
        while not self.is_hand_complete:
            self.play_complete_trick()
        return self.end_hand()

    def play_complete_game(self) -> Player:
        """
        Play hands until someone reaches the winning score.

        Returns:
            The winning player
        """
        while not self.is_game_over:
            self.play_complete_hand()
            if not self.is_game_over:
                self.start_new_hand()

        winner = self.game_winner
        self.logger.log_game_end(winner.name, self.players)
        return winner

    def get_game_state(self) -> Dict:
        """Get current game state for logging/display."""
        return {
            'round_number': self.round_number,
            'exchange_direction': self.exchange_direction.name,
            'hearts_broken': self.hearts_broken,
            'tricks_completed': len(self.completed_tricks),
            'current_player': self.current_player.name,
            'current_trick': [str(card) for card in self.current_trick.cards],
            'round_scores': {p.name: p.round_score for p in self.players},
            'total_scores': {p.name: p.total_score for p in self.players},
            'game_over': self.is_game_over,
        }
