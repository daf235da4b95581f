"""
The blackjack table: one deck, a dealer and the players seated at it.
"""

import logging
import random
from typing import Iterable, Optional

from twentyone.blackjack.actor import Dealer, Player
from twentyone.blackjack.decision_logger import decision_logger
from twentyone.blackjack.rules import RoundResult, Rules
from twentyone.blackjack.state import (
    DealersTurnState,
    DealingState,
    EndRoundState,
    GameState,
    PlayersTurnState,
    RoundOverState,
    RoundStateError,
)
from twentyone.blackjack.stats import SessionStats
from twentyone.common.deck import Deck
from twentyone.common.io_interface import IOInterface

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    A class to represent a game of Blackjack.

    Attributes
    ----------
    players : list
        Players seated at the table, in turn order.
    io_interface : IOInterface
        Where the round's narration is sent.
    dealer : Dealer
        Dealer for the game.
    rules : Rules
        Object defining the table rules.
    deck : Deck
        The single deck the round is dealt from.
    current_state : GameState
        Current state of the round.
    result : RoundResult
        Outcome of the last finished round, if any.
    stats : SessionStats
        Results across the rounds played at this table.
    """

    def __init__(
        self,
        players: Iterable[Player],
        io_interface: IOInterface,
        rules: Optional[Rules] = None,
        rng: Optional[random.Random] = None,
    ):
        self.players = list(players)
        self.io_interface = io_interface
        self.rules = rules if rules is not None else Rules()
        self.rng = rng if rng is not None else random.Random()
        self.dealer = Dealer("Dealer", io_interface)
        self.deck = Deck.new(self.rng)
        self._deck_fresh = True
        self.current_state: GameState = DealingState()
        self.result: Optional[RoundResult] = None
        self.stats = SessionStats()

    def set_state(self, state: GameState):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state

    def add_player(self, player: Player):
        """Seat a player before the cards are dealt."""
        if not isinstance(self.current_state, DealingState):
            raise RoundStateError("Players can only join before the deal.")
        if len(self.players) >= self.rules.max_players:
            raise ValueError(f"The table is full ({self.rules.max_players} seats).")
        self.players.append(player)
        self.io_interface.output(f"{player.name} has joined the game.")

    def start_round(self):
        """
        Clear every hand and get ready to deal. A deck that has been dealt
        from is rebuilt and reshuffled first.
        """
        self.rules.validate_player_count(len(self.players))
        if not self._deck_fresh:
            self.deck.reset()
            self._deck_fresh = True
        for player in self.players:
            player.reset()
        self.dealer.reset()
        self.result = None
        decision_logger.start_round()
        self.set_state(DealingState())

    def deal_in(self):
        """
        Deal two cards to each player, then the dealer's opening card.

        :raises RoundStateError: If the cards for this round were already dealt.
        """
        if not isinstance(self.current_state, DealingState):
            raise RoundStateError("The cards for this round have already been dealt.")
        self.rules.validate_player_count(len(self.players))
        self._deck_fresh = False

        for player in self.players:
            for card in self.deck.deal_cards():
                player.receive_card(card)
        for _ in range(self.rules.dealer_opening_cards):
            self.dealer.receive_card(self.deck.take())

        logger.debug("Dealt in %d players, %d cards left", len(self.players), self.deck.size)
        self.set_state(PlayersTurnState())

    def play(self) -> bool:
        """
        Play one step of the round.

        Every player still playing makes one decision. While anyone is still
        playing this returns True. Once nobody is, the dealer draws, the
        winner is announced and this returns False.

        :raises RoundStateError: If the round has already finished.
        """
        if isinstance(self.current_state, DealingState):
            self.current_state.handle(self)

        self.current_state.handle(self)
        while isinstance(self.current_state, (DealersTurnState, EndRoundState)):
            self.current_state.handle(self)

        return not isinstance(self.current_state, RoundOverState)

    def play_round(self) -> RoundResult:
        """Play a fresh round to the end and return its result."""
        self.start_round()
        self.deal_in()
        while self.play():
            pass
        return self.result

    @property
    def is_round_over(self) -> bool:
        return isinstance(self.current_state, RoundOverState)

    def show_table(self):
        """Send a snapshot of every hand at the table."""
        for player in self.players:
            status = "" if player.is_playing else " - standing"
            self.io_interface.output(
                f"{player.name}: {player.hand.describe()}{status}"
            )
        self.io_interface.output(f"{self.dealer.name}: {self.dealer.hand.describe()}")
