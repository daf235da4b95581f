"""
This module provides the round state management for a Blackjack game. It uses
the state design pattern: each state's `handle` method performs the work of
that stage, notifies the interface and moves the game to the next state.

DealingState: The opening hands are dealt.
PlayersTurnState: Every player still playing makes one decision.
DealersTurnState: The dealer draws until the rules say stand.
EndRoundState: The winner is resolved and announced.
RoundOverState: Nothing left to do until a new round is started.
"""

import logging
from abc import ABC, abstractmethod

from twentyone.blackjack.decision_logger import decision_logger

logger = logging.getLogger(__name__)


class RoundStateError(Exception):
    """Raised when the round is asked to do something out of order."""

    pass


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        game.deal_in()


class PlayersTurnState(GameState):
    """
    The game state where it's the players' turn to play.
    """

    def handle(self, game):
        """
        Shows the table, then gives every player still in the round one
        decision. Moves on to the dealer once nobody is playing.
        """
        game.show_table()
        for player in game.players:
            if player.is_playing:
                player.take_turn(game.deck)

        if not any(player.is_playing for player in game.players):
            game.set_state(DealersTurnState())


class DealersTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        """
        Draws for the dealer while it is under the stand-on score. A dealer
        already at or above it draws nothing.
        """
        dealer = game.dealer
        stands_on = game.rules.dealer_stands_on
        game.io_interface.output(f"{dealer.name} plays, drawing to {stands_on}.")
        while dealer.should_hit(game.rules):
            decision_logger.log_dealer_draw(dealer.hand.score(), stands_on)
            card = game.deck.take()
            dealer.receive_card(card)
            game.io_interface.output(f"{dealer.name} draws {card}.")
            game.show_table()

        if dealer.is_busted():
            game.io_interface.output(
                f"{dealer.name} busted with {dealer.hand.score()}."
            )
        else:
            game.io_interface.output(
                f"{dealer.name} stands with {dealer.hand.score()}."
            )
        game.set_state(EndRoundState())


class EndRoundState(GameState):
    """
    The game state where the round is ending.
    """

    def handle(self, game):
        """
        Resolves the winner, announces it and records it in the stats.
        """
        result = game.rules.determine_winner(game.dealer, game.players)
        game.result = result
        game.stats.update(result)
        if result.has_winner:
            game.io_interface.output(
                f"{result.winner.name} won this game with {result.score}!"
            )
        else:
            game.io_interface.output("Nobody won this game.")
        logger.info("Round over: %s", result.outcome.value)
        game.set_state(RoundOverState())


class RoundOverState(GameState):
    """
    The round has been resolved. A new round must be started to play again.
    """

    def handle(self, game):
        raise RoundStateError("The round is over; start a new round to keep playing.")
