"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

The `Player` class represents a seat at the table. It holds one hand, a
playing/standing state and, for computer players, a `Strategy` that makes the
hit/stand call. A player without a strategy is asked through its IO interface.

The `Dealer` class shares the seat's identity and hand but never takes a turn.
Once every player has stopped, the game draws for the dealer until the rules
say to stand.

Exceptions:
    - `InvalidActionError`: Raised when a player attempts to act after standing.

This module is part of the `twentyone` package.
"""

import logging
from enum import Enum, auto
from typing import Optional

from twentyone.blackjack.action import Action
from twentyone.blackjack.decision_logger import DecisionContext, decision_logger
from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.strategy import Strategy
from twentyone.common.actor import SimplePlayer
from twentyone.common.card import Card
from twentyone.common.deck import Deck
from twentyone.common.io_interface import IOInterface

logger = logging.getLogger(__name__)


class InvalidActionError(Exception):
    """Raised when a player attempts to perform an action that is not currently valid."""

    pass


class PlayerState(Enum):
    """Turn state of a player. STANDING is terminal for the round."""

    PLAYING = auto()
    STANDING = auto()


class Player(SimplePlayer):
    """A player in a game of Blackjack."""

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        strategy: Optional[Strategy] = None,
    ):
        """Creates a new player. Passing a strategy makes the player automated."""
        super().__init__(name, io_interface)
        self.strategy = strategy
        self._automated = strategy is not None
        self.state = PlayerState.PLAYING

    def new_hand(self) -> BlackjackHand:
        return BlackjackHand()

    @property
    def is_automated(self) -> bool:
        return self._automated

    @property
    def is_playing(self) -> bool:
        return self.state is PlayerState.PLAYING

    @property
    def valid_actions(self) -> list[Action]:
        if not self.is_playing:
            return []
        return [Action.HIT, Action.STAND]

    def is_busted(self) -> bool:
        return self.hand.is_busted

    def decide_action(self) -> Action:
        """Ask the strategy, or the person behind the IO interface, what to do."""
        if self.strategy is not None:
            action = self.strategy.decide_action(self)
        else:
            action = self.io_interface.get_player_action(self, self.valid_actions)

        decision_logger.log_decision(
            DecisionContext(
                player_name=self.name,
                hand_cards=[card.display() for card in self.hand],
                score=self.hand.score(),
                chosen_action=action,
                automated=self.is_automated,
                threshold=self.strategy.last_threshold if self.strategy else None,
            )
        )
        return action

    def stand(self):
        """Player chooses to stand."""
        self.state = PlayerState.STANDING

    def hit(self, card: Card):
        """Take a card. Going over 21 ends the player's round."""
        self.receive_card(card)
        if self.is_busted():
            logger.debug("%s busted with %d", self.name, self.hand.score())
            self.display_message(
                f"This hand has busted with {self.hand.score()}. "
                f"{self.name} is out of this round."
            )
            self.state = PlayerState.STANDING

    def take_turn(self, deck: Deck):
        """
        Play one decision: stand, or draw exactly one card from the deck.

        :raises InvalidActionError: If the player is already standing.
        """
        if not self.is_playing:
            raise InvalidActionError(f"{self.name} is standing and cannot play.")

        if self.decide_action() is Action.STAND:
            self.display_message(f"{self.name} decided to stand.")
            self.stand()
            return

        self.display_message(f"{self.name} decided to hit.")
        self.hit(deck.take())

    def reset(self):
        """Empty hand, back to playing."""
        super().reset()
        self.state = PlayerState.PLAYING


class Dealer(SimplePlayer):
    """The dealer in a game of Blackjack."""

    def new_hand(self) -> BlackjackHand:
        return BlackjackHand()

    def is_busted(self) -> bool:
        return self.hand.is_busted

    def should_hit(self, rules) -> bool:
        """Determine if dealer should hit."""
        return rules.should_dealer_hit(self.hand)
