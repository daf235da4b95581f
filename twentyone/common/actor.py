"""
This module contains the Actor abstract base class and a SimplePlayer concrete
class which extends from Actor.

An Actor is anyone seated at the table: it has a name, one hand of cards and
the IO interface its messages go through. Both the blackjack Player and the
Dealer are built on SimplePlayer.
"""

from abc import ABC, abstractmethod

from twentyone.common.card import Card
from twentyone.common.hand import Hand
from twentyone.common.io_interface import IOInterface


class Actor(ABC):
    """
    Abstract base class representing an actor in a card game.

    :param name: Name of the actor
    :param io_interface: Where the actor's messages are sent
    """

    def __init__(self, name: str, io_interface: IOInterface):
        self.name = name
        self.io_interface = io_interface
        self.hand = self.new_hand()

    def new_hand(self) -> Hand:
        """Create an empty hand of the kind this actor plays with."""
        return Hand()

    @abstractmethod
    def reset(self):
        """
        Reset the actor for a new round.

        :return: None
        """

    @abstractmethod
    def display_message(self, message: str):
        """
        Display a message from the actor.

        :param message: The message to display
        :return: None
        """


class SimplePlayer(Actor):
    """
    A simple player in a card game, extending from the Actor abstract base class.
    """

    def reset(self):
        """
        Gives the player an empty hand.
        """
        self.hand = self.new_hand()

    def display_message(self, message: str):
        self.io_interface.output(message)

    def receive_card(self, card: Card):
        """
        Add a new card to the player's hand.

        :param card: The card to add
        :return: None
        """
        self.hand.add_card(card)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
