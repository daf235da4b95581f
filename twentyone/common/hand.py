"""
This module contains classes to represent a hand of cards in a card game.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
A hand keeps its cards in the order they were dealt and only ever grows.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""

from abc import ABC
from typing import Iterator, Tuple

from twentyone.common.card import Card


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    Subclasses should override the __repr__ and __str__ methods to provide a string representation of the hand.
    """

    def __init__(self):
        self._cards = []

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Returns the cards in the hand, oldest first."""
        return tuple(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.
    """

    def display(self) -> str:
        """
        Returns the display strings of the cards joined by single spaces.
        """
        return " ".join(card.display() for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"

    def __str__(self) -> str:
        return self.display()
