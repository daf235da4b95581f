"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Diamonds, Hearts and Spades. Suits carry no gameplay weight.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, Ace through King. Each rank maps to a `RankValue` used for scoring.

- `FixedValue` / `DualValue`: the two shapes a `RankValue` can take. Every rank
but the Ace is worth a fixed number of points; the Ace is worth either 1 or 11.

- `Card`: An immutable (rank, suit) pair.

This module is part of the `twentyone` package.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Union


@dataclass(frozen=True)
class FixedValue:
    """A rank that is always worth the same number of points."""

    points: int


@dataclass(frozen=True)
class DualValue:
    """A rank that may be counted low or high (the Ace)."""

    low: int
    high: int


RankValue = Union[FixedValue, DualValue]


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUB = "♣"
    DIAMOND = "♦"
    HEART = "♥"
    SPADE = "♠"

    def display(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, in Ace-to-King order.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def rank_value(self) -> RankValue:
        """The value of the rank, used for scoring."""
        match self:
            case Rank.ACE:
                return DualValue(low=1, high=11)
            case Rank.TWO:
                return FixedValue(2)
            case Rank.THREE:
                return FixedValue(3)
            case Rank.FOUR:
                return FixedValue(4)
            case Rank.FIVE:
                return FixedValue(5)
            case Rank.SIX:
                return FixedValue(6)
            case Rank.SEVEN:
                return FixedValue(7)
            case Rank.EIGHT:
                return FixedValue(8)
            case Rank.NINE:
                return FixedValue(9)
            case Rank.TEN | Rank.JACK | Rank.QUEEN | Rank.KING:
                return FixedValue(10)

    def display(self) -> str:
        """The one or two character glyph for the rank."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. Cards compare and hash by value.

    >>> card = Card(Rank.ACE, Suit.SPADE)
    >>> print(card)
    [ A ♠ ]
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> RankValue:
        return self.rank.rank_value

    def display(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string in the form "[ <rank> <suit> ]".
        """
        return f"[ {self.rank.display()} {self.suit.display()} ]"

    def __repr__(self) -> str:
        return f"Card(Rank.{self.rank.name}, Suit.{self.suit.name})"

    def __str__(self) -> str:
        return self.display()
