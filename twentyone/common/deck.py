"""
This module contains the Deck class, which represents a single 52 card deck.

>>> deck = Deck.new(random.Random(7))
>>> deck.size
52
>>> card = deck.take()
>>> deck.size
51
"""

import random
from typing import List, Optional

from twentyone.common.card import Card, Rank, Suit


class DeckExhaustedError(IndexError):
    """Raised when a card is drawn from an empty deck."""

    pass


# Within a rank the suits always come in this order
SUIT_ORDER = (Suit.DIAMOND, Suit.CLUB, Suit.HEART, Suit.SPADE)


class Deck:
    """
    A class representing a deck of cards. The top of the deck is the end of
    the card list.
    """

    # Precompute the ordered deck
    _ordered_deck = [Card(rank, suit) for rank in Rank for suit in SUIT_ORDER]

    def __init__(
        self,
        cards: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the ordered 52 card deck is used.
        :param rng: Random source used for shuffling. A fresh, environment
                    seeded generator is created when omitted.
        """
        self.rng = rng if rng is not None else random.Random()
        if cards is None:
            self.cards: List[Card] = self.build_ordered()
        else:
            self.cards = cards.copy()

    @classmethod
    def build_ordered(cls) -> List[Card]:
        """
        Construct the canonical deck, Ace to King, each rank in suit order
        Diamond, Club, Heart, Spade.

        :return: A list of the 52 Card instances.
        """
        return cls._ordered_deck.copy()

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> "Deck":
        """Build an ordered deck and shuffle it, ready to play."""
        return cls(rng=rng).shuffle()

    def shuffle(self) -> "Deck":
        """Shuffle the cards in place."""
        self.rng.shuffle(self.cards)
        return self

    def take(self) -> Card:
        """
        Remove and return the top card.

        :raises DeckExhaustedError: If the deck has no cards left.
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot draw from an empty deck.")
        return self.cards.pop()

    def deal_cards(self) -> List[Card]:
        """Draw the two card opening hand for a player."""
        return [self.take(), self.take()]

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def reset(self) -> "Deck":
        """
        Rebuild the full deck and shuffle it.
        """
        self.cards = self.build_ordered()
        return self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
