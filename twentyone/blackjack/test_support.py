"""
Test support helpers: hands and decks with a known order of cards, and a
strategy that replays a fixed list of decisions.
"""

import random
from itertools import cycle
from typing import Iterable, List

from .action import Action
from .hand import BlackjackHand
from .strategy import Strategy
from ..common.card import Card, Rank, Suit
from ..common.deck import Deck


def cards_of(*ranks: Rank) -> List[Card]:
    """Cards for the given ranks, with suits cycled so that no card repeats."""
    suits = cycle(Suit)
    return [Card(rank, next(suits)) for rank in ranks]


def hand_of(*ranks: Rank) -> BlackjackHand:
    hand = BlackjackHand()
    for card in cards_of(*ranks):
        hand.add_card(card)
    return hand


def stacked_deck(cards: Iterable[Card]) -> Deck:
    """A deck that deals `cards` in the order given."""
    return Deck(list(reversed(list(cards))), rng=random.Random(0))


def seat(actor, *ranks: Rank):
    """Deal the given ranks to an actor and return it."""
    for card in cards_of(*ranks):
        actor.receive_card(card)
    return actor


class ScriptedStrategy(Strategy):
    """Replays a fixed list of decisions, then stands."""

    __test__ = False

    def __init__(self, actions: Iterable[Action]):
        self.actions = list(actions)
        self.decisions = 0

    def decide_action(self, player) -> Action:
        self.decisions += 1
        if self.actions:
            return self.actions.pop(0)
        return Action.STAND
