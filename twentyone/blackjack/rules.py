"""
Table rules and the end-of-round winner resolution.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.actor import SimplePlayer

# Sum of a 52 card deck with aces counted as 1: 4 x (1..9) + 16 tens
DECK_LOW_POINTS = 340


class Outcome(Enum):
    PLAYER = "player"
    DEALER = "dealer"
    TIE = "tie"
    PUSH = "push"
    NOBODY = "nobody"


@dataclass(frozen=True)
class RoundResult:
    """How a round ended. `winner` is set only for PLAYER and DEALER outcomes."""

    outcome: Outcome
    winner: Optional[SimplePlayer] = None
    score: Optional[int] = None

    @property
    def has_winner(self) -> bool:
        return self.winner is not None


class Rules:
    def __init__(
        self,
        dealer_stands_on: int = 17,
        dealer_opening_cards: int = 1,
        min_players: int = 1,
        max_players: int = 7,
    ):
        if min_players < 1:
            raise ValueError("A game needs at least one player")
        if max_players < min_players:
            raise ValueError("max_players must be at least min_players")
        # Counting aces low, a seat holds at most 21 + 10 points before it
        # stops and the dealer at most 10 more than its last drawing score.
        # The whole table must fit in one deck's points.
        worst_case = max_players * (21 + 10) + (dealer_stands_on - 1 + 10)
        if worst_case > DECK_LOW_POINTS:
            raise ValueError(
                f"Too many players for a single deck: {max_players} seats could need "
                f"{worst_case} points of cards, the deck has {DECK_LOW_POINTS}"
            )

        self.dealer_stands_on = dealer_stands_on
        self.dealer_opening_cards = dealer_opening_cards
        self.min_players = min_players
        self.max_players = max_players

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "dealer_stands_on": self.dealer_stands_on,
            "dealer_opening_cards": self.dealer_opening_cards,
            "min_players": self.min_players,
            "max_players": self.max_players,
        }

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """The dealer draws while under the stand-on score, busted or not."""
        return hand.score() < self.dealer_stands_on

    def validate_player_count(self, count: int) -> int:
        if not self.min_players <= count <= self.max_players:
            raise ValueError(
                f"Player count must be between {self.min_players} and {self.max_players}, got {count}."
            )
        return count

    def determine_winner(
        self, dealer: SimplePlayer, players: Sequence[SimplePlayer]
    ) -> RoundResult:
        """
        Decide who won the round.

        Busted players are out. If every player busted the dealer wins unless
        it busted too. Otherwise the dealer wins with a higher unbusted score.
        A tie between players at the best score, or a best player level with
        the dealer, means nobody wins.
        """
        dealer_score = dealer.hand.score()
        dealer_alive = not dealer.hand.is_busted
        alive = [p for p in players if not p.hand.is_busted]

        if not alive:
            if dealer_alive:
                return RoundResult(Outcome.DEALER, dealer, dealer_score)
            return RoundResult(Outcome.NOBODY)

        best = max(p.hand.score() for p in alive)
        if dealer_alive and dealer_score > best:
            return RoundResult(Outcome.DEALER, dealer, dealer_score)

        leaders = [p for p in alive if p.hand.score() == best]
        if len(leaders) > 1:
            return RoundResult(Outcome.TIE, score=best)
        if best == dealer_score:
            return RoundResult(Outcome.PUSH, score=best)
        return RoundResult(Outcome.PLAYER, leaders[0], best)
