"""
BlackjackHand: a hand that knows its blackjack score.
"""

from typing import Any, Dict, List, Tuple

from twentyone.common.card import Card, DualValue, FixedValue
from twentyone.common.hand import Hand

BUST_LIMIT = 21


class BlackjackHand(Hand):
    """A hand in the game of Blackjack with a cached score."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._cache: Dict[str, Any] = {"score": None, "soft_aces": None}

    def _invalidate_cache(self) -> None:
        self._cache.update({"score": None, "soft_aces": None})

    def add_card(self, card: Card) -> None:
        """Add a card and drop the cached score."""
        super().add_card(card)
        self._invalidate_cache()

    def _evaluate(self) -> Tuple[int, int]:
        standard = 0
        aces: List[DualValue] = []
        for card in self._cards:
            match card.value:
                case FixedValue(points=points):
                    standard += points
                case DualValue() as ace:
                    aces.append(ace)

        # Aces are resolved one at a time, in deal order, after every other card
        score = standard
        soft_aces = 0
        for ace in aces:
            if score + ace.high <= BUST_LIMIT:
                score += ace.high
                soft_aces += 1
            else:
                score += ace.low
        return score, soft_aces

    def score(self) -> int:
        """
        Calculate the hand's score.

        Non-ace cards are summed first. Each ace is then counted as 11 if that
        keeps the total at or under 21, otherwise as 1.
        """
        if self._cache["score"] is None:
            self._cache["score"], self._cache["soft_aces"] = self._evaluate()
        return self._cache["score"]

    @property
    def is_soft(self) -> bool:
        """True when at least one ace is currently counted as 11."""
        self.score()
        return self._cache["soft_aces"] > 0

    @property
    def is_busted(self) -> bool:
        return self.score() > BUST_LIMIT

    def describe(self) -> str:
        """The cards followed by the running score."""
        return f"{self.display()} ({self.score()})"

    def __repr__(self) -> str:
        return f"BlackjackHand({self._cards!r})"
