import math
import random
from abc import ABC, abstractmethod
from typing import Optional

from twentyone.blackjack.action import Action


class Strategy(ABC):
    @abstractmethod
    def decide_action(self, player) -> Action:
        pass

    @property
    def last_threshold(self) -> Optional[int]:
        """The cut-off used for the most recent decision, if the strategy has one."""
        return None


class ThresholdStrategy(Strategy):
    """
    The computer player's rule: draw a fresh cut-off between 15 and 19 for
    every decision and stand once the hand has reached it.
    """

    BASE = 15
    SPREAD = 4

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._last_threshold: Optional[int] = None

    def draw_threshold(self) -> int:
        # rng.random() is in [0, 1), so a draw of exactly 0 gives the base value
        return math.ceil(self.rng.random() * self.SPREAD) + self.BASE

    @property
    def last_threshold(self) -> Optional[int]:
        return self._last_threshold

    def decide_action(self, player) -> Action:
        self._last_threshold = self.draw_threshold()
        if player.hand.score() >= self._last_threshold:
            return Action.STAND
        return Action.HIT

