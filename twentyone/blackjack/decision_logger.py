"""
Logging of the hit/stand decisions made at the table.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .action import Action


@dataclass
class DecisionContext:
    """Context for a single decision point."""

    player_name: str
    hand_cards: List[str]
    score: int
    chosen_action: Action
    automated: bool
    threshold: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "player": self.player_name,
            "cards": self.hand_cards,
            "score": self.score,
            "chosen": self.chosen_action.value,
            "automated": self.automated,
            "threshold": self.threshold,
        }


class DecisionLogger:
    """Logs every decision made during a round."""

    def __init__(self, log_level=logging.NOTSET):
        self.logger = logging.getLogger("twentyone.decisions")
        # Simulations can switch the decision trace off entirely
        if os.environ.get("TWENTYONE_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        else:
            self.logger.setLevel(log_level)

        self.current_round_decisions: List[DecisionContext] = []

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def log_decision(self, context: DecisionContext):
        """Log a decision point with full context."""
        # Only store decisions if we're actually logging
        if self.logger.isEnabledFor(logging.DEBUG):
            self.current_round_decisions.append(context)
            self.logger.debug(
                "Decision for %s: %s (score=%d, threshold=%s)",
                context.player_name,
                context.hand_cards,
                context.score,
                context.threshold,
            )
        self.logger.info(
            "%s chose %s", context.player_name, context.chosen_action.value
        )

    def log_dealer_draw(self, score: int, stands_on: int):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Dealer at %d, draws below %d", score, stands_on)

    def start_round(self):
        """Forget the decisions of the previous round."""
        self.current_round_decisions = []

    def get_round_summary(self) -> Dict[str, Any]:
        """Summarise the decisions made this round."""
        hits = sum(
            1 for d in self.current_round_decisions if d.chosen_action == Action.HIT
        )
        return {
            "total_decisions": len(self.current_round_decisions),
            "hits": hits,
            "stands": len(self.current_round_decisions) - hits,
            "decisions": [d.to_dict() for d in self.current_round_decisions],
        }


# Global decision logger instance
decision_logger = DecisionLogger()
