"""
This module contains the SessionStats class which is responsible for
tracking the results of the rounds played in one session.
"""

from collections import Counter

from twentyone.blackjack.rules import Outcome, RoundResult


class SessionStats:
    """
    A class that holds the statistics of the session.
    """

    def __init__(self):
        self.rounds_played = 0
        self.dealer_wins = 0
        self.no_winner = 0
        self.player_wins = Counter()

    def update(self, result: RoundResult):
        """Updates the statistics with the result of a finished round."""
        self.rounds_played += 1
        if result.outcome is Outcome.DEALER:
            self.dealer_wins += 1
        elif result.outcome is Outcome.PLAYER:
            self.player_wins[result.winner.name] += 1
        else:
            self.no_winner += 1

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "rounds_played": self.rounds_played,
            "player_wins": dict(self.player_wins),
            "dealer_wins": self.dealer_wins,
            "no_winner": self.no_winner,
        }
