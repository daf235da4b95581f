#!/usr/bin/env python3
"""
Demo script stepping through one round at a table of computer players.

The round is driven one `play()` step at a time so each set of decisions can
be seen as it happens.
"""

import random

from twentyone.blackjack.actor import Player
from twentyone.blackjack.game import BlackjackGame
from twentyone.blackjack.strategy import ThresholdStrategy
from twentyone.common.io_interface import ConsoleIOInterface


def run_demo(seed=None):
    rng = random.Random(seed)
    io_interface = ConsoleIOInterface()
    players = [
        Player(name, io_interface, ThresholdStrategy(rng))
        for name in ("Ada", "Grace", "Linus")
    ]
    game = BlackjackGame(players, io_interface, rng=rng)

    game.start_round()
    game.deal_in()

    step = 1
    while True:
        print(f"\n--- Step {step} ---")
        if not game.play():
            break
        step += 1

    print(f"\nOutcome: {game.result.outcome.value}")
    print(f"Cards left in the deck: {game.deck.size}")


if __name__ == "__main__":
    run_demo()
