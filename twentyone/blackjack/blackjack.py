"""
This module is used to run a game of Blackjack from the command line.

It can be used to play in different modes:
- Interactive console mode (the default), where you play against computer
  players and the dealer.
- Simulation mode, where every seat is a computer player and nothing is printed
  until the session statistics at the end.
- Logging mode, where the narration of computer-only games is written to a file.

For example, `--players 3` skips the player count question, `--simulate`
runs the game silently and `--log_file` followed by a filename runs it in
logging mode. `--seed` makes the shuffles and computer decisions repeatable.
"""

import argparse
import logging
import random
from typing import List

from twentyone.blackjack.actor import Player
from twentyone.blackjack.game import BlackjackGame
from twentyone.blackjack.rules import Rules
from twentyone.blackjack.strategy import ThresholdStrategy
from twentyone.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
    SetupInputError,
)

PLAYER_COUNT_PROMPT = "How many players (including yourself)? "


def create_io_interface(args) -> IOInterface:
    """Create the IO interface based on the command line arguments."""
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    if args.simulate:
        return DummyIOInterface()
    return ConsoleIOInterface()


def create_rules(args) -> Rules:
    """Create the Rules object based on the command line arguments."""
    return Rules(
        dealer_stands_on=args.dealer_stands_on,
        max_players=args.max_players,
    )


def create_players(
    count: int, io_interface: IOInterface, rng: random.Random, human: bool
) -> List[Player]:
    """Seat `count` players. With `human`, the first seat is yours."""
    players = [Player("You", io_interface)] if human else []
    for number in range(1, count - len(players) + 1):
        players.append(
            Player(f"Computer {number}", io_interface, ThresholdStrategy(rng))
        )
    return players


def read_player_count(args, io_interface: IOInterface, rules: Rules) -> int:
    """
    Take the player count from --players or ask for it.

    :raises SetupInputError: If the answer is not a usable number.
    """
    if args.players is not None:
        count = args.players
    else:
        count = io_interface.check_numeric_response(PLAYER_COUNT_PROMPT)
    try:
        return rules.validate_player_count(count)
    except ValueError as exc:
        raise SetupInputError(str(exc)) from exc


def print_stats(report: dict):
    print("Session completed.")
    print(f"Rounds played: {report['rounds_played']:,}")
    for name, wins in sorted(report["player_wins"].items()):
        print(f"{name} wins: {wins:,}")
    print(f"Dealer wins: {report['dealer_wins']:,}")
    print(f"No winner: {report['no_winner']:,}")


def main(argv=None):
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation of the game,
    seats the players, and then plays the requested number of rounds.
    Finally, it prints out the statistics of the rounds played.
    """
    parser = argparse.ArgumentParser(description="Run a Blackjack game.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Seat only computer players and run silently.",
        default=False,
    )
    parser.add_argument(
        "--players",
        type=int,
        help="Number of players, including yourself. Asked for if not given.",
    )
    parser.add_argument(
        "--num_games", type=int, default=1, help="Number of rounds to play"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Write the narration of computer-only games to this file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for shuffling and computer decisions.",
    )
    parser.add_argument(
        "--dealer_stands_on", type=int, default=17, help="Dealer stands at this score"
    )
    parser.add_argument(
        "--max_players", type=int, default=7, help="Maximum players at the table"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Level for the engine's diagnostic logging.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        rules = create_rules(args)
    except ValueError as exc:
        parser.error(str(exc))

    io_interface = create_io_interface(args)
    rng = random.Random(args.seed)
    human = not (args.simulate or args.log_file)

    try:
        count = read_player_count(args, io_interface, rules)
    except SetupInputError as exc:
        parser.exit(status=1, message=f"Invalid player count: {exc}\n")

    io_interface.output(f"Setting up game for {count} players...")
    players = create_players(count, io_interface, rng, human)
    game = BlackjackGame(players, io_interface, rules, rng)

    for _ in range(args.num_games):
        game.play_round()

    print_stats(game.stats.report())


if __name__ == "__main__":
    main()
