"""
This module contains the IOInterface abstract base class and its implementations.

An IO interface is the game's only channel to the outside world: it supplies
typed-in decisions and receives the narration of the round.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import aiofiles

from twentyone.blackjack.action import Action

if TYPE_CHECKING:
    from twentyone.common.actor import Actor


class SetupInputError(ValueError):
    """Raised when a numeric setup answer cannot be used."""

    pass


def parse_action(text: str, valid_actions: list[Action]) -> Action | None:
    """Match a typed token against the valid actions, ignoring case and padding."""
    token = text.strip().lower()
    for action in valid_actions:
        if token == action.value:
            return action
    return None


def retry_message(valid_actions: list[Action]) -> str:
    return f"Please type one of: {', '.join(a.value for a in valid_actions)}."


def parse_count(text: str) -> int:
    """
    Parse an unsigned integer answer.

    :raises SetupInputError: If the text is not a non-negative whole number.
    """
    token = text.strip()
    if not token.isdecimal():
        raise SetupInputError(f"Expected a whole number, got {token!r}.")
    try:
        return int(token)
    except ValueError as exc:
        raise SetupInputError(f"Expected a whole number, got {token!r}.") from exc


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        """Retrieve an action from a player."""
        pass

    @abstractmethod
    def check_numeric_response(self, ctx: str) -> int:
        """Check if a response is numeric and return the integer value."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        if valid_actions:
            return valid_actions[0]
        raise ValueError("No valid actions available.")

    def check_numeric_response(self, ctx: str) -> int:
        """Always returns 1 for simulation."""
        return 1


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays scripted input.

    Typed lines queued with `add_input` feed both `input` and
    `get_player_action`, so an invalid token followed by a valid one exercises
    the same retry path a console user would hit.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise ValueError("No more input left in TestIOInterface queue.")

    def add_input(self, *lines: str):
        """Queue typed lines."""
        self.input_responses.extend(lines)

    def add_player_action(self, action: Action):
        """Queue an action as if it had been typed."""
        self.input_responses.append(action.value)

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        while True:
            action = parse_action(
                self.input(f"{player.name}, hit or stand? "), valid_actions
            )
            if action is not None:
                return action
            self.output(retry_message(valid_actions))

    def check_numeric_response(self, ctx: str) -> int:
        return parse_count(self.input(ctx))


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    An unrecognised hit/stand answer is asked again for as long as it takes.
    A bad numeric answer is not retried.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        while True:
            action = parse_action(
                self.input(f"{player.name}, hit or stand? "), valid_actions
            )
            if action is not None:
                return action
            self.output(retry_message(valid_actions))

    def check_numeric_response(self, ctx: str) -> int:
        return parse_count(self.input(ctx))


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Input is not available; players driven through this interface must be
    automated.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        """Fall back to standing; there is nobody to ask."""
        self.output(f"[ACTION PROMPT] {player.name}")
        return Action.STAND if Action.STAND in valid_actions else valid_actions[0]

    def check_numeric_response(self, ctx: str) -> int:
        """Always returns 1 for logging interface."""
        self.output(f"[NUMERIC PROMPT] {ctx}")
        return 1

    async def output_async(self, message: str) -> None:
        """Async version of output."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
