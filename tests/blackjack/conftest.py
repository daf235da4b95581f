"""
Pytest configuration and fixtures for blackjack tests.
"""

import random

import pytest

from twentyone.blackjack.actor import Dealer, Player
from twentyone.blackjack.decision_logger import decision_logger
from twentyone.blackjack.test_support import seat
from twentyone.common.io_interface import TestIOInterface


@pytest.fixture(autouse=True)
def reset_decision_logger():
    """Each test starts with an empty decision history."""
    decision_logger.start_round()
    yield
    decision_logger.start_round()


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def dealer(io_interface):
    return Dealer("Dealer", io_interface)


@pytest.fixture
def make_player(io_interface):
    def _make(name, *ranks, strategy=None):
        return seat(Player(name, io_interface, strategy), *ranks)

    return _make


@pytest.fixture
def rng():
    return random.Random(1234)
