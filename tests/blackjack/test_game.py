import random

import pytest

from twentyone.blackjack.action import Action
from twentyone.blackjack.actor import Player
from twentyone.blackjack.game import BlackjackGame
from twentyone.blackjack.rules import Outcome, Rules
from twentyone.blackjack.state import (
    DealingState,
    PlayersTurnState,
    RoundOverState,
    RoundStateError,
)
from twentyone.blackjack.strategy import ThresholdStrategy
from twentyone.blackjack.test_support import ScriptedStrategy, cards_of, stacked_deck
from twentyone.common.card import Rank
from twentyone.common.io_interface import DummyIOInterface


def make_game(io_interface, *players, rules=None):
    return BlackjackGame(players, io_interface, rules, rng=random.Random(0))


@pytest.fixture
def two_player_game(io_interface):
    alice = Player("Alice", io_interface, ScriptedStrategy([Action.HIT, Action.STAND]))
    bob = Player("Bob", io_interface, ScriptedStrategy([Action.STAND]))
    game = make_game(io_interface, alice, bob)
    game.deck = stacked_deck(
        cards_of(
            Rank.TEN, Rank.SIX,  # Alice
            Rank.TEN, Rank.NINE,  # Bob
            Rank.SEVEN,  # Dealer
            Rank.TWO,  # Alice hits
            Rank.FIVE, Rank.TWO, Rank.THREE,  # Dealer draws to 17
        )
    )
    return game


def test_deal_in(two_player_game):
    game = two_player_game
    game.deal_in()

    alice, bob = game.players
    assert alice.hand.score() == 16
    assert bob.hand.score() == 19
    assert len(game.dealer.hand) == 1
    assert game.deck.size == 4
    assert isinstance(game.current_state, PlayersTurnState)


def test_deal_in_twice_is_an_error(two_player_game):
    two_player_game.deal_in()
    with pytest.raises(RoundStateError):
        two_player_game.deal_in()


def test_play_steps_until_everyone_stops(two_player_game, io_interface):
    game = two_player_game
    game.deal_in()
    alice, bob = game.players

    assert game.play() is True
    assert alice.is_playing
    assert alice.hand.score() == 18
    assert not bob.is_playing
    assert len(game.dealer.hand) == 1

    assert game.play() is False
    assert game.dealer.hand.score() == 17
    assert len(game.dealer.hand) == 4
    assert game.result.outcome is Outcome.PLAYER
    assert game.result.winner is bob
    assert io_interface.sent_messages[-1] == "Bob won this game with 19!"
    assert game.is_round_over


def test_play_deals_if_needed(two_player_game):
    assert isinstance(two_player_game.current_state, DealingState)
    assert two_player_game.play() is True
    assert len(two_player_game.players[0].hand) == 3


def test_play_after_round_is_over(two_player_game):
    game = two_player_game
    while game.play():
        pass
    assert isinstance(game.current_state, RoundOverState)
    with pytest.raises(RoundStateError):
        game.play()


def test_snapshot_before_turns(two_player_game, io_interface):
    game = two_player_game
    game.deal_in()
    game.play()

    assert io_interface.sent_messages[:3] == [
        "Alice: [ 10 ♣ ] [ 6 ♦ ] (16)",
        "Bob: [ 10 ♥ ] [ 9 ♠ ] (19)",
        "Dealer: [ 7 ♣ ] (7)",
    ]
    assert "Alice decided to hit." in io_interface.sent_messages
    assert "Bob decided to stand." in io_interface.sent_messages


def test_dealer_at_seventeen_draws_nothing(io_interface):
    alice = Player("Alice", io_interface, ScriptedStrategy([]))
    game = make_game(io_interface, alice, rules=Rules(dealer_opening_cards=2))
    game.deck = stacked_deck(cards_of(Rank.TEN, Rank.EIGHT, Rank.KING, Rank.SEVEN, Rank.TWO))
    game.deal_in()

    assert game.play() is False
    assert len(game.dealer.hand) == 2
    assert game.deck.size == 1
    assert game.result.outcome is Outcome.PLAYER


def test_dealer_at_fifteen_draws(io_interface):
    alice = Player("Alice", io_interface, ScriptedStrategy([]))
    game = make_game(io_interface, alice, rules=Rules(dealer_opening_cards=2))
    game.deck = stacked_deck(
        cards_of(Rank.TEN, Rank.EIGHT, Rank.TEN, Rank.FIVE, Rank.THREE)
    )
    game.deal_in()

    assert game.play() is False
    assert len(game.dealer.hand) == 3
    assert game.result.outcome is Outcome.PUSH
    assert io_interface.sent_messages[-1] == "Nobody won this game."


def test_dealer_stops_after_busting(io_interface):
    alice = Player("Alice", io_interface, ScriptedStrategy([Action.HIT]))
    game = make_game(io_interface, alice, rules=Rules(dealer_opening_cards=2))
    game.deck = stacked_deck(
        cards_of(
            Rank.TEN, Rank.SIX,  # Alice
            Rank.TEN, Rank.SIX,  # Dealer
            Rank.KING,  # Alice busts
            Rank.NINE,  # Dealer busts
            Rank.TWO,
        )
    )
    game.deal_in()

    assert game.play() is False
    assert alice.is_busted()
    assert game.dealer.hand.score() == 25
    assert game.deck.size == 1
    assert game.result.outcome is Outcome.NOBODY
    assert "Dealer busted with 25." in io_interface.sent_messages


def test_add_player_before_deal(io_interface):
    game = make_game(io_interface, Player("Alice", io_interface, ThresholdStrategy()))
    game.add_player(Player("Bob", io_interface, ThresholdStrategy()))
    assert [p.name for p in game.players] == ["Alice", "Bob"]
    assert io_interface.sent_messages == ["Bob has joined the game."]


def test_add_player_after_deal(two_player_game, io_interface):
    two_player_game.deal_in()
    with pytest.raises(RoundStateError):
        two_player_game.add_player(Player("Carol", io_interface, ThresholdStrategy()))


def test_add_player_to_full_table(io_interface):
    game = make_game(io_interface, rules=Rules(max_players=1))
    game.add_player(Player("Alice", io_interface, ThresholdStrategy()))
    with pytest.raises(ValueError):
        game.add_player(Player("Bob", io_interface, ThresholdStrategy()))


def test_deal_in_without_players(io_interface):
    game = make_game(io_interface)
    with pytest.raises(ValueError):
        game.deal_in()


def test_every_round_gets_a_fresh_deck():
    io_interface = DummyIOInterface()
    rng = random.Random(2024)
    players = [Player(f"Computer {n}", io_interface, ThresholdStrategy(rng)) for n in range(1, 8)]
    game = BlackjackGame(players, io_interface, rng=rng)

    for _ in range(30):
        result = game.play_round()
        dealt = sum(len(p.hand) for p in players) + len(game.dealer.hand)
        assert dealt + game.deck.size == 52
        assert result is game.result

    assert game.stats.rounds_played == 30


def test_no_card_is_dealt_twice():
    io_interface = DummyIOInterface()
    rng = random.Random(5)
    players = [Player(f"Computer {n}", io_interface, ThresholdStrategy(rng)) for n in range(1, 5)]
    game = BlackjackGame(players, io_interface, rng=rng)
    game.play_round()

    in_play = [card for p in players for card in p.hand] + list(game.dealer.hand)
    in_play += game.deck.cards
    assert len(in_play) == 52
    assert len(set(in_play)) == 52


def test_seeded_games_repeat():
    def run(seed):
        io_interface = DummyIOInterface()
        rng = random.Random(seed)
        players = [Player(f"Computer {n}", io_interface, ThresholdStrategy(rng)) for n in range(1, 4)]
        game = BlackjackGame(players, io_interface, rng=rng)
        return [game.play_round().outcome for _ in range(10)]

    assert run(11) == run(11)


def test_deck_is_shuffled_once_per_round(io_interface, mocker):
    game = make_game(io_interface, Player("Alice", io_interface, ThresholdStrategy()))
    shuffle = mocker.spy(game.deck, "shuffle")

    game.start_round()
    assert shuffle.call_count == 0
    game.deal_in()
    while game.play():
        pass

    game.start_round()
    assert shuffle.call_count == 1
    assert game.deck.size == 52


def test_ten_seat_table_never_runs_out_of_cards():
    io_interface = DummyIOInterface()
    rng = random.Random(77)
    players = [Player(f"Computer {n}", io_interface, ThresholdStrategy(rng)) for n in range(1, 11)]
    game = BlackjackGame(players, io_interface, Rules(max_players=10), rng=rng)

    for _ in range(200):
        game.play_round()

    assert game.stats.rounds_played == 200
