"""Tests for the computer player input source."""

import random

import pytest

from logic import ai_player
from logic.ai_player import AIPlayer
from logic.game_state import Symbol
from logic.strategies import HeuristicStrategy, RandomStrategy, StrategyKind
from logic.turn_engine import GameInput, TurnEngine, new_match


def test_walks_to_goal_then_places(fixed_strategy):
    state = new_match(Symbol.X)
    engine = TurnEngine(state)
    player = AIPlayer(state, fixed_strategy([(2, 2)]))

    inputs = []
    while True:
        game_input = player.next_input()
        inputs.append(game_input)
        engine.apply_input(game_input)
        if game_input == GameInput.PLACE:
            break

    assert inputs == [GameInput.DOWN, GameInput.RIGHT, GameInput.DOWN, GameInput.RIGHT, GameInput.PLACE]
    assert state.moves == 1
    assert player.goal is None
    assert player.decisions == 1


def test_places_immediately_when_already_on_goal(fixed_strategy):
    state = new_match(Symbol.O)
    state.selection = (1, 1)
    player = AIPlayer(state, fixed_strategy([(1, 1)]))

    assert player.next_input() == GameInput.PLACE
    assert player.is_thinking


def test_keeps_goal_between_steps(fixed_strategy):
    state = new_match(Symbol.X)
    player = AIPlayer(state, fixed_strategy([(0, 2)]))

    player.next_input()

    assert player.goal == (0, 2)
    assert not player.is_thinking


def test_strategy_kind_is_accepted():
    state = new_match(Symbol.X)

    assert isinstance(AIPlayer(state, StrategyKind.RANDOM).strategy, RandomStrategy)
    assert isinstance(AIPlayer(state, "heuristic").strategy, HeuristicStrategy)


def test_delays(monkeypatch, fixed_strategy):
    slept = []
    monkeypatch.setattr(ai_player.time, "sleep", slept.append)

    state = new_match(Symbol.X)
    player = AIPlayer(
        state, fixed_strategy([(1, 0)]),
        rng=random.Random(1),
        think_delay=(0.3, 0.3),
        step_delay=0.1,
        confirm_delay=0.225,
    )

    assert player.next_input() == GameInput.RIGHT
    state.selection = (1, 0)
    assert player.next_input() == GameInput.PLACE

    think, step, confirm = slept
    assert 0.3 <= think < 0.6
    assert step == pytest.approx(0.1)
    assert confirm == pytest.approx(0.225)


def test_no_sleep_without_delays(monkeypatch, fixed_strategy):
    monkeypatch.setattr(ai_player.time, "sleep", lambda _: pytest.fail("slept"))

    player = AIPlayer(new_match(Symbol.X), fixed_strategy([(0, 1)]))

    assert player.next_input() == GameInput.DOWN


def test_verbose_prints_decision(capsys, fixed_strategy):
    player = AIPlayer(new_match(Symbol.O), fixed_strategy([(2, 1)]), verbose=True)

    player.next_input()

    assert "wants (2, 1)" in capsys.readouterr().out


@pytest.mark.parametrize("seed", range(10))
def test_computer_vs_computer_finishes(seed):
    rng = random.Random(seed)
    state = new_match(rng=rng)
    engine = TurnEngine(state)
    sources = {
        Symbol.X: AIPlayer(state, StrategyKind.HEURISTIC, rng=rng),
        Symbol.O: AIPlayer(state, StrategyKind.RANDOM, rng=rng),
    }

    outcome = engine.play(sources)

    assert outcome is not None
    assert state.is_game_over
    assert 5 <= state.moves <= 9
