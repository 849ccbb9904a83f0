"""Tests for the console and headless entry points."""

import pytest

import main
from logic.game_state import Outcome, Symbol
from logic.match_setup import HUMAN, MatchSetup
from logic.ai_player import AIPlayer
from logic.strategies import StrategyKind
from logic.turn_engine import GameInput, new_match


def scripted_prompt(lines):
    lines = list(lines)

    def prompt(_message):
        if not lines:
            raise EOFError
        return lines.pop(0)

    return prompt


def test_console_player_commands(capsys):
    player = main.ConsolePlayer(scripted_prompt(["w", "A", "bogus", "s", "d", "", "e", "q"]))

    received = [player.next_input() for _ in range(7)]

    assert received == [
        GameInput.UP, GameInput.LEFT, GameInput.DOWN, GameInput.RIGHT,
        GameInput.PLACE, GameInput.PLACE, GameInput.QUIT,
    ]
    assert "Unknown command 'bogus'" in capsys.readouterr().out


def test_console_player_quits_on_eof():
    assert main.ConsolePlayer(scripted_prompt([])).next_input() == GameInput.QUIT


def test_run_headless_plays_every_game():
    tally = main.run_headless(StrategyKind.HEURISTIC, StrategyKind.RANDOM, games=30, seed=5)

    assert sum(tally.values()) == 30
    assert None not in tally
    assert set(tally) <= {Outcome.X_WINS, Outcome.O_WINS, Outcome.DRAW}


def test_run_headless_is_reproducible():
    first = main.run_headless(StrategyKind.RANDOM, StrategyKind.RANDOM, games=20, seed=42)
    second = main.run_headless(StrategyKind.RANDOM, StrategyKind.RANDOM, games=20, seed=42)

    assert first == second


def test_headless_command_line(capsys):
    code = main.main(["--headless", "--x", "random", "--o", "heuristic", "--games", "5", "--seed", "1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "5 games" in out
    assert "draw" in out


def test_headless_needs_two_strategies():
    with pytest.raises(SystemExit):
        main.main(["--headless", "--x", "human"])


def test_console_match_between_humans(capsys):
    # X takes the top row while O plays the middle row
    commands = ["", "s", "", "w", "d", "", "s", "", "w", "d", ""]
    setup = MatchSetup(HUMAN, HUMAN)

    outcome = main.run_console(setup, starter="x", prompt=scripted_prompt(commands))

    assert outcome == Outcome.X_WINS
    assert "X (human) wins!" in capsys.readouterr().out


def test_console_match_can_be_abandoned(capsys):
    outcome = main.run_console(MatchSetup(HUMAN, HUMAN), starter="o", prompt=scripted_prompt(["q"]))

    assert outcome is None
    assert "Match abandoned" in capsys.readouterr().out


def test_console_computer_match():
    setup = MatchSetup(StrategyKind.HEURISTIC.value, StrategyKind.RANDOM.value)

    outcome = main.run_console(setup, seed=3, fast=True)

    assert outcome in {Outcome.X_WINS, Outcome.O_WINS, Outcome.DRAW}


class TestMatchSetup:
    """Who plays which symbol."""

    def test_unknown_player(self):
        with pytest.raises(ValueError):
            MatchSetup("human", "minimax")

    @pytest.mark.parametrize("x_player, o_player, mode", [
        (HUMAN, HUMAN, "Human vs Human"),
        (HUMAN, "random", "Human vs Machine"),
        ("heuristic", HUMAN, "Human vs Machine"),
        ("random", "heuristic", "Machine vs Machine"),
    ])
    def test_mode(self, x_player, o_player, mode):
        assert MatchSetup(x_player, o_player).mode == mode

    def test_sources_skip_humans_without_a_source(self):
        state = new_match(Symbol.X)
        sources = MatchSetup(HUMAN, "heuristic").create_sources(state)

        assert list(sources) == [Symbol.O]
        assert isinstance(sources[Symbol.O], AIPlayer)
        assert sources[Symbol.O].game_state is state

    def test_sources_use_the_human_source(self):
        human = main.ConsolePlayer(scripted_prompt([]))
        sources = MatchSetup("random", HUMAN).create_sources(new_match(), human_source=human)

        assert sources[Symbol.O] is human
        assert isinstance(sources[Symbol.X], AIPlayer)
