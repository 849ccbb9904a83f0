"""Tests for win and forced-draw detection."""

import pytest

from logic.errors import IllegalBoardError
from logic.game_state import GameState, Outcome, Symbol
from logic.outcome_detector import OutcomeDetector, min_moves


@pytest.fixture
def detector():
    return OutcomeDetector()


def test_first_call_records_starter(detector):
    state = GameState(turn=Symbol.O)

    detector.update_game_state(state)

    assert state.starter == Symbol.O
    assert state.outcome == Outcome.RUNNING


def test_no_decision_before_fifth_move(detector, make_state):
    state = make_state(["XXX", "O..", "O.."])
    state.moves = 4

    detector.update_game_state(state)

    assert state.outcome == Outcome.RUNNING


def test_row_win(detector, make_state):
    state = make_state(["XXX", "OO.", "..."], turn=Symbol.O)

    detector.update_game_state(state)

    assert state.outcome == Outcome.X_WINS
    assert state.winner == Symbol.X


def test_diagonal_win_for_o(detector, make_state):
    state = make_state(["OXX", "XO.", "..O"], turn=Symbol.X, starter=Symbol.O)

    detector.update_game_state(state)

    assert state.outcome == Outcome.O_WINS


def test_win_on_the_last_move_is_not_a_draw(detector, make_state):
    state = make_state(["XOX", "OXO", "OXX"], turn=Symbol.O)

    detector.update_game_state(state)

    assert state.outcome == Outcome.X_WINS


def test_both_symbols_winning_is_rejected(detector, make_state):
    state = make_state(["XXX", "OOO", "..."])

    with pytest.raises(IllegalBoardError):
        detector.update_game_state(state)


def test_full_board_without_line_is_a_draw(detector, make_state):
    state = make_state(["XOX", "XOO", "OXX"], turn=Symbol.O, starter=Symbol.X)
    assert state.moves == 9

    detector.update_game_state(state)

    assert state.outcome == Outcome.DRAW


def test_draw_detected_with_one_cell_left(detector, make_state):
    state = make_state(["XOX", "XOO", "OX."], turn=Symbol.X, starter=Symbol.X)
    assert state.moves == 8

    detector.update_game_state(state)

    assert state.outcome == Outcome.DRAW


def test_draw_when_remaining_moves_cannot_finish_a_line(detector, make_state):
    # X started and has one move left; the right column needs two more X.
    state = make_state(["XOX", "XO.", "OX."], turn=Symbol.O, starter=Symbol.X)
    assert state.moves == 7

    detector.update_game_state(state)

    assert state.outcome == Outcome.DRAW


def test_open_line_keeps_the_game_running(detector, make_state):
    # O can still complete the middle row
    state = make_state(["XOX", "OO.", ".X."], turn=Symbol.X, starter=Symbol.X)
    assert state.moves == 6

    detector.update_game_state(state)

    assert state.outcome == Outcome.RUNNING


def test_starter_is_inferred_when_unknown(make_state):
    state = make_state(["XOX", "XO.", "OX."], turn=Symbol.O)

    assert state.infer_starter() == Symbol.X
    assert OutcomeDetector().is_forced_draw(state)


def test_finished_outcome_is_never_revisited(detector, make_state):
    state = make_state(["XXX", "OO.", "..."], turn=Symbol.O)
    detector.update_game_state(state)

    # Even a board that would now read differently keeps the result
    state.board[1, 2] = 2
    state.moves += 1
    detector.update_game_state(state)
    detector.update_game_state(state)

    assert state.outcome == Outcome.X_WINS


@pytest.mark.parametrize("is_starter, moves, expected", [
    (True, 6, 1),
    (False, 6, 2),
    (True, 7, 2),
    (False, 7, 2),
    (True, 8, 2),
    (False, 8, 3),
    (True, 9, 3),
])
def test_min_moves(is_starter, moves, expected):
    assert min_moves(is_starter, moves) == expected


def test_highlight_follows_outcome(detector, make_state):
    running = make_state(["X..", ".O.", "..."], selection=(2, 1))
    assert detector.get_highlight(running) == 1 << 5

    won = make_state(["XXX", "OO.", "..."], turn=Symbol.O)
    detector.update_game_state(won)
    assert detector.get_highlight(won) == 0o007

    drawn = make_state(["XOX", "XOO", "OX."], starter=Symbol.X)
    detector.update_game_state(drawn)
    assert detector.get_highlight(drawn) == 0o377
