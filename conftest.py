"""Shared pytest fixtures."""

from typing import List, Optional, Tuple

import numpy as np
import pytest

from logic.game_state import Cell, GameState, Symbol
from logic.strategies import Strategy

MARKS = {".": Cell.EMPTY, "X": Cell.X, "O": Cell.O}


def board_from_rows(rows: List[str]) -> np.ndarray:
    """Build a board from three strings such as "XO.", top row first."""
    return np.array([[MARKS[mark] for mark in row] for row in rows], dtype=np.int8)


@pytest.fixture
def make_state():
    """Factory for a GameState drawn as rows of 'X', 'O' and '.'."""

    def _make_state(
        rows: List[str],
        turn: Symbol = Symbol.X,
        starter: Optional[Symbol] = None,
        selection: Tuple[int, int] = (0, 0),
    ) -> GameState:
        board = board_from_rows(rows)
        moves = int(np.count_nonzero(board != Cell.EMPTY))
        return GameState(board=board, turn=turn, starter=starter, selection=selection, moves=moves)

    return _make_state


class FixedStrategy(Strategy):
    """Plays a scripted list of cells, in order."""

    name = "fixed"

    def __init__(self, cells):
        self.cells = list(cells)

    def choose(self, game_state, rng):
        return self.cells.pop(0)


@pytest.fixture
def fixed_strategy():
    return FixedStrategy
