"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the cursor and the match outcome.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np


class Cell(IntEnum):
    """What a board cell holds. Stored as int8 in the board array."""
    EMPTY = 0
    X = 1
    O = 2


class Symbol(Enum):
    """The two symbols that take turns."""
    X = "x"
    O = "o"

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X

    @property
    def cell(self) -> Cell:
        """The Cell value this symbol writes to the board."""
        return Cell.X if self == Symbol.X else Cell.O


class Outcome(Enum):
    """State of the match. Everything but RUNNING is terminal."""
    RUNNING = "running"
    DRAW = "draw"
    X_WINS = "x_wins"
    O_WINS = "o_wins"

    @classmethod
    def victory(cls, symbol: Symbol) -> "Outcome":
        return cls.X_WINS if symbol == Symbol.X else cls.O_WINS


def empty_board() -> np.ndarray:
    """A fresh 3x3 board, indexed ``board[y, x]``."""
    return np.full((3, 3), Cell.EMPTY, dtype=np.int8)


@dataclass
class GameState:
    """
    The complete state of one match.

    Tracks:
    - The 3x3 board
    - Whose turn it is and who started
    - The cursor (selection) used by players to pick a cell
    - How many marks have been placed
    - The outcome (running, draw or a win)

    Only the TurnEngine mutates a live GameState; strategies and
    renderers just read it.
    """

    board: np.ndarray = field(default_factory=empty_board)

    # Current symbol's turn
    turn: Symbol = Symbol.X

    # Who moved first; set by the OutcomeDetector before the first move
    starter: Optional[Symbol] = None

    # Cursor position (x, y)
    selection: Tuple[int, int] = (0, 0)

    # Marks placed so far (0-9)
    moves: int = 0

    outcome: Outcome = Outcome.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.RUNNING

    @property
    def winner(self) -> Optional[Symbol]:
        if self.outcome == Outcome.X_WINS:
            return Symbol.X
        if self.outcome == Outcome.O_WINS:
            return Symbol.O
        return None

    def cell(self, x: int, y: int) -> Cell:
        """Get the content of cell (x, y)."""
        return Cell(int(self.board[y, x]))

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (x, y) tuples in row-major order.
        """
        ys, xs = np.nonzero(self.board == Cell.EMPTY)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def infer_starter(self) -> Symbol:
        """
        Who started, derived from turn parity.

        Symbols alternate, so after an even number of moves it is the
        starter's turn again.
        """
        if self.starter is not None:
            return self.starter
        return self.turn if self.moves % 2 == 0 else self.turn.opposite()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            turn=self.turn,
            starter=self.starter,
            selection=self.selection,
            moves=self.moves,
            outcome=self.outcome,
        )

    def board_lines(self, show_cursor: bool = True) -> List[str]:
        """Text drawing of the board, one string per line."""
        symbols = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}
        lines = ["    0   1   2", "  ┌───┬───┬───┐"]

        for y in range(3):
            row_str = "│"
            for x in range(3):
                mark = symbols[self.cell(x, y)]
                if show_cursor and not self.is_game_over and self.selection == (x, y):
                    row_str += f"[{mark}]│"
                else:
                    row_str += f" {mark} │"
            lines.append(f"{y} {row_str}")

            if y < 2:
                lines.append("  ├───┼───┼───┤")

        lines.append("  └───┴───┴───┘")
        return lines

    def print_board(self):
        """Print the board to console."""
        print()
        print("\n".join(self.board_lines()))

        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.name} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.turn.name}    Moves: {self.moves}")
