"""
Outcome detection for TicTacToe.
Decides whether a match is still running, won, or can no longer be won.
"""

from typing import Optional

from .bitboard import (
    Occupancy,
    coordinates,
    is_pure,
    lines_through,
    popcount,
    to_masks,
    winning_lines,
)
from .errors import IllegalBoardError
from .game_state import GameState, Outcome, Symbol

# Nobody can complete a line before the 5th mark,
# and a draw cannot be forced before the 6th.
FIRST_POSSIBLE_WIN = 5
FIRST_POSSIBLE_DRAW = 6


def min_moves(is_starter: bool, moves: int) -> int:
    """
    Fewest marks a symbol must already hold on a line to still complete it.

    At most 9 marks are placed per match. The starter gets the odd-numbered
    ones (5 in total), the other symbol the even-numbered ones (4 in total).
    Whatever is left of a symbol's share is all it can add to a line.

    Args:
        is_starter: Whether the symbol moved first.
        moves: Marks placed so far.

    Returns:
        Minimum marks needed on a line for it to remain winnable.
    """
    if is_starter:
        moves_left = 5 - (moves - moves // 2)
    else:
        moves_left = 4 - moves // 2
    return 3 - moves_left


class OutcomeDetector:
    """
    Detects the end of a match.

    Win condition: one symbol holds all 3 cells of a row, column or
    diagonal. Draw condition: every line through every free cell is
    already blocked for both symbols, or cannot be completed with the
    moves each symbol has left.
    """

    def check_winner(self, game_state: GameState) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Symbol, or None if no winner yet.

        Raises:
            IllegalBoardError: Both symbols hold a complete line.
        """
        masks = to_masks(game_state.board)
        x_wins = winning_lines(masks.x) != 0
        o_wins = winning_lines(masks.o) != 0

        if x_wins and o_wins:
            raise IllegalBoardError("Both X and O hold a complete line")
        if x_wins:
            return Symbol.X
        if o_wins:
            return Symbol.O
        return None

    def _can_win_line(self, mine: int, theirs: int, needed: int) -> bool:
        return is_pure(mine, theirs) and popcount(mine) >= needed

    def is_forced_draw(self, game_state: GameState) -> bool:
        """
        Check whether no symbol can complete any line anymore.

        Only meaningful once no line has been completed.
        """
        masks = to_masks(game_state.board)
        starter = game_state.infer_starter()
        moves = game_state.moves

        x_needed = min_moves(starter == Symbol.X, moves)
        o_needed = min_moves(starter == Symbol.O, moves)

        for cell in coordinates(masks.free):
            for line in lines_through(cell):
                x_line = masks.x & line
                o_line = masks.o & line

                if self._can_win_line(x_line, o_line, x_needed):
                    return False
                if self._can_win_line(o_line, x_line, o_needed):
                    return False

        return True

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Safe to call every round: a finished outcome is left alone.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        if game_state.is_game_over:
            return game_state

        if game_state.moves == 0:
            game_state.starter = game_state.turn
            return game_state

        if game_state.moves < FIRST_POSSIBLE_WIN:
            return game_state

        winner = self.check_winner(game_state)
        if winner is not None:
            game_state.outcome = Outcome.victory(winner)
            return game_state

        if game_state.moves < FIRST_POSSIBLE_DRAW:
            return game_state

        if self.is_forced_draw(game_state):
            game_state.outcome = Outcome.DRAW

        return game_state

    def get_highlight(self, game_state: GameState) -> int:
        """
        Cells a renderer should highlight, as a mask.

        Winning lines on a victory, every mark on a draw,
        the cursor cell while the match runs.
        """
        masks: Occupancy = to_masks(game_state.board)

        if game_state.outcome == Outcome.X_WINS:
            return winning_lines(masks.x)
        if game_state.outcome == Outcome.O_WINS:
            return winning_lines(masks.o)
        if game_state.outcome == Outcome.DRAW:
            return masks.x | masks.o

        x, y = game_state.selection
        return 1 << (y * 3 + x)
