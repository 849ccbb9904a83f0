"""
Move validator for TicTacToe.
Validates that placements follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import Cell, GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe placements.

    Rules:
    1. Game must not be over
    2. Cell must be on the board
    3. Can only place on empty cells
    """

    def validate_placement(
        self,
        game_state: GameState,
        x: int,
        y: int
    ) -> ValidationResult:
        """
        Validate a placement.

        Args:
            game_state: Current game state.
            x: Column to place the mark (0-2).
            y: Row to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not (0 <= x <= 2 and 0 <= y <= 2):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({x}, {y}). Must be 0-2."
            )

        occupant = game_state.cell(x, y)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({x}, {y}) is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid placements for the current symbol.

        Returns:
            List of (x, y) positions, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
