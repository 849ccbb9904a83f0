"""
Turn engine for TicTacToe.
Applies player input to the game state and keeps the outcome current.
"""

import random
from enum import Enum
from typing import Callable, Dict, Optional, Protocol

from .errors import GameOverError
from .game_state import GameState, Outcome, Symbol
from .move_validator import MoveValidator
from .outcome_detector import OutcomeDetector


class GameInput(Enum):
    """An action from a player (human or computer)."""
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PLACE = "place"


# Cursor offsets (dx, dy) for the movement inputs
CURSOR_STEPS = {
    GameInput.UP: (0, -1),
    GameInput.DOWN: (0, 1),
    GameInput.LEFT: (-1, 0),
    GameInput.RIGHT: (1, 0),
}


class InputSource(Protocol):
    """Anything that can be asked for the next action of one symbol."""

    def next_input(self) -> GameInput:
        ...


def new_match(
    starter: Optional[Symbol] = None,
    rng: Optional[random.Random] = None
) -> GameState:
    """
    Create the state for a new match.

    Args:
        starter: Who moves first. Chosen at random if None.
        rng: Random source for the starter draw.

    Returns:
        A fresh GameState.
    """
    if starter is None:
        starter = (rng or random).choice([Symbol.X, Symbol.O])
    return GameState(turn=starter, starter=starter)


class TurnEngine:
    """
    Runs a match one round at a time.

    Round flow:
    1. Ask the input source of the symbol to move for one action
    2. Move the cursor or place a mark
    3. Let the OutcomeDetector update the outcome
    4. Hand a snapshot to the renderer
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        detector: Optional[OutcomeDetector] = None,
        validator: Optional[MoveValidator] = None
    ):
        self.game_state = game_state if game_state is not None else new_match()
        self.detector = detector or OutcomeDetector()
        self.validator = validator or MoveValidator()

    def move_cursor(self, game_input: GameInput):
        """Move the selection one cell, wrapping around the edges."""
        dx, dy = CURSOR_STEPS[game_input]
        x, y = self.game_state.selection
        self.game_state.selection = ((x + dx) % 3, (y + dy) % 3)

    def place(self) -> bool:
        """
        Place the current symbol on the selected cell.

        Returns:
            True if the mark was placed, False if the cell was taken.

        Raises:
            GameOverError: The match has already finished.
        """
        state = self.game_state
        if state.is_game_over:
            raise GameOverError(f"Cannot place after the match ended ({state.outcome.value})")

        x, y = state.selection
        result = self.validator.validate_placement(state, x, y)
        if not result.is_valid:
            return False

        state.board[y, x] = state.turn.cell
        state.turn = state.turn.opposite()
        state.moves += 1
        return True

    def apply_input(self, game_input: GameInput) -> bool:
        """
        Apply one action to the game state.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        if game_input == GameInput.QUIT:
            return False
        if game_input == GameInput.PLACE:
            self.place()
        else:
            self.move_cursor(game_input)
        return True

    def update_outcome(self) -> Outcome:
        self.detector.update_game_state(self.game_state)
        return self.game_state.outcome

    def snapshot(self) -> GameState:
        """A copy of the state for renderers."""
        return self.game_state.copy()

    def run_round(self, source: InputSource) -> bool:
        """
        Play one round with the given input source.

        Returns:
            False if the player quit, True otherwise.
        """
        keep_going = self.apply_input(source.next_input())
        self.update_outcome()
        return keep_going

    def play(
        self,
        sources: Dict[Symbol, InputSource],
        render: Optional[Callable[[GameState], None]] = None
    ) -> Optional[Outcome]:
        """
        Run the match until it finishes or a player quits.

        Args:
            sources: Input source for each symbol.
            render: Called with a snapshot before every round and
                once more with the final state.

        Returns:
            The final outcome, or None if a player quit.
        """
        self.update_outcome()

        while True:
            if render is not None:
                render(self.snapshot())

            if self.game_state.is_game_over:
                return self.game_state.outcome

            if not self.run_round(sources[self.game_state.turn]):
                return None
