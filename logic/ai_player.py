"""
Computer player for TicTacToe.
Drives the cursor with a decision strategy, one key press at a time.
"""

import random
import time
from typing import Optional, Tuple, Union

from .game_state import GameState
from .navigator import step_toward
from .strategies import Strategy, StrategyKind, make_strategy
from .turn_engine import GameInput

Delay = Union[float, Tuple[float, float]]


class AIPlayer:
    """
    A computer player that behaves like a keyboard.

    It does not jump to its target: it first picks a goal cell with its
    strategy, then walks the cursor there one step per round and places
    its mark once the cursor is on the goal.
    """

    def __init__(
        self,
        game_state: GameState,
        strategy: Union[Strategy, StrategyKind] = StrategyKind.HEURISTIC,
        rng: Optional[random.Random] = None,
        think_delay: Delay = 0.0,
        step_delay: Delay = 0.0,
        confirm_delay: Delay = 0.0,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            game_state: The live state of the match. Never modified here.
            strategy: Strategy instance or kind used to choose goals.
            rng: Random source shared by the strategy and the delays.
            think_delay: Seconds before choosing a goal, either fixed or
                (minimum, random spread).
            step_delay: Seconds before each cursor step.
            confirm_delay: Seconds before placing the mark.
            verbose: Print each decision.
        """
        if not isinstance(strategy, Strategy):
            strategy = make_strategy(strategy)

        self.game_state = game_state
        self.strategy = strategy
        self.rng = rng or random.Random()
        self.think_delay = think_delay
        self.step_delay = step_delay
        self.confirm_delay = confirm_delay
        self.verbose = verbose

        # None means "still has to think"
        self.goal: Optional[Tuple[int, int]] = None

        # How many goals were chosen (for debugging)
        self.decisions = 0

    @property
    def is_thinking(self) -> bool:
        return self.goal is None

    def _wait(self, delay: Delay):
        if isinstance(delay, tuple):
            minimum, spread = delay
            delay = minimum + self.rng.random() * spread
        if delay > 0:
            time.sleep(delay)

    def think(self):
        """Let the strategy choose a new goal."""
        self.goal = self.strategy.choose(self.game_state, self.rng)
        self.decisions += 1

        if self.verbose:
            print(f"AI ({self.strategy.name}) playing {self.game_state.turn.name} "
                  f"wants {self.goal}")

    def next_input(self) -> GameInput:
        """
        Produce the next action for the match.

        Returns:
            PLACE when the cursor is on the goal, otherwise a cursor step.
        """
        if self.is_thinking:
            self._wait(self.think_delay)
            self.think()

        if self.goal == self.game_state.selection:
            self._wait(self.confirm_delay)
            self.goal = None
            return GameInput.PLACE

        self._wait(self.step_delay)
        return step_toward(self.game_state.selection, self.goal)
