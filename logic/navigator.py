"""
Cursor navigation for computer players.
Turns a target cell into single cursor steps, like a person pressing keys.
"""

from typing import Tuple

from .turn_engine import GameInput


def step_toward(current: Tuple[int, int], target: Tuple[int, int]) -> GameInput:
    """
    One cursor step from ``current`` toward ``target``.

    Moves along the axis with the larger distance; vertical wins ties.
    Never wraps around the board, so any target is at most 4 steps away.

    Args:
        current: Cursor position (x, y).
        target: Goal position (x, y).

    Returns:
        GameInput.UP, DOWN, LEFT or RIGHT.

    Raises:
        ValueError: The cursor is already on the target.
    """
    if current == target:
        raise ValueError(f"Cursor is already on {target}")

    dx = target[0] - current[0]
    dy = target[1] - current[1]

    if abs(dx) > abs(dy):
        return GameInput.LEFT if dx < 0 else GameInput.RIGHT
    return GameInput.UP if dy < 0 else GameInput.DOWN
