"""
Exceptions raised by the game logic.
These signal programming errors, not bad player input.
"""


class GameError(Exception):
    """Base class for game logic errors."""


class GameOverError(GameError):
    """A placement was attempted after the match finished."""


class IllegalBoardError(GameError):
    """The board holds a position that alternating play cannot reach."""
