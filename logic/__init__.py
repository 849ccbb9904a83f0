"""
Logic module for TicTacToe.
Handles the board encoding, game rules, turn flow and computer players.
"""

__version__ = "1.0.0"

from .game_state import GameState, Symbol, Cell, Outcome
from .errors import GameError, GameOverError, IllegalBoardError
from .move_validator import MoveValidator
from .outcome_detector import OutcomeDetector
from .turn_engine import TurnEngine, GameInput, InputSource, new_match
from .navigator import step_toward
from .strategies import Strategy, RandomStrategy, HeuristicStrategy, StrategyKind, make_strategy
from .ai_player import AIPlayer
from .match_setup import MatchSetup, HUMAN, PLAYER_CHOICES
