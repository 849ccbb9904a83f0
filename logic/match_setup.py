"""
Match configuration for TicTacToe.
Says who controls each symbol and builds the matching input sources.
"""

import random
from dataclasses import dataclass
from typing import Dict, Optional

from .ai_player import AIPlayer
from .game_state import GameState, Symbol
from .strategies import StrategyKind
from .turn_engine import InputSource

HUMAN = "human"

PLAYER_CHOICES = [HUMAN] + [kind.value for kind in StrategyKind]


@dataclass
class MatchSetup:
    """
    Who plays which symbol.

    Each side is either "human" or the name of a strategy
    ("random" or "heuristic").
    """
    x_player: str = HUMAN
    o_player: str = StrategyKind.HEURISTIC.value

    def __post_init__(self):
        for player in (self.x_player, self.o_player):
            if player not in PLAYER_CHOICES:
                raise ValueError(f"Unknown player '{player}'. Choose from {PLAYER_CHOICES}")

    def player_for(self, symbol: Symbol) -> str:
        return self.x_player if symbol == Symbol.X else self.o_player

    def is_human(self, symbol: Symbol) -> bool:
        return self.player_for(symbol) == HUMAN

    @property
    def mode(self) -> str:
        """Human readable match mode."""
        humans = sum(self.is_human(symbol) for symbol in Symbol)
        if humans == 2:
            return "Human vs Human"
        if humans == 1:
            return "Human vs Machine"
        return "Machine vs Machine"

    def create_sources(
        self,
        game_state: GameState,
        human_source: Optional[InputSource] = None,
        rng: Optional[random.Random] = None,
        **agent_options
    ) -> Dict[Symbol, InputSource]:
        """
        Build one input source per symbol for a match.

        Args:
            game_state: State of the match the computer players watch.
            human_source: Source used for human sides. Human sides are
                left out of the result when None (event driven front ends
                feed their input directly).
            rng: Random source for the computer players.
            **agent_options: Passed on to AIPlayer (delays, verbose).

        Returns:
            Mapping from symbol to its input source.
        """
        rng = rng or random.Random()
        sources: Dict[Symbol, InputSource] = {}

        for symbol in Symbol:
            if self.is_human(symbol):
                if human_source is not None:
                    sources[symbol] = human_source
                continue

            sources[symbol] = AIPlayer(
                game_state,
                StrategyKind(self.player_for(symbol)),
                rng=rng,
                **agent_options
            )

        return sources
