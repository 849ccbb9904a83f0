"""
Decision strategies for computer players.

Two interchangeable policies pick the cell a computer player walks to:

- RandomStrategy: any free cell, uniformly.
- HeuristicStrategy: wins when it can, blocks when it must, otherwise
  prefers lines the opponent has started. It does not look ahead, so it
  can be beaten.
"""

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from .bitboard import WIN_LINES, coordinates, has_bit, is_pure, popcount, set_bit, to_masks
from .game_state import GameState

Coord = Tuple[int, int]


class MoveOptions:
    """
    A small set of candidate cells.

    Keeps insertion order; pushing a cell that is already present does
    nothing. Membership is tracked in a bitmask.
    """

    def __init__(self):
        self.moves: List[Coord] = []
        self._stored = 0

    def __len__(self) -> int:
        return len(self.moves)

    def __contains__(self, cell: Coord) -> bool:
        return has_bit(self._stored, cell)

    def push(self, cell: Coord):
        if not has_bit(self._stored, cell):
            self._stored = set_bit(self._stored, cell)
            self.moves.append(cell)

    def push_mask(self, mask: int):
        for cell in coordinates(mask):
            self.push(cell)

    def pick(self, rng: random.Random) -> Coord:
        """Pick one candidate uniformly at random."""
        if not self.moves:
            raise ValueError("No candidate moves to pick from")
        if len(self.moves) == 1:
            return self.moves[0]
        return rng.choice(self.moves)


class Strategy(ABC):
    """Chooses the cell a computer player should place its mark on."""

    name = "strategy"

    @abstractmethod
    def choose(self, game_state: GameState, rng: random.Random) -> Coord:
        """
        Pick a free cell for the symbol whose turn it is.

        Args:
            game_state: Current game state (read only).
            rng: Random source.

        Returns:
            The target cell (x, y).
        """


class RandomStrategy(Strategy):
    """Picks any free cell. Easy to beat."""

    name = "random"

    def choose(self, game_state: GameState, rng: random.Random) -> Coord:
        free = to_masks(game_state.board).free
        if not free:
            raise ValueError("No free cell left to choose")

        while True:
            cell = (rng.randrange(3), rng.randrange(3))
            if has_bit(free, cell):
                return cell


class HeuristicStrategy(Strategy):
    """
    Line-by-line heuristic.

    For each of the 8 lines, from this symbol's point of view:
    1. Two of mine and none of theirs: play the third cell and stop.
    2. I already have a mark there, or they have none: low value.
    3. Two of theirs and none of mine: danger, must block.
    4. Anything else (one of theirs, none of mine): neutral.

    Danger cells come first, then neutral, then low value.
    """

    name = "heuristic"

    def choose(self, game_state: GameState, rng: random.Random) -> Coord:
        # Nothing to analyse on an empty board
        if game_state.moves == 0:
            return (rng.randrange(3), rng.randrange(3))

        me = game_state.turn
        masks = to_masks(game_state.board)
        all_mine = masks.of(me)
        all_theirs = masks.of(me.opposite())

        danger = MoveOptions()
        neutral = MoveOptions()
        useless = MoveOptions()

        for line in WIN_LINES:
            mine = all_mine & line
            theirs = all_theirs & line
            free = masks.free & line

            if popcount(mine) == 2 and is_pure(mine, theirs):
                return coordinates(mine ^ line)[0]

            if not is_pure(theirs, mine) or popcount(theirs) == 0:
                useless.push_mask(free)
                continue

            if popcount(theirs) == 2 and is_pure(theirs, mine):
                danger.push_mask(theirs ^ line)
                continue

            neutral.push_mask(free)

        if danger:
            return danger.pick(rng)
        if neutral:
            return neutral.pick(rng)
        return useless.pick(rng)


class StrategyKind(Enum):
    """Strategies a computer player can use."""
    RANDOM = "random"
    HEURISTIC = "heuristic"


STRATEGIES = {
    StrategyKind.RANDOM: RandomStrategy,
    StrategyKind.HEURISTIC: HeuristicStrategy,
}


def make_strategy(kind: StrategyKind) -> Strategy:
    """Create a strategy of the given kind."""
    return STRATEGIES[StrategyKind(kind)]()
