"""
Bitmask encoding of the TicTacToe board.

Each cell (x, y) maps to bit ``y * 3 + x`` of a 9-bit integer:

    bit:   0 1 2      mask: 0o007 = top row
           3 4 5            0o070 = middle row
           6 7 8            0o700 = bottom row

A board splits into three disjoint masks (free, X, O) whose union is
every cell. Line tests then become a couple of bitwise operations.
"""

from typing import Iterable, List, NamedTuple, Tuple

import numpy as np

from .game_state import Cell, Symbol

Coord = Tuple[int, int]

FULL_MASK = 0o777

# All winning lines (octal makes the 3x3 shape visible)
ROW_LINES = (0o007, 0o070, 0o700)
COLUMN_LINES = (0o111, 0o222, 0o444)
DIAGONAL_LINES = (0o421, 0o124)

WIN_LINES = ROW_LINES + COLUMN_LINES + DIAGONAL_LINES


class Occupancy(NamedTuple):
    """The board split into free, X and O masks."""
    free: int
    x: int
    o: int

    def of(self, symbol: Symbol) -> int:
        """Mask of the cells held by ``symbol``."""
        return self.x if symbol == Symbol.X else self.o


def bit(cell: Coord) -> int:
    """Single-bit mask for a cell."""
    x, y = cell
    return 1 << (y * 3 + x)


def set_bit(mask: int, cell: Coord, value: bool = True) -> int:
    """Return ``mask`` with the cell's bit set (or cleared)."""
    if value:
        return mask | bit(cell)
    return mask & ~bit(cell)


def has_bit(mask: int, cell: Coord) -> bool:
    """True if the cell's bit is set in ``mask``."""
    return (mask & bit(cell)) != 0


def mask_of(cells: Iterable[Coord]) -> int:
    """Build a mask from a collection of cells."""
    mask = 0
    for cell in cells:
        mask = set_bit(mask, cell)
    return mask


def to_masks(board: np.ndarray) -> Occupancy:
    """
    Split a 3x3 board into its occupancy masks.

    Args:
        board: Array of Cell values indexed ``board[y, x]``.

    Returns:
        Occupancy with one bit per cell in exactly one mask.
    """
    free = x_mask = o_mask = 0
    for y in range(3):
        for x in range(3):
            cell = board[y, x]
            if cell == Cell.X:
                x_mask = set_bit(x_mask, (x, y))
            elif cell == Cell.O:
                o_mask = set_bit(o_mask, (x, y))
            else:
                free = set_bit(free, (x, y))
    return Occupancy(free, x_mask, o_mask)


def _check_mask(mask: int):
    if mask < 0 or mask & ~FULL_MASK:
        raise ValueError(f"Mask {mask:#o} does not fit a 3x3 board")


def popcount(mask: int) -> int:
    """Number of cells set in ``mask``."""
    _check_mask(mask)
    return bin(mask).count("1")


def coordinates(mask: int) -> List[Coord]:
    """
    List the cells set in ``mask`` in row-major order.

    The result always has ``popcount(mask)`` entries.
    """
    _check_mask(mask)
    return [(i % 3, i // 3) for i in range(9) if (mask >> i) & 1]


def is_pure(testing: int, opponent: int) -> bool:
    """
    True if ``opponent`` has no mark outside ``testing`` on a line.

    Both masks are expected to be already restricted to one line, so for
    disjoint masks this means the opponent has no mark there at all.
    """
    return (testing | opponent) == testing


def winning_lines(mask: int) -> int:
    """Union of every win line fully contained in ``mask`` (0 if none)."""
    result = 0
    for line in WIN_LINES:
        if mask & line == line:
            result |= line
    return result


def lines_through(cell: Coord) -> List[int]:
    """The row, column and any diagonals that pass through a cell."""
    x, y = cell
    lines = [ROW_LINES[y], COLUMN_LINES[x]]
    for diagonal in DIAGONAL_LINES:
        if has_bit(diagonal, cell):
            lines.append(diagonal)
    return lines
