"""Board representation and the collision, merge and sweep operations."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .catalog import COLS, ROWS, cell_value
from .piece import Piece

Grid = NDArray[np.uint8]


class Board:
    """Grid of settled cells.  ``0`` is empty, ``k`` is catalog colour ``k - 1``."""

    width: int = COLS
    height: int = ROWS

    def __init__(self) -> None:
        self.grid: Grid = np.zeros((self.height, self.width), dtype=np.uint8)

    def fill_row(self, row: int, value: int = 1) -> None:
        """Occupy every cell of ``row`` with ``value``."""

        self.grid[row, :] = np.uint8(value)

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def rows(self) -> list[list[int]]:
        """Return the grid as nested Python lists."""

        return self.grid.tolist()


def collide(board: Board, piece: Piece) -> bool:
    """Return ``True`` if ``piece`` overlaps a wall, the floor or a settled cell.

    Rows above the board are open; only the sides and the floor bound a piece.
    """

    for row, col in piece.cells():
        if col < 0 or col >= board.width or row >= board.height:
            return True
        if row >= 0 and board.grid[row, col]:
            return True
    return False


def merge(board: Board, piece: Piece) -> None:
    """Write the piece's occupied cells into the board.

    The caller must have checked that the piece does not collide at its
    current position.  Cells above the top row are dropped.
    """

    value = np.uint8(cell_value(piece.color))
    for row, col in piece.cells():
        if row >= 0:
            board.grid[row, col] = value


def sweep(board: Board) -> int:
    """Remove full rows, bottom to top, and return how many were removed.

    Rows above a removed row shift down by one and an empty row is inserted
    at the top.  The same index is examined again after a removal since a
    different row now occupies it.
    """

    cleared = 0
    y = board.height - 1
    while y >= 0:
        if board.is_row_full(y):
            board.grid[1 : y + 1] = board.grid[:y].copy()
            board.grid[0] = 0
            cleared += 1
        else:
            y -= 1
    return cleared
