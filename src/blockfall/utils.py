"""Utility helpers for front-ends."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .catalog import cell_value
from .piece import Piece


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without merging the
    piece).  Cells occupied by the active piece receive the grid value for
    the piece's colour; cells outside the board are skipped.
    """

    grid = board.rows()
    if active is not None:
        value = cell_value(active.color)
        for r, c in active.cells():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = value
    return grid


def format_grid(grid: List[List[int]]) -> str:
    """Render ``grid`` as text, ``#`` for occupied cells and ``.`` for empty."""

    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)
