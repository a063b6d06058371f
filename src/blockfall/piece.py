"""Falling piece definition and the piece factory."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .catalog import COLS, SHAPE_COLORS, SHAPES, Matrix, PieceKind


def rotate_matrix(matrix: Matrix) -> Matrix:
    """Return ``matrix`` rotated 90 degrees clockwise.

    The cell at ``(row, col)`` moves to ``(col, n - 1 - row)``.  Only square
    matrices are supported, which covers every shape in the catalog.
    """

    n = len(matrix)
    result = [list(row) for row in matrix]
    for y in range(n):
        for x in range(n):
            result[x][n - 1 - y] = matrix[y][x]
    return tuple(tuple(row) for row in result)


@dataclass
class Piece:
    """Active falling piece.

    ``x`` and ``y`` are the board column and row of the shape matrix's
    top-left corner.
    """

    shape: Matrix
    x: int = 0
    y: int = 0
    color: str = SHAPE_COLORS[PieceKind.I]

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(row, col)`` board coordinates of occupied cells."""

        return [
            (self.y + dy, self.x + dx)
            for dy, row in enumerate(self.shape)
            for dx, value in enumerate(row)
            if value
        ]

    def rotated(self) -> Matrix:
        return rotate_matrix(self.shape)


def spawn_column(width: int, cols: int = COLS) -> int:
    """Column that centres a shape of ``width`` on a board ``cols`` wide."""

    return cols // 2 - math.ceil(width / 2)


def create_piece(
    rng: Optional[random.Random] = None,
    cols: int = COLS,
    kind: Optional[PieceKind] = None,
) -> Piece:
    """Return a new piece at the top centre of the board.

    Parameters
    ----------
    rng:
        Source of randomness for the shape choice.  The global ``random``
        module is used when omitted.
    cols:
        Width of the board the piece is centred on.
    kind:
        Force a particular shape instead of drawing one at random.
    """

    if kind is None:
        kind = (rng or random).choice(list(PieceKind))
    shape = SHAPES[kind]
    return Piece(
        shape=shape,
        x=spawn_column(len(shape[0]), cols),
        y=0,
        color=SHAPE_COLORS[kind],
    )
