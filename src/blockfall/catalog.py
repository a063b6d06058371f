"""Tetromino catalog.

The seven standard tetrominoes are stored as square 0/1 matrices in their spawn
orientation.  Each shape is paired with a colour; the position of a shape in
the catalog doubles as the value written into the board grid (index + 1), so
the order of :class:`PieceKind` must not change.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

Matrix = Tuple[Tuple[int, ...], ...]

# Dimensions of the playfield in cells.
ROWS = 20
COLS = 10


class PieceKind(str, Enum):
    """Enumeration of the seven standard tetromino shapes in catalog order."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[PieceKind, Matrix] = {
    PieceKind.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    PieceKind.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.O: (
        (1, 1),
        (1, 1),
    ),
    PieceKind.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    PieceKind.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
}

# Colour names understood by ``pygame.Color``.
SHAPE_COLORS: Dict[PieceKind, str] = {
    PieceKind.I: "cyan",
    PieceKind.J: "blue",
    PieceKind.L: "orange",
    PieceKind.O: "yellow",
    PieceKind.S: "green",
    PieceKind.T: "purple",
    PieceKind.Z: "red",
}

COLORS: List[str] = [SHAPE_COLORS[kind] for kind in PieceKind]


def catalog_index(color: str) -> int:
    """Return the catalog index of ``color``.

    Raises:
        ValueError: If ``color`` is not one of the catalog colours.
    """

    try:
        return COLORS.index(color)
    except ValueError:
        raise ValueError(f"Unknown piece colour: {color!r}") from None


def cell_value(color: str) -> int:
    """Return the integer stored in the board grid for ``color``."""

    return catalog_index(color) + 1

