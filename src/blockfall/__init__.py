"""Falling-block puzzle game: catalog, board, controller and pygame front-end."""

from .catalog import COLORS, COLS, ROWS, SHAPES, PieceKind, catalog_index
from .piece import Piece, create_piece, rotate_matrix
from .board import Board, collide, merge, sweep
from .commands import Command, command_for_key, command_for_key_name
from .config import GameConfig
from .game_state import GameState
from .utils import format_grid, render_grid

__all__ = [
    "COLORS",
    "COLS",
    "ROWS",
    "SHAPES",
    "PieceKind",
    "catalog_index",
    "Piece",
    "create_piece",
    "rotate_matrix",
    "Board",
    "collide",
    "merge",
    "sweep",
    "Command",
    "command_for_key",
    "command_for_key_name",
    "GameConfig",
    "GameState",
    "format_grid",
    "render_grid",
]
