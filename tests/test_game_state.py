from __future__ import annotations

import logging

from blockfall.board import Board, collide
from blockfall.catalog import SHAPES, PieceKind, cell_value
from blockfall.commands import Command
from blockfall.game_state import GameState
from blockfall.piece import Piece


def _state_with(piece: Piece, board: Board | None = None) -> GameState:
    return GameState(board=board or Board(), current=piece)


def _o_piece(x: int = 3, y: int = 0) -> Piece:
    return Piece(SHAPES[PieceKind.O], x=x, y=y, color="yellow")


def test_o_piece_falls_to_floor_and_locks():
    start = _o_piece()
    state = _state_with(start)
    assert not collide(state.board, start)

    for expected_y in range(1, 19):
        state.player_drop()
        assert state.current is start
        assert start.y == expected_y
    assert state.pieces_locked == 0

    state.player_drop()
    value = cell_value("yellow")
    for r in (18, 19):
        for c in (3, 4):
            assert int(state.board.grid[r, c]) == value
    assert int((state.board.grid != 0).sum()) == 4
    assert state.lines_cleared == 0
    assert state.pieces_locked == 1
    assert state.current is not start
    assert state.current.y == 0
    assert not state.game_over


def test_drop_always_resets_drop_counter():
    state = _state_with(_o_piece())
    state.drop_counter = 750
    state.player_drop()
    assert state.drop_counter == 0

    state.current.y = 18
    state.drop_counter = 999
    state.player_drop()
    assert state.drop_counter == 0
    assert state.pieces_locked == 1


def test_move_at_left_wall_rolls_back():
    state = _state_with(_o_piece(x=0, y=5))
    state.player_move(-1)
    assert state.current.x == 0
    state.player_move(1)
    assert state.current.x == 1


def test_move_into_settled_cell_rolls_back():
    board = Board()
    board.grid[5, 5] = 1
    state = _state_with(_o_piece(x=3, y=5), board)
    state.player_move(1)
    assert state.current.x == 3


def test_rotate_against_wall_fails_silently():
    # Vertical I hugging the right wall cannot turn horizontal.
    piece = Piece(((0, 0, 1, 0),) * 4, x=7, y=5, color="cyan")
    state = _state_with(piece)
    state.player_rotate()
    assert piece.shape == ((0, 0, 1, 0),) * 4
    assert (piece.x, piece.y) == (7, 5)


def test_rotate_in_open_space_changes_shape():
    piece = Piece(SHAPES[PieceKind.T], x=3, y=5, color="purple")
    state = _state_with(piece)
    state.player_rotate()
    assert piece.shape == ((0, 1, 0), (0, 1, 1), (0, 1, 0))


def test_completed_row_is_cleared_on_lock(caplog):
    board = Board()
    board.grid[19, 2:] = 2
    state = _state_with(_o_piece(x=0, y=18), board)

    with caplog.at_level(logging.INFO, logger="blockfall.game_state"):
        state.player_drop()

    value = cell_value("yellow")
    assert state.lines_cleared == 1
    assert state.board.grid.shape == (20, 10)
    assert not state.board.grid[0].any()
    assert state.board.rows()[19] == [value, value] + [0] * 8
    assert "Cleared 1 row(s)" in caplog.text


def test_apply_command_dispatch():
    state = _state_with(_o_piece(x=4, y=0))
    state.apply_command(Command.MOVE_LEFT)
    assert state.current.x == 3
    state.apply_command(Command.MOVE_RIGHT)
    state.apply_command(Command.MOVE_RIGHT)
    assert state.current.x == 5
    state.apply_command(Command.SOFT_DROP)
    assert state.current.y == 1
    state.apply_command(Command.ROTATE)
    assert state.current.shape == SHAPES[PieceKind.O]


def test_from_config_uses_interval_and_seed():
    from blockfall.config import GameConfig

    config = GameConfig(drop_interval_ms=250, seed=7)
    a = GameState.from_config(config)
    b = GameState.from_config(config)
    assert a.drop_interval == 250
    assert a.current == b.current
