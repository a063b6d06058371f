"""Game state container and the controller operations that drive it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .board import Board, collide, merge, sweep
from .commands import Command
from .config import DROP_INTERVAL_MS, GameConfig
from .piece import Piece, create_piece

LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a single game session.

    Every operation validates a tentative change with :func:`collide` and
    rolls it back when the piece would overlap a wall, the floor or a settled
    cell.  Nothing here raises for an illegal move.  Once ``game_over`` is set
    it stays set; commands and frame updates are ignored from then on.
    """

    board: Board = field(default_factory=Board)
    current: Optional[Piece] = None
    drop_counter: float = 0.0
    drop_interval: float = DROP_INTERVAL_MS
    last_time: float = 0.0
    game_over: bool = False
    lines_cleared: int = 0
    pieces_locked: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.current is None:
            self._next_piece()

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameState":
        """Build a fresh state using the interval and seed from ``config``."""

        return cls(
            drop_interval=config.drop_interval_ms,
            rng=random.Random(config.seed),
        )

    @property
    def running(self) -> bool:
        return not self.game_over

    def spawn_piece(self) -> Piece:
        return create_piece(self.rng, self.board.width)

    # Controller operations -------------------------------------------
    def player_drop(self) -> None:
        """Move the piece down one row, locking it if it cannot descend.

        Locking merges the piece, sweeps full rows and spawns the next piece.
        If that piece already collides at its spawn position the game ends.
        """

        if self.game_over or self.current is None:
            return
        piece = self.current
        piece.y += 1
        if collide(self.board, piece):
            piece.y -= 1
            self._lock(piece)
        self.drop_counter = 0

    def player_move(self, direction: int) -> None:
        """Shift the piece one column left (``-1``) or right (``+1``)."""

        if self.game_over or self.current is None:
            return
        piece = self.current
        piece.x += direction
        if collide(self.board, piece):
            piece.x -= direction

    def player_rotate(self) -> None:
        """Rotate the piece clockwise; no wall kicks are attempted."""

        if self.game_over or self.current is None:
            return
        piece = self.current
        previous = piece.shape
        piece.shape = piece.rotated()
        if collide(self.board, piece):
            piece.shape = previous

    def apply_command(self, command: Command) -> None:
        """Dispatch ``command`` to the matching controller operation.

        Raises:
            ValueError: If ``command`` is not a :class:`Command`.
        """

        if self.game_over:
            return
        if command is Command.MOVE_LEFT:
            self.player_move(-1)
        elif command is Command.MOVE_RIGHT:
            self.player_move(1)
        elif command is Command.SOFT_DROP:
            self.player_drop()
        elif command is Command.ROTATE:
            self.player_rotate()
        else:
            raise ValueError(f"Unknown command: {command!r}")

    def update(self, time: float) -> None:
        """Advance gravity to the frame timestamp ``time`` (milliseconds)."""

        delta = time - self.last_time
        self.last_time = time
        if self.game_over:
            return
        self.drop_counter += delta
        if self.drop_counter > self.drop_interval:
            self.player_drop()

    def anchor_clock(self, time: float) -> None:
        """Make ``time`` the previous frame timestamp without advancing gravity."""

        self.last_time = time

    # Internal helpers -------------------------------------------------
    def _lock(self, piece: Piece) -> None:
        merge(self.board, piece)
        self.pieces_locked += 1
        LOGGER.debug("Locked %s piece at x=%d y=%d", piece.color, piece.x, piece.y)

        cleared = sweep(self.board)
        if cleared:
            self.lines_cleared += cleared
            LOGGER.info(
                "Cleared %d row(s), %d in total", cleared, self.lines_cleared
            )

        self._next_piece()

    def _next_piece(self) -> None:
        self.current = self.spawn_piece()
        if collide(self.board, self.current):
            self.game_over = True
            LOGGER.info(
                "Game over after %d pieces and %d cleared rows",
                self.pieces_locked,
                self.lines_cleared,
            )
