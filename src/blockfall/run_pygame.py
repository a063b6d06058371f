"""pygame front-end for the falling-block game.

Draws the board and the active piece every frame, feeds key presses to the
controller and drives gravity from ``pygame.time.get_ticks()``.  The loop is a
coroutine so it can also be hosted by a browser runtime that owns the event
loop.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Iterable, Optional

import pygame

from .board import Board
from .catalog import COLORS
from .commands import command_for_key
from .config import GameConfig
from .game_state import GameState
from .piece import Piece

LOGGER = logging.getLogger(__name__)

BACKGROUND = pygame.Color(0, 0, 0)
TEXT_COLOR = pygame.Color(255, 255, 255)
GAME_OVER_TEXT = "Game Over"
FONT_SIZE = 20
PAUSE_KEY = pygame.K_p

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {i + 1: pygame.Color(name) for i, name in enumerate(COLORS)}


def surface_size(cell_size: int) -> tuple[int, int]:
    """Pixel size of a surface holding the whole board."""

    return Board.width * cell_size, Board.height * cell_size


def _fill_cell(surface: pygame.Surface, color, row: int, col: int, cell_size: int) -> None:
    # One pixel is left uncovered so neighbouring cells stay distinguishable.
    rect = pygame.Rect(col * cell_size, row * cell_size, cell_size - 1, cell_size - 1)
    pygame.draw.rect(surface, color, rect)


def draw_board(surface: pygame.Surface, board: Board, cell_size: int) -> None:
    """Render the settled cells of ``board``."""

    for r in range(board.height):
        for c in range(board.width):
            value = int(board.grid[r, c])
            if value:
                _fill_cell(surface, CELL_COLORS[value], r, c, cell_size)


def draw_piece(surface: pygame.Surface, piece: Piece, cell_size: int) -> None:
    """Render the active piece in its own colour."""

    color = pygame.Color(piece.color)
    for r, c in piece.cells():
        _fill_cell(surface, color, r, c, cell_size)


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font) -> None:
    text = font.render(GAME_OVER_TEXT, True, TEXT_COLOR)
    rect = text.get_rect(bottomleft=(50, surface.get_height() // 2))
    surface.blit(text, rect)


def draw_frame(
    surface: pygame.Surface,
    state: GameState,
    cell_size: int,
    font: Optional[pygame.font.Font] = None,
) -> None:
    """Paint one complete frame for ``state``.

    The game-over overlay uses pygame's default font when ``font`` is omitted.
    """

    surface.fill(BACKGROUND)
    draw_board(surface, state.board, cell_size)
    if state.current is not None:
        draw_piece(surface, state.current, cell_size)
    if state.game_over:
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, FONT_SIZE)
        draw_game_over(surface, font)


def handle_key(event: pygame.event.Event, state: GameState) -> bool:
    """Apply the command bound to a ``KEYDOWN`` event.

    Returns ``True`` when the key was bound to a command.  Input is ignored
    once the game is over.
    """

    if state.game_over:
        return False
    command = command_for_key(event.key)
    if command is None:
        return False
    state.apply_command(command)
    return True


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._paused = False
        self._task: Optional[asyncio.Task] = None
        self._screen: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None
        self._clock: Optional[pygame.time.Clock] = None
        self.state: Optional[GameState] = None
        self._reported_game_over = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def attach(
        self,
        state: GameState,
        screen: Optional[pygame.Surface] = None,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        """Bind a state and optional drawing targets, marking the runner live."""

        self.state = state
        self._screen = screen
        self._font = font
        self._reported_game_over = False
        self._running = True

    def step(self, events: Iterable[pygame.event.Event], now: float) -> None:
        """Process one frame: input, gravity up to ``now``, then drawing."""

        state = self.state
        if state is None:
            return
        for event in events:
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == PAUSE_KEY and not state.game_over:
                    if self._paused:
                        self.resume()
                    else:
                        self.pause()
                elif not self._paused:
                    handle_key(event, state)

        if self._paused:
            # Keep the clock anchored so paused time never feeds gravity.
            state.anchor_clock(now)
        else:
            state.update(now)

        if state.game_over and not self._reported_game_over:
            self._reported_game_over = True
            LOGGER.info("Game over; %d row(s) cleared", state.lines_cleared)

        if self._screen is not None:
            draw_frame(self._screen, state, self.config.cell_size, self._font)

    async def _run_loop(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas when running on the web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        try:
            screen = pygame.display.set_mode(surface_size(self.config.cell_size))
            pygame.display.set_caption("blockfall")
            self._clock = pygame.time.Clock()
            state = GameState.from_config(self.config)
            state.anchor_clock(pygame.time.get_ticks())
            self.attach(state, screen, pygame.font.Font(None, FONT_SIZE))
            LOGGER.info("Game started")

            while self._running:
                self._clock.tick(self.config.fps)
                self.step(pygame.event.get(), pygame.time.get_ticks())
                pygame.display.flip()
                # Yield to the host event loop to keep the UI responsive
                await asyncio.sleep(0)
        finally:
            pygame.quit()
            LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        self._paused = False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (plain Python); run until the window closes
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())
            self._task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            LOGGER.info("Game loop cancelled")
            return
        exc = task.exception()
        if exc is not None:
            LOGGER.error("Game loop crashed", exc_info=exc)

    async def stop_async(self) -> None:
        """Stop the loop and wait for the hosted task to finish."""

        self._running = False
        if self._task is not None:
            await self._task

    def pause(self) -> None:
        if not self._running:
            LOGGER.info("Pause ignored: game not running")
            return
        self._paused = True
        LOGGER.info("Paused")

    def resume(self) -> None:
        if not self._running:
            LOGGER.info("Resume ignored: game not running")
            return
        self._paused = False
        LOGGER.info("Resumed")

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        # The loop exits at the end of the current frame
        self._running = False


def main(config: Optional[GameConfig] = None) -> None:
    """Open a window and play until it is closed."""

    GameRunner(config).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
