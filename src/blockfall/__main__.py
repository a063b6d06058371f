"""Command line entry point.

Run with: `python -m blockfall`

Opens a pygame window by default.  ``--ascii`` prints a single frame composed
of the board plus the active piece instead, useful as a smoke test on machines
without a display.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import GameConfig
from .game_state import GameState
from .utils import format_grid, render_grid

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__.splitlines()[0])
    parser.add_argument("--ascii", action="store_true", help="print one text frame and exit")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece sequence")
    parser.add_argument("--fps", type=int, default=None, help="frames per second")
    parser.add_argument("--cell-size", type=int, default=None, help="cell size in pixels")
    parser.add_argument(
        "--drop-interval",
        type=float,
        default=None,
        help="milliseconds between gravity ticks",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig().with_overrides(
        seed=args.seed,
        fps=args.fps,
        cell_size=args.cell_size,
        drop_interval_ms=args.drop_interval,
    )


def ascii_frame(config: GameConfig) -> str:
    gs = GameState.from_config(config)
    return format_grid(render_grid(gs.board, gs.current))


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
    except ValueError as exc:
        build_parser().error(str(exc))
    LOGGER.debug("Using %s", config)

    if args.ascii:
        print(ascii_frame(config))
        return

    from .run_pygame import main as run

    run(config)


if __name__ == "__main__":
    main()
