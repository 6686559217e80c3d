"""Play in the terminal.

Run with: `python -m termtris` (or the ``termtris`` console script).

Arrow keys move, Up rotates clockwise, ``q`` or Ctrl-C quits.  ``--snapshot``
prints a single frame without entering the terminal UI, useful as a quick
smoke test.
"""

from __future__ import annotations

import argparse
import curses
import logging
import sys
from typing import Optional, Sequence

from .config import (
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_UPDATE_INTERVAL_MS,
    DEFAULT_WIDTH,
    GameConfig,
)
from .exceptions import InvariantViolation
from .game_state import GameState
from .loop import GameLoop, LoopExit
from .render import render_rows
from .terminal import CursesTerminal


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termtris", description=__doc__.splitlines()[0])
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Board height in cells.")
    parser.add_argument(
        "--update-interval",
        type=int,
        default=DEFAULT_UPDATE_INTERVAL_MS,
        help="Milliseconds between automatic downward moves.",
    )
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames rendered per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument(
        "--snapshot",
        action="store_true",
        help="Print a single frame and exit without taking over the terminal.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write diagnostics to this file (the game screen owns the terminal).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        update_interval_ms=args.update_interval,
        fps=args.fps,
        seed=args.seed,
    )


def _print_frame(state: GameState) -> None:
    for row in render_rows(state.board, state.active):
        print(row)


def _play(stdscr: "curses.window", state: GameState) -> LoopExit:
    terminal = CursesTerminal(stdscr)
    return GameLoop(state, terminal, terminal).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper(), logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"termtris: error: {exc}", file=sys.stderr)
        return 2

    state = GameState(config)
    if args.snapshot:
        _print_frame(state)
        return 0

    try:
        result = curses.wrapper(_play, state)
    except InvariantViolation as exc:
        LOGGER.debug("Internal error", exc_info=True)
        print(f"internal error: {exc}", file=sys.stderr)
        return 1

    if result is LoopExit.GAME_OVER:
        _print_frame(state)
        print("Game over!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
