"""Simple ASCII demo for the blockfall engine.

Run with: `python -m blockfall`

A random driver shifts and rotates the falling shape and ticks the board
until the step budget runs out or the game is lost, then prints the final
frame.  Pass ``--help`` for the available options.
"""

from __future__ import annotations

import argparse
import logging
import random
from time import sleep
from typing import Optional, Sequence

from .board import HEIGHT, WIDTH, Board, Direction
from .utils import render_text


LOGGER = logging.getLogger(__name__)


def run(board: Board, steps: int, rng: random.Random, delay: float = 0.0) -> int:
    """Drive ``board`` for at most ``steps`` ticks and return ticks taken."""

    taken = 0
    for _ in range(steps):
        if board.lost:
            break
        move = rng.randrange(4)
        if move == 0:
            board.shift(Direction.LEFT)
        elif move == 1:
            board.shift(Direction.RIGHT)
        elif move == 2:
            board.rotate()
        board.tick()
        taken += 1
        if delay > 0:
            print(render_text(board))
            print()
            sleep(delay)
    return taken


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--steps", type=int, default=500, help="Maximum number of ticks.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shapes and moves.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between frames; 0 prints only the final frame.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    rng = random.Random(args.seed)
    try:
        board = Board(args.width, args.height, rng=rng)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 2
    taken = run(board, args.steps, rng, delay=args.delay)
    print(render_text(board))
    LOGGER.info("Stopped after %d ticks (lost=%s)", taken, board.lost)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
