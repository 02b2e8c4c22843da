"""Board representation and the game state machine.

The board owns one falling :class:`~blockfall.shape.Shape` and a list of
settled shapes.  A driver advances it with :meth:`Board.tick` and moves the
falling shape with :meth:`Board.shift` and :meth:`Board.rotate`.  Illegal
moves are ignored rather than reported so the driver can call them
unconditionally.
"""

from __future__ import annotations

import logging
import operator
import random
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .shape import Position, Shape, ShapeChooser, ShapeType


LOGGER = logging.getLogger(__name__)

# Default board dimensions.
WIDTH = 10
HEIGHT = 30


class Direction(Enum):
    """Horizontal direction for :meth:`Board.shift`."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Position:
        return Position(*self.value)


def _positive_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    try:
        number = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise ValueError(f"{name} must be a positive integer, got {value!r}") from None
    if number <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return number


class Board:
    """Game state: dimensions, the falling shape and the settled shapes.

    ``width`` and ``height`` accept any positive integer, numpy integers
    included.  ``rng`` only needs a ``choice`` method; a fresh
    ``random.Random`` is used when it is omitted.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        rng: Optional[ShapeChooser] = None,
    ) -> None:
        self._width = _positive_int("width", width)
        self._height = _positive_int("height", height)
        self.rng: ShapeChooser = rng if rng is not None else random.Random()
        self.settled: List[Shape] = []
        self.lost = False
        self.falling = self._spawn()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def spawn_position(self) -> Position:
        """Offset applied to every new shape: top row, horizontally centred."""

        return Position((self._width - 1) // 2, 0)

    def _spawn(self) -> Shape:
        return Shape.new_random(self.rng).translate(self.spawn_position)

    def is_out_of_bounds(self, shape: Shape) -> bool:
        """Return ``True`` if any cell of ``shape`` lies outside the board."""

        return not all(
            0 <= x < self._width and 0 <= y < self._height for x, y in shape.cells
        )

    def is_colliding(self, shape: Shape) -> bool:
        """Return ``True`` if ``shape`` overlaps any settled shape."""

        return any(settled.collides_with(shape) for settled in self.settled)

    def _fits(self, shape: Shape) -> bool:
        return not self.is_out_of_bounds(shape) and not self.is_colliding(shape)

    def is_line_full(self, y: int) -> bool:
        """Return ``True`` if every column of row ``y`` holds a settled cell."""

        columns = {pos.x for shape in self.settled for pos in shape.cells if pos.y == y}
        return len(columns) == self._width

    def remove_line(self, y: int) -> None:
        """Clear row ``y`` from every settled shape and drop the rows above."""

        for shape in self.settled:
            shape.remove_line(y)

    def remove_full_line(self) -> int:
        """Clear all completed rows, top to bottom, and return how many."""

        cleared = 0
        for y in range(self._height):
            if self.is_line_full(y):
                LOGGER.info("Clearing row %d", y)
                self.remove_line(y)
                cleared += 1
        return cleared

    def tick(self) -> None:
        """Advance the game by one step.

        The falling shape moves down a row.  When it cannot, it settles,
        completed rows are cleared and a new shape spawns.  If the new shape
        overlaps the settled cells the game is lost and further ticks do
        nothing.
        """

        if self.lost:
            return
        moved = self.falling.translate((0, 1))
        if self._fits(moved):
            self.falling = moved
            return

        LOGGER.debug("Settling %r", self.falling)
        self.settled.append(self.falling)
        self.remove_full_line()
        self.falling = self._spawn()
        if self.is_colliding(self.falling):
            LOGGER.info("Game lost: %s shape cannot spawn", self.falling.shape_type.value)
            self.lost = True

    def shift(self, direction: Direction) -> None:
        """Move the falling shape one column left or right if it fits.

        Unlike :meth:`tick` and :meth:`rotate` this is not disabled once the
        game is lost; the last falling shape can still be slid sideways.
        """

        moved = self.falling.translate(Direction(direction).delta)
        if self._fits(moved):
            self.falling = moved

    def rotate(self) -> None:
        """Rotate the falling shape if the result fits on the board."""

        if self.lost:
            return
        rotated = self.falling.rotate()
        if self._fits(rotated):
            self.falling = rotated

    def get(self, pos: Tuple[int, int]) -> Optional[ShapeType]:
        """Return the type of the shape occupying ``pos``, or ``None``."""

        if self.falling.has_position(pos):
            return self.falling.shape_type
        for shape in self.settled:
            if shape.has_position(pos):
                return shape.shape_type
        return None

    def iter_positions(self) -> Iterator[Position]:
        """Iterate over every cell of the board in row-major order."""

        for y in range(self._height):
            for x in range(self._width):
                yield Position(x, y)

    def __repr__(self) -> str:
        return (
            f"Board(width={self._width}, height={self._height}, "
            f"settled={len(self.settled)}, lost={self.lost})"
        )
