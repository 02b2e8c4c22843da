"""Shape definitions and geometry.

A shape is a set of occupied cells together with a rotation anchor.  Moving
or rotating a shape produces a new shape; the only in-place operation is
:meth:`Shape.remove_line`, used when a completed row is cleared.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, NamedTuple, Optional, Protocol, Sequence, Set, Tuple


class Position(NamedTuple):
    """A board cell as ``(x, y)``; ``y`` grows downwards from the top row."""

    x: int
    y: int

    def moved(self, delta: Tuple[int, int]) -> "Position":
        """Return this position offset by ``delta``."""

        return Position(self.x + delta[0], self.y + delta[1])


class ShapeType(str, Enum):
    """Enumeration of the seven standard shapes."""

    I = "I"
    O = "O"
    T = "T"
    J = "J"
    L = "L"
    S = "S"
    Z = "Z"

    @property
    def marker(self) -> str:
        """Return the display marker used when rendering this shape."""

        return _MARKERS[self]


class ShapeChooser(Protocol):
    """Anything with a ``random.Random``-style ``choice`` method."""

    def choice(self, seq: Sequence[ShapeType]) -> ShapeType: ...


_MARKERS: Dict[ShapeType, str] = {
    ShapeType.I: "\U0001f7e6",
    ShapeType.O: "\U0001f7e8",
    ShapeType.T: "\U0001f7eb",
    ShapeType.J: "\U0001f7ea",
    ShapeType.L: "\U0001f7e7",
    ShapeType.S: "\U0001f7e9",
    ShapeType.Z: "\U0001f7e5",
}


# Spawn layouts as ``(cells, anchor)``, relative to the spawn position.
_LAYOUTS: Dict[ShapeType, Tuple[FrozenSet[Position], Position]] = {
    ShapeType.I: (frozenset({Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0)}), Position(1, 0)),
    ShapeType.O: (frozenset({Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)}), Position(0, 0)),
    ShapeType.T: (frozenset({Position(0, 0), Position(1, 0), Position(2, 0), Position(1, 1)}), Position(0, 0)),
    ShapeType.J: (frozenset({Position(0, 0), Position(0, 1), Position(0, 2), Position(-1, 2)}), Position(0, 1)),
    ShapeType.L: (frozenset({Position(0, 0), Position(0, 1), Position(0, 2), Position(1, 2)}), Position(0, 1)),
    ShapeType.S: (frozenset({Position(0, 0), Position(1, 0), Position(0, 1), Position(-1, 1)}), Position(0, 0)),
    ShapeType.Z: (frozenset({Position(0, 0), Position(-1, 0), Position(0, 1), Position(1, 1)}), Position(0, 0)),
}


def rotate_cells(cells: Iterable[Position], anchor: Position) -> Set[Position]:
    """Return ``cells`` rotated by 90 degrees about ``anchor``.

    Each cell ``(x, y)`` maps to ``(-y + b + a, x - a + b)`` where ``(a, b)``
    is the anchor.  The anchor itself is a fixed point of the transform, so
    repeated rotations keep pivoting around the same cell.
    """

    a, b = anchor
    return {Position(-y + b + a, x - a + b) for x, y in cells}


class Shape:
    """A piece on the board: occupied cells, a rotation anchor and a type."""

    __slots__ = ("shape_type", "cells", "anchor")

    def __init__(self, shape_type: ShapeType, cells: Iterable[Position], anchor: Position) -> None:
        self.shape_type = shape_type
        self.cells: Set[Position] = {Position(*cell) for cell in cells}
        self.anchor = Position(*anchor)

    @classmethod
    def new(cls, shape_type: ShapeType) -> "Shape":
        """Return ``shape_type`` in its spawn layout at the origin."""

        cells, anchor = _LAYOUTS[ShapeType(shape_type)]
        return cls(ShapeType(shape_type), cells, anchor)

    @classmethod
    def new_i(cls) -> "Shape":
        return cls.new(ShapeType.I)

    @classmethod
    def new_o(cls) -> "Shape":
        return cls.new(ShapeType.O)

    @classmethod
    def new_t(cls) -> "Shape":
        return cls.new(ShapeType.T)

    @classmethod
    def new_j(cls) -> "Shape":
        return cls.new(ShapeType.J)

    @classmethod
    def new_l(cls) -> "Shape":
        return cls.new(ShapeType.L)

    @classmethod
    def new_s(cls) -> "Shape":
        return cls.new(ShapeType.S)

    @classmethod
    def new_z(cls) -> "Shape":
        return cls.new(ShapeType.Z)

    @classmethod
    def new_random(cls, rng: Optional[ShapeChooser] = None) -> "Shape":
        """Return a shape chosen uniformly from the seven types.

        Parameters
        ----------
        rng:
            Source of randomness.  Only ``rng.choice`` is used, which picks an
            index by rejection sampling, so every type has exactly the same
            probability.  Defaults to the module-level generator.
        """

        chooser = rng if rng is not None else random
        return cls.new(chooser.choice(list(ShapeType)))

    def positions(self) -> Iterator[Position]:
        """Iterate over the occupied cells in ``(y, x)`` order."""

        return iter(sorted(self.cells, key=lambda pos: (pos.y, pos.x)))

    def collides_with(self, other: "Shape") -> bool:
        """Return ``True`` if the two shapes share at least one cell."""

        return not self.cells.isdisjoint(other.cells)

    def translate(self, delta: Tuple[int, int]) -> "Shape":
        """Return a copy of this shape moved by ``delta``."""

        return Shape(
            self.shape_type,
            (cell.moved(delta) for cell in self.cells),
            self.anchor.moved(delta),
        )

    __add__ = translate

    def rotate(self) -> "Shape":
        """Return a copy rotated 90 degrees about the (unchanged) anchor."""

        return Shape(self.shape_type, rotate_cells(self.cells, self.anchor), self.anchor)

    def has_position(self, pos: Tuple[int, int]) -> bool:
        return Position(*pos) in self.cells

    __contains__ = has_position

    def remove_line(self, y: int) -> None:
        """Delete the cells on row ``y`` and drop the cells above it by one.

        Cells below ``y`` are left untouched.  The shape may end up with no
        cells at all, which is still a valid (if invisible) shape.
        """

        self.cells = {
            cell if cell.y > y else Position(cell.x, cell.y + 1)
            for cell in self.cells
            if cell.y != y
        }

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (
            self.shape_type == other.shape_type
            and self.cells == other.cells
            and self.anchor == other.anchor
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        cells = ", ".join(f"({x}, {y})" for x, y in self.positions())
        return f"Shape({self.shape_type.value}, cells=[{cells}], anchor={tuple(self.anchor)})"


def random_shape(rng: Optional[ShapeChooser] = None) -> Shape:
    """Module-level alias for :meth:`Shape.new_random`."""

    return Shape.new_random(rng)
