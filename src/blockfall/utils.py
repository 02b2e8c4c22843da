"""Rendering helpers for the blockfall engine."""

from __future__ import annotations

from typing import Dict, List

import numpy as np
from numpy.typing import NDArray

from .board import Board
from .shape import ShapeType


Grid = NDArray[np.uint8]

# Mapping from ``ShapeType`` to the integer stored in a rendered grid.  ``0``
# represents an empty cell.
PIECE_VALUES: Dict[ShapeType, int] = {t: i + 1 for i, t in enumerate(ShapeType)}


def render_grid(board: Board) -> Grid:
    """Return a ``(height, width)`` snapshot of the board.

    Every cell holds the :data:`PIECE_VALUES` entry of the shape covering it,
    falling shape included, or ``0`` when empty.  The board is only read,
    so renderers can call this once per frame.
    """

    grid = np.zeros((board.height, board.width), dtype=np.uint8)
    for pos in board.iter_positions():
        shape_type = board.get(pos)
        if shape_type is not None:
            grid[pos.y, pos.x] = PIECE_VALUES[shape_type]
    return grid


def render_text(board: Board, empty: str = ".", markers: bool = False) -> str:
    """Return the board as text, one line per row.

    Occupied cells show the shape's letter, or its coloured marker when
    ``markers`` is true.
    """

    rows: List[str] = []
    line: List[str] = []
    for pos in board.iter_positions():
        shape_type = board.get(pos)
        if shape_type is None:
            line.append(empty)
        else:
            line.append(shape_type.marker if markers else shape_type.value)
        if pos.x == board.width - 1:
            rows.append("".join(line))
            line = []
    return "\n".join(rows)
