"""Rules engine for a falling-block puzzle game."""

from .shape import Position, Shape, ShapeType, random_shape, rotate_cells
from .board import Board, Direction
from .utils import PIECE_VALUES, render_grid, render_text

__all__ = [
    "Board",
    "Direction",
    "Position",
    "Shape",
    "ShapeType",
    "PIECE_VALUES",
    "random_shape",
    "render_grid",
    "render_text",
    "rotate_cells",
]
