import random
from collections import Counter

import pytest

from blockfall.shape import Position, Shape, ShapeType, random_shape, rotate_cells


@pytest.mark.parametrize("shape_type", list(ShapeType))
def test_every_shape_has_four_distinct_cells(shape_type):
    shape = Shape.new(shape_type)
    cells = list(shape.positions())
    assert len(cells) == 4
    assert len(set(cells)) == 4
    assert shape.shape_type is shape_type


def test_named_constructors_match_types():
    constructors = {
        ShapeType.I: Shape.new_i,
        ShapeType.O: Shape.new_o,
        ShapeType.T: Shape.new_t,
        ShapeType.J: Shape.new_j,
        ShapeType.L: Shape.new_l,
        ShapeType.S: Shape.new_s,
        ShapeType.Z: Shape.new_z,
    }
    for shape_type, new in constructors.items():
        assert new() == Shape.new(shape_type)


def test_markers_are_distinct():
    markers = {t.marker for t in ShapeType}
    assert len(markers) == 7


def test_positions_is_restartable_and_stable():
    shape = Shape.new_l()
    assert list(shape.positions()) == list(shape.positions())
    assert set(shape.positions()) == shape.cells


def test_translate_returns_moved_copy():
    shape = Shape.new_t()
    moved = shape.translate((3, 2))
    assert moved.cells == {Position(3, 2), Position(4, 2), Position(5, 2), Position(4, 3)}
    assert moved.anchor == Position(3, 2)
    # original untouched
    assert shape.cells == {Position(0, 0), Position(1, 0), Position(2, 0), Position(1, 1)}
    assert shape + (3, 2) == moved


def test_position_moved_keeps_tuple_addition():
    pos = Position(1, 2)
    assert pos.moved((3, -1)) == Position(4, 1)
    assert pos + (3, 4) == (1, 2, 3, 4)
    assert (3, 4) + pos == (3, 4, 1, 2)


def test_rotate_follows_anchor_formula():
    shape = Shape.new_t()
    rotated = shape.rotate()
    assert rotated.cells == {Position(0, 0), Position(0, 1), Position(0, 2), Position(-1, 1)}
    assert rotated.anchor == shape.anchor


def test_rotate_keeps_anchor_cell_fixed():
    shape = Shape.new_j().translate((4, 6))
    assert shape.anchor in shape.cells
    assert shape.anchor in shape.rotate().cells
    assert rotate_cells([shape.anchor], shape.anchor) == {shape.anchor}


@pytest.mark.parametrize("shape_type", list(ShapeType))
def test_four_rotations_return_original_cells(shape_type):
    shape = Shape.new(shape_type).translate((5, 5))
    rotated = shape
    for _ in range(4):
        rotated = rotated.rotate()
    assert rotated.cells == shape.cells
    assert rotated.anchor == shape.anchor


def test_collision_is_symmetric():
    a = Shape.new_o()
    b = Shape.new_i().translate((1, 1))
    c = Shape.new_i().translate((0, 5))
    assert a.collides_with(b) and b.collides_with(a)
    assert not a.collides_with(c) and not c.collides_with(a)


def test_has_position():
    shape = Shape.new_s()
    assert shape.has_position((-1, 1))
    assert Position(1, 0) in shape
    assert not shape.has_position((1, 1))


def test_remove_line_drops_rows_above_only():
    shape = Shape.new_l()  # (0,0) (0,1) (0,2) (1,2)
    shape.remove_line(1)
    assert shape.cells == {Position(0, 1), Position(0, 2), Position(1, 2)}


def test_remove_line_can_empty_a_shape():
    shape = Shape.new_i()
    shape.remove_line(0)
    assert len(shape) == 0
    assert list(shape.positions()) == []
    assert not shape.collides_with(Shape.new_i())


class LastChoice:
    def choice(self, seq):
        assert len(seq) == 7
        return seq[-1]


def test_random_shape_reaches_last_type():
    assert random_shape(LastChoice()).shape_type is ShapeType.Z


def test_random_shape_is_roughly_uniform():
    rng = random.Random(1234)
    counts = Counter(Shape.new_random(rng).shape_type for _ in range(10_000))
    assert set(counts) == set(ShapeType)
    for count in counts.values():
        assert 1200 < count < 1700
