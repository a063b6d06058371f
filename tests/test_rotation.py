import pytest

from blockfall.catalog import SHAPES, PieceKind
from blockfall.piece import rotate_matrix


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_restore_shape(kind):
    shape = SHAPES[kind]
    rotated = shape
    for _ in range(4):
        rotated = rotate_matrix(rotated)
    assert rotated == shape


def test_rotation_is_clockwise():
    assert rotate_matrix(SHAPES[PieceKind.T]) == (
        (0, 1, 0),
        (0, 1, 1),
        (0, 1, 0),
    )
    assert rotate_matrix(SHAPES[PieceKind.I]) == (
        (0, 0, 1, 0),
        (0, 0, 1, 0),
        (0, 0, 1, 0),
        (0, 0, 1, 0),
    )


def test_o_rotation_is_unchanged():
    assert rotate_matrix(SHAPES[PieceKind.O]) == SHAPES[PieceKind.O]


def test_rotation_keeps_cell_count():
    for shape in SHAPES.values():
        assert sum(map(sum, rotate_matrix(shape))) == 4
