import random

import pytest

from blockfall.catalog import COLORS, SHAPE_COLORS, SHAPES, PieceKind, catalog_index
from blockfall.piece import create_piece


@pytest.mark.parametrize(
    "kind, expected_x",
    [
        (PieceKind.I, 3),
        (PieceKind.J, 3),
        (PieceKind.L, 3),
        (PieceKind.O, 4),
        (PieceKind.S, 3),
        (PieceKind.T, 3),
        (PieceKind.Z, 3),
    ],
)
def test_spawn_position_is_top_centre(kind, expected_x):
    piece = create_piece(kind=kind)
    assert piece.x == expected_x
    assert piece.y == 0
    assert piece.shape == SHAPES[kind]
    assert piece.color == SHAPE_COLORS[kind]


def test_colour_matches_shape_index():
    rng = random.Random(3)
    for _ in range(50):
        piece = create_piece(rng)
        kind = list(PieceKind)[catalog_index(piece.color)]
        assert piece.shape == SHAPES[kind]


def test_seeded_rng_is_reproducible():
    first = [create_piece(random.Random(11)).color for _ in range(5)]
    second = [create_piece(random.Random(11)).color for _ in range(5)]
    assert first == second


def test_all_shapes_eventually_drawn():
    rng = random.Random(0)
    seen = {create_piece(rng).color for _ in range(500)}
    assert seen == set(COLORS)


def test_unknown_colour_is_rejected():
    with pytest.raises(ValueError):
        catalog_index("magenta")
