import pytest

from termtris.piece import PIECE_OFFSETS, Piece, PieceKind, Rotation, realize


@pytest.mark.parametrize("kind", list(PieceKind))
@pytest.mark.parametrize("rotation", list(Rotation))
def test_realize_returns_four_distinct_cells(kind, rotation):
    cells = realize(kind, rotation, (5, 5))
    assert len(cells) == 4
    assert len(set(cells)) == 4


@pytest.mark.parametrize("kind", list(PieceKind))
def test_each_orientation_is_a_quarter_turn_of_the_previous(kind):
    table = PIECE_OFFSETS[kind]
    for rotation in Rotation:
        expected = [(-dy, dx) for dx, dy in table[rotation]]
        assert list(table[rotation.next()]) == expected


def test_realize_offsets_from_anchor():
    assert realize(PieceKind.LINE, Rotation.UP, (10, 29)) == [
        (10, 30),
        (10, 29),
        (10, 28),
        (10, 27),
    ]
    assert realize(PieceKind.LINE, Rotation.RIGHT, (3, 0)) == [
        (2, 0),
        (3, 0),
        (4, 0),
        (5, 0),
    ]


def test_rotation_cycles_up_right_down_left():
    assert Rotation.UP.next() is Rotation.RIGHT
    assert Rotation.RIGHT.next() is Rotation.DOWN
    assert Rotation.DOWN.next() is Rotation.LEFT
    assert Rotation.LEFT.next() is Rotation.UP


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_restore_cells(kind):
    piece = Piece(kind, anchor=(7, 12))
    turned = piece
    for _ in range(4):
        turned = turned.rotated()
    assert turned.rotation is Rotation.UP
    assert turned.cells() == piece.cells()


def test_moved_and_rotated_return_copies():
    piece = Piece(PieceKind.PROD, anchor=(4, 4))
    moved = piece.moved(-1, 0)
    rotated = piece.rotated()
    assert piece.anchor == (4, 4)
    assert piece.rotation is Rotation.UP
    assert moved.anchor == (3, 4)
    assert rotated.rotation is Rotation.RIGHT
