from termtris.board import Board
from termtris.piece import Piece, PieceKind, Rotation
from termtris.render import render_rows, render_text


def test_rows_render_top_first_with_glyphs():
    board = Board(4, 4)
    board.grid[0, 0] = True
    active = Piece(PieceKind.SQUARE, Rotation.UP, (1, 2))

    assert render_rows(board, active) == [" OO ", " OO ", "    ", "X   "]


def test_locked_cells_drawn_over_active_piece():
    board = Board(4, 4)
    board.grid[2, 1] = True
    active = Piece(PieceKind.SQUARE, Rotation.UP, (1, 2))

    assert render_rows(board, active)[1] == " XO "


def test_off_board_piece_cells_are_not_drawn():
    board = Board(4, 4)
    active = Piece(PieceKind.LINE, Rotation.UP, (0, 3))
    rows = render_rows(board, active)
    assert [row[0] for row in rows] == ["O", "O", "O", " "]


def test_text_uses_crlf_after_every_row():
    board = Board(20, 30)
    text = render_text(board)
    assert text.count("\r\n") == 30
    assert text.endswith("\r\n")
    assert all(len(line) == 20 for line in text.split("\r\n")[:-1])
    assert "\n" not in text.replace("\r\n", "")
