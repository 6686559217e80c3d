"""Text rendering of the board and active piece."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .piece import Piece

LOCKED_GLYPH = "X"
ACTIVE_GLYPH = "O"
EMPTY_GLYPH = " "
# Raw-mode terminals do not translate "\n" into a carriage return.
LINE_END = "\r\n"


def render_rows(board: Board, active: Optional[Piece] = None) -> List[str]:
    """Return one string per board row, top row first.

    Locked cells win over the active piece where both cover a cell.
    """

    active_cells = set(active.cells()) if active is not None else set()
    rows = []
    for y in reversed(range(board.height)):
        row = []
        for x in range(board.width):
            if board.grid[y, x]:
                row.append(LOCKED_GLYPH)
            elif (x, y) in active_cells:
                row.append(ACTIVE_GLYPH)
            else:
                row.append(EMPTY_GLYPH)
        rows.append("".join(row))
    return rows


def render_text(board: Board, active: Optional[Piece] = None) -> str:
    """Return the full frame with every row terminated by ``LINE_END``."""

    return "".join(row + LINE_END for row in render_rows(board, active))
