"""Piece kinds, rotations and cell geometry.

Every kind has a hand-written offset table for all four rotations.  The
shapes are not centred on a common pivot, so each orientation is listed
explicitly rather than derived at runtime.  Each entry is a quarter turn
``(dx, dy) -> (-dy, dx)`` of the one before it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

Cell = Tuple[int, int]  # (x, y), y grows upwards
Offsets = Tuple[Cell, Cell, Cell, Cell]


class PieceKind(str, Enum):
    """The seven falling shapes."""

    SQUARE = "square"
    LEFT_L = "left_l"
    RIGHT_L = "right_l"
    LIGHTNING_UP = "lightning_up"
    LIGHTNING_DOWN = "lightning_down"
    LINE = "line"
    PROD = "prod"


class Rotation(IntEnum):
    """Quarter turns applied to the spawn orientation."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def next(self) -> "Rotation":
        """Return the next clockwise rotation, wrapping ``LEFT`` to ``UP``."""

        return Rotation((self + 1) % len(Rotation))


# Offsets from the anchor, indexed by kind then rotation (UP, RIGHT, DOWN, LEFT).
PIECE_OFFSETS: Dict[PieceKind, Tuple[Offsets, Offsets, Offsets, Offsets]] = {
    PieceKind.SQUARE: (
        ((0, 1), (1, 1), (0, 0), (1, 0)),
        ((-1, 0), (-1, 1), (0, 0), (0, 1)),
        ((0, -1), (-1, -1), (0, 0), (-1, 0)),
        ((1, 0), (1, -1), (0, 0), (0, -1)),
    ),
    PieceKind.LEFT_L: (
        ((0, 1), (0, 0), (0, -1), (1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
        ((1, 0), (0, 0), (-1, 0), (-1, -1)),
    ),
    PieceKind.RIGHT_L: (
        ((1, 1), (1, 0), (0, -1), (1, -1)),
        ((-1, 1), (0, 1), (1, 0), (1, 1)),
        ((-1, -1), (-1, 0), (0, 1), (-1, 1)),
        ((1, -1), (0, -1), (-1, 0), (-1, -1)),
    ),
    PieceKind.LIGHTNING_UP: (
        ((1, 1), (0, 0), (1, 0), (0, -1)),
        ((-1, 1), (0, 0), (0, 1), (1, 0)),
        ((-1, -1), (0, 0), (-1, 0), (0, 1)),
        ((1, -1), (0, 0), (0, -1), (-1, 0)),
    ),
    PieceKind.LIGHTNING_DOWN: (
        ((0, 1), (0, 0), (1, 0), (1, -1)),
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((0, -1), (0, 0), (-1, 0), (-1, 1)),
        ((1, 0), (0, 0), (0, -1), (-1, -1)),
    ),
    PieceKind.LINE: (
        ((0, 1), (0, 0), (0, -1), (0, -2)),
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
        ((1, 0), (0, 0), (-1, 0), (-2, 0)),
    ),
    PieceKind.PROD: (
        ((0, 1), (-1, 0), (0, 0), (1, 0)),
        ((-1, 0), (0, -1), (0, 0), (0, 1)),
        ((0, -1), (1, 0), (0, 0), (-1, 0)),
        ((1, 0), (0, 1), (0, 0), (0, -1)),
    ),
}


def realize(kind: PieceKind, rotation: Rotation, anchor: Cell) -> List[Cell]:
    """Return the absolute cells ``kind`` occupies at ``rotation`` and ``anchor``.

    The result may contain cells outside any board; callers check bounds
    separately.  The order of the cells follows the offset table, which the
    lock step relies on.
    """

    x, y = anchor
    return [(x + dx, y + dy) for dx, dy in PIECE_OFFSETS[kind][rotation]]


@dataclass
class Piece:
    """The falling, player-controlled piece."""

    kind: PieceKind
    rotation: Rotation = Rotation.UP
    anchor: Cell = (0, 0)

    def cells(self) -> List[Cell]:
        """Return the board cells this piece currently covers."""

        return realize(self.kind, self.rotation, self.anchor)

    def moved(self, dx: int, dy: int) -> "Piece":
        """Return a copy shifted by ``dx`` columns and ``dy`` rows."""

        x, y = self.anchor
        return replace(self, anchor=(x + dx, y + dy))

    def rotated(self) -> "Piece":
        """Return a copy turned one step clockwise about the same anchor."""

        return replace(self, rotation=self.rotation.next())
