"""Board representation for the playfield."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .exceptions import CellOutOfBoundsError
from .piece import Cell


LOGGER = logging.getLogger(__name__)

Grid = NDArray[np.bool_]


def create_empty_grid(width: int, height: int) -> Grid:
    """Return a new ``height`` x ``width`` grid with every cell empty."""

    return np.zeros((height, width), dtype=bool)


class Board:
    """Fixed-size grid of occupied cells.

    ``grid[y, x]`` is ``True`` when the cell is occupied.  Row ``0`` is the
    bottom of the playfield; the dimensions never change after construction.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` lies on the board."""

        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is filled.

        Raises:
            CellOutOfBoundsError: If the coordinates are outside the board.
                Bounds must be checked with :meth:`in_bounds` first.
        """

        if not self.in_bounds(x, y):
            raise CellOutOfBoundsError(x, y)
        return bool(self.grid[y, x])

    def overlaps(self, cells: Iterable[Cell]) -> bool:
        """Return ``True`` if any on-board cell of ``cells`` is occupied.

        Off-board cells are ignored here; rejecting them is the job of the
        stricter bounds check.
        """

        return any(self.in_bounds(x, y) and self.grid[y, x] for x, y in cells)

    def fits(self, cells: Iterable[Cell]) -> bool:
        """Return ``True`` if every cell is on the board and currently empty."""

        cells = list(cells)
        return all(self.in_bounds(x, y) for x, y in cells) and not self.overlaps(cells)

    def commit(self, cells: Iterable[Cell]) -> None:
        """Mark ``cells`` as occupied.

        Raises:
            CellOutOfBoundsError: If any cell is off the board.  Nothing is
                written in that case.
        """

        cells = list(cells)
        for x, y in cells:
            if not self.in_bounds(x, y):
                raise CellOutOfBoundsError(x, y)
        for x, y in cells:
            self.grid[y, x] = True

    def clear_full_rows(self) -> int:
        """Remove completed rows and return how many were cleared.

        Rows above a cleared row drop down and fresh empty rows are added at
        the top, so the board keeps its height.
        """

        full_rows = np.all(self.grid, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = create_empty_grid(self.width, cleared)
            self.grid = np.vstack((remaining, new_rows))
            LOGGER.debug("Cleared %d row(s)", cleared)
        return cleared

    def occupied_count(self) -> int:
        """Return the number of filled cells."""

        return int(np.count_nonzero(self.grid))
