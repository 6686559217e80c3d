"""Exceptions raised by the game engine."""

from __future__ import annotations


class TermtrisError(Exception):
    """Base class for all engine errors."""


class InvariantViolation(TermtrisError):
    """An illegal position slipped past move/rotate validation.

    These indicate a logic bug rather than anything a player can trigger, so
    there is no recovery path: the entry point restores the terminal and exits
    with a non-zero status.
    """


class CellOutOfBoundsError(InvariantViolation, IndexError):
    """A board cell outside the grid was read or written."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Cell ({x}, {y}) out of bounds")
        self.x = x
        self.y = y
