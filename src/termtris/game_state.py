"""High level game state and its transitions."""

from __future__ import annotations

import itertools
import logging
import random
from enum import Enum
from typing import Callable, Optional, Sequence

from .board import Board
from .config import GameConfig
from .exceptions import InvariantViolation
from .piece import Piece, PieceKind, Rotation


LOGGER = logging.getLogger(__name__)

# Receives the number of kinds and returns an index into ``PieceKind``.
KindSource = Callable[[int], int]


class Move(Enum):
    """Directions the active piece can be shifted in."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, -1)


class Status(Enum):
    FALLING = "falling"
    GAME_OVER = "game_over"


class Outcome(Enum):
    """Result of a single transition."""

    MOVED = "moved"
    REJECTED = "rejected"
    LOCKED = "locked"
    GAME_OVER = "game_over"


def cycle_source(indices: Sequence[int]) -> KindSource:
    """Return a kind source that repeats ``indices`` forever.

    Useful for deterministic games and tests.
    """

    if not indices:
        raise ValueError("indices must not be empty")
    it = itertools.cycle(indices)
    return lambda count: next(it) % count


class GameState:
    """Board plus the active piece, with move/rotate/lock transitions.

    Transitions never touch the process or the terminal.  A lock that pushes a
    cell past the top of the board moves the state to ``Status.GAME_OVER``;
    an impossible position raises :class:`InvariantViolation`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        kind_source: Optional[KindSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        if kind_source is None:
            kind_source = random.Random(self.config.seed).randrange
        self._kind_source = kind_source
        self.board = Board(self.config.width, self.config.height)
        self.active = Piece(PieceKind.SQUARE)
        self.status = Status.FALLING
        self.last_cleared = 0
        self.pieces_locked = 0
        self.reset_game()

    @property
    def game_over(self) -> bool:
        return self.status is Status.GAME_OVER

    def _next_kind(self) -> PieceKind:
        kinds = list(PieceKind)
        return kinds[self._kind_source(len(kinds))]

    def spawn_piece(self) -> Piece:
        """Replace the active piece with a random kind at the spawn anchor."""

        self.active = Piece(self._next_kind(), Rotation.UP, self.config.spawn_anchor)
        return self.active

    def reset_game(self) -> None:
        """Start over with an empty board and a freshly spawned piece."""

        self.board = Board(self.config.width, self.config.height)
        self.status = Status.FALLING
        self.last_cleared = 0
        self.pieces_locked = 0
        self.spawn_piece()

    def move(self, direction: Move) -> Outcome:
        """Shift the active piece one cell in ``direction``.

        A blocked horizontal move is silently rejected.  A blocked downward
        move locks the piece in place.
        """

        if self.game_over:
            return Outcome.GAME_OVER
        dx, dy = direction.value
        candidate = self.active.moved(dx, dy)
        if self.board.fits(candidate.cells()):
            self.active = candidate
            return Outcome.MOVED
        if direction is Move.DOWN:
            return self.lock()
        return Outcome.REJECTED

    def rotate(self) -> Outcome:
        """Turn the active piece clockwise if the new orientation fits.

        There are no wall kicks: an obstructed rotation is simply ignored.
        """

        if self.game_over:
            return Outcome.GAME_OVER
        candidate = self.active.rotated()
        if not self.board.fits(candidate.cells()):
            return Outcome.REJECTED
        self.active = candidate
        return Outcome.MOVED

    def lock(self) -> Outcome:
        """Commit the active piece to the board and spawn the next one.

        Cells are committed in template order.  The first cell at or above the
        top row ends the game immediately, leaving any remaining cells
        uncommitted.
        """

        if self.game_over:
            return Outcome.GAME_OVER
        for x, y in self.active.cells():
            if y >= self.board.height:
                self.status = Status.GAME_OVER
                LOGGER.info("Game over after %d piece(s)", self.pieces_locked)
                return Outcome.GAME_OVER
            if y < 0 or not 0 <= x < self.board.width:
                raise InvariantViolation(
                    f"{self.active.kind.value} piece locked at illegal cell ({x}, {y})"
                )
            self.board.commit([(x, y)])

        self.pieces_locked += 1
        self.last_cleared = self.board.clear_full_rows()
        if self.last_cleared:
            LOGGER.info("Cleared %d row(s)", self.last_cleared)
        LOGGER.debug("Locked %s at %s", self.active.kind.value, self.active.anchor)
        self.spawn_piece()
        return Outcome.LOCKED
