"""Terminal falling-block puzzle game."""

from .board import Board
from .config import GameConfig
from .exceptions import CellOutOfBoundsError, InvariantViolation, TermtrisError
from .game_state import GameState, Move, Outcome, Status, cycle_source
from .loop import GameLoop, IntervalTimer, LoopExit
from .piece import Piece, PieceKind, Rotation, realize
from .render import render_rows, render_text

__all__ = [
    "Board",
    "GameConfig",
    "GameState",
    "GameLoop",
    "IntervalTimer",
    "LoopExit",
    "Move",
    "Outcome",
    "Status",
    "Piece",
    "PieceKind",
    "Rotation",
    "realize",
    "cycle_source",
    "render_rows",
    "render_text",
    "TermtrisError",
    "InvariantViolation",
    "CellOutOfBoundsError",
]
