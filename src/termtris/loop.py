"""Real-time game loop: render, drain input, apply gravity, cap frame rate."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Optional, Protocol

from .config import GameConfig
from .game_state import GameState, Move, Outcome
from .keys import Action, KeyEvent, action_for
from .render import render_text


LOGGER = logging.getLogger(__name__)


class Display(Protocol):
    def draw(self, text: str) -> None:
        """Clear the screen and show ``text`` (rows separated by CRLF)."""


class Keyboard(Protocol):
    def poll(self) -> bool:
        """Return ``True`` if a key event can be read without blocking."""

    def read(self) -> KeyEvent:
        """Return the next pending key event."""


class LoopExit(Enum):
    GAME_OVER = "game_over"
    QUIT = "quit"


class IntervalTimer:
    """Fixed-interval timer driven by a monotonic clock.

    The reference point moves forward by exactly ``interval`` on each
    :meth:`advance` instead of being reset to the current time, so slow frames
    do not lose ticks.
    """

    def __init__(self, interval: float, clock: Callable[[], float]) -> None:
        self.interval = interval
        self._clock = clock
        self.mark = clock()

    def elapsed(self) -> float:
        return self._clock() - self.mark

    def due(self) -> bool:
        return self.elapsed() >= self.interval

    def remaining(self) -> float:
        return max(0.0, self.interval - self.elapsed())

    def advance(self) -> None:
        self.mark += self.interval


_MOVES = {
    Action.LEFT: Move.LEFT,
    Action.RIGHT: Move.RIGHT,
    Action.DOWN: Move.DOWN,
}


class GameLoop:
    """Single-threaded loop tying the game state to a display and keyboard."""

    def __init__(
        self,
        state: GameState,
        display: Display,
        keyboard: Keyboard,
        config: Optional[GameConfig] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.state = state
        self.display = display
        self.keyboard = keyboard
        self.config = config or state.config
        self._sleep = sleep
        self.gravity = IntervalTimer(self.config.update_interval, clock)
        self.frame = IntervalTimer(self.config.frame_interval, clock)
        self.frames = 0

    def _apply(self, action: Action) -> Outcome:
        if action is Action.ROTATE:
            return self.state.rotate()
        return self.state.move(_MOVES[action])

    def _drain_input(self) -> Optional[LoopExit]:
        while self.keyboard.poll():
            action = action_for(self.keyboard.read())
            if action is None:
                # Leave anything queued behind an unbound key for the next frame.
                break
            if action is Action.QUIT:
                return LoopExit.QUIT
            if self._apply(action) is Outcome.GAME_OVER:
                return LoopExit.GAME_OVER
        return None

    def step(self) -> Optional[LoopExit]:
        """Run one iteration and return why the loop should stop, if it should."""

        self.display.draw(render_text(self.state.board, self.state.active))
        self.frames += 1

        exit_reason = self._drain_input()
        if exit_reason is not None:
            return exit_reason

        # At most one gravity tick per pass; any further debt carries over.
        if self.gravity.due():
            self.gravity.advance()
            if self.state.move(Move.DOWN) is Outcome.GAME_OVER:
                return LoopExit.GAME_OVER

        remaining = self.frame.remaining()
        if remaining > 0:
            self._sleep(remaining)
        self.frame.advance()
        return None

    def run(self) -> LoopExit:
        """Loop until the game ends or the player quits."""

        LOGGER.info(
            "Starting %dx%d game (tick %dms, %d fps)",
            self.config.width,
            self.config.height,
            self.config.update_interval_ms,
            self.config.fps,
        )
        while True:
            exit_reason = self.step()
            if exit_reason is not None:
                LOGGER.info("Loop stopped after %d frame(s): %s", self.frames, exit_reason.value)
                return exit_reason
