"""Board dimensions and timing for a game session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# Reference playfield and timings.
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 30
# Milliseconds between automatic downward moves
DEFAULT_UPDATE_INTERVAL_MS = 1000
# Frames per second to render at
DEFAULT_FPS = 30

# The longest piece template spans four cells in either direction.
MIN_DIMENSION = 4


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings passed to the board, game state and loop."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    update_interval_ms: int = DEFAULT_UPDATE_INTERVAL_MS
    fps: int = DEFAULT_FPS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            raise ValueError(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {self.width}x{self.height}"
            )
        if self.update_interval_ms <= 0:
            raise ValueError("update_interval_ms must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")

    @property
    def update_interval(self) -> float:
        """Gravity tick interval in seconds."""

        return self.update_interval_ms / 1000.0

    @property
    def frame_interval(self) -> float:
        """Minimum time between rendered frames in seconds."""

        return 1.0 / self.fps

    @property
    def spawn_anchor(self) -> Tuple[int, int]:
        """Anchor new pieces appear at: horizontally centred on the top row."""

        return (self.width // 2, self.height - 1)
