"""
Simulation settings.

Defaults reproduce the reference run: a glider on a 40 x 20 grid, 80 frames,
10 ms between frames.
"""

import operator
from dataclasses import dataclass, field

from .patterns import GLIDER, place
from .render import RENDER_MODES

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20
DEFAULT_ITERATIONS = 80
DEFAULT_FRAME_DELAY_MS = 10


def _coordinate(x, y) -> tuple[int, int]:
    """(x, y) as plain ints; floats and other non-integral values are rejected."""
    try:
        return operator.index(x), operator.index(y)
    except TypeError:
        raise ValueError(f"Seed cell ({x!r}, {y!r}) must have integer coordinates") from None


@dataclass(frozen=True)
class SimulationConfig:
    width: int = DEFAULT_WIDTH                  # grid columns
    height: int = DEFAULT_HEIGHT                # grid rows
    iterations: int = DEFAULT_ITERATIONS        # total frames to simulate
    frame_delay_ms: float = DEFAULT_FRAME_DELAY_MS  # pacing interval
    seed: tuple[tuple[int, int], ...] = field(default_factory=lambda: place(GLIDER, 1, 1))
    render_mode: str = "glyph"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width} x {self.height}")
        if self.iterations < 0:
            raise ValueError(f"Iterations must not be negative, got {self.iterations}")
        if self.frame_delay_ms < 0:
            raise ValueError(f"Frame delay must not be negative, got {self.frame_delay_ms}")
        if self.render_mode not in RENDER_MODES:
            raise ValueError(f"Unknown render mode {self.render_mode!r}, expected one of {RENDER_MODES}")

        # normalize lists of lists into a hashable tuple of pairs
        seed = tuple(_coordinate(x, y) for x, y in self.seed)
        for x, y in seed:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"Seed cell ({x}, {y}) outside {self.width} x {self.height} grid")
        object.__setattr__(self, "seed", seed)

    @property
    def frame_delay(self) -> float:
        """Pacing interval in seconds."""
        return self.frame_delay_ms / 1000
