"""
Seed patterns for the simulation.

Patterns are lists of (x, y) offsets relative to their top-left corner;
place() translates them onto the grid.
"""

import numpy as np

# Glider pattern
#   #
#     #
# # # #
GLIDER: list[tuple[int, int]] = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]

# Still life, 2x2 square
BLOCK: list[tuple[int, int]] = [(0, 0), (1, 0), (0, 1), (1, 1)]

# Period 2 oscillator, horizontal phase
BLINKER: list[tuple[int, int]] = [(0, 0), (1, 0), (2, 0)]

# Gosper Glider Gun, 36 x 9
GLIDER_GUN: list[tuple[int, int]] = [
    # Left square
    (0, 4), (1, 4), (0, 5), (1, 5),
    # Left part
    (10, 4), (10, 5), (10, 6), (11, 3), (11, 7), (12, 2), (12, 8),
    (13, 2), (13, 8), (14, 5), (15, 3), (15, 7),
    (16, 4), (16, 5), (16, 6), (17, 5),
    # Right part
    (20, 2), (20, 3), (20, 4), (21, 2), (21, 3), (21, 4),
    (22, 1), (22, 5), (24, 0), (24, 1), (24, 5), (24, 6),
    # Right square
    (34, 2), (35, 2), (34, 3), (35, 3),
]

PATTERNS: dict[str, list[tuple[int, int]]] = {
    "glider": GLIDER,
    "block": BLOCK,
    "blinker": BLINKER,
    "glider-gun": GLIDER_GUN,
}


def pattern_size(pattern: list[tuple[int, int]]) -> tuple[int, int]:
    """Width and height of the pattern's bounding box."""
    if not pattern:
        return 0, 0
    return max(x for x, _ in pattern) + 1, max(y for _, y in pattern) + 1


def place(pattern: list[tuple[int, int]], start_x: int = 1, start_y: int = 1) -> tuple[tuple[int, int], ...]:
    """Translate a pattern so its top-left corner sits at (start_x, start_y)."""
    return tuple((start_x + x, start_y + y) for x, y in pattern)


def init_random(width: int, height: int, density: float = 0.3,
                seed: int | None = None) -> tuple[tuple[int, int], ...]:
    """
    Random live cells, each alive with probability `density`.

    Args:
        width: Grid width
        height: Grid height
        density: Probability of a cell being alive
        seed: Random seed for reproducibility

    Returns:
        (x, y) coordinates of the live cells in row-major order
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be within [0, 1], got {density}")
    if seed is not None:
        np.random.seed(seed)
    field = np.random.random((height, width)) < density  # Bernoulli field
    return tuple((int(x), int(y)) for y, x in np.argwhere(field))
