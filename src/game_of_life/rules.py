"""
Conway's Game of Life rules (B3/S23)

1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)
"""

from typing import Callable

Rule = Callable[[bool, int], bool]


def conway_rule(alive: bool, live_neighbors: int) -> bool:
    """Next state of a cell given its current state and live neighbor count."""
    if alive:
        return live_neighbors in (2, 3)  # survive
    return live_neighbors == 3  # birth
