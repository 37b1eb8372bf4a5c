"""
Fixed-size Game of Life world.

Cells are stored in row-major order: the cell at (x, y) lives at index
y * width + x. The grid is bounded, there is no toroidal wrapping: cells on
the edge simply have fewer neighbors.
"""

from typing import Iterable

import numpy as np

from .cell import Cell
from .rules import Rule, conway_rule

# Moore neighborhood, scanned row by row with the center removed
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in range(-1, 2)
    for dx in range(-1, 2)
    if not (dx == 0 and dy == 0)
)


class Grid:
    """Rectangular world of width * height cells, all dead on creation."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width} x {height}")

        self.width = width
        self.height = height
        self.cells: list[Cell] = [
            Cell(alive=False, x=i % width, y=i // width)
            for i in range(width * height)
        ]

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        """Build a grid from a (height, width) array, nonzero meaning alive."""
        height, width = array.shape
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width} x {height}")
        return cls._from_cells(width, height, [
            Cell(alive=bool(array[y, x]), x=x, y=y)
            for y in range(height)
            for x in range(width)
        ])

    @classmethod
    def _from_cells(cls, width: int, height: int, cells: list[Cell]) -> "Grid":
        grid = cls.__new__(cls)  # cells supplied by caller
        grid.width = width
        grid.height = height
        grid.cells = cells
        return grid

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, live={self.live_count()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def _index(self, x: int, y: int) -> int:
        # Negative indices must not wrap around like Python lists do
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width} x {self.height} grid")
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        return self.cells[self._index(x, y)]

    def set_cell(self, x: int, y: int) -> None:
        """Mark the cell at (x, y) alive."""
        i = self._index(x, y)
        self.cells[i] = self.cells[i].revived()

    def seed(self, coords: Iterable[tuple[int, int]]) -> None:
        for x, y in coords:
            self.set_cell(x, y)

    def neighbors(self, cell: Cell) -> list[Cell]:
        """
        Moore neighborhood of a cell clipped to the grid bounds.

        Up to 8 cells: 3 for a corner, 5 for a non-corner edge cell. Order
        follows the 3x3 block scanned row by row.
        """
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                result.append(self.cell_at(nx, ny))
        return result

    def alive_neighbors(self, cell: Cell) -> list[Cell]:
        return [n for n in self.neighbors(cell) if n.alive]

    def advance(self, rule: Rule = conway_rule) -> "Grid":
        """
        Compute the next generation.

        Every neighbor count is taken from this grid, which is left untouched;
        the new generation is written into a fresh Grid so no updated cell can
        influence another cell's transition within the same step.

        Args:
            rule: Maps (alive, live neighbor count) to the next state

        Returns:
            New Grid of the same dimensions
        """
        next_cells = [
            cell.with_state(rule(cell.alive, len(self.alive_neighbors(cell))))
            for cell in self.cells
        ]

        return Grid._from_cells(self.width, self.height, next_cells)

    def live_cells(self) -> set[tuple[int, int]]:
        return {(c.x, c.y) for c in self.cells if c.alive}

    def live_count(self) -> int:
        """Count total live cells in the grid."""
        return sum(1 for c in self.cells if c.alive)

    def to_array(self) -> np.ndarray:
        """Grid as a (height, width) uint8 array, 1 = alive."""
        array = np.zeros((self.height, self.width), dtype=np.uint8)
        for c in self.cells:
            if c.alive:
                array[c.y, c.x] = 1
        return array


def step_array(grid: np.ndarray) -> np.ndarray:
    """
    Compute the next generation using NumPy operations.
    Vectorized counterpart of Grid.advance with the Conway rule: the array is
    zero padded so cells beyond the edge count as dead.
    """
    height, width = grid.shape
    padded = np.pad(grid.astype(np.uint8), 1, mode="constant")
    neighbors = np.zeros((height, width), dtype=np.uint8)

    for dx, dy in NEIGHBOR_OFFSETS:
        neighbors += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    # Birth: dead cell with exactly 3 neighbors
    birth = (grid == 0) & (neighbors == 3)
    # Survival: live cell with 2 or 3 neighbors
    survive = (grid != 0) & ((neighbors == 2) | (neighbors == 3))

    return (birth | survive).astype(np.uint8)
