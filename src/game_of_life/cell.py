"""
Single grid position of the Game of Life world.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Cell:
    """A grid position and its alive/dead state. Immutable: state changes
    produce a new Cell with the same coordinates."""
    alive: bool
    x: int
    y: int

    def revived(self) -> "Cell":
        return replace(self, alive=True)

    def with_state(self, alive: bool) -> "Cell":
        return replace(self, alive=alive)
