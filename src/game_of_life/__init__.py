"""
Conway's Game of Life on a bounded grid, rendered as text frames.
"""

from .cell import Cell
from .config import SimulationConfig
from .grid import Grid, step_array
from .render import render
from .rules import conway_rule
from .simulation import benchmark, run_simulation

__all__ = [
    "Cell",
    "Grid",
    "SimulationConfig",
    "benchmark",
    "conway_rule",
    "render",
    "run_simulation",
    "step_array",
]
