from dataclasses import FrozenInstanceError

import pytest

from game_of_life.cell import Cell


def test_revived_keeps_coordinates():
    cell = Cell(alive=False, x=3, y=7)
    revived = cell.revived()
    assert revived == Cell(alive=True, x=3, y=7)
    assert cell.alive is False


def test_with_state():
    cell = Cell(alive=True, x=0, y=1)
    assert cell.with_state(False) == Cell(alive=False, x=0, y=1)
    assert cell.with_state(True) == cell


def test_cell_is_immutable():
    cell = Cell(alive=False, x=0, y=0)
    with pytest.raises(FrozenInstanceError):
        cell.alive = True
