import pytest

from drunken_bishop.grid import Grid
from drunken_bishop.position import Position


def test_filled_grid_has_init_everywhere() -> None:
    grid = Grid.filled(3, 2, 7)
    assert len(grid.cells) == 6
    assert all(grid.get(Position(x, y)) == 7 for x in range(3) for y in range(2))


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_filled_rejects_empty_size(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        Grid.filled(width, height)


def test_set_returns_new_grid_and_keeps_original() -> None:
    grid = Grid.filled(3, 3)
    updated = grid.set(Position(2, 1), 5)
    assert updated.get(Position(2, 1)) == 5
    assert grid.get(Position(2, 1)) == 0
    assert updated != grid


def test_cells_are_row_major() -> None:
    grid = Grid.filled(3, 2).set(Position(1, 0), 1).set(Position(0, 1), 2)
    assert list(grid.cells) == [0, 1, 0, 2, 0, 0]
    assert list(grid.rows()) == [(0, 1, 0), (2, 0, 0)]


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 2), (5, 5)])
def test_out_of_bounds_access_raises(pos: tuple[int, int]) -> None:
    grid = Grid.filled(3, 2)
    with pytest.raises(IndexError):
        grid.get(Position(*pos))
    with pytest.raises(IndexError):
        grid.set(Position(*pos), 1)


def test_equal_grids_compare_and_hash_equal() -> None:
    a = Grid.filled(4, 4).set(Position(1, 1), 3)
    b = Grid.filled(4, 4).set(Position(1, 1), 3)
    assert a == b
    assert hash(a) == hash(b)
