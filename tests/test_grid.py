import pytest

from dsalgo.grid import BLANK, Grid


def test_new_grid_filled_with_default():
    grid = Grid(2, 3, default=7)
    assert (grid.rows, grid.cols) == (2, 3)
    assert all(grid.at(r, c) == 7 for r in range(2) for c in range(3))


def test_default_is_blank():
    grid = Grid(1, 2)
    assert list(grid) == [[BLANK, BLANK]]


def test_from_rows_round_trip():
    rows = [[1, 2, 3], [4, 5, 6]]
    grid = Grid.from_rows(rows)
    assert list(grid) == rows
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.at(1, 2) == rows[1][2]


def test_from_rows_ragged_raises():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 2], [3]])


def test_set_and_get_cell():
    grid = Grid(3, 3)
    grid[1, 2] = "x"
    assert grid[1, 2] == "x"
    assert grid.at(1, 2) == "x"


def test_row_indexing_is_writable():
    grid = Grid(2, 2)
    grid[0][1] = 9
    assert grid.at(0, 1) == 9


def test_replace_row():
    grid = Grid(2, 2)
    grid[1] = [3, 4]
    assert list(grid)[1] == [3, 4]
    with pytest.raises(ValueError):
        grid[0] = [1]


@pytest.mark.parametrize("cell", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_raises(cell):
    grid = Grid(2, 3)
    with pytest.raises(IndexError):
        grid.at(*cell)
    with pytest.raises(IndexError):
        grid[cell] = 1


def test_resize_discards_contents():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    grid.resize(3, 1, default=5)
    assert (grid.rows, grid.cols) == (3, 1)
    assert list(grid) == [[5], [5], [5]]


def test_copy_is_independent():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    clone = grid.copy()
    assert clone == grid
    clone[0, 0] = 99
    assert grid.at(0, 0) == 1
    assert clone != grid


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Grid(-1, 2)