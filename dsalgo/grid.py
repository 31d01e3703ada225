"""A rectangular two-dimensional grid of values."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

BLANK = 0


class Grid:
    """A fixed-size table of ``rows`` by ``cols`` cells."""

    def __init__(self, rows: int, cols: int, default: Any = BLANK) -> None:
        self._fill(rows, cols, default)

    def _fill(self, rows: int, cols: int, default: Any) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._cells = [[default] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """Build a grid from a sequence of equally long rows."""
        data = [list(row) for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        grid = cls(len(data), width)
        grid._cells = data
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __iter__(self) -> Iterator[list]:
        return (list(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells and (self._rows, self._cols) == (other._rows, other._cols)

    def __repr__(self) -> str:
        return f"Grid.from_rows({self._cells!r})"

    def _check(self, row: int, col: int) -> None:
        if not 0 <= row < self._rows or not 0 <= col < self._cols:
            raise IndexError(f"cell ({row}, {col}) is outside a {self._rows}x{self._cols} grid")

    def at(self, row: int, col: int) -> Any:
        """Return the value at ``row``, ``col``; raises IndexError if outside."""
        self._check(row, col)
        return self._cells[row][col]

    def __getitem__(self, key):
        """``grid[r, c]`` gives a cell; ``grid[r]`` gives row ``r`` itself, writable."""
        if isinstance(key, tuple):
            row, col = key
            return self.at(row, col)
        if not 0 <= key < self._rows:
            raise IndexError(f"row {key} is outside a grid of {self._rows} rows")
        return self._cells[key]

    def __setitem__(self, key, value: Any) -> None:
        """``grid[r, c] = v`` sets a cell; ``grid[r] = values`` replaces a row."""
        if isinstance(key, tuple):
            row, col = key
            self._check(row, col)
            self._cells[row][col] = value
            return
        if not 0 <= key < self._rows:
            raise IndexError(f"row {key} is outside a grid of {self._rows} rows")
        new_row = list(value)
        if len(new_row) != self._cols:
            raise ValueError("row length does not match the grid width")
        self._cells[key] = new_row

    def resize(self, rows: int, cols: int, default: Any = BLANK) -> None:
        """Discard the contents and refill the grid at the new size."""
        self._fill(rows, cols, default)

    def copy(self) -> "Grid":
        """Return an independent copy of the grid."""
        return Grid.from_rows(self._cells)