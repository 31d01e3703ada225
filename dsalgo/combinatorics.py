"""Backtracking and enumeration: queens, permutations, power sets, run-length compression."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Any, Iterator, Sequence

GRID_SIZE = 8


def _queen_placements(n: int) -> Iterator[tuple]:
    """Yield every safe placement as a tuple of column indices, one per row.

    Placements come in order of the first row's column, then the second's,
    and so on.
    """
    columns: list[int] = []
    used_columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> Iterator[tuple]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if col in used_columns or (row - col) in falling or (row + col) in rising:
                continue
            columns.append(col)
            used_columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used_columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    yield from place(0)


def eight_queens() -> list:
    """Return every way to place eight queens on an 8x8 board safely.

    Each arrangement is a list giving the queen's column for each row.
    """
    return [list(placement) for placement in _queen_placements(GRID_SIZE)]


def solve_n_queens(n: int) -> list:
    """Return every safe arrangement of ``n`` queens as boards of strings.

    A board is a list of ``n`` rows, with ``Q`` for a queen and ``.`` for
    an empty square.  Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in placement]
        for placement in _queen_placements(n)
    ]


def unique_permutations(text: str) -> list:
    """Return all distinct permutations of ``text`` in lexicographic order."""
    counts = dict(sorted(Counter(text).items()))
    results: list[str] = []
    prefix: list[str] = []

    def build(remaining: int) -> None:
        if remaining == 0:
            results.append("".join(prefix))
            return
        for ch, count in counts.items():
            if count > 0:
                counts[ch] = count - 1
                prefix.append(ch)
                build(remaining - 1)
                prefix.pop()
                counts[ch] = count

    build(len(text))
    return results


def power_set(items: Sequence[Any]) -> list:
    """Return every subset of ``items`` as a list.

    Subsets are built from the last item backwards: the subsets without an
    item come first, then the same subsets with that item appended.
    """
    subsets: list[list] = [[]]
    for item in reversed(list(items)):
        subsets += [subset + [item] for subset in subsets]
    return subsets


def power_set_recursive(items: Sequence[Any]) -> list:
    """Return every subset of ``items``, in the same order as :func:`power_set`."""
    values = list(items)

    def subsets_from(index: int) -> list:
        if index == len(values):
            return [[]]
        rest = subsets_from(index + 1)
        return rest + [subset + [values[index]] for subset in rest]

    return subsets_from(0)


def compress(text: str) -> str:
    """Run-length encode ``text`` as character followed by count.

    The original text is returned when the encoding is not shorter.
    """
    if len(text) < 2:
        return text
    encoded = "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(text))
    return encoded if len(encoded) < len(text) else text