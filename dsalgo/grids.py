"""Grid and array puzzles: image flipping, rotting oranges, domino rotations."""

from __future__ import annotations

import math
from typing import List, MutableSequence, Sequence

EMPTY, FRESH, ROTTEN = 0, 1, 2


def flip_and_invert_image(image: List[MutableSequence[int]]) -> List[MutableSequence[int]]:
    """Mirror each row of a binary image and invert its bits, in place.

    Any non-zero value counts as set.  The image is returned.
    """
    for row in image:
        row[:] = [int(not value) for value in reversed(row)]
    return image


def _spread_rot(grid: List[MutableSequence[int]]) -> bool:
    """Rot every fresh orange next to a rotten one; return whether any did."""
    newly_rotten = []
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != FRESH:
                continue
            neighbours = (
                (i, j + 1) if j + 1 < len(row) else None,
                (i + 1, j) if i + 1 < len(grid) and j < len(grid[i + 1]) else None,
                (i - 1, j) if i > 0 and j < len(grid[i - 1]) else None,
                (i, j - 1) if j > 0 else None,
            )
            if any(pos is not None and grid[pos[0]][pos[1]] == ROTTEN for pos in neighbours):
                newly_rotten.append((i, j))

    for i, j in newly_rotten:
        grid[i][j] = ROTTEN
    return bool(newly_rotten)


def oranges_rotting(grid: List[MutableSequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells are 0 (empty), 1 (fresh) or 2 (rotten); each minute, fresh
    oranges next to rotten ones rot.  The grid is updated in place.
    """
    minutes = 0
    while _spread_rot(grid):
        minutes += 1
    if any(cell == FRESH for row in grid for cell in row):
        return -1
    return minutes


def _rotations_towards(first: Sequence[int], second: Sequence[int]) -> float:
    best = math.inf
    size = len(first)
    for i, target in enumerate(first):
        if i + 1 < size and target == first[i + 1]:
            continue
        swaps: float = 0
        for j in range(len(second)):
            if i == j:
                continue
            if target == second[j] and first[j] != second[j]:
                swaps += 1
            elif target != second[j] and target != first[j]:
                swaps = math.inf
                break
        best = min(best, swaps)
    if best != math.inf and best + 1 == size:
        best = 0
    return best


def min_domino_rotations(top: Sequence[int], bottom: Sequence[int]) -> int:
    """Return the fewest domino turns making one row all the same, or -1 if impossible.

    Raises ValueError when the rows differ in length.
    """
    if len(top) != len(bottom):
        raise ValueError("both rows must have the same length")
    best = _rotations_towards(top, bottom)
    if best != 0:
        best = min(best, _rotations_towards(bottom, top))
    return -1 if best == math.inf else int(best)