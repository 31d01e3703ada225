"""Points, lines and axis-aligned squares, including a square bisector."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

Number = Union[int, float]


@dataclass
class Point:
    """A point on the plane."""

    x: float
    y: float


@dataclass
class Line:
    """A line segment from ``start`` to ``end`` with its slope and y-intercept."""

    start: Point
    end: Point
    slope: float = field(init=False)
    y_intercept: float = field(init=False)

    def __post_init__(self) -> None:
        delta_y = self.end.y - self.start.y
        delta_x = self.end.x - self.start.x
        if delta_x == 0:
            self.slope = math.copysign(math.inf, delta_y) if delta_y else math.nan
        else:
            self.slope = delta_y / delta_x
        self.y_intercept = self.end.y - self.slope * self.end.x


def is_between(start, middle, end) -> bool:
    """Whether ``middle`` lies between ``start`` and ``end`` inclusive.

    Works on numbers, and on points coordinate by coordinate.
    """
    if isinstance(middle, Point):
        return is_between(start.x, middle.x, end.x) and is_between(start.y, middle.y, end.y)
    if start > end:
        return end <= middle <= start
    return start <= middle <= end


class Square:
    """An axis-aligned square given by its edges."""

    def __init__(self, left: Number, right: Number, top: Number, bottom: Number) -> None:
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom
        self.size = abs(right - left)

    def __repr__(self) -> str:
        return (
            f"Square(left={self.left!r}, right={self.right!r}, "
            f"top={self.top!r}, bottom={self.bottom!r})"
        )

    def middle(self) -> Point:
        """Return the centre of the square."""
        return Point((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    def extend(self, mid1: Point, mid2: Point, size: Number) -> Point:
        """Follow the line from ``mid2`` through ``mid1`` to the edge of a square.

        The square is centred on ``mid1`` with side ``size``; a negative
        size reaches the opposite edge.
        """
        x_dir = -1 if mid1.x < mid2.x else 1
        y_dir = -1 if mid1.y < mid2.y else 1
        half = size / 2.0

        if mid1.x == mid2.x:
            return Point(mid1.x, mid1.y + y_dir * half)

        slope = (mid1.y - mid2.y) / (mid1.x - mid2.x)
        if abs(slope) == 1:
            x = mid1.x + x_dir * half
            y = mid1.y + y_dir * half
        elif abs(slope) < 1:
            x = mid1.x + x_dir * half
            y = slope * (x - mid1.x) + mid1.y
        else:
            y = mid1.y + y_dir * half
            x = (y - mid1.y) / slope + mid1.x
        return Point(x, y)

    def cut(self, other: "Square") -> Line:
        """Return the segment that cuts both this square and ``other`` in half."""
        mine, theirs = self.middle(), other.middle()
        first = self.extend(mine, theirs, self.size)
        candidates = (
            self.extend(mine, theirs, -self.size),
            other.extend(theirs, mine, other.size),
            other.extend(theirs, mine, -other.size),
        )

        start = end = first
        for point in candidates:
            if point.x < start.x or (point.x == start.x and point.y < start.y):
                start = point
            elif point.x > end.x or (point.x == end.x and point.y > end.y):
                end = point
        return Line(start, end)


def bisect_squares(a: Square, b: Square) -> Line:
    """Return a line cutting both squares in half."""
    return a.cut(b)