import math

import pytest

from dsalgo.geometry import Line, Point, Square, bisect_squares, is_between


def _on_line(line, point):
    return math.isclose(line.slope * point.x + line.y_intercept, point.y, abs_tol=1e-9)


def test_line_slope_and_intercept():
    line = Line(Point(0, 1), Point(2, 5))
    assert line.slope == pytest.approx(2.0)
    assert line.y_intercept == pytest.approx(1.0)
    assert _on_line(line, line.start)


def test_vertical_line_has_infinite_slope():
    line = Line(Point(3, 1), Point(3, 4))
    assert line.slope == math.inf


@pytest.mark.parametrize(
    "start, middle, end, expected",
    [
        (1, 2, 3, True),
        (3, 2, 1, True),
        (1, 4, 3, False),
        (1.5, 1.5, 2.5, True),
        (2.5, 0.5, 1.5, False),
    ],
)
def test_is_between_numbers(start, middle, end, expected):
    assert is_between(start, middle, end) is expected


def test_is_between_points():
    assert is_between(Point(0, 0), Point(1, 1), Point(2, 2))
    assert not is_between(Point(0, 0), Point(1, 3), Point(2, 2))


def test_square_middle():
    square = Square(1, 4, 5, 8)
    assert square.middle() == Point(2.5, 6.5)
    assert square.size == 3


def test_source_example_bisects_both_squares():
    a = Square(1, 4, 5, 8)
    b = Square(2, 5, 6, 9)
    line = bisect_squares(a, b)
    assert line.slope == pytest.approx(1.0)
    assert _on_line(line, a.middle())
    assert _on_line(line, b.middle())
    assert line.start.x <= line.end.x
    assert line.start == Point(a.left, a.top)


@pytest.mark.parametrize(
    "a, b",
    [
        (Square(0, 2, 0, 2), Square(10, 12, 1, 3)),  # shallow
        (Square(0, 2, 0, 2), Square(1, 3, 10, 12)),  # steep
        (Square(0, 4, 0, 4), Square(6, 8, 6, 8)),  # diagonal
    ],
)
def test_line_passes_through_both_centres(a, b):
    line = a.cut(b)
    assert _on_line(line, a.middle())
    assert _on_line(line, b.middle())
    assert line.start.x <= line.end.x


def test_shallow_cut_reaches_outer_edges():
    a = Square(0, 2, 0, 2)
    b = Square(10, 12, 1, 3)
    line = a.cut(b)
    assert line.start.x == a.left
    assert line.end.x == b.right


def test_vertical_alignment():
    a = Square(0, 2, 0, 2)
    b = Square(0, 2, 5, 7)
    line = bisect_squares(a, b)
    assert line.start.x == line.end.x == a.middle().x
    assert line.start.y < line.end.y
    assert line.start.y == a.top
    assert line.end.y == b.bottom