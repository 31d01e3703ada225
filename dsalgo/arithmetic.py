"""Integer arithmetic built from addition alone, and small counting helpers."""

from __future__ import annotations


def negate(num: int) -> int:
    """Return ``-num`` using only addition.

    The step towards zero doubles each round and drops back to one unit
    whenever it would overshoot.
    """
    result = 0
    unit = 1 if num < 0 else -1
    delta = unit
    while num != 0:
        overshoots = ((num + delta) > 0) != (num > 0)
        if num + delta != 0 and overshoots:
            delta = unit
        result += delta
        num += delta
        delta += delta
    return result


def _absolute(num: int) -> int:
    return negate(num) if num < 0 else num


def subtract(a: int, b: int) -> int:
    """Return ``a - b`` using only addition."""
    return a + negate(b)


def multiply(a: int, b: int) -> int:
    """Return ``a * b`` using only addition."""
    if a < b:
        a, b = b, a
    total = 0
    for _ in range(_absolute(b)):
        total += a
    return negate(total) if b < 0 else total


def divide(a: int, b: int) -> int:
    """Return ``a / b`` truncated towards zero, using only addition.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("Divide by zero exception")

    abs_a = _absolute(a)
    abs_b = _absolute(b)
    product = 0
    quotient = 0
    while product + abs_b <= abs_a:
        product += abs_b
        quotient += 1

    same_sign = (a < 0 and b < 0) or (a > 0 and b > 0)
    return quotient if same_sign else negate(quotient)


def _double_and_add(smaller: int, bigger: int) -> int:
    if smaller == 0:
        return 0
    if smaller == 1:
        return bigger
    half = _double_and_add(smaller >> 1, bigger)
    if smaller % 2 == 1:
        return half + half + bigger
    return half + half


def recursive_multiply(a: int, b: int) -> int:
    """Multiply two non-negative integers by halving the smaller one.

    Raises ValueError for negative operands.
    """
    if a < 0 or b < 0:
        raise ValueError("operands must be non-negative")
    bigger, smaller = (b, a) if a < b else (a, b)
    return _double_and_add(smaller, bigger)


def cutting_paper_squares(n: int, m: int) -> int:
    """Return the number of cuts needed to split an n x m sheet into unit squares."""
    return n * m - 1