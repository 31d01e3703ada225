"""Evaluation of single-digit postfix and prefix integer expressions."""

from __future__ import annotations

OPERATORS = frozenset("+-*/")


def is_operator(ch: str) -> bool:
    """Whether ``ch`` is one of ``+ - * /``."""
    return ch in OPERATORS


def apply_operator(left: int, right: int, op: str) -> int:
    """Apply ``op`` to two integers; division truncates towards zero.

    Raises ZeroDivisionError on division by zero and ValueError for an
    unknown operator.
    """
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError(f"unknown operator {op!r}")


def _evaluate(tokens, operands_reversed: bool) -> int:
    stack: list[int] = []
    for ch in tokens:
        if is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} is missing an operand")
            first = stack.pop()
            second = stack.pop()
            left, right = (first, second) if operands_reversed else (second, first)
            stack.append(apply_operator(left, right, ch))
        elif ch.isdigit() and len(ch) == 1 and "0" <= ch <= "9":
            stack.append(ord(ch) - ord("0"))
        else:
            raise ValueError(f"unexpected character {ch!r}")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits, e.g. ``231*+9-``."""
    return _evaluate(expression, operands_reversed=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single digits, e.g. ``-+8/632``."""
    return _evaluate(reversed(expression), operands_reversed=True)