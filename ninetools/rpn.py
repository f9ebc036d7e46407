"""Evaluation of reverse Polish notation expressions built from single digits."""

from __future__ import annotations

import sys

OPERATORS = "+-*/"
DIGITS = "0123456789"

_INT_BITS = 32


class RPNError(RuntimeError):
    """An expression that cannot be evaluated."""


def _wrap(number: int) -> int:
    """Reduce an integer to the range of a signed 32-bit value."""
    half = 1 << (_INT_BITS - 1)
    return (number + half) % (1 << _INT_BITS) - half


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def apply_operation(a: int, b: int, op: str) -> int:
    """Apply the binary operator ``op`` to ``a`` and ``b``.

    Division truncates toward zero; dividing by zero raises RPNError.
    """
    if op == "+":
        return _wrap(a + b)
    if op == "-":
        return _wrap(a - b)
    if op == "*":
        return _wrap(a * b)
    if op == "/":
        if b == 0:
            raise RPNError("Division by zero.")
        return _wrap(_truncating_divide(a, b))
    raise RPNError("Invalid operator.")


def evaluate(expression: str) -> int:
    """Evaluate an expression of single digits, operators and spaces."""
    stack: list[int] = []
    for char in expression:
        if char in DIGITS:
            stack.append(int(char))
        elif char in OPERATORS:
            if len(stack) < 2:
                raise RPNError("Not enough operands.")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operation(a, b, char))
        elif char != " ":
            raise RPNError("Invalid character in expression.")
    if len(stack) != 1:
        raise RPNError("Invalid expression.")
    return stack[0]


def main(argv=None) -> int:
    """Evaluate the expression given as the single argument and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: Invalid number of arguments.", file=sys.stderr)
        return 1
    try:
        result = evaluate(args[0])
    except RPNError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(result)
    return 0