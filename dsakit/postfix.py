"""Evaluation of postfix (reverse Polish) integer expressions."""

from __future__ import annotations

from collections.abc import Mapping


class PostfixError(ValueError):
    """Raised when a postfix expression cannot be evaluated."""


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    return left - right * _truncating_div(left, right)


def _power(base: int, exponent: int) -> int:
    if exponent < 0:
        raise PostfixError("negative exponent")
    return base**exponent


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "%": _truncating_mod,
    "^": _power,
}


def evaluate_postfix(expression: str, variables: Mapping[str, int] | None = None) -> int:
    """Evaluate a postfix expression of single-digit numbers, letters and operators.

    Letters take their values from ``variables``; whitespace is ignored.
    Division and remainder truncate toward zero.
    """
    variables = variables or {}
    stack: list[int] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if symbol.isalpha():
            try:
                stack.append(int(variables[symbol]))
            except KeyError:
                raise PostfixError(f"no value given for {symbol!r}") from None
        elif symbol.isdigit():
            stack.append(int(symbol))
        else:
            operation = _OPERATORS.get(symbol)
            if operation is None:
                raise PostfixError(f"unknown operator {symbol!r}")
            if len(stack) < 2:
                raise PostfixError(f"not enough operands for {symbol!r}")
            right = stack.pop()
            left = stack.pop()
            if symbol in "/%" and right == 0:
                raise PostfixError("division by zero")
            stack.append(operation(left, right))
    if not stack:
        raise PostfixError("empty expression")
    if len(stack) > 1:
        raise PostfixError("too many operands")
    return stack[0]