"""Infix to postfix conversion and postfix evaluation."""

from __future__ import annotations


class ExpressionError(ValueError):
    """Raised for a malformed infix or postfix expression."""


_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(symbol, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, are grouped left to right.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif char in _PRECEDENCE:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while stack:
        symbol = stack.pop()
        if symbol == "(":
            raise ExpressionError("unmatched '('")
        output.append(symbol)
    return "".join(output)


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single decimal digits and + - * /.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if char.isascii() and char.isdigit():
            stack.append(int(char))
            continue
        if char not in "+-*/":
            raise ExpressionError(f"unexpected character {char!r}")
        if len(stack) < 2:
            raise ExpressionError(f"not enough operands for {char!r}")
        right = stack.pop()
        left = stack.pop()
        if char == "+":
            stack.append(left + right)
        elif char == "-":
            stack.append(left - right)
        elif char == "*":
            stack.append(left * right)
        else:
            if right == 0:
                raise ExpressionError("division by zero")
            stack.append(_truncating_divide(left, right))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]