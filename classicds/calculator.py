"""Evaluate integer arithmetic expressions with + - * / and parentheses."""

from __future__ import annotations

import argparse
import sys

_OPERATORS = "+-*/"


def _match_parentheses(expression: str) -> dict[int, int]:
    matches: dict[int, int] = {}
    open_positions: list[int] = []
    for position, char in enumerate(expression):
        if char == "(":
            open_positions.append(position)
        elif char == ")":
            if not open_positions:
                raise ValueError(f"unmatched ')' at position {position}")
            matches[open_positions.pop()] = position
    if open_positions:
        raise ValueError(f"unmatched '(' at position {open_positions[-1]}")
    return matches


def _truncating_div(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def _evaluate(expression: str, start: int, end: int, matches: dict[int, int]) -> int:
    terms: list[int] = []
    number = 0
    sign = "+"
    position = start
    while position <= end:
        char = expression[position]
        if "0" <= char <= "9":
            number = 10 * number + int(char)
        if char == "(":
            closing = matches[position]
            number = _evaluate(expression, position + 1, closing - 1, matches)
            position = closing
        if char in _OPERATORS or position == end:
            if sign == "+":
                terms.append(number)
            elif sign == "-":
                terms.append(-number)
            elif sign == "*":
                terms[-1] *= number
            elif sign == "/":
                terms[-1] = _truncating_div(terms[-1], number)
            sign = char
            number = 0
        position += 1
    return sum(terms)


def calculate(expression: str) -> int:
    """Evaluate ``expression``; division truncates toward zero.

    Raises ValueError for unbalanced parentheses and ZeroDivisionError
    for division by zero. Other characters are ignored.
    """
    matches = _match_parentheses(expression)
    return _evaluate(expression, 0, len(expression) - 1, matches)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="classicds-calc",
        description="Evaluate an arithmetic expression (read from stdin if omitted).",
    )
    parser.add_argument("expression", nargs="?", help="expression without spaces")
    args = parser.parse_args(argv)
    expression = args.expression
    if expression is None:
        tokens = sys.stdin.read().split()
        expression = tokens[0] if tokens else ""
    try:
        result = calculate(expression)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())