"""Integer fractions with simplifying arithmetic."""

from __future__ import annotations

import math
import re

_FRACTION_RE = re.compile(r"\s*([+-]?\d+)\s*(\S)\s*([+-]?\d+)\s*")


class Fraction:
    """A numerator/denominator pair; arithmetic results are simplified."""

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int = 1, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        self.numerator = numerator
        self.denominator = denominator

    def simplify(self) -> Fraction:
        """Reduce to lowest terms with a positive denominator, in place.

        A zero numerator leaves the fraction untouched.
        """
        if self.numerator == 0:
            return self
        divisor = math.gcd(self.numerator, self.denominator)
        self.numerator //= divisor
        self.denominator //= divisor
        if self.denominator < 0:
            self.numerator = -self.numerator
            self.denominator = -self.denominator
        return self

    def __add__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        ).simplify()

    def __sub__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        ).simplify()

    def __mul__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        ).simplify()

    def __truediv__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        ).simplify()

    def __str__(self) -> str:
        if self.numerator == 0:
            return "0"
        if self.denominator != 1:
            return f"{self.numerator}/{self.denominator}"
        return str(self.numerator)

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"


def parse_fraction(text: str) -> Fraction:
    """Parse ``numerator<sep>denominator`` such as ``3/4`` and simplify it."""
    match = _FRACTION_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"expected a fraction like '3/4', got {text!r}")
    numerator, denominator = int(match.group(1)), int(match.group(3))
    if denominator == 0:
        raise ValueError("denominator must not be zero")
    return Fraction(numerator, denominator).simplify()