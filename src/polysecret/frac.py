"""Exact rational arithmetic for Lagrange interpolation.

Fractions are immutable (numerator, denominator) pairs of Python ints,
always in lowest terms with a positive denominator. Zero is 0/1.
No operation here ever touches float.
"""

from math import gcd
from typing import NamedTuple

from polysecret.errors import DivisionByZero


class ExactFraction(NamedTuple):
    numerator: int
    denominator: int

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def make(numerator: int, denominator: int) -> ExactFraction:
    """Build a normalized fraction.

    The denominator is made positive by negating both parts, then both
    are divided by gcd(|numerator|, denominator). gcd(0, d) = d, so any
    zero numerator reduces to 0/1.
    """
    if denominator == 0:
        raise DivisionByZero(numerator)
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    g = gcd(numerator, denominator)
    return ExactFraction(numerator // g, denominator // g)


ZERO = make(0, 1)
ONE = make(1, 1)


def add(a: ExactFraction, b: ExactFraction) -> ExactFraction:
    """a/b + c/d = (ad + cb) / bd."""
    return make(a.numerator * b.denominator + b.numerator * a.denominator,
                a.denominator * b.denominator)


def scale(a: ExactFraction, value: int) -> ExactFraction:
    """Multiply a fraction by an integer."""
    return make(a.numerator * value, a.denominator)


def is_integer(a: ExactFraction) -> bool:
    return a.denominator == 1
