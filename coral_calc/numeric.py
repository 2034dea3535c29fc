# numeric.py
"""Numeric primitives used by the evaluator."""

import math
from decimal import Decimal

from .errors import FactorialDomainError, NegativeEvenRootError, ZeroRootError

# 171! no longer fits in a double.
_FACTORIAL_OVERFLOW = 170


def _ensure_factorial_domain(n: float) -> None:
    if not math.isfinite(n) or n != math.trunc(n):
        raise FactorialDomainError(f"Factorial numbers can't be based on decimal numbers: {n:f} !")
    if n < 0:
        raise FactorialDomainError(f"You can't get the factorial of a negative number: {n:f} !")


def factorial(n: float) -> float:
    """Recursive factorial over non-negative integer-valued floats."""
    _ensure_factorial_domain(n)
    if n > _FACTORIAL_OVERFLOW:
        return math.inf
    if n == 0 or n == 1:
        return 1.0
    return n * factorial(n - 1)


def n_choose_r(n: float, r: float) -> float:
    return factorial(n) / (factorial(r) * factorial(n - r))


def n_permute_r(n: float, r: float) -> float:
    return factorial(n) / factorial(n - r)


def degrees_to_radians(x: float) -> float:
    return x * (math.pi / 180)


def absolute(x: float) -> float:
    if x < 0:
        return -x
    return x


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.trunc(x) and int(x) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """
    math.pow with IEEE-754 results instead of exceptions.

    math.pow raises where C's pow returns a special value: overflow gives +-inf,
    a zero base with a negative exponent gives inf and a negative base with a
    fractional exponent gives nan.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def nth_root(degree: float, radicand: float) -> float:
    """
    The `degree // radicand` operator: sign(radicand) * |radicand| ** (1 / degree).

    Only even integer degrees are undefined for negative radicands; any other degree
    keeps the radicand's sign.
    """
    if radicand < 0 and math.isfinite(degree) and degree == math.trunc(degree) and int(degree) % 2 == 0:
        raise NegativeEvenRootError(
            f"Negative numbers do not have roots of even numbers: {radicand} // {degree}"
        )
    if degree == 0:
        raise ZeroRootError(f"Can't get the 0th root: {degree} // {radicand}")
    magnitude = absolute(radicand)
    if degree == 2:
        result = math.sqrt(magnitude)
    else:
        result = ieee_pow(magnitude, 1.0 / degree)
    if radicand < 0:
        result = -result
    return result


def format_number(value: float) -> str:
    """Shortest round-tripping decimal text, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")
