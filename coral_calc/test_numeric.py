# test_numeric.py

import math

import pytest

from coral_calc.errors import FactorialDomainError, NegativeEvenRootError, ZeroRootError
from coral_calc.numeric import (
    absolute, degrees_to_radians, factorial, format_number, ieee_pow, n_choose_r, n_permute_r,
    nth_root,
)


@pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
def test_factorial(n, expected):
    assert factorial(float(n)) == expected


@pytest.mark.parametrize("n", [-1.0, 2.5, math.inf, math.nan])
def test_factorial_domain(n):
    with pytest.raises(FactorialDomainError):
        factorial(n)


def test_factorial_overflow():
    assert factorial(171.0) == math.inf
    assert factorial(1000.0) == math.inf


def test_combinatorics():
    assert n_choose_r(5, 2) == 10
    assert n_choose_r(5, 0) == 1
    assert n_permute_r(5, 2) == 20
    assert n_permute_r(4, 4) == 24
    with pytest.raises(FactorialDomainError):
        n_choose_r(2, 5)


def test_degrees_and_absolute():
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert absolute(-3.5) == 3.5
    assert absolute(2) == 2


def test_ieee_pow():
    assert ieee_pow(2, 10) == 1024
    assert ieee_pow(0, -1) == math.inf
    assert ieee_pow(10, 400) == math.inf
    assert ieee_pow(-10, 401) == -math.inf
    assert math.isnan(ieee_pow(-8, 1 / 3))


def test_nth_root():
    assert nth_root(2, 16) == 4
    assert nth_root(3, -8) == pytest.approx(-2)
    assert nth_root(0.5, -4) == -16
    with pytest.raises(ZeroRootError):
        nth_root(0, 8)
    with pytest.raises(NegativeEvenRootError):
        nth_root(2, -4)
    with pytest.raises(NegativeEvenRootError):
        nth_root(0, -4)


@pytest.mark.parametrize("value,text", [
    (0.0, "0"),
    (0.5, "0.5"),
    (50.0, "50"),
    (-2.5, "-2.5"),
    (645.1952191045343, "645.1952191045343"),
    (299792458.0, "299792458"),
    (1e23, "100000000000000000000000"),
    (1e-7, "0.0000001"),
    (math.inf, "+Inf"),
    (-math.inf, "-Inf"),
    (math.nan, "NaN"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_number_round_trips():
    for value in (0.1, 1 / 3, math.pi, 1e-300, 1.7976931348623157e308):
        assert float(format_number(value)) == value
