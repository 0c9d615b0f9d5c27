import math

import pytest

from dsdrills.recursion import (
    eight_queens,
    factorial,
    format_queens,
    gcd,
    gcd_array,
    recur3,
)


@pytest.mark.parametrize("n", range(0, 13))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_of_negative_is_same_as_zero():
    assert factorial(-3) == factorial(0)


@pytest.mark.parametrize("x,y", [(12, 18), (7, 13), (100, 75), (81, 27), (1, 1)])
def test_gcd_matches_math(x, y):
    assert gcd(x, y) == math.gcd(x, y)
    assert gcd(y, x) == math.gcd(x, y)


def test_gcd_with_zero_returns_other():
    assert gcd(42, 0) == 42


@pytest.mark.parametrize(
    "values", [[12, 18, 24], [7, 14], [30, 45, 60, 75], [17, 34, 51, 68, 85]]
)
def test_gcd_array_matches_math(values):
    assert gcd_array(values) == math.gcd(*values)


def test_gcd_array_single_value():
    assert gcd_array([9]) == 9


def test_gcd_array_empty_raises():
    with pytest.raises(ValueError):
        gcd_array([])


@pytest.mark.parametrize("n", range(2, 9))
def test_recur3_follows_its_recurrence(n):
    assert recur3(n) == recur3(n - 1) + recur3(n - 2) + [n]


@pytest.mark.parametrize("n", [0, -1, -5])
def test_recur3_nonpositive_prints_nothing(n):
    assert recur3(n) == []


def test_recur3_last_value_is_argument():
    assert recur3(6)[-1] == 6


def test_eight_queens_count_and_first():
    solutions = eight_queens()
    assert len(solutions) == 92
    assert solutions[0] == (0, 4, 7, 5, 2, 6, 1, 3)


def test_eight_queens_are_valid_and_ordered():
    solutions = eight_queens()
    assert solutions == sorted(set(solutions))
    for sol in solutions:
        assert sorted(sol) == list(range(8))
        assert len({c + r for c, r in enumerate(sol)}) == 8
        assert len({c - r for c, r in enumerate(sol)}) == 8


def test_format_queens_round_trip():
    sol = eight_queens()[0]
    text = format_queens(sol)
    assert len(text) == 2 * len(sol)
    assert [int(part) for part in text.split()] == list(sol)