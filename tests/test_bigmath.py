import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigkit.bigint import BigInt
from bigkit.bigmath import (
    MAX_RANDOM_LENGTH,
    big_abs,
    big_gcd,
    big_lcm,
    big_pow,
    big_pow10,
    big_random,
    big_sqrt,
)

ints = st.integers(min_value=-(10**40), max_value=10**40)


@given(ints)
def test_big_abs_matches_abs(n):
    assert int(big_abs(n)) == abs(n)
    assert big_abs(str(n)) == big_abs(BigInt(n))


@given(st.integers(min_value=0, max_value=200))
def test_big_pow10(exp):
    assert int(big_pow10(exp)) == 10**exp


def test_big_pow10_negative_raises():
    with pytest.raises(ValueError):
        big_pow10(-1)


@given(
    st.integers(min_value=-50, max_value=50).filter(lambda n: n != 0),
    st.integers(min_value=0, max_value=30),
)
def test_big_pow_matches_int(base, exp):
    assert int(big_pow(base, exp)) == base**exp
    assert big_pow(str(base), exp) == big_pow(BigInt(base), exp)


def test_big_pow_zero_base():
    assert big_pow(0, 5) == 0
    with pytest.raises(ValueError, match="Zero cannot be raised to zero"):
        big_pow(0, 0)
    with pytest.raises(ZeroDivisionError, match="Cannot divide by zero"):
        big_pow(0, -1)


def test_big_pow_negative_exponent():
    assert big_pow(1, -4) == 1
    assert big_pow(-1, -3) == -1
    assert big_pow(5, -2) == 0


@pytest.mark.parametrize(
    "num, root",
    [(0, 0), (1, 1), (3, 1), (4, 2), (8, 2), (9, 3), (15, 3)],
)
def test_big_sqrt_small_values(num, root):
    assert big_sqrt(num) == root


@given(st.integers(min_value=0, max_value=10**30))
def test_big_sqrt_of_perfect_square(k):
    assert int(big_sqrt(k * k)) == k


def test_big_sqrt_negative_raises():
    with pytest.raises(ValueError):
        big_sqrt(-1)


@given(ints, ints)
def test_big_gcd_matches_math(a, b):
    assert int(big_gcd(a, b)) == math.gcd(a, b)


def test_big_gcd_with_zero():
    assert big_gcd(0, -12) == 12
    assert big_gcd(-7, 0) == 7
    assert big_gcd(0, 0) == 0


@given(ints, ints)
def test_big_lcm_matches_math(a, b):
    assert int(big_lcm(a, b)) == math.lcm(a, b)


@given(st.integers(min_value=1, max_value=300))
def test_big_random_digit_count(n):
    value = big_random(n)
    text = str(value)
    assert len(text) == n
    assert text[0] != "0"
    assert value > 0


def test_big_random_default_length():
    value = big_random()
    assert 1 <= len(str(value)) <= MAX_RANDOM_LENGTH
    assert value > 0


def test_big_random_negative_raises():
    with pytest.raises(ValueError):
        big_random(-3)