"""Number-theoretic helpers and random generation for BigInt."""

from __future__ import annotations

import random

from bigkit.bigint import BigInt, Number

__all__ = [
    "MAX_RANDOM_LENGTH",
    "big_abs",
    "big_pow10",
    "big_pow",
    "big_sqrt",
    "big_gcd",
    "big_lcm",
    "big_random",
]

# Upper bound on the digit count chosen when big_random is not given one.
MAX_RANDOM_LENGTH = 1000


def big_abs(num: Number) -> BigInt:
    """Absolute value of ``num``."""
    value = BigInt(num)
    return -value if value < 0 else value


def big_pow10(exp: int) -> BigInt:
    """Return 10 raised to the non-negative power ``exp``."""
    if exp < 0:
        raise ValueError("Exponent must be a non-negative integer")
    return BigInt("1" + "0" * exp)


def big_pow(base: Number, exp: int) -> BigInt:
    """Return ``base ** exp``; negative exponents truncate toward zero."""
    base = BigInt(base)
    if exp < 0:
        if base == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return base if big_abs(base) == 1 else BigInt(0)
    if exp == 0:
        if base == 0:
            raise ValueError("Zero cannot be raised to zero")
        return BigInt(1)

    result, result_odd = base, BigInt(1)
    while exp > 1:
        if exp % 2:
            result_odd *= result
        result *= result
        exp //= 2
    return result * result_odd


def big_sqrt(num: Number) -> BigInt:
    """Integer square root by Newton's method; ``num`` must be non-negative."""
    num = BigInt(num)
    if num < 0:
        raise ValueError("Cannot compute square root of a negative integer")
    if num == 0:
        return BigInt(0)
    if num < 4:
        return BigInt(1)
    if num < 9:
        return BigInt(2)
    if num < 16:
        return BigInt(3)

    previous = BigInt(-1)
    # Start near the root: it has about half as many digits as num.
    current = big_pow10(len(num.to_string()) // 2 - 1)
    while big_abs(current - previous) > 1:
        previous = current
        current = (num // previous + previous) // 2
    return current


def big_gcd(num1: Number, num2: Number) -> BigInt:
    """Greatest common divisor by Euclid's algorithm; always non-negative."""
    a = big_abs(num1)
    b = big_abs(num2)
    if b == 0:
        return a
    if a == 0:
        return b
    while b != 0:
        a, b = b, a % b
    return a


def big_lcm(num1: Number, num2: Number) -> BigInt:
    """Least common multiple; zero if either argument is zero."""
    a, b = BigInt(num1), BigInt(num2)
    if a == 0 or b == 0:
        return BigInt(0)
    return big_abs(a * b) // big_gcd(a, b)


def big_random(num_digits: int = 0) -> BigInt:
    """Random positive BigInt with exactly ``num_digits`` digits.

    With ``num_digits`` of zero, a length from 1 to MAX_RANDOM_LENGTH is
    chosen at random.
    """
    if num_digits < 0:
        raise ValueError("Number of digits must not be negative")
    rng = random.SystemRandom()
    if num_digits == 0:
        num_digits = 1 + rng.randrange(MAX_RANDOM_LENGTH)
    digits = str(1 + rng.randrange(9))
    while len(digits) < num_digits:
        digits += str(rng.getrandbits(32))
    return BigInt(digits[:num_digits])