"""Arithmetic on magnitudes: non-negative integers held as digit strings."""

from __future__ import annotations

import math

from bigkit.digits import (
    add_leading_zeroes,
    add_trailing_zeroes,
    get_larger_and_smaller,
    is_power_of_10,
    is_valid_number,
    strip_leading_zeroes,
)

__all__ = [
    "FLOOR_SQRT_LLONG_MAX",
    "LLONG_MAX",
    "compare_magnitudes",
    "add_magnitudes",
    "subtract_magnitudes",
    "multiply_magnitudes",
    "divide_magnitudes",
    "remainder_magnitudes",
]

FLOOR_SQRT_LLONG_MAX = 3037000499
LLONG_MAX = 9223372036854775807


def _normalise(num: str) -> str:
    if not num or not is_valid_number(num):
        raise ValueError(f"Expected a non-negative integer, got '{num}'")
    return strip_leading_zeroes(num)


def _cmp(a: str, b: str) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


def _fits(num: str, limit: int) -> bool:
    return _cmp(num, str(limit)) <= 0


def _add(a: str, b: str) -> str:
    larger, smaller = get_larger_and_smaller(a, b)
    digits = []
    carry = 0
    for x, y in zip(reversed(larger), reversed(smaller)):
        total = int(x) + int(y) + carry
        digits.append(str(total % 10))
        carry = total // 10
    if carry:
        digits.append(str(carry))
    return strip_leading_zeroes("".join(reversed(digits)))


def _sub(a: str, b: str) -> str:
    smaller = add_leading_zeroes(b, len(a) - len(b))
    digits = []
    borrow = 0
    for x, y in zip(reversed(a), reversed(smaller)):
        diff = int(x) - int(y) - borrow
        borrow = 1 if diff < 0 else 0
        digits.append(str(diff + 10 * borrow))
    return strip_leading_zeroes("".join(reversed(digits)))


def _mul(a: str, b: str) -> str:
    if a == "0" or b == "0":
        return "0"
    if a == "1":
        return b
    if b == "1":
        return a
    if _fits(a, FLOOR_SQRT_LLONG_MAX) and _fits(b, FLOOR_SQRT_LLONG_MAX):
        return str(int(a) * int(b))
    if is_power_of_10(a):
        return b + a[1:]
    if is_power_of_10(b):
        return a + b[1:]

    # Karatsuba split of the equal-length operands.
    larger, smaller = get_larger_and_smaller(a, b)
    half = len(larger) // 2
    half_ceil = math.ceil(len(larger) / 2)

    high1 = strip_leading_zeroes(larger[:half])
    low1 = strip_leading_zeroes(larger[half:])
    high2 = strip_leading_zeroes(smaller[:half])
    low2 = strip_leading_zeroes(smaller[half:])

    prod_high = _mul(high1, high2)
    prod_low = _mul(low1, low2)
    prod_mid = _sub(_sub(_mul(_add(high1, low1), _add(high2, low2)), prod_high), prod_low)

    prod_high = strip_leading_zeroes(add_trailing_zeroes(prod_high, 2 * half_ceil))
    prod_mid = strip_leading_zeroes(add_trailing_zeroes(prod_mid, half_ceil))
    return _add(_add(prod_high, prod_mid), prod_low)


def _long_divide(dividend: str, divisor: str) -> tuple[str, str]:
    quotient = []
    remainder = "0"
    for digit in dividend:
        remainder = strip_leading_zeroes(remainder + digit)
        count = 0
        while _cmp(remainder, divisor) >= 0:
            remainder = _sub(remainder, divisor)
            count += 1
        quotient.append(str(count))
    return strip_leading_zeroes("".join(quotient)), remainder


def compare_magnitudes(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    return _cmp(_normalise(a), _normalise(b))


def add_magnitudes(a: str, b: str) -> str:
    """Return the sum of two magnitudes."""
    return _add(_normalise(a), _normalise(b))


def subtract_magnitudes(a: str, b: str) -> str:
    """Return ``a - b``; ``a`` must not be smaller than ``b``."""
    a, b = _normalise(a), _normalise(b)
    if _cmp(a, b) < 0:
        raise ValueError(f"Cannot subtract {b} from the smaller magnitude {a}")
    return _sub(a, b)


def multiply_magnitudes(a: str, b: str) -> str:
    """Return the product of two magnitudes, using Karatsuba for large ones."""
    return _mul(_normalise(a), _normalise(b))


def divide_magnitudes(dividend: str, divisor: str) -> str:
    """Return the integer quotient of two magnitudes."""
    dividend, divisor = _normalise(dividend), _normalise(divisor)
    if divisor == "0":
        raise ZeroDivisionError("Attempted division by zero")
    if _cmp(dividend, divisor) < 0:
        return "0"
    if divisor == "1":
        return dividend
    if _fits(dividend, LLONG_MAX) and _fits(divisor, LLONG_MAX):
        return str(int(dividend) // int(divisor))
    if dividend == divisor:
        return "1"
    if is_power_of_10(divisor):
        return dividend[: len(dividend) - len(divisor) + 1]
    return _long_divide(dividend, divisor)[0]


def remainder_magnitudes(dividend: str, divisor: str) -> str:
    """Return the remainder of dividing one magnitude by another."""
    dividend, divisor = _normalise(dividend), _normalise(divisor)
    if divisor == "0":
        raise ZeroDivisionError("Attempted division by zero")
    if divisor == "1" or divisor == dividend:
        return "0"
    if _fits(dividend, LLONG_MAX) and _fits(divisor, LLONG_MAX):
        return str(int(dividend) % int(divisor))
    if _cmp(dividend, divisor) < 0:
        return dividend
    if is_power_of_10(divisor):
        zeroes = len(divisor) - 1
        return strip_leading_zeroes(dividend[len(dividend) - zeroes :])
    quotient = divide_magnitudes(dividend, divisor)
    return _sub(dividend, _mul(quotient, divisor))