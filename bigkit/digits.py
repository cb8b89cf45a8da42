"""Helpers for non-negative integers written as strings of decimal digits."""

from __future__ import annotations

__all__ = [
    "is_valid_number",
    "strip_leading_zeroes",
    "add_leading_zeroes",
    "add_trailing_zeroes",
    "get_larger_and_smaller",
    "is_power_of_10",
]

_DIGITS = frozenset("0123456789")


def is_valid_number(num: str) -> bool:
    """Return True if every character of ``num`` is a decimal digit.

    An empty string counts as valid, as it holds no offending character.
    """
    return all(ch in _DIGITS for ch in num)


def strip_leading_zeroes(num: str) -> str:
    """Return ``num`` without leading zeroes; all zeroes (or empty) gives "0"."""
    stripped = num.lstrip("0")
    return stripped if stripped else "0"


def add_leading_zeroes(num: str, num_zeroes: int) -> str:
    """Return ``num`` with ``num_zeroes`` zeroes put in front of it."""
    return "0" * num_zeroes + num


def add_trailing_zeroes(num: str, num_zeroes: int) -> str:
    """Return ``num`` with ``num_zeroes`` zeroes appended to it."""
    return num + "0" * num_zeroes


def get_larger_and_smaller(num1: str, num2: str) -> tuple[str, str]:
    """Order two digit strings as (larger, smaller).

    The smaller one is padded with leading zeroes to the larger one's length.
    """
    if len(num1) > len(num2) or (len(num1) == len(num2) and num1 > num2):
        larger, smaller = num1, num2
    else:
        larger, smaller = num2, num1
    return larger, add_leading_zeroes(smaller, len(larger) - len(smaller))


def is_power_of_10(num: str) -> bool:
    """Return True if ``num`` is a one followed only by zeroes."""
    return num[:1] == "1" and all(ch == "0" for ch in num[1:])