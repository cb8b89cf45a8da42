"""Signed arbitrary-size integers stored as a sign and a string of digits."""

from __future__ import annotations

from typing import TextIO, Union

from bigkit.arith import (
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    multiply_magnitudes,
    remainder_magnitudes,
    subtract_magnitudes,
)
from bigkit.digits import is_valid_number, strip_leading_zeroes

__all__ = ["BigInt", "Number"]

_CHUNK_DIGITS = 18
_CHUNK_BASE = 10**_CHUNK_DIGITS

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


def _int_to_magnitude(n: int) -> str:
    """Digits of a non-negative int, without the interpreter's digit limit."""
    if n < _CHUNK_BASE:
        return str(n)
    chunks = []
    while n:
        n, low = divmod(n, _CHUNK_BASE)
        chunks.append(low)
    head = str(chunks[-1])
    return head + "".join(f"{chunk:018d}" for chunk in reversed(chunks[:-1]))


def _magnitude_to_int(digits: str) -> int:
    """Int value of a digit string, without the interpreter's digit limit."""
    head_len = len(digits) % _CHUNK_DIGITS or _CHUNK_DIGITS
    result = int(digits[:head_len])
    for start in range(head_len, len(digits), _CHUNK_DIGITS):
        result = result * _CHUNK_BASE + int(digits[start : start + _CHUNK_DIGITS])
    return result


def _parse(text: str) -> tuple[str, str]:
    if text[:1] in ("+", "-"):
        sign, magnitude = text[0], text[1:]
    else:
        sign, magnitude = "+", text
    if not is_valid_number(magnitude):
        raise ValueError(f"Expected an integer, got '{text}'")
    return sign, strip_leading_zeroes(magnitude)


class BigInt:
    """An immutable integer of any size.

    Division and remainder truncate toward zero: the quotient's sign follows
    the operands' signs, and the remainder takes the sign of the dividend.
    """

    __slots__ = ("_sign", "_value")

    def __init__(self, value: Number = 0) -> None:
        if isinstance(value, BigInt):
            sign, magnitude = value._sign, value._value
        elif isinstance(value, int):
            sign = "-" if value < 0 else "+"
            magnitude = _int_to_magnitude(abs(value))
        elif isinstance(value, str):
            sign, magnitude = _parse(value)
        else:
            raise TypeError(f"Cannot make a BigInt from {type(value).__name__}")
        self._sign = "+" if magnitude == "0" else sign
        self._value = magnitude

    @classmethod
    def _make(cls, sign: str, magnitude: str) -> BigInt:
        obj = cls.__new__(cls)
        obj._sign = "+" if magnitude == "0" else sign
        obj._value = magnitude
        return obj

    @classmethod
    def read(cls, stream: TextIO) -> BigInt:
        """Read the next whitespace-delimited integer from a text stream."""
        chars: list[str] = []
        while True:
            ch = stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if chars:
                    break
                continue
            chars.append(ch)
        if not chars:
            raise EOFError("No integer left to read")
        return cls("".join(chars))

    # Conversions

    def to_string(self) -> str:
        """Decimal text, prefixed with '-' when negative."""
        return "-" + self._value if self._sign == "-" else self._value

    def _bounded(self, low: int, high: int, kind: str) -> int:
        value = int(self)
        if not low <= value <= high:
            raise OverflowError(f"{self.to_string()} is out of range for {kind}")
        return value

    def to_int(self) -> int:
        """Value as a 32-bit signed integer; OverflowError if it does not fit."""
        return self._bounded(_INT_MIN, _INT_MAX, "int")

    def to_long(self) -> int:
        """Value as a 64-bit signed long; OverflowError if it does not fit."""
        return self._bounded(_LONG_MIN, _LONG_MAX, "long")

    def to_long_long(self) -> int:
        """Value as a 64-bit signed long long; OverflowError if it does not fit."""
        return self._bounded(_LONG_MIN, _LONG_MAX, "long long")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    def __int__(self) -> int:
        magnitude = _magnitude_to_int(self._value)
        return -magnitude if self._sign == "-" else magnitude

    def __index__(self) -> int:
        return int(self)

    def __hash__(self) -> int:
        return hash(int(self))

    # Unary operators

    def __pos__(self) -> BigInt:
        return self

    def __neg__(self) -> BigInt:
        return BigInt._make("+" if self._sign == "-" else "-", self._value)

    def __abs__(self) -> BigInt:
        return BigInt._make("+", self._value)

    # Comparisons

    def _compare(self, other: BigInt) -> int:
        if self._sign != other._sign:
            return -1 if self._sign == "-" else 1
        result = compare_magnitudes(self._value, other._value)
        return -result if self._sign == "-" else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sign == rhs._sign and self._value == rhs._value

    def __lt__(self, other: Number) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: Number) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: Number) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: Number) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # Arithmetic

    def __add__(self, other: Number) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, rhs)

    def __radd__(self, other: Number) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, self)

    def __sub__(self, other: Number) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, -rhs)

    def __rsub__(self, other: Number) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, -self)

    def __mul__(self, other: Number) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _mul(self, rhs)

    def __rmul__(self, other: Number) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _mul(lhs, self)

    def __floordiv__(self, other: Number) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _div(self, rhs)

    def __rfloordiv__(self, other: Number) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _div(lhs, self)

    def __mod__(self, other: Number) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _mod(self, rhs)

    def __rmod__(self, other: Number) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _mod(lhs, self)


Number = Union[BigInt, int, str]


def _coerce(value: object) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, (int, str)):
        return BigInt(value)
    return None


def _add(a: BigInt, b: BigInt) -> BigInt:
    if a._sign == b._sign:
        return BigInt._make(a._sign, add_magnitudes(a._value, b._value))
    order = compare_magnitudes(a._value, b._value)
    if order == 0:
        return BigInt._make("+", "0")
    if order > 0:
        return BigInt._make(a._sign, subtract_magnitudes(a._value, b._value))
    return BigInt._make(b._sign, subtract_magnitudes(b._value, a._value))


def _mul(a: BigInt, b: BigInt) -> BigInt:
    sign = "+" if a._sign == b._sign else "-"
    return BigInt._make(sign, multiply_magnitudes(a._value, b._value))


def _div(a: BigInt, b: BigInt) -> BigInt:
    if b._value == "0":
        raise ZeroDivisionError("Attempted division by zero")
    sign = "+" if a._sign == b._sign else "-"
    return BigInt._make(sign, divide_magnitudes(a._value, b._value))


def _mod(a: BigInt, b: BigInt) -> BigInt:
    if b._value == "0":
        raise ZeroDivisionError("Attempted division by zero")
    return BigInt._make(a._sign, remainder_magnitudes(a._value, b._value))