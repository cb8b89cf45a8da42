"""A fixed-size set of bits packed into bytes, lowest bit first."""

from __future__ import annotations

from typing import Iterator, Union

__all__ = ["Bitset", "count_trailing_zeros"]

_U64_MAX = 2**64 - 1


class Bitset:
    """``size`` bits stored little-endian in ceil(size / 8) bytes."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Bitset size must not be negative")
        self._size = size
        self._data = bytearray((size + 7) // 8)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"Bit {pos} is out of range for {self._size} bits")

    def __getitem__(self, pos: int) -> bool:
        self._check(pos)
        return bool((self._data[pos // 8] >> (pos % 8)) & 1)

    def __setitem__(self, pos: int, value: object) -> None:
        self._check(pos)
        mask = 1 << (pos % 8)
        if value:
            self._data[pos // 8] |= mask
        else:
            self._data[pos // 8] &= 0xFF ^ mask

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        for pos in range(self._size):
            yield self[pos]

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in reversed(list(self)))
        return f"Bitset({self._size}, 0b{bits or '0'})"

    def assign(self, value: Union[int, Bitset]) -> None:
        """Load an unsigned 64-bit integer, or copy another Bitset of equal size."""
        if isinstance(value, Bitset):
            if value._size != self._size:
                raise ValueError("Cannot copy a Bitset of a different size")
            self._data[:] = value._data
            return
        if not 0 <= value <= _U64_MAX:
            raise ValueError("Value must be an unsigned 64-bit integer")
        if value.bit_length() > self._size:
            raise OverflowError(f"{value} does not fit in {self._size} bits")
        self._data[:] = value.to_bytes(len(self._data), "little")

    def clear(self) -> None:
        """Set every bit to zero."""
        self._data[:] = bytes(len(self._data))


def count_trailing_zeros(left: int, right: int) -> int:
    """Trailing zero bits of ``left | right`` as a 64-bit value.

    When both are zero the answer is 63, the deepest bit the search reaches.
    """
    if left < 0 or right < 0:
        raise ValueError("Arguments must be non-negative")
    value = (left | right) & _U64_MAX
    if value == 0:
        return 63
    return (value & -value).bit_length() - 1