# bigkit

A small toolkit centred on `BigInt`, an immutable arbitrary-size signed
integer kept as a sign and a string of decimal digits. Alongside it are a
few small helpers: a doubly linked list, an ordered pair, a byte-backed
bitset and a binary record reader and writer. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## BigInt

```python
from bigkit.bigint import BigInt

a = BigInt("-123456789012345678901234567890")
b = BigInt(987654321)

print(a + b, a - b, a * b)
print(a // b, a % b)            # quotient truncates toward zero; remainder takes the dividend's sign
print(a < b, a == "-123456789012345678901234567890")
print(a.to_string(), int(b))
```

Operands may be `BigInt`, `int` or digit strings with an optional leading
`+` or `-`; mixed operands work on either side of an operator. Leading
zeroes are dropped and zero is always positive.

- A string containing anything other than digits after the sign raises
  `ValueError`.
- `//` and `%` by zero raise `ZeroDivisionError`.
- `to_int` raises `OverflowError` outside the 32-bit signed range;
  `to_long` and `to_long_long` do so outside the 64-bit signed range.
  `int(x)` has no limit.
- `BigInt` values are hashable and hash like the equal `int`.
- `BigInt.read(stream)` reads the next whitespace-separated token from a
  text stream and parses it; it raises `EOFError` when no token is left.

### Maths helpers

```python
from bigkit.bigint import BigInt
from bigkit.bigmath import big_abs, big_pow, big_pow10, big_sqrt, big_gcd, big_lcm, big_random

big_pow(2, 100)          # BigInt('1267650600228229401496703205376')
big_sqrt(BigInt(99))     # BigInt('9')
big_gcd(12, 18)          # BigInt('6')
big_lcm(4, 6)            # BigInt('12')
big_pow10(5)             # BigInt('100000')
big_abs(-7)              # BigInt('7')
big_random(20)           # a random 20-digit BigInt
```

- `big_pow` with a negative exponent returns the base when its absolute
  value is 1 and zero otherwise; a zero base raises `ZeroDivisionError` for
  a negative exponent and `ValueError` for a zero exponent.
- `big_sqrt` returns the integer square root and raises `ValueError` for a
  negative argument.
- `big_gcd` is always non-negative; `big_lcm` is zero if either argument is.
- `big_random()` with no argument picks a length from 1 to
  `MAX_RANDOM_LENGTH` (1000) digits. The first digit is never zero.

### Digit-string building blocks

`bigkit.digits` has helpers on plain digit strings (`is_valid_number`,
`strip_leading_zeroes`, `add_leading_zeroes`, `add_trailing_zeroes`,
`get_larger_and_smaller`, `is_power_of_10`).

`bigkit.arith` does arithmetic on non-negative digit strings:

```python
from bigkit.arith import add_magnitudes, multiply_magnitudes, divide_magnitudes

add_magnitudes("99", "1")                 # '100'
multiply_magnitudes("12", "34")           # '408'
divide_magnitudes("1000", "7")            # '142'
```

`compare_magnitudes`, `subtract_magnitudes` and `remainder_magnitudes`
complete the set. `subtract_magnitudes` raises `ValueError` when the result
would be negative; invalid or empty strings raise `ValueError`.

## Other helpers

- `bigkit.linkedlist.LinkedList`: built from an optional iterable;
  `push_back` and `push_front` return the new `Node`; `insert_before` and
  `insert_after` insert next to a node; `remove`, `pop_back` and
  `pop_front` return the removed value, or `None` on an empty list; `at(pos)`
  returns the node at an index and raises `bigkit.errors.CheckError` when it
  is out of range. Lists support `len`, truth testing, iteration,
  `reversed()` and `format()`, which gives each value followed by a space,
  then a newline.
- `bigkit.pair.Pair`: a dataclass with `first` and `second`, ordered
  lexicographically, printed as `(first, second)`; `swap` exchanges members
  with another pair. `is_same_pair(value)` tells whether a value is a `Pair`
  whose members have the same type.
- `bigkit.bitset.Bitset(size)`: a fixed number of bits stored in bytes,
  lowest bit first. Indexing reads and writes single bits (out-of-range
  positions raise `IndexError`); `assign` loads an unsigned 64-bit integer
  or copies a `Bitset` of the same size; `clear` zeroes every bit;
  `bytes(bitset)` gives the raw bytes.
  `count_trailing_zeros(left, right)` counts the trailing zero bits of
  `left | right` as a 64-bit word, returning 63 when both are zero.
- `bigkit.binio`: `save(path, fmt, *args)` writes values packed with a
  `struct` format; `read(path, fmt)` reads them back as a tuple and raises
  `EOFError` if the file is too short.

  ```python
  from bigkit import binio

  binio.save("record.bin", "<iqd", 7, -3, 2.5)
  binio.read("record.bin", "<iqd")    # (7, -3, 2.5)
  ```
- `bigkit.errors`: `CheckError`, and `ensure_not(condition, description)`,
  which raises `CheckError` with the description in its message when the
  condition is true.

## Command

```
bigkit-list-demo
```

builds a linked list of 10 and 20, removes the last item and prints what
remains, once through `format()` and once by iterating.

## What it does not do

- `bigkit.binio` stores no format or type information in the file: the
  reader must pass the same `struct` format that was used to write it.
- There is no command-line calculator; `BigInt` is used from Python code.