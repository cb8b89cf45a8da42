"""Arbitrary-size decimal integers, their maths helpers, and small containers and binary I/O."""

__version__ = "0.1.0"
__all__ = ["arith", "bigint", "bigmath", "binio", "bitset", "digits", "errors", "linkedlist", "pair"]