"""An ordered pair of values compared first by ``first``, then by ``second``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Pair", "is_same_pair"]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


@dataclass(order=True)
class Pair:
    """Two values; ordering is lexicographic on (first, second)."""

    first: Any
    second: Any

    def swap(self, other: Pair) -> None:
        """Exchange both members with those of ``other``."""
        self.first, other.first = other.first, self.first
        self.second, other.second = other.second, self.second

    def __str__(self) -> str:
        return f"({_render(self.first)}, {_render(self.second)})"


def is_same_pair(value: object) -> bool:
    """True if ``value`` is a Pair whose two members have the same type."""
    return isinstance(value, Pair) and type(value.first) is type(value.second)