"""A doubly linked list with sentinel nodes at both ends."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional

from bigkit.errors import ensure_not

__all__ = ["Node", "LinkedList", "main"]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


class Node:
    """One link of a LinkedList, holding a value and its two neighbours."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: Any = None,
        prev: Optional[Node] = None,
        nxt: Optional[Node] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = nxt

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """Doubly linked list; positions are reached through Node objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = Node()
        self._tail = Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._count = 0
        for item in items:
            self.push_back(item)

    def _link(self, prev: Node, nxt: Node, value: Any) -> Node:
        node = Node(value, prev, nxt)
        prev.next = node
        nxt.prev = node
        self._count += 1
        return node

    def insert_before(self, node: Node, value: Any) -> Node:
        """Insert ``value`` just before ``node`` and return the new node."""
        if node is self._head:
            raise ValueError("Cannot insert before the start of the list")
        return self._link(node.prev, node, value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert ``value`` just after ``node`` and return the new node."""
        if node is self._tail:
            raise ValueError("Cannot insert after the end of the list")
        return self._link(node, node.next, value)

    def remove(self, node: Node) -> Any:
        """Unlink ``node`` and return its value; does nothing on an empty list."""
        if self._count == 0:
            return None
        if node is self._head or node is self._tail:
            raise ValueError("Cannot remove a boundary node")
        node.next.prev = node.prev
        node.prev.next = node.next
        node.prev = node.next = None
        self._count -= 1
        return node.value

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end."""
        return self.insert_before(self._tail, value)

    def push_front(self, value: Any) -> Node:
        """Put ``value`` at the start."""
        return self.insert_after(self._head, value)

    def pop_back(self) -> Any:
        """Remove and return the last value; None when the list is empty."""
        return self.remove(self._tail.prev)

    def pop_front(self) -> Any:
        """Remove and return the first value; None when the list is empty."""
        return self.remove(self._head.next)

    def at(self, pos: int) -> Node:
        """Return the node at index ``pos``, walking from the nearer end."""
        ensure_not(pos < 0 or pos >= self._count, "pos >= count")
        if pos < self._count // 2:
            node = self._head.next
            for _ in range(pos):
                node = node.next
        else:
            node = self._tail.prev
            for _ in range(self._count - pos - 1):
                node = node.prev
        return node

    def format(self) -> str:
        """Values each followed by a space, then a newline."""
        return "".join(f"{_render(value)} " for value in self) + "\n"

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: Optional[list[str]] = None) -> int:
    """Build a small list, trim it, and print it twice."""
    numbers = LinkedList()
    numbers.push_back(10)
    numbers.push_back(20)
    numbers.pop_back()
    sys.stdout.write(numbers.format())
    sys.stdout.write("".join(f"{_render(value)} " for value in numbers) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())