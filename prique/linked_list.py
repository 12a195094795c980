"""Doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A list node holding one value and links to its neighbours."""

    value: Any
    prev: Node | None = None
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A doubly linked list with positional insert and removal."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nodes_reversed(self) -> Iterator[Node]:
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def _node_at(self, n: int) -> Node:
        """Walk to node ``n`` from whichever end is nearer."""
        if n < self._size // 2:
            nodes = self._nodes()
            steps = n
        else:
            nodes = self._nodes_reversed()
            steps = self._size - 1 - n
        for _ in range(steps):
            next(nodes)
        return next(nodes)

    def push_back(self, value: Any) -> None:
        node = Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        node = Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_at(self, n: int, value: Any) -> None:
        """Insert so that ``value`` becomes element ``n`` (0..len)."""
        if not 0 <= n <= self._size:
            raise ValueError("index out of list range")
        if n == 0:
            self.push_front(value)
        elif n == self._size:
            self.push_back(value)
        else:
            self.insert_before(self._node_at(n), value)

    def insert_before(self, node: Node, value: Any) -> Node:
        """Insert ``value`` directly before ``node`` and return the new node."""
        if node.prev is None:
            self.push_front(value)
            assert self._head is not None
            return self._head
        new = Node(value, node.prev, node)
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def unlink(self, node: Node) -> Any:
        """Remove ``node`` from the list and return its value."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove_back(self) -> Any:
        if self._tail is None:
            raise IndexError("nothing to remove")
        return self.unlink(self._tail)

    def remove_front(self) -> Any:
        if self._head is None:
            raise IndexError("nothing to remove")
        return self.unlink(self._head)

    def remove_at(self, n: int) -> Any:
        if not 0 <= n < self._size:
            raise ValueError("index out of list range")
        return self.unlink(self._node_at(n))

    def find(self, value: Any) -> Node | None:
        """Return the first node whose value equals ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def find_index(self, value: Any) -> int:
        """Return the index of the first equal value, or the list length."""
        return next(
            (i for i, node in enumerate(self._nodes()) if node.value == value),
            self._size,
        )

    def at_position(self, n: int) -> Node:
        if not 0 <= n < self._size:
            raise IndexError("index out of range")
        return self._node_at(n)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes_reversed())

    def __str__(self) -> str:
        if self._head is None or self._tail is None:
            return "List is empty!"
        ends = f"head: {self._head.value} tail: {self._tail.value}"
        forward = "".join(f"{value}->" for value in self) + "/0"
        backward = "".join(f"{value}->" for value in reversed(self)) + "/0"
        return "\n".join((forward, ends, backward, ends))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"