"""Growable array with positional insert and removal."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Any


class DynamicArray:
    """A sequence supporting insertion and removal at both ends and in the middle."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def _check_index(self, n: int) -> None:
        if not 0 <= n < len(self._items):
            raise IndexError("index out of range")

    def push_back(self, value: Any) -> None:
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        self._items.insert(0, value)

    def push_at(self, n: int, value: Any) -> None:
        """Insert so that ``value`` ends up at position ``n`` (0..len)."""
        if not 0 <= n <= len(self._items):
            raise IndexError("position out of range")
        self._items.insert(n, value)

    def remove_back(self) -> Any:
        if not self._items:
            raise IndexError("array is empty")
        return self._items.pop()

    def remove_front(self) -> Any:
        if not self._items:
            raise IndexError("array is empty")
        return self._items.pop(0)

    def remove_at(self, n: int) -> Any:
        self._check_index(n)
        return self._items.pop(n)

    def find(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        return next((i for i, item in enumerate(self._items) if item == value), -1)

    def at_position(self, n: int) -> Any:
        self._check_index(n)
        return self._items[n]

    def copy(self) -> DynamicArray:
        """Return an independent copy whose elements are copies too."""
        return DynamicArray(copy.copy(item) for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Any:
        self._check_index(i)
        return self._items[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._check_index(i)
        self._items[i] = value

    def __str__(self) -> str:
        return "[" + "; ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"