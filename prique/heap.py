"""Binary max-heap of pairs, stored in a dynamic array."""

from __future__ import annotations

from collections.abc import Iterable

from prique.dynamic_array import DynamicArray
from prique.pair import Pair


class Heap:
    """A max-heap: the pair with the largest key sits at the root."""

    def __init__(self, items: Iterable[Pair] | DynamicArray | None = None) -> None:
        self._data = DynamicArray()
        if items is not None:
            self.build(items)

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _heapify_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._data[i] <= self._data[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _heapify_down(self, i: int) -> None:
        size = len(self._data)
        while True:
            largest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and self._data[left] > self._data[largest]:
                largest = left
            if right < size and self._data[right] > self._data[largest]:
                largest = right
            if largest == i:
                return
            self._swap(i, largest)
            i = largest

    def insert(self, value: Pair) -> None:
        self._data.push_back(value)
        self._heapify_up(len(self._data) - 1)

    def extract_max(self) -> Pair:
        """Remove and return the pair with the largest key."""
        result = self._data[0]
        last = len(self._data) - 1
        self._swap(0, last)
        self._data.remove_back()
        if len(self._data) > 0:
            self._heapify_down(0)
        return result

    def find_max(self) -> Pair:
        """Return the root pair itself, without removing it."""
        return self._data[0]

    def find(self, val: str | None) -> Pair | None:
        """Return the first stored pair whose value equals ``val``, or None."""
        if val is None:
            return None
        wanted = val.split("\0", 1)[0]
        return next((pair for pair in self._data if pair.val == wanted), None)

    def decrease_key(self, val: str, amount: int = 1) -> None:
        """Lower the key of the pair holding ``val``; the heap order is not restored."""
        pair = self.find(val)
        if pair is not None:
            pair.key -= amount

    def increase_key(self, val: str, amount: int = 1) -> None:
        """Raise the key of the pair holding ``val``; the heap order is not restored."""
        self.decrease_key(val, -amount)

    def modify_key(self, val: str, key: int) -> None:
        """Set the key of the pair holding ``val``; the heap order is not restored."""
        pair = self.find(val)
        if pair is not None:
            pair.key = key

    def build(self, items: Iterable[Pair] | DynamicArray) -> None:
        """Replace the contents with ``items`` and arrange them into a heap."""
        if isinstance(items, DynamicArray):
            self._data = items.copy()
        else:
            self._data = DynamicArray(items)
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._heapify_down(i)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return f"Heap({list(self._data)!r})"