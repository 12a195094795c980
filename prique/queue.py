"""Priority queue with interchangeable storage strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from prique.heap import Heap
from prique.linked_list import LinkedList, Node
from prique.pair import Pair


class PriorityQueueStrategy(ABC):
    """Storage backend for a max-priority queue of pairs."""

    @abstractmethod
    def insert(self, pair: Pair) -> None:
        """Add a pair to the queue."""

    @abstractmethod
    def extract_max(self) -> Pair:
        """Remove and return the pair with the largest key."""

    @abstractmethod
    def find_max(self) -> Pair:
        """Return a copy of the pair with the largest key."""

    @abstractmethod
    def modify_key(self, val: str, key: int) -> None:
        """Give the pair holding ``val`` a new key."""


class HeapStrategy(PriorityQueueStrategy):
    """Queue kept in a binary max-heap."""

    def __init__(self) -> None:
        self._heap = Heap()

    def insert(self, pair: Pair) -> None:
        self._heap.insert(pair)

    def extract_max(self) -> Pair:
        return self._heap.extract_max()

    def find_max(self) -> Pair:
        top = self._heap.find_max()
        return Pair(top.key, top.val)

    def modify_key(self, val: str, key: int) -> None:
        self._heap.modify_key(val, key)

    def __str__(self) -> str:
        return str(self._heap)


class ListStrategy(PriorityQueueStrategy):
    """Queue kept in a linked list sorted by descending key.

    A new pair goes before any pairs of equal key.
    """

    def __init__(self) -> None:
        self._list = LinkedList()

    def _nodes(self) -> Iterator[Node]:
        node = self._list.at_position(0) if len(self._list) else None
        while node is not None:
            yield node
            node = node.next

    def insert(self, pair: Pair) -> None:
        for node in self._nodes():
            if not node.value > pair:
                self._list.insert_before(node, pair)
                return
        self._list.push_back(pair)

    def extract_max(self) -> Pair:
        return self._list.remove_front()

    def find_max(self) -> Pair:
        top = self._list.at_position(0).value
        return Pair(top.key, top.val)

    def modify_key(self, val: str, key: int) -> None:
        """Move the first pair holding exactly ``val`` to its place for ``key``."""
        node = next((n for n in self._nodes() if n.value.val == val), None)
        if node is None:
            return
        old = self._list.unlink(node)
        self.insert(Pair(key, old.val))

    def __str__(self) -> str:
        return str(self._list)


class Prique:
    """Max-priority queue delegating to a storage strategy."""

    def __init__(self, strategy: PriorityQueueStrategy) -> None:
        self._strategy = strategy

    def insert(self, key: int, val: str) -> None:
        self._strategy.insert(Pair(key, val))

    def push(self, pair: Pair) -> None:
        self._strategy.insert(pair)

    def extract_max(self) -> Pair:
        return self._strategy.extract_max()

    def find_max(self) -> Pair:
        return self._strategy.find_max()

    def modify_key(self, val: str, key: int) -> None:
        self._strategy.modify_key(val, key)

    def __str__(self) -> str:
        return str(self._strategy)