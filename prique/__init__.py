"""Max-priority queues over a binary heap or a sorted doubly linked list."""

__version__ = "0.1.0"
__all__ = ["pair", "dynamic_array", "linked_list", "heap", "queue", "demo"]