# prique

Max-priority queues with two interchangeable back ends: a binary max-heap
and a doubly linked list kept in descending key order. The containers they
are built on are a growable array, a doubly linked list and the heap itself.
Each of them can also be used on its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Elements

Every element is a `Pair` (`prique.pair.Pair`) of an integer key and a short
label. The label is cut at the first NUL character and to at most five
characters. Pairs compare by key alone, so two pairs with the same key are
equal even when their labels differ. A pair also compares equal to a plain
integer that matches its key.

```python
from prique.pair import Pair

p = Pair(3, "kitten")
print(p)                       # (3|kitte)
Pair(3, "a") == Pair(3, "b")   # True
Pair(3, "a") == 3              # True
```

## Priority queues

`prique.queue.Prique` takes a strategy object and passes every operation on
to it. There are two strategies, `HeapStrategy` and `ListStrategy`. Both are
subclasses of the abstract `PriorityQueueStrategy`.

```python
from prique.queue import Prique, ListStrategy

queue = Prique(ListStrategy())
queue.insert(1, "one")
queue.insert(5, "five")
queue.insert(0, "zero")

queue.modify_key("zero", 200)   # move the first pair labelled "zero" to key 200
print(queue.find_max())         # (200|zero)
print(queue.extract_max())      # (200|zero)
print(queue.extract_max())      # (5|five)
```

- `insert(key, val)` adds a new pair. `push(pair)` adds a ready-made `Pair`.
- `find_max()` returns a copy of the top pair. `extract_max()` removes the
  top pair and returns it.
- `str(queue)` shows the state of the underlying container.

`ListStrategy` keeps the list sorted as pairs are inserted. A new pair goes
ahead of any existing pairs with the same key. `modify_key` takes the first
pair whose label matches exactly out of the list and inserts it again with
the new key.

`HeapStrategy` sets the new key in place and does **not** restore the heap
order afterwards. A pair whose key was changed may therefore not come out at
the right moment.

Calling `extract_max` or `find_max` on an empty queue raises `IndexError`.

## Containers

- `prique.dynamic_array.DynamicArray` is a growable array that can hold any
  values. It has `push_back`, `push_front`, `push_at`, `remove_back`,
  `remove_front`, `remove_at`, `find`, `at_position`, bounds-checked
  indexing, `len()`, iteration and `copy()`. `find` returns the index of the
  first equal element, or -1 if there is none. `copy()` copies the elements
  as well. `str()` gives `[a; b; c]`.
- `prique.linked_list.LinkedList` is a doubly linked list of `Node`s, each
  with `value`, `prev` and `next`. It has `push_back`, `push_front`,
  `push_at`, `remove_back`, `remove_front`, `remove_at`, `insert_before` and
  `unlink`. `find` returns the first matching node or `None`. `find_index`
  returns the position, or the length of the list if nothing matches.
  `at_position` returns the node at a position. The list supports `len()`
  and can be iterated forwards and with `reversed()`.
- `prique.heap.Heap` is a binary max-heap of pairs. It has `insert`,
  `extract_max`, `find_max` (which returns the root pair itself) and
  `find(val)` (the first pair with that label, or `None`). It also has
  `decrease_key` and `increase_key`, both with a default step of 1, and
  `modify_key` and `build`. `build` accepts any iterable of pairs or a
  `DynamicArray`; a `DynamicArray` is copied. The key-changing methods do not
  restore the heap order.

Out-of-range positions raise an exception:

- `DynamicArray` raises `IndexError`.
- `LinkedList.push_at` and `LinkedList.remove_at` raise `ValueError`.
- `LinkedList.at_position`, and removal from an empty list, raise
  `IndexError`.

## Demo

```
prique-demo
```

The demo first builds a heap of nine pairs and prints it. It then lowers one
key and drains the heap in order of priority. After that it runs the same
inserts and one `modify_key` through a list-backed queue and a heap-backed
queue. Before each extraction it prints the state of the queue.
`prique.demo.run_demo()` returns the same text as a string.