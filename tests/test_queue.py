import pytest

from prique.pair import Pair
from prique.queue import HeapStrategy, ListStrategy, PriorityQueueStrategy, Prique

STRATEGIES = [HeapStrategy, ListStrategy]


def _fill(queue):
    queue.insert(1, "cos")
    queue.insert(2, "krowa")
    queue.insert(5, "pies")
    queue.insert(0, "kura")
    queue.insert(100, "bobr")


def _drain(queue, count):
    return [queue.extract_max() for _ in range(count)]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_extract_in_descending_order(strategy):
    queue = Prique(strategy())
    _fill(queue)
    keys = [p.key for p in _drain(queue, 5)]
    assert keys == [100, 5, 2, 1, 0]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_find_max_returns_copy(strategy):
    queue = Prique(strategy())
    _fill(queue)
    top = queue.find_max()
    assert top.key == 100
    assert top.val == "bobr"
    top.key = -5
    assert queue.find_max().key == 100


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_queue_raises(strategy):
    queue = Prique(strategy())
    with pytest.raises(IndexError):
        queue.extract_max()
    with pytest.raises(IndexError):
        queue.find_max()


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_push_pair(strategy):
    queue = Prique(strategy())
    queue.push(Pair(3, "a"))
    queue.push(Pair(7, "b"))
    assert queue.find_max().val == "b"
    assert [p.val for p in _drain(queue, 2)] == ["b", "a"]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_modify_key_keeps_all_values(strategy):
    queue = Prique(strategy())
    _fill(queue)
    queue.modify_key("kura", 200)
    queue.modify_key("absent", 7)
    extracted = _drain(queue, 5)
    assert sorted(p.val for p in extracted) == ["bobr", "cos", "krowa", "kura", "pies"]
    assert {p.val: p.key for p in extracted}["kura"] == 200


def test_list_modify_key_moves_to_front():
    queue = Prique(ListStrategy())
    _fill(queue)
    queue.modify_key("kura", 200)
    assert [(p.key, p.val) for p in _drain(queue, 5)] == [
        (200, "kura"),
        (100, "bobr"),
        (5, "pies"),
        (2, "krowa"),
        (1, "cos"),
    ]


def test_list_modify_key_needs_exact_value():
    queue = Prique(ListStrategy())
    queue.insert(1, "krowa1")
    queue.modify_key("krowa1", 9)
    assert queue.find_max().key == 1
    queue.modify_key("krowa", 9)
    assert queue.find_max().key == 9


def test_list_equal_keys_newest_first():
    queue = Prique(ListStrategy())
    queue.insert(1, "a")
    queue.insert(1, "b")
    queue.insert(1, "c")
    assert [p.val for p in _drain(queue, 3)] == ["c", "b", "a"]


def test_list_str_shows_sorted_order():
    queue = Prique(ListStrategy())
    queue.insert(1, "a")
    queue.insert(3, "b")
    assert str(queue).splitlines()[0] == "(3|b)->(1|a)->/0"
    assert str(Prique(ListStrategy())) == "List is empty!"


def test_heap_str_root_first():
    queue = Prique(HeapStrategy())
    queue.insert(1, "a")
    queue.insert(3, "b")
    assert str(queue) == "[(3|b); (1|a)]"


def test_strategy_base_is_abstract():
    with pytest.raises(TypeError):
        PriorityQueueStrategy()