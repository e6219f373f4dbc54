"""
Unit tests for IndexMinPQ.
"""

import random

from index_min_pq import IndexMinPQ


def test_change_then_remove_min_order():
    pq = IndexMinPQ()
    pq.add("a", 5)
    pq.add("b", 3)

    assert pq.change("a", 1) == 5
    assert pq.remove_min() == "a"
    assert pq.remove_min() == "b"
    assert pq.remove_min() is None


def test_add_existing_key_is_noop():
    pq = IndexMinPQ()
    assert pq.add("abc", 5) is True
    assert pq.add("abc", 7) is False

    assert pq.get("abc") == 5
    assert pq.size() == 1


def test_missing_key_operations_return_none():
    pq = IndexMinPQ()
    pq.add("x", 2)

    assert pq.remove("nope") is None
    assert pq.change("nope", 1) is None
    assert pq.get("nope") is None
    # Size must not change on a failed removal
    assert pq.size() == 1
    assert "x" in pq
    assert "nope" not in pq


def test_empty_queue_peeks_return_none():
    pq = IndexMinPQ()
    assert pq.is_empty()
    assert pq.min_key() is None
    assert pq.min_value() is None
    assert pq.remove_min() is None


def test_extraction_order_with_ties():
    pq = IndexMinPQ()
    pq.add("abc", 5)
    pq.add("abc", 7)  # ignored
    pq.add("def", 3)
    pq.add("ghi", 8)
    pq.add("jkl", 2)
    pq.add("xyz", 9)
    pq.change("xyz", 1)
    pq.add("uvw", 1)

    assert len(pq) == 6

    out = []
    while not pq.is_empty():
        out.append((pq.min_key(), pq.min_value()))
        pq.remove_min()

    # "xyz" and "uvw" share priority 1, so their relative order is unspecified.
    assert {k for k, _ in out[:2]} == {"xyz", "uvw"}
    assert out[2:] == [("jkl", 2), ("def", 3), ("abc", 5), ("ghi", 8)]


def test_remove_arbitrary_key_keeps_heap_valid():
    pq = IndexMinPQ()
    for i, prio in enumerate([7, 3, 9, 1, 4, 8, 2]):
        pq.add(i, prio)

    assert pq.remove(1) == 3
    assert pq.check_invariants()
    assert pq.remove(3) == 1  # the current minimum
    assert pq.check_invariants()
    assert pq.min_key() == 6
    assert pq.min_value() == 2

    # Removing the last heap slot takes the no-sift branch
    last_key = pq.items()[-1][0]
    pq.remove(last_key)
    assert pq.check_invariants()
    assert pq.size() == 4


def test_change_can_increase_priority():
    pq = IndexMinPQ()
    pq.add("a", 1)
    pq.add("b", 2)
    pq.add("c", 3)

    assert pq.change("a", 10) == 1
    assert pq.check_invariants()
    assert [pq.remove_min() for _ in range(3)] == ["b", "c", "a"]


def test_capacity_doubles_when_full():
    pq = IndexMinPQ(capacity=2)
    for i in range(5):
        pq.add(i, 10 - i)

    assert pq.capacity == 8
    assert pq.size() == 5
    assert pq.check_invariants()
    assert pq.min_key() == 4

    pq.clear()
    assert pq.capacity == 2
    assert pq.is_empty()
    assert pq.get(0) is None


def test_custom_sort_key_orders_by_key():
    # Max-queue behaviour by negating the priority
    pq = IndexMinPQ(key=lambda prio: -prio)
    pq.add("low", 1)
    pq.add("high", 9)
    pq.add("mid", 5)

    assert pq.remove_min() == "high"
    assert pq.remove_min() == "mid"
    assert pq.remove_min() == "low"


def test_random_operations_preserve_invariants():
    """Mixed add/change/remove/remove_min keeps heap order and index in sync."""
    rng = random.Random(7)
    pq = IndexMinPQ(capacity=4)
    shadow = {}

    for _ in range(600):
        op = rng.random()
        key = rng.randrange(60)
        if op < 0.4:
            prio = rng.randint(0, 100)
            added = pq.add(key, prio)
            assert added == (key not in shadow)
            shadow.setdefault(key, prio)
        elif op < 0.65:
            prio = rng.randint(0, 100)
            old = pq.change(key, prio)
            assert old == shadow.get(key)
            if key in shadow:
                shadow[key] = prio
        elif op < 0.85:
            assert pq.remove(key) == shadow.pop(key, None)
        else:
            k = pq.remove_min()
            if shadow:
                assert shadow[k] == min(shadow.values())
                del shadow[k]
            else:
                assert k is None

        assert pq.check_invariants()
        assert pq.size() == len(shadow)

    drained = []
    while not pq.is_empty():
        drained.append(pq.min_value())
        pq.remove_min()
    assert drained == sorted(drained)


def test_repr_lists_pairs_and_size():
    pq = IndexMinPQ()
    pq.add("a", 1)
    assert repr(pq) == "(a,1), size = 1"
