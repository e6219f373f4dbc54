"""
Indexed min-priority queue.

A binary min-heap of keys plus a key -> (priority, heap position) index, so
a key's priority can be looked up in O(1) and changed or removed in
O(log n). Python's heapq only supports lazy deletion; the shortest-path
engine needs a real decrease-key, hence this structure.

Complexity:
    add, change, remove, remove_min: O(log n)
    get, min_key, min_value: O(1)
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar


K = TypeVar("K", bound=Hashable)
P = TypeVar("P")

DEFAULT_CAPACITY = 1024


@dataclass
class _PrioPos(Generic[P]):
    """Priority and current heap slot of one active key."""

    prio: P
    pos: int


def _identity(prio: Any) -> Any:
    return prio


class IndexMinPQ(Generic[K, P]):
    """
    Priority queue of (key, priority) pairs ordered by priority.

    Priorities are compared in their natural order unless a key function is
    supplied, in which case key(prio) is compared instead. Keys with equal
    priority come out in an unspecified order.

    Misuse is reported through return values rather than exceptions:
    add() returns False for an already-active key, and change(), remove(),
    get(), remove_min(), min_key() and min_value() return None when the key
    is absent or the queue is empty.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        key: Optional[Callable[[P], Any]] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._initial_capacity = capacity
        self._heap: List[Optional[K]] = [None] * capacity
        self._prio_pos: Dict[K, _PrioPos[P]] = {}
        self._size = 0
        self._sort_key: Callable[[P], Any] = key if key is not None else _identity

    def clear(self) -> None:
        """Drop all keys and shrink back to the initial capacity."""
        self._heap = [None] * self._initial_capacity
        self._prio_pos.clear()
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def capacity(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return key in self._prio_pos

    # --- Mutation ------------------------------------------------------------

    def add(self, key: K, prio: P) -> bool:
        """
        Insert key with priority prio.

        Returns True if the key was inserted, False (and changes nothing) if
        the key is already active.
        """
        if key in self._prio_pos:
            return False

        if self._size == len(self._heap):
            self._heap.extend([None] * len(self._heap))
        self._heap[self._size] = key
        self._prio_pos[key] = _PrioPos(prio, self._size)
        self._size += 1
        self._sift_up(self._size - 1)
        return True

    def change(self, key: K, prio: P) -> Optional[P]:
        """
        Set a new priority for an active key.

        The new priority may be lower or higher than the old one.
        Returns the old priority, or None if the key is not active.
        """
        entry = self._prio_pos.get(key)
        if entry is None:
            return None
        old = entry.prio
        entry.prio = prio
        self._sift_up(entry.pos)
        self._sift_down(entry.pos)
        return old

    def remove(self, key: K) -> Optional[P]:
        """
        Remove an arbitrary active key.

        Returns its priority, or None if the key is not active.
        """
        entry = self._prio_pos.pop(key, None)
        if entry is None:
            return None

        slot = entry.pos
        last = self._size - 1
        self._heap[slot] = self._heap[last]
        self._heap[last] = None
        self._size = last
        if slot != last:
            self._prio_pos[self._heap[slot]].pos = slot
            self._sift_up(slot)
            self._sift_down(slot)
        return entry.prio

    def remove_min(self) -> Optional[K]:
        """Remove and return the key with the smallest priority, or None if empty."""
        if self._size == 0:
            return None
        key = self._heap[0]
        last = self._size - 1
        self._heap[0] = self._heap[last]
        self._heap[last] = None
        self._size = last
        del self._prio_pos[key]
        if self._size > 0:
            self._prio_pos[self._heap[0]].pos = 0
            self._sift_down(0)
        return key

    # --- Queries -------------------------------------------------------------

    def get(self, key: K) -> Optional[P]:
        entry = self._prio_pos.get(key)
        return None if entry is None else entry.prio

    def min_key(self) -> Optional[K]:
        if self._size == 0:
            return None
        return self._heap[0]

    def min_value(self) -> Optional[P]:
        if self._size == 0:
            return None
        return self._prio_pos[self._heap[0]].prio

    def items(self) -> List[Tuple[K, P]]:
        """Snapshot of (key, priority) pairs in heap-array order."""
        return [(k, self._prio_pos[k].prio) for k in self._heap[: self._size]]

    def check_invariants(self) -> bool:
        """
        Verify heap order and index consistency.

        Intended for tests and debugging; runs in O(n).
        """
        if len(self._prio_pos) != self._size:
            return False
        for i in range(self._size):
            key = self._heap[i]
            entry = self._prio_pos.get(key)
            if entry is None or entry.pos != i:
                return False
            if i > 0 and self._less(i, (i - 1) // 2):
                return False
        return all(slot is None for slot in self._heap[self._size :])

    # --- Heap internals ------------------------------------------------------

    def _prio_at(self, i: int) -> Any:
        return self._sort_key(self._prio_pos[self._heap[i]].prio)

    def _less(self, i: int, j: int) -> bool:
        return self._prio_at(i) < self._prio_at(j)

    def _sift_up(self, i: int) -> None:
        key = self._heap[i]
        key_prio = self._sort_key(self._prio_pos[key].prio)
        while i > 0:
            parent = (i - 1) // 2
            if not key_prio < self._prio_at(parent):
                break
            self._heap[i] = self._heap[parent]
            self._prio_pos[self._heap[i]].pos = i
            i = parent
        self._heap[i] = key
        self._prio_pos[key].pos = i

    def _sift_down(self, i: int) -> None:
        key = self._heap[i]
        key_prio = self._sort_key(self._prio_pos[key].prio)
        while 2 * i + 1 < self._size:
            child = 2 * i + 1
            if child + 1 < self._size and self._less(child + 1, child):
                child += 1
            # heap[child] is now the smaller child
            if not self._prio_at(child) < key_prio:
                break
            self._heap[i] = self._heap[child]
            self._prio_pos[self._heap[i]].pos = i
            i = child
        self._heap[i] = key
        self._prio_pos[key].pos = i

    def __repr__(self) -> str:
        pairs = "".join(f"({k},{p})," for k, p in self.items())
        return f"{pairs} size = {self._size}"
