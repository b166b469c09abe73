#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
indexed_priority_queue.py
-------------------------

A min-priority queue whose entries are addressed by a stable key instead of
their position in the heap.

Features
~~~~~~~~
* O(log n) push, pop and removal by key; O(1) min, membership and
  priority look-up.
* Pluggable storage: priorities and heap positions live in any
  ``IndexStore`` (dense arrays, default-valued dicts or plain dicts).
* Removing a key can keep its priority around, so ``restore`` can put it
  back later without re-supplying the value.
* Guarded in-place updates (``update_up`` / ``update_down`` /
  ``update_dyn``) that re-heapify on leaving the ``with`` block.
* Smallest priority first; wrap priorities in ``ordering.Reverse`` for
  largest first.

Typical usage
~~~~~~~~~~~~~
>>> pq = hash_map_queue()
>>> pq.push('task1', 5)
>>> pq.push('task2', 2)
>>> pq.push('task3', 7)
>>> pq.pop()
'task2'
>>> with pq.update_dyn('task1') as ref:   # reprioritise an existing entry
...     ref.value = 9
>>> pq.min()
'task3'
>>> pq.remove('task3')
7
>>> 'task3' in pq
False
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from array_store import ArrayPositionStore, ArrayPriorityStore
from default_map_store import DefaultMapStore
from hash_map_store import HashMapStore
from index_store import IndexStore
from priority_update import (
    PriorityChange,
    PriorityDecrease,
    PriorityIncrease,
    PriorityUpdate,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Generic type variables
# ----------------------------------------------------------------------
K = TypeVar("K")                     # type of the key (index)
P = TypeVar("P")                     # type of the priority (totally ordered)


# ----------------------------------------------------------------------
#  Core class
# ----------------------------------------------------------------------
class IndexedPriorityQueue(Generic[K, P]):
    """
    A min-priority queue over keys, backed by two ``IndexStore`` objects.

    ``_heap`` lists the keys in heap order, ``_positions`` maps each queued
    key back to its slot in ``_heap`` and ``_priorities`` maps keys to
    priorities.  A key's priority may outlive its place on the heap.

    Parameters
    ----------
    priorities : IndexStore[K, P], optional
        Priority storage.  Defaults to an empty ``HashMapStore``.
    positions : IndexStore[K, int], optional
        Position storage.  Defaults to an empty ``HashMapStore``.
    capacity : int, default ``0``
        Expected number of keys.  Only a hint: Python lists grow on demand.
    """

    __slots__ = ("_priorities", "_positions", "_heap", "_live_update", "capacity")

    def __init__(
        self,
        priorities: Optional[IndexStore[K, P]] = None,
        positions: Optional[IndexStore[K, int]] = None,
        *,
        capacity: int = 0,
    ) -> None:
        self._priorities: IndexStore[K, P] = (
            HashMapStore() if priorities is None else priorities
        )
        self._positions: IndexStore[K, int] = (
            HashMapStore() if positions is None else positions
        )
        self._heap: List[K] = []
        # The guarded update currently open on this queue, if any.
        self._live_update: Optional[PriorityUpdate[K, P]] = None
        self.capacity = capacity
        logger.debug(
            "created indexed priority queue (priorities=%s, positions=%s, capacity=%d)",
            type(self._priorities).__name__,
            type(self._positions).__name__,
            capacity,
        )

    # ------------------------------------------------------------------
    #   Read-only accessors
    # ------------------------------------------------------------------
    def min(self) -> Optional[K]:
        """Key with the smallest priority, or ``None`` if the queue is empty."""
        return self._heap[0] if self._heap else None

    def min_priority(self) -> Optional[P]:
        """Smallest priority in the queue, or ``None`` if it is empty."""
        if not self._heap:
            return None
        return self._priorities.get(self._heap[0])

    def get_priority(self, key: K) -> Optional[P]:
        """
        Stored priority of *key*, or ``None``.

        The key does not have to be on the heap: priorities of removed keys
        are still reported when the store kept them.
        """
        return self._priorities.get(key)

    def contains(self, key: K) -> bool:
        return self._positions.contains(key)

    def is_empty(self) -> bool:
        return not self._heap

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def push(self, key: K, priority: P) -> Optional[P]:
        """
        Store *priority* for *key* and make sure *key* is on the heap.

        Returns the priority previously stored for *key*, if any.  A key
        that is already queued is **not** moved; change queued priorities
        through one of the ``update_*`` handles instead.
        """
        self._assert_no_live_update()
        previous = self._priorities.insert(key, priority)
        self.restore(key)
        return previous

    def restore(self, key: K) -> None:
        """Put *key* back on the heap with its stored priority (no-op if queued)."""
        self._assert_no_live_update()
        if self._positions.contains(key):
            return
        if self._priorities.get(key) is None:
            raise KeyError(f"Index {key!r} has no stored priority to restore")
        position = len(self._heap)
        self._heap.append(key)
        self._positions.insert(key, position)
        self._up_heap(position)

    def pop(self) -> Optional[K]:
        """
        Remove and return the key with the smallest priority.
        Returns ``None`` if the queue is empty.
        """
        self._assert_no_live_update()
        if not self._heap:
            return None
        popped = self._swap_remove(0)
        self._positions.remove(popped)
        if self._heap:
            self._positions.insert(self._heap[0], 0)
            self._down_heap(0)
        return popped

    def remove(self, key: K) -> P:
        """
        Take *key* off the heap and delete its priority; return that priority.
        Raises ``KeyError`` if *key* is not queued.
        """
        # Default-valued stores may never have stored the value they report.
        current = self._priorities.get(key)
        self.remove_index(key)
        removed = self._priorities.remove(key)
        return current if removed is None else removed

    def remove_index(self, key: K) -> None:
        """
        Take *key* off the heap but keep its priority for a later ``restore``.
        Raises ``KeyError`` if *key* is not queued.
        """
        self._assert_no_live_update()
        position = self._positions.remove(key)
        if position is None:
            raise KeyError(f"Index {key!r} was not present in the queue")
        self._swap_remove(position)
        # The former last key now sits at `position` and may belong above or below it.
        if position < len(self._heap):
            self._positions.insert(self._heap[position], position)
            if position > 0 and self._less(position, self._parent(position)):
                self._up_heap(position)
            else:
                self._down_heap(position)

    def clear(self) -> None:
        """Drop every key and every stored priority."""
        self.clear_indices()
        self._priorities.clear()
        logger.debug("cleared priority store")

    def clear_indices(self) -> None:
        """Drop every key from the heap, keeping stored priorities."""
        self._assert_no_live_update()
        logger.debug("clearing %d queued index(es)", len(self._heap))
        self._positions.clear()
        self._heap.clear()

    def extend(self, pairs: Iterable[Tuple[K, P]]) -> None:
        """Push a bunch of ``(key, priority)`` pairs one after another."""
        for key, priority in pairs:
            self.push(key, priority)

    # ------------------------------------------------------------------
    #   Guarded in-place updates
    # ------------------------------------------------------------------
    def update_up(self, key: K) -> PriorityIncrease[K, P]:
        """Handle for raising *key*'s priority; repairs downward on exit."""
        return PriorityIncrease(self, key)

    def update_down(self, key: K) -> PriorityDecrease[K, P]:
        """Handle for lowering *key*'s priority; repairs upward on exit."""
        return PriorityDecrease(self, key)

    def update_dyn(self, key: K) -> PriorityChange[K, P]:
        """Handle for changing *key*'s priority either way."""
        return PriorityChange(self, key)

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        """Return the number of keys currently queued."""
        return len(self._heap)

    def __contains__(self, key: Any) -> bool:
        return self._positions.contains(key)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[K]:
        """
        Iterate over the queued keys **in heap order** (not sorted).
        Pop repeatedly if you need them sorted.
        """
        return iter(list(self._heap))

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{key!r}: {self._priorities.get(key)!r}" for key in self._heap
        )
        return f"{type(self).__name__}({{{entries}}})"

    # ------------------------------------------------------------------
    #   Internal heap-maintenance helpers
    # ------------------------------------------------------------------
    def _assert_no_live_update(self) -> None:
        assert self._live_update is None, (
            f"queue modified while {self._live_update!r} is open"
        )

    @staticmethod
    def _parent(idx: int) -> int:
        return (idx - 1) // 2

    def _less(self, i: int, j: int) -> bool:
        """True if the key in slot *i* has a strictly smaller priority than slot *j*."""
        return self._priorities.index(self._heap[i]) < self._priorities.index(self._heap[j])

    def _swap(self, i: int, j: int) -> None:
        """Swap slots i and j and keep `_positions` in sync."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions.insert(heap[i], i)
        self._positions.insert(heap[j], j)

    def _swap_remove(self, idx: int) -> K:
        """Move the last key into slot *idx* and return the key that was there."""
        heap = self._heap
        last = heap.pop()
        if idx == len(heap):
            return last
        removed, heap[idx] = heap[idx], last
        return removed

    def _up_heap(self, idx: int) -> None:
        """
        Move the key at *idx* towards the root until its parent is no larger.
        """
        while idx > 0:
            parent = self._parent(idx)
            if self._less(idx, parent):
                self._swap(idx, parent)
                idx = parent
            else:
                break

    def _down_heap(self, idx: int) -> None:
        """
        Move the key at *idx* towards the leaves until no child is smaller.
        On ties between the children the left one wins.
        """
        n = len(self._heap)
        while (left := 2 * idx + 1) < n:
            smallest = left
            right = left + 1
            if right < n and self._less(right, left):
                smallest = right
            if self._less(smallest, idx):
                self._swap(idx, smallest)
                idx = smallest
            else:
                break

    # ------------------------------------------------------------------
    #   Debug/validation helpers
    # ------------------------------------------------------------------
    def _is_valid(self) -> bool:
        """Check heap order and the key <-> slot bijection."""
        n = len(self._heap)
        seen = set()
        for i, key in enumerate(self._heap):
            if key in seen:
                return False
            seen.add(key)
            # The mapping must point back to the proper slot.
            if self._positions.get(key) != i:
                return False
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(child, i):
                    return False
        # Every key the position store knows must also sit on the heap.
        if hasattr(self._positions, "__iter__"):
            stored = list(self._positions)
            if len(stored) != n or any(key not in seen for key in stored):
                return False
        return True


# ----------------------------------------------------------------------
#  Ready-made queue flavours
# ----------------------------------------------------------------------
def hash_map_queue(capacity: int = 0) -> IndexedPriorityQueue[Any, Any]:
    """Queue with dict-backed priorities and positions; absence is explicit."""
    return IndexedPriorityQueue(
        HashMapStore(capacity=capacity),
        HashMapStore(capacity=capacity),
        capacity=capacity,
    )


def default_map_queue(default: P, capacity: int = 0) -> IndexedPriorityQueue[Any, P]:
    """Queue whose unseen keys all start at priority *default*."""
    return IndexedPriorityQueue(
        DefaultMapStore(default, capacity=capacity),
        HashMapStore(capacity=capacity),
        capacity=capacity,
    )


def array_map_queue(
    capacity: int, fill: P, offset: int = 0
) -> IndexedPriorityQueue[int, P]:
    """
    Queue over the integer keys ``offset .. offset + capacity - 1``.

    Every key starts with priority *fill*; keys outside the range fail an
    assertion in the stores.
    """
    return IndexedPriorityQueue(
        ArrayPriorityStore(capacity, fill, offset),
        ArrayPositionStore(capacity, offset),
        capacity=capacity,
    )
