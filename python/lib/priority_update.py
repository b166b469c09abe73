#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
priority_update.py
------------------

Guarded handles for changing one key's priority in place.

Changing a priority is two steps: mutate the value, then move the key to
where the new value belongs in the heap.  The handles below tie the second
step to the end of a ``with`` block so it can never be skipped, whether the
block finishes normally, returns early or raises.

>>> from indexed_priority_queue import IndexedPriorityQueue
>>> pq = IndexedPriorityQueue()
>>> pq.push("a", 5); pq.push("b", 3)
>>> with pq.update_down("a") as ref:
...     ref.value = 1
>>> pq.min()
'a'

Which handle to use
~~~~~~~~~~~~~~~~~~~
* ``update_up``   -> ``PriorityIncrease``: value may only grow; repairs downward.
* ``update_down`` -> ``PriorityDecrease``: value may only shrink; repairs upward.
* ``update_dyn``  -> ``PriorityChange``: either way; one extra comparison.

The direction promised by the first two is checked with ``assert``.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from indexed_priority_queue import IndexedPriorityQueue

K = TypeVar("K")
P = TypeVar("P")


class PriorityUpdate(Generic[K, P]):
    """
    Base handle.  Subclasses decide how the heap is repaired in ``_repair``.

    The handle is inert until entered; reading or writing ``value`` outside
    the ``with`` block raises ``RuntimeError``.
    """

    __slots__ = ("_queue", "_key", "_old", "_active", "_released")

    def __init__(self, queue: "IndexedPriorityQueue[K, P]", key: K) -> None:
        self._queue = queue
        self._key = key
        self._old: Optional[P] = None
        self._active = False
        self._released = False

    @property
    def key(self) -> K:
        return self._key

    @property
    def old_value(self) -> Optional[P]:
        """Priority as it was when the block was entered."""
        return self._old

    @property
    def value(self) -> P:
        self._check_active()
        return self._queue._priorities.get(self._key)

    @value.setter
    def value(self, new_value: P) -> None:
        self._check_active()
        self._queue._priorities.insert(self._key, new_value)

    def _check_active(self) -> None:
        if not self._active:
            raise RuntimeError(
                f"priority handle for {self._key!r} used outside its 'with' block"
            )

    # ------------------------------------------------------------------
    #   Context-manager protocol
    # ------------------------------------------------------------------
    def __enter__(self) -> "PriorityUpdate[K, P]":
        if self._released or self._active:
            raise RuntimeError("priority handles are single-use")
        queue = self._queue
        assert queue._live_update is None, "another priority update is still open"
        current = queue._priorities.get_mut(self._key)
        if current is None:
            raise KeyError(f"Index {self._key!r} has no stored priority")
        # Shallow copy so in-place mutation of a mutable priority is visible.
        self._old = copy.copy(current)
        queue._live_update = self
        self._active = True
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        queue = self._queue
        self._active = False
        self._released = True
        queue._live_update = None
        new = queue._priorities.get(self._key)
        position = queue._positions.get(self._key)
        if position is not None:
            self._repair(position, new, self._old)
        if exc_type is None:
            self._check_direction(new, self._old)

    def _check_direction(self, new: P, old: P) -> None:
        pass

    def _repair(self, position: int, new: P, old: P) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        state = "open" if self._active else ("released" if self._released else "pending")
        return f"<{type(self).__name__} {self._key!r} {state}>"


class PriorityIncrease(PriorityUpdate[K, P]):
    """Handle returned by ``update_up``: the priority may only increase."""

    __slots__ = ()

    def _check_direction(self, new: P, old: P) -> None:
        assert not new < old, f"update_up decreased {self._key!r}: {old!r} -> {new!r}"

    def _repair(self, position: int, new: P, old: P) -> None:
        self._queue._down_heap(position)


class PriorityDecrease(PriorityUpdate[K, P]):
    """Handle returned by ``update_down``: the priority may only decrease."""

    __slots__ = ()

    def _check_direction(self, new: P, old: P) -> None:
        assert not old < new, f"update_down increased {self._key!r}: {old!r} -> {new!r}"

    def _repair(self, position: int, new: P, old: P) -> None:
        self._queue._up_heap(position)


class PriorityChange(PriorityUpdate[K, P]):
    """Handle returned by ``update_dyn``: compares on release and moves either way."""

    __slots__ = ()

    def _repair(self, position: int, new: P, old: P) -> None:
        if old < new:
            self._queue._down_heap(position)
        elif new < old:
            self._queue._up_heap(position)
