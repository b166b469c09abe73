#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
array_store.py
--------------

Dense, fixed-capacity stores for small integer key domains.

Keys live in ``range(offset, offset + capacity)`` and map straight onto a
list allocated once at construction.  Nothing is ever reallocated, so the
capacity has to cover every key the queue will see.

* ``ArrayPriorityStore`` - every slot always holds a priority; ``remove``
  hands back a copy and keeps the value around for a later ``restore``.
* ``ArrayPositionStore`` - every slot holds a heap position or ``None``.

>>> positions = ArrayPositionStore(4, offset=1)
>>> positions.insert(1, 0) is None
True
>>> positions.remove(1)
0
>>> positions.get(1) is None
True
"""

from __future__ import annotations

import copy
from typing import Iterable, Iterator, List, Optional, TypeVar

from index_store import IndexStore

P = TypeVar("P")


class _ArrayStore:
    """Offset arithmetic and domain checks shared by both array stores."""

    __slots__ = ()

    _slots: list
    _offset: int

    def _slot(self, key: int) -> int:
        slot = key - self._offset
        assert 0 <= slot < len(self._slots), (
            f"key {key!r} outside array store domain "
            f"[{self._offset}, {self._offset + len(self._slots)})"
        )
        return slot

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)


class ArrayPriorityStore(_ArrayStore, IndexStore[int, P]):
    """
    Priority store over a fixed list; every key in the domain is present.

    Parameters
    ----------
    capacity : int
        Number of keys in the domain.
    fill : P
        Initial priority of every key.  It is copied into each slot so a
        mutable fill is never shared between keys.
    offset : int, default ``0``
        Smallest key of the domain.
    """

    __slots__ = ("_slots", "_offset")

    def __init__(self, capacity: int, fill: P, offset: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._slots: List[P] = [copy.copy(fill) for _ in range(capacity)]
        self._offset = offset

    @classmethod
    def from_values(cls, values: Iterable[P], offset: int = 0) -> "ArrayPriorityStore[P]":
        """Build a store whose key ``offset + i`` starts with ``values[i]``."""
        store = cls.__new__(cls)
        store._slots = list(values)
        store._offset = offset
        return store

    def get(self, key: int) -> Optional[P]:
        return self._slots[self._slot(key)]

    def get_mut(self, key: int) -> Optional[P]:
        return self._slots[self._slot(key)]

    def insert(self, key: int, value: P) -> Optional[P]:
        slot = self._slot(key)
        previous, self._slots[slot] = self._slots[slot], value
        return previous

    def remove(self, key: int) -> Optional[P]:
        # The slot keeps its value; the caller gets an independent copy.
        return copy.copy(self._slots[self._slot(key)])

    def clear(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"ArrayPriorityStore(offset={self._offset}, {self._slots!r})"


class ArrayPositionStore(_ArrayStore, IndexStore[int, int]):
    """Position store over a fixed list; ``None`` marks a key not on the heap."""

    __slots__ = ("_slots", "_offset")

    def __init__(self, capacity: int, offset: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._slots: List[Optional[int]] = [None] * capacity
        self._offset = offset

    def get(self, key: int) -> Optional[int]:
        return self._slots[self._slot(key)]

    def get_mut(self, key: int) -> Optional[int]:
        return self._slots[self._slot(key)]

    def insert(self, key: int, value: int) -> Optional[int]:
        slot = self._slot(key)
        previous, self._slots[slot] = self._slots[slot], value
        return previous

    def remove(self, key: int) -> Optional[int]:
        slot = self._slot(key)
        previous, self._slots[slot] = self._slots[slot], None
        return previous

    def clear(self) -> None:
        self._slots[:] = [None] * len(self._slots)

    def __iter__(self) -> Iterator[int]:
        """Yield the keys that currently hold a position."""
        for slot, position in enumerate(self._slots):
            if position is not None:
                yield slot + self._offset

    def __repr__(self) -> str:
        return f"ArrayPositionStore(offset={self._offset}, {self._slots!r})"
