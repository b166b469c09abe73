#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
index_store.py
--------------

The storage contract shared by every backing store of
``IndexedPriorityQueue``.  The queue keeps two of these: one mapping each
key to its priority and one mapping each key to its slot in the heap list.

A store only has to implement five operations (``get``, ``get_mut``,
``insert``, ``remove`` and ``clear``); ``contains`` and ``index`` are derived
from them.  Absence is reported with ``None``, so ``None`` itself can never be
stored as a value.

Writing a store for a new key domain
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
>>> class EvenKeys(IndexStore[int, int]):
...     def __init__(self): self._d = {}
...     def get(self, key): return self._d.get(key)
...     def get_mut(self, key): return self._d.get(key)
...     def insert(self, key, value):
...         assert key % 2 == 0, "odd key"
...         previous = self._d.get(key)
...         self._d[key] = value
...         return previous
...     def remove(self, key): return self._d.pop(key, None)
...     def clear(self): self._d.clear()
>>> store = EvenKeys()
>>> store.insert(2, 10) is None
True
>>> store.index(2)
10
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

K = TypeVar("K")  # key type
V = TypeVar("V")  # stored value type


class IndexStore(ABC, Generic[K, V]):
    """
    Key -> value mapping with explicit ``None``-for-absent reporting.

    Keys outside a store's domain are a caller error.  Stores check them with
    ``assert`` so the check disappears under ``python -O``.
    """

    __slots__ = ()

    @abstractmethod
    def get(self, key: K) -> Optional[V]:
        """Return the value for *key*, or ``None`` if the store has none."""

    @abstractmethod
    def get_mut(self, key: K) -> Optional[V]:
        """
        Return the live stored value for *key*, or ``None``.

        Default-valued stores materialize the default here, so the returned
        object is the one held by the store afterwards.
        """

    @abstractmethod
    def insert(self, key: K, value: V) -> Optional[V]:
        """Store *value* under *key*; return the previous value or ``None``."""

    @abstractmethod
    def remove(self, key: K) -> Optional[V]:
        """Remove *key*; return the value it held or ``None``."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry (some stores define this as a no-op)."""

    # ------------------------------------------------------------------
    #   Derived helpers
    # ------------------------------------------------------------------
    def contains(self, key: K) -> bool:
        return self.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def index(self, key: K) -> V:
        """Like ``get`` but raise ``KeyError`` when *key* is absent."""
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value
