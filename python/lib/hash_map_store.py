#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
hash_map_store.py
-----------------

Plain dict-backed store.  Absence is always reported faithfully, which makes
it the usual position store and the priority store of choice when "missing"
must not be confused with any real priority.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, Mapping, Optional, TypeVar

from index_store import IndexStore

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HashMapStore(IndexStore[K, V]):
    """Dict wrapper implementing ``IndexStore``; ``capacity`` is a hint only."""

    __slots__ = ("_map", "capacity")

    def __init__(self, initial: Optional[Mapping[K, V]] = None, capacity: int = 0) -> None:
        self._map: Dict[K, V] = dict(initial) if initial is not None else {}
        self.capacity = capacity

    def get(self, key: K) -> Optional[V]:
        return self._map.get(key)

    def get_mut(self, key: K) -> Optional[V]:
        return self._map.get(key)

    def insert(self, key: K, value: V) -> Optional[V]:
        previous = self._map.get(key)
        self._map[key] = value
        return previous

    def remove(self, key: K) -> Optional[V]:
        return self._map.pop(key, None)

    def clear(self) -> None:
        self._map.clear()

    def values(self) -> Iterator[V]:
        return iter(self._map.values())

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"HashMapStore({self._map!r})"
