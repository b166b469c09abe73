#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
default_map_store.py
--------------------

Sparse priority store where every unseen key already "has" a default.

Handy when "not seen yet" and "worst possible priority" mean the same thing,
e.g. an infinite tentative distance in a shortest-path search:

>>> import math
>>> dist = DefaultMapStore(math.inf)
>>> dist.get("a")
inf
>>> len(dist)          # get() never stores anything
0
>>> dist.get_mut("a")  # get_mut() does
inf
>>> len(dist)
1

The price is that "explicitly set to the default" and "never touched" look
the same.  Ask the queue's position store when that difference matters.
"""

from __future__ import annotations

import copy
from typing import Dict, Hashable, Iterator, Mapping, Optional, TypeVar

from index_store import IndexStore

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class DefaultMapStore(IndexStore[K, V]):
    """
    Dict-backed store that answers ``default`` for absent keys.

    Parameters
    ----------
    default : V
        Value reported for keys that were never stored.  Must not be ``None``.
    initial : mapping, optional
        Entries to start with.
    capacity : int, default ``0``
        Pre-allocation hint; dicts size themselves, so it is only recorded.
    """

    __slots__ = ("_map", "_default", "capacity")

    def __init__(
        self,
        default: V,
        initial: Optional[Mapping[K, V]] = None,
        capacity: int = 0,
    ) -> None:
        if default is None:
            raise ValueError("DefaultMapStore needs a non-None default value")
        self._map: Dict[K, V] = dict(initial) if initial is not None else {}
        self._default = default
        self.capacity = capacity

    @property
    def default(self) -> V:
        return self._default

    def get(self, key: K) -> Optional[V]:
        return self._map.get(key, self._default)

    def get_mut(self, key: K) -> Optional[V]:
        try:
            return self._map[key]
        except KeyError:
            value = self._map[key] = copy.copy(self._default)
            return value

    def insert(self, key: K, value: V) -> Optional[V]:
        previous = self._map.get(key)
        self._map[key] = value
        return previous

    def remove(self, key: K) -> Optional[V]:
        return self._map.pop(key, None)

    def clear(self) -> None:
        self._map.clear()

    def __len__(self) -> int:
        """Number of keys that were actually stored."""
        return len(self._map)

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"DefaultMapStore(default={self._default!r}, {self._map!r})"
