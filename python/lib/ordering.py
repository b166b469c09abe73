#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ordering.py
-----------

``IndexedPriorityQueue`` always pops the *smallest* priority.  Wrap
priorities in ``Reverse`` to get largest-first behaviour:

>>> Reverse(3) < Reverse(1)
True
>>> max([Reverse(2), Reverse(5)]).value
2
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@total_ordering
class Reverse(Generic[T]):
    """Order-inverting wrapper around *value*."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Reverse({self.value!r})"
