#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_stores.py
--------------
Tests for the ``IndexStore`` implementations and the ``Reverse`` wrapper.

The tests cover:

* array stores: offset arithmetic, capacity, domain assertions, copy-out
  removal, presence toggling and clearing
* default-valued map: implicit defaults, materialization through ``get_mut``
* hash map: faithful absence reporting
* the derived ``contains`` / ``index`` helpers
* ``Reverse`` ordering
"""

import unittest

from array_store import ArrayPositionStore, ArrayPriorityStore
from default_map_store import DefaultMapStore
from hash_map_store import HashMapStore
from index_store import IndexStore
from ordering import Reverse


class TestArrayStores(unittest.TestCase):

    def test_priority_store_round_trip_with_offset(self):
        store = ArrayPriorityStore(4, 0, offset=1)
        self.assertEqual(store.capacity, 4)
        self.assertEqual(store.offset, 1)
        for key in range(1, 5):
            self.assertEqual(store.insert(key, key * 10), 0)
        for key in range(1, 5):
            self.assertEqual(store.get(key), key * 10)
            self.assertTrue(store.contains(key))

    def test_priority_store_remove_keeps_value(self):
        store = ArrayPriorityStore(2, [0])
        live = store.get_mut(1)
        live.append(1)
        removed = store.remove(1)
        self.assertEqual(removed, [0, 1])
        self.assertIsNot(removed, store.get(1))
        self.assertEqual(store.get(1), [0, 1])

    def test_priority_store_fill_not_shared(self):
        store = ArrayPriorityStore(2, [])
        store.get_mut(0).append("x")
        self.assertEqual(store.get(1), [])

    def test_priority_store_clear_is_noop(self):
        store = ArrayPriorityStore.from_values([3, 4], offset=5)
        store.clear()
        self.assertEqual(store.get(5), 3)
        self.assertEqual(store.get(6), 4)
        self.assertEqual(len(store), 2)

    def test_position_store_toggles_presence(self):
        store = ArrayPositionStore(4, offset=1)
        for key in range(1, 5):
            self.assertIsNone(store.get(key))
            self.assertIsNone(store.insert(key, key - 1))
        self.assertEqual(store.insert(1, 0), 0)
        # position 0 is a real position, not absence
        self.assertTrue(store.contains(1))
        self.assertEqual(store.remove(1), 0)
        self.assertIsNone(store.remove(1))
        self.assertFalse(store.contains(1))
        self.assertEqual(list(store), [2, 3, 4])

        store.clear()
        for key in range(1, 5):
            self.assertNotIn(key, store)

    @unittest.skipUnless(__debug__, "assertions are stripped under -O")
    def test_keys_outside_domain_fail_assertion(self):
        priorities = ArrayPriorityStore(4, 0, offset=1)
        positions = ArrayPositionStore(4, offset=1)
        for store in (priorities, positions):
            for key in (0, 5):
                with self.assertRaises(AssertionError):
                    store.get(key)
                with self.assertRaises(AssertionError):
                    store.insert(key, 1)
                with self.assertRaises(AssertionError):
                    store.remove(key)

    def test_negative_capacity_rejected(self):
        with self.assertRaises(ValueError):
            ArrayPriorityStore(-1, 0)
        with self.assertRaises(ValueError):
            ArrayPositionStore(-1)


class TestDefaultMapStore(unittest.TestCase):

    def test_get_reports_default_without_storing(self):
        store = DefaultMapStore(float("inf"))
        self.assertEqual(store.get("a"), float("inf"))
        self.assertTrue(store.contains("a"))
        self.assertEqual(len(store), 0)

    def test_get_mut_materializes_copy_of_default(self):
        store = DefaultMapStore([])
        store.get_mut("a").append(1)
        self.assertEqual(store.get("a"), [1])
        self.assertEqual(store.get("b"), [])
        self.assertEqual(store.default, [])
        self.assertEqual(list(store), ["a"])

    def test_insert_and_remove_report_absence(self):
        store = DefaultMapStore(0, initial={"a": 3})
        self.assertEqual(store.insert("a", 4), 3)
        self.assertIsNone(store.insert("b", 1))
        self.assertEqual(store.remove("a"), 4)
        self.assertIsNone(store.remove("a"))
        self.assertEqual(store.get("a"), 0)
        store.clear()
        self.assertEqual(len(store), 0)

    def test_none_default_rejected(self):
        with self.assertRaises(ValueError):
            DefaultMapStore(None)


class TestHashMapStore(unittest.TestCase):

    def test_absence_is_reported(self):
        store = HashMapStore()
        self.assertIsNone(store.get("a"))
        self.assertIsNone(store.get_mut("a"))
        self.assertIsNone(store.remove("a"))
        self.assertFalse(store.contains("a"))
        with self.assertRaises(KeyError):
            store.index("a")

    def test_crud_and_views(self):
        store = HashMapStore({"a": 1}, capacity=8)
        self.assertEqual(store.capacity, 8)
        self.assertEqual(store.insert("a", 2), 1)
        store.insert("b", 3)
        self.assertEqual(store.index("a"), 2)
        self.assertEqual(sorted(store), ["a", "b"])
        self.assertEqual(sorted(store.values()), [2, 3])
        self.assertEqual(len(store), 2)
        store.clear()
        self.assertEqual(len(store), 0)

    def test_is_an_index_store(self):
        for store in (
            HashMapStore(),
            DefaultMapStore(0),
            ArrayPriorityStore(1, 0),
            ArrayPositionStore(1),
        ):
            self.assertIsInstance(store, IndexStore)

    def test_contract_is_abstract(self):
        with self.assertRaises(TypeError):
            IndexStore()


class TestReverse(unittest.TestCase):

    def test_inverts_order(self):
        self.assertLess(Reverse(3), Reverse(1))
        self.assertGreater(Reverse(1), Reverse(3))
        self.assertLessEqual(Reverse(2), Reverse(2))
        self.assertEqual(Reverse(2), Reverse(2))
        self.assertEqual(sorted([Reverse(1), Reverse(3), Reverse(2)]),
                         [Reverse(3), Reverse(2), Reverse(1)])
        self.assertEqual(hash(Reverse(5)), hash(5))
        self.assertEqual(repr(Reverse(0.5)), "Reverse(0.5)")


if __name__ == "__main__":
    unittest.main(verbosity=2)
