#!/usr/bin/env python3
"""
Repository Unit Tests

Tests for the in-memory vehicle store.
"""

import unittest

from unit.helpers import make_vehicle

from alkeparking.domain.models import VehicleCategory
from alkeparking.infrastructure.repositories import InMemoryVehicleRepository


class TestInMemoryVehicleRepository(unittest.TestCase):
    """Unit tests for InMemoryVehicleRepository"""

    def setUp(self):
        self.repository = InMemoryVehicleRepository()

    def test_add_and_get(self):
        vehicle = make_vehicle("CC333CC", VehicleCategory.MINIBUS)
        self.repository.add(vehicle)

        self.assertIs(self.repository.get("CC333CC"), vehicle)
        self.assertTrue(self.repository.exists("CC333CC"))
        self.assertEqual(self.repository.count(), 1)

    def test_lookup_is_exact(self):
        self.repository.add(make_vehicle("CC333CC"))
        self.assertIsNone(self.repository.get("cc333cc"))
        self.assertFalse(self.repository.exists("CC333CC "))

    def test_add_duplicate_raises(self):
        self.repository.add(make_vehicle("CC333CC"))
        with self.assertRaises(KeyError):
            self.repository.add(make_vehicle("CC333CC", VehicleCategory.BUS))

    def test_delete(self):
        self.repository.add(make_vehicle("CC333CC"))
        self.assertTrue(self.repository.delete("CC333CC"))
        self.assertFalse(self.repository.delete("CC333CC"))
        self.assertEqual(self.repository.count(), 0)

    def test_list_plates_is_snapshot(self):
        self.repository.add(make_vehicle("A1"))
        self.repository.add(make_vehicle("B2"))

        plates = self.repository.list_plates()
        plates.append("C3")

        self.assertCountEqual(self.repository.list_plates(), ["A1", "B2"])
        self.assertCountEqual([v.plate for v in self.repository.get_all()], ["A1", "B2"])


if __name__ == '__main__':
    unittest.main()
