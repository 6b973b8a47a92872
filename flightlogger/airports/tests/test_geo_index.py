#!/usr/bin/env python3
# flightlogger/airports/tests/test_geo_index.py

import sys
import math
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from flightlogger.airports.data_models import Airport, Resolution, UNRESOLVED_AIRPORT, CRASH_SITE
from flightlogger.airports.geo_index import GeoIndex
from flightlogger.airports.utils.coordinates import haversine_km

RCSS = Airport("RCSS", 25.0694, 121.5524, "Asia/Taipei")
RCTP = Airport("RCTP", 25.0797, 121.2342, "Asia/Taipei")
RJTT = Airport("RJTT", 35.5523, 139.7798, "Asia/Tokyo")


class TestHaversine(unittest.TestCase):
    def test_zero_distance(self):
        self.assertAlmostEqual(haversine_km(25.0, 121.0, 25.0, 121.0), 0.0)

    def test_one_degree_of_latitude(self):
        self.assertAlmostEqual(haversine_km(0.0, 0.0, 1.0, 0.0), 6371 * math.pi / 180, places=6)

    def test_taoyuan_query_distances(self):
        self.assertAlmostEqual(haversine_km(25.0777, 121.2328, RCTP.lat, RCTP.lon), 0.26, delta=0.05)
        self.assertAlmostEqual(haversine_km(25.0777, 121.2328, RCSS.lat, RCSS.lon), 32.3, delta=0.5)


class TestGeoIndex(unittest.TestCase):
    def setUp(self):
        self.index = GeoIndex()
        self.index.load([RCSS, RCTP, RJTT])

    def test_resolves_taoyuan_not_songshan(self):
        self.assertEqual(self.index.nearest(25.0777, 121.2328), RCTP)

    def test_empty_index_is_unresolved(self):
        result = GeoIndex().nearest(25.0777, 121.2328)
        self.assertIs(result, UNRESOLVED_AIRPORT)
        self.assertFalse(result.is_resolved)

    def test_outside_geofence_is_unresolved(self):
        # Roughly halfway between Taipei and Tokyo
        airport, distance = self.index.nearest_with_distance(30.0, 130.0)
        self.assertIs(airport, UNRESOLVED_AIRPORT)
        self.assertGreater(distance, 30.0)

    def test_geofence_is_configurable(self):
        wide = GeoIndex(geofence_km=50.0)
        wide.load([RCSS])
        self.assertEqual(wide.nearest(25.0777, 121.2328), RCSS)

        narrow = GeoIndex(geofence_km=30.0)
        narrow.load([RCSS])
        self.assertIs(narrow.nearest(25.0777, 121.2328), UNRESOLVED_AIRPORT)

    def test_deterministic(self):
        first = self.index.nearest(25.07, 121.3)
        for _ in range(5):
            self.assertEqual(self.index.nearest(25.07, 121.3), first)

    def test_closer_airport_always_wins(self):
        query = (25.0, 121.4)
        a = Airport("AAAA", 25.01, 121.4)
        b = Airport("BBBB", 25.05, 121.4)
        c = Airport("CCCC", 40.0, 10.0)
        self.assertLess(haversine_km(*query, a.lat, a.lon), haversine_km(*query, b.lat, b.lon))
        for order in ([a, b, c], [b, a, c], [c, b, a], [b, c, a]):
            index = GeoIndex()
            index.load(order)
            self.assertEqual(index.nearest(*query), a)

    def test_tie_goes_to_first_loaded(self):
        first = Airport("FRST", 10.0, 10.0)
        second = Airport("SCND", 10.0, 10.0)
        index = GeoIndex()
        index.load([first, second])
        self.assertEqual(index.nearest(10.0, 10.05).icao, "FRST")

    def test_load_replaces_previous_set(self):
        self.index.load([RJTT])
        self.assertEqual(len(self.index), 1)
        self.assertIs(self.index.nearest(25.0777, 121.2328), UNRESOLVED_AIRPORT)

    def test_malformed_airports_are_dropped(self):
        index = GeoIndex()
        index.load([Airport("NOLA", None, 121.0), Airport("NANL", float('nan'), 121.0), RCTP, CRASH_SITE])
        self.assertEqual(len(index), 1)
        self.assertEqual(index.nearest(25.0777, 121.2328), RCTP)

    def test_lookup_by_icao(self):
        self.assertEqual(self.index.lookup(" rctp "), RCTP)
        self.assertIsNone(self.index.lookup("ZZZZ"))

    def test_unresolved_is_distinct_from_resolved_without_timezone(self):
        no_tz = Airport("XXXX", 1.0, 1.0)
        self.assertIsNone(no_tz.timezone)
        self.assertTrue(no_tz.is_resolved)
        self.assertNotEqual(no_tz.resolution, UNRESOLVED_AIRPORT.resolution)
        self.assertEqual(CRASH_SITE.resolution, Resolution.CRASH)


if __name__ == '__main__':
    unittest.main()
