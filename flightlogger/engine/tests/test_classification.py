#!/usr/bin/env python3
# flightlogger/engine/tests/test_classification.py

import sys
import random
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from flightlogger.engine.classification import (
    altitude_agl_ft, is_takeoff, classify_landing, g_force, duration_minutes
)
from flightlogger.engine.config import EngineConfig
from flightlogger.engine.data_models import LandingQuality, TelemetrySample


def sample(altitude_m=0.0, terrain_m=0.0, on_ground=False):
    return TelemetrySample(
        position=(0.0, 0.0), altitude_m=altitude_m, on_ground=on_ground,
        vertical_speed_fpm=0.0, ground_speed_kt=0.0, true_airspeed_kt=0.0,
        vertical_accel_raw=9.80665, terrain_altitude_m=terrain_m,
    )


class TestLandingQuality(unittest.TestCase):
    def test_scenarios(self):
        self.assertEqual(classify_landing(-40), LandingQuality.BUTTER)
        self.assertEqual(classify_landing(-300), LandingQuality.HARD)
        self.assertEqual(classify_landing(-1200), LandingQuality.CRASH)

    def test_boundaries(self):
        self.assertEqual(classify_landing(-59.9), LandingQuality.BUTTER)
        self.assertEqual(classify_landing(-60), LandingQuality.HARD)
        self.assertEqual(classify_landing(-799.9), LandingQuality.HARD)
        self.assertEqual(classify_landing(-800), LandingQuality.CRASH)
        self.assertEqual(classify_landing(150), LandingQuality.BUTTER)

    def test_partition_is_total(self):
        rng = random.Random(7)
        for _ in range(1000):
            vs = rng.uniform(-5000, 1000)
            quality = classify_landing(vs)
            expected = [
                vs > -60,
                -800 < vs <= -60,
                vs <= -800,
            ]
            self.assertEqual(sum(expected), 1)
            self.assertEqual(quality, [LandingQuality.BUTTER, LandingQuality.HARD, LandingQuality.CRASH][expected.index(True)])

    def test_configured_thresholds(self):
        config = EngineConfig(butter_fpm=-100, crash_fpm=-600)
        self.assertEqual(classify_landing(-80, config), LandingQuality.BUTTER)
        self.assertEqual(classify_landing(-700, config), LandingQuality.CRASH)

    def test_non_finite_rejected(self):
        with self.assertRaises(ValueError):
            classify_landing(float('nan'))

    def test_inverted_thresholds_rejected(self):
        with self.assertRaises(ValueError):
            EngineConfig(butter_fpm=-900, crash_fpm=-800)


class TestTakeoffRule(unittest.TestCase):
    def test_agl(self):
        self.assertAlmostEqual(altitude_agl_ft(sample(altitude_m=130.0, terrain_m=100.0)), 98.4252)

    def test_requires_height_above_terrain(self):
        config = EngineConfig()
        self.assertFalse(is_takeoff(sample(altitude_m=130.0, terrain_m=100.0), config))
        self.assertTrue(is_takeoff(sample(altitude_m=131.0, terrain_m=100.0), config))

    def test_requires_no_ground_contact(self):
        self.assertFalse(is_takeoff(sample(altitude_m=500.0, on_ground=True), EngineConfig()))


class TestDerivedValues(unittest.TestCase):
    def test_g_force(self):
        self.assertAlmostEqual(g_force(9.80665), 1.0)
        self.assertAlmostEqual(g_force(19.6133), 2.0)

    def test_duration_rounds_half_up(self):
        self.assertEqual(duration_minutes(0, 29), 0)
        self.assertEqual(duration_minutes(0, 30), 1)
        self.assertEqual(duration_minutes(0, 90), 2)
        self.assertEqual(duration_minutes(0, 150), 3)
        self.assertEqual(duration_minutes(1000, 1000 + 3600), 60)


if __name__ == '__main__':
    unittest.main()
