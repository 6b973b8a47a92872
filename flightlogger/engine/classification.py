# flightlogger/engine/classification.py
"""
Threshold rules applied to a single telemetry sample.
"""
import math

from .config import EngineConfig, FlightLoggerConstants
from .data_models import LandingQuality, TelemetrySample


def altitude_agl_ft(sample: TelemetrySample, ft_per_m: float = FlightLoggerConstants.FT_PER_M) -> float:
    """Height above the terrain under the aircraft, in feet."""
    return (sample.altitude_m - sample.terrain_altitude_m) * ft_per_m


def is_takeoff(sample: TelemetrySample, config: EngineConfig) -> bool:
    return not sample.on_ground and altitude_agl_ft(sample, config.ft_per_m) > config.takeoff_agl_ft


def classify_landing(vertical_speed_fpm: float, config: EngineConfig = None) -> LandingQuality:
    """
    Partitions touchdown vertical speed:
      vs > butter            -> BUTTER
      crash < vs <= butter   -> HARD
      vs <= crash            -> CRASH
    """
    config = config or EngineConfig()
    if not math.isfinite(vertical_speed_fpm):
        raise ValueError(f"Vertical speed must be finite, got {vertical_speed_fpm}")
    if vertical_speed_fpm > config.butter_fpm:
        return LandingQuality.BUTTER
    if vertical_speed_fpm > config.crash_fpm:
        return LandingQuality.HARD
    return LandingQuality.CRASH


def g_force(vertical_accel_raw: float, standard_gravity: float = FlightLoggerConstants.STANDARD_GRAVITY) -> float:
    return vertical_accel_raw / standard_gravity


def duration_minutes(started_at: float, grounded_at: float) -> int:
    """Whole minutes between takeoff and landing, halves rounded up."""
    return int(math.floor((grounded_at - started_at) / 60.0 + 0.5))
