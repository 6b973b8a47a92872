# flightlogger/engine/config.py

from dataclasses import dataclass


class FlightLoggerConstants:
    """Physical constants and defaults shared by the engine."""

    FT_PER_M = 3.28084
    STANDARD_GRAVITY = 9.80665  # m/s^2
    EARTH_RADIUS_KM = 6371.0

    TAKEOFF_AGL_FT = 100.0
    LANDING_DEBOUNCE_S = 1.0
    BUTTER_FPM = -60.0
    CRASH_FPM = -800.0
    GEOFENCE_KM = 30.0
    POLL_INTERVAL_S = 1.0

    DEFAULT_PILOT = "Unknown"
    DEFAULT_AIRCRAFT = "Unknown"


@dataclass
class EngineConfig:
    """Tunable thresholds for the flight phase engine."""
    takeoff_agl_ft: float = FlightLoggerConstants.TAKEOFF_AGL_FT
    debounce_s: float = FlightLoggerConstants.LANDING_DEBOUNCE_S
    butter_fpm: float = FlightLoggerConstants.BUTTER_FPM
    crash_fpm: float = FlightLoggerConstants.CRASH_FPM
    geofence_km: float = FlightLoggerConstants.GEOFENCE_KM
    earth_radius_km: float = FlightLoggerConstants.EARTH_RADIUS_KM
    poll_interval_s: float = FlightLoggerConstants.POLL_INTERVAL_S
    ft_per_m: float = FlightLoggerConstants.FT_PER_M
    standard_gravity: float = FlightLoggerConstants.STANDARD_GRAVITY

    def __post_init__(self):
        if self.crash_fpm >= self.butter_fpm:
            raise ValueError(f"crash_fpm ({self.crash_fpm}) must be below butter_fpm ({self.butter_fpm})")
        if self.poll_interval_s <= 0:
            raise ValueError("poll_interval_s must be positive")
