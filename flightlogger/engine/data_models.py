# flightlogger/engine/data_models.py
"""
Data structures flowing through the flight phase engine: the per-tick
telemetry sample, the mutable session owned by the engine and the immutable
report it emits.
"""
from dataclasses import dataclass, asdict
from enum import IntEnum, Enum
from typing import Optional, Tuple, Dict, Any

from ..airports.data_models import Airport
from .exceptions import InvalidPhaseTransition


class FlightPhase(IntEnum):
    IDLE = 0; AIRBORNE = 1; REPORTED = 2


class LandingQuality(str, Enum):
    BUTTER = "BUTTER"
    HARD = "HARD"
    CRASH = "CRASH"


@dataclass(frozen=True)
class TelemetrySample:
    """One snapshot of simulator state."""
    position: Tuple[float, float]       # (lat, lon) in degrees
    altitude_m: float
    on_ground: bool
    vertical_speed_fpm: float
    ground_speed_kt: float
    true_airspeed_kt: Optional[float]
    vertical_accel_raw: float           # m/s^2, +9.81 at rest
    terrain_altitude_m: float = 0.0

    @property
    def lat(self) -> float:
        return self.position[0]

    @property
    def lon(self) -> float:
        return self.position[1]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['position'] = list(self.position)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TelemetrySample":
        tas = data.get('true_airspeed_kt')
        return cls(
            position=(float(data['position'][0]), float(data['position'][1])),
            altitude_m=float(data['altitude_m']),
            on_ground=bool(data['on_ground']),
            vertical_speed_fpm=float(data['vertical_speed_fpm']),
            ground_speed_kt=float(data['ground_speed_kt']),
            true_airspeed_kt=None if tas is None else float(tas),
            vertical_accel_raw=float(data['vertical_accel_raw']),
            terrain_altitude_m=float(data.get('terrain_altitude_m', 0.0)),
        )


@dataclass
class FlightSession:
    """
    Mutable state of one flight. The phase only moves forward and the
    grounded timestamp is written once.
    """
    pilot: str
    aircraft_type: str
    phase: FlightPhase = FlightPhase.IDLE
    started_at: Optional[float] = None
    departure: Optional[Airport] = None
    arrival: Optional[Airport] = None
    grounded_at: Optional[float] = None

    def advance(self, phase: FlightPhase) -> None:
        if phase <= self.phase:
            raise InvalidPhaseTransition(self.phase.name, phase.name)
        self.phase = phase

    def mark_grounded(self, timestamp: float) -> None:
        if self.grounded_at is not None:
            raise InvalidPhaseTransition(self.phase.name, "GROUNDED", message="Landing already recorded")
        if self.started_at is not None and timestamp < self.started_at:
            raise ValueError(f"Landing time {timestamp} precedes takeoff {self.started_at}")
        self.grounded_at = timestamp


@dataclass(frozen=True)
class FlightReport:
    """The terminal artifact of a completed flight."""
    pilot: str
    aircraft_type: str
    departure_icao: str
    arrival_icao: str
    takeoff_at: float
    landing_at: float
    duration_minutes: int
    vertical_speed_fpm: float
    g_force: float
    ground_speed_kt: float
    true_airspeed_kt: Optional[float]
    landing_quality: LandingQuality
    departure_timezone: Optional[str] = None
    arrival_timezone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['landing_quality'] = self.landing_quality.value
        return data
