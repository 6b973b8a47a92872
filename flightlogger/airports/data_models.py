# flightlogger/airports/data_models.py
"""
Airport records and the sentinel airports used when no geographic match
exists. A sentinel is an Airport whose `resolution` is not INDEXED, so
"unresolved" stays distinguishable from a resolved airport with no time zone.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any


class Resolution(str, Enum):
    INDEXED = "INDEXED"        # nearest match from the airport database
    MANUAL = "MANUAL"          # ICAO supplied by the manual resolution hook
    UNRESOLVED = "UNRESOLVED"  # nothing within the geofence, no manual answer
    CRASH = "CRASH"            # arrival replaced by the crash marker


@dataclass(frozen=True)
class Airport:
    """An airport identified by its ICAO code."""
    icao: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    timezone: Optional[str] = None
    resolution: Resolution = Resolution.INDEXED

    @property
    def is_resolved(self) -> bool:
        return self.resolution in (Resolution.INDEXED, Resolution.MANUAL)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['resolution'] = self.resolution.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Airport":
        return cls(
            icao=str(data['icao']),
            lat=_optional_float(data.get('lat')),
            lon=_optional_float(data.get('lon')),
            timezone=data.get('timezone') or data.get('tz'),
            resolution=Resolution(data.get('resolution', Resolution.INDEXED.value)),
        )


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)


UNRESOLVED_AIRPORT = Airport(icao="UNKNOWN", resolution=Resolution.UNRESOLVED)
CRASH_SITE = Airport(icao="Crash", resolution=Resolution.CRASH)
