# flightlogger/session/data_models.py
"""
The persisted projection of an in-progress flight.

Schema history:
  1 - camelCase blob without a version tag (flightStarted, flightStartTime in
      milliseconds, departureICAO, departureAirportData, callsign, aircraft,
      timestamp). Upgraded on load.
  2 - current snake_case shape with an explicit schema_version.
Records tagged with a version newer than SCHEMA_VERSION are discarded.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..airports.data_models import Airport, Resolution, UNRESOLVED_AIRPORT
from .exceptions import SessionRecordError

SCHEMA_VERSION = 2
LEGACY_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class PersistedSessionRecord:
    phase: str
    started_at: Optional[float]
    departure: Optional[Airport]
    pilot: str
    aircraft_type: str
    saved_at: float
    landed: bool = False
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'schema_version': self.schema_version,
            'phase': self.phase,
            'started_at': self.started_at,
            'departure': self.departure.to_dict() if self.departure else None,
            'pilot': self.pilot,
            'aircraft_type': self.aircraft_type,
            'landed': self.landed,
            'saved_at': self.saved_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedSessionRecord":
        """Decodes any known schema version, raising SessionRecordError otherwise."""
        if not isinstance(data, dict):
            raise SessionRecordError(f"Expected an object, got {type(data).__name__}")

        version = data.get('schema_version')
        if version is None and 'flightStarted' in data:
            try:
                data = upgrade_legacy_record(data)
            except (TypeError, ValueError) as e:
                raise SessionRecordError(f"Malformed legacy session record: {e}", schema_version=LEGACY_SCHEMA_VERSION) from e
            version = SCHEMA_VERSION
        if version != SCHEMA_VERSION:
            raise SessionRecordError("Unsupported session schema", schema_version=version)

        try:
            departure = data.get('departure')
            started_at = data.get('started_at')
            return cls(
                phase=str(data['phase']),
                started_at=None if started_at is None else float(started_at),
                departure=Airport.from_dict(departure) if departure else None,
                pilot=str(data.get('pilot') or ''),
                aircraft_type=str(data.get('aircraft_type') or ''),
                saved_at=float(data['saved_at']),
                landed=bool(data.get('landed', False)),
                schema_version=SCHEMA_VERSION,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SessionRecordError(f"Malformed session record: {e}", schema_version=version) from e


def upgrade_legacy_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """Maps a version-1 record onto the current schema (milliseconds become seconds)."""
    start_ms = data.get('flightStartTime')
    saved_ms = data.get('timestamp')
    airport_data = data.get('departureAirportData') or {}
    if not isinstance(airport_data, dict):
        raise SessionRecordError("departureAirportData is not an object", schema_version=LEGACY_SCHEMA_VERSION)
    icao = data.get('departureICAO') or airport_data.get('icao')

    departure = None
    if icao and icao != UNRESOLVED_AIRPORT.icao:
        departure = {
            'icao': icao,
            'lat': airport_data.get('lat'),
            'lon': airport_data.get('lon'),
            'timezone': airport_data.get('tz'),
            'resolution': Resolution.INDEXED.value if airport_data.get('lat') is not None else Resolution.MANUAL.value,
        }
    elif icao:
        departure = UNRESOLVED_AIRPORT.to_dict()

    return {
        'schema_version': SCHEMA_VERSION,
        'phase': 'AIRBORNE' if data.get('flightStarted') else 'IDLE',
        'started_at': None if start_ms is None else float(start_ms) / 1000.0,
        'departure': departure,
        'pilot': data.get('callsign') or '',
        'aircraft_type': data.get('aircraft') or '',
        'landed': bool(data.get('firstGroundContact', False)),
        'saved_at': float(saved_ms) / 1000.0 if saved_ms is not None else 0.0,
    }
