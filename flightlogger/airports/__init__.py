"""
flightlogger.airports - airport reference data and nearest-airport lookup.
"""

from .data_models import Airport, Resolution, UNRESOLVED_AIRPORT, CRASH_SITE
from .geo_index import GeoIndex, DEFAULT_GEOFENCE_KM
from .loader import AirportLoader, load_airport_file, parse_airport_records
from .exceptions import AirportDataError, MalformedAirportRecord

__all__ = [
    "Airport",
    "Resolution",
    "UNRESOLVED_AIRPORT",
    "CRASH_SITE",
    "GeoIndex",
    "DEFAULT_GEOFENCE_KM",
    "AirportLoader",
    "load_airport_file",
    "parse_airport_records",
    "AirportDataError",
    "MalformedAirportRecord",
]
