# flightlogger/airports/geo_index.py
"""
Nearest-airport lookup by great-circle distance.

The index is a flat table scanned in full on every query; airport databases
are a few tens of thousands of rows, which numpy measures in well under a
millisecond. Ties resolve to the earliest loaded airport.
"""
import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .data_models import Airport, Resolution, UNRESOLVED_AIRPORT
from .utils.coordinates import haversine_km, EARTH_RADIUS_KM

logger = logging.getLogger(__name__)

DEFAULT_GEOFENCE_KM = 30.0


class GeoIndex:
    """Read-only set of airports answering nearest-neighbour queries."""

    def __init__(self, geofence_km: float = DEFAULT_GEOFENCE_KM, radius_km: float = EARTH_RADIUS_KM):
        self.geofence_km = geofence_km
        self.radius_km = radius_km
        self._airports: List[Airport] = []
        self._by_icao = {}
        self._lats = np.empty(0)
        self._lons = np.empty(0)

    def __len__(self) -> int:
        return len(self._airports)

    def load(self, airports: Iterable[Airport]) -> None:
        """Replaces the loaded set. Airports without finite coordinates are dropped."""
        kept = []
        dropped = 0
        for airport in airports:
            if not _has_coordinates(airport):
                dropped += 1
                continue
            kept.append(airport)

        self._airports = kept
        self._by_icao = {}
        for airport in kept:
            self._by_icao.setdefault(airport.icao.upper(), airport)
        self._lats = np.array([a.lat for a in kept], dtype=float)
        self._lons = np.array([a.lon for a in kept], dtype=float)

        if dropped:
            logger.warning(f"Dropped {dropped} airport(s) without usable coordinates.")
        logger.info(f"GeoIndex loaded {len(kept)} airports (geofence {self.geofence_km} km).")

    def lookup(self, icao: str) -> Optional[Airport]:
        """Returns the loaded airport with this ICAO code, if any."""
        return self._by_icao.get(icao.strip().upper())

    def nearest_with_distance(self, lat: float, lon: float) -> Tuple[Airport, Optional[float]]:
        """Nearest airport and its distance in km, or (UNRESOLVED_AIRPORT, distance-or-None)."""
        if not self._airports:
            return UNRESOLVED_AIRPORT, None

        distances = haversine_km(lat, lon, self._lats, self._lons, self.radius_km)
        if np.all(np.isnan(distances)):
            return UNRESOLVED_AIRPORT, None

        # nanargmin returns the first index of the minimum
        best = int(np.nanargmin(distances))
        min_dist = float(distances[best])
        if min_dist > self.geofence_km:
            return UNRESOLVED_AIRPORT, min_dist
        return self._airports[best], min_dist

    def nearest(self, lat: float, lon: float) -> Airport:
        """Nearest airport within the geofence, else UNRESOLVED_AIRPORT."""
        airport, _ = self.nearest_with_distance(lat, lon)
        return airport


def _has_coordinates(airport: Airport) -> bool:
    if airport.resolution is not Resolution.INDEXED:
        return False
    try:
        return math.isfinite(float(airport.lat)) and math.isfinite(float(airport.lon))
    except (TypeError, ValueError):
        return False
