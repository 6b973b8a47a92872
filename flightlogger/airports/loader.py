# flightlogger/airports/loader.py
"""
Loads the airport reference table: a JSON object mapping ICAO codes to
{"lat": .., "lon": .., "tz": ..}. The table is fetched over HTTP through a
cached, retrying session or read from a local file. Any failure yields an
empty list so the logger still starts; every query then comes back
unresolved.
"""
import json
import logging
import math
from typing import Any, Dict, List, Optional

import requests
import requests_cache
from retry_requests import retry

from .data_models import Airport
from .exceptions import AirportDataError, MalformedAirportRecord

logger = logging.getLogger(__name__)


class AirportLoader:
    """Fetches and parses the ICAO -> coordinates/time zone mapping."""
    DEFAULT_URL = "https://raw.githubusercontent.com/seabus0316/GeoFS-METAR-system/refs/heads/main/airports_with_tz.json"
    CACHE_NAME = "airport_db_cache"
    CACHE_EXPIRY_SECONDS = 86400  # 24 hours

    def __init__(self, url: str = DEFAULT_URL, timeout: int = 30, cache_enabled: bool = True,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        if session is not None:
            self.session = session
        elif cache_enabled:
            cache_session = requests_cache.CachedSession(self.CACHE_NAME, expire_after=self.CACHE_EXPIRY_SECONDS)
            self.session = retry(cache_session, retries=3, backoff_factor=0.2)
        else:
            self.session = retry(requests.Session(), retries=3, backoff_factor=0.2)

    def load(self) -> List[Airport]:
        """Downloads and parses the table. Returns [] on any failure."""
        try:
            return parse_airport_records(self.fetch())
        except AirportDataError as e:
            logger.error(f"Airport DB load failed: {e}")
            return []

    def fetch(self) -> Dict[str, Any]:
        logger.info(f"Fetching airport database from {self.url}")
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise AirportDataError(f"Network error fetching airport database: {e}") from e
        except ValueError as e:
            raise AirportDataError(f"Airport database is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise AirportDataError(f"Expected a JSON object, got {type(data).__name__}")
        return data


def load_airport_file(path: str) -> List[Airport]:
    """Reads the same mapping from a local JSON file. Returns [] on failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.error(f"Could not read airport file {path}: {e}")
        return []
    if not isinstance(data, dict):
        logger.error(f"Airport file {path} does not hold a JSON object.")
        return []
    return parse_airport_records(data)


def parse_airport_records(data: Dict[str, Any]) -> List[Airport]:
    """Turns the raw mapping into Airport objects, skipping malformed entries."""
    airports = []
    skipped = 0
    for icao, info in data.items():
        try:
            airports.append(_parse_record(icao, info))
        except MalformedAirportRecord as e:
            logger.debug(str(e))
            skipped += 1
    if skipped:
        logger.warning(f"Skipped {skipped} malformed airport record(s).")
    logger.info(f"Loaded {len(airports)} airports")
    return airports


def _parse_record(icao: str, info: Any) -> Airport:
    if not isinstance(info, dict):
        raise MalformedAirportRecord(icao)
    try:
        lat = float(info['lat'])
        lon = float(info['lon'])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedAirportRecord(icao) from e
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise MalformedAirportRecord(icao)
    tz = info.get('tz') or info.get('timezone')
    return Airport(icao=str(icao).upper(), lat=lat, lon=lon, timezone=str(tz) if tz else None)
