# flightlogger/telemetry/sources.py
"""
Telemetry sources polled by the flight phase engine. A source returns one
TelemetrySample per call, or None when the simulator has nothing to offer.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from ..constants.flightgear import FGProps
from ..engine.config import FlightLoggerConstants
from ..engine.data_models import TelemetrySample
from ..fg_interface.core import FGConnection

logger = logging.getLogger(__name__)

FT_PER_M = FlightLoggerConstants.FT_PER_M
M_PER_FT = 1.0 / FT_PER_M


class TelemetrySource(ABC):
    """Pull-based view of the simulator."""

    @abstractmethod
    def sample(self) -> Optional[TelemetrySample]:
        """Current snapshot, or None when unavailable. Must not block."""
        ...


class FlightGearTelemetrySource(TelemetrySource):
    """Reads a TelemetrySample from the FlightGear property tree over telnet."""

    PROPERTIES = (
        FGProps.POSITION.LATITUDE,
        FGProps.POSITION.LONGITUDE,
        FGProps.POSITION.ALTITUDE_FT,
        FGProps.POSITION.GROUND_ELEV_FT,
        FGProps.VELOCITIES.VERTICAL_SPEED_FPS,
        FGProps.VELOCITIES.GROUNDSPEED_KT,
        FGProps.VELOCITIES.TRUE_AIRSPEED_KT,
        FGProps.ACCELERATIONS.PILOT_Z_FPS2,
    )

    def __init__(self, fg_connection: FGConnection, reconnect: bool = True):
        """
        Args:
            fg_connection: FGConnection instance, connected or not
            reconnect: try to (re)connect when a tick finds no connection
        """
        self.fg = fg_connection
        self.reconnect = reconnect
        self._wow_paths = [FGProps.GEAR.WOW.format(index=i) for i in FGProps.GEAR.INDICES]

    def sample(self) -> Optional[TelemetrySample]:
        if not self.fg.is_connected:
            if not self.reconnect or not self.fg.connect()['success']:
                return None

        response = self.fg.get_many(self.PROPERTIES + tuple(self._wow_paths))
        if not response['success']:
            logger.debug(f"Telemetry gap: {response['message']}")
            if response['data'].get('error_type') in ('FGCommError', 'ConnectionTimeout'):
                self.fg.disconnect()
            return None

        values = response['data']['values']
        return TelemetrySample(
            position=(values[FGProps.POSITION.LATITUDE], values[FGProps.POSITION.LONGITUDE]),
            altitude_m=values[FGProps.POSITION.ALTITUDE_FT] * M_PER_FT,
            on_ground=any(values[path] > 0.5 for path in self._wow_paths),
            vertical_speed_fpm=values[FGProps.VELOCITIES.VERTICAL_SPEED_FPS] * 60.0,
            ground_speed_kt=values[FGProps.VELOCITIES.GROUNDSPEED_KT],
            true_airspeed_kt=values[FGProps.VELOCITIES.TRUE_AIRSPEED_KT],
            # FlightGear reports body z acceleration pointing down, in ft/s^2
            vertical_accel_raw=-values[FGProps.ACCELERATIONS.PILOT_Z_FPS2] * M_PER_FT,
            terrain_altitude_m=values[FGProps.POSITION.GROUND_ELEV_FT] * M_PER_FT,
        )


class ScriptedTelemetrySource(TelemetrySource):
    """Plays back a fixed sequence; None entries are telemetry gaps."""

    def __init__(self, samples: Iterable[Optional[TelemetrySample]]):
        self._samples: Iterator[Optional[TelemetrySample]] = iter(samples)
        self.exhausted = False

    def sample(self) -> Optional[TelemetrySample]:
        try:
            return next(self._samples)
        except StopIteration:
            self.exhausted = True
            return None


def load_samples_jsonl(filepath: str) -> List[Optional[TelemetrySample]]:
    """Reads one JSON sample per line; `null` lines become gaps, blank lines are skipped."""
    samples = []
    with open(filepath, 'r') as f:
        for line in f:
            if not line.strip():
                continue
            data = json.loads(line)
            samples.append(None if data is None else TelemetrySample.from_dict(data))
    return samples


def save_samples_jsonl(filepath: str, samples: Iterable[Optional[TelemetrySample]]) -> None:
    with open(filepath, 'w') as f:
        for sample in samples:
            f.write(json.dumps(None if sample is None else sample.to_dict()) + '\n')
